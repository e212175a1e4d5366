import os

# Keep test runs from writing log files next to the package
os.environ.setdefault('LOG_TO_FILE', 'false')
