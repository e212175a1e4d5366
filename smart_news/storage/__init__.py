from .cache import ResponseCache

__all__ = ['ResponseCache']
