"""Search, fact-check and topic analysis on top of a grounded generative-text service."""

__version__ = '0.1.0'
