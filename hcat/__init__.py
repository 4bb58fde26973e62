"""Template helper functions, dependency data views and a token-file dependency."""

__version__ = "0.1.0"