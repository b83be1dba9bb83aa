"""Wedding party coordination backend."""
__version__ = "0.3.0"
