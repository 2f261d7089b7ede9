"""Task manager API: task lifecycle, comments and profile lookup over MongoDB."""

__version__ = "1.0.0"
