"""Classic data structures, algorithms and text patterns in plain Python."""

__version__ = "0.1.0"