"""N-dimensional arrays, array operations and preprocessing helpers."""

__version__ = "0.1.0"