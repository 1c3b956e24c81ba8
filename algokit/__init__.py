"""Classic algorithm and data-structure exercises as plain Python functions."""

__version__ = "0.1.0"