"""Daily puzzle solutions with a small toolkit for parsing their input."""

__version__ = "0.1.0"