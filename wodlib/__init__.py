"""Small utilities for strings, lines, paragraphs, arithmetic, binary search, commands and async streams."""

__version__ = "0.1.0"