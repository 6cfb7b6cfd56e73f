"""Glyph coverage sheets: every code point of a range laid out on PDF pages."""

__version__ = "0.1.0"

__all__ = ["__version__"]
