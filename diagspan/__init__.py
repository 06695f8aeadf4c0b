"""Read spans of source text with surrounding context lines for diagnostics."""

__version__ = "0.1.0"
__all__ = ["source"]