"""A printf-style formatter with character, byte-buffer, string and output helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "output", "convert", "printf"]