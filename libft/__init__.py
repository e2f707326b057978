"""Character, memory, output, string, formatting and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "output", "strings", "formatting", "lines"]