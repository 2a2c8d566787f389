"""ASCII character, string, byte-buffer, printf-style formatting,
line-reading and linked-list helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "output",
    "memory",
    "printf",
    "search",
    "lines",
    "transform",
    "linkedlist",
]