"""General-purpose character, buffer, string, list, output and line-reading helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "memory",
    "text",
    "splitting",
    "linkedlist",
    "output",
    "printf",
    "linereader",
]