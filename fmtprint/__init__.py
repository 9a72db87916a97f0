"""A printf-style formatter with character, number, memory, string, list and output helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "convert",
    "linkedlist",
    "memory",
    "numbers",
    "output",
    "printf",
    "spec",
    "strutil",
]