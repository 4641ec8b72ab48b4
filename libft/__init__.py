"""Character, conversion, string, memory, output and linked-list utilities."""

__version__ = "1.0.0"
__all__ = ["convert", "ctype", "linkedlist", "memory", "output", "strings"]