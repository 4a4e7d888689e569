"""C-library-style character, memory, string, list, output and printf helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "output", "linkedlist", "printf"]