"""Classic data structures, search and dynamic-programming routines, and contest-puzzle solutions."""

__version__ = "0.1.0"