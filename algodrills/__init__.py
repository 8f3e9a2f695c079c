"""Classic programming drills: a star pattern, matrix transpose, sorting and binary trees."""

__version__ = "0.1.0"
__all__ = ["matrix", "patterns", "sorting", "trees"]