"""Tail and most-frequent-word filters built on a chained hash table."""

__version__ = "0.1.0"
__all__ = ["htab", "wordio", "maxwordcount", "tail"]