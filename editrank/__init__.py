"""Rank text lines by edit distance to a query."""

__version__ = "0.1.0"
