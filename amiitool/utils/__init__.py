"""Utility functions for amiitool."""

from .helpers import read_dump, merge_trailing

__all__ = [
    "read_dump",
    "merge_trailing",
]
