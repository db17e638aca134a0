"""Commit-list search helpers."""

from .find import NOT_FOUND, find, find_by_key, find_by_word, next_index, resolve_find

__all__ = [
    "NOT_FOUND",
    "find",
    "find_by_key",
    "find_by_word",
    "next_index",
    "resolve_find",
]
