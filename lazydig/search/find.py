"""Circular search over the commit list.

Searches start just after the current selection, run to the end of the list
and then wrap around to the front.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..records import Record

NOT_FOUND = -1


def next_index(records: Sequence[Record], current: int) -> int:
    """Return the index after ``current``, wrapping to 0 past the last record."""
    if not records or current >= len(records) - 1:
        return 0
    return current + 1


def find(
    records: Sequence[Record],
    predicate: Callable[[Record], bool],
    from_index: int,
) -> int:
    """Return the first index matching ``predicate`` scanning circularly.

    ``records[from_index:]`` is scanned first, then ``records[:from_index]``.
    Returns ``NOT_FOUND`` when nothing matches.
    """
    for idx in range(from_index, len(records)):
        if predicate(records[idx]):
            return idx
    for idx in range(0, min(from_index, len(records))):
        if predicate(records[idx]):
            return idx
    return NOT_FOUND


def find_by_key(records: Sequence[Record], key: str, from_index: int) -> int:
    return find(records, lambda record: record.key == key, from_index)


def find_by_word(records: Sequence[Record], word: str, from_index: int) -> int:
    return find(records, lambda record: word in record.title, from_index)


def resolve_find(records: Sequence[Record], query: str, current: int) -> int:
    """Return the selection a find request should move to.

    An exact key match is applied first and a title substring match found
    from the same starting point replaces it. Returns ``NOT_FOUND`` when
    neither matches.
    """
    start = next_index(records, current)
    target = NOT_FOUND
    by_key = find_by_key(records, query, start)
    if by_key != NOT_FOUND:
        target = by_key
    by_word = find_by_word(records, query, start)
    if by_word != NOT_FOUND:
        target = by_word
    return target
