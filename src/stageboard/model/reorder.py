"""Splice-style reordering of immutable sequences.

Both operations take plain sequences and return new tuples. Indices are
zero-based and never wrap: a negative index is out of range, not a count
from the end.
"""

from __future__ import annotations

from typing import Any, NamedTuple, Sequence


class CrossMove(NamedTuple):
    """Result of moving one element between two sequences."""

    source: tuple
    dest: tuple
    moved: Any


def within_range(index: int, length: int, allow_end: bool = False) -> bool:
    """True if index addresses an element, or the append slot when allow_end."""
    upper = length if allow_end else length - 1
    return 0 <= index <= upper


def move_within(sequence: Sequence, from_index: int, to_index: int) -> tuple:
    """Move an element to to_index within the same sequence.

    The element is removed first, then inserted at to_index in what remains:
    ``move_within("abc", 0, 2)`` gives ``("b", "c", "a")``.
    """
    length = len(sequence)
    if not within_range(from_index, length):
        raise IndexError(f"from_index {from_index} out of range for length {length}")
    if not within_range(to_index, length):
        raise IndexError(f"to_index {to_index} out of range for length {length}")

    items = list(sequence)
    moved = items.pop(from_index)
    items.insert(to_index, moved)
    return tuple(items)


def move_across(source: Sequence, dest: Sequence, from_index: int, to_index: int) -> CrossMove:
    """Move the element at from_index in source to to_index in dest.

    to_index may equal len(dest) to append.
    """
    if not within_range(from_index, len(source)):
        raise IndexError(f"from_index {from_index} out of range for length {len(source)}")
    if not within_range(to_index, len(dest), allow_end=True):
        raise IndexError(f"to_index {to_index} out of range for length {len(dest)}")

    new_source = list(source)
    moved = new_source.pop(from_index)
    new_dest = list(dest)
    new_dest.insert(to_index, moved)
    return CrossMove(tuple(new_source), tuple(new_dest), moved)
