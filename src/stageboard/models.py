"""Data models for stageboard boards.

All models are frozen and hold tuples, so a board handed out by the engine
can be stored and compared by value without fear of later mutation.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from stageboard.errors import BoardIntegrityError


@dataclass(frozen=True)
class Card:
    """A single work item."""

    id: str
    title: str
    description: str | None = None
    assignee: str | None = None
    responsibilities: tuple[str, ...] | None = None


@dataclass(frozen=True)
class Column:
    """One stage on the board, holding cards in display order."""

    id: str
    title: str
    cards: tuple[Card, ...] = field(default_factory=tuple)

    def card_index(self, card_id: str) -> int | None:
        """Position of a card in this column, or None."""
        for i, card in enumerate(self.cards):
            if card.id == card_id:
                return i
        return None


@dataclass(frozen=True)
class Board:
    """The full board state: columns in stage order."""

    columns: tuple[Column, ...] = field(default_factory=tuple)

    def column_ids(self) -> list[str]:
        return [col.id for col in self.columns]

    def card_ids(self) -> list[str]:
        return [card.id for col in self.columns for card in col.cards]

    def find_column(self, column_id: str) -> tuple[int, Column] | None:
        """Find a column by id. Returns (index, column) or None."""
        for i, col in enumerate(self.columns):
            if col.id == column_id:
                return i, col
        return None

    def find_card(self, card_id: str) -> tuple[Column, int, Card] | None:
        """Find a card anywhere on the board. Returns (column, index, card) or None."""
        for col in self.columns:
            idx = col.card_index(card_id)
            if idx is not None:
                return col, idx, col.cards[idx]
        return None


def _duplicates(ids: list[str]) -> list[str]:
    return sorted(k for k, n in Counter(ids).items() if n > 1)


def validate_board(board: Board) -> Board:
    """Check column and card ids are unique board-wide.

    Returns the board unchanged so it can be used inline.
    """
    dup_columns = _duplicates(board.column_ids())
    dup_cards = _duplicates(board.card_ids())
    if dup_columns or dup_cards:
        raise BoardIntegrityError(dup_columns, dup_cards)
    return board
