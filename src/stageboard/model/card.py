"""Card operations for stageboard boards."""

from dataclasses import replace
from typing import Iterable

from stageboard.model.column import replace_columns
from stageboard.models import Board, Card, Column

RESPONSIBILITY_SEPARATOR = ","


def normalize_text(value: str | None) -> str | None:
    """Trim text, turning empty or whitespace-only input into None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_responsibilities(value: str | Iterable[str] | None) -> tuple[str, ...] | None:
    """Split responsibilities into trimmed, non-empty tags.

    "a, b, ,c" → ("a", "b", "c"). Lists are trimmed the same way.
    Returns None if nothing is left.
    """
    if value is None:
        return None
    parts = value.split(RESPONSIBILITY_SEPARATOR) if isinstance(value, str) else value
    tags = tuple(p.strip() for p in parts if p and p.strip())
    return tags or None


def find_card_column(board: Board, card_id: str) -> Column | None:
    """Find the column containing a card."""
    found = board.find_card(card_id)
    return found[0] if found else None


def create_card(board: Board, column_id: str, title: str, card_id: str) -> Board:
    """Append a new card holding only a title to the named column."""
    found = board.find_column(column_id)
    if found is None:
        return board
    _, col = found
    card = Card(id=card_id, title=title)
    return replace_columns(board, {col.id: replace(col, cards=col.cards + (card,))})


def edit_card(
    board: Board,
    column_id: str,
    card_id: str,
    title: str,
    description: str | None = None,
    assignee: str | None = None,
    responsibilities: str | Iterable[str] | None = None,
) -> Board:
    """Replace a card's fields wholesale.

    Optional fields that are missing or blank become absent. A title that
    trims to nothing leaves the board unchanged.
    """
    new_title = normalize_text(title)
    if new_title is None:
        return board

    found = board.find_column(column_id)
    if found is None:
        return board
    _, col = found
    idx = col.card_index(card_id)
    if idx is None:
        return board

    card = replace(
        col.cards[idx],
        title=new_title,
        description=normalize_text(description),
        assignee=normalize_text(assignee),
        responsibilities=parse_responsibilities(responsibilities),
    )
    cards = col.cards[:idx] + (card,) + col.cards[idx + 1 :]
    return replace_columns(board, {col.id: replace(col, cards=cards)})


def delete_card(board: Board, column_id: str, card_id: str) -> Board:
    """Remove a card from the named column. Missing column or card is a no-op."""
    found = board.find_column(column_id)
    if found is None:
        return board
    _, col = found
    idx = col.card_index(card_id)
    if idx is None:
        return board

    cards = col.cards[:idx] + col.cards[idx + 1 :]
    return replace_columns(board, {col.id: replace(col, cards=cards)})
