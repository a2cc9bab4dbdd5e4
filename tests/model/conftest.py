"""Shared test helpers for model tests."""

from stageboard.models import Board, Card, Column


def _make_card(card_id, title=None, **fields):
    """Helper to build a card; title defaults to the upper-cased id."""
    return Card(id=card_id, title=title or card_id.upper(), **fields)


def _make_column(column_id, title=None, cards=()):
    """Helper to build a column from card ids or Card values."""
    built = tuple(_make_card(c) if isinstance(c, str) else c for c in cards)
    return Column(id=column_id, title=title or column_id.upper(), cards=built)


def _make_board(*columns):
    """Helper to build a board from columns."""
    return Board(columns=tuple(columns))


def _titles(column):
    return [card.title for card in column.cards]


def _ids(column):
    return [card.id for card in column.cards]
