"""Kanban board state engine with a terminal UI."""

from stageboard.engine import (
    AddCard,
    AddColumn,
    BoardEngine,
    CardMoved,
    DeleteCard,
    EditCard,
    Intent,
    MoveCard,
    MoveColumn,
    apply_intent,
)
from stageboard.errors import BoardError, BoardIntegrityError, InvalidMoveError, SeedError
from stageboard.ids import IdGenerator
from stageboard.models import Board, Card, Column, validate_board

__all__ = [
    "AddCard",
    "AddColumn",
    "Board",
    "BoardEngine",
    "BoardError",
    "BoardIntegrityError",
    "Card",
    "CardMoved",
    "Column",
    "DeleteCard",
    "EditCard",
    "IdGenerator",
    "Intent",
    "InvalidMoveError",
    "MoveCard",
    "MoveColumn",
    "SeedError",
    "apply_intent",
    "validate_board",
]
