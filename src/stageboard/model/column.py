"""Column operations for stageboard boards.

Every function returns a new Board; the input board is never touched.
Columns that an operation does not change are carried over by identity.
"""

from dataclasses import replace
from typing import Mapping

from stageboard.model.reorder import move_within
from stageboard.models import Board, Column


def replace_columns(board: Board, replacements: Mapping[str, Column]) -> Board:
    """Swap in new column values by id, keeping all others as they are."""
    columns = tuple(replacements.get(col.id, col) for col in board.columns)
    return replace(board, columns=columns)


def create_column(board: Board, title: str, column_id: str) -> Board:
    """Append an empty column to the board."""
    col = Column(id=column_id, title=title)
    return replace(board, columns=board.columns + (col,))


def move_column(board: Board, from_index: int, to_index: int) -> Board:
    """Move the column at from_index to to_index."""
    return replace(board, columns=move_within(board.columns, from_index, to_index))
