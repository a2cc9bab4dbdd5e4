"""Pure board operations."""

from stageboard.model.card import (
    create_card,
    delete_card,
    edit_card,
    find_card_column,
    normalize_text,
    parse_responsibilities,
)
from stageboard.model.column import create_column, move_column, replace_columns
from stageboard.model.reorder import CrossMove, move_across, move_within, within_range

__all__ = [
    "CrossMove",
    "create_card",
    "create_column",
    "delete_card",
    "edit_card",
    "find_card_column",
    "move_across",
    "move_column",
    "move_within",
    "normalize_text",
    "parse_responsibilities",
    "replace_columns",
    "within_range",
]
