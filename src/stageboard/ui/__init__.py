"""Textual UI for stageboard."""

from stageboard.ui.app import StageboardApp
from stageboard.ui.board import BoardScreen
from stageboard.ui.edit import CardEditModal

__all__ = [
    "BoardScreen",
    "CardEditModal",
    "StageboardApp",
]
