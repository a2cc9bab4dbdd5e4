"""Tests for the board data model."""

import dataclasses

import pytest

from stageboard.errors import BoardIntegrityError
from stageboard.models import validate_board

from .conftest import _make_board, _make_card, _make_column


def test_models_are_frozen():
    card = _make_card("a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        card.title = "changed"


def test_structural_equality():
    assert _make_board(_make_column("c1", cards=["a"])) == _make_board(_make_column("c1", cards=["a"]))


def test_find_column():
    board = _make_board(_make_column("c1"), _make_column("c2"))
    assert board.find_column("c2") == (1, board.columns[1])
    assert board.find_column("nope") is None


def test_find_card():
    board = _make_board(_make_column("c1", cards=["a"]), _make_column("c2", cards=["b", "c"]))
    col, idx, card = board.find_card("c")
    assert col is board.columns[1]
    assert idx == 1
    assert card.id == "c"
    assert board.find_card("zzz") is None


def test_card_ids_span_board():
    board = _make_board(_make_column("c1", cards=["a"]), _make_column("c2", cards=["b", "c"]))
    assert board.card_ids() == ["a", "b", "c"]
    assert board.column_ids() == ["c1", "c2"]


def test_validate_board_accepts_unique_ids():
    board = _make_board(_make_column("c1", cards=["a"]), _make_column("c2", cards=["b"]))
    assert validate_board(board) is board


def test_validate_board_rejects_duplicate_card_across_columns():
    board = _make_board(_make_column("c1", cards=["a"]), _make_column("c2", cards=["a"]))
    with pytest.raises(BoardIntegrityError) as exc:
        validate_board(board)
    assert exc.value.duplicate_cards == ["a"]
    assert "duplicate card ids: a" in str(exc.value)


def test_validate_board_rejects_duplicate_columns():
    board = _make_board(_make_column("c1"), _make_column("c1"))
    with pytest.raises(ValueError, match="duplicate column ids: c1"):
        validate_board(board)
