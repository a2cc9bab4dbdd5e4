"""Tests for column operations."""

from stageboard.model.column import create_column, move_column, replace_columns

from .conftest import _make_board, _make_column


def test_create_column_appends_empty_column():
    board = _make_board(_make_column("c1", cards=["a"]))
    new_board = create_column(board, "Review", "c2")
    assert [c.id for c in new_board.columns] == ["c1", "c2"]
    assert new_board.columns[1].title == "Review"
    assert new_board.columns[1].cards == ()
    assert len(board.columns) == 1


def test_create_column_on_empty_board():
    new_board = create_column(_make_board(), "Backlog", "c1")
    assert new_board.column_ids() == ["c1"]


def test_move_column():
    board = _make_board(_make_column("c1"), _make_column("c2"), _make_column("c3"))
    new_board = move_column(board, 1, 0)
    assert new_board.column_ids() == ["c2", "c1", "c3"]


def test_move_column_to_end():
    board = _make_board(_make_column("c1"), _make_column("c2"), _make_column("c3"))
    new_board = move_column(board, 0, 2)
    assert new_board.column_ids() == ["c2", "c3", "c1"]
    assert board.column_ids() == ["c1", "c2", "c3"]


def test_move_column_keeps_column_identity():
    board = _make_board(_make_column("c1", cards=["a"]), _make_column("c2"))
    new_board = move_column(board, 0, 1)
    assert new_board.columns[1] is board.columns[0]


def test_replace_columns_shares_untouched():
    c1, c2, c3 = _make_column("c1"), _make_column("c2"), _make_column("c3")
    board = _make_board(c1, c2, c3)
    swapped = _make_column("c2", title="Renamed")
    new_board = replace_columns(board, {"c2": swapped})
    assert new_board.columns[0] is c1
    assert new_board.columns[1] is swapped
    assert new_board.columns[2] is c3


def test_replace_columns_ignores_unknown_id():
    board = _make_board(_make_column("c1"))
    new_board = replace_columns(board, {"nope": _make_column("nope")})
    assert new_board == board
