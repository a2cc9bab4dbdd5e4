"""Tests for splice-style reordering."""

import itertools

import pytest

from stageboard.model.reorder import CrossMove, move_across, move_within, within_range


def test_move_within_forward():
    assert move_within(["a", "b", "c"], 0, 2) == ("b", "c", "a")


def test_move_within_backward():
    assert move_within(["a", "b", "c", "d"], 3, 1) == ("a", "d", "b", "c")


def test_move_within_uses_index_after_removal():
    """to_index counts positions in the list with the element already removed."""
    assert move_within(["a", "b", "c", "d"], 0, 1) == ("b", "a", "c", "d")


def test_move_within_same_index_is_unchanged():
    seq = ("a", "b", "c")
    result = move_within(seq, 1, 1)
    assert result == seq


def test_move_within_returns_new_tuple_and_leaves_input():
    seq = ["a", "b", "c"]
    result = move_within(seq, 2, 0)
    assert isinstance(result, tuple)
    assert seq == ["a", "b", "c"]


def test_move_within_is_permutation_for_every_index_pair():
    seq = ("a", "b", "c", "d", "e")
    for src, dst in itertools.product(range(len(seq)), repeat=2):
        result = move_within(seq, src, dst)
        assert sorted(result) == sorted(seq)
        assert result[dst] == seq[src]


@pytest.mark.parametrize("src,dst", [(-1, 0), (3, 0), (0, 3), (0, -1)])
def test_move_within_rejects_out_of_range(src, dst):
    with pytest.raises(IndexError):
        move_within(["a", "b", "c"], src, dst)


def test_move_within_empty_sequence():
    with pytest.raises(IndexError):
        move_within([], 0, 0)


def test_move_across_into_empty():
    result = move_across(["a"], [], 0, 0)
    assert result == CrossMove((), ("a",), "a")


def test_move_across_appends_at_end():
    result = move_across(["a", "b"], ["x", "y"], 1, 2)
    assert result.source == ("a",)
    assert result.dest == ("x", "y", "b")
    assert result.moved == "b"


def test_move_across_inserts_in_middle():
    result = move_across(["a", "b"], ["x", "y"], 0, 1)
    assert result.dest == ("x", "a", "y")


def test_move_across_conserves_elements():
    source, dest = ("a", "b", "c"), ("x", "y")
    for src in range(len(source)):
        for dst in range(len(dest) + 1):
            result = move_across(source, dest, src, dst)
            assert len(result.source) == len(source) - 1
            assert len(result.dest) == len(dest) + 1
            assert result.moved == source[src]
            assert result.dest[dst] == source[src]
            assert result.moved not in result.source


@pytest.mark.parametrize("src,dst", [(2, 0), (-1, 0), (0, 3), (0, -1)])
def test_move_across_rejects_out_of_range(src, dst):
    with pytest.raises(IndexError):
        move_across(["a", "b"], ["x", "y"], src, dst)


def test_within_range():
    assert within_range(0, 1)
    assert not within_range(1, 1)
    assert within_range(1, 1, allow_end=True)
    assert not within_range(-1, 3)
    assert within_range(0, 0, allow_end=True)
    assert not within_range(0, 0)
