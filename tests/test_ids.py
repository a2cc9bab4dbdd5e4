"""Tests for identifier generation."""

import itertools

from stageboard.ids import IdGenerator


def test_ids_are_unique_under_rapid_calls():
    gen = IdGenerator("card")
    ids = [gen.next() for _ in range(5000)]
    assert len(set(ids)) == len(ids)


def test_prefix():
    assert IdGenerator("column").next().startswith("column-")


def test_no_prefix():
    value = IdGenerator().next()
    assert not value.startswith("-")
    assert value.split("-")[0].isdigit()


def test_counter_increases():
    gen = IdGenerator("card")
    first, second = gen.next(), gen.next()
    assert first.split("-")[2] == "1"
    assert second.split("-")[2] == "2"


def test_separate_generators_do_not_collide():
    a, b = IdGenerator("card"), IdGenerator("card")
    ids = [a.next() for _ in range(200)] + [b.next() for _ in range(200)]
    assert len(set(ids)) == 400


def test_iterable():
    ids = list(itertools.islice(IdGenerator("x"), 3))
    assert len(set(ids)) == 3
