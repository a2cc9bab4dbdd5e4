"""Fixtures for UI tests."""

import pytest

from stageboard.models import Board, Card, Column


@pytest.fixture
def board():
    """Two columns, three cards.

    - To Do: Alpha, Beta
    - Done: Gamma
    """
    return Board(
        columns=(
            Column(id="todo", title="To Do", cards=(Card(id="a", title="Alpha"), Card(id="b", title="Beta"))),
            Column(id="done", title="Done", cards=(Card(id="g", title="Gamma", assignee="kim"),)),
        )
    )
