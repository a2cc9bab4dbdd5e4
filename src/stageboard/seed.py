"""Initial boards: the demo board and YAML seed files."""

from pathlib import Path
from typing import Any

import yaml

from stageboard.errors import SeedError
from stageboard.model.card import normalize_text, parse_responsibilities
from stageboard.models import Board, Card, Column, validate_board

CARD_FIELDS = ("description", "assignee")


def default_board() -> Board:
    """The demo board shown when no seed file is given."""
    return Board(
        columns=(
            Column(
                id="column-1",
                title="To Do",
                cards=(
                    Card(
                        id="card-1",
                        title="Create design system",
                        description="Define colors, typography and components",
                    ),
                    Card(
                        id="card-2",
                        title="Implement drag and drop",
                        description="Reorder cards and columns by moving them",
                    ),
                ),
            ),
            Column(
                id="column-2",
                title="In Progress",
                cards=(
                    Card(
                        id="card-3",
                        title="Build UI components",
                        description="Create the visual elements of the application",
                    ),
                ),
            ),
            Column(
                id="column-3",
                title="Done",
                cards=(
                    Card(
                        id="card-4",
                        title="Project setup",
                        description="Initialize the project and install dependencies",
                    ),
                ),
            ),
        )
    )


def _require(data: dict, key: str, where: str) -> str:
    value = data.get(key)
    if value is None or not str(value).strip():
        raise SeedError(f"{where}: missing '{key}'")
    return str(value)


def _optional_text(value: Any) -> str | None:
    return normalize_text(str(value)) if value is not None else None


def _card_from_dict(data: Any, where: str) -> Card:
    if not isinstance(data, dict):
        raise SeedError(f"{where}: expected a mapping, got {type(data).__name__}")
    fields = {key: _optional_text(data.get(key)) for key in CARD_FIELDS}
    responsibilities = data.get("responsibilities")
    if isinstance(responsibilities, list):
        responsibilities = [str(r) for r in responsibilities if r is not None]
    elif responsibilities is not None and not isinstance(responsibilities, str):
        raise SeedError(f"{where}: responsibilities must be a list or text")
    return Card(
        id=_require(data, "id", where),
        title=_require(data, "title", where).strip(),
        responsibilities=parse_responsibilities(responsibilities),
        **fields,
    )


def _column_from_dict(data: Any, where: str) -> Column:
    if not isinstance(data, dict):
        raise SeedError(f"{where}: expected a mapping, got {type(data).__name__}")
    cards = data.get("cards") or []
    if not isinstance(cards, list):
        raise SeedError(f"{where}: cards must be a list")
    col_id = _require(data, "id", where)
    return Column(
        id=col_id,
        title=str(data.get("title") or ""),
        cards=tuple(_card_from_dict(c, f"{where} card {i + 1}") for i, c in enumerate(cards)),
    )


def board_from_dict(data: Any) -> Board:
    """Build a board from plain data of the form {columns: [...]}."""
    if not isinstance(data, dict):
        raise SeedError("seed must be a mapping with a 'columns' list")
    columns = data.get("columns") or []
    if not isinstance(columns, list):
        raise SeedError("'columns' must be a list")
    board = Board(columns=tuple(_column_from_dict(c, f"column {i + 1}") for i, c in enumerate(columns)))
    try:
        return validate_board(board)
    except ValueError as e:
        raise SeedError(str(e)) from e


def board_to_dict(board: Board) -> dict:
    """Convert a board to plain data. Absent fields are left out."""
    columns = []
    for col in board.columns:
        cards = []
        for card in col.cards:
            item = {"id": card.id, "title": card.title}
            for key in CARD_FIELDS:
                value = getattr(card, key)
                if value is not None:
                    item[key] = value
            if card.responsibilities is not None:
                item["responsibilities"] = list(card.responsibilities)
            cards.append(item)
        columns.append({"id": col.id, "title": col.title, "cards": cards})
    return {"columns": columns}


def load_seed(path: str | Path) -> Board:
    """Read a board from a YAML seed file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SeedError(f"cannot read {path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise SeedError(f"{path}: not valid UTF-8: {e.reason}") from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SeedError(f"{path}: invalid YAML: {e}") from e
    return board_from_dict(data if data is not None else {})
