"""Turn completed drags into engine intents."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from stageboard.engine import Intent, MoveCard, MoveColumn

BOARD = "board"


class DragKind(str, Enum):
    COLUMN = "column"
    CARD = "card"


@dataclass(frozen=True)
class Drop:
    """Where a dragged column or card started and where it was let go.

    Containers are ``BOARD`` for columns and a column id for cards.
    dest_container is None when the drop landed outside any target.
    """

    kind: DragKind
    source_container: str
    source_index: int
    dest_container: str | None = None
    dest_index: int | None = None

    @property
    def has_destination(self) -> bool:
        return self.dest_container is not None and self.dest_index is not None

    @property
    def is_origin(self) -> bool:
        """True if the drop put the item back where it started."""
        return self.dest_container == self.source_container and self.dest_index == self.source_index


def intent_for_drop(drop: Drop) -> Intent | None:
    """Build the move intent for a drop, or None if nothing should happen."""
    if not drop.has_destination or drop.is_origin:
        return None
    if drop.kind is DragKind.COLUMN:
        return MoveColumn(drop.source_index, drop.dest_index)
    return MoveCard(drop.source_container, drop.dest_container, drop.source_index, drop.dest_index)
