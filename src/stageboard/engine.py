"""Board state engine: apply intents to an immutable board.

``apply_intent`` is the pure reducer. ``BoardEngine`` holds the current
snapshot for a single writer, hands out ids and delivers move
notifications to listeners.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Union

from stageboard.errors import InvalidMoveError
from stageboard.ids import IdGenerator
from stageboard.model.card import create_card, delete_card, edit_card, normalize_text
from stageboard.model.column import create_column, move_column, replace_columns
from stageboard.model.reorder import move_across, move_within, within_range
from stageboard.models import Board, Column, validate_board

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveColumn:
    from_index: int
    to_index: int


@dataclass(frozen=True)
class MoveCard:
    source_column_id: str
    dest_column_id: str
    from_index: int
    to_index: int


@dataclass(frozen=True)
class AddCard:
    column_id: str
    title: str


@dataclass(frozen=True)
class AddColumn:
    title: str


@dataclass(frozen=True)
class DeleteCard:
    column_id: str
    card_id: str


@dataclass(frozen=True)
class EditCard:
    """Replace a card's fields. Responsibilities may be comma-delimited text."""

    column_id: str
    card_id: str
    title: str
    description: str | None = None
    assignee: str | None = None
    responsibilities: str | tuple[str, ...] | None = None


Intent = Union[MoveColumn, MoveCard, AddCard, AddColumn, DeleteCard, EditCard]


@dataclass(frozen=True)
class CardMoved:
    """Emitted when a card lands in a different column."""

    card_title: str
    column_title: str

    @property
    def message(self) -> str:
        return f'Moved "{self.card_title}" to {self.column_title}'


Listener = Callable[[CardMoved], None]


def _invalid_move(board: Board, strict: bool, message: str, *args) -> Board:
    """Report a move the caller should never have sent."""
    if strict:
        raise InvalidMoveError(message % args)
    logger.warning("ignoring invalid move: " + message, *args)
    return board


def _move_column(board: Board, intent: MoveColumn, strict: bool) -> Board:
    if intent.from_index == intent.to_index:
        return board
    count = len(board.columns)
    if not within_range(intent.from_index, count) or not within_range(intent.to_index, count):
        return _invalid_move(
            board, strict, "column indices %d -> %d with %d columns", intent.from_index, intent.to_index, count
        )
    return move_column(board, intent.from_index, intent.to_index)


def _move_card(board: Board, intent: MoveCard, events: list[CardMoved] | None, strict: bool) -> Board:
    source = board.find_column(intent.source_column_id)
    dest = board.find_column(intent.dest_column_id)
    if source is None or dest is None:
        missing = intent.source_column_id if source is None else intent.dest_column_id
        return _invalid_move(board, strict, "column %r not found", missing)

    _, source_col = source
    _, dest_col = dest

    if source_col is dest_col:
        if intent.from_index == intent.to_index:
            return board
        count = len(source_col.cards)
        if not within_range(intent.from_index, count) or not within_range(intent.to_index, count):
            return _invalid_move(
                board,
                strict,
                "card indices %d -> %d in column %r of %d cards",
                intent.from_index,
                intent.to_index,
                source_col.id,
                count,
            )
        cards = move_within(source_col.cards, intent.from_index, intent.to_index)
        return replace_columns(board, {source_col.id: _with_cards(source_col, cards)})

    if not within_range(intent.from_index, len(source_col.cards)) or not within_range(
        intent.to_index, len(dest_col.cards), allow_end=True
    ):
        return _invalid_move(
            board,
            strict,
            "card indices %d -> %d from %r (%d cards) to %r (%d cards)",
            intent.from_index,
            intent.to_index,
            source_col.id,
            len(source_col.cards),
            dest_col.id,
            len(dest_col.cards),
        )

    result = move_across(source_col.cards, dest_col.cards, intent.from_index, intent.to_index)
    new_board = replace_columns(
        board,
        {
            source_col.id: _with_cards(source_col, result.source),
            dest_col.id: _with_cards(dest_col, result.dest),
        },
    )
    if events is not None:
        events.append(CardMoved(result.moved.title, dest_col.title))
    return new_board


def _with_cards(col: Column, cards: tuple) -> Column:
    return replace(col, cards=cards)


def _add_card(board: Board, intent: AddCard, card_ids: IdGenerator) -> Board:
    title = normalize_text(intent.title)
    if title is None:
        logger.debug("rejecting blank card title for column %r", intent.column_id)
        return board
    if board.find_column(intent.column_id) is None:
        logger.debug("add card: column %r not found", intent.column_id)
        return board
    return create_card(board, intent.column_id, title, card_ids.next())


def _add_column(board: Board, intent: AddColumn, column_ids: IdGenerator) -> Board:
    title = normalize_text(intent.title)
    if title is None:
        logger.debug("rejecting blank column title")
        return board
    return create_column(board, title, column_ids.next())


def apply_intent(
    board: Board,
    intent: Intent,
    card_ids: IdGenerator,
    column_ids: IdGenerator,
    events: list[CardMoved] | None = None,
    strict: bool = False,
) -> Board:
    """Return the board that results from applying intent to board.

    Invalid moves and references to missing items return the input board
    itself, so callers can detect a no-op with ``is``. A cross-column card
    move appends a CardMoved to events when a list is given.
    """
    match intent:
        case MoveColumn():
            return _move_column(board, intent, strict)
        case MoveCard():
            return _move_card(board, intent, events, strict)
        case AddCard():
            return _add_card(board, intent, card_ids)
        case AddColumn():
            return _add_column(board, intent, column_ids)
        case DeleteCard():
            new_board = delete_card(board, intent.column_id, intent.card_id)
            if new_board is board:
                logger.debug("delete card: %r not in column %r", intent.card_id, intent.column_id)
            return new_board
        case EditCard():
            new_board = edit_card(
                board,
                intent.column_id,
                intent.card_id,
                intent.title,
                intent.description,
                intent.assignee,
                intent.responsibilities,
            )
            if new_board is board:
                logger.debug("edit card: nothing changed for %r in column %r", intent.card_id, intent.column_id)
            return new_board
    raise TypeError(f"unknown intent: {intent!r}")


class BoardEngine:
    """Holds the current board and applies intents to it.

    The engine assumes a single writer: intents must be applied one after
    another, never concurrently.
    """

    def __init__(
        self,
        board: Board,
        card_ids: IdGenerator | None = None,
        column_ids: IdGenerator | None = None,
        strict: bool = False,
    ) -> None:
        self._board = validate_board(board)
        self.card_ids = card_ids or IdGenerator("card")
        self.column_ids = column_ids or IdGenerator("column")
        self.strict = strict
        self._listeners: list[Listener] = []

    @property
    def board(self) -> Board:
        return self._board

    def watch(self, callback: Listener) -> Callable[[], None]:
        """Register a move listener. Returns an unwatch callable."""
        self._listeners.append(callback)
        return lambda: callback in self._listeners and self._listeners.remove(callback)

    def apply(self, intent: Intent) -> Board:
        """Apply an intent, store and return the resulting board.

        Listeners run after the new board is stored, so they can read it
        or apply further intents.
        """
        events: list[CardMoved] = []
        board = apply_intent(
            self._board,
            intent,
            self.card_ids,
            self.column_ids,
            events=events,
            strict=self.strict,
        )
        self._board = board
        for event in events:
            self._emit(event)
        return board

    def apply_all(self, intents: Iterable[Intent]) -> Board:
        """Apply intents in order."""
        for intent in intents:
            self.apply(intent)
        return self._board

    def _emit(self, event: CardMoved) -> None:
        for cb in list(self._listeners):
            try:
                cb(event)
            except Exception:
                logger.exception("move listener %r failed", cb)
