"""Board screen showing kanban columns and cards."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Input, Static

from stageboard.engine import AddCard, AddColumn, BoardEngine, CardMoved, DeleteCard, EditCard, Intent
from stageboard.gesture import BOARD, Drop, DragKind, intent_for_drop
from stageboard.model.reorder import within_range
from stageboard.ui.card import CardWidget, NewCardInput
from stageboard.ui.column import ColumnHeader, ColumnWidget, NewColumnInput
from stageboard.ui.edit import CardEditModal

BOARD_TITLE = "Kanban Board"


class BoardScreen(Screen):
    """Main board screen showing all columns.

    The screen owns the engine and re-renders from its board after every
    change. Focus is the only view state and it lives in the widgets.
    """

    DEFAULT_CSS = """
    #board-title {
        width: 100%;
        height: 1;
        padding: 0 1;
        background: $primary-darken-2;
        text-style: bold;
    }
    #columns {
        width: 100%;
        height: 1fr;
        overflow-x: auto;
    }
    """

    def __init__(self, engine: BoardEngine):
        super().__init__()
        self.engine = engine
        self._unwatch_moves = None

    def compose(self) -> ComposeResult:
        yield Static(BOARD_TITLE, id="board-title")
        with Horizontal(id="columns"):
            for i, column in enumerate(self.engine.board.columns):
                yield ColumnWidget(column, i)
            yield NewColumnInput()
        yield Footer()

    def on_mount(self) -> None:
        self._unwatch_moves = self.engine.watch(self._on_card_moved)
        self.call_after_refresh(self._focus_first_card)

    def on_unmount(self) -> None:
        if self._unwatch_moves is not None:
            self._unwatch_moves()
            self._unwatch_moves = None

    def _on_card_moved(self, event: CardMoved) -> None:
        self.notify(event.message)

    def _focus_first_card(self) -> None:
        cards = list(self.query(CardWidget))
        if cards:
            cards[0].focus()

    def _focus_card(self, card_id: str) -> None:
        for widget in self.query(CardWidget):
            if widget.card.id == card_id:
                widget.focus()
                return

    def _focus_column(self, column_id: str) -> None:
        for widget in self.query(ColumnWidget):
            if widget.column.id == column_id:
                widget.query_one(ColumnHeader).focus()
                return

    def _focus_new_card_input(self, column_id: str) -> None:
        for widget in self.query(NewCardInput):
            if widget.column_id == column_id:
                widget.focus()
                return

    async def apply_intent(self, intent: Intent, focus=None) -> bool:
        """Apply an intent and re-render if the board changed.

        focus is a callable run after the new widgets are mounted.
        Returns True if the board changed.
        """
        before = self.engine.board
        after = self.engine.apply(intent)
        if after is before:
            return False
        await self.recompose()
        if focus is not None:
            self.call_after_refresh(focus)
        return True

    # -- Moves: build a Drop, let the classifier decide --

    async def on_card_widget_move_requested(self, event: CardWidget.MoveRequested) -> None:
        event.stop()
        card = event.card
        columns = self.engine.board.columns
        found = self.engine.board.find_column(card.column_id)
        if found is None:
            return
        col_index, column = found

        dest_container = None
        dest_index = None
        if event.column_offset == 0:
            target = card.index + event.index_offset
            if within_range(target, len(column.cards)):
                dest_container, dest_index = column.id, target
        else:
            target = col_index + event.column_offset
            if within_range(target, len(columns)):
                dest = columns[target]
                dest_container, dest_index = dest.id, min(card.index, len(dest.cards))

        drop = Drop(DragKind.CARD, column.id, card.index, dest_container, dest_index)
        intent = intent_for_drop(drop)
        if intent is not None:
            card_id = card.card.id
            await self.apply_intent(intent, focus=lambda: self._focus_card(card_id))

    async def on_column_widget_move_requested(self, event: ColumnWidget.MoveRequested) -> None:
        event.stop()
        col_widget = event.column_widget
        target = col_widget.index + event.direction
        dest = BOARD if within_range(target, len(self.engine.board.columns)) else None
        drop = Drop(DragKind.COLUMN, BOARD, col_widget.index, dest, target if dest else None)
        intent = intent_for_drop(drop)
        if intent is not None:
            column_id = col_widget.column.id
            await self.apply_intent(intent, focus=lambda: self._focus_column(column_id))

    # -- Forms --

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        if isinstance(event.input, NewCardInput):
            event.stop()
            column_id = event.input.column_id
            changed = await self.apply_intent(
                AddCard(column_id, event.value),
                focus=lambda: self._focus_new_card_input(column_id),
            )
            if not changed:
                event.input.value = ""
        elif isinstance(event.input, NewColumnInput):
            event.stop()
            changed = await self.apply_intent(
                AddColumn(event.value),
                focus=lambda: self.query_one(NewColumnInput).focus(),
            )
            if not changed:
                event.input.value = ""

    def on_card_widget_edit_requested(self, event: CardWidget.EditRequested) -> None:
        event.stop()
        card = event.card
        self.app.push_screen(CardEditModal(card.card, card.column_id), self._on_edit_closed)

    async def _on_edit_closed(self, intent: EditCard | None) -> None:
        if intent is None:
            return
        card_id = intent.card_id
        await self.apply_intent(intent, focus=lambda: self._focus_card(card_id))

    async def on_card_widget_delete_requested(self, event: CardWidget.DeleteRequested) -> None:
        event.stop()
        card = event.card
        await self.apply_intent(DeleteCard(card.column_id, card.card.id), focus=self._focus_first_card)
