"""Column widgets for stageboard UI."""

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Input, Rule, Static

from stageboard.models import Column
from stageboard.ui.card import CardWidget, NewCardInput


class ColumnHeader(Static, can_focus=True):
    """Column title with card count. Focus it to move the column."""

    BINDINGS = [
        Binding("shift+left", "move_column(-1)", "Move left", show=False),
        Binding("shift+right", "move_column(1)", "Move right", show=False),
    ]

    DEFAULT_CSS = """
    ColumnHeader {
        width: 100%;
        text-align: center;
        text-style: bold;
    }
    ColumnHeader:focus {
        background: $primary;
    }
    """

    def __init__(self, column: Column, **kwargs):
        title = Text(column.title)
        title.append(f"  {len(column.cards)}", style="dim")
        super().__init__(title, **kwargs)

    def action_move_column(self, direction: int) -> None:
        column_widget = self.parent
        self.post_message(ColumnWidget.MoveRequested(column_widget, direction))


class ColumnWidget(Vertical):
    """A single column on the board."""

    DEFAULT_CSS = """
    ColumnWidget {
        width: 1fr;
        height: auto;
        min-height: 100%;
        min-width: 25;
        max-width: 30;
        padding: 0 1;
        border-right: tall $surface-lighten-1;
    }
    ColumnWidget > Rule.-horizontal {
        margin: 0;
    }
    """

    class MoveRequested(Message):
        """Posted when column should be moved."""

        def __init__(self, column_widget: "ColumnWidget", direction: int) -> None:
            super().__init__()
            self.column_widget = column_widget
            self.direction = direction  # -1 for left, +1 for right

    def __init__(self, column: Column, index: int):
        super().__init__()
        self.column = column
        self.index = index

    def compose(self) -> ComposeResult:
        yield ColumnHeader(self.column, classes="column-header")
        yield Rule()
        for i, card in enumerate(self.column.cards):
            yield CardWidget(card, self.column.id, i)
        yield NewCardInput(self.column.id)


class NewColumnInput(Input):
    """Input at the end of the board for adding a column."""

    DEFAULT_CSS = """
    NewColumnInput {
        width: 25;
        border: dashed $surface-lighten-2;
    }
    """

    def __init__(self, **kwargs):
        super().__init__(placeholder="+ Add column", **kwargs)
