"""Card widgets for stageboard UI."""

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.widgets import Input, Static

from stageboard.models import Card

ICON_ASSIGNEE = "\U0001f464"


class PlainStatic(Static):
    """Static that doesn't allow text selection."""

    ALLOW_SELECT = False


def build_footer_text(card: Card) -> Text:
    """Assignee and responsibility tags shown under the title."""
    text = Text()
    if card.assignee:
        text.append(f"{ICON_ASSIGNEE} {card.assignee}")
    if card.responsibilities:
        if text:
            text.append("  ")
        text.append(" ".join(f"#{tag}" for tag in card.responsibilities), style="italic")
    return text


class CardWidget(Static, can_focus=True):
    """A single card in a column."""

    BINDINGS = [
        ("enter", "edit_card", "Edit"),
        ("delete", "delete_card", "Delete"),
        Binding("shift+up", "move_card(0, -1)", "Up", show=False),
        Binding("shift+down", "move_card(0, 1)", "Down", show=False),
        Binding("shift+left", "move_card(-1, 0)", "Left", show=False),
        Binding("shift+right", "move_card(1, 0)", "Right", show=False),
    ]

    class MoveRequested(Message):
        """Posted when the card should move by column and position offsets."""

        def __init__(self, card: "CardWidget", column_offset: int, index_offset: int):
            super().__init__()
            self.card = card
            self.column_offset = column_offset
            self.index_offset = index_offset

    class EditRequested(Message):
        def __init__(self, card: "CardWidget"):
            super().__init__()
            self.card = card

    class DeleteRequested(Message):
        def __init__(self, card: "CardWidget"):
            super().__init__()
            self.card = card

    DEFAULT_CSS = """
    CardWidget {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        background: $surface;
        border-left: tall $primary-darken-2;
    }
    CardWidget:focus {
        background: $primary;
    }
    CardWidget #card-title {
        text-style: bold;
    }
    CardWidget #card-description {
        color: $text-muted;
        max-height: 2;
    }
    CardWidget #card-footer {
        color: $text-muted;
    }
    """

    def __init__(self, card: Card, column_id: str, index: int):
        super().__init__()
        self.card = card
        self.column_id = column_id
        self.index = index

    def compose(self) -> ComposeResult:
        yield PlainStatic(Text(self.card.title), id="card-title")
        if self.card.description:
            yield PlainStatic(Text(self.card.description), id="card-description")
        footer = build_footer_text(self.card)
        if footer:
            yield PlainStatic(footer, id="card-footer")

    def action_move_card(self, column_offset: int, index_offset: int) -> None:
        self.post_message(self.MoveRequested(self, column_offset, index_offset))

    def action_edit_card(self) -> None:
        self.post_message(self.EditRequested(self))

    def action_delete_card(self) -> None:
        self.post_message(self.DeleteRequested(self))


class NewCardInput(Input):
    """Input at the foot of a column for adding a card."""

    DEFAULT_CSS = """
    NewCardInput {
        width: 100%;
        border: dashed $surface-lighten-2;
    }
    """

    def __init__(self, column_id: str, **kwargs):
        super().__init__(placeholder="+ Add a card", **kwargs)
        self.column_id = column_id
