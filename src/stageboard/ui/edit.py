"""Modal form for editing a card."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.events import Click
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

from stageboard.engine import EditCard
from stageboard.models import Card


class CardEditModal(ModalScreen[EditCard | None]):
    """Edit a card's title, description, assignee and responsibilities.

    Dismisses with an EditCard intent, or None when cancelled. A blank
    title is refused here so the engine never sees one.
    """

    DEFAULT_CSS = """
    CardEditModal {
        align: center middle;
        background: rgba(0, 0, 0, 0.6);
    }
    #edit-container {
        width: 70;
        height: auto;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }
    #edit-container Label {
        margin-top: 1;
        color: $text-muted;
    }
    #edit-buttons {
        width: 100%;
        height: 3;
        margin-top: 1;
        align: right middle;
    }
    #edit-buttons Button {
        margin-left: 2;
    }
    """

    BINDINGS = [("escape", "close", "Close")]

    def __init__(self, card: Card, column_id: str) -> None:
        super().__init__()
        self.card = card
        self.column_id = column_id

    def compose(self) -> ComposeResult:
        card = self.card
        with Vertical(id="edit-container"):
            yield Label("Title")
            yield Input(card.title, placeholder="Enter card title...", id="edit-title")
            yield Label("Description")
            yield Input(
                card.description or "", placeholder="Add a more detailed description...", id="edit-description"
            )
            yield Label("Assignee")
            yield Input(card.assignee or "", placeholder="Who is on it?", id="edit-assignee")
            yield Label("Responsibilities (comma separated)")
            yield Input(
                ", ".join(card.responsibilities or ()), placeholder="design, review", id="edit-responsibilities"
            )
            with Horizontal(id="edit-buttons"):
                yield Button("Cancel", id="cancel")
                yield Button("Save", id="save", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#edit-title", Input).focus()

    def _value(self, widget_id: str) -> str:
        return self.query_one(f"#{widget_id}", Input).value

    def save(self) -> None:
        title = self._value("edit-title")
        if not title.strip():
            self.notify("Title cannot be empty", severity="error")
            return
        self.dismiss(
            EditCard(
                self.column_id,
                self.card.id,
                title,
                description=self._value("edit-description"),
                assignee=self._value("edit-assignee"),
                responsibilities=self._value("edit-responsibilities"),
            )
        )

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.save()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "save":
            self.save()
        else:
            self.dismiss(None)

    def on_click(self, event: Click) -> None:
        """Dismiss when clicking outside the form."""
        container = self.query_one("#edit-container")
        if not container.region.contains(event.screen_x, event.screen_y):
            self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)
