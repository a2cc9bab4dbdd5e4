"""Main Textual application for stageboard."""

from textual.app import App

from stageboard.engine import BoardEngine
from stageboard.models import Board
from stageboard.ui.board import BoardScreen


class StageboardApp(App):
    """Kanban board TUI."""

    CSS = """
    Tooltip {
        padding: 0 1;
        margin: 0;
    }
    """

    TITLE = "stageboard"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, board: Board, strict: bool = False):
        super().__init__()
        self.engine = BoardEngine(board, strict=strict)

    def on_mount(self) -> None:
        self.push_screen(BoardScreen(self.engine))

    @property
    def board(self) -> Board:
        """The current board snapshot."""
        return self.engine.board
