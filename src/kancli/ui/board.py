"""Board screen showing the three status columns."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer

from kancli.model.board import Board
from kancli.ui.column import ColumnWidget


class BoardScreen(Screen):
    """Main board screen. Every action mutates the board, then redraws."""

    BINDINGS = [
        Binding("left,h", "focus_prev", "Left"),
        Binding("right,l", "focus_next", "Right"),
        Binding("up,k", "select_prev", "Up"),
        Binding("down,j", "select_next", "Down"),
        Binding("n", "new_task", "New"),
        Binding("d,backspace", "delete", "Delete"),
        Binding("enter", "advance", "Advance"),
        Binding("q,escape", "app.quit", "Quit"),
    ]

    DEFAULT_CSS = """
    BoardScreen #columns {
        height: 1fr;
    }
    """

    def __init__(self, board: Board):
        super().__init__()
        self.board = board

    def compose(self) -> ComposeResult:
        with Horizontal(id="columns"):
            for column in self.board.columns:
                yield ColumnWidget(column)
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_board()

    def refresh_board(self) -> None:
        """Re-derive every column's view from the model."""
        for widget in self.query(ColumnWidget):
            widget.refresh_column(widget.column.status == self.board.focused)

    def action_focus_prev(self) -> None:
        self.board.focus_prev()
        self.refresh_board()

    def action_focus_next(self) -> None:
        self.board.focus_next()
        self.refresh_board()

    def action_select_prev(self) -> None:
        self.board.select_prev()
        self.refresh_board()

    def action_select_next(self) -> None:
        self.board.select_next()
        self.refresh_board()

    def action_advance(self) -> None:
        self.board.advance_selected()
        self.refresh_board()

    def action_delete(self) -> None:
        self.board.delete_selected()
        self.refresh_board()

    def action_new_task(self) -> None:
        """Hand over to the create form (the app flushes the board first)."""
        self.app.open_form()
