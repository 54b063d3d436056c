"""Main Textual application for kancli."""

import logging

from textual.app import App
from textual.binding import Binding

from kancli.config import Config
from kancli.errors import KancliError
from kancli.kv import KV
from kancli.model.task import Task
from kancli.session import Session
from kancli.ui.board import BoardScreen
from kancli.ui.form import TaskFormScreen

logger = logging.getLogger(__name__)


class KancliApp(App):
    """Terminal kanban board TUI."""

    TITLE = "kancli"
    BINDINGS = [Binding("ctrl+c", "abort", "Abort", show=False, priority=True)]

    def __init__(self, config: Config | None = None, kv: KV | None = None):
        super().__init__()
        self.config = config
        self.kv = kv
        self.session: Session | None = None
        self.board_screen: BoardScreen | None = None

    @property
    def active_surface(self) -> str | None:
        """Which surface takes input: board, form, or None before loading."""
        if self.session is None:
            return None
        return "form" if self.session.form is not None else "board"

    def on_mount(self) -> None:
        try:
            if self.kv is None:
                self.kv = KV.open(self.config.db_path)
            self.session = Session.open(self.kv)
        except KancliError as e:
            self._fail(e)
            return
        if self.session.load_error is not None:
            self.notify(
                f"{self.session.load_error}. Starting with an empty board.",
                title="Could not read saved board",
                severity="error",
                timeout=10,
            )
        self.board_screen = BoardScreen(self.session.board)
        self.push_screen(self.board_screen)

    def _fail(self, error: Exception) -> None:
        """Leave the terminal cleanly and report the error."""
        logger.error("%s", error)
        self.exit(return_code=1, message=f"error: {error}")

    def open_form(self) -> None:
        """Flush the board and switch to a fresh create form."""
        try:
            form = self.session.open_form()
        except KancliError as e:
            self._fail(e)
            return
        self.push_screen(TaskFormScreen(form), self._on_form_closed)

    def _on_form_closed(self, task: Task | None) -> None:
        self.session.close_form(task)
        self.board_screen.refresh_board()

    def action_quit(self) -> None:
        """Save and quit."""
        if self.session is not None:
            try:
                self.session.quit()
            except KancliError as e:
                self._fail(e)
                return
        self.exit()

    def action_abort(self) -> None:
        """Quit immediately without saving."""
        if self.session is not None:
            try:
                self.session.abort()
            except KancliError as e:
                logger.warning("closing store on abort: %s", e)
        self.exit()
