"""Application controller: owns the board, the store and the active surface."""

from __future__ import annotations

import logging

from kancli.errors import SnapshotError, SurfaceError
from kancli.kv import KV
from kancli.model.board import Board
from kancli.model.form import Form
from kancli.model.loader import recover_board
from kancli.model.task import Task
from kancli.model.writer import save_board

logger = logging.getLogger(__name__)

Surface = Board | Form


class Session:
    """Exactly one of the board or a form is active at any time.

    Opening a form flushes the board first; closing it delivers the new
    task to the board before the board is active again.
    """

    def __init__(self, kv: KV, board: Board | None = None) -> None:
        self.kv = kv
        self.board = board if board is not None else Board()
        self.active: Surface = self.board
        self.load_error: SnapshotError | None = None

    @classmethod
    def open(cls, kv: KV) -> Session:
        """Load the stored board, initializing the store on first run."""
        board, error = recover_board(kv)
        session = cls(kv, board)
        session.load_error = error
        return session

    @property
    def form(self) -> Form | None:
        return self.active if isinstance(self.active, Form) else None

    def save(self) -> None:
        save_board(self.board, self.kv)

    def open_form(self) -> Form:
        """Flush the board and start a form for the focused column."""
        if self.active is not self.board:
            raise SurfaceError("a form is already open")
        self.save()
        form = Form(self.board.focused)
        self.active = form
        logger.debug("opened %r", form)
        return form

    def close_form(self, task: Task | None = None) -> None:
        """Return to the board, inserting task if the form produced one."""
        if self.form is None:
            raise SurfaceError("no form is open")
        if task is not None:
            self.board.insert_task(task)
            logger.debug("created %r", task)
        self.active = self.board

    def quit(self) -> None:
        """Final flush, then release the store even if the flush fails."""
        try:
            self.save()
        finally:
            self.kv.close()

    def abort(self) -> None:
        """Release the store without flushing."""
        self.kv.close()
