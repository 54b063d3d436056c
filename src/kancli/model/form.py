"""Two-step task creation form: title, then description."""

from __future__ import annotations

from enum import Enum

from kancli.errors import FormClosedError
from kancli.model.task import Status, Task


class Stage(Enum):
    EDITING_TITLE = "title"
    EDITING_DESCRIPTION = "description"
    SUBMITTED = "submitted"
    CANCELLED = "cancelled"


class Form:
    """Buffers for a task being created.

    Focus starts on the title and moves to the description on the first
    confirm; it never moves back. The second confirm builds the task.
    """

    def __init__(self, target_status: Status) -> None:
        self.target_status = target_status
        self.title = ""
        self.description = ""
        self.stage = Stage.EDITING_TITLE

    def __repr__(self) -> str:
        return f"<Form {self.target_status.slug} {self.stage.value}>"

    @property
    def open(self) -> bool:
        return self.stage in (Stage.EDITING_TITLE, Stage.EDITING_DESCRIPTION)

    @property
    def focused_field(self) -> str | None:
        """Name of the field taking input: "title", "description" or None."""
        if self.stage is Stage.EDITING_TITLE:
            return "title"
        if self.stage is Stage.EDITING_DESCRIPTION:
            return "description"
        return None

    def _check_open(self) -> None:
        if not self.open:
            raise FormClosedError(f"form is {self.stage.value}")

    def type_text(self, text: str) -> None:
        """Append text to the focused field. Title drops line breaks."""
        self._check_open()
        if self.stage is Stage.EDITING_TITLE:
            self.title += text.replace("\r", "").replace("\n", "")
        else:
            self.description += text

    def set_field(self, value: str) -> None:
        """Replace the focused field's contents (editors report whole values)."""
        self._check_open()
        if self.stage is Stage.EDITING_TITLE:
            self.title = value.replace("\r", "").replace("\n", "")
        else:
            self.description = value

    def confirm(self) -> Task | None:
        """Advance the form. Returns the new task once the description is confirmed."""
        self._check_open()
        if self.stage is Stage.EDITING_TITLE:
            self.stage = Stage.EDITING_DESCRIPTION
            return None
        self.stage = Stage.SUBMITTED
        return Task(status=self.target_status, title=self.title, description=self.description)

    def cancel(self) -> None:
        self._check_open()
        self.stage = Stage.CANCELLED
