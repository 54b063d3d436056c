"""Task creation screen: a title input followed by a description editor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.message import Message
from textual.screen import Screen
from textual.widgets import Footer, Input, Static, TextArea

from kancli.model.form import Form
from kancli.model.task import Task

if TYPE_CHECKING:
    from textual.events import Key


class DescriptionEditor(TextArea):
    """Multi-line editor where enter confirms and escape cancels."""

    class Confirm(Message):
        """Enter pressed: the description is finished."""

    class Cancel(Message):
        """Escape pressed: abandon the form."""

    async def _on_key(self, event: Key) -> None:
        if event.key == "escape":
            event.prevent_default()
            event.stop()
            self.post_message(self.Cancel())
        elif event.key == "enter":
            event.prevent_default()
            event.stop()
            self.post_message(self.Confirm())
        else:
            await super()._on_key(event)


class TaskFormScreen(Screen[Task | None]):
    """Replaces the board while a task is being written.

    Dismisses with the new Task on the second confirm, or None on cancel.
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    DEFAULT_CSS = """
    TaskFormScreen #form {
        padding: 1 2;
        height: auto;
    }
    TaskFormScreen #form-heading {
        text-style: bold;
        margin-bottom: 1;
    }
    TaskFormScreen #description {
        height: 8;
    }
    """

    def __init__(self, form: Form):
        super().__init__()
        self.form = form

    def compose(self) -> ComposeResult:
        with Vertical(id="form"):
            yield Static(f"New task in {self.form.target_status.title}", id="form-heading")
            yield Input(self.form.title, placeholder="Title", id="title")
            yield DescriptionEditor(self.form.description, id="description")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#title", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        if self.form.focused_field == "title":
            self.form.set_field(event.value)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self.form.focused_field == "description":
            self.form.set_field(event.text_area.text)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        if self.form.focused_field != "title":
            return
        self.form.set_field(event.value)
        self.form.confirm()
        title = self.query_one("#title", Input)
        title.disabled = True
        self.query_one("#description", DescriptionEditor).focus()

    def on_description_editor_confirm(self, event: DescriptionEditor.Confirm) -> None:
        event.stop()
        if self.form.focused_field != "description":
            return
        self.form.set_field(self.query_one("#description", DescriptionEditor).text)
        self.dismiss(self.form.confirm())

    def on_description_editor_cancel(self, event: DescriptionEditor.Cancel) -> None:
        event.stop()
        self.action_cancel()

    def action_cancel(self) -> None:
        if self.form.open:
            self.form.cancel()
            self.dismiss(None)
