"""Column widget: header plus the column's tasks."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static

from kancli.model.column import Column

EMPTY_TEXT = "No items."
SELECTED_PREFIX = "│ "
PLAIN_PREFIX = "  "


def render_tasks(column: Column, focused: bool) -> Text:
    """Title line plus dimmed description line per task; cursor highlighted."""
    if not len(column):
        return Text(EMPTY_TEXT, style="dim")
    text = Text()
    for i, task in enumerate(column):
        selected = i == column.cursor
        if selected and focused:
            title_style, desc_style = "bold magenta", "magenta"
        elif selected:
            title_style, desc_style = "bold", "dim"
        else:
            title_style, desc_style = "", "dim"
        prefix = SELECTED_PREFIX if selected else PLAIN_PREFIX
        if i:
            text.append("\n\n")
        text.append(prefix, style=title_style)
        text.append(task.title, style=title_style)
        text.append("\n")
        text.append(prefix, style=desc_style)
        text.append(task.description.replace("\n", " "), style=desc_style)
    return text


class ColumnWidget(Vertical):
    """A single status column. Redrawn from the model after each action."""

    DEFAULT_CSS = """
    ColumnWidget {
        width: 1fr;
        height: 100%;
        padding: 1 2;
        border: hidden;
    }
    ColumnWidget.focused {
        border: round $accent;
    }
    ColumnWidget #column-header {
        width: 100%;
        text-style: bold;
        margin-bottom: 1;
    }
    """

    def __init__(self, column: Column) -> None:
        super().__init__(id=f"column-{column.status.slug}")
        self.column = column

    def compose(self) -> ComposeResult:
        yield Static(id="column-header")
        yield Static(id="column-tasks")

    def refresh_column(self, focused: bool) -> None:
        self.set_class(focused, "focused")
        self.query_one("#column-header", Static).update(f"{self.column.status.title} ({len(self.column)})")
        self.query_one("#column-tasks", Static).update(render_tasks(self.column, focused))
