"""Textual UI for kancli."""

from kancli.ui.app import KancliApp
from kancli.ui.board import BoardScreen
from kancli.ui.column import ColumnWidget
from kancli.ui.form import DescriptionEditor, TaskFormScreen

__all__ = [
    "BoardScreen",
    "ColumnWidget",
    "DescriptionEditor",
    "KancliApp",
    "TaskFormScreen",
]
