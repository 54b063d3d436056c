"""CLI argument parser and dispatch for kancli."""

import argparse

from kancli.cli.board import board_summary
from kancli.cli.task import task_add, task_advance, task_delete, task_list


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser.

    Common options use SUPPRESS defaults so a value given before the noun
    is not overwritten by the subparser's own default.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--data-dir", default=argparse.SUPPRESS, help="Directory holding the board database")
    common.add_argument("--log-file", default=argparse.SUPPRESS, help="Write logs to this file")
    common.add_argument("--json", action="store_true", default=argparse.SUPPRESS, help="Machine-readable JSON output")

    parser = argparse.ArgumentParser(
        prog="kancli",
        description="Terminal kanban board. Run with no command to open the board.",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- board ---
    board_p = nouns.add_parser("board", help="Show column summary", parents=[common])
    board_p.set_defaults(func=board_summary)

    # --- task ---
    task_p = nouns.add_parser("task", help="Task operations", parents=[common])
    task_verbs = task_p.add_subparsers(dest="verb")

    task_list_p = task_verbs.add_parser("list", help="List tasks", parents=[common])
    task_list_p.add_argument("--status", help="Only this column (todo, in-progress, done)")
    task_list_p.set_defaults(func=task_list)

    task_add_p = task_verbs.add_parser("add", help="Create a task", parents=[common])
    task_add_p.add_argument("title", help="Task title")
    task_add_p.add_argument("--description", default="", help="Task description")
    task_add_p.add_argument("--status", default="todo", help="Target column (default: todo)")
    task_add_p.set_defaults(func=task_add)

    task_advance_p = task_verbs.add_parser("advance", help="Move a task to the next column", parents=[common])
    task_advance_p.add_argument("status", help="Column holding the task")
    task_advance_p.add_argument("position", type=int, help="Position in column (1-indexed)")
    task_advance_p.set_defaults(func=task_advance)

    task_delete_p = task_verbs.add_parser("delete", help="Delete a task", parents=[common])
    task_delete_p.add_argument("status", help="Column holding the task")
    task_delete_p.add_argument("position", type=int, help="Position in column (1-indexed)")
    task_delete_p.set_defaults(func=task_delete)

    # task with no verb = list
    task_p.set_defaults(func=task_list, status=None)

    return parser
