"""Shared helpers for CLI command handlers."""

import json
import sys
from contextlib import contextmanager
from typing import Iterator

from kancli.errors import KancliError
from kancli.kv import KV
from kancli.model.board import Board
from kancli.model.loader import load_board
from kancli.model.task import Status, Task
from kancli.model.writer import save_board


@contextmanager
def open_board(args, save: bool = False) -> Iterator[Board]:
    """Open the store and load the board; save on exit if asked.

    Exits 1 with a message on storage or decoding failures.
    """
    try:
        kv = KV.open(args.config.db_path)
    except KancliError as e:
        error(str(e), args.json)
    with kv:
        try:
            board = load_board(kv)
        except KancliError as e:
            error(str(e), args.json)
        yield board
        if save:
            try:
                save_board(board, kv)
            except KancliError as e:
                error(str(e), args.json)


def parse_status(name: str, json_mode: bool) -> Status:
    """Status from its name. Exit 1 listing valid names if unknown."""
    try:
        return Status.parse(name)
    except ValueError:
        valid = ", ".join(s.slug for s in Status)
        error(f"Unknown status '{name}'. Valid: {valid}", json_mode)


def select_task(board: Board, status: Status, position: int, json_mode: bool) -> Task:
    """Focus status and put the cursor on 1-based position. Exit 1 if out of range."""
    column = board.column(status)
    if not 1 <= position <= len(column):
        error(f"No task at position {position} in {status.slug} ({len(column)} tasks).", json_mode)
    board.focused = status
    column.select(position - 1)
    return column.selected


def task_to_dict(task: Task, position: int) -> dict:
    return {
        "status": task.status.slug,
        "position": position,
        "title": task.title,
        "description": task.description,
    }


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2, ensure_ascii=False))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)
