"""Handlers for 'kancli task' commands."""

from kancli.cli._common import (
    open_board,
    output_json,
    output_result,
    parse_status,
    select_task,
    task_to_dict,
)
from kancli.model.task import Status, Task


def task_list(args) -> int:
    """List tasks, optionally for one status only."""
    statuses = [parse_status(args.status, args.json)] if args.status else list(Status)

    with open_board(args) as board:
        listing = [(status, list(board.column(status))) for status in statuses]

    if args.json:
        output_json([task_to_dict(t, i) for _, tasks in listing for i, t in enumerate(tasks, 1)])
        return 0

    for status, tasks in listing:
        print(status.title)
        for i, task in enumerate(tasks, 1):
            desc = f"  - {task.description}" if task.description else ""
            print(f"  {i:>3}. {task.title}{desc}")
    return 0


def task_add(args) -> int:
    """Append a new task to a column (todo by default)."""
    status = parse_status(args.status, args.json)
    task = Task(status=status, title=args.title, description=args.description)

    with open_board(args, save=True) as board:
        board.insert_task(task)
        position = len(board.column(status))

    output_result(
        task_to_dict(task, position),
        f"Added '{task.title}' to {status.title} at {position}",
        args.json,
    )
    return 0


def task_advance(args) -> int:
    """Move a task to the next column (done wraps to todo)."""
    status = parse_status(args.status, args.json)

    with open_board(args, save=True) as board:
        select_task(board, status, args.position, args.json)
        task = board.advance_selected()
        position = len(board.column(task.status))

    output_result(
        task_to_dict(task, position),
        f"Moved '{task.title}' to {task.status.title}",
        args.json,
    )
    return 0


def task_delete(args) -> int:
    """Delete a task permanently."""
    status = parse_status(args.status, args.json)

    with open_board(args, save=True) as board:
        select_task(board, status, args.position, args.json)
        task = board.delete_selected()

    output_result(
        task_to_dict(task, args.position),
        f"Deleted '{task.title}' from {status.title}",
        args.json,
    )
    return 0
