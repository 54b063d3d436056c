"""Handler for 'kancli board'."""

from kancli.cli._common import open_board, output_json


def board_summary(args) -> int:
    """Show each column with its task count."""
    with open_board(args) as board:
        columns = [{"status": c.status.slug, "name": c.status.title, "tasks": len(c)} for c in board]

    if args.json:
        output_json({"columns": columns})
    else:
        for c in columns:
            tasks = "task" if c["tasks"] == 1 else "tasks"
            print(f"{c['name']:<12} {c['tasks']} {tasks}")

    return 0
