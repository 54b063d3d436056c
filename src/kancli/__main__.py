"""Entry point for kancli."""

import sys

from kancli.cli import build_parser
from kancli.cli._common import error
from kancli.config import Config, setup_logging
from kancli.errors import KancliError


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.json = getattr(args, "json", False)
    args.config = Config.resolve(getattr(args, "data_dir", None), getattr(args, "log_file", None))
    interactive = not hasattr(args, "func")

    try:
        setup_logging(args.config, interactive=interactive)
    except KancliError as e:
        error(str(e), args.json)

    # No command = TUI mode
    if interactive:
        from kancli.ui import KancliApp

        app = KancliApp(args.config)
        app.run()
        sys.exit(app.return_code or 0)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
