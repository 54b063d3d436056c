"""Runtime configuration: where the store lives and where logs go."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from kancli.constants import APP_NAME, DB_FILENAME
from kancli.errors import ConfigError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_data_dir(env: Mapping[str, str]) -> Path:
    """KANCLI_DATA_DIR, else $XDG_DATA_HOME/kancli, else ~/.local/share/kancli."""
    if env.get("KANCLI_DATA_DIR"):
        return Path(env["KANCLI_DATA_DIR"]).expanduser()
    if env.get("XDG_DATA_HOME"):
        return Path(env["XDG_DATA_HOME"]).expanduser() / APP_NAME
    return Path.home() / ".local" / "share" / APP_NAME


@dataclass(frozen=True)
class Config:
    data_dir: Path
    log_file: Path | None = None
    log_level: str = "WARNING"

    @property
    def db_path(self) -> Path:
        return self.data_dir / DB_FILENAME

    @classmethod
    def resolve(
        cls,
        data_dir: str | None = None,
        log_file: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> Config:
        """Combine command-line values with the environment. Arguments win."""
        env = os.environ if env is None else env
        log_file = log_file or env.get("KANCLI_LOG_FILE")
        return cls(
            data_dir=Path(data_dir).expanduser() if data_dir else default_data_dir(env),
            log_file=Path(log_file).expanduser() if log_file else None,
            log_level=env.get("KANCLI_LOG_LEVEL", "WARNING").upper(),
        )


def setup_logging(config: Config, interactive: bool) -> None:
    """Configure the root logger.

    The TUI owns the terminal, so it only logs when a log file is set.
    Commands log to stderr otherwise. Raises ConfigError if the log file
    cannot be created.
    """
    level = getattr(logging, config.log_level, logging.WARNING)
    if config.log_file is not None:
        try:
            config.log_file.parent.mkdir(parents=True, exist_ok=True)
            logging.basicConfig(format=LOG_FORMAT, filename=str(config.log_file), level=level)
        except OSError as e:
            raise ConfigError(f"cannot open log file {config.log_file}: {e}") from e
    elif not interactive:
        logging.basicConfig(format="%(levelname)s %(message)s", stream=sys.stderr, level=level)
