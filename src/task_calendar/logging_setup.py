# src/task_calendar/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the console readable while serving:
    - allow all task_calendar logs
    - allow uvicorn lifecycle messages (startup, shutdown)
    - suppress per-request access lines unless WARNING+
    - suppress Python warnings (captured as 'py.warnings') unless ERROR+
    - suppress other third-party noise unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "task_calendar" or name.startswith("task_calendar."):
            return True

        # Access log is one line per request; the file handler still gets it.
        if name == "uvicorn.access":
            return record.levelno >= logging.WARNING

        if name == "uvicorn" or name.startswith("uvicorn."):
            return record.levelno >= logging.INFO

        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/task_calendar",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Install the server's log handlers on the root logger and return the log file path.

    stderr shows service events and uvicorn lifecycle lines through
    _ConsoleNoiseFilter. <log_dir>/task_calendar.log keeps every record,
    request access lines included. uvicorn is started with log_config=None
    so its loggers propagate here instead of installing their own handlers.

    Re-running replaces the previous handlers.
    """
    log_file = Path(log_dir) / "task_calendar.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.addFilter(_ConsoleNoiseFilter())

    server_log = logging.FileHandler(str(log_file), encoding="utf-8")
    server_log.setLevel(file_level)

    for handler in (console, server_log):
        handler.setFormatter(fmt)
        root.addHandler(handler)

    logging.captureWarnings(True)
    return log_file
