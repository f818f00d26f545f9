# src/task_calendar/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then serves the HTTP API with uvicorn
until interrupted. Tasks live in memory only and are gone after exit.
"""

from __future__ import annotations

import argparse
import logging

import uvicorn

from ..api.app import create_app
from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def build_parser(settings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="task-calendar",
        description="Single-user task tracker with a calendar view (in-memory HTTP API).",
    )
    p.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host}).")
    p.add_argument("--port", type=int, default=settings.port, help=f"Port (default: {settings.port}).")
    return p


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    ns = build_parser(settings).parse_args(argv)

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_file = setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s on %s:%s (log file: %s)...", settings.app_name, ns.host, ns.port, log_file)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)
    app = create_app(state)

    try:
        # log_config=None keeps uvicorn on the handlers installed above.
        uvicorn.run(app, host=ns.host, port=ns.port, log_config=None)
    finally:
        logger.info("Stopped with %d task(s) in memory. Bye.", state.task_store.count())


if __name__ == "__main__":
    main()
