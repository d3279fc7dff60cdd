# src/jotter/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState from the saved list, then runs the
console REPL until `bye`, EOF or Ctrl+C.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, save_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)

GREETING = "Hello! I'm {name}.\nWhat can I do for you?"


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (storage=%s)...", settings.app_name, settings.storage_path)

    state = create_initial_state(settings=settings)
    state.ui.show(GREETING.format(name=settings.app_name))

    try:
        run_console_loop(state)
    finally:
        if not save_state(state):
            logger.error("Final save failed; recent changes may be lost.")
        logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
