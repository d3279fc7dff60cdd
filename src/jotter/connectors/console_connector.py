# src/jotter/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..core.errors import JotterError
from ..core.parser import parse
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = ">>> "
SAVE_FAILED = "Warning: could not save your list. Changes are kept in memory only."


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


class ConsoleUi:
    """stdin/stdout UI. Multi-line replies are indented under the timestamp."""

    def __init__(self, *, timestamps: bool = True, prompt: str = PROMPT) -> None:
        self.timestamps = timestamps
        self.prompt = prompt

    def read_line(self) -> str:
        return input(self.prompt)

    def _prefix(self) -> str:
        return f"[{_ts_local()}] " if self.timestamps else ""

    def show(self, text: str) -> None:
        prefix = self._prefix()
        pad = " " * len(prefix)
        lines = text.splitlines() or [""]
        print(prefix + lines[0])
        for line in lines[1:]:
            print(pad + line)

    def show_error(self, text: str) -> None:
        self.show(f"OOPS!!! {text}")


def handle_line(state: AppState, line: str) -> bool:
    """
    Parse and run one line, report the outcome through state.ui.

    Returns True when the session should end.
    """
    try:
        command = parse(line)
        reply = command.execute(state.tasks)
    except JotterError as e:
        logger.info("Rejected input %r: %s", line, e)
        state.ui.show_error(str(e))
        return False
    except Exception:
        logger.exception("Command crashed on input %r", line)
        state.ui.show_error("Internal error while handling that command.")
        return False

    logger.debug("Ran %s command (mutates=%s)", command.tag, command.mutates)
    state.ui.show(reply)

    if command.mutates and state.autosave and not state.storage.save(state.tasks):
        state.ui.show_error(SAVE_FAILED)

    return command.is_exit()


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.tasks))

    while True:
        try:
            line = state.ui.read_line().strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line:
            continue

        if handle_line(state, line):
            logger.info("Exit command received.")
            break

    logger.info("Console connector finished.")
