# src/taskling/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import CommandResponse
from ..cli.dispatch import handle_line
from ..core.state import AppState

logger = logging.getLogger(__name__)

DIVIDER = "-" * 40


def _print_block(text: str, out: Callable[[str], None]) -> None:
    out(DIVIDER)
    out(text)
    out(DIVIDER)


def run_console_loop(
    state: AppState,
    *,
    read: Callable[[str], str] = input,
    out: Callable[[str], None] = print,
) -> None:
    """Read lines until 'bye', EOF or Ctrl+C; print one response block per line."""
    logger.info("Console connector started (tasks=%d).", state.task_list.size())

    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskling"))
    _print_block(
        f"Hello! I'm {app_name}. What can I do for you?\n"
        "Type 'help' to list commands, 'bye' to exit.",
        out,
    )

    if state.startup_notice:
        _print_block(state.startup_notice, out)

    while True:
        try:
            user_input = read("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            out("")
            break

        if not user_input:
            continue

        try:
            response = handle_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            response = CommandResponse("Internal error while handling a command.")

        _print_block(response.message, out)
        if response.should_exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
