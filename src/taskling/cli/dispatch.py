# src/taskling/cli/dispatch.py

from __future__ import annotations

import logging

from ..core.state import AppState
from ..errors import TaskError
from .commands import CommandResponse, execute_command
from .parser import parse_command

logger = logging.getLogger(__name__)


def handle_line(state: AppState, line: str) -> CommandResponse:
    """
    Dispatch boundary: one input line in, one response out.

    User errors (TaskError) become the response message; anything else
    propagates to the connector.
    """
    with state.lock:
        try:
            command = parse_command(line)
            return execute_command(command, state.task_list, state.task_store)
        except TaskError as e:
            logger.info("Command rejected (%s): %s", type(e).__name__, e)
            return CommandResponse(f"Oops! {e}")
