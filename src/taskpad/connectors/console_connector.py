# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..cli.commands import render_tasks
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "> "
EDIT_PROMPT = "edit> "


def handle_line(state: AppState, line: str) -> str | None:
    """
    Process one console line and return the text to print (None: nothing).

    Plain text adds a task, or replaces the draft while an edit is open.
    """
    if not line.strip():
        return None

    try:
        reply = command_registry.handle(state, line)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    if reply is not None:
        return reply

    store = state.store
    if store.draft is not None:
        store.update_draft(line)
        return "Draft updated. /save to keep it, /cancel to discard."

    task = store.add(line)
    if task is None:
        return "Nothing to add."
    return f"Added #{len(store)}: {task.title}"


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (%d task(s)).", len(state.store))
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskpad"))

    print(f"{app_name}: type a task to add it. Use /help for commands, /exit to quit.\n")
    print(render_tasks(state))

    while True:
        try:
            line = input(EDIT_PROMPT if state.store.draft is not None else PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if line.strip().lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, line)
        if reply is not None:
            print(reply)

    logger.info("Console connector finished.")
