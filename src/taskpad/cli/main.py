# src/taskpad/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (which loads the task list), then runs
the console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        slots = getattr(state, "slots", None)
        if slots is not None and hasattr(slots, "close"):
            slots.close()
    except Exception:
        logger.debug("Slot store close failed.", exc_info=True)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = settings.data_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
