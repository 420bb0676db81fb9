# src/taskrofi/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the action menu until the user
exits. Failures end up as one "Error: ..." line shown through the same menu.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..core.actions import registry as action_registry
from ..core.state import AppState
from ..errors import MenuCancelled, TaskMenuError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def run_menu_loop(state: AppState) -> None:
    while True:
        action = action_registry.choose_action(state)
        if not action_registry.handle(state, action):
            return


def _report_error(state: AppState, message: str) -> None:
    try:
        state.menu.show_error(message)
    except Exception:
        logger.exception("Could not show the error in the menu.")
        print(f"Error: {message}", file=sys.stderr)


def run(state: AppState) -> int:
    """Run the UI and apply the error policy; returns the process exit status."""
    try:
        run_menu_loop(state)
    except MenuCancelled:
        logger.debug("Menu dismissed, exiting.")
        return 0
    except TaskMenuError as e:
        logger.warning("%s: %s", e.__class__.__name__, e.message)
        _report_error(state, e.message)
        return 1
    except Exception as e:
        logger.exception("Unexpected failure.")
        _report_error(state, str(e) or e.__class__.__name__)
        return 1
    return 0


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_dir = settings.data_dir if settings.log_file_enabled else None
    try:
        setup_logging(log_dir=log_dir, console_level=console_level)
    except OSError:
        # Unwritable data dir: keep going with console logging only.
        setup_logging(log_dir=None, console_level=console_level)
        logger.warning("Could not open log file in %s", log_dir)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    code = run(state)
    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
