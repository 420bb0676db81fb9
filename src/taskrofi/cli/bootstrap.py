# src/taskrofi/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the concrete rofi/task wrappers and the URL opener into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.links import make_url_opener
from ..core.state import AppState
from ..menu.rofi import RofiMenu
from ..tasks.taskwarrior import TaskwarriorStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    state = AppState(
        settings=settings,
        menu=RofiMenu(settings.menu_command),
        tasks=TaskwarriorStore(settings.task_bin),
        open_url=make_url_opener(settings.open_command),
    )
    logger.debug("State ready (task=%s menu=%s)", settings.task_bin, settings.menu_command)
    return state
