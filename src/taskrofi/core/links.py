# src/taskrofi/core/links.py

from __future__ import annotations

import logging
import shlex
import subprocess
import webbrowser

from ..errors import TaskMenuError
from .ports import UrlOpener

logger = logging.getLogger(__name__)


def make_url_opener(open_command: str | None = None) -> UrlOpener:
    """
    Build the callable used by the Open action.

    With `open_command` (e.g. "xdg-open") the URL is appended to that command line;
    without it the platform's default browser handler is used.
    """
    if open_command:
        argv = shlex.split(open_command)

        def _open_with_command(url: str) -> None:
            logger.debug("Opening %s with %s", url, argv)
            try:
                subprocess.run([*argv, url], check=True, capture_output=True)
            except (OSError, subprocess.CalledProcessError) as e:
                raise TaskMenuError(f"Could not open item specified by annotation: {e}") from e

        return _open_with_command

    def _open_with_browser(url: str) -> None:
        logger.debug("Opening %s with the default browser", url)
        if not webbrowser.open(url):
            raise TaskMenuError("Could not open item specified by annotation")

    return _open_with_browser
