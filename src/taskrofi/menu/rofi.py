# src/taskrofi/menu/rofi.py

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence

from ..errors import MenuCancelled, MenuError

logger = logging.getLogger(__name__)

# rofi exits with 1 when the user presses Escape.
EXIT_CANCELLED = 1


def _clean_label(label: str) -> str:
    # One label must stay one row in dmenu mode.
    return label.replace("\r", " ").replace("\n", " ")


class RofiMenu:
    """
    Popup menu backed by `rofi -dmenu` (or any command taking the same flags).

    Labels are written to stdin one per line; the selection comes back on stdout.
    """

    def __init__(self, command: str = "rofi -dmenu -i") -> None:
        self._argv = shlex.split(command)
        if not self._argv:
            raise ValueError("menu command is empty")

    def _run(self, extra_args: Sequence[str], labels: Sequence[str]) -> tuple[int, str]:
        argv = [*self._argv, *extra_args]
        stdin = "\n".join(_clean_label(lbl) for lbl in labels)
        logger.debug("Running menu %s with %d entries", argv, len(labels))
        try:
            result = subprocess.run(
                argv,
                input=stdin.encode("utf-8"),
                capture_output=True,
                check=False,
            )
        except OSError as e:
            raise MenuError(f"could not run {self._argv[0]}: {e}") from e

        try:
            stdout = result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MenuError(f"menu returned invalid UTF-8: {e}") from e

        return result.returncode, stdout

    @staticmethod
    def _check_status(code: int) -> None:
        if code == EXIT_CANCELLED:
            raise MenuCancelled()
        if code != 0:
            raise MenuError(f"menu exited with status {code}")

    def select(self, prompt: str, labels: Sequence[str]) -> int:
        """Let the user pick one of `labels`; returns its index."""
        code, stdout = self._run(["-p", prompt, "-format", "i"], labels)
        self._check_status(code)

        raw = stdout.strip()
        try:
            idx = int(raw)
        except ValueError:
            raise MenuError(f"menu returned {raw!r} instead of an index") from None
        if not 0 <= idx < len(labels):
            raise MenuError("not a valid selection")
        return idx

    def prompt(self, prompt: str, options: Sequence[str] = ()) -> str:
        """Free-text entry; `options` are offered as suggestions."""
        code, stdout = self._run(["-p", prompt, "-format", "s"], options)
        self._check_status(code)
        return stdout.strip()

    def show_error(self, message: str) -> None:
        code, _ = self._run(["-p", "taskrofi"], [f"Error: {message}"])
        # Enter and Escape both just close the error popup.
        if code not in (0, EXIT_CANCELLED):
            raise MenuError(f"menu exited with status {code}")
