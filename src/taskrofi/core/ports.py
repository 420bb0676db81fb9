# src/taskrofi/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the action handlers.

Handlers depend on Protocols instead of the concrete rofi/task wrappers.
This keeps the external programs swappable and makes testing easier.
"""

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class MenuPicker(Protocol):
    """Popup selection UI. Raises MenuCancelled when the user dismisses it."""

    def select(self, prompt: str, labels: Sequence[str]) -> int: ...
    def prompt(self, prompt: str, options: Sequence[str] = ()) -> str: ...
    def show_error(self, message: str) -> None: ...


class TaskRepo(Protocol):
    """The external task database, one blocking call per operation."""

    def default_filter(self) -> str: ...
    def query(self, filter_text: str) -> list[Task]: ...
    def add(self, text: str) -> int: ...
    def save(self, task: Task) -> None: ...
    def modify(self, ref: str, words: Sequence[str]) -> None: ...


class UrlOpener(Protocol):
    def __call__(self, url: str) -> None: ...
