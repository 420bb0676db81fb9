# tests/fakes.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from taskrofi.errors import MenuCancelled
from taskrofi.tasks.task_models import Task


class FakeMenu:
    """
    Scripted MenuPicker for unit tests.

    Each answer is consumed in order by select()/prompt():
    - int: index to return from select()
    - str: for select(), the first label containing it; for prompt(), the typed text
    - an exception instance: raised instead of answering
    """

    def __init__(self, answers: Sequence[Any] = ()) -> None:
        self.answers: list[Any] = list(answers)
        self.calls: list[tuple[str, str, list[str]]] = []
        self.errors: list[str] = []

    def _next(self) -> Any:
        if not self.answers:
            raise MenuCancelled()
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def select(self, prompt: str, labels: Sequence[str]) -> int:
        self.calls.append(("select", prompt, list(labels)))
        answer = self._next()
        if isinstance(answer, int):
            return answer
        for i, label in enumerate(labels):
            if answer in label:
                return i
        raise AssertionError(f"no label contains {answer!r}: {labels}")

    def prompt(self, prompt: str, options: Sequence[str] = ()) -> str:
        self.calls.append(("prompt", prompt, list(options)))
        return str(self._next())

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def prompts(self) -> list[str]:
        return [p for _, p, _ in self.calls]


@dataclass
class FakeTaskStore:
    """In-memory TaskRepo: queries return the seeded tasks, writes are recorded."""

    tasks: list[Task] = field(default_factory=list)
    filter_text: str = "status:pending"
    next_id: int = 42
    queries: list[str] = field(default_factory=list)
    added: list[str] = field(default_factory=list)
    saved: list[Task] = field(default_factory=list)
    modified: list[tuple[str, list[str]]] = field(default_factory=list)

    def default_filter(self) -> str:
        return self.filter_text

    def query(self, filter_text: str) -> list[Task]:
        self.queries.append(filter_text)
        if filter_text.isdigit():
            return [t for t in self.tasks if t.id == int(filter_text)]
        return list(self.tasks)

    def add(self, text: str) -> int:
        self.added.append(text)
        self.tasks.append(Task(uuid=f"uuid-{self.next_id}", description=text, id=self.next_id))
        return self.next_id

    def save(self, task: Task) -> None:
        self.saved.append(task)

    def modify(self, ref: str, words: Sequence[str]) -> None:
        self.modified.append((ref, list(words)))


@dataclass
class FakeOpener:
    opened: list[str] = field(default_factory=list)

    def __call__(self, url: str) -> None:
        self.opened.append(url)
