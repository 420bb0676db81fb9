# tests/conftest.py

from __future__ import annotations

from datetime import UTC, datetime
from types import SimpleNamespace

import pytest

from taskrofi.core.state import AppState
from taskrofi.tasks.task_models import Annotation, Task

from .fakes import FakeMenu, FakeOpener, FakeTaskStore


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the action handlers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests independent of the environment.
    """
    return SimpleNamespace(
        app_name="taskrofi",
        label_width=60,
        wait_presets=["tomorrow", "1h"],
    )


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        Task(uuid="aaa", description="Low priority chore", id=1, urgency=0.5),
        Task(
            uuid="bbb",
            description="Read the paper",
            id=2,
            urgency=9.1,
            project="research",
            annotations=[
                Annotation(datetime(2024, 1, 2, 9, 0, tzinfo=UTC), "https://example.org/paper"),
                Annotation(datetime(2024, 3, 4, 9, 0, tzinfo=UTC), "http://example.org/slides"),
                Annotation(datetime(2024, 2, 1, 9, 0, tzinfo=UTC), "remember the appendix"),
            ],
        ),
        Task(uuid="ccc", description="No urgency yet", id=3),
    ]


@pytest.fixture()
def store(sample_tasks: list[Task]) -> FakeTaskStore:
    return FakeTaskStore(tasks=sample_tasks)


@pytest.fixture()
def menu() -> FakeMenu:
    return FakeMenu()


@pytest.fixture()
def opener() -> FakeOpener:
    return FakeOpener()


@pytest.fixture()
def state(settings, menu, store, opener) -> AppState:
    """AppState wired with deterministic fakes instead of rofi and task."""
    return AppState(settings=settings, menu=menu, tasks=store, open_url=opener)
