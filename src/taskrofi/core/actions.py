# src/taskrofi/core/actions.py

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from ..config import DEFAULT_WAIT_PRESETS
from ..errors import InputError, MenuCancelled, UnexpectedOutputError
from ..menu.labeled import LabeledItem, choose
from ..tasks.task_models import Task, TaskStatus, now_utc
from .formatting import DEFAULT_MAX_DESC, format_annotation, format_task
from .state import AppState

# A handler returns True to show the action menu again, False to quit.
ActionHandler = Callable[[AppState], bool]

logger = logging.getLogger(__name__)

ADD_SEPARATOR = "--"


class Action(StrEnum):
    LIST = "List"
    ADD = "Add"
    DONE = "Done"
    START = "Start"
    STOP = "Stop"
    DELETE = "Delete"
    OPEN = "Open"
    MOD = "Mod"
    WAIT = "Wait"
    ANNOTATE = "Annotate"
    EXIT = "Exit"

    @property
    def label(self) -> str:
        if self is Action.EXIT:
            return "Exit (Escape)"
        return self.value


class ActionRegistry:
    """Ordered action -> handler table behind the top-level menu."""

    def __init__(self) -> None:
        self._handlers: dict[Action, ActionHandler] = {}

    def register(self, action: Action, handler: ActionHandler) -> None:
        self._handlers[action] = handler

    def actions(self) -> list[Action]:
        return list(self._handlers)

    def choose_action(self, state: AppState) -> Action:
        return choose(
            state.menu,
            "Choose an action",
            [LabeledItem(label=a.label, item=a) for a in self.actions()],
        )

    def handle(self, state: AppState, action: Action) -> bool:
        handler = self._handlers.get(action)
        if handler is None:
            raise InputError(f"Unknown action: {action}")
        logger.debug("Handling action %s", action.value)
        return handler(state)


registry = ActionRegistry()


# ---- helpers ----


def sort_by_urgency(tasks: list[Task]) -> list[Task]:
    """Most urgent first; tasks without urgency go last."""
    return sorted(tasks, key=lambda t: (t.urgency is None, -(t.urgency or 0.0)))


def task_menu(state: AppState, prompt: str) -> Task:
    """Let the user pick one task of the default report."""
    tasks = sort_by_urgency(state.tasks.query(state.tasks.default_filter()))
    max_desc = int(getattr(state.settings, "label_width", DEFAULT_MAX_DESC))
    return choose(
        state.menu,
        prompt,
        [LabeledItem(label=format_task(t, max_desc), item=t) for t in tasks],
    )


def parse_add_input(text: str) -> tuple[str, list[str]]:
    """
    Split "task words -- first note -- second note".

    Returns the task text and the (non-empty) annotations.
    """
    head, *rest = text.split(ADD_SEPARATOR)
    task_text = head.strip()
    if not task_text:
        raise InputError("No input given to add")
    annotations = [part.strip() for part in rest if part.strip()]
    return task_text, annotations


def _require_text(value: str, what: str) -> str:
    if not value:
        raise InputError(f"No {what} given")
    return value


# ---- handlers ----


def act_list(state: AppState) -> bool:
    try:
        task_menu(state, "Press enter to go back")
    except MenuCancelled:
        pass
    return True


def act_add(state: AppState) -> bool:
    text = state.menu.prompt("task -- annotation")
    task_text, annotations = parse_add_input(text)

    task_id = state.tasks.add(task_text)
    if not annotations:
        return True

    tasks = state.tasks.query(str(task_id))
    if len(tasks) != 1:
        raise UnexpectedOutputError("Querying by ID should return exactly one task")
    task = tasks[0]

    stamp = now_utc()
    for ann in annotations:
        task.add_annotation(ann, entry=stamp)
    state.tasks.save(task)
    return True


def act_done(state: AppState) -> bool:
    task = task_menu(state, "Choose a task")
    task.status = TaskStatus.COMPLETED
    task.end = now_utc()
    state.tasks.save(task)
    return True


def act_delete(state: AppState) -> bool:
    task = task_menu(state, "Choose a task")
    task.status = TaskStatus.DELETED
    task.end = now_utc()
    state.tasks.save(task)
    return True


def act_start(state: AppState) -> bool:
    task = task_menu(state, "Choose a task")
    task.start = now_utc()
    state.tasks.save(task)
    return True


def act_stop(state: AppState) -> bool:
    task = task_menu(state, "Choose a task")
    task.start = None
    state.tasks.save(task)
    return True


def act_annotate(state: AppState) -> bool:
    task = task_menu(state, "Choose a task")
    text = _require_text(state.menu.prompt("annotation"), "annotation")
    task.add_annotation(text)
    state.tasks.save(task)
    return True


def act_wait(state: AppState) -> bool:
    task = task_menu(state, "Choose a task")
    presets = list(getattr(state.settings, "wait_presets", None) or DEFAULT_WAIT_PRESETS)
    until = _require_text(state.menu.prompt("Wait until?", presets), "wait time")
    # The in-memory record is stale after this; it is not saved again.
    state.tasks.modify(task.uuid, [f"wait:{until}"])
    return True


def act_mod(state: AppState) -> bool:
    task = task_menu(state, "Choose a task")
    text = _require_text(state.menu.prompt(f"Mods for task {task.ref}"), "modifications")
    state.tasks.modify(task.ref, text.split())
    return True


def act_open(state: AppState) -> bool:
    task = task_menu(state, "Choose a task")
    if not task.annotations:
        raise InputError("No annotations found")

    links = task.link_annotations()
    if not links:
        raise InputError("No annotation links found")

    if len(links) == 1:
        chosen = links[0]
    else:
        rows = sorted(
            (LabeledItem(label=format_annotation(a), item=a) for a in links),
            key=lambda r: r.label,
            reverse=True,
        )
        chosen = choose(state.menu, "Choose annotation", rows)

    state.open_url(chosen.description)
    logger.info("Opened %s from task %s", chosen.description, task.uuid)
    return False


def act_exit(state: AppState) -> bool:
    return False


registry.register(Action.LIST, act_list)
registry.register(Action.ADD, act_add)
registry.register(Action.DONE, act_done)
registry.register(Action.START, act_start)
registry.register(Action.STOP, act_stop)
registry.register(Action.DELETE, act_delete)
registry.register(Action.OPEN, act_open)
registry.register(Action.MOD, act_mod)
registry.register(Action.WAIT, act_wait)
registry.register(Action.ANNOTATE, act_annotate)
registry.register(Action.EXIT, act_exit)
