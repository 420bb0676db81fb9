# src/taskrofi/core/formatting.py

from __future__ import annotations

from ..tasks.task_models import Annotation, Task

DEFAULT_MAX_DESC = 60
ELLIPSIS = "..."


def format_task(task: Task, max_desc: int = DEFAULT_MAX_DESC) -> str:
    """
    One menu row for a task, e.g. "[ 3] Write report      ... (u=+8.20) proj:work".

    Descriptions are padded to `max_desc` so urgency/project line up,
    and longer ones are cut to fit (the "..." marker counts towards the width).
    """
    parts: list[str] = []

    if task.id is not None:
        parts.append(f"[{task.id:>2}]")
    else:
        parts.append("[--]")

    desc = task.description
    if len(desc) <= max_desc:
        parts.append(f"{desc:<{max_desc}}")
    else:
        parts.append(desc[: max_desc - len(ELLIPSIS)] + ELLIPSIS)

    if task.urgency is not None:
        parts.append(f"(u={task.urgency:+.2f})")

    if task.project:
        parts.append(f"proj:{task.project}")

    return " ".join(parts)


def format_annotation(ann: Annotation) -> str:
    return f"{ann.entry.astimezone().strftime('%Y-%m-%d')} {ann.description}"
