# src/taskrofi/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

# Taskwarrior's JSON date format (always UTC).
TW_DATE_FORMAT = "%Y%m%dT%H%M%SZ"

_DATE_FIELDS = ("entry", "modified", "start", "end", "wait")
_KNOWN_FIELDS = {"id", "uuid", "description", "status", "urgency", "project", "annotations", *_DATE_FIELDS}

LINK_PREFIXES = ("https://", "http://")


def parse_tw_date(raw: Any) -> datetime | None:
    if not raw:
        return None
    return datetime.strptime(str(raw), TW_DATE_FORMAT).replace(tzinfo=UTC)


def format_tw_date(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.astimezone()
    return value.astimezone(UTC).strftime(TW_DATE_FORMAT)


def now_utc() -> datetime:
    # Taskwarrior stores whole seconds.
    return datetime.now(UTC).replace(microsecond=0)


class TaskStatus(StrEnum):
    PENDING = "pending"
    COMPLETED = "completed"
    DELETED = "deleted"
    WAITING = "waiting"
    RECURRING = "recurring"

    @classmethod
    def from_export(cls, raw: str | None) -> TaskStatus:
        if not raw:
            return cls.PENDING
        try:
            return cls(raw)
        except ValueError:
            return cls.PENDING


@dataclass(slots=True)
class Annotation:
    entry: datetime
    description: str

    def is_link(self) -> bool:
        return self.description.startswith(LINK_PREFIXES)

    @classmethod
    def from_export(cls, raw: dict[str, Any]) -> Annotation:
        return cls(
            entry=parse_tw_date(raw.get("entry")) or now_utc(),
            description=str(raw.get("description", "")),
        )

    def to_export(self) -> dict[str, Any]:
        return {"entry": format_tw_date(self.entry), "description": self.description}


@dataclass(slots=True)
class Task:
    """
    One Taskwarrior record as seen through `task export`.

    Attributes this program does not touch (tags, due, UDAs, ...) live in
    `extra` and are written back unchanged by `to_export`.
    """

    uuid: str
    description: str
    status: TaskStatus = TaskStatus.PENDING
    id: int | None = None
    urgency: float | None = None
    project: str | None = None

    entry: datetime | None = None
    modified: datetime | None = None
    start: datetime | None = None
    end: datetime | None = None
    wait: datetime | None = None

    annotations: list[Annotation] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def ref(self) -> str:
        """Short reference for command lines: the id when there is one, else the uuid."""
        return str(self.id) if self.id is not None else self.uuid

    def link_annotations(self) -> list[Annotation]:
        return [a for a in self.annotations if a.is_link()]

    def add_annotation(self, description: str, entry: datetime | None = None) -> Annotation:
        ann = Annotation(entry=entry or now_utc(), description=description)
        self.annotations.append(ann)
        return ann

    @classmethod
    def from_export(cls, raw: dict[str, Any]) -> Task:
        if "uuid" not in raw:
            raise ValueError("task record without uuid")

        raw_id = raw.get("id")
        task_id = int(raw_id) if raw_id else None
        raw_urgency = raw.get("urgency")

        return cls(
            uuid=str(raw["uuid"]),
            description=str(raw.get("description", "")),
            status=TaskStatus.from_export(raw.get("status")),
            id=task_id,
            urgency=float(raw_urgency) if raw_urgency is not None else None,
            project=raw.get("project") or None,
            entry=parse_tw_date(raw.get("entry")),
            modified=parse_tw_date(raw.get("modified")),
            start=parse_tw_date(raw.get("start")),
            end=parse_tw_date(raw.get("end")),
            wait=parse_tw_date(raw.get("wait")),
            annotations=[Annotation.from_export(a) for a in raw.get("annotations") or []],
            extra={k: v for k, v in raw.items() if k not in _KNOWN_FIELDS},
        )

    def to_export(self) -> dict[str, Any]:
        """Record for `task import`. id and urgency are computed by Taskwarrior and left out."""
        out: dict[str, Any] = dict(self.extra)
        out["uuid"] = self.uuid
        out["description"] = self.description
        out["status"] = self.status.value
        if self.project:
            out["project"] = self.project
        for name in _DATE_FIELDS:
            value = getattr(self, name)
            if value is not None:
                out[name] = format_tw_date(value)
        if self.annotations:
            out["annotations"] = [a.to_export() for a in self.annotations]
        return out
