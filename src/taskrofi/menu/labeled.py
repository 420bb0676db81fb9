# src/taskrofi/menu/labeled.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from ..core.ports import MenuPicker

T = TypeVar("T")


@dataclass(slots=True)
class LabeledItem(Generic[T]):
    """A menu row: what the user sees and the object it stands for."""

    label: str
    item: T

    @classmethod
    def of(cls, value: T | LabeledItem[T]) -> LabeledItem[T]:
        if isinstance(value, LabeledItem):
            return value
        return cls(label=str(value), item=value)

    def __str__(self) -> str:
        return self.label


def choose(menu: MenuPicker, prompt: str, items: Iterable[T | LabeledItem[T]]) -> T:
    """Show `items` in the menu and return the object behind the chosen row."""
    rows = [LabeledItem.of(i) for i in items]
    idx = menu.select(prompt, [r.label for r in rows])
    return rows[idx].item
