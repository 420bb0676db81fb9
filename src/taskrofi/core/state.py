# src/taskrofi/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import MenuPicker, TaskRepo, UrlOpener


@dataclass
class AppState:
    # Settings live on the state so handlers read limits/presets from one place.
    settings: object

    menu: MenuPicker
    tasks: TaskRepo
    open_url: UrlOpener
