# tests/test_links.py

from __future__ import annotations

import subprocess

import pytest

from taskrofi.core import links
from taskrofi.core.links import make_url_opener
from taskrofi.errors import TaskMenuError


def test_opener_command_gets_url_appended(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[list[str]] = []

    def fake_run(argv, **kwargs):
        calls.append(list(argv))
        return subprocess.CompletedProcess(argv, 0)

    monkeypatch.setattr(links.subprocess, "run", fake_run)
    make_url_opener("xdg-open --quiet")("https://example.org")
    assert calls == [["xdg-open", "--quiet", "https://example.org"]]


def test_opener_command_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(argv, **kwargs):
        raise subprocess.CalledProcessError(3, argv)

    monkeypatch.setattr(links.subprocess, "run", fake_run)
    with pytest.raises(TaskMenuError, match="Could not open"):
        make_url_opener("xdg-open")("https://example.org")


def test_default_browser_is_used_without_command(monkeypatch: pytest.MonkeyPatch) -> None:
    opened: list[str] = []
    monkeypatch.setattr(links.webbrowser, "open", lambda url: opened.append(url) or True)
    make_url_opener(None)("https://example.org")
    assert opened == ["https://example.org"]


def test_default_browser_refusal_is_an_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(links.webbrowser, "open", lambda url: False)
    with pytest.raises(TaskMenuError):
        make_url_opener(None)("https://example.org")
