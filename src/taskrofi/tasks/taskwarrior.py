# src/taskrofi/tasks/taskwarrior.py

from __future__ import annotations

import json
import logging
import re
import subprocess
from collections.abc import Sequence

from ..errors import TaskCommandError, UnexpectedOutputError
from .task_models import Task, now_utc

logger = logging.getLogger(__name__)

CREATED_PREFIX = "Created task "
_CREATED_RE = re.compile(r"^Created task (\d+)")


class TaskwarriorStore:
    """
    Thin adapter over the `task` binary.

    Every call is a blocking subprocess; nothing is cached between calls.
    Records are read with `task export` and written back wholesale with
    `task import`.
    """

    def __init__(self, task_bin: str = "task") -> None:
        self._task_bin = task_bin

    # ---- low-level helpers ----

    def run(self, args: Sequence[str], *, input: str | None = None) -> tuple[str, str]:
        """Run `task <args>` and return decoded (stdout, stderr)."""
        argv = [self._task_bin, *args]
        logger.debug("Running %s", argv)
        try:
            result = subprocess.run(
                argv,
                input=input.encode("utf-8") if input is not None else None,
                capture_output=True,
                check=False,
            )
        except OSError as e:
            raise TaskCommandError(f"could not run {self._task_bin}: {e}") from e

        try:
            stdout = result.stdout.decode("utf-8")
            stderr = result.stderr.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TaskCommandError(f"{self._task_bin} produced invalid UTF-8: {e}") from e

        if result.returncode != 0:
            logger.warning("%s exited with %s", argv, result.returncode)
            raise TaskCommandError(f"stdout: {stdout.strip()} / stderr: {stderr.strip()}")

        return stdout, stderr

    # ---- public API ----

    def get_config(self, name: str) -> str:
        """Value of a configuration variable as printed by `task show <name>`."""
        stdout, _ = self.run(["rc.color=off", "show", name])
        for line in stdout.splitlines():
            parts = line.split(maxsplit=1)
            if len(parts) > 1 and parts[0] == name:
                return parts[1].strip()
        raise UnexpectedOutputError(f"Could not find config variable {name}")

    def default_filter(self) -> str:
        """Filter of the report that plain `task` shows."""
        command = self.get_config("default.command")
        return self.get_config(f"report.{command}.filter")

    def query(self, filter_text: str) -> list[Task]:
        # Words go through untouched; quoting is left to Taskwarrior's own lexer.
        stdout, _ = self.run(["rc.json.array=on", *filter_text.split(), "export"])
        try:
            records = json.loads(stdout or "[]")
        except json.JSONDecodeError as e:
            raise UnexpectedOutputError(f"task export returned invalid JSON: {e}") from e
        if not isinstance(records, list):
            raise UnexpectedOutputError("task export did not return a JSON array")

        try:
            tasks = [Task.from_export(r) for r in records]
        except (TypeError, ValueError) as e:
            raise UnexpectedOutputError(f"task export returned an unusable record: {e}") from e
        logger.debug("Query %r returned %d tasks", filter_text, len(tasks))
        return tasks

    def add(self, text: str) -> int:
        """Create a task from free text (`task add ...`) and return its id."""
        stdout, stderr = self.run(["rc.verbose=new-id", "add", *text.split()])
        if not stdout.startswith(CREATED_PREFIX):
            raise UnexpectedOutputError(
                f"Unexpected output from add command: `{stdout.strip()}` / stderr: `{stderr.strip()}`"
            )
        m = _CREATED_RE.match(stdout)
        if not m:
            raise UnexpectedOutputError(f"No task id in add output: `{stdout.strip()}`")
        task_id = int(m.group(1))
        logger.info("Created task id=%s", task_id)
        return task_id

    def save(self, task: Task) -> None:
        task.modified = now_utc()
        payload = json.dumps([task.to_export()], ensure_ascii=False)
        self.run(["rc.verbose=nothing", "import", "-"], input=payload)
        logger.info("Saved task uuid=%s status=%s", task.uuid, task.status.value)

    def modify(self, ref: str, words: Sequence[str]) -> None:
        self.run([ref, "mod", *words])
        logger.info("Modified task %s: %s", ref, " ".join(words))
