from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from dataclasses import asdict
from pathlib import Path
from typing import Any

from .models import Task, TaskList

logger = logging.getLogger(__name__)

DEFAULT_FILE = "tasks.json"


class StoreError(RuntimeError):
    pass


class CorruptStateError(StoreError):
    pass


class PersistenceError(StoreError):
    pass


def tasks_file(override: str | os.PathLike[str] | None = None) -> Path:
    if override:
        return Path(override)
    env = os.environ.get("TASKLIST_FILE", "").strip()
    if env:
        return Path(env)
    return Path.cwd() / DEFAULT_FILE


def _parse_record(raw: Any, index: int) -> Task:
    if not isinstance(raw, dict):
        raise CorruptStateError(f"Record {index} is not an object")

    tid = raw.get("id")
    name = raw.get("name")
    done = raw.get("done")
    # bool is a subclass of int
    if not isinstance(tid, int) or isinstance(tid, bool):
        raise CorruptStateError(f"Record {index} has invalid id: {tid!r}")
    if not isinstance(name, str):
        raise CorruptStateError(f"Record {index} has invalid name: {name!r}")
    if not isinstance(done, bool):
        raise CorruptStateError(f"Record {index} has invalid done flag: {done!r}")

    return Task(id=tid, name=name, done=done)


def _target_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class Store:
    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def load(self) -> TaskList:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No task file at %s, starting empty", self.path)
            return TaskList()
        except UnicodeDecodeError as e:
            raise CorruptStateError(f"{self.path} is not valid UTF-8: {e}") from e
        except OSError as e:
            logger.warning("Could not read %s (%s), starting empty", self.path, e)
            return TaskList()

        if not text.strip():
            return TaskList()

        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise CorruptStateError(f"{self.path} is not valid JSON: {e}") from e

        if payload is None:
            return TaskList()
        if not isinstance(payload, list):
            raise CorruptStateError(f"{self.path} must contain a JSON array of tasks")

        state = TaskList.from_tasks(_parse_record(raw, i) for i, raw in enumerate(payload))
        logger.debug("Loaded %d task(s) from %s", len(state), self.path)
        return state

    def save(self, state: TaskList) -> None:
        data = json.dumps([asdict(t) for t in state], ensure_ascii=False, indent=2) + "\n"

        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as fh:
                tmp_name = fh.name
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            os.chmod(tmp_name, _target_mode(self.path))
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f"Could not save tasks to {self.path}: {e}") from e

        logger.debug("Saved %d task(s) to %s", len(state), self.path)
