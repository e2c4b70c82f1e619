from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = str(REPO_ROOT / "src")


@pytest.fixture
def task_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture(autouse=True)
def _configure_tasklist_test_env(monkeypatch: pytest.MonkeyPatch, task_path: Path) -> None:
    monkeypatch.setenv("TASKLIST_FILE", str(task_path))


@pytest.fixture
def cli_cmd() -> list[str]:
    return [sys.executable, "-m", "tasklist.cli"]


@pytest.fixture
def cli_env(task_path: Path) -> dict[str, str]:
    env = os.environ.copy()
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = SRC_PATH if not existing else f"{SRC_PATH}:{existing}"
    env["PYTHONIOENCODING"] = "utf-8"
    env["TASKLIST_FILE"] = str(task_path)
    return env
