from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from .models import Task

STATUS_DONE = "✅"
STATUS_OPEN = "❌"
EMPTY_MESSAGE = "📋 No tasks available."


def render_task(task: Task) -> str:
    status = STATUS_DONE if task.done else STATUS_OPEN
    return f"[{task.id}] {task.name} - {status}"


@dataclass(slots=True)
class Listing:
    """Rendered view over a task sequence.

    Lines are produced on demand; iterating again starts from the first task.
    """

    tasks: Sequence[Task]

    def __iter__(self) -> Iterator[str]:
        for task in self.tasks:
            yield render_task(task)

    def __bool__(self) -> bool:
        return len(self.tasks) > 0
