from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator


@dataclass(slots=True)
class Task:
    id: int
    name: str
    done: bool = False


@dataclass(slots=True)
class TaskList:
    tasks: list[Task] = field(default_factory=list)
    next_id: int = 1

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> TaskList:
        items = list(tasks)
        return cls(tasks=items, next_id=max([0, *(t.id for t in items)]) + 1)

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)
