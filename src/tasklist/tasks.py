from __future__ import annotations

from .models import Task, TaskList


class TaskError(RuntimeError):
    pass


class TaskNotFound(TaskError):
    def __init__(self, task_id: int) -> None:
        super().__init__("Task not found.")
        self.task_id = task_id


def add_task(state: TaskList, name: str) -> Task:
    if not name.strip():
        raise TaskError("Task name must not be empty")

    task = Task(id=state.next_id, name=name, done=False)
    state.tasks.append(task)
    state.next_id += 1
    return task


def find_task(state: TaskList, task_id: int) -> Task | None:
    for t in state:
        if t.id == task_id:
            return t
    return None


def complete_task(state: TaskList, task_id: int) -> Task:
    task = find_task(state, task_id)
    if task is None:
        raise TaskNotFound(task_id)
    task.done = True
    return task
