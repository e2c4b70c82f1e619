from __future__ import annotations

import pytest

from tasklist.models import Task, TaskList
from tasklist.tasks import TaskError, TaskNotFound, add_task, complete_task, find_task


@pytest.mark.unit
def test_add_assigns_sequential_ids() -> None:
    state = TaskList()
    first = add_task(state, "buy milk")
    second = add_task(state, "walk dog")

    assert first == Task(id=1, name="buy milk", done=False)
    assert second.id == 2
    assert [t.name for t in state] == ["buy milk", "walk dog"]
    assert state.next_id == 3


@pytest.mark.unit
def test_add_rejects_blank_name() -> None:
    state = TaskList()
    with pytest.raises(TaskError):
        add_task(state, "   ")
    assert len(state) == 0


@pytest.mark.unit
def test_ids_do_not_collide_after_gap() -> None:
    state = TaskList.from_tasks([Task(1, "a"), Task(4, "b")])
    task = add_task(state, "c")
    assert task.id == 5


@pytest.mark.unit
def test_complete_flips_only_target() -> None:
    state = TaskList()
    add_task(state, "buy milk")
    add_task(state, "walk dog")

    done = complete_task(state, 1)

    assert done.done
    assert find_task(state, 1).done
    assert not find_task(state, 2).done


@pytest.mark.unit
def test_complete_missing_id_leaves_state_unchanged() -> None:
    state = TaskList()
    add_task(state, "buy milk")
    before = [Task(t.id, t.name, t.done) for t in state]

    with pytest.raises(TaskNotFound) as exc:
        complete_task(state, 99)

    assert exc.value.task_id == 99
    assert str(exc.value) == "Task not found."
    assert list(state) == before


@pytest.mark.unit
def test_complete_uses_first_match() -> None:
    state = TaskList.from_tasks([Task(1, "a"), Task(1, "dup")])
    complete_task(state, 1)
    assert [t.done for t in state] == [True, False]


@pytest.mark.unit
def test_complete_twice_is_noop() -> None:
    state = TaskList.from_tasks([Task(1, "a", done=True)])
    assert complete_task(state, 1).done


@pytest.mark.unit
def test_ids_stay_positive_after_negative_ids() -> None:
    state = TaskList.from_tasks([Task(-5, "hand edited")])
    assert add_task(state, "new").id == 1
