"""Repository tests against an in-memory SQLite database."""

import pytest
from sqlalchemy import select

from my_todo.core.exceptions import DuplicateLabelError, NotFoundError
from my_todo.models.entities.todo import todo_labels
from my_todo.repositories import LabelRepository, TodoRepository


@pytest.mark.asyncio
async def test_todo_crud_scenario(db_session):
    repository = TodoRepository(db_session)
    text = "[crud_scenario] text"

    # create
    created = await repository.create(text, [])
    assert created.text == text
    assert created.completed is False

    # find
    todo = await repository.get_by_id(created.id)
    assert todo.id == created.id

    # all
    todos = await repository.get_all(descending=True)
    assert [t.id for t in todos] == [created.id]

    # update
    updated_text = "[crud_scenario] updated text"
    todo = await repository.update(created.id, {"text": updated_text, "completed": True})
    assert todo.id == created.id
    assert todo.text == updated_text
    assert todo.completed is True

    # delete
    await repository.delete(todo.id)
    with pytest.raises(NotFoundError):
        await repository.get_by_id(created.id)


@pytest.mark.asyncio
async def test_update_skips_missing_fields(db_session):
    repository = TodoRepository(db_session)
    created = await repository.create("unchanged", [])

    todo = await repository.update(created.id, {"text": None, "completed": True})

    assert todo.text == "unchanged"
    assert todo.completed is True


@pytest.mark.asyncio
async def test_label_crud_scenario(db_session):
    repository = LabelRepository(db_session)

    label = await repository.create("test_label")
    assert label.name == "test_label"

    labels = await repository.get_all()
    assert labels[-1].name == "test_label"

    with pytest.raises(DuplicateLabelError) as exc_info:
        await repository.create("test_label")
    assert exc_info.value.details == {"id": label.id}

    await repository.delete(label.id)
    assert await repository.get_all() == []


@pytest.mark.asyncio
async def test_find_many_keeps_order_and_rejects_unknown(db_session):
    repository = LabelRepository(db_session)
    first = await repository.create("first")
    second = await repository.create("second")

    found = await repository.find_many([second.id, first.id, second.id])
    assert [label.id for label in found] == [second.id, first.id]

    with pytest.raises(NotFoundError) as exc_info:
        await repository.find_many([first.id, 999])
    assert exc_info.value.details == {"ids": [999]}


@pytest.mark.asyncio
async def test_deleting_todo_removes_association_rows(db_session):
    labels = LabelRepository(db_session)
    todos = TodoRepository(db_session)
    label = await labels.create("work")
    todo = await todos.create("task", [label])

    await todos.delete(todo.id)

    rows = db_session.execute(select(todo_labels)).all()
    assert rows == []
    assert [l.name for l in await labels.get_all()] == ["work"]
