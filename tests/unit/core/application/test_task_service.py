import pytest

from fakes import StaticStoreProvider
from task_tracker.core.application.services import TaskService
from task_tracker.core.domain.task import TaskDraft
from task_tracker.core.exceptions import TaskNotFoundError, TaskValidationError
from task_tracker.infrastructure.repositories import InMemoryTaskStoreAdapter


@pytest.fixture
def store():
    return InMemoryTaskStoreAdapter()


@pytest.fixture
def service(store):
    return TaskService(StaticStoreProvider(store))


@pytest.mark.asyncio
async def test_create_returns_confirmation_and_persists(service, store):
    message = await service.create_task(TaskDraft("Read book", "Ch.1-3", "30"))

    assert message == "Task added successfully!"
    [task] = await store.list_all()
    assert (task.title, task.description, task.time_spent, task.completed) == (
        "Read book",
        "Ch.1-3",
        "30",
        False,
    )
    assert task.created_at == task.updated_at


@pytest.mark.asyncio
async def test_create_rejects_blank_fields_before_touching_store(service, store):
    with pytest.raises(TaskValidationError) as exc_info:
        await service.create_task(TaskDraft("", "Ch.1-3", None))

    assert exc_info.value.fields == ["title", "timeSpent"]
    assert await store.list_all() == []


@pytest.mark.asyncio
async def test_create_assigns_unique_ids(service):
    for _ in range(3):
        await service.create_task(TaskDraft("t", "d", "1"))

    ids = [task.id for task in await service.list_tasks()]
    assert len(set(ids)) == 3


@pytest.mark.asyncio
async def test_list_preserves_insertion_order(service):
    for title in ("first", "second", "third"):
        await service.create_task(TaskDraft(title, "d", "1"))

    assert [task.title for task in await service.list_tasks()] == ["first", "second", "third"]


@pytest.mark.asyncio
async def test_delete_removes_only_that_task(service):
    await service.create_task(TaskDraft("keep", "d", "1"))
    await service.create_task(TaskDraft("drop", "d", "1"))
    keep, drop = await service.list_tasks()

    assert await service.delete_task(drop.id) == "Task deleted successfully"
    assert await service.list_tasks() == [keep]


@pytest.mark.asyncio
async def test_delete_unknown_id_raises_not_found(service):
    await service.create_task(TaskDraft("t", "d", "1"))

    with pytest.raises(TaskNotFoundError) as exc_info:
        await service.delete_task("missing")

    assert exc_info.value.task_id == "missing"
    assert len(await service.list_tasks()) == 1


@pytest.mark.asyncio
async def test_complete_sets_flag(service):
    await service.create_task(TaskDraft("t", "d", "1"))
    [task] = await service.list_tasks()

    assert await service.complete_task(task.id) == "Task marked as completed"

    [done] = await service.list_tasks()
    assert done.completed is True
    assert done.id == task.id


@pytest.mark.asyncio
async def test_complete_unknown_id_raises_not_found(service):
    with pytest.raises(TaskNotFoundError):
        await service.complete_task("missing")
