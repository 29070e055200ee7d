import pytest
from prometheus_client import REGISTRY

from task_tracker.core.domain.task import TaskDraft
from task_tracker.infrastructure.repositories import InMemoryTaskStoreAdapter


def latency_count(operation: str) -> float:
    value = REGISTRY.get_sample_value(
        "task_tracker_store_latency_seconds_count", {"operation": operation}
    )
    return value or 0.0


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["insert", "list_all", "delete_by_id", "mark_completed"])
async def test_operations_record_store_latency(operation):
    store = InMemoryTaskStoreAdapter()
    await store.connect()
    task = await store.insert(TaskDraft("Read book", "Ch.1-3", "30"))
    calls = {
        "insert": lambda: store.insert(TaskDraft("t", "d", "1")),
        "list_all": store.list_all,
        "delete_by_id": lambda: store.delete_by_id(task.id),
        "mark_completed": lambda: store.mark_completed(task.id),
    }
    before = latency_count(operation)

    await calls[operation]()

    assert latency_count(operation) == before + 1


@pytest.mark.asyncio
async def test_delete_and_complete():
    store = InMemoryTaskStoreAdapter()
    task = await store.insert(TaskDraft("Read book", "Ch.1-3", "30"))

    done = await store.mark_completed(task.id)
    assert done is not None and done.completed
    assert await store.mark_completed("missing") is None
    assert await store.delete_by_id(task.id) is True
    assert await store.list_all() == []
