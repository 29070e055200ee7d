from task_tracker.core.application.ports import TaskStorePort
from task_tracker.core.domain.task import Task, TaskDraft
from task_tracker.infrastructure.observability.metrics_service import time_store_call
from task_tracker.infrastructure.repositories.clock import Clock, new_task_id, utc_now


class InMemoryTaskStoreAdapter(TaskStorePort):
    """Process-local store. No operation awaits, so each call is atomic on the event loop."""

    def __init__(self, clock: Clock = utc_now) -> None:
        self._tasks: dict[str, Task] = {}
        self._clock = clock

    async def connect(self) -> None:
        return None

    async def insert(self, draft: TaskDraft) -> Task:
        with time_store_call("insert"):
            now = self._clock()
            task = Task(
                id=new_task_id(),
                title=draft.title or "",
                description=draft.description or "",
                time_spent=draft.time_spent or "",
                completed=False,
                created_at=now,
                updated_at=now,
            )
            self._tasks[task.id] = task
            return task

    async def list_all(self) -> list[Task]:
        with time_store_call("list_all"):
            return list(self._tasks.values())

    async def delete_by_id(self, task_id: str) -> bool:
        with time_store_call("delete_by_id"):
            return self._tasks.pop(task_id, None) is not None

    async def mark_completed(self, task_id: str) -> Task | None:
        with time_store_call("mark_completed"):
            task = self._tasks.get(task_id)
            if task is None:
                return None
            updated = task.mark_completed(self._clock())
            self._tasks[task_id] = updated
            return updated
