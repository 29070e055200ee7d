"""Application service behind the task endpoints.

Each operation fetches the (lazily connected) store, performs exactly one
store call and either returns a confirmation or raises from the
``task_tracker.core.exceptions`` hierarchy. HTTP mapping happens in the
entrypoint layer.
"""

import structlog

from task_tracker.core.application.ports import TaskStoreProviderPort
from task_tracker.core.domain.task import Task, TaskDraft
from task_tracker.core.exceptions import TaskNotFoundError

logger = structlog.get_logger()

TASK_ADDED_MESSAGE = "Task added successfully!"
TASK_DELETED_MESSAGE = "Task deleted successfully"
TASK_COMPLETED_MESSAGE = "Task marked as completed"


class TaskService:
    def __init__(self, provider: TaskStoreProviderPort) -> None:
        self.provider = provider

    async def create_task(self, draft: TaskDraft) -> str:
        draft.validate()
        store = await self.provider.get_store()
        task = await store.insert(draft)
        logger.info("Task created", task_id=task.id)
        return TASK_ADDED_MESSAGE

    async def list_tasks(self) -> list[Task]:
        store = await self.provider.get_store()
        return await store.list_all()

    async def delete_task(self, task_id: str) -> str:
        store = await self.provider.get_store()
        if not await store.delete_by_id(task_id):
            raise TaskNotFoundError(task_id)
        logger.info("Task deleted", task_id=task_id)
        return TASK_DELETED_MESSAGE

    async def complete_task(self, task_id: str) -> str:
        store = await self.provider.get_store()
        task = await store.mark_completed(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        logger.info("Task completed", task_id=task_id)
        return TASK_COMPLETED_MESSAGE
