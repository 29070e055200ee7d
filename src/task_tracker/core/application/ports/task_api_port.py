from abc import ABC, abstractmethod

from task_tracker.core.domain.task import Task, TaskDraft


class TaskApiPort(ABC):
    """Client-side view of the task service."""

    @abstractmethod
    async def create_task(self, draft: TaskDraft) -> str:
        pass

    @abstractmethod
    async def list_tasks(self) -> list[Task]:
        pass

    @abstractmethod
    async def delete_task(self, task_id: str) -> str:
        pass

    @abstractmethod
    async def complete_task(self, task_id: str) -> str:
        pass
