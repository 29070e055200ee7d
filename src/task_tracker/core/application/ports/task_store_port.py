from abc import ABC, abstractmethod

from task_tracker.core.domain.task import Task, TaskDraft


class TaskStorePort(ABC):
    @abstractmethod
    async def connect(self) -> None:
        """Opens the backend. Raises StoreUnavailableError if it cannot be reached."""
        pass

    @abstractmethod
    async def insert(self, draft: TaskDraft) -> Task:
        """Persists a new task, assigning its id and timestamps."""
        pass

    @abstractmethod
    async def list_all(self) -> list[Task]:
        """Returns every stored task in insertion order."""
        pass

    @abstractmethod
    async def delete_by_id(self, task_id: str) -> bool:
        """Removes a task. Returns False when the id is unknown."""
        pass

    @abstractmethod
    async def mark_completed(self, task_id: str) -> Task | None:
        """Flags a task as completed. Returns None when the id is unknown."""
        pass


class TaskStoreProviderPort(ABC):
    @abstractmethod
    async def get_store(self) -> TaskStorePort:
        """Returns a connected store, connecting lazily on first use."""
        pass
