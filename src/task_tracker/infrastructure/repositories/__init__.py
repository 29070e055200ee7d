from task_tracker.infrastructure.repositories.file_task_store_adapter import FileTaskStoreAdapter
from task_tracker.infrastructure.repositories.in_memory_task_store_adapter import (
    InMemoryTaskStoreAdapter,
)
from task_tracker.infrastructure.repositories.task_store_provider import (
    TaskStoreProvider,
    build_task_store,
)

__all__ = [
    "FileTaskStoreAdapter",
    "InMemoryTaskStoreAdapter",
    "TaskStoreProvider",
    "build_task_store",
]
