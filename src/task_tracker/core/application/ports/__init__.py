from task_tracker.core.application.ports.task_api_port import TaskApiPort
from task_tracker.core.application.ports.task_store_port import (
    TaskStorePort,
    TaskStoreProviderPort,
)

__all__ = ["TaskApiPort", "TaskStorePort", "TaskStoreProviderPort"]
