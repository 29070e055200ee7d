from task_tracker.infrastructure.entrypoints.api.dtos.task_dtos import (
    ErrorDTO,
    MessageDTO,
    TaskCreateDTO,
    TaskDTO,
)

__all__ = ["ErrorDTO", "MessageDTO", "TaskCreateDTO", "TaskDTO"]
