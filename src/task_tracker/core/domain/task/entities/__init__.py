from task_tracker.core.domain.task.entities.task import Task

__all__ = ["Task"]
