from task_tracker.core.domain.task.entities.task import Task
from task_tracker.core.domain.task.value_objects.task_draft import TaskDraft

__all__ = ["Task", "TaskDraft"]
