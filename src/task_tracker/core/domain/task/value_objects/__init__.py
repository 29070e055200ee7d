from task_tracker.core.domain.task.value_objects.task_draft import REQUIRED_FIELDS, TaskDraft

__all__ = ["REQUIRED_FIELDS", "TaskDraft"]
