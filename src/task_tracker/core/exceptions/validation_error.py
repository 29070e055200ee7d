from __future__ import annotations

from task_tracker.core.exceptions.task_tracker_error import TaskTrackerError


class TaskValidationError(TaskTrackerError):
    """Raised when required task fields are missing or blank."""

    def __init__(self, fields: list[str]) -> None:
        super().__init__("Missing required fields", context={"fields": fields})
        self.fields = fields
