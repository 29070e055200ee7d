from __future__ import annotations

from task_tracker.core.exceptions.task_tracker_error import TaskTrackerError


class MethodNotAllowedError(TaskTrackerError):
    """Raised when an endpoint is called with an unsupported HTTP verb."""

    def __init__(self, method: str, path: str) -> None:
        super().__init__("Method not allowed", context={"method": method, "path": path})
        self.method = method
        self.path = path
