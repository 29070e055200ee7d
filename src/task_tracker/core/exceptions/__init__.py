from task_tracker.core.exceptions.api_connection_error import TaskApiConnectionError
from task_tracker.core.exceptions.method_not_allowed_error import MethodNotAllowedError
from task_tracker.core.exceptions.not_found_error import TaskNotFoundError
from task_tracker.core.exceptions.store_error import StoreError, StoreUnavailableError
from task_tracker.core.exceptions.task_tracker_error import TaskTrackerError
from task_tracker.core.exceptions.validation_error import TaskValidationError

__all__ = [
    "MethodNotAllowedError",
    "StoreError",
    "StoreUnavailableError",
    "TaskApiConnectionError",
    "TaskNotFoundError",
    "TaskTrackerError",
    "TaskValidationError",
]
