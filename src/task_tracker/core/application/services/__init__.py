from task_tracker.core.application.services.task_service import TaskService

__all__ = ["TaskService"]
