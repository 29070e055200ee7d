from task_tracker.infrastructure.clients.task_http_client import TaskHttpClient

__all__ = ["TaskHttpClient"]
