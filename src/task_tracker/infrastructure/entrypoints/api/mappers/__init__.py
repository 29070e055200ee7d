from task_tracker.infrastructure.entrypoints.api.mappers.task_mapper import TaskMapper

__all__ = ["TaskMapper"]
