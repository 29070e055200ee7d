from datetime import datetime
from typing import Any

from task_tracker.core.domain.task import Task


class TaskDocumentMapper:
    """Maps tasks to and from the stored JSON document shape."""

    @staticmethod
    def to_document(task: Task) -> dict[str, Any]:
        return {
            "id": task.id,
            "title": task.title,
            "description": task.description,
            "timeSpent": task.time_spent,
            "completed": task.completed,
            "createdAt": task.created_at.isoformat(),
            "updatedAt": task.updated_at.isoformat(),
        }

    @staticmethod
    def to_domain(document: dict[str, Any]) -> Task:
        return Task(
            id=document["id"],
            title=document["title"],
            description=document["description"],
            time_spent=document["timeSpent"],
            completed=bool(document.get("completed", False)),
            created_at=datetime.fromisoformat(document["createdAt"]),
            updated_at=datetime.fromisoformat(document["updatedAt"]),
        )
