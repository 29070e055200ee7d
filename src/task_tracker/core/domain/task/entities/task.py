from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(frozen=True)
class Task:
    id: str
    title: str
    description: str
    time_spent: str
    completed: bool
    created_at: datetime
    updated_at: datetime

    def mark_completed(self, at: datetime) -> "Task":
        """
        Returns a copy flagged as completed with a refreshed update timestamp.
        Every other field is left untouched.
        """
        return replace(self, completed=True, updated_at=at)

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on title or description."""
        needle = query.lower()
        return needle in self.title.lower() or needle in self.description.lower()
