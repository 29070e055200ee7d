from dataclasses import dataclass

from task_tracker.core.exceptions import TaskValidationError

# Wire names, used when reporting missing fields back to callers.
REQUIRED_FIELDS = {
    "title": "title",
    "description": "description",
    "time_spent": "timeSpent",
}


@dataclass(frozen=True)
class TaskDraft:
    title: str | None
    description: str | None
    time_spent: str | None

    def missing_fields(self) -> list[str]:
        missing = []
        for attr, wire_name in REQUIRED_FIELDS.items():
            value = getattr(self, attr)
            if value is None or not value.strip():
                missing.append(wire_name)
        return missing

    def validate(self) -> "TaskDraft":
        missing = self.missing_fields()
        if missing:
            raise TaskValidationError(missing)
        return self
