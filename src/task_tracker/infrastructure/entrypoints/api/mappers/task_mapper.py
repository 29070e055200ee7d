from task_tracker.core.domain.task import Task, TaskDraft
from task_tracker.infrastructure.entrypoints.api.dtos.task_dtos import TaskCreateDTO, TaskDTO


class TaskMapper:
    @staticmethod
    def to_draft(dto: TaskCreateDTO) -> TaskDraft:
        return TaskDraft(title=dto.title, description=dto.description, time_spent=dto.time_spent)

    @staticmethod
    def to_dto(task: Task) -> TaskDTO:
        return TaskDTO(
            id=task.id,
            title=task.title,
            description=task.description,
            time_spent=task.time_spent,
            completed=task.completed,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

    @staticmethod
    def to_domain(dto: TaskDTO) -> Task:
        return Task(
            id=dto.id,
            title=dto.title,
            description=dto.description,
            time_spent=dto.time_spent,
            completed=dto.completed,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )

    @staticmethod
    def draft_to_payload(draft: TaskDraft) -> dict[str, str | None]:
        return {
            "title": draft.title,
            "description": draft.description,
            "timeSpent": draft.time_spent,
        }
