from fastapi import APIRouter, Depends, Request, status

from task_tracker.core.application.services import TaskService
from task_tracker.infrastructure.entrypoints.api.dtos import (
    ErrorDTO,
    MessageDTO,
    TaskCreateDTO,
    TaskDTO,
)
from task_tracker.infrastructure.entrypoints.api.mappers import TaskMapper
from task_tracker.infrastructure.observability.metrics_service import track_operation

router = APIRouter(prefix="/tasks", tags=["tasks"])

_ERRORS = {
    status.HTTP_405_METHOD_NOT_ALLOWED: {"model": ErrorDTO},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorDTO},
    status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorDTO},
}


def get_task_service(request: Request) -> TaskService:
    return request.app.state.task_service


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageDTO,
    responses={status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorDTO}, **_ERRORS},
)
async def create_task(
    payload: TaskCreateDTO, service: TaskService = Depends(get_task_service)
) -> MessageDTO:
    with track_operation("create"):
        message = await service.create_task(TaskMapper.to_draft(payload))
    return MessageDTO(message=message)


@router.get("", response_model=list[TaskDTO], responses=_ERRORS)
async def list_tasks(service: TaskService = Depends(get_task_service)) -> list[TaskDTO]:
    with track_operation("list"):
        tasks = await service.list_tasks()
    return [TaskMapper.to_dto(task) for task in tasks]


@router.delete(
    "/{task_id}",
    response_model=MessageDTO,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorDTO}, **_ERRORS},
)
async def delete_task(task_id: str, service: TaskService = Depends(get_task_service)) -> MessageDTO:
    with track_operation("delete"):
        message = await service.delete_task(task_id)
    return MessageDTO(message=message)


@router.post(
    "/{task_id}/complete",
    response_model=MessageDTO,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorDTO}, **_ERRORS},
)
async def complete_task(
    task_id: str, service: TaskService = Depends(get_task_service)
) -> MessageDTO:
    with track_operation("complete"):
        message = await service.complete_task(task_id)
    return MessageDTO(message=message)
