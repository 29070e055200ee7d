"""httpx adapter giving the client controller access to the task service.

Non-success responses are mapped back onto the task tracker exception tree
so the controller can tell a rejected request from an unreachable service.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from task_tracker.core.application.ports import TaskApiPort
from task_tracker.core.domain.task import Task, TaskDraft
from task_tracker.core.exceptions import (
    MethodNotAllowedError,
    StoreError,
    StoreUnavailableError,
    TaskApiConnectionError,
    TaskNotFoundError,
    TaskValidationError,
)
from task_tracker.infrastructure.configuration.client_settings import ClientSettings
from task_tracker.infrastructure.entrypoints.api.dtos import TaskDTO
from task_tracker.infrastructure.entrypoints.api.mappers import TaskMapper
from task_tracker.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger(__name__)

_TASK_LIST = TypeAdapter(list[TaskDTO])


class TaskHttpClient(TaskApiPort):
    def __init__(self, settings: ClientSettings, client: httpx.AsyncClient | None = None) -> None:
        self.settings = settings
        self._client = client or httpx.AsyncClient(
            base_url=settings.base_url, timeout=settings.timeout_seconds
        )

    async def __aenter__(self) -> TaskHttpClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def create_task(self, draft: TaskDraft) -> str:
        response = await self._send("POST", "tasks", json=TaskMapper.draft_to_payload(draft))
        return self._message(response)

    async def list_tasks(self) -> list[Task]:
        response = await self._send("GET", "tasks")
        try:
            dtos = _TASK_LIST.validate_json(response.content)
        except ValidationError as e:
            raise StoreError(f"Unexpected task list payload: {e}") from e
        return [TaskMapper.to_domain(dto) for dto in dtos]

    async def delete_task(self, task_id: str) -> str:
        response = await self._send("DELETE", f"tasks/{task_id}", task_id=task_id)
        return self._message(response)

    async def complete_task(self, task_id: str) -> str:
        response = await self._send("POST", f"tasks/{task_id}/complete", task_id=task_id)
        return self._message(response)

    async def _send(
        self, method: str, path: str, *, task_id: str | None = None, json: Any = None
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.warning(
                "Task service unreachable",
                error_type=type(e).__name__,
                error_details=str(e),
            )
            raise TaskApiConnectionError(f"{method} {path} failed: {e}") from e
        _raise_for_status(response, task_id)
        return response

    @staticmethod
    def _message(response: httpx.Response) -> str:
        return str(_json_body(response).get("message", ""))


def _json_body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _raise_for_status(response: httpx.Response, task_id: str | None) -> None:
    if response.is_success:
        return

    body = _json_body(response)
    error = str(body.get("error") or response.reason_phrase)
    code = response.status_code

    if code == httpx.codes.NOT_FOUND:
        raise TaskNotFoundError(task_id or "")
    if code == httpx.codes.METHOD_NOT_ALLOWED:
        raise MethodNotAllowedError(response.request.method, response.request.url.path)
    if code == httpx.codes.UNPROCESSABLE_ENTITY:
        raise TaskValidationError(list(body.get("fields") or []))
    if code == httpx.codes.SERVICE_UNAVAILABLE:
        raise StoreUnavailableError(error)
    raise StoreError(error, context={"status_code": code})
