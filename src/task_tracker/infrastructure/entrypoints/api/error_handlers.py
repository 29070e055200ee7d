"""Maps the task tracker exception tree onto HTTP responses.

Routers let domain errors propagate; every failure body has the shape
``{"error": "..."}`` (plus ``fields`` for validation failures).
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_tracker.core.exceptions import (
    MethodNotAllowedError,
    StoreError,
    StoreUnavailableError,
    TaskNotFoundError,
    TaskValidationError,
)

logger = structlog.get_logger()

# Keyed by endpoint function name
STORE_ERROR_MESSAGES = {
    "create_task": "Error saving task",
    "list_tasks": "Error fetching tasks",
    "delete_task": "Error deleting task",
    "complete_task": "Error updating task",
}
DEFAULT_STORE_ERROR_MESSAGE = "Task store error"
STORE_UNAVAILABLE_MESSAGE = "Task store unavailable"


def _endpoint_name(request: Request) -> str:
    endpoint = request.scope.get("endpoint")
    return getattr(endpoint, "__name__", "")


def _log_failure(exc: Exception, http_status: int) -> None:
    logger.error(
        "Task request failed",
        http_status=http_status,
        error_type=type(exc).__name__,
        error_details=str(exc),
    )


async def handle_validation_error(request: Request, exc: TaskValidationError) -> JSONResponse:
    logger.warning("Task rejected", error_type=type(exc).__name__, missing_fields=exc.fields)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": exc.message, "fields": exc.fields},
    )


async def handle_not_found(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    logger.info("Task not found", task_id=exc.task_id)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": exc.message})


async def handle_store_unavailable(request: Request, exc: StoreUnavailableError) -> JSONResponse:
    _log_failure(exc, status.HTTP_503_SERVICE_UNAVAILABLE)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": STORE_UNAVAILABLE_MESSAGE},
    )


async def handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
    _log_failure(exc, status.HTTP_500_INTERNAL_SERVER_ERROR)
    message = STORE_ERROR_MESSAGES.get(_endpoint_name(request), DEFAULT_STORE_ERROR_MESSAGE)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": message}
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        rejected = MethodNotAllowedError(request.method, request.url.path)
        logger.warning("Method not allowed", **rejected.context)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": rejected.message},
            headers=exc.headers,
        )
    return JSONResponse(
        status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers
    )


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.error(f"Validation error for request {request.url}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "Invalid request body", "detail": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskValidationError, handle_validation_error)
    app.add_exception_handler(TaskNotFoundError, handle_not_found)
    app.add_exception_handler(StoreUnavailableError, handle_store_unavailable)
    app.add_exception_handler(StoreError, handle_store_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
