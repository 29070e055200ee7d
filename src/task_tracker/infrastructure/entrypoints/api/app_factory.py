from fastapi import FastAPI

from task_tracker.core.application.ports import TaskStoreProviderPort
from task_tracker.core.application.services import TaskService
from task_tracker.infrastructure.configuration.main_settings import Settings
from task_tracker.infrastructure.entrypoints.api.error_handlers import register_exception_handlers
from task_tracker.infrastructure.entrypoints.api.health_router import router as health_router
from task_tracker.infrastructure.entrypoints.api.task_router import router as task_router
from task_tracker.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from task_tracker.infrastructure.observability.logging import CorrelationMiddleware
from task_tracker.infrastructure.repositories import TaskStoreProvider

logger = get_logger(__name__)


def create_app(settings: Settings, store_provider: TaskStoreProviderPort | None = None) -> FastAPI:
    configure_logging(settings.log_level)
    logger.info(
        "Booting task service",
        app_name=settings.app_name,
        env=settings.env,
        store_backend=str(settings.store_backend),
    )

    app = FastAPI(title=settings.app_name)
    # Store connects lazily on the first request, not at boot.
    app.state.task_service = TaskService(store_provider or TaskStoreProvider(settings))

    app.add_middleware(CorrelationMiddleware)
    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(task_router, prefix=settings.api_prefix)

    return app
