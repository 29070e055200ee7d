"""Lazily connected task store, shared by every request of the process."""

import asyncio
from collections.abc import Callable

from task_tracker.core.application.ports import TaskStorePort, TaskStoreProviderPort
from task_tracker.core.exceptions import StoreUnavailableError
from task_tracker.infrastructure.common.retry import RetryPolicy
from task_tracker.infrastructure.configuration.store_settings import StoreBackend, StoreSettings
from task_tracker.infrastructure.observability.logger_factory_service import get_logger
from task_tracker.infrastructure.repositories.file_task_store_adapter import FileTaskStoreAdapter
from task_tracker.infrastructure.repositories.in_memory_task_store_adapter import (
    InMemoryTaskStoreAdapter,
)

logger = get_logger(__name__)

StoreFactory = Callable[[StoreSettings], TaskStorePort]


def build_task_store(settings: StoreSettings) -> TaskStorePort:
    if settings.store_backend == StoreBackend.MEMORY:
        return InMemoryTaskStoreAdapter()
    return FileTaskStoreAdapter(settings.store_file_path)


class TaskStoreProvider(TaskStoreProviderPort):
    def __init__(
        self,
        settings: StoreSettings,
        store_factory: StoreFactory = build_task_store,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        self.settings = settings
        self._store_factory = store_factory
        self._retry = retry_policy or RetryPolicy(max_attempts=settings.store_connect_attempts)
        self._store: TaskStorePort | None = None
        self._lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self._store is not None

    async def get_store(self) -> TaskStorePort:
        if self._store is not None:
            return self._store

        async with self._lock:
            if self._store is None:
                self._store = await self._connect()
        return self._store

    async def _connect(self) -> TaskStorePort:
        store = self._store_factory(self.settings)
        try:
            await self._retry.run(store.connect)
        except StoreUnavailableError as exc:
            # Not cached: the next request attempts a fresh connection.
            logger.error(
                "Task store connection failed",
                backend=str(self.settings.store_backend),
                error_type=type(exc).__name__,
                error_details=str(exc),
            )
            raise
        logger.info("Task store connected", backend=str(self.settings.store_backend))
        return store
