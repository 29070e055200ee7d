import pytest

from fakes import UnreachableStore
from task_tracker.core.exceptions import StoreUnavailableError
from task_tracker.infrastructure.common.retry import RetryPolicy
from task_tracker.infrastructure.configuration.store_settings import StoreBackend, StoreSettings
from task_tracker.infrastructure.repositories import (
    FileTaskStoreAdapter,
    InMemoryTaskStoreAdapter,
    TaskStoreProvider,
    build_task_store,
)


class CountingFactory:
    def __init__(self, failures: int) -> None:
        self.failures = failures
        self.built = 0

    def __call__(self, settings):
        self.built += 1
        if self.built <= self.failures:
            return UnreachableStore()
        return InMemoryTaskStoreAdapter()


@pytest.fixture
def store_settings(tmp_path):
    return StoreSettings(store_backend=StoreBackend.MEMORY, runtime_data_dir=tmp_path)


def test_factory_picks_backend(tmp_path):
    file_settings = StoreSettings(store_backend=StoreBackend.FILE, runtime_data_dir=tmp_path)
    memory_settings = StoreSettings(store_backend=StoreBackend.MEMORY, runtime_data_dir=tmp_path)

    assert isinstance(build_task_store(file_settings), FileTaskStoreAdapter)
    assert isinstance(build_task_store(memory_settings), InMemoryTaskStoreAdapter)


@pytest.mark.asyncio
async def test_connects_lazily_and_reuses_store(store_settings):
    factory = CountingFactory(failures=0)
    provider = TaskStoreProvider(store_settings, store_factory=factory)

    assert not provider.is_connected
    first = await provider.get_store()
    second = await provider.get_store()

    assert first is second
    assert factory.built == 1
    assert provider.is_connected


@pytest.mark.asyncio
async def test_failed_connection_is_not_cached(store_settings):
    factory = CountingFactory(failures=1)
    provider = TaskStoreProvider(store_settings, store_factory=factory)

    with pytest.raises(StoreUnavailableError):
        await provider.get_store()
    assert not provider.is_connected

    store = await provider.get_store()
    assert isinstance(store, InMemoryTaskStoreAdapter)
    assert factory.built == 2


@pytest.mark.asyncio
async def test_connection_attempts_follow_settings(tmp_path):
    settings = StoreSettings(
        store_backend=StoreBackend.MEMORY, runtime_data_dir=tmp_path, store_connect_attempts=3
    )
    attempts = []

    class FlakyStore(InMemoryTaskStoreAdapter):
        async def connect(self) -> None:
            attempts.append(1)
            if len(attempts) < 3:
                raise StoreUnavailableError("not yet")

    provider = TaskStoreProvider(
        settings,
        store_factory=lambda _: FlakyStore(),
        retry_policy=RetryPolicy(max_attempts=3, initial_wait=0, max_wait=0),
    )

    await provider.get_store()

    assert len(attempts) == 3
