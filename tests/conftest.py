import pytest
from fastapi.testclient import TestClient

from task_tracker.infrastructure.configuration.main_settings import Settings
from task_tracker.infrastructure.configuration.store_settings import StoreBackend
from task_tracker.infrastructure.entrypoints.api.app_factory import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        app_name="TestTracker",
        store_backend=StoreBackend.MEMORY,
        runtime_data_dir=tmp_path / "runtime_data",
    )


@pytest.fixture
def file_settings(tmp_path):
    return Settings(
        app_name="TestTracker",
        store_backend=StoreBackend.FILE,
        runtime_data_dir=tmp_path / "runtime_data",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def read_book():
    return {"title": "Read book", "description": "Ch.1-3", "timeSpent": "30"}
