import pytest

from task_tracker.infrastructure.clients import TaskHttpClient
from task_tracker.infrastructure.configuration.client_settings import ClientSettings
from task_tracker.infrastructure.resolution.container import build_task_board_controller


@pytest.mark.asyncio
async def test_controller_is_wired_to_http_client():
    settings = ClientSettings(base_url="http://tasks.test/api/v1", page_size=3)

    controller = build_task_board_controller(settings)

    assert isinstance(controller.api, TaskHttpClient)
    assert controller.state.page_size == 3
    await controller.api.aclose()


def test_client_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("TASK_CLIENT_PAGE_SIZE", "8")
    monkeypatch.setenv("TASK_CLIENT_BASE_URL", "http://elsewhere/api/v1")

    settings = ClientSettings()

    assert settings.page_size == 8
    assert settings.base_url == "http://elsewhere/api/v1"
