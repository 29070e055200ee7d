"""Wiring helpers for the client side of the task board."""

from task_tracker.core.application.client import TaskBoardController
from task_tracker.infrastructure.clients import TaskHttpClient
from task_tracker.infrastructure.configuration.client_settings import ClientSettings


def build_task_board_controller(settings: ClientSettings | None = None) -> TaskBoardController:
    settings = settings or ClientSettings()
    return TaskBoardController(TaskHttpClient(settings), page_size=settings.page_size)
