from task_tracker.core.application.client.task_board_controller import TaskBoardController
from task_tracker.core.application.client.task_view import TaskPage, visible_page
from task_tracker.core.application.client.view_state import Dialog, TaskForm, ViewState

__all__ = [
    "Dialog",
    "TaskBoardController",
    "TaskForm",
    "TaskPage",
    "ViewState",
    "visible_page",
]
