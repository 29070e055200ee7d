"""Client-side controller keeping the task board in sync with the service.

The controller owns one ``ViewState``. UI events go through the pure
transitions in ``view_state``; network flows call the ``TaskApiPort`` and,
after any successful mutation, re-fetch the whole list instead of patching
it locally. Failures surface as ``state.alert`` and leave the list as it was.
"""

from __future__ import annotations

import structlog

import task_tracker.core.application.client.view_state as vs
from task_tracker.core.application.client.task_view import (
    DEFAULT_PAGE_SIZE,
    TaskPage,
    visible_page,
)
from task_tracker.core.application.ports import TaskApiPort
from task_tracker.core.domain.task import Task
from task_tracker.core.exceptions import TaskApiConnectionError, TaskTrackerError

logger = structlog.get_logger()

MISSING_FIELDS_ALERT = "Please fill in all fields."
ADD_FAILED_ALERT = "Failed to add task. Please try again."
ADD_ERROR_ALERT = "An error occurred. Please try again."
DELETE_FAILED_ALERT = "Failed to delete task."
DELETE_ERROR_ALERT = "An error occurred while deleting the task."
COMPLETE_FAILED_ALERT = "Failed to update task."
LOAD_FAILED_ALERT = "Failed to load tasks."


class TaskBoardController:
    def __init__(self, api: TaskApiPort, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.api = api
        self.state = vs.initial_state(page_size)

    @property
    def page(self) -> TaskPage:
        s = self.state
        return visible_page(s.tasks, s.search, s.page, s.page_size)

    # UI events

    def open_create_dialog(self) -> None:
        self.state = vs.open_create_dialog(self.state)

    def open_detail(self, task: Task) -> None:
        self.state = vs.open_detail_dialog(self.state, task)

    def request_delete(self, task: Task) -> None:
        self.state = vs.open_delete_dialog(self.state, task)

    def cancel_dialog(self) -> None:
        self.state = vs.close_dialog(self.state)

    def update_form(self, field_name: str, value: str) -> None:
        self.state = vs.update_form(self.state, field_name, value)

    def search(self, query: str) -> None:
        self.state = vs.set_search(self.state, query)

    def reset_search(self) -> None:
        self.state = vs.reset_search(self.state)

    def next_page(self) -> None:
        self.state = vs.next_page(self.state)

    def previous_page(self) -> None:
        self.state = vs.previous_page(self.state)

    def dismiss_alert(self) -> None:
        self.state = vs.dismiss_alert(self.state)

    # Network flows

    async def refresh(self) -> bool:
        try:
            tasks = await self.api.list_tasks()
        except TaskTrackerError as exc:
            self._fail("refresh", exc, LOAD_FAILED_ALERT)
            return False
        self.state = vs.tasks_loaded(self.state, tasks)
        return True

    async def submit(self) -> bool:
        draft = self.state.form.to_draft()
        if draft.missing_fields():
            self.state = vs.request_failed(self.state, MISSING_FIELDS_ALERT)
            return False

        self.state = vs.request_started(self.state)
        try:
            await self.api.create_task(draft)
        except TaskApiConnectionError as exc:
            self._fail("submit", exc, ADD_ERROR_ALERT)
            return False
        except TaskTrackerError as exc:
            self._fail("submit", exc, ADD_FAILED_ALERT)
            return False

        self.state = vs.submit_succeeded(self.state)
        await self.refresh()
        return True

    async def confirm_delete(self) -> bool:
        task = self.state.focused_task
        if self.state.dialog is not vs.Dialog.DELETE or task is None:
            return False
        self.state = vs.close_dialog(self.state)

        try:
            await self.api.delete_task(task.id)
        except TaskApiConnectionError as exc:
            self._fail("delete", exc, DELETE_ERROR_ALERT)
            return False
        except TaskTrackerError as exc:
            self._fail("delete", exc, DELETE_FAILED_ALERT)
            return False

        await self.refresh()
        return True

    async def complete(self, task: Task) -> bool:
        try:
            await self.api.complete_task(task.id)
        except TaskTrackerError as exc:
            self._fail("complete", exc, COMPLETE_FAILED_ALERT)
            return False

        await self.refresh()
        return True

    def _fail(self, flow: str, exc: TaskTrackerError, alert: str) -> None:
        logger.warning(
            "Task board request failed",
            flow=flow,
            error_type=type(exc).__name__,
            error_details=str(exc),
        )
        self.state = vs.request_failed(self.state, alert)
