"""Single immutable view state for the task board plus its pure transitions.

Every transition takes the current ``ViewState`` and returns a new one, so a
UI event can never leave the dialogs, form and list half updated.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import StrEnum

from task_tracker.core.application.client.task_view import (
    DEFAULT_PAGE_SIZE,
    clamp_page,
    count_pages,
    filter_tasks,
)
from task_tracker.core.domain.task import Task, TaskDraft

FORM_FIELDS = ("title", "description", "time_spent")


class Dialog(StrEnum):
    NONE = "none"
    CREATE = "create"
    DETAIL = "detail"
    DELETE = "delete"


@dataclass(frozen=True)
class TaskForm:
    title: str = ""
    description: str = ""
    time_spent: str = ""

    def to_draft(self) -> TaskDraft:
        return TaskDraft(title=self.title, description=self.description, time_spent=self.time_spent)


@dataclass(frozen=True)
class ViewState:
    form: TaskForm = field(default_factory=TaskForm)
    tasks: tuple[Task, ...] = ()
    search: str = ""
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    dialog: Dialog = Dialog.NONE
    focused_task: Task | None = None
    is_loading: bool = False
    alert: str | None = None


def initial_state(page_size: int = DEFAULT_PAGE_SIZE) -> ViewState:
    count_pages(0, page_size)  # rejects non-positive sizes early
    return ViewState(page_size=page_size)


def _total_pages(state: ViewState) -> int:
    return count_pages(len(filter_tasks(state.tasks, state.search)), state.page_size)


# Dialogs

def open_create_dialog(state: ViewState) -> ViewState:
    return replace(state, dialog=Dialog.CREATE, focused_task=None)


def open_detail_dialog(state: ViewState, task: Task) -> ViewState:
    return replace(state, dialog=Dialog.DETAIL, focused_task=task)


def open_delete_dialog(state: ViewState, task: Task) -> ViewState:
    return replace(state, dialog=Dialog.DELETE, focused_task=task)


def close_dialog(state: ViewState) -> ViewState:
    return replace(state, dialog=Dialog.NONE, focused_task=None)


# Form

def update_form(state: ViewState, field_name: str, value: str) -> ViewState:
    if field_name not in FORM_FIELDS:
        raise ValueError(f"Unknown form field: {field_name}")
    return replace(state, form=replace(state.form, **{field_name: value}))


# Search and pagination

def set_search(state: ViewState, query: str) -> ViewState:
    return replace(state, search=query, page=1)


def reset_search(state: ViewState) -> ViewState:
    return set_search(state, "")


def next_page(state: ViewState) -> ViewState:
    return replace(state, page=clamp_page(state.page + 1, _total_pages(state)))


def previous_page(state: ViewState) -> ViewState:
    return replace(state, page=clamp_page(state.page - 1, _total_pages(state)))


# Network lifecycle

def tasks_loaded(state: ViewState, tasks: Iterable[Task]) -> ViewState:
    loaded = replace(state, tasks=tuple(tasks))
    return replace(loaded, page=clamp_page(loaded.page, _total_pages(loaded)))


def request_started(state: ViewState) -> ViewState:
    return replace(state, is_loading=True, alert=None)


def submit_succeeded(state: ViewState) -> ViewState:
    return replace(state, form=TaskForm(), dialog=Dialog.NONE, focused_task=None, is_loading=False)


def request_failed(state: ViewState, alert: str) -> ViewState:
    return replace(state, is_loading=False, alert=alert)


def dismiss_alert(state: ViewState) -> ViewState:
    return replace(state, alert=None)
