"""Derived task list view: filter the full collection, then paginate it."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from task_tracker.core.domain.task import Task

DEFAULT_PAGE_SIZE = 5


@dataclass(frozen=True)
class TaskPage:
    items: tuple[Task, ...]
    number: int
    total_pages: int
    total_matches: int

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages


def filter_tasks(tasks: Iterable[Task], query: str) -> list[Task]:
    if not query:
        return list(tasks)
    return [task for task in tasks if task.matches(query)]


def count_pages(total: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return math.ceil(total / page_size)


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(page, 1), max(total_pages, 1))


def paginate(tasks: list[Task], page: int, page_size: int) -> TaskPage:
    total_pages = count_pages(len(tasks), page_size)
    number = clamp_page(page, total_pages)
    start = (number - 1) * page_size
    return TaskPage(
        items=tuple(tasks[start : start + page_size]),
        number=number,
        total_pages=total_pages,
        total_matches=len(tasks),
    )


def visible_page(tasks: Iterable[Task], query: str, page: int, page_size: int) -> TaskPage:
    return paginate(filter_tasks(tasks, query), page, page_size)
