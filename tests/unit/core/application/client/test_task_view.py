import math

import pytest

from fakes import make_task
from task_tracker.core.application.client.task_view import (
    count_pages,
    filter_tasks,
    paginate,
    visible_page,
)


@pytest.mark.parametrize("total", [0, 1, 4, 5, 6, 10, 11, 23])
def test_pages_cover_filtered_set_exactly_once(total):
    tasks = [make_task(i) for i in range(1, total + 1)]

    pages = [paginate(tasks, n, 5) for n in range(1, count_pages(total, 5) + 1)]

    assert len(pages) == math.ceil(total / 5)
    assert all(len(page.items) <= 5 for page in pages)
    assert [task for page in pages for task in page.items] == tasks


def test_filter_by_title_substring_is_case_insensitive():
    tasks = [make_task(1, title="Read Book"), make_task(2, title="Write essay")]

    assert filter_tasks(tasks, "read book") == [tasks[0]]
    assert filter_tasks(tasks, "ESSAY") == [tasks[1]]


def test_filter_matches_description_too():
    tasks = [make_task(1, description="Chapter one"), make_task(2, description="Exercises")]

    assert filter_tasks(tasks, "chapter") == [tasks[0]]


def test_empty_query_keeps_everything():
    tasks = [make_task(i) for i in range(3)]

    assert filter_tasks(tasks, "") == tasks


def test_filter_runs_over_full_collection_before_paginating():
    tasks = [make_task(i) for i in range(1, 13)]
    tasks.append(make_task(13, title="Needle"))

    page = visible_page(tasks, "needle", page=1, page_size=5)

    assert page.items == (tasks[-1],)
    assert page.total_pages == 1
    assert page.total_matches == 1


def test_page_number_is_clamped():
    tasks = [make_task(i) for i in range(1, 8)]

    assert paginate(tasks, 0, 5).number == 1
    last = paginate(tasks, 9, 5)
    assert last.number == 2
    assert [t.id for t in last.items] == ["task-6", "task-7"]
    assert last.has_previous and not last.has_next


def test_empty_collection_yields_single_empty_page():
    page = paginate([], 3, 5)

    assert page.items == ()
    assert page.number == 1
    assert page.total_pages == 0


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        count_pages(3, 0)
