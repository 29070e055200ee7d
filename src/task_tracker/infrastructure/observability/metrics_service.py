"""Prometheus metrics for the task service.

Labels use only static enumerations, never task ids.
"""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager

from prometheus_client import Counter, Histogram

TASK_OPERATIONS_TOTAL = Counter(
    "task_tracker_operations_total",
    "Task service operations by outcome",
    ["operation", "outcome"],
)

STORE_LATENCY_SECONDS = Histogram(
    "task_tracker_store_latency_seconds",
    "Task store call latency in seconds",
    ["operation"],
)


@contextmanager
def track_operation(operation: str) -> Iterator[None]:
    """Count one service operation, labelled with the exception type on failure."""
    try:
        yield
    except Exception as exc:
        TASK_OPERATIONS_TOTAL.labels(operation=operation, outcome=type(exc).__name__).inc()
        raise
    TASK_OPERATIONS_TOTAL.labels(operation=operation, outcome="success").inc()


@contextmanager
def time_store_call(operation: str) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        STORE_LATENCY_SECONDS.labels(operation=operation).observe(time.perf_counter() - start)
