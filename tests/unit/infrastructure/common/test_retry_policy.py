import warnings

import pytest

from task_tracker.core.exceptions import StoreError, StoreUnavailableError
from task_tracker.infrastructure.common.retry import RetryPolicy


class Flaky:
    def __init__(self, failures: int, error: Exception) -> None:
        self.failures = failures
        self.error = error
        self.calls = 0

    async def __call__(self) -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error
        return "connected"


@pytest.mark.asyncio
async def test_retries_unavailable_store_without_deprecation_warnings():
    attempt = Flaky(failures=2, error=StoreUnavailableError("down"))

    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        result = await RetryPolicy(max_attempts=3, initial_wait=0, max_wait=0).run(attempt)

    assert result == "connected"
    assert attempt.calls == 3


@pytest.mark.asyncio
async def test_gives_up_after_max_attempts():
    attempt = Flaky(failures=5, error=StoreUnavailableError("down"))

    with pytest.raises(StoreUnavailableError):
        await RetryPolicy(max_attempts=2, initial_wait=0, max_wait=0).run(attempt)

    assert attempt.calls == 2


@pytest.mark.asyncio
async def test_other_store_errors_are_not_retried():
    attempt = Flaky(failures=1, error=StoreError("corrupt"))

    with pytest.raises(StoreError):
        await RetryPolicy(max_attempts=3, initial_wait=0, max_wait=0).run(attempt)

    assert attempt.calls == 1
