from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    wait_random,
)

from task_tracker.core.exceptions import StoreUnavailableError

_T = TypeVar("_T")


@dataclass(frozen=True)
class RetryPolicy:
    """Retries store connection attempts. Store operations themselves are never retried."""

    max_attempts: int = 1  # fail fast
    initial_wait: float = 0.1
    max_wait: float = 2.0

    async def run(self, fn: Callable[[], Awaitable[_T]]) -> _T:
        return await self._retrying()(fn)

    def _retrying(self) -> AsyncRetrying:
        # Jitter is bounded by initial_wait so a zero-wait policy never sleeps
        backoff = wait_exponential(multiplier=self.initial_wait, max=self.max_wait)
        return AsyncRetrying(
            retry=retry_if_exception_type(StoreUnavailableError),
            stop=stop_after_attempt(self.max_attempts),
            wait=backoff + wait_random(0, self.initial_wait),
            reraise=True,
        )
