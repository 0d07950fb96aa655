r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that awaits a unit of
work with the same retry loop as RetryExecutor, suspending the calling
task instead of blocking a thread.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import inspect
from typing import TYPE_CHECKING, TypeVar

from multitry.core.config import ResultRetryOptions
from multitry.core.validation import validate_work
from multitry.retry.decider import RetryDecider
from multitry.retry.executor_core import (
    attempt_range,
    log_early_stop,
    log_exhausted,
    log_retryable_failure,
)
from multitry.retry.manager import CallbackManager
from multitry.utils.sleep import sleep_async

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from multitry.core.config import RetryOptions

T = TypeVar("T")


class AsyncRetryExecutor:
    """Executes an asynchronous unit of work with retry logic.

    The calling task is suspended while an attempt is awaited and during
    the delay, letting the event loop run other tasks. No additional task
    is spawned and attempts are strictly sequential.

    Cancellation is left to the host: ``asyncio.CancelledError`` is not an
    ``Exception`` subclass, so it is never passed to the exception filter
    and always propagates.

    Attributes:
        options: Retry options shared by every call to ``execute``.
        decider: Logic for deciding whether to retry.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> import asyncio
        >>> from multitry import ResultRetryOptions
        >>> from multitry.retry import AsyncRetryExecutor
        >>> async def work():
        ...     return 42
        ...
        >>> executor = AsyncRetryExecutor(ResultRetryOptions(delay=10))
        >>> asyncio.run(executor.execute(work))
        42

        ```
    """

    def __init__(self, options: RetryOptions | None = None) -> None:
        """Initialize async retry executor.

        Args:
            options: Retry options. Defaults to
                ``ResultRetryOptions.default()`` if ``None``.
        """
        self.options = options if options is not None else ResultRetryOptions.default()
        self.decider: RetryDecider = RetryDecider(self.options.exception_filter)
        self.callbacks: CallbackManager = CallbackManager(self.options)

    async def execute(self, work: Callable[[], Awaitable[T]]) -> T:
        """Execute the async unit of work with automatic retry logic.

        Note:
            The exception filter and the callbacks are plain synchronous
            callables invoked on the event loop, so they should be fast.

        Args:
            work: Zero-argument callable returning an awaitable, usually
                an ``async def`` function.

        Returns:
            The value produced by the first successful attempt, or the
                value returned by ``on_final_failure`` when no attempt
                succeeded.

        Raises:
            TypeError: If work is ``None`` or not callable, or if calling
                it returns something that is not awaitable. The latter
                is raised before the exception filter and never retried.
            ValueError: If the options fail validation.
            Exception: Any error the exception filter rejects, and any
                error raised by the filter or by a callback.
        """
        validate_work(work)
        self.options.validate()
        self.decider.exception_filter = self.options.exception_filter

        last_error: Exception | None = None
        for attempt in attempt_range(self.options.try_count):
            try:
                pending = work()
                if inspect.isawaitable(pending):
                    return await pending
            except Exception as exc:
                if not self.decider.should_retry_exception(exc, attempt):
                    raise
                last_error = exc
                log_retryable_failure(exc, attempt, self.options.try_count)
                if self.callbacks.on_exception(exc, attempt):
                    log_early_stop(attempt)
                    break
                await sleep_async(self.options.delay)
                continue
            msg = f"work must return an awaitable, got {type(pending).__name__}"
            raise TypeError(msg)
        else:
            log_exhausted(self.options.try_count)

        return self.callbacks.on_final_failure(last_error)
