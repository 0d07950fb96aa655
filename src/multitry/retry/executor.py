r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs a unit of work in
the calling thread until it succeeds, the exception filter rejects an
error, ``on_exception`` stops the loop or the attempt budget is
exhausted.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

from typing import TYPE_CHECKING, Any, TypeVar

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
from multitry.utils.sleep import sleep

if TYPE_CHECKING:
    from collections.abc import Callable

    from multitry.core.config import RetryOptions

T = TypeVar("T")


class RetryExecutor:
    """Executes a synchronous unit of work with retry logic.

    The calling thread runs every attempt and every delay. Attempts are
    strictly sequential.

    Attributes:
        options: Retry options shared by every call to ``execute``.
        decider: Logic for deciding whether to retry.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> from multitry import ResultRetryOptions
        >>> from multitry.retry import RetryExecutor
        >>> attempts = []
        >>> def work():
        ...     attempts.append(1)
        ...     if len(attempts) < 2:
        ...         raise ConnectionError("flaky")
        ...     return "ok"
        ...
        >>> executor = RetryExecutor(ResultRetryOptions(try_count=3))
        >>> executor.execute(work)
        'ok'
        >>> len(attempts)
        2

        ```
    """

    def __init__(self, options: RetryOptions | None = None) -> None:
        """Initialize retry executor.

        Args:
            options: Retry options. Defaults to
                ``ResultRetryOptions.default()`` if ``None``.
        """
        self.options = options if options is not None else ResultRetryOptions.default()
        self.decider: RetryDecider = RetryDecider(self.options.exception_filter)
        self.callbacks: CallbackManager = CallbackManager(self.options)

    def execute(self, work: Callable[[], T]) -> T:
        """Execute the unit of work with automatic retry logic.

        Args:
            work: Zero-argument callable to run.

        Returns:
            The value returned by the first successful attempt, or the
                value returned by ``on_final_failure`` when no attempt
                succeeded.

        Raises:
            TypeError: If work is ``None`` or not callable.
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
                return work()
            except Exception as exc:
                if not self.decider.should_retry_exception(exc, attempt):
                    raise
                last_error = exc
                log_retryable_failure(exc, attempt, self.options.try_count)
                if self.callbacks.on_exception(exc, attempt):
                    log_early_stop(attempt)
                    break
                sleep(self.options.delay)
        else:
            log_exhausted(self.options.try_count)

        return self.callbacks.on_final_failure(last_error)

    def execute_action(self, work: Callable[[], Any]) -> None:
        """Execute a unit of work that returns nothing.

        Same loop as ``execute``; the return value of ``work`` and of
        ``on_final_failure`` are discarded.

        Args:
            work: Zero-argument callable to run.

        Raises:
            TypeError: If work is ``None`` or not callable.
            ValueError: If the options fail validation.
            Exception: Any error the exception filter rejects, and any
                error raised by the filter or by a callback.
        """
        self.execute(work)
