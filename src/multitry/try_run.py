r"""Contains functions for running synchronous work with automatic retry
logic."""

from __future__ import annotations

__all__ = ["try_run", "try_run_action"]

from typing import TYPE_CHECKING, Any, TypeVar

from multitry.core.config import ResultRetryOptions, RetryOptions
from multitry.core.validation import validate_work
from multitry.retry.executor import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def try_run(work: Callable[[], T], options: ResultRetryOptions[T] | None = None) -> T:
    """Run a function, retrying it when it raises.

    The function is called up to ``options.try_count`` times (at least
    once). After each retryable failure, ``on_exception`` is invoked and
    the calling thread sleeps ``options.delay`` milliseconds. When no
    attempt succeeded, the result of ``on_final_failure`` is returned.

    Args:
        work: Zero-argument callable to run.
        options: Retry options. Defaults to
            ``ResultRetryOptions.default()``: accept every error, 3
            attempts, no delay and ``None`` as fallback result.

    Returns:
        The value returned by ``work``, or the fallback value returned by
            ``on_final_failure``.

    Raises:
        TypeError: If work is ``None`` or not callable.
        ValueError: If the options fail validation.
        Exception: Any error the exception filter rejects, and any error
            raised by the filter or by a callback.

    Example:
        ```pycon
        >>> from multitry import ResultRetryOptions, try_run
        >>> def work():
        ...     raise TimeoutError("too slow")
        ...
        >>> options = ResultRetryOptions(on_final_failure=lambda error: "fallback")
        >>> try_run(work, options)
        'fallback'
        >>> try_run(lambda: 42)
        42

        ```
    """
    validate_work(work)
    if options is None:
        options = ResultRetryOptions.default()
    return RetryExecutor(options).execute(work)


def try_run_action(work: Callable[[], Any], options: RetryOptions | None = None) -> None:
    """Run a function returning nothing, retrying it when it raises.

    Same retry loop as ``try_run``. ``on_final_failure`` is optional and
    only invoked for its side effect.

    Args:
        work: Zero-argument callable to run. Its return value is ignored.
        options: Retry options. Defaults to ``RetryOptions.default()``.

    Raises:
        TypeError: If work is ``None`` or not callable.
        ValueError: If the options fail validation.
        Exception: Any error the exception filter rejects, and any error
            raised by the filter or by a callback.

    Example:
        ```pycon
        >>> from multitry import RetryOptions, try_run_action
        >>> failures = []
        >>> def work():
        ...     raise OSError("disk full")
        ...
        >>> try_run_action(work, RetryOptions(try_count=2, on_final_failure=failures.append))
        >>> failures
        [OSError('disk full')]

        ```
    """
    validate_work(work)
    if options is None:
        options = RetryOptions.default()
    RetryExecutor(options).execute_action(work)
