r"""Contains functions for running asynchronous work with automatic retry
logic."""

from __future__ import annotations

__all__ = ["try_run_async"]

from typing import TYPE_CHECKING, TypeVar

from multitry.core.config import ResultRetryOptions
from multitry.core.validation import validate_work
from multitry.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")


async def try_run_async(
    work: Callable[[], Awaitable[T]], options: ResultRetryOptions[T] | None = None
) -> T:
    """Await a coroutine function, retrying it when it raises.

    This is the asynchronous version of ``try_run``. The calling task is
    suspended while each attempt runs and during the delay between
    attempts, using ``asyncio.sleep``.

    Args:
        work: Zero-argument callable returning an awaitable. It is called
            again for every attempt, so it must not be a coroutine object.
        options: Retry options. Defaults to
            ``ResultRetryOptions.default()``.

    Returns:
        The value produced by ``work``, or the fallback value returned by
            ``on_final_failure``.

    Raises:
        TypeError: If work is ``None`` or not callable, or if it returns
            something that is not awaitable.
        ValueError: If the options fail validation.
        Exception: Any error the exception filter rejects, and any error
            raised by the filter or by a callback.

    Example:
        ```pycon
        >>> import asyncio
        >>> from multitry import ResultRetryOptions, try_run_async
        >>> async def work():
        ...     raise ConnectionResetError("reset by peer")
        ...
        >>> options = ResultRetryOptions(delay=10, on_final_failure=lambda error: None)
        >>> asyncio.run(try_run_async(work, options)) is None
        True

        ```
    """
    validate_work(work)
    if options is None:
        options = ResultRetryOptions.default()
    return await AsyncRetryExecutor(options).execute(work)
