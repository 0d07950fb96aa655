r"""Parameter validation utilities for retry options.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before the retry loop starts.
"""

from __future__ import annotations

__all__ = [
    "validate_delay",
    "validate_final_failure",
    "validate_try_count",
    "validate_work",
]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


def validate_delay(delay: float) -> None:
    """Validate the delay between attempts.

    Args:
        delay: Milliseconds to wait after a retryable failure.
            Must be >= 0. A value of 0 means no delay.

    Raises:
        ValueError: If delay is negative.

    Example:
        ```pycon
        >>> from multitry.core.validation import validate_delay
        >>> validate_delay(0)
        >>> validate_delay(250)
        >>> validate_delay(-1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: delay must be >= 0, got -1

        ```
    """
    if delay < 0:
        msg = f"delay must be >= 0, got {delay}"
        raise ValueError(msg)


def validate_try_count(try_count: int) -> None:
    """Validate the attempt budget.

    Args:
        try_count: Total number of attempts, the first one included.
            Must be an integer >= 0. A value of 0 still makes one attempt.

    Raises:
        ValueError: If try_count is not an integer or is negative.

    Example:
        ```pycon
        >>> from multitry.core.validation import validate_try_count
        >>> validate_try_count(3)
        >>> validate_try_count(0)

        ```
    """
    if isinstance(try_count, bool) or not isinstance(try_count, int) or try_count < 0:
        msg = f"try_count must be an integer >= 0, got {try_count!r}"
        raise ValueError(msg)


def validate_final_failure(on_final_failure: Callable[[Exception], Any] | None) -> None:
    """Validate that a final-failure handler is set.

    Args:
        on_final_failure: The handler producing the fallback result.

    Raises:
        ValueError: If the handler is ``None``.
    """
    if on_final_failure is None:
        msg = "on_final_failure must be set"
        raise ValueError(msg)


def validate_work(work: Callable[[], Any] | None) -> None:
    """Validate the unit of work passed to an executor.

    Args:
        work: The zero-argument callable to run.

    Raises:
        TypeError: If work is ``None`` or not callable.
    """
    if work is None:
        msg = "work must be set"
        raise TypeError(msg)
    if not callable(work):
        msg = f"work must be callable, got {type(work).__name__}"
        raise TypeError(msg)
