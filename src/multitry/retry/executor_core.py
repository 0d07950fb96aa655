r"""Shared core logic for retry executors.

This module provides helper functions used by both the synchronous and
asynchronous retry executors.
"""

from __future__ import annotations

__all__ = ["attempt_range", "log_early_stop", "log_exhausted", "log_retryable_failure"]

import logging

logger: logging.Logger = logging.getLogger(__name__)


def attempt_range(try_count: int) -> range:
    """Return the attempt numbers allowed by the attempt budget.

    One attempt is always made, even when ``try_count`` is 0.

    Args:
        try_count: Total number of attempts, the first one included.

    Returns:
        The 0-indexed attempt numbers.

    Example:
        ```pycon
        >>> from multitry.retry.executor_core import attempt_range
        >>> list(attempt_range(3))
        [0, 1, 2]
        >>> list(attempt_range(0))
        [0]

        ```
    """
    return range(max(try_count, 1))


def log_retryable_failure(error: Exception, attempt: int, try_count: int) -> None:
    """Log a retryable failure.

    Args:
        error: The retryable error.
        attempt: Current attempt number (0-indexed).
        try_count: Total number of attempts.
    """
    logger.debug(
        "Attempt %s/%s failed with %s: %s",
        attempt + 1,
        max(try_count, 1),
        type(error).__name__,
        error,
    )


def log_early_stop(attempt: int) -> None:
    """Log that on_exception stopped the loop.

    Args:
        attempt: Attempt number that stopped the loop (0-indexed).
    """
    logger.debug("on_exception requested to stop after attempt %s", attempt + 1)


def log_exhausted(try_count: int) -> None:
    """Log that the attempt budget is exhausted.

    Args:
        try_count: Total number of attempts.
    """
    logger.debug("All %s attempts failed", max(try_count, 1))
