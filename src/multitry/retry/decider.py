r"""Retry decision logic for determining whether to retry an attempt.

This module provides the RetryDecider class that evaluates the
user-supplied exception filter against errors raised by the unit of
work.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

import logging
from typing import TYPE_CHECKING

from multitry.core.config import accept_all

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether a failed attempt should be retried.

    Errors raised by the filter itself are not caught: they propagate to
    the caller and abandon the retry loop.
    """

    def __init__(self, exception_filter: Callable[[Exception], bool] | None) -> None:
        """Initialize retry decider.

        Args:
            exception_filter: Predicate returning ``True`` for retryable
                errors. ``None`` accepts every error.
        """
        self.exception_filter = exception_filter if exception_filter is not None else accept_all

    def should_retry_exception(self, exception: Exception, attempt: int) -> bool:
        """Determine if an exception is retryable.

        Args:
            exception: The exception raised by the unit of work.
            attempt: Current attempt number (0-indexed).

        Returns:
            ``True`` if the exception is retryable, otherwise ``False``.
        """
        if self.exception_filter(exception):
            return True
        logger.debug(
            "Attempt %s raised non-retryable %s: %s",
            attempt + 1,
            type(exception).__name__,
            exception,
        )
        return False
