r"""Configuration dataclasses and defaults for the retry executors.

This module provides configuration constants and the dataclass-based
options objects consumed by ``try_run``, ``try_run_async`` and
``try_run_action``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_TRY_COUNT",
    "ResultRetryOptions",
    "RetryOptions",
    "accept_all",
    "default_result",
]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from multitry.core.validation import (
    validate_delay,
    validate_final_failure,
    validate_try_count,
)

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

# Total number of attempts, the first one included
DEFAULT_TRY_COUNT = 3

# Milliseconds to wait after a retryable failure
DEFAULT_DELAY = 0


def accept_all(error: Exception) -> bool:  # noqa: ARG001
    """Exception filter treating every error as retryable.

    Args:
        error: The error raised by the unit of work (unused).

    Returns:
        Always ``True``.
    """
    return True


def default_result(error: Exception) -> None:  # noqa: ARG001
    """Final-failure handler returning ``None`` as the fallback result."""
    return None


@dataclass
class RetryOptions:
    """Options for a unit of work that does not return a value.

    The options object is never mutated by the executors, except that a
    missing ``exception_filter`` is replaced with ``accept_all`` on
    validation. It can therefore be reused across calls.

    Args:
        exception_filter: Predicate deciding whether a raised error is
            retryable. ``False`` makes the error propagate immediately.
            ``None`` is replaced with ``accept_all``.
        on_exception: Optional callback invoked with ``(error, attempt)``
            after each retryable failure, where ``attempt`` is 0-indexed.
            Returning ``True`` stops retrying and goes straight to
            ``on_final_failure``. Returning ``False`` or ``None`` continues.
        try_count: Total number of attempts, the first one included.
            Must be an integer >= 0. One attempt is always made, even with 0.
        delay: Milliseconds to wait after each retryable failure that did
            not stop the loop. Must be >= 0.
        on_final_failure: Optional handler invoked with the last retryable
            error once the loop gives up. Skipped when ``None``.

    Raises:
        ValueError: If any parameter fails validation.

    Example:
        ```pycon
        >>> from multitry import RetryOptions
        >>> options = RetryOptions.default()
        >>> options.try_count
        3
        >>> options = RetryOptions(try_count=5, delay=100)
        >>> options.delay
        100
        >>> RetryOptions(exception_filter=None).exception_filter(ValueError())
        True

        ```
    """

    exception_filter: Callable[[Exception], bool] | None = accept_all
    on_exception: Callable[[Exception, int], bool | None] | None = None
    try_count: int = DEFAULT_TRY_COUNT
    delay: float = DEFAULT_DELAY
    on_final_failure: Callable[[Exception], Any] | None = None

    def __post_init__(self) -> None:
        self.validate()

    @classmethod
    def default(cls) -> RetryOptions:
        """Create options holding the default values.

        Returns:
            A new options object with an accept-all filter, no callbacks,
                ``try_count=3`` and ``delay=0``.
        """
        return cls()

    def validate(self) -> None:
        """Validate the options.

        A missing ``exception_filter`` is silently replaced with
        ``accept_all``. Validation is otherwise side-effect free and can
        be repeated.

        Raises:
            ValueError: If ``try_count`` or ``delay`` is negative.
        """
        if self.exception_filter is None:
            self.exception_filter = accept_all
        validate_try_count(self.try_count)
        validate_delay(self.delay)

    def merge(self, **overrides: Any) -> RetryOptions:
        """Create new options with specified parameters overridden.

        Only non-None override values are applied and the current
        instance is left unchanged.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new validated options object with overrides applied.

        Example:
            ```pycon
            >>> from multitry import RetryOptions
            >>> options = RetryOptions(try_count=3)
            >>> options.merge(try_count=5).try_count
            5
            >>> options.try_count
            3

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)


@dataclass
class ResultRetryOptions(RetryOptions, Generic[T]):
    """Options for a unit of work that returns a value.

    Same as ``RetryOptions`` except that ``on_final_failure`` is required:
    its return value becomes the result of the call when every attempt
    failed. The default handler returns ``None``.

    Example:
        ```pycon
        >>> from multitry import ResultRetryOptions
        >>> options = ResultRetryOptions(on_final_failure=lambda error: 42)
        >>> options.on_final_failure(ValueError())
        42

        ```
    """

    on_final_failure: Callable[[Exception], T] | None = default_result

    @classmethod
    def default(cls) -> ResultRetryOptions[T]:
        """Create options holding the default values.

        Returns:
            A new options object with an accept-all filter, a final-failure
                handler returning ``None``, ``try_count=3`` and ``delay=0``.
        """
        return cls()

    def validate(self) -> None:
        """Validate the options.

        Raises:
            ValueError: If ``on_final_failure`` is missing, or if
                ``try_count`` or ``delay`` is negative.
        """
        super().validate()
        validate_final_failure(self.on_final_failure)

