r"""Callback manager for orchestrating retry lifecycle events.

This module provides the CallbackManager class that handles invocation
of the per-attempt and final-failure callbacks.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from multitry.core.config import RetryOptions


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Missing callbacks are valid: an absent ``on_exception`` never stops
    the loop and an absent ``on_final_failure`` produces ``None``.
    Errors raised by callbacks are not caught.

    Attributes:
        options: Options holding the callback functions.
    """

    def __init__(self, options: RetryOptions) -> None:
        """Initialize callback manager.

        Args:
            options: Retry options.
        """
        self.options = options

    def on_exception(self, error: Exception, attempt: int) -> bool:
        """Invoke on_exception callback.

        Args:
            error: The retryable error raised by the attempt.
            attempt: Current attempt number (0-indexed).

        Returns:
            ``True`` if the callback asked to stop retrying.
        """
        if self.options.on_exception is None:
            return False
        return bool(self.options.on_exception(error, attempt))

    def on_final_failure(self, error: Exception) -> Any:
        """Invoke on_final_failure callback.

        Args:
            error: The last retryable error.

        Returns:
            The value produced by the handler, or ``None`` if no handler
                is set.
        """
        if self.options.on_final_failure is None:
            return None
        return self.options.on_final_failure(error)
