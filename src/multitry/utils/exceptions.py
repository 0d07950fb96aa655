r"""Exception handling utilities for retry callbacks.

This module provides helpers for callbacks that decide to abort instead
of supplying a fallback value.
"""

from __future__ import annotations

__all__ = ["reraise"]

from typing import NoReturn


def reraise(error: BaseException) -> NoReturn:
    """Raise a previously caught error again.

    The same exception object is raised, not a new one wrapping it, so
    callers up the stack see the original type, message and cause. The
    traceback already attached to the error is kept and still ends in
    the frames of the failing attempt. This is meant to be used inside
    ``on_exception`` or ``on_final_failure`` callbacks.

    Args:
        error: The error to raise again.

    Raises:
        BaseException: Always raises ``error``.

    Example:
        ```pycon
        >>> from multitry import ResultRetryOptions, reraise, try_run
        >>> def work():
        ...     raise KeyError("missing")
        ...
        >>> options = ResultRetryOptions(on_final_failure=reraise)
        >>> try:
        ...     try_run(work, options)
        ... except KeyError as exc:
        ...     print(repr(exc))
        ...
        KeyError('missing')

        ```
    """
    raise error
