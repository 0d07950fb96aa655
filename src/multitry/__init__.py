r"""multitry - Run a unit of work again until it succeeds.

This package retries a synchronous or asynchronous callable until it
succeeds, an exception filter rejects the raised error, an exception
callback asks to stop, or the attempt budget is exhausted. When no
attempt succeeded, a final-failure handler supplies the fallback result
or re-raises the last error.

Key Features:
    - Synchronous functions, coroutine functions and functions returning nothing
    - Exception filter deciding which errors are retryable
    - Per-attempt callback that can stop retrying early
    - Fixed delay between attempts (blocking or non-blocking)
    - Final-failure handler producing a fallback value
    - ``reraise`` helper keeping the original traceback

Example:
    ```pycon
    >>> from multitry import ResultRetryOptions, reraise, try_run
    >>> calls = []
    >>> def work():
    ...     calls.append(1)
    ...     if len(calls) < 3:
    ...         raise ConnectionError("flaky")
    ...     return "done"
    ...
    >>> try_run(work, ResultRetryOptions(try_count=3, on_final_failure=reraise))
    'done'
    >>> len(calls)
    3

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_TRY_COUNT",
    "ResultRetryOptions",
    "RetryOptions",
    "__version__",
    "accept_all",
    "reraise",
    "try_run",
    "try_run_action",
    "try_run_async",
]

from importlib.metadata import PackageNotFoundError, version

from multitry.core.config import (
    DEFAULT_DELAY,
    DEFAULT_TRY_COUNT,
    ResultRetryOptions,
    RetryOptions,
    accept_all,
)
from multitry.try_run import try_run, try_run_action
from multitry.try_run_async import try_run_async
from multitry.utils.exceptions import reraise

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
