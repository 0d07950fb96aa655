r"""Core configuration and validation for the retry executors.

This package provides the options dataclasses, their default values and
the parameter validation functions they rely on.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_TRY_COUNT",
    "ResultRetryOptions",
    "RetryOptions",
    "accept_all",
    "default_result",
    "validate_delay",
    "validate_final_failure",
    "validate_try_count",
    "validate_work",
]

from multitry.core.config import (
    DEFAULT_DELAY,
    DEFAULT_TRY_COUNT,
    ResultRetryOptions,
    RetryOptions,
    accept_all,
    default_result,
)
from multitry.core.validation import (
    validate_delay,
    validate_final_failure,
    validate_try_count,
    validate_work,
)
