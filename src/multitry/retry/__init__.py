r"""Retry package implementing class-based composition pattern.

This package provides the retry executors, composed of a decider that
evaluates the exception filter and a manager that invokes callbacks.

Public API:
    - RetryDecider: Logic for deciding whether to retry
    - CallbackManager: Manager for callback invocations
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "CallbackManager",
    "RetryDecider",
    "RetryExecutor",
]

from multitry.retry.decider import RetryDecider
from multitry.retry.executor import RetryExecutor
from multitry.retry.executor_async import AsyncRetryExecutor
from multitry.retry.manager import CallbackManager
