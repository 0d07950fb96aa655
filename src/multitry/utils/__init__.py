r"""Utility functions for the retry executors."""

from __future__ import annotations

__all__ = ["reraise", "sleep", "sleep_async", "to_seconds"]

from multitry.utils.exceptions import reraise
from multitry.utils.sleep import sleep, sleep_async, to_seconds
