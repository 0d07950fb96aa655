r"""Delay utilities for waiting between attempts.

The options express delays in milliseconds while ``time.sleep`` and
``asyncio.sleep`` expect seconds.
"""

from __future__ import annotations

__all__ = ["sleep", "sleep_async", "to_seconds"]

import asyncio
import logging
import time

logger: logging.Logger = logging.getLogger(__name__)


def to_seconds(delay: float) -> float:
    """Convert a delay in milliseconds to seconds.

    Example:
        ```pycon
        >>> from multitry.utils.sleep import to_seconds
        >>> to_seconds(250)
        0.25

        ```
    """
    return delay / 1000


def sleep(delay: float) -> None:
    """Block the calling thread for ``delay`` milliseconds.

    Args:
        delay: Milliseconds to wait. Nothing happens if it is 0.
    """
    if delay <= 0:
        return
    logger.debug("Waiting %sms before next attempt", delay)
    time.sleep(to_seconds(delay))


async def sleep_async(delay: float) -> None:
    """Suspend the current task for ``delay`` milliseconds.

    Args:
        delay: Milliseconds to wait. Nothing happens if it is 0.
    """
    if delay <= 0:
        return
    logger.debug("Waiting %sms before next attempt", delay)
    await asyncio.sleep(to_seconds(delay))
