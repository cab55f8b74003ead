"""
Time source used by the retry and polling helpers.

Tests replace the system clock with one whose sleep advances time
instantly, so timing behaviour can be checked without real delays.
"""

import asyncio
import time
from abc import ABC, abstractmethod


class Clock(ABC):
    """Monotonic millisecond clock with an awaitable sleep."""

    @abstractmethod
    def now_ms(self) -> float:
        """Return the current monotonic time in milliseconds."""

    @abstractmethod
    async def sleep_ms(self, ms: float) -> None:
        """Suspend the calling task for ``ms`` milliseconds."""


class SystemClock(Clock):
    """Clock backed by ``time.monotonic`` and ``asyncio.sleep``."""

    def now_ms(self) -> float:
        return time.monotonic() * 1000

    async def sleep_ms(self, ms: float) -> None:
        await asyncio.sleep(max(ms, 0) / 1000)
