"""Scheduler capability used by the stage pipeline to simulate work.

The pipeline only ever calls ``await scheduler.sleep(delay)``. Production
code uses real asyncio timers; tests use InstantScheduler, which yields to
the event loop without waiting and records the requested delays.
"""

import asyncio
from typing import List, Protocol


class Scheduler(Protocol):
    """Suspends the caller for roughly ``delay`` seconds."""

    async def sleep(self, delay: float) -> None:
        ...


class AsyncioScheduler:
    """Real-time scheduler backed by asyncio.sleep."""

    async def sleep(self, delay: float) -> None:
        await asyncio.sleep(max(0.0, delay))


class InstantScheduler:
    """
    Zero-delay scheduler for tests and non-interactive runs.

    Still yields to the event loop on every call so other tasks (e.g. a
    superseding run) interleave exactly as they would with real timers.

    Attributes:
        delays: Every delay requested, in call order.
    """

    def __init__(self):
        self.delays: List[float] = []

    async def sleep(self, delay: float) -> None:
        self.delays.append(delay)
        await asyncio.sleep(0)

    @property
    def total_delay(self) -> float:
        return sum(self.delays)


__all__ = ["Scheduler", "AsyncioScheduler", "InstantScheduler"]
