"""Simulated network suspension at the boundary of each service call."""

from __future__ import annotations

import asyncio

from talentscope.config import Settings


class Latency:
    def __init__(self, settings: Settings):
        self._settings = settings

    async def pause(self, operation: str) -> None:
        delay = self._settings.latency_for(operation)
        if delay > 0:
            await asyncio.sleep(delay)
        else:
            # Still yield so callers observe a suspension point.
            await asyncio.sleep(0)
