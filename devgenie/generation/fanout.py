"""Concurrent fan-out of one prompt to several providers."""

import asyncio
from collections.abc import Sequence
import time

import structlog

from ..providers.base import ProviderAdapter, ProviderResult

logger = structlog.get_logger()


class FanOutCoordinator:
    """Sends one prompt to every adapter at once and keeps the successful replies.

    Adapters absorb their own failures, so waiting for "all" here never fails
    early. Replies come back in completion order.
    """

    def __init__(self, adapters: Sequence[ProviderAdapter]) -> None:
        self.adapters = list(adapters)

    async def generate(self, prompt: str) -> list[ProviderResult]:
        """Return the successful replies; empty when no adapter succeeded."""
        if not self.adapters:
            logger.info("fanout_skipped", reason="no_providers_configured")
            return []

        start = time.monotonic()
        tasks = [asyncio.create_task(adapter.invoke(prompt)) for adapter in self.adapters]

        replies: list[ProviderResult] = []
        failed: list[str] = []
        for next_done in asyncio.as_completed(tasks):
            result = await next_done
            if result.ok:
                replies.append(result)
            else:
                failed.append(result.source)

        logger.info(
            "fanout_completed",
            providers=[a.name for a in self.adapters],
            succeeded=[r.source for r in replies],
            failed=failed,
            duration_ms=round((time.monotonic() - start) * 1000, 2),
        )
        return replies
