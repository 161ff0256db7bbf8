"""
Price refresher: polls a PriceSource on a fixed interval and feeds the session.

One asyncio task per refresher. Fetches run in a worker thread so blocking HTTP
does not stall the loop. After stop() returns, no further fetch result is applied.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from folio_core.config import Settings
from folio_core.pricing import AlphaVantageClient, PriceSource, ResilientPriceSource

if TYPE_CHECKING:
    from tracking.session import PortfolioSession

logger = logging.getLogger(__name__)


def default_price_source(settings: Settings | None = None) -> ResilientPriceSource:
    """Alpha Vantage quotes with per-symbol fallback, configured from settings (or env)."""
    settings = settings if settings is not None else Settings.from_env()
    client = AlphaVantageClient(settings.api_key, timeout=settings.http_timeout)
    return ResilientPriceSource(client, request_delay=settings.request_delay)


class PriceRefresher:
    """
    Polling loop: refresh immediately, then every `interval` seconds.
    Results are applied in request order; a result older than the last applied
    one (or arriving after stop) is dropped.
    """

    def __init__(
        self,
        source: PriceSource,
        session: "PortfolioSession",
        interval: float = 30.0,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.source = source
        self.session = session
        self.interval = interval
        self._task: asyncio.Task[None] | None = None
        self._stopped = False
        self._issued = 0
        self._applied = 0
        # Completed polling iterations.
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def refresh_once(self) -> bool:
        """
        Fetch the full catalog and apply it. Returns True if the result was applied.
        A failing fetch is logged and leaves the current prices in place.
        """
        if self._stopped:
            return False
        self._issued += 1
        request_id = self._issued
        symbols = self.session.symbols()
        try:
            prices = await asyncio.to_thread(self.source.fetch_prices, symbols)
        except Exception:
            logger.exception("Price refresh %d failed; keeping previous prices", request_id)
            return False
        if self._stopped or request_id < self._applied:
            logger.debug("Discarding stale price refresh %d", request_id)
            return False
        self._applied = request_id
        self.session.apply_prices(prices)
        logger.debug("Applied price refresh %d (%d symbols)", request_id, len(prices))
        return True

    async def _run(self) -> None:
        while not self._stopped:
            try:
                await self.refresh_once()
            except Exception:
                logger.exception("Price refresh tick failed; polling continues")
            self.ticks += 1
            await asyncio.sleep(self.interval)

    def start(self) -> None:
        """Schedule the polling task on the running loop."""
        if self.running:
            return
        self._stopped = False
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info("Price refresher started (interval=%ss, %d symbols)", self.interval, len(self.session.symbols()))

    async def stop(self) -> None:
        """Cancel polling and wait for the task to finish. Idempotent."""
        self._stopped = True
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Price refresher stopped after %d tick(s)", self.ticks)

    async def __aenter__(self) -> "PriceRefresher":
        self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()
