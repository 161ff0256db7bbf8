"""
Resilient price source: live provider with per-symbol fallback.

Symbols are quoted one at a time. A failure for one symbol never affects the
others: it degrades to that symbol's last good live price, then to the fallback
source (synthetic prices by default).
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Iterable

from folio_core.pricing.source import PriceSource
from folio_core.pricing.synthetic import SyntheticPriceSource
from folio_core.pricing.types import PriceOrigin, QuoteError, QuoteProvider

logger = logging.getLogger(__name__)


class ResilientPriceSource(PriceSource):
    """
    Wrap a QuoteProvider. Remembers the last good quote per symbol and records
    where each returned price came from (see last_sources).
    request_delay pauses between consecutive requests to respect provider rate limits.
    """

    def __init__(
        self,
        provider: QuoteProvider,
        fallback: PriceSource | None = None,
        *,
        request_delay: float = 0.2,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._provider = provider
        self._fallback = fallback if fallback is not None else SyntheticPriceSource()
        self._request_delay = request_delay
        self._sleep = sleep
        self._last_good: dict[str, float] = {}
        self.last_sources: dict[str, PriceOrigin] = {}

    def last_known(self, symbol: str) -> float | None:
        """Last price successfully quoted by the provider for symbol."""
        return self._last_good.get(symbol)

    def fetch_prices(self, symbols: Iterable[str]) -> dict[str, float]:
        prices: dict[str, float] = {}
        for i, symbol in enumerate(dict.fromkeys(symbols)):
            if i > 0 and self._request_delay > 0:
                self._sleep(self._request_delay)
            price = self._price_for(symbol)
            if price is not None:
                prices[symbol] = price
        return prices

    def _price_for(self, symbol: str) -> float | None:
        try:
            price = float(self._provider.get_quote(symbol))
            if not math.isfinite(price) or price < 0:
                raise QuoteError(symbol, f"invalid price {price}")
        except QuoteError as e:
            return self._degrade(symbol, e.reason)
        except Exception as e:
            logger.exception("Quote provider error for %s", symbol)
            return self._degrade(symbol, f"{type(e).__name__}: {e}")
        self._last_good[symbol] = price
        self.last_sources[symbol] = PriceOrigin.LIVE
        return price

    def _degrade(self, symbol: str, reason: str) -> float | None:
        cached = self._last_good.get(symbol)
        if cached is not None:
            logger.warning("Quote failed for %s (%s); using last known price %s", symbol, reason, cached)
            self.last_sources[symbol] = PriceOrigin.CACHE
            return cached
        fallback = self._fallback.fetch_prices([symbol]).get(symbol)
        if fallback is None:
            logger.warning("Quote failed for %s (%s); no fallback price available", symbol, reason)
            self.last_sources.pop(symbol, None)
            return None
        logger.warning("Quote failed for %s (%s); using fallback price %.4f", symbol, reason, fallback)
        self.last_sources[symbol] = PriceOrigin.FALLBACK
        return fallback
