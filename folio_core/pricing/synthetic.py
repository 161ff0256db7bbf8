"""
Synthetic price source: deterministic placeholder prices when no provider answers.

Each symbol has a base price (or one derived from its characters) plus a slow
sine variation driven by the injected clock. Same clock reading, same price.
"""

from __future__ import annotations

import math
import time
from collections.abc import Callable, Iterable

from folio_core.pricing.source import PriceSource

# symbol -> (base price, variation scale)
BASE_PRICES: dict[str, tuple[float, float]] = {
    # Crypto
    "BTC-EUR": (35000.0, 100.0),
    "ETH-EUR": (2000.0, 10.0),
    "XRP-EUR": (0.5, 0.01),
    "SOL-EUR": (80.0, 1.0),
    "ADA-EUR": (0.4, 0.01),
    "DOT-EUR": (6.0, 0.1),
    "MATIC-EUR": (0.8, 0.01),
    # US tech
    "AAPL": (180.0, 1.0),
    "MSFT": (350.0, 1.0),
    "GOOGL": (140.0, 1.0),
    "AMZN": (170.0, 1.0),
    "META": (450.0, 1.0),
    "NVDA": (780.0, 1.0),
    "TSLA": (180.0, 1.0),
    # CAC 40
    "AI.PA": (160.0, 1.0),
    "MC.PA": (780.0, 1.0),
    "OR.PA": (420.0, 1.0),
    "ESE.PA": (174.0, 1.0),
    "BNP.PA": (62.0, 1.0),
    "SAN.PA": (87.0, 1.0),
    # ETFs
    "CW8.PA": (420.0, 1.0),
    "500.PA": (78.0, 1.0),
    "EP500.PA": (15.0, 1.0),
    "EWRD.PA": (280.0, 1.0),
    "IWDA.AS": (75.0, 1.0),
    "VWCE.DE": (98.0, 1.0),
    "ESP0.PA": (42.0, 1.0),
    "CSPX.AS": (460.0, 1.0),
    "VUSA.AS": (82.0, 1.0),
}

# Seconds per radian of the variation wave; amplitude is +/- 10 units of scale.
VARIATION_PERIOD = 10.0
VARIATION_AMPLITUDE = 10.0


def synthetic_price(symbol: str, now: float) -> float:
    """Placeholder price for symbol at clock reading now (seconds). Never negative."""
    variation = math.sin(now / VARIATION_PERIOD) * VARIATION_AMPLITUDE
    if symbol in BASE_PRICES:
        base, scale = BASE_PRICES[symbol]
        return max(base + variation * scale, 0.0)
    # Unknown symbol: 20..119 from its characters, never below 10 after variation.
    base = sum(ord(ch) for ch in symbol) % 100 + 20
    return base + variation


class SyntheticPriceSource(PriceSource):
    """Deterministic prices for any symbol; used as the last-resort fallback."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock

    def price(self, symbol: str) -> float:
        return synthetic_price(symbol, self._clock())

    def fetch_prices(self, symbols: Iterable[str]) -> dict[str, float]:
        now = self._clock()
        return {sym: synthetic_price(sym, now) for sym in symbols}
