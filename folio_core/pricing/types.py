"""
Pricing-layer types: quote provider protocol, quote error, price origin.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class PriceOrigin(Enum):
    """Where a price in a fetched mapping came from."""

    LIVE = "live"
    CACHE = "cache"
    FALLBACK = "fallback"


class QuoteError(Exception):
    """A single symbol's quote could not be obtained from a provider."""

    def __init__(self, symbol: str, reason: str) -> None:
        super().__init__(f"{symbol}: {reason}")
        self.symbol = symbol
        self.reason = reason


class QuoteProvider(Protocol):
    """Upstream that quotes one symbol at a time. Raises QuoteError on failure."""

    def get_quote(self, symbol: str) -> float:
        ...
