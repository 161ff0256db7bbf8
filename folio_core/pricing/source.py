"""
Price source abstraction.

PriceSource ABC: fetch_prices(symbols) -> {symbol: price}. The aggregation engine
only ever sees the mapping; how it was obtained (live quote, cache, synthetic)
stays behind this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping


class PriceSource(ABC):
    """
    Abstract price source. Implementations: StaticPriceSource, SyntheticPriceSource,
    ResilientPriceSource (live provider with per-symbol fallback).
    """

    @abstractmethod
    def fetch_prices(self, symbols: Iterable[str]) -> dict[str, float]:
        """
        Return the latest known price per symbol in the reporting currency.
        Best effort: a failing symbol must not raise or block the others.
        """
        ...


class StaticPriceSource(PriceSource):
    """Fixed prices. Symbols without an entry are left out of the result."""

    def __init__(self, prices: Mapping[str, float]) -> None:
        self._prices = {sym: float(p) for sym, p in prices.items()}

    def fetch_prices(self, symbols: Iterable[str]) -> dict[str, float]:
        return {sym: self._prices[sym] for sym in symbols if sym in self._prices}
