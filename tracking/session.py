"""
Portfolio session: host-side owner of the ledger and the latest price mapping.

Every ledger mutation and every price update recomputes the snapshot from scratch
and replaces the previous one. Observers are called with each new snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Protocol

from folio_core import DEFAULT_CATALOG, Catalog, Portfolio, Transaction, TransactionKind, TransactionLedger, aggregate

logger = logging.getLogger(__name__)


class SnapshotObserver(Protocol):
    """Callback after each recomputation (e.g. redraw, log, report)."""

    def __call__(self, portfolio: Portfolio) -> None:
        ...


class PortfolioSession:
    """
    Single-writer state for one user session: ledger, current and previous price
    mappings, latest snapshot. The aggregator only ever receives read-only copies.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        *,
        ledger: TransactionLedger | None = None,
        observers: Sequence[SnapshotObserver] = (),
    ) -> None:
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self.ledger = ledger if ledger is not None else TransactionLedger()
        self.observers: list[SnapshotObserver] = list(observers)
        self._prices: Mapping[str, float] = MappingProxyType({})
        self._previous_prices: Mapping[str, float] = MappingProxyType({})
        # Initial snapshot for a pre-filled ledger; observers are not notified.
        self._snapshot = aggregate(self.ledger.chronological(), self._prices, self.catalog)

    @property
    def snapshot(self) -> Portfolio:
        return self._snapshot

    @property
    def prices(self) -> Mapping[str, float]:
        return self._prices

    @property
    def previous_prices(self) -> Mapping[str, float]:
        return self._previous_prices

    def symbols(self) -> list[str]:
        """Symbols to poll: the full catalog."""
        return self.catalog.symbols()

    def subscribe(self, observer: SnapshotObserver) -> None:
        self.observers.append(observer)

    # --- ledger mutations ---

    def record(
        self,
        kind: TransactionKind | str,
        instrument: str,
        quantity: float,
        unit_price: float,
        trade_date: datetime | date | str | None = None,
    ) -> Transaction:
        transaction = self.ledger.record(kind, instrument, quantity, unit_price, trade_date)
        logger.debug("Recorded %s %s %s @ %s", transaction.kind.value, transaction.quantity, instrument, unit_price)
        self._recompute()
        return transaction

    def update(self, transaction_id: str, **changes: Any) -> Transaction:
        transaction = self.ledger.update(transaction_id, **changes)
        self._recompute()
        return transaction

    def delete(self, transaction_id: str) -> Transaction:
        transaction = self.ledger.delete(transaction_id)
        self._recompute()
        return transaction

    # --- prices ---

    def apply_prices(self, prices: Mapping[str, float]) -> Portfolio:
        """Replace the price mapping (keeping the old one as previous) and recompute."""
        self._previous_prices = self._prices
        self._prices = MappingProxyType(dict(prices))
        return self._recompute()

    def price_changes(self) -> dict[str, float]:
        """Percent change per symbol between the previous and current mapping (0 if unknown)."""
        changes = {}
        for symbol, current in self._prices.items():
            previous = self._previous_prices.get(symbol)
            if not current or not previous:
                changes[symbol] = 0.0
            else:
                changes[symbol] = (current - previous) / previous * 100
        return changes

    def _recompute(self) -> Portfolio:
        self._snapshot = aggregate(self.ledger.chronological(), self._prices, self.catalog)
        for observer in self.observers:
            observer(self._snapshot)
        return self._snapshot
