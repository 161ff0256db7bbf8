"""
Position aggregation: fold a transaction list and a price mapping into a Portfolio.

Pure function. No I/O, no state kept between calls, arguments are never mutated.
Transactions are folded in the order given, so callers pass them chronologically.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from folio_core.catalog import DEFAULT_CATALOG, Catalog
from folio_core.portfolio import Portfolio
from folio_core.position import Position
from folio_core.transaction import Transaction, TransactionKind


def _fold(transactions: Iterable[Transaction]) -> dict[str, tuple[float, float]]:
    """instrument -> (net quantity, average cost) for instruments still held."""
    running: dict[str, tuple[float, float]] = {}
    for t in transactions:
        quantity, average_cost = running.get(t.instrument, (0.0, 0.0))
        if t.kind == TransactionKind.BUY:
            new_quantity = quantity + t.quantity
            average_cost = (quantity * average_cost + t.quantity * t.unit_price) / new_quantity
            quantity = new_quantity
        else:
            quantity -= t.quantity
        if quantity > 0:
            running[t.instrument] = (quantity, average_cost)
        else:
            # Fully closed (or oversold): cost basis is discarded.
            running.pop(t.instrument, None)
    return running


def aggregate(
    transactions: Iterable[Transaction],
    prices: Mapping[str, float],
    catalog: Catalog | None = None,
) -> Portfolio:
    """
    Build a snapshot: open positions with weighted-average cost and current price.

    Buys recompute the average cost; sells only reduce quantity. A position that
    reaches zero or below is dropped, and a later buy starts a fresh average.
    Prices are looked up by the catalog symbol of each instrument; a missing
    price resolves to 0 with has_price=False.
    """
    catalog = catalog if catalog is not None else DEFAULT_CATALOG
    transactions = tuple(transactions)
    positions = []
    for instrument, (quantity, average_cost) in _fold(transactions).items():
        symbol = catalog.resolve(instrument)
        has_price = symbol is not None and symbol in prices
        positions.append(
            Position(
                instrument=instrument,
                quantity=quantity,
                average_cost=average_cost,
                current_price=float(prices[symbol]) if has_price else 0.0,
                symbol=symbol,
                has_price=has_price,
            )
        )
    return Portfolio(positions=tuple(positions), transactions=transactions)
