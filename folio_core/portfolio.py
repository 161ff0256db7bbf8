"""
Portfolio: snapshot produced by one aggregation pass.

The core never updates a snapshot in place; every recomputation builds a new one.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from folio_core.position import Position
from folio_core.transaction import Transaction


@dataclass(frozen=True)
class Portfolio:
    """
    Open positions plus the transactions they were derived from.
    Totals are computed on read from the positions.
    """

    positions: tuple[Position, ...] = field(default_factory=tuple)
    transactions: tuple[Transaction, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> "Portfolio":
        return cls()

    def position(self, instrument: str) -> Position | None:
        """Open position for instrument. None if not held."""
        for pos in self.positions:
            if pos.instrument == instrument:
                return pos
        return None

    @property
    def total_value(self) -> float:
        return sum((p.market_value for p in self.positions), 0.0)

    @property
    def total_cost(self) -> float:
        return sum((p.cost_basis for p in self.positions), 0.0)

    @property
    def total_performance_pct(self) -> float:
        """(value - cost) / cost * 100; 0 when there is no open cost basis."""
        cost = self.total_cost
        if cost <= 0:
            return 0.0
        return (self.total_value - cost) / cost * 100

    @property
    def unpriced_instruments(self) -> list[str]:
        """Held instruments whose symbol was absent from the price mapping."""
        return [p.instrument for p in self.positions if not p.has_price]
