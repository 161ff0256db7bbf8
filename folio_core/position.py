"""
Position: open holding in one instrument, derived from the transaction log.

Owned by the aggregator's output; never built from user input directly.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Net open quantity, weighted-average cost and latest known price."""

    instrument: str
    quantity: float
    average_cost: float
    current_price: float = 0.0
    symbol: str | None = None
    has_price: bool = False

    @property
    def market_value(self) -> float:
        return self.quantity * self.current_price

    @property
    def cost_basis(self) -> float:
        return self.quantity * self.average_cost

    @property
    def unrealized_pct(self) -> float:
        """Percent gain of current price over average cost. 0 if there is no cost."""
        if self.average_cost == 0:
            return 0.0
        return (self.current_price - self.average_cost) / self.average_cost * 100
