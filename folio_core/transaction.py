"""
Transaction: one recorded trade in the ledger.

Immutable. Validated on construction so the aggregation engine can trust
quantity and unit price to be strictly positive.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, replace
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any


class TransactionKind(Enum):
    BUY = "buy"
    SELL = "sell"


def new_transaction_id() -> str:
    """Fresh opaque identifier. Never reused."""
    return str(uuid.uuid4())


def _coerce_datetime(value: Any) -> datetime:
    """Naive datetime; aware values are converted to UTC so all trade dates compare."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        parsed = datetime.fromisoformat(str(value))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


@dataclass(frozen=True)
class Transaction:
    """A buy or sell of some quantity of an instrument at a unit price."""

    id: str
    kind: TransactionKind
    instrument: str
    quantity: float
    unit_price: float
    trade_date: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.kind, TransactionKind):
            object.__setattr__(self, "kind", TransactionKind(str(self.kind).lower()))
        object.__setattr__(self, "trade_date", _coerce_datetime(self.trade_date))
        if not str(self.instrument).strip():
            raise ValueError("instrument must not be blank")
        for name in ("quantity", "unit_price"):
            value = float(getattr(self, name))
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be a positive number, got {getattr(self, name)!r}")
            object.__setattr__(self, name, value)

    @classmethod
    def create(
        cls,
        kind: TransactionKind | str,
        instrument: str,
        quantity: float,
        unit_price: float,
        trade_date: datetime | date | str | None = None,
    ) -> "Transaction":
        """Build a transaction with a newly assigned id (trade date defaults to now)."""
        return cls(
            id=new_transaction_id(),
            kind=kind,
            instrument=instrument,
            quantity=quantity,
            unit_price=unit_price,
            trade_date=trade_date if trade_date is not None else datetime.now(),
        )

    @property
    def notional(self) -> float:
        """quantity * unit_price."""
        return self.quantity * self.unit_price

    def replace(self, **changes: Any) -> "Transaction":
        """Copy with the given fields replaced. The id cannot change."""
        if "id" in changes:
            raise ValueError("transaction id cannot be changed")
        return replace(self, **changes)
