"""
TransactionLedger: in-memory append/edit/delete store for transactions.

Every mutation swaps in a new tuple, so a previously returned view never changes
under the caller. Not persisted.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import date, datetime
from typing import Any

from folio_core.transaction import Transaction, TransactionKind


class TransactionLedger:
    """Ordered transactions keyed by id. Insertion order is kept; see chronological()."""

    def __init__(self, transactions: Iterable[Transaction] = ()) -> None:
        self._transactions: tuple[Transaction, ...] = ()
        for t in transactions:
            self.add(t)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions)

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """All transactions in insertion order."""
        return self._transactions

    def chronological(self) -> tuple[Transaction, ...]:
        """Transactions sorted by trade date; same-date entries keep insertion order."""
        return tuple(sorted(self._transactions, key=lambda t: t.trade_date))

    def get(self, transaction_id: str) -> Transaction:
        for t in self._transactions:
            if t.id == transaction_id:
                return t
        raise KeyError(transaction_id)

    def add(self, transaction: Transaction) -> Transaction:
        if any(t.id == transaction.id for t in self._transactions):
            raise ValueError(f"duplicate transaction id: {transaction.id}")
        self._transactions = self._transactions + (transaction,)
        return transaction

    def record(
        self,
        kind: TransactionKind | str,
        instrument: str,
        quantity: float,
        unit_price: float,
        trade_date: datetime | date | str | None = None,
    ) -> Transaction:
        """Create a transaction with a fresh id and append it."""
        return self.add(Transaction.create(kind, instrument, quantity, unit_price, trade_date))

    def update(self, transaction_id: str, **changes: Any) -> Transaction:
        """Replace fields (all but id) of an existing transaction. KeyError if unknown."""
        updated = self.get(transaction_id).replace(**changes)
        self._transactions = tuple(updated if t.id == transaction_id else t for t in self._transactions)
        return updated

    def delete(self, transaction_id: str) -> Transaction:
        """Remove a transaction. KeyError if unknown."""
        removed = self.get(transaction_id)
        self._transactions = tuple(t for t in self._transactions if t.id != transaction_id)
        return removed
