"""
Sample ledger: a small, fixed transaction history across three exchanges.

Used by the demo script and tests. Prices are EUR.
"""

from datetime import datetime

from folio_core.ledger import TransactionLedger
from folio_core.transaction import TransactionKind


def build_sample_ledger() -> TransactionLedger:
    """Apple accumulated then trimmed, Bitcoin bought twice, LVMH fully sold."""
    ledger = TransactionLedger()
    ledger.record(TransactionKind.BUY, "Apple Inc.", 10, 150.0, datetime(2024, 1, 10))
    ledger.record(TransactionKind.BUY, "Bitcoin", 0.05, 38000.0, datetime(2024, 1, 22))
    ledger.record(TransactionKind.BUY, "LVMH Moët Hennessy Louis Vuitton", 2, 700.0, datetime(2024, 2, 5))
    ledger.record(TransactionKind.BUY, "Apple Inc.", 5, 180.0, datetime(2024, 2, 14))
    ledger.record(TransactionKind.SELL, "LVMH Moët Hennessy Louis Vuitton", 2, 820.0, datetime(2024, 3, 1))
    ledger.record(TransactionKind.BUY, "Bitcoin", 0.05, 42000.0, datetime(2024, 3, 18))
    ledger.record(TransactionKind.SELL, "Apple Inc.", 3, 190.0, datetime(2024, 4, 2))
    return ledger
