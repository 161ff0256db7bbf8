"""
folio-core: deterministic core of a personal portfolio tracker.

Transactions in, positions out. No UI, no storage, no exchange connectivity.
"""

__version__ = "0.1.0"

from folio_core.transaction import Transaction, TransactionKind
from folio_core.position import Position
from folio_core.portfolio import Portfolio
from folio_core.catalog import DEFAULT_CATALOG, Catalog, Instrument, SearchResult, search_instruments
from folio_core.ledger import TransactionLedger
from folio_core.aggregator import aggregate
from folio_core.config import Settings

__all__ = [
    "Transaction",
    "TransactionKind",
    "Position",
    "Portfolio",
    "Catalog",
    "DEFAULT_CATALOG",
    "Instrument",
    "SearchResult",
    "search_instruments",
    "TransactionLedger",
    "aggregate",
    "Settings",
]
