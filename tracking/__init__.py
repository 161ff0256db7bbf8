"""
Host side of the tracker on top of folio-core.

Session state that recomputes snapshots on every change, a cancellable price
refresher, and pandas reports over snapshots.
"""

from tracking.session import PortfolioSession, SnapshotObserver
from tracking.refresh import PriceRefresher, default_price_source
from tracking.report import allocation, exchange_breakdown, invested_capital_curve, positions_frame, print_report

__all__ = [
    "PortfolioSession",
    "SnapshotObserver",
    "PriceRefresher",
    "default_price_source",
    "allocation",
    "exchange_breakdown",
    "invested_capital_curve",
    "positions_frame",
    "print_report",
]
