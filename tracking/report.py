"""
Portfolio reports: tabular views of a snapshot and its transaction history.

All frames are built fresh from a Portfolio; nothing here feeds back into the core.
"""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from folio_core import DEFAULT_CATALOG, Catalog, Portfolio, Transaction, TransactionKind

POSITION_COLUMNS = [
    "instrument",
    "symbol",
    "exchange",
    "quantity",
    "average_cost",
    "current_price",
    "market_value",
    "unrealized_pct",
]


def positions_frame(portfolio: Portfolio, catalog: Catalog | None = None) -> pd.DataFrame:
    """One row per open position, in snapshot order."""
    catalog = catalog if catalog is not None else DEFAULT_CATALOG
    rows = [
        {
            "instrument": p.instrument,
            "symbol": p.symbol,
            "exchange": catalog.exchange_of(p.instrument),
            "quantity": p.quantity,
            "average_cost": p.average_cost,
            "current_price": p.current_price,
            "market_value": p.market_value,
            "unrealized_pct": p.unrealized_pct,
        }
        for p in portfolio.positions
    ]
    return pd.DataFrame(rows, columns=POSITION_COLUMNS)


def allocation(portfolio: Portfolio) -> pd.DataFrame:
    """
    Positions with a positive market value and their share of total value.

    Returns
    -------
    pd.DataFrame
        Indexed by instrument; columns market_value and weight_pct.
    """
    values = pd.Series(
        {p.instrument: p.market_value for p in portfolio.positions if p.market_value > 0},
        dtype=float,
    )
    out = pd.DataFrame({"market_value": values})
    total = values.sum()
    out["weight_pct"] = values / total * 100 if total > 0 else 0.0
    out.index.name = "instrument"
    return out


def exchange_breakdown(portfolio: Portfolio, catalog: Catalog | None = None) -> pd.Series:
    """Market value summed per exchange classification (unknown instruments under 'Unknown')."""
    frame = positions_frame(portfolio, catalog)
    if frame.empty:
        return pd.Series(dtype=float, name="market_value")
    frame["exchange"] = frame["exchange"].fillna("Unknown")
    return frame.groupby("exchange", sort=True)["market_value"].sum()


def invested_capital_curve(transactions: Iterable[Transaction]) -> pd.Series:
    """
    Running net invested capital per calendar month.

    Buys add quantity * unit_price, sells subtract it. Transactions are ordered by
    trade date; each month ("YYYY-MM") carries the running total after its last trade.
    """
    ordered = sorted(transactions, key=lambda t: t.trade_date)
    if not ordered:
        return pd.Series(dtype=float, name="invested")
    flows = pd.Series(
        [t.notional if t.kind == TransactionKind.BUY else -t.notional for t in ordered],
        index=[t.trade_date.strftime("%Y-%m") for t in ordered],
        dtype=float,
    )
    running = flows.cumsum()
    curve = running.groupby(level=0, sort=True).last()
    curve.index.name = "month"
    curve.name = "invested"
    return curve


def print_report(
    portfolio: Portfolio,
    catalog: Catalog | None = None,
    *,
    currency: str = "EUR",
) -> pd.DataFrame:
    """
    Print a portfolio summary and the positions table.

    Returns
    -------
    pd.DataFrame
        The positions frame (e.g. for programmatic use).
    """
    frame = positions_frame(portfolio, catalog)
    print("--- Portfolio ---")
    print(f"Total value:     {portfolio.total_value:,.2f} {currency}")
    print(f"Total cost:      {portfolio.total_cost:,.2f} {currency}")
    print(f"Performance:     {portfolio.total_performance_pct:.2f}%")
    print(f"Positions:       {len(portfolio.positions)}")
    print(f"Transactions:    {len(portfolio.transactions)}")
    if portfolio.unpriced_instruments:
        print(f"Unpriced:        {', '.join(portfolio.unpriced_instruments)}")
    if not frame.empty:
        print(frame.to_string(index=False, float_format=lambda v: f"{v:,.2f}"))
    print("-----------------")
    return frame
