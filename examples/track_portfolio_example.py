"""
Portfolio tracking example: sample ledger, polled prices, printed report.

Shows: PortfolioSession, PriceRefresher, observers on each recomputation, reports.
Uses synthetic prices unless --live is given (Alpha Vantage, key from
FOLIO_ALPHAVANTAGE_API_KEY; failing symbols fall back to synthetic prices).
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from folio_core import Portfolio, Settings
from folio_core.examples.sample_ledger import build_sample_ledger
from folio_core.pricing import PriceSource, SyntheticPriceSource
from tracking import PortfolioSession, PriceRefresher, default_price_source, invested_capital_curve, print_report


def print_snapshot_observer(portfolio: Portfolio) -> None:
    """Observer: one line per recomputation."""
    print(
        f"  [Snapshot] value={portfolio.total_value:,.2f} "
        f"performance={portfolio.total_performance_pct:+.2f}% positions={len(portfolio.positions)}"
    )


async def run(source: PriceSource, settings: Settings, ticks: int) -> None:
    session = PortfolioSession(ledger=build_sample_ledger(), observers=[print_snapshot_observer])
    refresher = PriceRefresher(source, session, interval=settings.refresh_interval)
    async with refresher:
        while refresher.ticks < ticks:
            await asyncio.sleep(0.1)
    print()
    print_report(session.snapshot, session.catalog, currency=settings.currency)
    print("\nNet invested capital by month:")
    print(invested_capital_curve(session.snapshot.transactions).to_string())


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--live", action="store_true", help="query Alpha Vantage instead of synthetic prices")
    parser.add_argument("--ticks", type=int, default=2, help="number of refresh ticks before reporting")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    settings = Settings.from_env()
    if not args.live:
        settings = Settings(refresh_interval=1.0, currency=settings.currency)
    source = default_price_source(settings) if args.live else SyntheticPriceSource()
    asyncio.run(run(source, settings, args.ticks))


if __name__ == "__main__":
    main()
