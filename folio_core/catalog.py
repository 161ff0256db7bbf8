"""
Instrument catalog: display name <-> symbol <-> exchange classification.

Catalog.resolve is the single place that turns the free-text instrument name
stored on transactions into the symbol used as a price key. The aggregator and
the reports both go through it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

# Symbol suffix -> exchange label. Checked in order.
EXCHANGE_SUFFIXES = (
    (".PA", "Euronext Paris"),
    (".AS", "Euronext Amsterdam"),
    (".DE", "Deutsche Börse"),
)
CRYPTO_MARKER = "-EUR"
CRYPTO = "Crypto"
US_MARKET = "US Market"

MIN_QUERY_LENGTH = 2


def exchange_for(symbol: str) -> str:
    """Exchange classification from symbol suffix conventions."""
    if CRYPTO_MARKER in symbol:
        return CRYPTO
    for suffix, label in EXCHANGE_SUFFIXES:
        if symbol.endswith(suffix):
            return label
    return US_MARKET


def kind_for(symbol: str) -> str:
    return "CRYPTO" if CRYPTO_MARKER in symbol else "EQUITY"


@dataclass(frozen=True)
class Instrument:
    """A tradable security: catalog symbol plus display name."""

    symbol: str
    name: str

    @property
    def exchange(self) -> str:
        return exchange_for(self.symbol)

    @property
    def kind(self) -> str:
        return kind_for(self.symbol)


@dataclass(frozen=True)
class SearchResult:
    """One match from an instrument search."""

    symbol: str
    name: str
    exchange: str
    kind: str

    @classmethod
    def from_instrument(cls, instrument: Instrument) -> "SearchResult":
        return cls(
            symbol=instrument.symbol,
            name=instrument.name,
            exchange=instrument.exchange,
            kind=instrument.kind,
        )


class Catalog:
    """
    Static, ordered set of instruments keyed by symbol.
    Names are expected to be unique too; on a clash the first entry wins.
    """

    def __init__(self, instruments: Iterable[Instrument]) -> None:
        self._by_symbol: dict[str, Instrument] = {}
        self._by_name: dict[str, Instrument] = {}
        self._by_folded_name: dict[str, Instrument] = {}
        for inst in instruments:
            if inst.symbol in self._by_symbol:
                raise ValueError(f"duplicate symbol in catalog: {inst.symbol}")
            self._by_symbol[inst.symbol] = inst
            self._by_name.setdefault(inst.name, inst)
            self._by_folded_name.setdefault(inst.name.casefold(), inst)

    def __iter__(self) -> Iterator[Instrument]:
        return iter(self._by_symbol.values())

    def __len__(self) -> int:
        return len(self._by_symbol)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._by_symbol

    def get(self, symbol: str) -> Instrument | None:
        return self._by_symbol.get(symbol)

    def symbols(self) -> list[str]:
        """All catalog symbols, in catalog order."""
        return list(self._by_symbol)

    def resolve(self, identifier: str) -> str | None:
        """
        Symbol for an instrument name (exact, then case-insensitive) or, failing
        that, for an identifier that already is a catalog symbol. None if unknown.
        """
        inst = self._by_name.get(identifier)
        if inst is None:
            inst = self._by_folded_name.get(identifier.strip().casefold())
        if inst is None:
            inst = self._by_symbol.get(identifier)
        return inst.symbol if inst is not None else None

    def exchange_of(self, identifier: str) -> str | None:
        """Exchange classification for a name or symbol. None if unknown."""
        symbol = self.resolve(identifier)
        return exchange_for(symbol) if symbol is not None else None

    def search(self, query: str) -> list[SearchResult]:
        """
        Case-insensitive search. Every whitespace-separated token of the query
        must occur in the instrument's name or symbol. Queries shorter than two
        characters return nothing.
        """
        normalized = query.strip().lower() if query else ""
        if len(normalized) < MIN_QUERY_LENGTH:
            return []
        tokens = normalized.split()
        results = []
        for inst in self:
            name = inst.name.lower()
            symbol = inst.symbol.lower()
            if all(tok in name or tok in symbol for tok in tokens):
                results.append(SearchResult.from_instrument(inst))
        return results


def search_instruments(
    query: str,
    catalog: Catalog | None = None,
    remote: Callable[[str], list[SearchResult]] | None = None,
) -> list[SearchResult]:
    """Local catalog search; asks remote only when nothing matches locally."""
    catalog = catalog if catalog is not None else DEFAULT_CATALOG
    results = catalog.search(query)
    if results or remote is None:
        return results
    if len(query.strip()) < MIN_QUERY_LENGTH:
        return []
    return remote(query)


DEFAULT_CATALOG = Catalog(
    [
        # Crypto
        Instrument("BTC-EUR", "Bitcoin"),
        Instrument("ETH-EUR", "Ethereum"),
        Instrument("XRP-EUR", "XRP"),
        Instrument("SOL-EUR", "Solana"),
        Instrument("ADA-EUR", "Cardano"),
        Instrument("DOT-EUR", "Polkadot"),
        Instrument("MATIC-EUR", "Polygon"),
        # US tech
        Instrument("AAPL", "Apple Inc."),
        Instrument("MSFT", "Microsoft Corporation"),
        Instrument("GOOGL", "Alphabet Inc."),
        Instrument("AMZN", "Amazon.com Inc."),
        Instrument("META", "Meta Platforms Inc."),
        Instrument("NVDA", "NVIDIA Corporation"),
        Instrument("TSLA", "Tesla Inc."),
        # CAC 40
        Instrument("AI.PA", "Air Liquide"),
        Instrument("MC.PA", "LVMH Moët Hennessy Louis Vuitton"),
        Instrument("OR.PA", "L'Oréal"),
        Instrument("ESE.PA", "BNP Paribas Easy S&P 500 UCITS ETF"),
        Instrument("BNP.PA", "BNP Paribas"),
        Instrument("SAN.PA", "Sanofi"),
        # ETFs
        Instrument("CW8.PA", "Amundi MSCI World UCITS ETF"),
        Instrument("500.PA", "Amundi S&P 500 UCITS ETF"),
        Instrument("EP500.PA", "Amundi S&P 500 II UCITS ETF"),
        Instrument("EWRD.PA", "Amundi MSCI World II UCITS ETF"),
        Instrument("IWDA.AS", "iShares Core MSCI World UCITS ETF"),
        Instrument("VWCE.DE", "Vanguard FTSE All-World UCITS ETF"),
        Instrument("ESP0.PA", "Vanguard S&P 500 UCITS ETF (Paris)"),
        Instrument("CSPX.AS", "iShares Core S&P 500 UCITS ETF"),
        Instrument("VUSA.AS", "Vanguard S&P 500 UCITS ETF"),
    ]
)
