"""
Tests for folio_core: Transaction, TransactionLedger, Catalog, search, Settings.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from folio_core import DEFAULT_CATALOG, Catalog, Instrument, SearchResult, Settings, Transaction, TransactionKind, TransactionLedger
from folio_core.catalog import exchange_for, kind_for, search_instruments
from folio_core.config import API_KEY_ENV, REFRESH_INTERVAL_ENV


# --- Transaction ---


def test_transaction_create_assigns_unique_ids():
    a = Transaction.create(TransactionKind.BUY, "Apple Inc.", 10, 150.0, datetime(2024, 1, 1))
    b = Transaction.create(TransactionKind.BUY, "Apple Inc.", 10, 150.0, datetime(2024, 1, 1))
    assert a.id != b.id
    assert a.kind == TransactionKind.BUY
    assert a.quantity == 10.0
    assert a.notional == 1500.0


def test_transaction_coerces_kind_and_date():
    t = Transaction.create("sell", "Bitcoin", 0.5, 40000, "2024-03-01")
    assert t.kind == TransactionKind.SELL
    assert t.trade_date == datetime(2024, 3, 1)
    t2 = Transaction.create("BUY", "Bitcoin", 1, 1, date(2024, 3, 2))
    assert t2.kind == TransactionKind.BUY
    assert t2.trade_date == datetime(2024, 3, 2)


def test_transaction_normalizes_aware_dates_to_naive_utc():
    t = Transaction.create("buy", "Bitcoin", 1, 1, "2024-01-02T01:30:00+02:00")
    assert t.trade_date == datetime(2024, 1, 1, 23, 30)
    assert t.trade_date.tzinfo is None
    aware = datetime(2024, 1, 2, tzinfo=timezone(timedelta(hours=-5)))
    assert Transaction.create("buy", "Bitcoin", 1, 1, aware).trade_date == datetime(2024, 1, 2, 5, 0)


def test_ledger_orders_mixed_naive_and_aware_dates():
    ledger = TransactionLedger()
    later = ledger.record(TransactionKind.BUY, "Bitcoin", 1, 1, "2024-01-02T00:00:00+00:00")
    earlier = ledger.record(TransactionKind.BUY, "Bitcoin", 1, 1, datetime(2024, 1, 1))
    assert ledger.chronological() == (earlier, later)


def test_transaction_immutable():
    t = Transaction.create(TransactionKind.BUY, "Apple Inc.", 1, 1)
    with pytest.raises(AttributeError):
        t.quantity = 5


@pytest.mark.parametrize(
    "quantity,unit_price",
    [(0, 10.0), (-1, 10.0), (1, 0), (1, -5.0), (float("nan"), 1.0), (1, float("inf"))],
)
def test_transaction_rejects_non_positive_values(quantity, unit_price):
    with pytest.raises(ValueError):
        Transaction.create(TransactionKind.BUY, "Apple Inc.", quantity, unit_price)


def test_transaction_rejects_blank_instrument():
    with pytest.raises(ValueError):
        Transaction.create(TransactionKind.BUY, "  ", 1, 1)


def test_transaction_replace_keeps_id():
    t = Transaction.create(TransactionKind.BUY, "Apple Inc.", 1, 100.0)
    t2 = t.replace(quantity=3, unit_price=110.0)
    assert t2.id == t.id
    assert t2.quantity == 3.0
    assert t2.unit_price == 110.0
    with pytest.raises(ValueError):
        t.replace(id="other")
    with pytest.raises(ValueError):
        t.replace(quantity=0)


# --- TransactionLedger ---


def test_ledger_record_update_delete():
    ledger = TransactionLedger()
    t1 = ledger.record(TransactionKind.BUY, "Apple Inc.", 10, 150.0, datetime(2024, 1, 1))
    t2 = ledger.record(TransactionKind.SELL, "Apple Inc.", 2, 160.0, datetime(2024, 2, 1))
    assert len(ledger) == 2
    assert ledger.transactions == (t1, t2)

    updated = ledger.update(t1.id, quantity=12)
    assert ledger.get(t1.id) is updated
    assert updated.quantity == 12.0
    assert ledger.transactions[0] is updated

    removed = ledger.delete(t2.id)
    assert removed is t2
    assert [t.id for t in ledger] == [t1.id]


def test_ledger_unknown_id_raises_key_error():
    ledger = TransactionLedger()
    with pytest.raises(KeyError):
        ledger.update("missing", quantity=1)
    with pytest.raises(KeyError):
        ledger.delete("missing")


def test_ledger_rejects_duplicate_id():
    t = Transaction.create(TransactionKind.BUY, "Apple Inc.", 1, 1)
    ledger = TransactionLedger([t])
    with pytest.raises(ValueError):
        ledger.add(t)


def test_ledger_views_are_snapshots():
    ledger = TransactionLedger()
    ledger.record(TransactionKind.BUY, "Apple Inc.", 1, 1)
    before = ledger.transactions
    ledger.record(TransactionKind.BUY, "Apple Inc.", 1, 1)
    assert len(before) == 1
    assert len(ledger.transactions) == 2


def test_ledger_chronological_is_stable():
    ledger = TransactionLedger()
    late = ledger.record(TransactionKind.BUY, "Apple Inc.", 1, 1, datetime(2024, 5, 1))
    same_a = ledger.record(TransactionKind.BUY, "Bitcoin", 1, 1, datetime(2024, 1, 1))
    same_b = ledger.record(TransactionKind.BUY, "Solana", 1, 1, datetime(2024, 1, 1))
    assert ledger.chronological() == (same_a, same_b, late)
    assert ledger.transactions == (late, same_a, same_b)


# --- Catalog ---


def test_exchange_classification():
    assert exchange_for("BTC-EUR") == "Crypto"
    assert exchange_for("MC.PA") == "Euronext Paris"
    assert exchange_for("IWDA.AS") == "Euronext Amsterdam"
    assert exchange_for("VWCE.DE") == "Deutsche Börse"
    assert exchange_for("AAPL") == "US Market"
    assert kind_for("ETH-EUR") == "CRYPTO"
    assert kind_for("AAPL") == "EQUITY"


def test_catalog_resolve_name_and_symbol():
    assert DEFAULT_CATALOG.resolve("Apple Inc.") == "AAPL"
    assert DEFAULT_CATALOG.resolve("apple inc.") == "AAPL"
    assert DEFAULT_CATALOG.resolve("BTC-EUR") == "BTC-EUR"
    assert DEFAULT_CATALOG.resolve("Nonexistent Corp") is None
    assert DEFAULT_CATALOG.exchange_of("Bitcoin") == "Crypto"
    assert DEFAULT_CATALOG.exchange_of("Nonexistent Corp") is None


def test_catalog_rejects_duplicate_symbols():
    with pytest.raises(ValueError):
        Catalog([Instrument("AAA", "A"), Instrument("AAA", "B")])


def test_catalog_symbols_in_order():
    catalog = Catalog([Instrument("B", "Bee"), Instrument("A", "Ay")])
    assert catalog.symbols() == ["B", "A"]
    assert len(catalog) == 2
    assert "A" in catalog
    assert catalog.get("A") == Instrument("A", "Ay")


# --- Search ---


def test_search_requires_two_characters():
    assert DEFAULT_CATALOG.search("") == []
    assert DEFAULT_CATALOG.search("a") == []
    assert DEFAULT_CATALOG.search("  a  ") == []


def test_search_all_tokens_must_match_name_or_symbol():
    results = DEFAULT_CATALOG.search("msci world")
    symbols = [r.symbol for r in results]
    assert symbols == ["CW8.PA", "EWRD.PA", "IWDA.AS"]
    assert all(isinstance(r, SearchResult) for r in results)


def test_search_matches_symbol_case_insensitive():
    results = DEFAULT_CATALOG.search("btc")
    assert len(results) == 1
    r = results[0]
    assert r.symbol == "BTC-EUR"
    assert r.name == "Bitcoin"
    assert r.exchange == "Crypto"
    assert r.kind == "CRYPTO"


def test_search_instruments_uses_remote_only_without_local_hits():
    calls = []

    def remote(query):
        calls.append(query)
        return [SearchResult("IBM", "International Business Machines", "United States", "Equity")]

    assert [r.symbol for r in search_instruments("apple", remote=remote)] == ["AAPL"]
    assert calls == []
    assert [r.symbol for r in search_instruments("ibm", remote=remote)] == ["IBM"]
    assert calls == ["ibm"]
    assert search_instruments("i", remote=remote) == []
    assert calls == ["ibm"]


# --- Settings ---


def test_settings_defaults():
    s = Settings.from_env({})
    assert s.api_key == "demo"
    assert s.refresh_interval == 30.0
    assert s.request_delay == 0.2
    assert s.currency == "EUR"


def test_settings_from_env():
    s = Settings.from_env({API_KEY_ENV: "secret", REFRESH_INTERVAL_ENV: "5", "FOLIO_CURRENCY": "usd"})
    assert s.api_key == "secret"
    assert s.refresh_interval == 5.0
    assert s.currency == "USD"


def test_settings_invalid_number():
    with pytest.raises(ValueError, match=REFRESH_INTERVAL_ENV):
        Settings.from_env({REFRESH_INTERVAL_ENV: "often"})
    with pytest.raises(ValueError):
        Settings.from_env({REFRESH_INTERVAL_ENV: "-1"})
