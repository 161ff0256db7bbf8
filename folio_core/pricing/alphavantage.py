"""
Alpha Vantage quote provider (public REST endpoints).

GLOBAL_QUOTE for last price, SYMBOL_SEARCH for instrument lookup. One request per
symbol; wrap in ResilientPriceSource for rate limiting and per-symbol fallback.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from folio_core.catalog import SearchResult
from folio_core.pricing.types import QuoteError

logger = logging.getLogger(__name__)

BASE_URL = "https://www.alphavantage.co/query"
DEMO_API_KEY = "demo"


class AlphaVantageClient:
    """
    Implements QuoteProvider. Every failure of get_quote (network, HTTP status,
    throttling notice, malformed payload) surfaces as QuoteError.
    """

    def __init__(
        self,
        api_key: str = DEMO_API_KEY,
        *,
        session: requests.Session | None = None,
        base_url: str = BASE_URL,
        timeout: float = 10.0,
    ) -> None:
        self._api_key = api_key
        self._session = session if session is not None else requests.Session()
        self._base_url = base_url
        self._timeout = timeout

    def _query(self, params: dict[str, str]) -> dict[str, Any]:
        params = {**params, "apikey": self._api_key}
        logger.debug("Alpha Vantage request function=%s", params.get("function"))
        resp = self._session.get(self._base_url, params=params, timeout=self._timeout)
        if resp.status_code != 200:
            raise requests.HTTPError(f"API request failed with status {resp.status_code}")
        payload = resp.json()
        if not isinstance(payload, dict):
            raise ValueError("unexpected payload")
        return payload

    def get_quote(self, symbol: str) -> float:
        """Last traded price for symbol."""
        try:
            payload = self._query({"function": "GLOBAL_QUOTE", "symbol": symbol})
        except (requests.RequestException, ValueError) as e:
            raise QuoteError(symbol, str(e)) from e
        quote = payload.get("Global Quote")
        raw = quote.get("05. price") if isinstance(quote, dict) else None
        if raw is None:
            notice = payload.get("Note") or payload.get("Information") or payload.get("Error Message")
            raise QuoteError(symbol, notice or "invalid price data")
        try:
            return float(raw)
        except (TypeError, ValueError) as e:
            raise QuoteError(symbol, f"unparseable price {raw!r}") from e

    def search(self, query: str) -> list[SearchResult]:
        """Remote symbol search. Empty list on any failure."""
        try:
            payload = self._query({"function": "SYMBOL_SEARCH", "keywords": query})
        except (requests.RequestException, ValueError) as e:
            logger.warning("Alpha Vantage search failed for %r: %s", query, e)
            return []
        results = []
        for match in payload.get("bestMatches", []):
            symbol = match.get("1. symbol")
            if not symbol:
                continue
            results.append(
                SearchResult(
                    symbol=symbol,
                    name=match.get("2. name", symbol),
                    exchange=match.get("4. region", ""),
                    kind=match.get("3. type", ""),
                )
            )
        return results
