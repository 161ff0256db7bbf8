"""
Runtime settings read from the environment.

Only the price refresh and quote provider are configurable; the aggregation
engine has no settings.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

# Environment variable names.
API_KEY_ENV = "FOLIO_ALPHAVANTAGE_API_KEY"
REFRESH_INTERVAL_ENV = "FOLIO_REFRESH_INTERVAL"
REQUEST_DELAY_ENV = "FOLIO_REQUEST_DELAY"
HTTP_TIMEOUT_ENV = "FOLIO_HTTP_TIMEOUT"
CURRENCY_ENV = "FOLIO_CURRENCY"


def _float_env(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    """Tracker settings. Defaults match the public Alpha Vantage demo key."""

    api_key: str = "demo"
    refresh_interval: float = 30.0
    request_delay: float = 0.2
    http_timeout: float = 10.0
    currency: str = "EUR"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            api_key=env.get(API_KEY_ENV, "").strip() or cls.api_key,
            refresh_interval=_float_env(env, REFRESH_INTERVAL_ENV, cls.refresh_interval),
            request_delay=_float_env(env, REQUEST_DELAY_ENV, cls.request_delay),
            http_timeout=_float_env(env, HTTP_TIMEOUT_ENV, cls.http_timeout),
            currency=env.get(CURRENCY_ENV, "").strip().upper() or cls.currency,
        )
