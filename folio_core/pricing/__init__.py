"""
Pricing layer: price-source abstraction, synthetic and live sources.

PriceSource interface; deterministic synthetic source; Alpha Vantage quote
provider; resilient wrapper with per-symbol fallback (cache, then synthetic).
"""

from folio_core.pricing.alphavantage import AlphaVantageClient
from folio_core.pricing.resilient import ResilientPriceSource
from folio_core.pricing.source import PriceSource, StaticPriceSource
from folio_core.pricing.synthetic import SyntheticPriceSource, synthetic_price
from folio_core.pricing.types import PriceOrigin, QuoteError, QuoteProvider

__all__ = [
    "AlphaVantageClient",
    "PriceOrigin",
    "PriceSource",
    "QuoteError",
    "QuoteProvider",
    "ResilientPriceSource",
    "StaticPriceSource",
    "SyntheticPriceSource",
    "synthetic_price",
]
