"""Market data gateway interface.

Every provider adapter implements MarketDataGateway. Valuation and search
depend only on this module's types, never on a concrete provider.

Adapters must not raise for missing or unknown symbols:
- get_price returns None when no price is available
- get_company_info returns CompanyInfo() defaults
- search returns an empty list
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Generic, TypeVar

from stockfolio.constants import Sector

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Quote:
    """Latest price for a symbol. price is None when unavailable."""

    symbol: str
    price: Decimal | None = None

    @property
    def is_available(self) -> bool:
        return self.price is not None and self.price > 0


@dataclass(frozen=True)
class CompanyInfo:
    """Sector classification and latest dividend payment for a symbol."""

    sector: str = Sector.UNKNOWN
    dividend_per_payment: Decimal = field(default_factory=lambda: Decimal("0"))
    name: str | None = None


@dataclass(frozen=True)
class SearchMatch:
    """A symbol search candidate."""

    symbol: str
    name: str | None


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """Outcome of one market data lookup.

    Holds the provider's value, or the fallback value together with the
    error that forced it. Consumers read .value either way.
    """

    value: T
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, value: T) -> "LookupResult[T]":
        return cls(value=value)

    @classmethod
    def fallback(cls, value: T, error: str) -> "LookupResult[T]":
        return cls(value=value, error=error)


class MarketDataGateway(ABC):
    """Capability set every market data provider adapter implements."""

    #: Short provider name used in logs and responses
    name: str = "unknown"

    @abstractmethod
    def get_price(self, symbol: str) -> Decimal | None:
        """Latest price for symbol, or None if unavailable."""

    @abstractmethod
    def get_company_info(self, symbol: str) -> CompanyInfo:
        """Sector and latest dividend per payment, with defaults for missing data."""

    @abstractmethod
    def search(self, query: str, limit: int = 10) -> list[SearchMatch]:
        """Symbols matching a free-text query."""

    def close(self) -> None:
        """Release provider resources. Default is a no-op."""


def fetch_quote(gateway: MarketDataGateway, symbol: str) -> LookupResult[Quote]:
    """Price lookup that always yields a Quote.

    A missing price or any exception escaping the adapter becomes a
    fallback result with price None.
    """
    try:
        price = gateway.get_price(symbol)
    except Exception as e:
        logger.warning(f"{gateway.name} price lookup failed for {symbol}: {e}")
        return LookupResult.fallback(Quote(symbol=symbol), str(e) or type(e).__name__)

    quote = Quote(symbol=symbol, price=price)
    if not quote.is_available:
        return LookupResult.fallback(Quote(symbol=symbol), "price unavailable")
    return LookupResult.ok(quote)


def fetch_company_info(gateway: MarketDataGateway, symbol: str) -> LookupResult[CompanyInfo]:
    """Company info lookup that always yields a CompanyInfo."""
    try:
        return LookupResult.ok(gateway.get_company_info(symbol))
    except Exception as e:
        logger.warning(f"{gateway.name} company lookup failed for {symbol}: {e}")
        return LookupResult.fallback(CompanyInfo(), str(e) or type(e).__name__)
