"""Unified market data service - single entry point for all external market data.

Wraps the configured MarketDataGateway and provides:
- Provider selection from settings (yfinance or polygon)
- Concurrent per-symbol lookups (the provider clients are synchronous,
  so each call runs in a worker thread)
- A per-lookup timeout, so one unresponsive call cannot stall a request
- Uniform LookupResult values: failures and timeouts become fallbacks
"""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from stockfolio.config import settings
from stockfolio.constants import MarketDataProvider
from stockfolio.services.market_data.gateway import (
    CompanyInfo,
    LookupResult,
    MarketDataGateway,
    Quote,
    SearchMatch,
    fetch_company_info,
    fetch_quote,
)
from stockfolio.services.market_data.polygon_client import PolygonGateway
from stockfolio.services.market_data.yfinance_client import YFinanceGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SymbolMarketData:
    """Price and company lookups for one symbol."""

    symbol: str
    quote: LookupResult[Quote]
    company: LookupResult[CompanyInfo]

    @property
    def errors(self) -> list[str]:
        return [r.error for r in (self.quote, self.company) if r.error is not None]


def create_gateway(provider: str | None = None) -> MarketDataGateway:
    """Build the gateway for a provider name (defaults to settings).

    Raises:
        ValueError: If the provider name is not supported
    """
    provider = (provider or settings.market_data_provider).lower()

    if provider == MarketDataProvider.YFINANCE:
        return YFinanceGateway()
    if provider == MarketDataProvider.POLYGON:
        return PolygonGateway(
            api_key=settings.polygon_api_key,
            base_url=settings.polygon_base_url,
            timeout=settings.market_data_timeout_seconds,
        )
    raise ValueError(f"Unsupported market data provider: {provider}")


class MarketDataService:
    """Concurrent, time-bounded access to a MarketDataGateway.

    Example:
        service = MarketDataService(create_gateway())
        results = await service.fetch_many(["AAPL", "KO"])
    """

    def __init__(self, gateway: MarketDataGateway, timeout: float | None = None) -> None:
        self.gateway = gateway
        self.timeout = timeout if timeout is not None else settings.market_data_timeout_seconds

    async def fetch_quote(self, symbol: str) -> LookupResult[Quote]:
        """Price lookup bounded by the per-lookup timeout."""
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(fetch_quote, self.gateway, symbol), timeout=self.timeout
            )
        except TimeoutError:
            logger.warning(f"{self.gateway.name} price lookup timed out for {symbol}")
            return LookupResult.fallback(Quote(symbol=symbol), "timeout")

    async def fetch_company_info(self, symbol: str) -> LookupResult[CompanyInfo]:
        """Company info lookup bounded by the per-lookup timeout."""
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(fetch_company_info, self.gateway, symbol),
                timeout=self.timeout,
            )
        except TimeoutError:
            logger.warning(f"{self.gateway.name} company lookup timed out for {symbol}")
            return LookupResult.fallback(CompanyInfo(), "timeout")

    async def fetch_symbol(self, symbol: str) -> SymbolMarketData:
        """Price and company info for one symbol, fetched concurrently."""
        quote, company = await asyncio.gather(
            self.fetch_quote(symbol), self.fetch_company_info(symbol)
        )
        return SymbolMarketData(symbol=symbol, quote=quote, company=company)

    async def fetch_many(self, symbols: Sequence[str]) -> list[SymbolMarketData]:
        """Market data for every symbol, in the order given.

        Returns only after every lookup has succeeded, failed, or timed out.
        """
        return list(await asyncio.gather(*(self.fetch_symbol(s) for s in symbols)))

    async def search(self, query: str, limit: int) -> list[SearchMatch]:
        """Symbol search bounded by the per-lookup timeout."""
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self.gateway.search, query, limit), timeout=self.timeout
            )
        except TimeoutError:
            logger.warning(f"{self.gateway.name} search timed out for '{query}'")
            return []
        except Exception as e:
            logger.error(f"{self.gateway.name} search failed for '{query}': {e}")
            return []
