"""External market data providers.

This module centralizes all external market data fetching:
- MarketDataGateway: Provider interface (price, company info, search)
- MarketDataService: Concurrent, time-bounded entry point over a gateway
- YFinanceGateway: Stock/ETF data from Yahoo Finance
- PolygonGateway: Stock data from Polygon.io

Usage:
    from stockfolio.services.market_data import MarketDataService, create_gateway

    service = MarketDataService(create_gateway())
    data = await service.fetch_symbol("AAPL")
"""

from .gateway import (
    CompanyInfo,
    LookupResult,
    MarketDataGateway,
    Quote,
    SearchMatch,
    fetch_company_info,
    fetch_quote,
)
from .market_data_service import MarketDataService, SymbolMarketData, create_gateway
from .polygon_client import PolygonGateway
from .yfinance_client import YFinanceError, YFinanceGateway

__all__ = [
    "CompanyInfo",
    "LookupResult",
    "MarketDataGateway",
    "MarketDataService",
    "PolygonGateway",
    "Quote",
    "SearchMatch",
    "SymbolMarketData",
    "YFinanceError",
    "YFinanceGateway",
    "create_gateway",
    "fetch_company_info",
    "fetch_quote",
]
