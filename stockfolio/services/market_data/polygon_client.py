"""Polygon.io market data gateway.

REST endpoints used:
- /v2/aggs/ticker/{symbol}/prev          previous close (price)
- /v3/reference/tickers/{symbol}         ticker details (SIC description as sector)
- /v3/reference/dividends                latest dividend cash amount
- /v3/reference/tickers?search=          symbol search
"""

import logging
from decimal import Decimal
from typing import Any

from stockfolio.constants import Sector
from stockfolio.services.market_data.gateway import CompanyInfo, MarketDataGateway, SearchMatch
from stockfolio.services.shared.http_client import HTTPClient, HTTPClientError

logger = logging.getLogger(__name__)

POLYGON_BASE_URL = "https://api.polygon.io"


class PolygonGateway(HTTPClient, MarketDataGateway):
    """Market data from Polygon.io.

    The API key travels as the apiKey query parameter on every request.

    Usage:
        with PolygonGateway(api_key="...") as gateway:
            price = gateway.get_price("AAPL")
    """

    name = "polygon"

    def __init__(
        self,
        api_key: str,
        base_url: str = POLYGON_BASE_URL,
        timeout: float = 10.0,
    ):
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            default_params={"apiKey": api_key},
        )
        if not api_key:
            logger.warning("Polygon API key is not configured; requests will be rejected")

    def get_price(self, symbol: str) -> Decimal | None:
        """Previous session close for symbol, or None."""
        try:
            data = self.get_json(f"/v2/aggs/ticker/{symbol}/prev", params={"adjusted": "true"})
        except HTTPClientError as e:
            if e.is_rate_limited:
                logger.warning(f"Polygon rate limit reached while pricing {symbol}")
            else:
                logger.error(f"Error fetching price for {symbol}: {e}")
            return None

        results = _results_list(data)
        if not results or results[0].get("c") is None:
            logger.warning(f"No price found for {symbol}")
            return None
        return Decimal(str(results[0]["c"]))

    def get_company_info(self, symbol: str) -> CompanyInfo:
        """Sector from ticker details and the latest dividend cash amount.

        The two lookups fail independently: a missing dividend record keeps
        the sector, and vice versa.
        """
        sector = Sector.UNKNOWN
        name = None
        try:
            details = self.get_json(f"/v3/reference/tickers/{symbol}")
            result = details.get("results") if isinstance(details, dict) else None
            result = result if isinstance(result, dict) else {}
            sector = result.get("sic_description") or Sector.UNKNOWN
            name = result.get("name")
        except HTTPClientError as e:
            logger.error(f"Error fetching ticker details for {symbol}: {e}")

        dividend = Decimal("0")
        try:
            data = self.get_json(
                "/v3/reference/dividends", params={"ticker": symbol, "limit": "1"}
            )
            results = _results_list(data)
            if results and results[0].get("cash_amount"):
                dividend = Decimal(str(results[0]["cash_amount"]))
        except HTTPClientError as e:
            logger.error(f"Error fetching dividends for {symbol}: {e}")

        return CompanyInfo(sector=sector, dividend_per_payment=dividend, name=name)

    def search(self, query: str, limit: int = 10) -> list[SearchMatch]:
        """Active tickers matching query."""
        try:
            data = self.get_json(
                "/v3/reference/tickers",
                params={"search": query, "active": "true", "limit": str(limit)},
            )
        except HTTPClientError as e:
            logger.error(f"Error searching for '{query}': {e}")
            return []

        return [
            SearchMatch(symbol=match["ticker"], name=match.get("name"))
            for match in _results_list(data)
            if match.get("ticker")
        ][:limit]


def _results_list(data: Any) -> list[dict[str, Any]]:
    """The "results" array of a Polygon response, or an empty list."""
    if not isinstance(data, dict):
        return []
    results = data.get("results")
    return results if isinstance(results, list) else []
