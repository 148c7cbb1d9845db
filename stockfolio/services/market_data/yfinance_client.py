"""Yahoo Finance market data gateway.

Wraps yfinance behind the MarketDataGateway interface.
Note: yfinance has its own HTTP handling, so this doesn't use HTTPClient,
but follows the same patterns for error handling and logging.
"""

import logging
from decimal import Decimal
from typing import Any

import yfinance as yf

from stockfolio.constants import Sector
from stockfolio.services.market_data.gateway import CompanyInfo, MarketDataGateway, SearchMatch

logger = logging.getLogger(__name__)


class YFinanceError(Exception):
    """Exception raised for yfinance API errors."""


class YFinanceGateway(MarketDataGateway):
    """Market data from Yahoo Finance.

    Usage:
        gateway = YFinanceGateway()
        price = gateway.get_price("MSFT")
        info = gateway.get_company_info("KO")
    """

    name = "yfinance"

    # Fields to try for current price, in order of preference
    PRICE_FIELDS = ["currentPrice", "regularMarketPrice", "previousClose"]

    # Fields to try for company name, in order of preference
    NAME_FIELDS = ["longName", "shortName", "name"]

    # Search result fields to try for company name
    SEARCH_NAME_FIELDS = ["longname", "shortname"]

    # Quote types offered by search
    SEARCHABLE_QUOTE_TYPES = {"EQUITY", "ETF"}

    def _info(self, symbol: str) -> dict[str, Any]:
        """Raw info dictionary from yfinance.

        Raises:
            YFinanceError: If yfinance fails or returns nothing
        """
        try:
            info = yf.Ticker(symbol).info
        except Exception as e:
            raise YFinanceError(f"info request failed for {symbol}: {e}") from e
        if not info:
            raise YFinanceError(f"No data found for symbol {symbol}")
        return info

    def get_price(self, symbol: str) -> Decimal | None:
        """Get current price for a symbol.

        Args:
            symbol: Ticker symbol

        Returns:
            Price as Decimal, or None if not found
        """
        try:
            info = self._info(symbol)
        except YFinanceError as e:
            logger.error(f"Error fetching price for {symbol}: {e}")
            return None

        for field in self.PRICE_FIELDS:
            price = info.get(field)
            if price is not None and price > 0:
                return Decimal(str(price))

        logger.warning(f"No price found for {symbol}")
        return None

    def get_company_info(self, symbol: str) -> CompanyInfo:
        """Get sector and latest dividend payment.

        Sector comes from "sector" for stocks and "category" for ETFs.
        The dividend is the most recent entry of the dividend history,
        falling back to "lastDividendValue".

        Args:
            symbol: Ticker symbol (e.g., "AAPL", "SPY")

        Returns:
            CompanyInfo, with defaults for anything missing
        """
        try:
            ticker = yf.Ticker(symbol)
            info = ticker.info or {}
        except Exception as e:
            logger.error(f"Error fetching ticker info for {symbol}: {e}")
            return CompanyInfo()

        is_etf = info.get("quoteType") == "ETF"
        sector = (info.get("category") if is_etf else info.get("sector")) or Sector.UNKNOWN

        return CompanyInfo(
            sector=sector,
            dividend_per_payment=self._latest_dividend(ticker, info),
            name=self._extract_name(info, symbol),
        )

    def search(self, query: str, limit: int = 10) -> list[SearchMatch]:
        """Search Yahoo Finance for equities and ETFs matching query."""
        try:
            quotes = yf.Search(query, max_results=limit).quotes
        except Exception as e:
            logger.error(f"Error searching for '{query}': {e}")
            return []

        matches = []
        for quote in quotes or []:
            symbol = quote.get("symbol")
            if not symbol or quote.get("quoteType") not in self.SEARCHABLE_QUOTE_TYPES:
                continue
            name = next((quote[f] for f in self.SEARCH_NAME_FIELDS if quote.get(f)), None)
            matches.append(SearchMatch(symbol=symbol, name=name))

        return matches[:limit]

    def _latest_dividend(self, ticker: yf.Ticker, info: dict[str, Any]) -> Decimal:
        """Most recent dividend payment per share, or 0."""
        try:
            dividends = ticker.dividends
            if dividends is not None and not dividends.empty:
                return Decimal(str(dividends.iloc[-1]))
        except Exception as e:
            logger.warning(f"Could not read dividend history for {ticker.ticker}: {e}")

        last_value = info.get("lastDividendValue")
        if last_value:
            return Decimal(str(last_value))
        return Decimal("0")

    def _extract_name(self, info: dict[str, Any], symbol: str) -> str | None:
        """Company name from the first populated name field that isn't the symbol."""
        for field in self.NAME_FIELDS:
            if field in info and info[field]:
                name = info[field].strip()
                if name and name != symbol:
                    return name
        return None
