"""Tests for the Yahoo Finance gateway."""

from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest

from stockfolio.services.market_data.gateway import CompanyInfo, SearchMatch
from stockfolio.services.market_data.yfinance_client import YFinanceError, YFinanceGateway


def _dividends(latest: float | None) -> MagicMock:
    """Stand-in for the pandas Series yfinance returns as dividend history."""
    series = MagicMock()
    series.empty = latest is None
    series.iloc.__getitem__.return_value = latest
    return series


def _ticker(info: dict, latest_dividend: float | None = None) -> MagicMock:
    ticker = MagicMock()
    ticker.ticker = info.get("symbol", "TEST")
    ticker.info = info
    ticker.dividends = _dividends(latest_dividend)
    return ticker


@pytest.fixture
def mock_yf():
    with patch("stockfolio.services.market_data.yfinance_client.yf") as mock:
        yield mock


@pytest.fixture
def gateway() -> YFinanceGateway:
    return YFinanceGateway()


class TestGetPrice:
    """Test price lookups."""

    def test_current_price(self, mock_yf, gateway):
        mock_yf.Ticker.return_value = _ticker({"currentPrice": 189.84, "previousClose": 188.0})

        assert gateway.get_price("AAPL") == Decimal("189.84")
        mock_yf.Ticker.assert_called_once_with("AAPL")

    def test_falls_back_through_price_fields(self, mock_yf, gateway):
        mock_yf.Ticker.return_value = _ticker({"currentPrice": None, "previousClose": 44.1})

        assert gateway.get_price("SPY") == Decimal("44.1")

    def test_no_price(self, mock_yf, gateway):
        mock_yf.Ticker.return_value = _ticker({"symbol": "ZZZZ"})

        assert gateway.get_price("ZZZZ") is None

    def test_empty_info(self, mock_yf, gateway):
        mock_yf.Ticker.return_value = _ticker({})

        assert gateway.get_price("ZZZZ") is None

    def test_request_error(self, mock_yf, gateway):
        mock_yf.Ticker.side_effect = RuntimeError("rate limited")

        assert gateway.get_price("AAPL") is None

    def test_info_raises_yfinance_error(self, mock_yf, gateway):
        mock_yf.Ticker.return_value = _ticker({})

        with pytest.raises(YFinanceError, match="No data found"):
            gateway._info("ZZZZ")


class TestGetCompanyInfo:
    """Test sector and dividend lookups."""

    def test_stock(self, mock_yf, gateway):
        mock_yf.Ticker.return_value = _ticker(
            {"quoteType": "EQUITY", "sector": "Consumer Defensive", "longName": "Coca-Cola Co"},
            latest_dividend=0.485,
        )

        info = gateway.get_company_info("KO")

        assert info == CompanyInfo(
            sector="Consumer Defensive",
            dividend_per_payment=Decimal("0.485"),
            name="Coca-Cola Co",
        )

    def test_etf_uses_category(self, mock_yf, gateway):
        mock_yf.Ticker.return_value = _ticker(
            {"quoteType": "ETF", "category": "Large Blend", "sector": None}, latest_dividend=1.76
        )

        info = gateway.get_company_info("SPY")

        assert info.sector == "Large Blend"

    def test_dividend_falls_back_to_last_value(self, mock_yf, gateway):
        mock_yf.Ticker.return_value = _ticker(
            {"sector": "Technology", "lastDividendValue": 0.24}, latest_dividend=None
        )

        assert gateway.get_company_info("AAPL").dividend_per_payment == Decimal("0.24")

    def test_no_dividend(self, mock_yf, gateway):
        mock_yf.Ticker.return_value = _ticker({"sector": "Technology"})

        assert gateway.get_company_info("GOOG").dividend_per_payment == 0

    def test_missing_sector(self, mock_yf, gateway):
        mock_yf.Ticker.return_value = _ticker({"shortName": "ZZZZ"})

        info = gateway.get_company_info("ZZZZ")

        assert info.sector == "Unknown"
        assert info.name is None

    def test_request_error_returns_defaults(self, mock_yf, gateway):
        mock_yf.Ticker.side_effect = RuntimeError("rate limited")

        assert gateway.get_company_info("KO") == CompanyInfo()


class TestSearch:
    """Test symbol search."""

    def test_filters_quote_types(self, mock_yf, gateway):
        mock_yf.Search.return_value.quotes = [
            {"symbol": "KO", "quoteType": "EQUITY", "longname": "The Coca-Cola Company"},
            {"symbol": "KOF", "quoteType": "EQUITY", "shortname": "Coca-Cola FEMSA"},
            {"symbol": "KO250117C00060000", "quoteType": "OPTION"},
            {"quoteType": "EQUITY"},
        ]

        matches = gateway.search("coca", limit=5)

        assert matches == [
            SearchMatch(symbol="KO", name="The Coca-Cola Company"),
            SearchMatch(symbol="KOF", name="Coca-Cola FEMSA"),
        ]
        mock_yf.Search.assert_called_once_with("coca", max_results=5)

    def test_limit(self, mock_yf, gateway):
        mock_yf.Search.return_value.quotes = [
            {"symbol": s, "quoteType": "EQUITY"} for s in ("A", "B", "C")
        ]

        assert len(gateway.search("x", limit=2)) == 2

    def test_error_returns_empty(self, mock_yf, gateway):
        mock_yf.Search.side_effect = RuntimeError("boom")

        assert gateway.search("coca") == []
