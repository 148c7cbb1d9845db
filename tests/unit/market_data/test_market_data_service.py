"""Tests for MarketDataService."""

import asyncio
from decimal import Decimal
from unittest.mock import patch

import pytest

from stockfolio.services.market_data.gateway import SearchMatch
from stockfolio.services.market_data.market_data_service import MarketDataService, create_gateway
from stockfolio.services.market_data.polygon_client import PolygonGateway
from stockfolio.services.market_data.yfinance_client import YFinanceGateway
from tests.factories import FakeGateway


class TestCreateGateway:
    """Test provider selection."""

    def test_yfinance(self):
        assert isinstance(create_gateway("yfinance"), YFinanceGateway)

    def test_polygon(self):
        gateway = create_gateway("Polygon")

        assert isinstance(gateway, PolygonGateway)
        gateway.close()

    def test_default_from_settings(self):
        with patch(
            "stockfolio.services.market_data.market_data_service.settings.market_data_provider",
            "yfinance",
        ):
            assert isinstance(create_gateway(), YFinanceGateway)

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unsupported market data provider"):
            create_gateway("bloomberg")


class TestMarketDataService:
    """Test concurrent lookups."""

    def test_fetch_many_preserves_order(self, gateway):
        service = MarketDataService(gateway, timeout=1)

        results = asyncio.run(service.fetch_many(["MSFT", "AAPL", "KO", "MSFT"]))

        assert [r.symbol for r in results] == ["MSFT", "AAPL", "KO", "MSFT"]
        assert results[1].quote.value.price == Decimal("120")
        assert results[2].company.value.sector == "Consumer Defensive"
        assert all(r.errors == [] for r in results)

    def test_fetch_many_empty(self, gateway):
        assert asyncio.run(MarketDataService(gateway).fetch_many([])) == []

    def test_timeout_becomes_fallback(self, gateway):
        gateway.slow = {"KO"}
        gateway.delay = 0.5
        service = MarketDataService(gateway, timeout=0.05)

        ko, aapl = asyncio.run(service.fetch_many(["KO", "AAPL"]))

        assert ko.quote.error == "timeout"
        assert ko.company.error == "timeout"
        assert ko.quote.value.price is None
        assert ko.errors == ["timeout", "timeout"]
        assert aapl.quote.value.price == Decimal("120")

    def test_failure_becomes_fallback(self, gateway):
        gateway.failing = {"AAPL"}
        service = MarketDataService(gateway)

        result = asyncio.run(service.fetch_symbol("AAPL"))

        assert len(result.errors) == 2
        assert result.quote.value.is_available is False
        assert result.company.value.sector == "Unknown"

    def test_search(self, gateway):
        service = MarketDataService(gateway)

        matches = asyncio.run(service.search("coca", 10))

        assert matches == [
            SearchMatch(symbol="KO", name="The Coca-Cola Company"),
            SearchMatch(symbol="KOF", name=None),
        ]

    def test_search_error_returns_empty(self):
        gateway = FakeGateway()

        with patch.object(gateway, "search", side_effect=RuntimeError("boom")):
            matches = asyncio.run(MarketDataService(gateway).search("coca", 10))

        assert matches == []
