"""Tests for gateway lookups with fallbacks."""

from decimal import Decimal

from stockfolio.services.market_data.gateway import (
    CompanyInfo,
    LookupResult,
    Quote,
    fetch_company_info,
    fetch_quote,
)
from tests.factories import FakeGateway


class TestQuote:
    def test_availability(self):
        assert Quote("AAPL", Decimal("1")).is_available is True
        assert Quote("AAPL").is_available is False
        assert Quote("AAPL", Decimal("0")).is_available is False


class TestLookupResult:
    def test_ok_and_fallback(self):
        ok = LookupResult.ok(Quote("AAPL", Decimal("1")))
        fallback = LookupResult.fallback(Quote("AAPL"), "timeout")

        assert ok.succeeded is True
        assert fallback.succeeded is False
        assert fallback.error == "timeout"
        assert fallback.value.price is None


class TestFetchQuote:
    """Test fetch_quote."""

    def test_price_found(self):
        gateway = FakeGateway(prices={"AAPL": Decimal("190.5")})

        result = fetch_quote(gateway, "AAPL")

        assert result.succeeded
        assert result.value == Quote("AAPL", Decimal("190.5"))

    def test_missing_price_is_fallback(self):
        result = fetch_quote(FakeGateway(), "AAPL")

        assert result.error == "price unavailable"
        assert result.value.is_available is False

    def test_zero_price_is_fallback(self):
        result = fetch_quote(FakeGateway(prices={"AAPL": Decimal("0")}), "AAPL")

        assert not result.succeeded
        assert result.value.price is None

    def test_exception_is_fallback(self):
        gateway = FakeGateway(prices={"AAPL": Decimal("1")}, failing={"AAPL"})

        result = fetch_quote(gateway, "AAPL")

        assert "provider down" in result.error
        assert result.value.price is None


class TestFetchCompanyInfo:
    """Test fetch_company_info."""

    def test_info_found(self):
        info = CompanyInfo(sector="Energy", dividend_per_payment=Decimal("0.95"))
        gateway = FakeGateway(companies={"XOM": info})

        result = fetch_company_info(gateway, "XOM")

        assert result.succeeded
        assert result.value == info

    def test_exception_is_fallback(self):
        gateway = FakeGateway(failing={"XOM"})

        result = fetch_company_info(gateway, "XOM")

        assert not result.succeeded
        assert result.value == CompanyInfo()
        assert result.value.sector == "Unknown"
        assert result.value.dividend_per_payment == 0
