"""Tests for holding request validation."""

from datetime import date, timedelta
from decimal import Decimal

import pytest
from pydantic import ValidationError

from stockfolio.schemas import HoldingCreate


def _payload(**overrides) -> dict:
    payload = {
        "symbol": "aapl",
        "shares": "10",
        "purchase_date": "2024-01-02",
        "purchase_price": "185.64",
    }
    payload.update(overrides)
    return payload


class TestHoldingCreate:
    """Test HoldingCreate validation."""

    def test_valid(self):
        holding = HoldingCreate(**_payload(sector="Technology"))

        assert holding.symbol == "AAPL"
        assert holding.shares == Decimal("10")
        assert holding.purchase_date == date(2024, 1, 2)
        assert holding.purchase_price == Decimal("185.64")
        assert holding.sector == "Technology"

    @pytest.mark.parametrize("symbol", ["BRK.B", "SIE.DE", "BTC-USD", " msft "])
    def test_symbol_formats(self, symbol):
        assert HoldingCreate(**_payload(symbol=symbol)).symbol == symbol.strip().upper()

    @pytest.mark.parametrize(
        "symbol", ["", "   ", "AA PL", ".AAPL", "AAPL-", "A$", "ABCDEFGHIJKLM"]
    )
    def test_invalid_symbols(self, symbol):
        with pytest.raises(ValidationError):
            HoldingCreate(**_payload(symbol=symbol))

    @pytest.mark.parametrize("field", ["shares", "purchase_price"])
    @pytest.mark.parametrize("value", ["0", "-1"])
    def test_non_positive_numbers(self, field, value):
        with pytest.raises(ValidationError):
            HoldingCreate(**_payload(**{field: value}))

    def test_fractional_shares(self):
        assert HoldingCreate(**_payload(shares="0.125")).shares == Decimal("0.125")

    @pytest.mark.parametrize("price", ["0.00004", "12.34567"])
    def test_purchase_price_beyond_stored_precision(self, price):
        """Prices the store would round are rejected instead of silently changed."""
        with pytest.raises(ValidationError):
            HoldingCreate(**_payload(purchase_price=price))

    def test_purchase_price_at_stored_precision(self):
        holding = HoldingCreate(**_payload(purchase_price="0.0001"))

        assert holding.purchase_price == Decimal("0.0001")

    def test_shares_beyond_stored_precision(self):
        with pytest.raises(ValidationError):
            HoldingCreate(**_payload(shares="0.000000001"))

    def test_shares_at_stored_precision(self):
        assert HoldingCreate(**_payload(shares="0.00000001")).shares == Decimal("0.00000001")

    def test_future_purchase_date(self):
        tomorrow = date.today() + timedelta(days=1)

        with pytest.raises(ValidationError, match="in the future"):
            HoldingCreate(**_payload(purchase_date=tomorrow.isoformat()))

    def test_purchase_today_allowed(self):
        assert HoldingCreate(**_payload(purchase_date=date.today().isoformat()))

    @pytest.mark.parametrize("field", ["symbol", "shares", "purchase_date", "purchase_price"])
    def test_required_fields(self, field):
        payload = _payload()
        del payload[field]

        with pytest.raises(ValidationError):
            HoldingCreate(**payload)

    def test_blank_sector_becomes_unknown(self):
        assert HoldingCreate(**_payload(sector="  ")).sector == "Unknown"

    def test_sector_optional(self):
        assert HoldingCreate(**_payload()).sector is None
