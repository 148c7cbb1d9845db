"""Pydantic schemas for Holding model."""

import re
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stockfolio.constants import Sector

# Letters, digits, dots and hyphens, e.g. AAPL, BRK.B, SIE.DE, BTC-USD
_TICKER_PATTERN = re.compile(r"^[A-Z0-9](?:[A-Z0-9.\-]*[A-Z0-9])?$")
_MAX_TICKER_LEN = 12


class HoldingCreate(BaseModel):
    """Schema for adding a holding to a portfolio."""

    symbol: str = Field(..., min_length=1, description="Ticker symbol")
    shares: Decimal = Field(
        ...,
        gt=0,
        max_digits=20,
        decimal_places=8,
        description="Number of shares (fractional allowed, up to 8 decimals)",
    )
    purchase_date: date = Field(..., description="Date of purchase, today or earlier")
    purchase_price: Decimal = Field(
        ...,
        gt=0,
        max_digits=15,
        decimal_places=4,
        description="Price per share at purchase, up to 4 decimals",
    )
    sector: str | None = Field(None, max_length=100, description="Sector classification")

    @field_validator("symbol")
    @classmethod
    def normalize_symbol(cls, v: str) -> str:
        symbol = v.strip().upper()
        if not symbol:
            raise ValueError("Ticker symbol cannot be empty")
        if len(symbol) > _MAX_TICKER_LEN:
            raise ValueError(f"Ticker is too long (max {_MAX_TICKER_LEN} characters)")
        if not _TICKER_PATTERN.match(symbol):
            raise ValueError(
                "Ticker may only contain letters, numbers, dots and hyphens, "
                "and cannot start or end with '.' or '-'"
            )
        return symbol

    @field_validator("purchase_date")
    @classmethod
    def not_in_future(cls, v: date) -> date:
        if v > date.today():
            raise ValueError(f"Purchase date {v} is in the future")
        return v

    @field_validator("sector")
    @classmethod
    def default_sector(cls, v: str | None) -> str:
        return v.strip() if v and v.strip() else Sector.UNKNOWN


class Holding(BaseModel):
    """Schema for stored (undecorated) holding responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    symbol: str
    shares: float
    purchase_date: date
    purchase_price: float
    sector: str
    created_at: datetime | None = None
