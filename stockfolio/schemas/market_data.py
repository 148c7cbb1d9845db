"""Pydantic schemas for stock search endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class StockSearchResult(BaseModel):
    """A search match decorated with live market data."""

    model_config = ConfigDict(from_attributes=True)

    symbol: str = Field(..., description="Ticker symbol")
    name: str | None = None
    sector: str
    current_price: float = Field(..., description="0 when no price was available")
    dividend_yield: float = Field(..., description="Annualized dividend yield in percent")
    dividend_per_share: float = Field(..., description="Latest single dividend payment")


class StockSearchResponse(BaseModel):
    """Response for stock search."""

    results: list[StockSearchResult] = Field(default_factory=list)
