"""Pydantic schemas for API request/response validation."""

from stockfolio.schemas.holding import Holding, HoldingCreate
from stockfolio.schemas.market_data import StockSearchResponse, StockSearchResult
from stockfolio.schemas.portfolio import (
    EnrichedHolding,
    PerformanceHighlights,
    PerformerSnapshot,
    Portfolio,
    PortfolioSummary,
    PortfolioView,
    SectorAllocation,
    SectorMember,
)

__all__ = [
    "EnrichedHolding",
    "Holding",
    "HoldingCreate",
    "PerformanceHighlights",
    "PerformerSnapshot",
    "Portfolio",
    "PortfolioSummary",
    "PortfolioView",
    "SectorAllocation",
    "SectorMember",
    "StockSearchResponse",
    "StockSearchResult",
]
