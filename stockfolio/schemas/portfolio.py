"""Portfolio response schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from stockfolio.schemas.holding import Holding


class Portfolio(BaseModel):
    """Stored portfolio with raw holdings, as returned after adding a holding."""

    model_config = ConfigDict(from_attributes=True)

    owner_identity: str
    created_at: datetime | None = None
    holdings: list[Holding] = []


class EnrichedHolding(BaseModel):
    """Holding with live market data and derived metrics."""

    model_config = ConfigDict(from_attributes=True)

    holding_id: int | None = None
    symbol: str
    shares: float
    purchase_date: date
    purchase_price: float
    sector: str = Field(..., description="Sector stored with the holding")

    current_price: float = Field(..., description="0 when no price was available")
    current_value: float
    initial_value: float
    profit_loss: float
    profit_loss_percentage: float

    dividend_yield: float = Field(..., description="Annual dividend as percent of price")
    annual_dividend_per_share: float
    annual_dividend_income: float

    resolved_sector: str = Field(..., description="Provider sector, else the stored sector")
    last_updated: datetime
    data_available: bool = True


class PortfolioSummary(BaseModel):
    """Portfolio-level totals."""

    model_config = ConfigDict(from_attributes=True)

    total_current_value: float = 0
    total_initial_value: float = 0
    total_profit_loss: float = 0
    total_profit_loss_percentage: float = 0
    total_annual_dividend: float = 0
    portfolio_dividend_yield: float = 0
    irr: float = Field(0, description="Simplified annualized return in percent")


class PortfolioView(BaseModel):
    """Portfolio header, enriched holdings and summary."""

    owner_identity: str
    created_at: datetime | None = None
    holdings: list[EnrichedHolding] = []
    summary: PortfolioSummary


class SectorMember(BaseModel):
    """One holding's value within a sector bucket."""

    model_config = ConfigDict(from_attributes=True)

    symbol: str
    value: float


class SectorAllocation(BaseModel):
    """Current value aggregated by sector."""

    model_config = ConfigDict(from_attributes=True)

    sector: str
    total_value: float
    percentage: float = Field(..., description="Share of total portfolio value in percent")
    holdings: list[SectorMember] = []


class PerformerSnapshot(BaseModel):
    """A holding singled out by the performance highlights."""

    model_config = ConfigDict(from_attributes=True)

    symbol: str
    profit_loss_percentage: float
    initial_value: float
    current_value: float
    dividend_yield: float


class PerformanceHighlights(BaseModel):
    """Best/worst performers, top dividend payer and portfolio age."""

    model_config = ConfigDict(from_attributes=True)

    best_performer: PerformerSnapshot | None = None
    worst_performer: PerformerSnapshot | None = None
    highest_dividend: PerformerSnapshot | None = None
    portfolio_age_days: int = 0
    portfolio_age_label: str = "N/A"
