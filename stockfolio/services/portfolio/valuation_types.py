"""Value objects for portfolio valuation."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from stockfolio.models import Portfolio

ZERO = Decimal("0")


@dataclass
class EnrichedHolding:
    """A stored holding plus metrics derived from live market data.

    Recomputed on every request and never persisted.
    """

    holding_id: int | None
    symbol: str
    shares: Decimal
    purchase_date: date
    purchase_price: Decimal
    sector: str

    current_price: Decimal
    current_value: Decimal
    initial_value: Decimal
    profit_loss: Decimal
    profit_loss_percentage: Decimal

    dividend_yield: Decimal
    annual_dividend_per_share: Decimal
    annual_dividend_income: Decimal

    resolved_sector: str
    last_updated: datetime

    # False when no price could be fetched and price-derived fields are zero
    data_available: bool = True


@dataclass
class PortfolioSummary:
    """Portfolio-level totals."""

    total_current_value: Decimal = ZERO
    total_initial_value: Decimal = ZERO
    total_profit_loss: Decimal = ZERO
    total_profit_loss_percentage: Decimal = ZERO
    total_annual_dividend: Decimal = ZERO
    portfolio_dividend_yield: Decimal = ZERO
    irr: Decimal = ZERO


@dataclass
class SectorMember:
    """One holding's contribution to a sector bucket."""

    symbol: str
    value: Decimal


@dataclass
class SectorAllocation:
    """Current value aggregated across holdings sharing a sector."""

    sector: str
    total_value: Decimal = ZERO
    percentage: Decimal = ZERO
    holdings: list[SectorMember] = field(default_factory=list)


@dataclass
class PerformerSnapshot:
    """A holding singled out by the performance highlights."""

    symbol: str
    profit_loss_percentage: Decimal
    initial_value: Decimal
    current_value: Decimal
    dividend_yield: Decimal


@dataclass
class PerformanceHighlights:
    """Best/worst performers, top dividend payer and portfolio age."""

    best_performer: PerformerSnapshot | None = None
    worst_performer: PerformerSnapshot | None = None
    highest_dividend: PerformerSnapshot | None = None
    portfolio_age_days: int = 0
    portfolio_age_label: str = "N/A"


@dataclass
class PortfolioValuation:
    """Everything the portfolio view needs for one owner."""

    portfolio: Portfolio
    holdings: list[EnrichedHolding]
    summary: PortfolioSummary
