"""Portfolio-level aggregation of enriched holdings."""

from collections.abc import Sequence
from datetime import UTC, date, datetime, time
from decimal import Decimal

from stockfolio.constants import DAYS_PER_YEAR
from stockfolio.services.portfolio.enrichment import HUNDRED, percent_of
from stockfolio.services.portfolio.valuation_types import ZERO, EnrichedHolding, PortfolioSummary

SECONDS_PER_DAY = Decimal("86400")
ONE = Decimal("1")


def elapsed_years(since: date, now: datetime) -> Decimal:
    """Years between midnight of `since` and `now`, never less than one day."""
    start = datetime.combine(since, time.min, tzinfo=now.tzinfo)
    days = Decimal(str((now - start).total_seconds())) / SECONDS_PER_DAY
    return max(ONE, days) / DAYS_PER_YEAR


def simple_irr(
    initial_value: Decimal,
    current_value: Decimal,
    since: date,
    now: datetime,
) -> Decimal:
    """Annualized return treating the portfolio as one lump sum invested on `since`.

    Returns a percentage, or 0 when nothing was invested.
    """
    if initial_value <= 0:
        return ZERO
    years = elapsed_years(since, now)
    growth = (current_value / initial_value) ** (ONE / years)
    return (growth - ONE) * HUNDRED


def summarize_portfolio(
    holdings: Sequence[EnrichedHolding],
    now: datetime | None = None,
) -> PortfolioSummary:
    """Fold enriched holdings into portfolio totals.

    The IRR basis date is the purchase date of the first holding in
    storage order, not the earliest purchase date.

    Args:
        holdings: Enriched holdings in storage order
        now: Reference time for the IRR (default: current UTC time)

    Returns:
        PortfolioSummary; all zeros for an empty portfolio
    """
    if not holdings:
        return PortfolioSummary()

    now = now or datetime.now(UTC)

    total_current_value = sum((h.current_value for h in holdings), ZERO)
    total_initial_value = sum((h.initial_value for h in holdings), ZERO)
    total_profit_loss = total_current_value - total_initial_value
    total_annual_dividend = sum((h.annual_dividend_income for h in holdings), ZERO)

    return PortfolioSummary(
        total_current_value=total_current_value,
        total_initial_value=total_initial_value,
        total_profit_loss=total_profit_loss,
        total_profit_loss_percentage=percent_of(total_profit_loss, total_initial_value),
        total_annual_dividend=total_annual_dividend,
        portfolio_dividend_yield=percent_of(total_annual_dividend, total_current_value),
        irr=simple_irr(
            total_initial_value,
            total_current_value,
            holdings[0].purchase_date,
            now,
        ),
    )
