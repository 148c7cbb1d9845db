"""Performance highlights shown alongside the portfolio summary."""

import math
from collections.abc import Sequence
from datetime import UTC, datetime, time

from stockfolio.services.portfolio.valuation_types import (
    EnrichedHolding,
    PerformanceHighlights,
    PerformerSnapshot,
)


def _snapshot(holding: EnrichedHolding) -> PerformerSnapshot:
    return PerformerSnapshot(
        symbol=holding.symbol,
        profit_loss_percentage=holding.profit_loss_percentage,
        initial_value=holding.initial_value,
        current_value=holding.current_value,
        dividend_yield=holding.dividend_yield,
    )


def portfolio_age_label(days: int) -> str:
    """Human readable age: "12 days", "5 months", "2y 3m" or "3 years"."""
    if days < 30:
        return f"{days} days"
    if days < 365:
        return f"{days // 30} months"

    years = days // 365
    months = (days % 365) // 30
    return f"{years}y {months}m" if months > 0 else f"{years} years"


def compute_highlights(
    holdings: Sequence[EnrichedHolding],
    now: datetime | None = None,
) -> PerformanceHighlights:
    """Best and worst performer, highest dividend yield and portfolio age.

    Age is measured from the earliest purchase date across all holdings.
    """
    if not holdings:
        return PerformanceHighlights()

    now = now or datetime.now(UTC)

    # max() and min() return the first of equal candidates
    best = max(holdings, key=lambda h: h.profit_loss_percentage)
    worst = min(holdings, key=lambda h: h.profit_loss_percentage)
    top_dividend = max(holdings, key=lambda h: h.dividend_yield)

    oldest = min(h.purchase_date for h in holdings)
    start = datetime.combine(oldest, time.min, tzinfo=now.tzinfo)
    age_days = max(0, math.ceil((now - start).total_seconds() / 86400))

    return PerformanceHighlights(
        best_performer=_snapshot(best),
        worst_performer=_snapshot(worst),
        highest_dividend=_snapshot(top_dividend),
        portfolio_age_days=age_days,
        portfolio_age_label=portfolio_age_label(age_days),
    )
