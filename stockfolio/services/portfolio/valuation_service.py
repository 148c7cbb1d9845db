"""Portfolio valuation service - single source of truth for the portfolio view.

Reads an owner's holdings, fetches market data for every holding
concurrently, enriches each holding and folds the results into the
portfolio summary. A holding whose lookups fail stays in the list with
zeroed price-derived fields.
"""

import logging
from datetime import UTC, datetime

from sqlalchemy.orm import Session

from stockfolio.config import settings
from stockfolio.models import Holding
from stockfolio.services.market_data.market_data_service import MarketDataService
from stockfolio.services.portfolio.aggregation import summarize_portfolio
from stockfolio.services.portfolio.enrichment import enrich_holding
from stockfolio.services.portfolio.performance import compute_highlights
from stockfolio.services.portfolio.sectors import group_by_sector
from stockfolio.services.portfolio.valuation_types import (
    EnrichedHolding,
    PerformanceHighlights,
    PortfolioValuation,
    SectorAllocation,
)
from stockfolio.services.repositories.portfolio_repository import PortfolioRepository

logger = logging.getLogger(__name__)


class PortfolioValuationService:
    """Calculates enriched holdings, portfolio totals and derived views.

    Example:
        service = PortfolioValuationService(db, MarketDataService(create_gateway()))
        valuation = await service.value_portfolio("me@example.com")
    """

    def __init__(
        self,
        db: Session,
        market_data: MarketDataService,
        payments_per_year: int | None = None,
    ) -> None:
        self._repo = PortfolioRepository(db)
        self._market_data = market_data
        self._payments_per_year = payments_per_year or settings.dividend_payments_per_year

    async def enrich_holdings(
        self, holdings: list[Holding], now: datetime | None = None
    ) -> list[EnrichedHolding]:
        """Enrich holdings in the order given.

        Lookups for all holdings run concurrently; enrichment starts once
        every lookup has finished.
        """
        now = now or datetime.now(UTC)
        market = await self._market_data.fetch_many([h.symbol for h in holdings])

        enriched = []
        for holding, data in zip(holdings, market, strict=True):
            if data.errors:
                logger.warning(
                    f"Degraded market data for {holding.symbol}: {', '.join(data.errors)}"
                )
            enriched.append(
                enrich_holding(
                    holding,
                    data.quote.value,
                    data.company.value,
                    payments_per_year=self._payments_per_year,
                    now=now,
                )
            )
        return enriched

    async def value_portfolio(
        self, owner_identity: str, now: datetime | None = None
    ) -> PortfolioValuation:
        """Full portfolio view for an owner, creating an empty portfolio if absent.

        Raises:
            StoreUnavailableError: If the holdings store cannot be read
        """
        now = now or datetime.now(UTC)
        portfolio = self._repo.get_or_create(owner_identity)
        holdings = self._repo.list_holdings(owner_identity)

        enriched = await self.enrich_holdings(holdings, now=now)
        summary = summarize_portfolio(enriched, now=now)

        logger.info(
            "Portfolio valued: owner=%s holdings=%d total_value=%s total_profit=%s "
            "irr=%.2f dividend_yield=%.2f",
            owner_identity,
            len(enriched),
            summary.total_current_value,
            summary.total_profit_loss,
            summary.irr,
            summary.portfolio_dividend_yield,
        )

        return PortfolioValuation(portfolio=portfolio, holdings=enriched, summary=summary)

    async def sector_allocation(self, owner_identity: str) -> list[SectorAllocation]:
        """Sector buckets for an owner's current holdings."""
        valuation = await self.value_portfolio(owner_identity)
        return group_by_sector(valuation.holdings)

    async def performance_highlights(self, owner_identity: str) -> PerformanceHighlights:
        """Best/worst performers, top dividend payer and portfolio age."""
        valuation = await self.value_portfolio(owner_identity)
        return compute_highlights(valuation.holdings)
