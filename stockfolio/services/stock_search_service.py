"""Stock search decorated with live market data."""

import logging
from dataclasses import dataclass
from decimal import Decimal

from stockfolio.config import settings
from stockfolio.services.market_data.market_data_service import MarketDataService
from stockfolio.services.portfolio.enrichment import annualize_dividend, dividend_yield

logger = logging.getLogger(__name__)


@dataclass
class StockCandidate:
    """A search match with price, sector and dividend data attached."""

    symbol: str
    name: str | None
    sector: str
    current_price: Decimal
    dividend_yield: Decimal
    dividend_per_share: Decimal


class StockSearchService:
    """Searches the market data provider and decorates each match.

    A match whose lookups fail is still returned, with zero price and
    dividend data and an Unknown sector.
    """

    def __init__(
        self,
        market_data: MarketDataService,
        limit: int | None = None,
        payments_per_year: int | None = None,
    ) -> None:
        self._market_data = market_data
        self._limit = limit or settings.search_result_limit
        self._payments_per_year = payments_per_year or settings.dividend_payments_per_year

    async def search(self, query: str) -> list[StockCandidate]:
        """Matches for query, in provider order, decorated concurrently."""
        matches = await self._market_data.search(query, self._limit)
        market = await self._market_data.fetch_many([m.symbol for m in matches])

        candidates = []
        for match, data in zip(matches, market, strict=True):
            price = data.quote.value.price if data.quote.value.is_available else Decimal("0")
            info = data.company.value
            annual = annualize_dividend(info.dividend_per_payment, self._payments_per_year)
            candidates.append(
                StockCandidate(
                    symbol=match.symbol,
                    name=match.name or info.name,
                    sector=info.sector,
                    current_price=price,
                    dividend_yield=dividend_yield(annual, price),
                    dividend_per_share=info.dividend_per_payment,
                )
            )

        logger.info(f"Search '{query}' returned {len(candidates)} results")
        return candidates
