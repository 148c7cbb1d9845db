"""Stock search API router."""

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from stockfolio.config import settings
from stockfolio.dependencies.market_data import get_market_data_service
from stockfolio.rate_limiter import limiter
from stockfolio.schemas import StockSearchResponse, StockSearchResult
from stockfolio.services.market_data.market_data_service import MarketDataService
from stockfolio.services.stock_search_service import StockSearchService

router = APIRouter(prefix="/api/stocks", tags=["stocks"])


@router.get("/search", response_model=StockSearchResponse)
@limiter.limit(settings.search_rate_limit)
async def search_stocks(
    request: Request,
    query: str = Query(..., min_length=1, description="Company name or ticker fragment"),
    market_data: MarketDataService = Depends(get_market_data_service),
) -> StockSearchResponse:
    """
    Search for stocks and attach price, sector and dividend data to each match.

    Rate limited per client address since every match triggers provider lookups.
    """
    query = query.strip()
    if not query:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Search query cannot be blank"
        )

    candidates = await StockSearchService(market_data).search(query)
    return StockSearchResponse(
        results=[StockSearchResult.model_validate(c) for c in candidates]
    )
