"""Portfolio API router."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from stockfolio.database import get_db
from stockfolio.dependencies.market_data import get_market_data_service
from stockfolio.dependencies.owner import get_owner_identity
from stockfolio.schemas import (
    EnrichedHolding,
    HoldingCreate,
    PerformanceHighlights,
    Portfolio,
    PortfolioSummary,
    PortfolioView,
    SectorAllocation,
)
from stockfolio.services.market_data.market_data_service import MarketDataService
from stockfolio.services.portfolio.valuation_service import PortfolioValuationService
from stockfolio.services.repositories.portfolio_repository import PortfolioRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


def get_valuation_service(
    db: Session = Depends(get_db),
    market_data: MarketDataService = Depends(get_market_data_service),
) -> PortfolioValuationService:
    """Valuation service bound to the request's session and gateway."""
    return PortfolioValuationService(db, market_data)


@router.get("", response_model=PortfolioView)
async def get_portfolio(
    owner_identity: str = Depends(get_owner_identity),
    service: PortfolioValuationService = Depends(get_valuation_service),
) -> PortfolioView:
    """
    Get the owner's portfolio with live market data.

    Every holding is returned in the order it was added. Holdings whose
    market data could not be fetched show zero price and value
    (data_available=false) instead of being dropped.
    """
    valuation = await service.value_portfolio(owner_identity)

    return PortfolioView(
        owner_identity=valuation.portfolio.owner_identity,
        created_at=valuation.portfolio.created_at,
        holdings=[EnrichedHolding.model_validate(h) for h in valuation.holdings],
        summary=PortfolioSummary.model_validate(valuation.summary),
    )


@router.get("/allocation", response_model=list[SectorAllocation])
async def get_sector_allocation(
    owner_identity: str = Depends(get_owner_identity),
    service: PortfolioValuationService = Depends(get_valuation_service),
) -> list[SectorAllocation]:
    """Current value grouped by sector, largest sector first."""
    buckets = await service.sector_allocation(owner_identity)
    return [SectorAllocation.model_validate(b) for b in buckets]


@router.get("/performance", response_model=PerformanceHighlights)
async def get_performance(
    owner_identity: str = Depends(get_owner_identity),
    service: PortfolioValuationService = Depends(get_valuation_service),
) -> PerformanceHighlights:
    """Best and worst performers, highest dividend yield and portfolio age."""
    highlights = await service.performance_highlights(owner_identity)
    return PerformanceHighlights.model_validate(highlights)


@router.post("/stock", response_model=Portfolio, status_code=status.HTTP_201_CREATED)
async def add_stock(
    holding_data: HoldingCreate,
    owner_identity: str = Depends(get_owner_identity),
    db: Session = Depends(get_db),
) -> Portfolio:
    """
    Add a holding to the owner's portfolio.

    Returns the stored portfolio without market data; request the
    portfolio view to see enriched values.
    """
    repo = PortfolioRepository(db)
    portfolio = repo.append(
        owner_identity,
        symbol=holding_data.symbol,
        shares=holding_data.shares,
        purchase_date=holding_data.purchase_date,
        purchase_price=holding_data.purchase_price,
        sector=holding_data.sector,
    )
    return Portfolio.model_validate(portfolio)
