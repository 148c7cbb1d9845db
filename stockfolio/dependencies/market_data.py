"""Market data dependencies for FastAPI routes."""

from collections.abc import Generator

from fastapi import Depends

from stockfolio.services.market_data.gateway import MarketDataGateway
from stockfolio.services.market_data.market_data_service import MarketDataService, create_gateway


def get_market_data_gateway() -> Generator[MarketDataGateway, None, None]:
    """
    Gateway for the configured provider, closed after the request.

    Override this dependency in tests to substitute a fake provider.
    """
    gateway = create_gateway()
    try:
        yield gateway
    finally:
        gateway.close()


def get_market_data_service(
    gateway: MarketDataGateway = Depends(get_market_data_gateway),
) -> MarketDataService:
    """Concurrent, time-bounded access to the request's gateway."""
    return MarketDataService(gateway)
