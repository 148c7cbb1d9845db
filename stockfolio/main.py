"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from stockfolio.config import settings
from stockfolio.init_db import init_db
from stockfolio.rate_limiter import limiter
from stockfolio.routers import portfolios, stocks
from stockfolio.services.repositories import StoreUnavailableError

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create tables and the default portfolio on startup."""
    init_db()
    logger.info(
        "Stockfolio API ready (market data provider: %s, default owner: %s)",
        settings.market_data_provider,
        settings.default_owner_identity,
    )
    yield


# Create FastAPI app
app = FastAPI(
    title="Stockfolio API",
    description="Personal stock portfolio tracking with live market data",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Add rate limiter to app state and exception handler
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


@app.exception_handler(StoreUnavailableError)
async def store_unavailable_handler(request: Request, exc: StoreUnavailableError) -> JSONResponse:
    """Holdings store failures fail the whole request."""
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Portfolio store is unavailable, please retry later"},
    )


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Stockfolio API", "version": "0.1.0", "status": "running"}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(portfolios.router)
app.include_router(stocks.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
