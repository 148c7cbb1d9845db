"""Shared test fixtures: in-memory database and a scripted market data provider."""

import os
from datetime import date
from decimal import Decimal

# Keep the application's own engine away from the working directory
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("MARKET_DATA_PROVIDER", "yfinance")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from stockfolio.database import Base, get_db
from stockfolio.dependencies.market_data import get_market_data_gateway
from stockfolio.main import app
from stockfolio.models import Holding, Portfolio
from stockfolio.rate_limiter import limiter
from stockfolio.services.market_data.gateway import CompanyInfo, SearchMatch
from tests.factories import FakeGateway


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across connections."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_maker(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)


@pytest.fixture
def db(session_maker):
    """Database session for a single test."""
    session = session_maker()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def gateway() -> FakeGateway:
    """Provider with prices and company data for a handful of symbols."""
    return FakeGateway(
        prices={
            "AAPL": Decimal("120"),
            "KO": Decimal("50"),
            "MSFT": Decimal("300"),
        },
        companies={
            "AAPL": CompanyInfo(sector="Technology", dividend_per_payment=Decimal("0.25")),
            "KO": CompanyInfo(
                sector="Consumer Defensive",
                dividend_per_payment=Decimal("0.5"),
                name="The Coca-Cola Company",
            ),
            "MSFT": CompanyInfo(sector="Technology", dividend_per_payment=Decimal("0.75")),
        },
        matches=[
            SearchMatch(symbol="KO", name="The Coca-Cola Company"),
            SearchMatch(symbol="KOF", name=None),
        ],
    )


@pytest.fixture
def client(session_maker, gateway):
    """Test client with database and market data overrides."""
    limiter.reset()

    def override_get_db():
        db = session_maker()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_market_data_gateway] = lambda: gateway

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def seeded_portfolio(db) -> Portfolio:
    """Portfolio for owner@example.com holding AAPL then KO."""
    portfolio = Portfolio(owner_identity="owner@example.com")
    portfolio.holdings.append(
        Holding(
            symbol="AAPL",
            shares=Decimal("10"),
            purchase_date=date(2023, 6, 1),
            purchase_price=Decimal("100"),
            sector="Technology",
        )
    )
    portfolio.holdings.append(
        Holding(
            symbol="KO",
            shares=Decimal("20"),
            purchase_date=date(2022, 1, 3),
            purchase_price=Decimal("55"),
            sector="Unknown",
        )
    )
    db.add(portfolio)
    db.commit()
    db.refresh(portfolio)
    return portfolio
