"""Portfolio data access layer.

The holdings store: one portfolio per owner identity, holding an
append-only list of purchase lots.
"""

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from stockfolio.constants import Sector
from stockfolio.models import Holding, Portfolio
from stockfolio.services.repositories.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


class PortfolioRepository:
    """Centralized portfolio data access.

    Naming conventions:
    - find_* : Query that may return None
    - get_or_create : Upsert pattern
    - append : Insert a holding into an owner's portfolio

    Database errors are logged and re-raised as StoreUnavailableError.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_owner(self, owner_identity: str) -> Portfolio | None:
        """Find portfolio by owner identity."""
        try:
            return (
                self._db.query(Portfolio)
                .filter(Portfolio.owner_identity == owner_identity)
                .first()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to load portfolio for {owner_identity}: {e}")
            raise StoreUnavailableError("read", owner_identity) from e

    def get_or_create(self, owner_identity: str) -> Portfolio:
        """Return the owner's portfolio, creating an empty one on first access."""
        existing = self.find_by_owner(owner_identity)
        if existing is not None:
            return existing

        try:
            portfolio = Portfolio(owner_identity=owner_identity)
            self._db.add(portfolio)
            self._db.commit()
            self._db.refresh(portfolio)
        except IntegrityError as e:
            # Another request created this owner's portfolio first
            self._db.rollback()
            existing = self.find_by_owner(owner_identity)
            if existing is None:
                raise StoreUnavailableError("create", owner_identity) from e
            return existing
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"Failed to create portfolio for {owner_identity}: {e}")
            raise StoreUnavailableError("create", owner_identity) from e

        logger.info(f"Created portfolio for {owner_identity}")
        return portfolio

    def list_holdings(self, owner_identity: str) -> list[Holding]:
        """All holdings for an owner in insertion order (empty if no portfolio)."""
        try:
            return (
                self._db.query(Holding)
                .join(Portfolio, Holding.portfolio_id == Portfolio.id)
                .filter(Portfolio.owner_identity == owner_identity)
                .order_by(Holding.id)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to load holdings for {owner_identity}: {e}")
            raise StoreUnavailableError("read", owner_identity) from e

    def append(
        self,
        owner_identity: str,
        *,
        symbol: str,
        shares: Decimal,
        purchase_date: date,
        purchase_price: Decimal,
        sector: str | None = None,
    ) -> Portfolio:
        """Append a holding to the owner's portfolio.

        The portfolio is created if it does not exist yet.

        Returns:
            The refreshed portfolio including the new holding.
        """
        portfolio = self.get_or_create(owner_identity)

        try:
            holding = Holding(
                symbol=symbol,
                shares=shares,
                purchase_date=purchase_date,
                purchase_price=purchase_price,
                sector=sector or Sector.UNKNOWN,
            )
            portfolio.holdings.append(holding)
            self._db.commit()
            self._db.refresh(portfolio)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"Failed to append {symbol} for {owner_identity}: {e}")
            raise StoreUnavailableError("append", owner_identity) from e

        logger.info(f"Added {shares} {symbol} to portfolio of {owner_identity}")
        return portfolio
