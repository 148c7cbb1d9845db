"""Database initialization: tables and the default owner's portfolio."""

import logging

from sqlalchemy.orm import Session

from stockfolio.config import settings
from stockfolio.database import Base, SessionLocal, engine
from stockfolio.services.repositories import PortfolioRepository, StoreUnavailableError

logger = logging.getLogger(__name__)


def create_tables() -> None:
    """Create all database tables."""
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)


def ensure_default_portfolio(db: Session) -> None:
    """Create the default owner's empty portfolio if it does not exist yet."""
    owner_identity = settings.default_owner_identity
    repo = PortfolioRepository(db)
    if repo.find_by_owner(owner_identity) is not None:
        logger.info(f"Default portfolio for {owner_identity} already exists")
        return
    repo.get_or_create(owner_identity)


def init_db() -> None:
    """Create tables and the default portfolio.

    A failure to create the default portfolio is logged, not raised; the
    portfolio is created lazily on first access anyway.
    """
    create_tables()
    db = SessionLocal()
    try:
        ensure_default_portfolio(db)
    except StoreUnavailableError as e:
        logger.error(f"Failed to initialize default portfolio: {e}")
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
