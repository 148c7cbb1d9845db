"""SQLAlchemy ORM models."""

from stockfolio.models.holding import Holding
from stockfolio.models.portfolio import Portfolio

__all__ = [
    "Holding",
    "Portfolio",
]
