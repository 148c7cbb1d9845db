"""Holding model - a single purchase lot of a stock."""

from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from stockfolio.constants import Sector
from stockfolio.database import Base

if TYPE_CHECKING:
    from stockfolio.models.portfolio import Portfolio


class Holding(Base):
    """Holding model. Rows are append-only; insertion order is display order."""

    __tablename__ = "holdings"
    __table_args__ = (
        Index("idx_holdings_portfolio", "portfolio_id"),
        Index("idx_holdings_symbol", "symbol"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    portfolio_id: Mapped[int] = mapped_column(ForeignKey("portfolios.id", ondelete="CASCADE"))
    symbol: Mapped[str] = mapped_column(String(20))
    shares: Mapped[Decimal] = mapped_column(Numeric(20, 8))
    purchase_date: Mapped[date] = mapped_column(Date)
    purchase_price: Mapped[Decimal] = mapped_column(Numeric(15, 4))
    sector: Mapped[str] = mapped_column(String(100), default=Sector.UNKNOWN)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())

    # Relationships
    portfolio: Mapped["Portfolio"] = relationship(back_populates="holdings")

    def __repr__(self) -> str:
        return f"<Holding(id={self.id}, symbol='{self.symbol}', shares={self.shares})>"
