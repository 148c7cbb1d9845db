"""Portfolio model - the holdings collection for one owner."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from stockfolio.database import Base

if TYPE_CHECKING:
    from stockfolio.models.holding import Holding


class Portfolio(Base):
    """Portfolio model keyed by a unique owner identity."""

    __tablename__ = "portfolios"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    owner_identity: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())

    # Relationships
    holdings: Mapped[list["Holding"]] = relationship(
        back_populates="portfolio",
        cascade="all, delete-orphan",
        order_by="Holding.id",
    )

    def __repr__(self) -> str:
        return f"<Portfolio(id={self.id}, owner_identity='{self.owner_identity}')>"
