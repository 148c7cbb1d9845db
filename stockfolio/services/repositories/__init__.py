"""Repository layer - data access abstraction.

Repositories handle all database queries, providing a clean interface
for services. Services should use repositories for data access rather
than directly querying SQLAlchemy models.

Dependency direction: Services -> Repositories -> Models
"""

from .exceptions import RepositoryError, StoreUnavailableError
from .portfolio_repository import PortfolioRepository

__all__ = [
    "PortfolioRepository",
    "RepositoryError",
    "StoreUnavailableError",
]
