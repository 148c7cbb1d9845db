"""Portfolio valuation services.

Handles per-holding enrichment, portfolio aggregation, sector allocation
and performance highlights.
"""

from .aggregation import simple_irr, summarize_portfolio
from .enrichment import enrich_holding
from .performance import compute_highlights
from .sectors import group_by_sector
from .valuation_service import PortfolioValuationService

__all__ = [
    "PortfolioValuationService",
    "compute_highlights",
    "enrich_holding",
    "group_by_sector",
    "simple_irr",
    "summarize_portfolio",
]
