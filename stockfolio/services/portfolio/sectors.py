"""Sector allocation of enriched holdings."""

from collections.abc import Sequence

from stockfolio.constants import Sector
from stockfolio.services.portfolio.enrichment import percent_of
from stockfolio.services.portfolio.valuation_types import (
    ZERO,
    EnrichedHolding,
    SectorAllocation,
    SectorMember,
)


def group_by_sector(holdings: Sequence[EnrichedHolding]) -> list[SectorAllocation]:
    """Bucket current value by resolved sector, largest bucket first.

    Holdings with an empty sector fall into "Unknown". Each bucket's
    percentage is its share of the summed bucket values (0 for every bucket
    when that sum is 0). Buckets with equal value keep first-seen order.
    """
    buckets: dict[str, SectorAllocation] = {}
    for holding in holdings:
        sector = holding.resolved_sector or Sector.UNKNOWN
        bucket = buckets.setdefault(sector, SectorAllocation(sector=sector))
        bucket.total_value += holding.current_value
        bucket.holdings.append(SectorMember(symbol=holding.symbol, value=holding.current_value))

    grand_total = sum((b.total_value for b in buckets.values()), ZERO)
    for bucket in buckets.values():
        bucket.percentage = percent_of(bucket.total_value, grand_total)

    return sorted(buckets.values(), key=lambda b: b.total_value, reverse=True)
