"""Per-holding enrichment.

Combines one stored holding with a price quote and company info into an
EnrichedHolding. Pure apart from the last_updated timestamp.

Missing market data is not an error here: an unavailable quote counts as a
price of 0, and every price-derived field follows from that.
"""

from datetime import UTC, datetime
from decimal import Decimal

from stockfolio.constants import DEFAULT_DIVIDEND_PAYMENTS_PER_YEAR, Sector
from stockfolio.models import Holding
from stockfolio.services.market_data.gateway import CompanyInfo, Quote
from stockfolio.services.portfolio.valuation_types import ZERO, EnrichedHolding

HUNDRED = Decimal("100")


def percent_of(part: Decimal, whole: Decimal) -> Decimal:
    """part / whole as a percentage, or 0 when whole is not positive."""
    if whole > 0:
        return part / whole * HUNDRED
    return ZERO


def annualize_dividend(
    dividend_per_payment: Decimal,
    payments_per_year: int = DEFAULT_DIVIDEND_PAYMENTS_PER_YEAR,
) -> Decimal:
    """Annual dividend per share from the latest single payment."""
    return dividend_per_payment * payments_per_year


def dividend_yield(annual_dividend_per_share: Decimal, price: Decimal) -> Decimal:
    """Annual dividend as a percentage of price (0 without a price)."""
    return percent_of(annual_dividend_per_share, price)


def resolve_sector(provider_sector: str | None, stored_sector: str | None) -> str:
    """Provider sector unless empty or Unknown, else the holding's stored sector."""
    if provider_sector and provider_sector != Sector.UNKNOWN:
        return provider_sector
    return stored_sector or Sector.UNKNOWN


def enrich_holding(
    holding: Holding,
    quote: Quote,
    company_info: CompanyInfo,
    *,
    payments_per_year: int = DEFAULT_DIVIDEND_PAYMENTS_PER_YEAR,
    now: datetime | None = None,
) -> EnrichedHolding:
    """Derive current value, P&L and dividend metrics for one holding.

    Args:
        holding: Stored purchase lot
        quote: Latest price (price None means unavailable)
        company_info: Sector and latest dividend per payment
        payments_per_year: Dividend cadence used to annualize the latest payment
        now: Timestamp to stamp as last_updated (default: current UTC time)

    Returns:
        EnrichedHolding with all derived fields
    """
    shares = Decimal(str(holding.shares))
    purchase_price = Decimal(str(holding.purchase_price))
    current_price = quote.price if quote.is_available else ZERO

    initial_value = shares * purchase_price
    current_value = current_price * shares
    profit_loss = current_value - initial_value

    annual_dividend_per_share = annualize_dividend(
        company_info.dividend_per_payment, payments_per_year
    )

    return EnrichedHolding(
        holding_id=holding.id,
        symbol=holding.symbol,
        shares=shares,
        purchase_date=holding.purchase_date,
        purchase_price=purchase_price,
        sector=holding.sector or Sector.UNKNOWN,
        current_price=current_price,
        current_value=current_value,
        initial_value=initial_value,
        profit_loss=profit_loss,
        profit_loss_percentage=percent_of(profit_loss, initial_value),
        dividend_yield=dividend_yield(annual_dividend_per_share, current_price),
        annual_dividend_per_share=annual_dividend_per_share,
        annual_dividend_income=annual_dividend_per_share * shares,
        resolved_sector=resolve_sector(company_info.sector, holding.sector),
        last_updated=now or datetime.now(UTC),
        data_available=quote.is_available,
    )
