"""Application constants to avoid magic strings."""


class Sector:
    """Sector classification constants."""

    UNKNOWN = "Unknown"


class MarketDataProvider:
    """Supported market data providers."""

    YFINANCE = "yfinance"
    POLYGON = "polygon"


# Latest dividend payment is annualized assuming a quarterly cadence
DEFAULT_DIVIDEND_PAYMENTS_PER_YEAR = 4

DAYS_PER_YEAR = 365

OWNER_HEADER = "X-Owner-Identity"
