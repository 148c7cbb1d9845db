"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # Database
    database_url: str = "sqlite:///./stockfolio.db"

    # Market data
    market_data_provider: str = "yfinance"  # yfinance or polygon
    polygon_api_key: str = ""
    polygon_base_url: str = "https://api.polygon.io"
    market_data_timeout_seconds: float = 10.0
    dividend_payments_per_year: int = 4

    # Stock search
    search_result_limit: int = 10
    search_rate_limit: str = "30/minute"

    # Owner used when a request carries no X-Owner-Identity header
    default_owner_identity: str = "test@test.com"

    # Application
    log_level: str = "INFO"

    # CORS
    allowed_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


settings = Settings()
