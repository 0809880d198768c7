"""
Application Configuration

All settings loaded from environment variables.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "MarketPulse Backend"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "info"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS (Frontend URL)
    frontend_url: str = "http://localhost:5173"
    allowed_origins: list[str] = ["http://localhost:5173"]

    # Upstream quote provider (Yahoo Finance)
    enable_upstream: bool = True  # False = always serve synthesized data
    technical_period: str = "60d"
    technical_interval: str = "15m"
    intraday_period: str = "1d"
    intraday_interval: str = "5m"

    # Synthetic fallbacks
    mock_current_price: float = 25600.0
    mock_previous_close: float = 25765.0
    option_fallback_price: float = 24000.0
    option_chain_strikes: int = 21
    fii_dii_days: int = 10

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
