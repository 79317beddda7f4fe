"""Configuration system using pydantic-settings with environment variable loading."""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class MarketDataSettings(BaseSettings):
    """CoinGecko market data API settings."""

    model_config = SettingsConfigDict(env_prefix="COINGECKO_")

    base_url: str = "https://api.coingecko.com/api/v3"
    vs_currency: str = "usd"
    api_key: SecretStr = SecretStr("")  # demo key, sent as x-cg-demo-api-key
    timeout_seconds: float = 10.0
    listing_size: int = 20  # coins returned by the market-cap listing
    search_limit: int = 10


class IndicatorSettings(BaseSettings):
    """Technical indicator pipeline configuration.

    Window sizes are operator-level constants, not per-request parameters.
    A request for fewer samples than ``ma_long_window`` simply yields an
    undefined long moving average everywhere.
    All fields configurable via INDICATOR_ environment variable prefix.
    """

    model_config = SettingsConfigDict(env_prefix="INDICATOR_")

    ma_short_window: int = Field(default=50, gt=0)
    ma_long_window: int = Field(default=200, gt=0)
    rsi_period: int = Field(default=14, gt=0)

    # Enabled indicator set
    volume_enabled: bool = True  # join total_volumes onto the price axis
    rsi_enabled: bool = True


class DashboardSettings(BaseSettings):
    """Dashboard server configuration."""

    model_config = SettingsConfigDict(env_prefix="DASHBOARD_")

    host: str = "0.0.0.0"
    port: int = 8080


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    market_data: MarketDataSettings = MarketDataSettings()
    indicators: IndicatorSettings = IndicatorSettings()
    dashboard: DashboardSettings = DashboardSettings()
