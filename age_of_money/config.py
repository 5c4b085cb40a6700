"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./age_of_money.db"

    # External Services
    ledger_api_base: str = "http://localhost:8001"

    # Service
    service_name: str = "age-of-money"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0

    # Report defaults
    average_window: int = 10  # trailing expenses averaged into the current age
    trend_threshold: float = 2.0  # days of change before a trend is up/down
    history_limit: int = 20


settings = Settings()
