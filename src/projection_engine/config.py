"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import RateAssumptions


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",  # Ignore extra environment variables
    )

    # API Authentication
    api_token: str

    # Rates used when a request leaves a rate out (e.g. DEFAULT_RATES__MORTGAGE=0.065)
    default_rates: RateAssumptions = RateAssumptions()

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
