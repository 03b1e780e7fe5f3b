"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "emi-calculator"
    log_level: str = "INFO"

    # Presentation
    currency_symbol: str = "$"

    # Validation policy
    allow_zero_rate: bool = True  # False restores the legacy "rate must be non-zero" rule


settings = Settings()
