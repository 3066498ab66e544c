"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTOFINANCE_",
        extra="ignore",
    )

    # Service
    service_name: str = "autofinance-engine"
    log_level: str = "INFO"

    # Default lease preset
    lease_term_months: int = 36
    lease_down_payment: float = 3000.0
    lease_interest_rate: float = 3.9

    # Default finance preset
    finance_term_months: int = 60
    finance_down_payment: float = 5000.0
    finance_interest_rate: float = 5.5

    # Recommendations
    recommendation_limit: int = 3


settings = Settings()
