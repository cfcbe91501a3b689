"""Configuration management using Pydantic Settings"""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict

from finance_advisor.utils.money import to_cents


class Settings(BaseSettings):
    """Advisor configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="ADVISOR_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Service
    service_name: str = "finance-advisor"
    log_level: str = "INFO"

    # Projection
    default_horizon_months: int = 12
    stop_at_insolvency: bool = False  # end the balance series at the first insolvent month

    # Risk classification
    low_surplus_threshold: Decimal = Decimal("500")  # currency units per month
    high_risk_max_month: int = 3
    medium_risk_max_month: int = 6

    @property
    def low_surplus_threshold_cents(self) -> int:
        return to_cents(self.low_surplus_threshold)


settings = Settings()
