"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from loan_gateway.domain.models import AgeRestriction, LoanLimits


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-decision-gateway"
    log_level: str = "INFO"

    # Loan bounds (euros / months)
    minimum_loan_amount: int = 2000
    maximum_loan_amount: int = 10000
    minimum_loan_period: int = 12
    maximum_loan_period: int = 60

    # Regional age policy
    minimum_age: int = 18
    life_expectancy: int = 75

    def loan_limits(self) -> LoanLimits:
        return LoanLimits(
            minimum_loan_amount=self.minimum_loan_amount,
            maximum_loan_amount=self.maximum_loan_amount,
            minimum_loan_period=self.minimum_loan_period,
            maximum_loan_period=self.maximum_loan_period,
        )

    def age_restriction(self) -> AgeRestriction:
        return AgeRestriction(minimum_age=self.minimum_age, life_expectancy=self.life_expectancy)


settings = Settings()
