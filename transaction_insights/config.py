"""Configuration management using Pydantic Settings"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="TRANSACTION_INSIGHTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service
    service_name: str = "transaction-insights"
    log_level: str = "INFO"

    # Transaction sources
    transactions_file: str = "transactions.json"
    transactions_api_base: Optional[str] = None

    # HTTP Client
    http_timeout_seconds: float = 5.0

    # Report defaults
    report_sender_name: str = "Tom Shelby"
    report_client_name: str = "Alfie Solomons"
    top_transactions_limit: int = 3


settings = Settings()
