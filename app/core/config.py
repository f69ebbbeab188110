"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, with no scattered magic strings.
"""

from decimal import Decimal
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        tax_rate: Multiplier applied to each accepted payment amount.
        invoice_cache_enabled: Put a read-through cache in front of storage.
        invoice_cache_ttl_seconds: Lifetime of a cached invoice.
        database_url: SQLAlchemy URL. In-memory storage is used when unset.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Invoice Payments"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    tax_rate: Decimal = Decimal("0.14")
    invoice_cache_enabled: bool = True
    invoice_cache_ttl_seconds: int = Field(default=600, gt=0)

    database_url: Optional[str] = None


settings = Settings()
