"""Centralised application settings loaded from environment / .env file."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Seatbook Bus Seat Inventory API"
    log_level: str = "INFO"

    # Catalog (built-in seed fixture when unset)
    catalog_file: Optional[str] = None

    # API
    rate_limit: str = "100/minute"

    # Bookings
    booking_reference_prefix: str = "BK"
    currency: str = "CFA"

    model_config = {"env_file": ".env", "env_prefix": "SEATBOOK_", "extra": "ignore"}


settings = Settings()
