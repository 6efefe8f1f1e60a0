"""
Package configuration

Every value can be overridden from the environment or a .env file.
"""
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Localization
    DEFAULT_LOCALE: str = "en_US"
    TRANSLATIONS_DIR: Optional[str] = None  # gettext catalogs: <dir>/<locale>/LC_MESSAGES/<domain>.mo
    TRANSLATION_DOMAIN: str = "delivery_postage"

    # Postage amounts
    POSTAGE_CURRENCY: str = "EUR"
    POSTAGE_DECIMAL_PLACES: int = 2

    @field_validator("POSTAGE_DECIMAL_PLACES")
    @classmethod
    def check_decimal_places(cls, v):
        if v < 0:
            raise ValueError("POSTAGE_DECIMAL_PLACES must be >= 0")
        return v

    @field_validator("POSTAGE_CURRENCY", mode="before")
    @classmethod
    def normalize_currency(cls, v):
        if isinstance(v, str):
            v = v.strip().upper()
            if len(v) != 3 or not v.isalpha():
                raise ValueError(f"POSTAGE_CURRENCY must be an ISO 4217 code, got {v!r}")
        return v


settings = Settings()
