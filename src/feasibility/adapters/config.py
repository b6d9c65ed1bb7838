# src/feasibility/adapters/config.py
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # -----------------------------
    # Google Geocoding
    # -----------------------------
    # Accepts FEASIBILITY_GOOGLE_MAPS_SERVER_KEY or the bare name the web app uses.
    GOOGLE_MAPS_SERVER_KEY: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "FEASIBILITY_GOOGLE_MAPS_SERVER_KEY",
            "GOOGLE_MAPS_SERVER_KEY",
        ),
    )
    GEOCODE_URL: str = Field(default="https://maps.googleapis.com/maps/api/geocode/json")

    # None = whatever the transport does (no explicit timeout)
    GEOCODE_TIMEOUT_S: float | None = Field(default=None)

    # -----------------------------
    # HTTP
    # -----------------------------
    FRONTEND_URL: str = Field(default="http://localhost:3000")

    model_config = SettingsConfigDict(
        env_prefix="FEASIBILITY_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("GOOGLE_MAPS_SERVER_KEY", mode="before")
    @classmethod
    def _blank_key_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("GEOCODE_TIMEOUT_S", mode="before")
    @classmethod
    def _timeout_positive(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        f = float(v)
        if f <= 0:
            raise ValueError("GEOCODE_TIMEOUT_S must be > 0")
        return f


config = AppConfig()
