# src/leadcalc/adapters/config.py
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # -----------------------------
    # TAM weights
    # -----------------------------
    # JSON file with MarketWeights overrides; built-in tables when unset
    WEIGHTS_PATH: str | None = Field(default=None)

    # used when a request leaves these out
    DEFAULT_DATA_SOURCE: str = Field(default="LinkedIn")
    DEFAULT_GEOGRAPHY: str = Field(default="US")

    # -----------------------------
    # Batch ROI
    # -----------------------------
    BATCH_MAX_ROWS: int = Field(default=100_000)

    model_config = SettingsConfigDict(
        env_prefix="LEADCALC_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("WEIGHTS_PATH", mode="before")
    @classmethod
    def _blank_path_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("BATCH_MAX_ROWS", mode="before")
    @classmethod
    def _rows_positive(cls, v: Any) -> Any:
        n = int(v)
        if n <= 0:
            raise ValueError("BATCH_MAX_ROWS must be > 0")
        return n


config = AppConfig()
