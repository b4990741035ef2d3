from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReportSettings(BaseSettings):
    """
    Order report settings.

    Read from the environment with the ``MWS_REPORTS_`` prefix:
      log_level         -> MWS_REPORTS_LOG_LEVEL
      default_currency  -> MWS_REPORTS_DEFAULT_CURRENCY
    """

    model_config = SettingsConfigDict(
        env_prefix="MWS_REPORTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")
    # used for amounts that carry no currency attribute
    default_currency: str = Field(default="EUR", min_length=3, max_length=3)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("default_currency")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.strip().upper()


@lru_cache()
def get_report_settings() -> ReportSettings:
    """Return cached settings for the whole package."""
    return ReportSettings()
