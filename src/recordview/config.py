"""
recordview.config  ──  environment-driven settings (pydantic-settings).

Values come from the process environment, with a `.env` file in the working
directory loaded first (python-dotenv; existing variables win).

    RECORDVIEW_LOG_LEVEL        level of the `recordview` logger  (WARNING)
    RECORDVIEW_LEGACY_WARNINGS  emit LegacyModelWarning          (true)

Values pydantic cannot coerce (e.g. RECORDVIEW_LEGACY_WARNINGS=ture) raise
ValidationError instead of falling back to a default.
"""

from __future__ import annotations

from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "WARNING"
    legacy_warnings: bool = True
    model_config = SettingsConfigDict(env_prefix="RECORDVIEW_", frozen=True)

    @field_validator("log_level")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.strip().upper()

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv(find_dotenv(usecwd=True))
        return cls()


_settings: Optional[Settings] = None


def get_settings(reload: bool = False) -> Settings:
    """Return the cached settings, reading the environment on first use."""
    global _settings
    if _settings is None or reload:
        _settings = Settings.from_env()
    return _settings
