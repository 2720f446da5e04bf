"""Environment-driven settings for netspine.

Manifesto:
    Configuration should be explicit, validated, and environment-driven.
    Operators are pure, but hosts still need to pick a log level, a log
    format, and whether bare-address arithmetic is checked.

    - **Pydantic validation:** Type-checked at startup, not runtime
    - **Environment-driven:** Reads ``NETSPINE_*`` env vars and .env files
    - **Extra ignore:** Unknown env vars don't cause startup failures

Examples:
    >>> from netspine.core.settings import NetspineSettings
    >>> NetspineSettings(strict_bare_address=True).strict_bare_address
    True

Tags:
    settings, configuration, pydantic, environment, netspine

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, get_args

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class NetspineSettings(BaseSettings):
    """Settings shared by every netspine host.

    Fields
    ──────
    log_level           : Structlog log level
    log_format          : ``console`` for development, ``json`` for aggregation
    strict_bare_address : Reject bare-address offsets that leave the address
                          space instead of wrapping
    """

    model_config = SettingsConfigDict(
        env_prefix="NETSPINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: LogLevel = "INFO"
    log_format: Literal["console", "json"] = "console"

    # ── Operators ────────────────────────────────────────────────
    strict_bare_address: bool = Field(
        default=False,
        description="Raise BoundsError when a bare-address offset leaves the address space",
    )

    @field_validator("log_level", "log_format", mode="before")
    @classmethod
    def _normalise_case(cls, value: object, info) -> object:
        if not isinstance(value, str):
            return value
        if info.field_name == "log_level":
            return value.strip().upper()
        return value.strip().lower()


@lru_cache(maxsize=1)
def get_settings() -> NetspineSettings:
    """Return the process-wide settings, read once from the environment."""
    return NetspineSettings()


def reset_settings() -> None:
    """Drop the cached settings (for tests)."""
    get_settings.cache_clear()


__all__ = ["LOG_LEVELS", "LogLevel", "NetspineSettings", "get_settings", "reset_settings"]
