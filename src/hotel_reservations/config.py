"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no"}


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    log_level: str = "WARNING"
    enforce_availability: bool = False

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("HOTEL_ENV", cls.environment),
            log_level=os.getenv("HOTEL_LOG_LEVEL", cls.log_level).upper(),
            enforce_availability=_env_bool("HOTEL_ENFORCE_AVAILABILITY", cls.enforce_availability),
        )


__all__ = ["AppSettings"]
