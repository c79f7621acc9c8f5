"""Shared CLI dependency helpers."""

from __future__ import annotations

import logging
from dataclasses import replace
from functools import lru_cache
from pathlib import Path

from hotel_reservations.config import AppSettings
from hotel_reservations.container import ServiceContainer, build_container

from .scenario import Scenario


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return cached settings resolved from the environment."""

    return AppSettings.from_env()


def reset_settings() -> None:
    """Clear the cached settings (useful for tests)."""

    get_settings.cache_clear()


def configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_container(scenario_path: Path, *, strict: bool | None = None) -> ServiceContainer:
    """Build a fresh container and replay ``scenario_path`` into it."""

    settings = get_settings()
    if strict is not None:
        settings = replace(settings, enforce_availability=strict)
    container = build_container(settings)
    Scenario.from_path(scenario_path).apply(container)
    return container
