"""Enumerations used across the hotel domain layer."""

from __future__ import annotations

from enum import StrEnum


class RoomType(StrEnum):
    """Bed configuration offered by a room."""

    SINGLE = "single"
    DOUBLE = "double"
