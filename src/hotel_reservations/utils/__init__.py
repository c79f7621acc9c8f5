"""Utility helpers."""

from .time import as_timestamp, ensure_utc, utc_now

__all__ = ["as_timestamp", "ensure_utc", "utc_now"]
