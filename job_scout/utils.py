"""Utility helpers shared across the scout."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def clean_text(value: Optional[str]) -> str:
    """Trim surrounding whitespace; a missing value becomes an empty string."""
    return (value or "").strip()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso8601(moment: datetime) -> str:
    """Format as UTC ISO-8601 with second precision, e.g. 2024-05-01T12:00:00Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc).replace(microsecond=0)
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")
