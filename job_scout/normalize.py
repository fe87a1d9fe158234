"""Normalization & heuristics.

This module contains deterministic parsing logic:
- location canonicalization against a fixed table
- salary substring extraction from free-text descriptions
- salary range normalization

Every function here is total: bad or missing input degrades to a default value
instead of raising, so the pipeline never has to guard these calls.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import List, Mapping, Optional

from .models import SalaryRange


# Known raw spellings mapped to one preferred city name. Exact-match only.
LOCATION_MAP: Mapping[str, str] = MappingProxyType(
    {
        "Munich, DE": "Munich",
        "München": "Munich",
        "San Francisco, CA": "San Francisco",
        "New York, NY": "New York",
        "London, UK": "London",
        "Berlin, DE": "Berlin",
    }
)

DEFAULT_LOCATION = "Remote"
WORLDWIDE = "Worldwide"


def normalize_location(raw: Optional[str]) -> str:
    """Map a raw feed region to a canonical location."""
    if not raw or not raw.strip():
        return DEFAULT_LOCATION

    if raw in LOCATION_MAP:
        return LOCATION_MAP[raw]

    # Best-effort passthrough, e.g. 'Anywhere in the World' -> 'Worldwide'
    loc = raw.strip()
    if "anywhere" in loc.lower():
        return WORLDWIDE
    return loc


# Matches things like $50K, $250,000 - $280,000, $100k to $120k
SALARY_RE = re.compile(r"\$[0-9,]+[kK]?\s*(?:(?:-|–|to)\s*\$[0-9,]+[kK]?)?")

# A digit run confirmed as an amount by a 'k' or ',000' suffix.
SALARY_AMOUNT_RE = re.compile(r"([0-9]+)(k|K|,000)")


def extract_salary(description: Optional[str]) -> str:
    """Return the first salary-looking substring of the description, or ''."""
    match = SALARY_RE.search(description or "")
    return match.group(0) if match else ""


def normalize_salary(raw: Optional[str]) -> Optional[SalaryRange]:
    """Turn raw salary text into a min/max range.

    Only digit runs suffixed with 'k'/'K' or ',000' count. A 'k' amount is
    multiplied by 1000; for ',000' the leading digit group is taken as-is, so
    "$45,000" yields 45. Returns None when no amount is found.
    """
    if not raw:
        return None

    amounts: List[int] = []
    for digits, suffix in SALARY_AMOUNT_RE.findall(raw):
        value = int(digits)
        if suffix.lower() == "k":
            value *= 1000
        amounts.append(value)

    if not amounts:
        return None

    return SalaryRange(min=min(amounts), max=max(amounts))
