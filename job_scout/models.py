"""Data models for the job scout.

A posting is keyed by its URL. The feed side produces a `FeedItem` per RSS item,
the adapter turns it into a `DraftPosting`, and the pipeline either creates a new
`Posting` from the draft or refreshes an existing one.

This file uses Pydantic v2.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator


class FeedItem(BaseModel):
    """Raw text of one decoded feed item. Any field may be missing."""

    title: Optional[str] = None
    region: Optional[str] = None
    link: Optional[str] = None
    description: Optional[str] = None


class DraftPosting(BaseModel):
    """An adapted feed item, before normalization and reconciliation."""

    url: str
    title: str
    company: str = "Unknown"
    location_raw: str = ""
    salary_raw: str = ""
    description: str = ""
    source: str


class SalaryRange(BaseModel):
    """Salary bounds in implied currency units."""

    min: int
    max: int

    @model_validator(mode="after")
    def _check_order(self) -> "SalaryRange":
        if self.min > self.max:
            raise ValueError(f"salary min {self.min} is greater than max {self.max}")
        return self


class Posting(BaseModel):
    """A persisted posting.

    Field order is the key order of the JSON objects in the store file, so prefer
    appending new fields over reordering existing ones.
    """

    url: str = Field(..., description="Posting URL; unique across the store.")
    title: str
    company: str = "Unknown"
    location: str = "Remote"
    salary_raw: str = ""
    description: str = ""
    source: str
    salary_normalized: Optional[SalaryRange] = None
    created_at: str = Field(..., description="UTC ISO-8601, set at first observation.")
    last_seen_at: str = Field(..., description="UTC ISO-8601, refreshed on every observation.")


class RunSummary(BaseModel):
    """Outcome of one pipeline run."""

    ok: bool
    fetched: int = 0
    created: int = 0
    updated: int = 0
    total: int = 0
    saved: bool = False
    error: Optional[str] = None
