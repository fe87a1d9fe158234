"""Base classes for feed source connectors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel, Field

from ..models import FeedItem


class FetchResult(BaseModel):
    """Outcome of fetching and decoding a feed.

    Either `items` holds the decoded feed items, or `error` describes why the
    feed could not be obtained. Callers branch on `ok`.
    """

    items: List[FeedItem] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, items: List[FeedItem]) -> "FetchResult":
        return cls(items=items)

    @classmethod
    def failure(cls, error: str) -> "FetchResult":
        return cls(error=error)


class FeedSource(ABC):
    """Abstract base class for a feed source connector."""

    name: str

    @abstractmethod
    def fetch(self) -> FetchResult:
        """Fetch and decode the feed. Must not raise for network or markup errors."""
        raise NotImplementedError
