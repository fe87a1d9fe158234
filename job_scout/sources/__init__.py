"""Feed source connectors."""

from __future__ import annotations

from .base import FeedSource, FetchResult
from .weworkremotely import WeWorkRemotelySource, adapt_item, parse_feed

__all__ = ["FeedSource", "FetchResult", "WeWorkRemotelySource", "adapt_item", "parse_feed"]
