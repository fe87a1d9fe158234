"""We Work Remotely feed connector.

Feed: https://weworkremotely.com/categories/remote-programming-jobs.rss

We download the RSS document, walk its <item> elements, and map each one to a
draft posting. WWR titles look like "Company Name: Job Title" and salaries, when
present at all, are buried in the HTML description.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import List, Optional

import httpx

from ..models import DraftPosting, FeedItem
from ..utils import clean_text
from .base import FeedSource, FetchResult


SOURCE_NAME = "We Work Remotely"
UNKNOWN_COMPANY = "Unknown"
TITLE_DELIMITER = ": "

FEED_URL = "https://weworkremotely.com/categories/remote-programming-jobs.rss"
USER_AGENT = "JobScout Bot/1.0 (+https://github.com/jobscout/job-scout)"


def parse_feed(payload: bytes) -> List[FeedItem]:
    """Decode an RSS document into feed items.

    Raises ET.ParseError when the payload is not well-formed XML, and
    LookupError when its XML declaration names an unknown encoding.
    """
    root = ET.fromstring(payload)
    items: List[FeedItem] = []
    for node in root.iter("item"):
        items.append(
            FeedItem(
                title=node.findtext("title"),
                region=node.findtext("region"),
                link=node.findtext("link"),
                description=node.findtext("description"),
            )
        )
    return items


def adapt_item(item: FeedItem, source: str = SOURCE_NAME) -> DraftPosting:
    """Map one feed item to a draft posting. Never fails on missing fields."""
    full_title = clean_text(item.title)
    company, sep, job_title = full_title.partition(TITLE_DELIMITER)
    if not sep:
        company, job_title = UNKNOWN_COMPANY, full_title

    return DraftPosting(
        url=clean_text(item.link),
        title=job_title,
        company=company,
        location_raw=clean_text(item.region),
        description=clean_text(item.description),
        source=source,
    )


class WeWorkRemotelySource(FeedSource):
    """Fetch the WWR programming feed and decode its items."""

    name = "weworkremotely"

    def __init__(
        self,
        url: str = FEED_URL,
        timeout_s: float = 20.0,
        user_agent: str = USER_AGENT,
        transport: Optional[httpx.BaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.url = url
        self._timeout = timeout_s
        self._headers = {"User-Agent": user_agent}
        self._transport = transport
        self._logger = logger or logging.getLogger(__name__)

    def _download(self) -> bytes:
        with httpx.Client(
            timeout=self._timeout,
            follow_redirects=True,
            headers=self._headers,
            transport=self._transport,
        ) as client:
            resp = client.get(self.url)
            resp.raise_for_status()
            return resp.content

    def fetch(self) -> FetchResult:
        self._logger.info("Fetching jobs from %s...", self.url)
        try:
            payload = self._download()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            return FetchResult.failure(f"Error fetching feed {self.url}: {exc}")

        try:
            items = parse_feed(payload)
        except (ET.ParseError, LookupError, ValueError) as exc:
            return FetchResult.failure(f"Error decoding feed {self.url}: {exc}")

        self._logger.info("Decoded %d feed items", len(items))
        return FetchResult.success(items)
