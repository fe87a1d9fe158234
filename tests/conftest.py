from datetime import datetime, timezone
from typing import List, Optional

import pytest

from job_scout.models import FeedItem
from job_scout.sources.base import FeedSource, FetchResult


SAMPLE_RSS = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>We Work Remotely: Remote Programming Jobs</title>
    <item>
      <title>Acme Corp: Backend Engineer</title>
      <region>M\xc3\xbcnchen</region>
      <link>https://weworkremotely.com/remote-jobs/acme-corp-backend-engineer</link>
      <description><![CDATA[<p>Salary: $100k - $120k per year.</p>]]></description>
    </item>
    <item>
      <title>Globex: Data Engineer</title>
      <region>Anywhere in the World</region>
      <link>https://weworkremotely.com/remote-jobs/globex-data-engineer</link>
      <description><![CDATA[<p>Competitive pay.</p>]]></description>
    </item>
    <item>
      <title>Solo Contractor Wanted</title>
      <link>https://weworkremotely.com/remote-jobs/solo-contractor</link>
    </item>
  </channel>
</rss>
"""


class FakeSource(FeedSource):
    """Feed source returning canned items, or a canned failure."""

    name = "fake"

    def __init__(self, items: Optional[List[FeedItem]] = None, error: Optional[str] = None) -> None:
        self.items = items or []
        self.error = error
        self.calls = 0

    def fetch(self) -> FetchResult:
        self.calls += 1
        if self.error:
            return FetchResult.failure(self.error)
        return FetchResult.success(list(self.items))


class StepClock:
    """Clock that moves forward one minute per call."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current.replace(minute=self.current.minute + 1)
        return now


@pytest.fixture
def sample_rss() -> bytes:
    return SAMPLE_RSS


@pytest.fixture
def feed_items() -> List[FeedItem]:
    return [
        FeedItem(
            title="Acme Corp: Backend Engineer",
            region="München",
            link="https://weworkremotely.com/remote-jobs/acme-corp-backend-engineer",
            description="<p>Salary: $100k - $120k per year.</p>",
        ),
        FeedItem(
            title="Globex: Data Engineer",
            region="Anywhere in the World",
            link="https://weworkremotely.com/remote-jobs/globex-data-engineer",
            description="<p>Competitive pay.</p>",
        ),
    ]


@pytest.fixture
def clock() -> StepClock:
    return StepClock(datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def fake_source():
    return FakeSource
