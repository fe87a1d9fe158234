"""Ingestion pipeline.

One run: load store -> fetch feed -> for each item (adapt, extract salary,
normalize, reconcile) -> save store. Runs are sequential and single-threaded.

Reconciliation keys on the posting URL:
- a URL seen before gets its location, normalized salary and `last_seen_at`
  refreshed in place; its other fields keep their first-seen values.
- a new URL is appended with `created_at == last_seen_at`.

Nothing is written unless the whole run succeeds.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional

from .models import DraftPosting, Posting, RunSummary
from .normalize import extract_salary, normalize_location, normalize_salary
from .sources.base import FeedSource
from .sources.weworkremotely import adapt_item
from .store import JsonStore
from .utils import to_iso8601, utc_now


class IngestionPipeline:
    """Merge one feed into the persisted posting collection."""

    def __init__(
        self,
        source: FeedSource,
        store: JsonStore,
        logger: Optional[logging.Logger] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.source = source
        self.store = store
        self.logger = logger or logging.getLogger(__name__)
        self._clock = clock

    def reconcile(self, postings: List[Posting], draft: DraftPosting, now: str) -> bool:
        """Create or update the posting for `draft.url`. Returns True if created."""
        location = normalize_location(draft.location_raw)
        salary = normalize_salary(draft.salary_raw)

        existing = self.store.find_by_url(postings, draft.url)
        if existing is not None:
            existing.location = location
            existing.salary_normalized = salary
            existing.last_seen_at = now
            self.logger.debug("Updated timestamp for existing posting: %s", draft.title)
            return False

        postings.append(
            Posting(
                url=draft.url,
                title=draft.title,
                company=draft.company,
                location=location,
                salary_raw=draft.salary_raw,
                description=draft.description,
                source=draft.source,
                salary_normalized=salary,
                created_at=now,
                last_seen_at=now,
            )
        )
        self.logger.info("Added new posting: %s at %s", draft.title, draft.company)
        return True

    def run(self) -> RunSummary:
        self.logger.info("Starting job scout run for %s", self.source.name)
        try:
            postings = self.store.load()
        except OSError as exc:
            self.logger.exception("Run aborted, could not read store %s", self.store.path)
            return RunSummary(ok=False, error=f"{type(exc).__name__}: {exc}")

        result = self.source.fetch()
        if not result.ok:
            self.logger.error("Run aborted, store left unchanged: %s", result.error)
            return RunSummary(ok=False, total=len(postings), error=result.error)

        stored = len(postings)
        now = to_iso8601(self._clock())
        created = updated = 0
        try:
            for item in result.items:
                draft = adapt_item(item)
                draft.salary_raw = extract_salary(draft.description)
                if self.reconcile(postings, draft, now):
                    created += 1
                else:
                    updated += 1
        except Exception as exc:
            # One bad item aborts the whole run before anything is persisted.
            self.logger.exception("Run aborted while processing feed items, store left unchanged")
            return RunSummary(
                ok=False,
                fetched=len(result.items),
                total=stored,
                error=f"{type(exc).__name__}: {exc}",
            )

        try:
            self.store.save(postings)
        except OSError as exc:
            self.logger.exception("Run aborted, could not write store %s", self.store.path)
            return RunSummary(
                ok=False,
                fetched=len(result.items),
                created=created,
                updated=updated,
                total=stored,
                error=f"{type(exc).__name__}: {exc}",
            )

        self.logger.info(
            "Finished run: %d fetched, %d new, %d updated. Total postings stored: %d",
            len(result.items),
            created,
            updated,
            len(postings),
        )
        return RunSummary(
            ok=True,
            fetched=len(result.items),
            created=created,
            updated=updated,
            total=len(postings),
            saved=True,
        )
