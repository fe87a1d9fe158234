"""JSON file persistence for postings.

The store is a single pretty-printed JSON array. It is read once at the start of a
run and fully rewritten at the end of a successful run. Only one run may use a
given file at a time; concurrent runs race and the last writer wins.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pydantic import TypeAdapter, ValidationError

from .models import Posting

_POSTINGS = TypeAdapter(List[Posting])


class JsonStore:
    """Load and save the posting collection at `path`."""

    def __init__(self, path: Union[str, Path], logger: Optional[logging.Logger] = None) -> None:
        self.path = Path(path).expanduser()
        self._logger = logger or logging.getLogger(__name__)

    def load(self) -> List[Posting]:
        """Return the stored postings, or [] when the file is missing or corrupt."""
        try:
            payload = self.path.read_bytes()
        except FileNotFoundError:
            return []

        try:
            # validate_json rejects both malformed JSON and a wrong shape
            return _POSTINGS.validate_json(payload)
        except ValidationError as exc:
            self._logger.error(
                "Failed to parse %s (%d errors). Starting from an empty collection.",
                self.path,
                exc.error_count(),
            )
            return []

    def save(self, postings: Sequence[Posting]) -> None:
        """Rewrite the whole collection.

        The payload goes to a temporary file in the same directory first and is
        then moved over the target, so readers never see a half-written file.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = [p.model_dump(mode="json") for p in postings]
        text = json.dumps(data, indent=2, ensure_ascii=False)

        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
                fh.write("\n")
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        self._logger.info("Saved %d postings to %s", len(postings), self.path)

    @staticmethod
    def find_by_url(postings: Sequence[Posting], url: str) -> Optional[Posting]:
        """Linear lookup by URL. Fine for a single feed's worth of postings."""
        for posting in postings:
            if posting.url == url:
                return posting
        return None
