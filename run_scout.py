"""CLI entry point.

This script fetches the We Work Remotely feed, merges it into the JSON store and
rewrites the store on success.

Examples:
    python run_scout.py
    python run_scout.py --out data/jobs.json
    python run_scout.py --timeout 10 --log-level DEBUG

Settings default to JOB_SCOUT_* environment variables (see job_scout/config.py).
Exit status is 0 when the run succeeded and 1 when it was aborted.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from job_scout.config import Settings
from job_scout.pipeline import IngestionPipeline
from job_scout.sources.weworkremotely import WeWorkRemotelySource
from job_scout.store import JsonStore


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch remote jobs and merge them into the JSON store.")
    p.add_argument("--out", type=str, default=None, help="Store JSON file path.")
    p.add_argument("--feed-url", type=str, default=None, help="RSS feed to fetch.")
    p.add_argument("--timeout", type=float, default=None, help="Fetch timeout in seconds.")
    p.add_argument("--log-level", type=str, default=None, help="Logging level, e.g. INFO or DEBUG.")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = Settings()

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger("job_scout")

    source = WeWorkRemotelySource(
        url=args.feed_url or settings.feed_url,
        timeout_s=args.timeout if args.timeout is not None else settings.timeout_s,
        user_agent=settings.user_agent,
        logger=logger,
    )
    store = JsonStore(args.out or settings.storage_path, logger=logger)
    summary = IngestionPipeline(source, store, logger=logger).run()

    return 0 if summary.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
