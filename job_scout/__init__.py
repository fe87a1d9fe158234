"""Job scout package.

The package is split along the ingestion path:
- `models.py` defines the persisted schema (what the store owns).
- `sources/` contains the feed connector: fetch, decode and item adapter.
- `normalize.py` contains deterministic location/salary parsing.
- `store.py` reads and writes the JSON collection.
- `pipeline.py` reconciles each fetched item against the store.
"""
