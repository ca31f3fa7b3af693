"""Database repository helpers."""

from repositories.source import (
    DataFetchError,
    Dataset,
    ensure_source_schema,
    fetch_dataset,
    fetch_events,
    fetch_matches,
    load_dataset,
)

__all__ = [
    "DataFetchError",
    "Dataset",
    "ensure_source_schema",
    "fetch_dataset",
    "fetch_events",
    "fetch_matches",
    "load_dataset",
]
