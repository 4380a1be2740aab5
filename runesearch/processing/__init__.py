"""Batch processing for runesearch."""

from runesearch.processing.batch import (
    BatchSearchResult,
    build_test_collection,
    build_test_config,
    run_batch_search,
    search_line,
)

__all__ = [
    "BatchSearchResult",
    "build_test_collection",
    "build_test_config",
    "run_batch_search",
    "search_line",
]
