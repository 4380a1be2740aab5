"""YAML report output for batch search results."""

import sys
from typing import Any

from loguru import logger
import yaml

from runesearch.utils.helpers import expand_file_path, write_file_safely


def _build_document(records: list[dict[str, Any]], found_count: int) -> dict[str, Any]:
    return {
        "summary": {
            "targets": len(records),
            "found": found_count,
        },
        "results": records,
    }


def write_results_yaml(
    records: list[dict[str, Any]],
    output_path: str | None,
    found_count: int | None = None,
) -> None:
    """Write search records as YAML.

    Args:
        records: One dict per Target String
        output_path: Output file path (None = stdout)
        found_count: Number of successful searches (counted from records if None)
    """
    if found_count is None:
        found_count = sum(1 for record in records if record.get("found"))
    document = _build_document(records, found_count)

    def dump(f) -> None:
        yaml.safe_dump(
            document,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )

    if output_path is None:
        dump(sys.stdout)
        return

    output_file = expand_file_path(output_path) or output_path
    write_file_safely(output_file, dump, "writing search results")
    logger.info(f"Wrote {len(records)} results to {output_file}")
