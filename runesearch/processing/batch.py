"""Batch search of many Target Strings against a set of Test Strings."""

import time
from typing import Any

from loguru import logger
from pydantic import BaseModel, Field
from tqdm import tqdm

from runesearch.core.collection import RuneArrayCollection
from runesearch.core.config import Config
from runesearch.core.errors import InvalidInputError
from runesearch.core.rune_array import RuneArrayDto
from runesearch.core.types import CharacterSearchType
from runesearch.parameters.target import CharSearchTargetInputParametersDto
from runesearch.parameters.test_config import CharSearchTestConfigDto
from runesearch.parameters.test_string import CharSearchTestInputParametersDto
from runesearch.search.executor import character_search_executor
from runesearch.utils.formatting import format_time
from runesearch.utils.helpers import read_text_lines
from runesearch.utils.logging import is_debug_enabled


class BatchSearchResult(BaseModel):
    """Output from a batch search run."""

    elapsed_time: float = Field(0.0, ge=0)
    records: list[dict[str, Any]] = Field(default_factory=list)
    found_count: int = Field(0, ge=0)
    error_count: int = Field(0, ge=0)


def build_test_collection(config: Config) -> RuneArrayCollection:
    """Create the collection of Test Strings named in the config."""
    return RuneArrayCollection.new_strings(config.tests, config.search_type, "build_test_collection()")


def build_test_config(config: Config) -> CharSearchTestConfigDto:
    return CharSearchTestConfigDto(
        test_input_parameters_name="BatchTestParameters",
        test_string_starting_index=config.test_starting_index,
        text_char_search_type=config.search_type,
    )


def search_line(
    line: str,
    collection: RuneArrayCollection,
    config: Config,
    test_config: CharSearchTestConfigDto | None = None,
) -> dict[str, Any]:
    """Search one Target String and return its report record.

    Raises:
        InvalidInputError: If the line cannot be searched with the configured
            indices (for example a starting index past its end)
    """
    if test_config is None:
        test_config = build_test_config(config)

    target_params = CharSearchTargetInputParametersDto(
        target_input_parameters_name="BatchTargetParameters",
        target_string=RuneArrayDto(line),
        target_string_starting_search_index=config.starting_index,
        target_string_search_length=config.search_length,
        text_char_search_type=CharacterSearchType.NONE,
        request_found_test_characters=config.request_found_characters,
        request_remainder_string=config.request_remainder,
    )

    # First matching member wins
    results = None
    for index, member in enumerate(collection):
        test_params = CharSearchTestInputParametersDto.new()
        test_params.load_test_config_dto(test_config, "search_line()")
        test_params.test_string = member
        test_params.collection_test_obj_index = index
        results = character_search_executor(target_params, test_params, "search_line()")
        if results.found_search_target:
            break

    if is_debug_enabled():
        logger.debug(results.get_formatted_text())

    record: dict[str, Any] = {"target": line}
    record.update(results.to_report_dict())
    if results.found_search_target:
        record["test"] = collection.rune_array_dto_col[
            results.collection_test_obj_index
        ].get_character_string()
    return record


def run_batch_search(config: Config) -> BatchSearchResult:
    """Search every configured Target String.

    Target Strings come from `config.input` (one per line) or from
    `config.target`. Lines that fail validation are recorded with their
    error and counted; they do not stop the run.

    Args:
        config: Configuration object

    Returns:
        BatchSearchResult with one record per Target String
    """
    start_time = time.time()
    verbose = config.verbose

    if config.input:
        lines = read_text_lines(config.input)
        if verbose:
            logger.info(f"Loaded {len(lines)} target strings from {config.input}")
    else:
        lines = [config.target]

    collection = build_test_collection(config)
    test_config = build_test_config(config)

    if verbose:
        logger.info(
            f"Searching with {len(collection)} test strings ({config.search_type.label})"
        )

    lines_iter = lines
    if verbose and len(lines) > 1:
        lines_iter = tqdm(lines, desc="Searching targets", unit="line")

    result = BatchSearchResult()
    for line in lines_iter:
        try:
            record = search_line(line, collection, test_config=test_config, config=config)
        except InvalidInputError as e:
            logger.warning(f"⚠️  Skipping target '{line}': {str(e).splitlines()[-1]}")
            logger.debug(str(e))
            result.records.append({"target": line, "error": str(e).splitlines()[-1]})
            result.error_count += 1
            continue
        if record["found"]:
            result.found_count += 1
        result.records.append(record)

    result.elapsed_time = time.time() - start_time
    if verbose:
        logger.info(
            f"  Found matches in {result.found_count} of {len(lines)} target strings "
            f"in {format_time(result.elapsed_time)}"
        )
    return result
