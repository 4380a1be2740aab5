"""Configuration management for runesearch."""

from __future__ import annotations

import json
from argparse import ArgumentParser

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from runesearch.core.types import CharacterSearchType
from runesearch.utils import expand_file_path


class Config(BaseModel):
    """Configuration for a command-line search run."""

    target: str | None = Field(None, description="Single Target String to search")
    tests: list[str] = Field(default_factory=list, description="Test Strings, tried in order")
    input: str | None = Field(None, description="File with one Target String per line")
    output: str | None = None
    search_type: CharacterSearchType = CharacterSearchType.LINEAR_END_OF_STRING
    starting_index: int = Field(0, ge=0, description="Target starting search index")
    search_length: int = Field(-1, ge=-1, description="Target search length, -1 to the end")
    test_starting_index: int = Field(0, ge=0, description="Test String starting index")
    request_found_characters: bool = False
    request_remainder: bool = False
    verbose: bool = False
    debug: bool = False
    log_file: str | None = None

    @field_validator("tests", mode="before")
    @classmethod
    def parse_string_list(cls, v):
        """Parse comma-separated string or array into a list, keeping order."""
        if v is None or v == "":
            return []
        if isinstance(v, str):
            return [s for s in v.split(",") if s]
        if isinstance(v, list):
            return [s for s in v if s]
        return v

    @field_validator("search_type", mode="before")
    @classmethod
    def parse_search_type(cls, v):
        """Accept search type names as well as enum members."""
        if isinstance(v, str):
            return CharacterSearchType.parse(v)
        return v

    @model_validator(mode="after")
    def validate_cross_fields(self):
        """Validate cross-field constraints."""
        if bool(self.target) == bool(self.input):
            raise ValueError("Exactly one of 'target' or 'input' must be given")
        if not self.tests:
            raise ValueError("At least one test string is required")
        if not self.search_type.is_valid():
            raise ValueError("search_type must not be 'none'")
        if self.search_length == 0:
            raise ValueError("search_length must be -1 or greater than zero")
        return self


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

    config_dict = {
        "target": get_value("target", None),
        "tests": get_value("tests", None),
        "input": get_value("input", None),
        "output": get_value("output", None),
        "search_type": get_value("search_type", CharacterSearchType.LINEAR_END_OF_STRING.value),
        "starting_index": get_value("starting_index", 0),
        "search_length": get_value("search_length", -1),
        "test_starting_index": get_value("test_starting_index", 0),
        "request_found_characters": cli_args.request_found_characters
        or json_config.get("request_found_characters", False),
        "request_remainder": cli_args.request_remainder
        or json_config.get("request_remainder", False),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
        "log_file": get_value("log_file", None),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
