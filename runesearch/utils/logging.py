"""Logging configuration for runesearch using loguru."""

from pathlib import Path
import sys

from loguru import logger

DEBUG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def _resolve_level(verbose: bool, debug: bool) -> str:
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    return "WARNING"


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure loguru logger based on verbose and debug flags.

    Args:
        verbose: Enable INFO level messages
        debug: Enable DEBUG level messages (overrides verbose)
    """
    logger.remove()

    # INFO and above: bare message. DEBUG: timestamp and location.
    format_str = DEBUG_FORMAT if debug else "<level>{message}</level>"

    logger.add(
        sys.stderr,
        format=format_str,
        level=_resolve_level(verbose, debug),
        colorize=True,
    )


def is_debug_enabled() -> bool:
    """Check if any configured handler emits DEBUG messages.

    Returns:
        True if logger is configured to log DEBUG level messages, False otherwise
    """
    # pylint: disable=protected-access
    for handler in logger._core.handlers.values():
        if handler._sink is not None and handler.levelno <= 10:
            return True
    return False


def add_log_file_handler(log_file: str | Path, verbose: bool = False, debug: bool = False) -> None:
    """Add a file sink alongside the existing stderr handler.

    Args:
        log_file: Path to log file
        verbose: Enable INFO level messages
        debug: Enable DEBUG level messages (overrides verbose)
    """
    if debug:
        file_format_str = (
            "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
        )
    else:
        file_format_str = "{message}"

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_path,
        format=file_format_str,
        level=_resolve_level(verbose, debug),
        colorize=False,
        encoding="utf-8",
    )
