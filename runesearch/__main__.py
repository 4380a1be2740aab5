"""Main entry point for the runesearch package."""

from loguru import logger

from runesearch.cli import create_parser
from runesearch.core import load_config
from runesearch.output import write_results_yaml
from runesearch.processing import run_batch_search
from runesearch.utils.logging import add_log_file_handler, setup_logger


def main(argv: list[str] | None = None):
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load configuration
    try:
        config = load_config(args.config, args, parser)
    except ValueError as e:
        parser.error(str(e).splitlines()[0])

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    # Print startup banner
    if config.verbose:
        logger.info("=" * 60)
        logger.info("runesearch - Character Search")
        logger.info("=" * 60)
        logger.info("")
        logger.info("Configuration:")
        if config.input:
            logger.info(f"  Input file: {config.input}")
        else:
            logger.info(f"  Target: {config.target}")
        logger.info(f"  Test strings: {', '.join(config.tests)}")
        logger.info(f"  Search type: {config.search_type.label}")
        logger.info(f"  Starting index: {config.starting_index}")
        if config.search_length != -1:
            logger.info(f"  Search length: {config.search_length}")
        if config.output:
            logger.info(f"  Output: {config.output}")
        logger.info("")

    try:
        result = run_batch_search(config)
        write_results_yaml(result.records, config.output, result.found_count)
        if config.verbose:
            logger.info("")
            logger.info("=" * 60)
            logger.info("✓ Search completed successfully")
            logger.info("=" * 60)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Search interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Search failed")
            logger.error("=" * 60)
        raise


if __name__ == "__main__":
    main()
