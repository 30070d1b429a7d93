"""
Command-line interface for the Fear & Greed index client
"""

import argparse
import sys

from loguru import logger

from . import __version__
from .config import ConfigError, load_config
from .logger import setup_logger
from .sentiment import TRANSIENT_ERRORS, FearGreedClient, SentimentApiError


LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def format_reading(reading):
    """Format one reading as `YYYY-MM-DD value classification`."""
    day = reading.observed_at().strftime("%Y-%m-%d")
    return f"{day}  {reading.value:>3}  {reading.value_classification.value}"


def build_parser():
    parser = argparse.ArgumentParser(
        prog="streamline-fng",
        description="Fetch the Fear & Greed sentiment index",
    )
    parser.add_argument("--limit", type=int, default=None,
                        help="Number of readings (0 = full history)")
    parser.add_argument("--config", default=None,
                        help="Path to YAML config (default: $STREAMLINE_CONFIG)")
    parser.add_argument("--json", action="store_true",
                        help="Print the parsed response as JSON")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                        help="Override the configured log level")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.limit is not None and args.limit < 0:
        parser.error("--limit must be >= 0")

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logger(args.log_level or config.logging.level, config.logging.log_dir)

    try:
        with FearGreedClient.from_app_config(config) as client:
            response = client.fetch(args.limit)
    except SentimentApiError as e:
        logger.error("{}", e)
        return 1
    except TRANSIENT_ERRORS as e:
        logger.error("Sentiment API unreachable: {!r}", e)
        return 1

    if args.json:
        print(response.model_dump_json(indent=2))
        return 0

    print(response.name)
    for reading in response.data:
        print(format_reading(reading))
    return 0


if __name__ == "__main__":
    sys.exit(main())
