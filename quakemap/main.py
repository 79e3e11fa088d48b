"""Command-line Entry Point.

Thin wrapper that loads configuration, applies command-line overrides
and invokes the orchestrator.
"""

import argparse
import logging
import os
import sys

import yaml

from quakemap.core.config import FEEDS, MapConfig, validate_config
from quakemap.orchestrator import Orchestrator
from quakemap.shell.config_loader import load_config


logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from the given level or LOG_LEVEL."""
    log_level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quakemap",
        description="Render the USGS earthquake feed as an interactive map",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--feed",
        choices=sorted(FEEDS.keys()),
        help="Named USGS summary feed (default: week)",
    )
    source.add_argument("--url", help="GeoJSON feed URL")
    parser.add_argument("--output", "-o", help="Output HTML file")
    parser.add_argument("--config", "-c", help="Path to YAML config file")
    parser.add_argument("--zoom", type=int, help="Initial zoom level")
    parser.add_argument(
        "--center",
        nargs=2,
        type=float,
        metavar=("LAT", "LON"),
        help="Initial map center",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: LOG_LEVEL env var or INFO)",
    )
    return parser


def apply_args(config: MapConfig, args: argparse.Namespace) -> MapConfig:
    """Apply command-line overrides on top of the loaded config."""
    if args.feed:
        config.feed_url = FEEDS[args.feed]
    if args.url:
        config.feed_url = args.url
    if args.output:
        config.output_path = args.output
    if args.zoom is not None:
        config.zoom = args.zoom
    if args.center:
        config.center_latitude, config.center_longitude = args.center
    return config


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = apply_args(load_config(args.config), args)
    except (ValueError, TypeError, yaml.YAMLError) as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    validation = validate_config(config)
    for warning in validation.warnings:
        logger.warning("Config %s: %s", warning.field, warning.message)
    if not validation.valid:
        for error in validation.critical_errors:
            logger.error("Config %s: %s", error.field, error.message)
        return 1

    result = Orchestrator(config).run()

    if not result.success:
        for error in result.errors:
            logger.error("Error: %s", error)
        return 1

    print(f"Map written to {result.output_path} ({result.summary})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
