"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

The MapConfig model is defined in quakemap/core/config.py.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from quakemap.core.config import DEFAULT_FEED, FEEDS, MapConfig


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/config.yaml"

# Environment variable -> (MapConfig field, type)
ENV_OVERRIDES = {
    "QUAKEMAP_FEED_URL": ("feed_url", str),
    "QUAKEMAP_OUTPUT": ("output_path", str),
    "QUAKEMAP_TIMEOUT": ("timeout_seconds", float),
}


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} environment placeholder.

    Non-strings and plain strings are returned unchanged; unset variables
    leave the placeholder in place.
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_feed_url(data: dict[str, Any]) -> str:
    """Pick the feed URL from either `feed_url` or a named `feed`."""
    if "feed_url" in data:
        return _resolve_value(data["feed_url"])

    feed = data.get("feed")
    if feed is None:
        return FEEDS[DEFAULT_FEED]
    if feed not in FEEDS:
        raise ValueError(f"Unknown feed '{feed}'. Choose from: {list(FEEDS.keys())}")
    return FEEDS[feed]


def load_config_from_dict(data: dict[str, Any]) -> MapConfig:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed MapConfig object
    """
    defaults = MapConfig()
    center = data.get("center") or {}
    if not isinstance(center, dict):
        raise ValueError(f"center must be a mapping, got {center!r}")

    return MapConfig(
        feed_url=_parse_feed_url(data),
        center_latitude=float(center.get("latitude", defaults.center_latitude)),
        center_longitude=float(center.get("longitude", defaults.center_longitude)),
        zoom=int(data.get("zoom", defaults.zoom)),
        tile_url=_resolve_value(data.get("tile_url", defaults.tile_url)),
        attribution=data.get("attribution", defaults.attribution),
        legend_position=data.get("legend_position", defaults.legend_position),
        output_path=_resolve_value(data.get("output_path", defaults.output_path)),
        timeout_seconds=float(data.get("timeout_seconds", defaults.timeout_seconds)),
    )


def apply_env_overrides(config: MapConfig) -> MapConfig:
    """Override config fields from QUAKEMAP_* environment variables.

    Args:
        config: Configuration to update in place

    Returns:
        The same config object
    """
    for env_var, (field_name, cast) in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            setattr(config, field_name, cast(value))
            logger.info("Using %s from %s", field_name, env_var)
    return config


def load_config(config_path: str | Path | None = None) -> MapConfig:
    """Load configuration from a YAML file plus environment overrides.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses QUAKEMAP_CONFIG env var or default.

    Returns:
        Parsed MapConfig object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
        ValueError: If config names an unknown feed or holds a malformed value
    """
    if config_path is None:
        config_path = os.environ.get("QUAKEMAP_CONFIG", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return apply_env_overrides(MapConfig())

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return apply_env_overrides(MapConfig())

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    config = apply_env_overrides(load_config_from_dict(data))

    logger.info(
        "Loaded config: feed %s, output %s",
        config.feed_url,
        config.output_path,
    )

    return config
