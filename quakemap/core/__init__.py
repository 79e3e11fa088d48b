"""Functional Core - Pure functions with no side effects.

This module contains all map-building logic as pure functions:
- Earthquake feature parsing
- Depth classification
- Marker styling
- Legend construction
- Configuration validation

All functions here are deterministic and have no I/O.
"""

from quakemap.core.earthquake import Earthquake, parse_earthquake, parse_earthquakes
from quakemap.core.depth import DEPTH_BUCKETS, DEPTH_COLORS, get_depth_color
from quakemap.core.markers import (
    DepthExtent,
    Marker,
    build_markers,
    compute_depth_extent,
    create_marker,
    get_marker_radius,
)
from quakemap.core.legend import LegendEntry, build_legend_entries, render_legend_html
from quakemap.core.config import MapConfig, validate_config

__all__ = [
    # Earthquake
    "Earthquake",
    "parse_earthquake",
    "parse_earthquakes",
    # Depth
    "DEPTH_BUCKETS",
    "DEPTH_COLORS",
    "get_depth_color",
    # Markers
    "DepthExtent",
    "Marker",
    "build_markers",
    "compute_depth_extent",
    "create_marker",
    "get_marker_radius",
    # Legend
    "LegendEntry",
    "build_legend_entries",
    "render_legend_html",
    # Config
    "MapConfig",
    "validate_config",
]
