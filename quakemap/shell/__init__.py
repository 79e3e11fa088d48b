"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- USGS feed client (HTTP)
- Map renderer (folium HTML output)
- Configuration loading (environment/files)

Keep this layer thin and simple. All styling logic should be in core.
"""

from quakemap.shell.usgs_client import USGSClient, FeedResult
from quakemap.shell.map_renderer import MapRenderer, DepthLegend
from quakemap.shell.config_loader import load_config

__all__ = [
    "USGSClient",
    "FeedResult",
    "MapRenderer",
    "DepthLegend",
    "load_config",
]
