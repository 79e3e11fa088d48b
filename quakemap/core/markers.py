"""Marker styling - Pure functions.

This module derives circle-marker parameters from earthquakes.
Adding markers to an actual map (I/O) is handled by the shell layer.
"""

import math
from dataclasses import dataclass

from quakemap.core.depth import get_depth_color
from quakemap.core.earthquake import Earthquake


MIN_MARKER_RADIUS = 5
RADIUS_PER_MAGNITUDE = 7

MARKER_BORDER_COLOR = "black"
MARKER_BORDER_WEIGHT = 1
MARKER_FILL_OPACITY = 0.8


@dataclass(frozen=True)
class Marker:
    """Immutable circle marker derived from one earthquake.

    Attributes:
        location: (latitude, longitude) in Leaflet order
        radius: Circle radius in pixels
        fill_color: Hex fill color from the depth classifier
        popup: Popup HTML
        color: Border color
        weight: Border thickness in pixels
        fill_opacity: Fill opacity (0-1)
        dash_array: Leaflet dash pattern, None for a solid outline
    """
    location: tuple[float, float]
    radius: float
    fill_color: str
    popup: str
    color: str = MARKER_BORDER_COLOR
    weight: int = MARKER_BORDER_WEIGHT
    fill_opacity: float = MARKER_FILL_OPACITY
    dash_array: str | None = None


@dataclass(frozen=True)
class DepthExtent:
    """Minimum and maximum depth over a dataset (None when empty)."""
    min_depth: float | None
    max_depth: float | None


def get_marker_radius(magnitude: float) -> float:
    """Determine marker radius based on magnitude.

    Pure function. Zero and negative magnitudes still get a visible marker.

    Args:
        magnitude: Earthquake magnitude

    Returns:
        Marker radius in pixels, never below MIN_MARKER_RADIUS
    """
    return max(magnitude * RADIUS_PER_MAGNITUDE, MIN_MARKER_RADIUS)


def format_number(value: float) -> str:
    """Format a number the way it reads in the feed (4.0 -> "4")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_popup(earthquake: Earthquake) -> str:
    """Format the popup text for an earthquake marker.

    Pure function.

    Args:
        earthquake: Earthquake to describe

    Returns:
        Popup HTML with location, magnitude and depth
    """
    lon = format_number(earthquake.longitude)
    lat = format_number(earthquake.latitude)
    magnitude = format_number(earthquake.magnitude)
    depth = format_number(earthquake.depth_km)
    return (
        f"Location: [{lon}, {lat}]<br />"
        f"Magnitude: {magnitude} <br /> "
        f"Depth: {depth} km"
    )


def create_marker(earthquake: Earthquake) -> Marker:
    """Create the circle marker for an earthquake.

    Pure function. Radius comes from magnitude, fill color from depth.

    Args:
        earthquake: Earthquake to render

    Returns:
        Marker with all parameters set
    """
    return Marker(
        location=(earthquake.latitude, earthquake.longitude),
        radius=get_marker_radius(earthquake.magnitude),
        fill_color=get_depth_color(earthquake.depth_km),
        popup=format_popup(earthquake),
    )


def build_markers(earthquakes: list[Earthquake | None]) -> list[Marker]:
    """Create markers for a list of earthquakes, keeping input order.

    Pure function. Entries without a location (None) are skipped.
    """
    return [create_marker(e) for e in earthquakes if e is not None]


def compute_depth_extent(earthquakes: list[Earthquake]) -> DepthExtent:
    """Compute min and max depth in a single pass.

    Pure function. NaN depths are ignored.

    Args:
        earthquakes: Earthquakes to scan

    Returns:
        DepthExtent, with both values None when there is nothing to scan
    """
    min_depth = None
    max_depth = None

    for earthquake in earthquakes:
        depth = earthquake.depth_km
        if math.isnan(depth):
            continue
        if min_depth is None or depth < min_depth:
            min_depth = depth
        if max_depth is None or depth > max_depth:
            max_depth = depth

    return DepthExtent(min_depth=min_depth, max_depth=max_depth)
