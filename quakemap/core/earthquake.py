"""Earthquake data models and parsing - Pure functions.

This module handles parsing USGS GeoJSON features into typed Earthquake
objects. All functions are pure with no side effects.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class Earthquake:
    """Immutable earthquake data model.

    Attributes:
        longitude: Epicenter longitude
        latitude: Epicenter latitude
        depth_km: Depth in kilometers (positive downward)
        magnitude: Earthquake magnitude (0.0 when the feed reports none)
        id: USGS event ID
        place: Human-readable location description
        time: Event timestamp (UTC), if reported
        url: USGS event detail URL
    """
    longitude: float
    latitude: float
    depth_km: float
    magnitude: float
    id: str = ""
    place: str = ""
    time: datetime | None = None
    url: str = ""

    @property
    def coordinates(self) -> tuple[float, float, float]:
        """Return (longitude, latitude, depth) in GeoJSON order."""
        return (self.longitude, self.latitude, self.depth_km)


def _to_float(value: Any, default: float) -> float:
    """Convert a feed value to float, falling back to default."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _parse_time(time_ms: Any) -> datetime | None:
    """Convert USGS milliseconds since epoch to a UTC datetime, if valid."""
    if not isinstance(time_ms, (int, float)):
        return None
    try:
        return datetime.fromtimestamp(time_ms / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def parse_earthquake(feature: dict[str, Any]) -> Earthquake | None:
    """Parse a single GeoJSON feature into an Earthquake.

    Pure function. Only features without a usable location (missing
    geometry, or no finite longitude/latitude) return None so callers
    can skip them. A missing or non-numeric depth becomes NaN, which the
    depth classifier sends to the deepest bucket; a missing or non-finite
    magnitude becomes 0.0.

    Args:
        feature: GeoJSON feature dict from the USGS feed

    Returns:
        Earthquake object or None if the feature has no location
    """
    try:
        props = feature.get("properties") or {}
        geometry = feature.get("geometry") or {}
        coords = geometry.get("coordinates")

        if not coords or len(coords) < 2:
            return None

        longitude = float(coords[0])
        latitude = float(coords[1])
        if not (math.isfinite(longitude) and math.isfinite(latitude)):
            return None

        magnitude = _to_float(props.get("mag"), 0.0)
        if not math.isfinite(magnitude):
            magnitude = 0.0

        return Earthquake(
            longitude=longitude,
            latitude=latitude,
            depth_km=_to_float(coords[2], math.nan) if len(coords) > 2 else math.nan,
            magnitude=magnitude,
            id=feature.get("id") or "",
            place=props.get("place") or "",
            time=_parse_time(props.get("time")),
            url=props.get("url") or "",
        )
    except (AttributeError, TypeError, ValueError):
        return None


def parse_earthquakes(features: list[dict[str, Any]]) -> tuple[list[Earthquake], int]:
    """Parse a list of GeoJSON features, keeping feed order.

    Pure function.

    Args:
        features: The `features` array of a GeoJSON FeatureCollection

    Returns:
        Tuple of (parsed earthquakes, number of features skipped)
    """
    earthquakes = []
    skipped = 0

    for feature in features:
        earthquake = parse_earthquake(feature)
        if earthquake is None:
            skipped += 1
            continue
        earthquakes.append(earthquake)

    return earthquakes, skipped
