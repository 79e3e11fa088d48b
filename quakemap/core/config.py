"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field

from quakemap.core.legend import LEGEND_POSITIONS


USGS_FEED_BASE = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary"

FEEDS = {
    "hour": f"{USGS_FEED_BASE}/all_hour.geojson",
    "day": f"{USGS_FEED_BASE}/all_day.geojson",
    "week": f"{USGS_FEED_BASE}/all_week.geojson",
    "month": f"{USGS_FEED_BASE}/all_month.geojson",
    "significant": f"{USGS_FEED_BASE}/significant_month.geojson",
}

DEFAULT_FEED = "week"

OSM_TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
OSM_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> '
    "contributors"
)


@dataclass
class MapConfig:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        feed_url: GeoJSON feed to fetch
        center_latitude: Initial map center latitude
        center_longitude: Initial map center longitude
        zoom: Initial zoom level (0-18)
        tile_url: Base layer tile URL template
        attribution: Base layer attribution HTML
        legend_position: Leaflet corner for the legend control
        output_path: Where the rendered HTML page is written
        timeout_seconds: HTTP timeout for the feed request
    """
    feed_url: str = FEEDS[DEFAULT_FEED]
    center_latitude: float = 42.52
    center_longitude: float = -102.67
    zoom: int = 5
    tile_url: str = OSM_TILE_URL
    attribution: str = OSM_ATTRIBUTION
    legend_position: str = "bottomright"
    output_path: str = "earthquake_map.html"
    timeout_seconds: float = 30

    @property
    def center(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.center_latitude, self.center_longitude)


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_coordinates(lat: float, lon: float, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.

    Args:
        lat: Latitude value
        lon: Longitude value
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not -90 <= lat <= 90:
        errors.append(ValidationError(
            field=field_name,
            message=f"Latitude {lat} out of range [-90, 90]",
        ))

    if not -180 <= lon <= 180:
        errors.append(ValidationError(
            field=field_name,
            message=f"Longitude {lon} out of range [-180, 180]",
        ))

    return errors


def validate_config(config: MapConfig) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    errors.extend(validate_coordinates(
        config.center_latitude,
        config.center_longitude,
        "center",
    ))

    if not 0 <= config.zoom <= 18:
        errors.append(ValidationError(
            field="zoom",
            message=f"Zoom {config.zoom} out of range [0, 18]",
        ))

    if config.legend_position not in LEGEND_POSITIONS:
        errors.append(ValidationError(
            field="legend_position",
            message=(
                f"Unknown legend position '{config.legend_position}'. "
                f"Choose from: {', '.join(LEGEND_POSITIONS)}"
            ),
        ))

    if config.timeout_seconds <= 0:
        errors.append(ValidationError(
            field="timeout_seconds",
            message=f"Timeout must be positive, got {config.timeout_seconds}",
        ))

    if not config.feed_url.startswith(("http://", "https://")):
        errors.append(ValidationError(
            field="feed_url",
            message=f"Feed URL is not an http(s) URL: {config.feed_url}",
        ))
    elif config.feed_url not in FEEDS.values():
        errors.append(ValidationError(
            field="feed_url",
            message="Feed URL is not one of the USGS summary feeds",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
