"""Tests for configuration models and validation - Pure functions."""

from quakemap.core.config import (
    FEEDS,
    MapConfig,
    ValidationError,
    ValidationResult,
    validate_config,
    validate_coordinates,
)


class TestMapConfig:
    """Tests for MapConfig defaults."""

    def test_defaults(self):
        config = MapConfig()

        assert config.feed_url == FEEDS["week"]
        assert config.center == (42.52, -102.67)
        assert config.zoom == 5
        assert config.legend_position == "bottomright"
        assert "openstreetmap" in config.tile_url

    def test_week_feed_url(self):
        assert FEEDS["week"] == (
            "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/all_week.geojson"
        )


class TestValidateCoordinates:
    """Tests for validate_coordinates()."""

    def test_valid(self):
        assert validate_coordinates(42.52, -102.67, "center") == []

    def test_out_of_range(self):
        errors = validate_coordinates(91, -181, "center")
        assert len(errors) == 2
        assert all(e.field == "center" for e in errors)


class TestValidateConfig:
    """Tests for validate_config()."""

    def test_default_config_is_valid(self):
        result = validate_config(MapConfig())

        assert result.valid is True
        assert result.errors == []

    def test_bad_zoom(self):
        result = validate_config(MapConfig(zoom=25))

        assert result.valid is False
        assert result.critical_errors[0].field == "zoom"

    def test_bad_legend_position(self):
        result = validate_config(MapConfig(legend_position="middle"))

        assert result.valid is False
        assert result.critical_errors[0].field == "legend_position"

    def test_non_positive_timeout(self):
        result = validate_config(MapConfig(timeout_seconds=0))
        assert result.valid is False

    def test_non_http_url_is_error(self):
        result = validate_config(MapConfig(feed_url="ftp://example.com/feed"))
        assert result.valid is False

    def test_custom_url_is_only_warning(self):
        """Non-USGS feeds are allowed but flagged."""
        result = validate_config(MapConfig(feed_url="https://example.com/quakes.geojson"))

        assert result.valid is True
        assert len(result.warnings) == 1
        assert result.warnings[0].field == "feed_url"


class TestValidationResult:
    """Tests for ValidationResult helpers."""

    def test_splits_warnings_and_errors(self):
        result = ValidationResult(
            valid=False,
            errors=[
                ValidationError(field="a", message="bad"),
                ValidationError(field="b", message="meh", severity="warning"),
            ],
        )
        assert [e.field for e in result.critical_errors] == ["a"]
        assert [e.field for e in result.warnings] == ["b"]
