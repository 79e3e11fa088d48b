"""Tests for the USGS feed client.

Uses the `responses` library to mock HTTP requests.
"""

import responses
import requests

from quakemap.core.config import FEEDS
from quakemap.shell.usgs_client import (
    ERROR_NETWORK,
    ERROR_PARSE,
    FeedResult,
    USGSClient,
)


FEED_URL = FEEDS["week"]

SAMPLE_GEOJSON = {
    "type": "FeatureCollection",
    "metadata": {"count": 2},
    "features": [
        {"properties": {"mag": 4}, "geometry": {"coordinates": [-100, 40, 5]}},
        {"properties": {"mag": 1.2}, "geometry": {"coordinates": [-117.5, 35.1, 8.2]}},
    ],
}


class TestUSGSClientInit:
    """Tests for USGSClient initialization."""

    def test_default_timeout(self):
        assert USGSClient().timeout == 30

    def test_custom_timeout(self):
        assert USGSClient(timeout=5).timeout == 5


class TestUSGSClientFetchFeatures:
    """Tests for USGSClient.fetch_features()."""

    @responses.activate
    def test_successful_fetch_returns_features(self):
        """A valid FeatureCollection yields its features."""
        responses.add(responses.GET, FEED_URL, json=SAMPLE_GEOJSON, status=200)

        result = USGSClient().fetch_features(FEED_URL)

        assert result.success is True
        assert result.features == SAMPLE_GEOJSON["features"]
        assert result.error is None
        assert result.error_kind is None

    @responses.activate
    def test_issues_exactly_one_request(self):
        """No retries, even on failure."""
        responses.add(responses.GET, FEED_URL, status=503)

        USGSClient().fetch_features(FEED_URL)

        assert len(responses.calls) == 1

    @responses.activate
    def test_empty_feature_list_is_success(self):
        """An empty dataset is not an error."""
        responses.add(
            responses.GET,
            FEED_URL,
            json={"type": "FeatureCollection", "features": []},
            status=200,
        )

        result = USGSClient().fetch_features(FEED_URL)

        assert result.success is True
        assert result.features == []

    @responses.activate
    def test_http_error_is_network_failure(self):
        """Non-2xx responses are reported as network errors."""
        responses.add(responses.GET, FEED_URL, status=500)

        result = USGSClient().fetch_features(FEED_URL)

        assert result.success is False
        assert result.error_kind == ERROR_NETWORK
        assert "500" in result.error
        assert result.features == []

    @responses.activate
    def test_connection_error_is_network_failure(self):
        """Connection failures are reported, not raised."""
        responses.add(
            responses.GET,
            FEED_URL,
            body=requests.ConnectionError("Connection refused"),
        )

        result = USGSClient().fetch_features(FEED_URL)

        assert result.success is False
        assert result.error_kind == ERROR_NETWORK
        assert "Connection refused" in result.error

    @responses.activate
    def test_timeout_is_network_failure(self):
        responses.add(responses.GET, FEED_URL, body=requests.Timeout("timed out"))

        result = USGSClient(timeout=1).fetch_features(FEED_URL)

        assert result.success is False
        assert result.error_kind == ERROR_NETWORK

    @responses.activate
    def test_invalid_json_is_parse_failure(self):
        responses.add(responses.GET, FEED_URL, body="<html>oops</html>", status=200)

        result = USGSClient().fetch_features(FEED_URL)

        assert result.success is False
        assert result.error_kind == ERROR_PARSE
        assert "Invalid JSON" in result.error

    @responses.activate
    def test_missing_features_is_parse_failure(self):
        responses.add(responses.GET, FEED_URL, json={"type": "FeatureCollection"}, status=200)

        result = USGSClient().fetch_features(FEED_URL)

        assert result.success is False
        assert result.error_kind == ERROR_PARSE

    @responses.activate
    def test_non_object_body_is_parse_failure(self):
        responses.add(responses.GET, FEED_URL, json=[1, 2, 3], status=200)

        result = USGSClient().fetch_features(FEED_URL)

        assert result.success is False
        assert result.error_kind == ERROR_PARSE


class TestFeedResult:
    """Tests for FeedResult defaults."""

    def test_failure_has_no_features(self):
        result = FeedResult(success=False, error_kind=ERROR_NETWORK, error="boom")
        assert result.features == []
