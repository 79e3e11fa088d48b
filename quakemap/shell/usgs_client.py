"""USGS Feed Client - Imperative Shell.

This module handles HTTP communication with the USGS GeoJSON summary feeds.
All I/O is contained here; parsing is in the core module.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import requests


logger = logging.getLogger(__name__)


# Default timeout for feed requests (seconds)
DEFAULT_TIMEOUT = 30

ERROR_NETWORK = "network"
ERROR_PARSE = "parse"


@dataclass
class FeedResult:
    """Result of fetching a feed.

    Attributes:
        success: Whether a feature list was obtained
        features: Raw GeoJSON features (empty on failure)
        error_kind: ERROR_NETWORK or ERROR_PARSE if failed
        error: Error message if failed
    """
    success: bool
    features: list[dict[str, Any]] = field(default_factory=list)
    error_kind: str | None = None
    error: str | None = None


class USGSClient:
    """Client for fetching earthquake features from a USGS GeoJSON feed.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize USGS client.

        Args:
            timeout: Request timeout in seconds
        """
        self.timeout = timeout

    def fetch_features(self, url: str) -> FeedResult:
        """Fetch the feature list from a GeoJSON feed.

        This method performs HTTP I/O. It issues exactly one request and
        never retries.

        Args:
            url: Feed URL

        Returns:
            FeedResult with the features or the failure reason
        """
        logger.info("Fetching earthquake feed %s", url)

        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("Feed request failed: %s", str(e))
            return FeedResult(
                success=False,
                error_kind=ERROR_NETWORK,
                error=str(e),
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Feed response is not valid JSON: %s", str(e))
            return FeedResult(
                success=False,
                error_kind=ERROR_PARSE,
                error=f"Invalid JSON: {e}",
            )

        features = data.get("features") if isinstance(data, dict) else None
        if not isinstance(features, list):
            logger.error("Feed response has no 'features' list")
            return FeedResult(
                success=False,
                error_kind=ERROR_PARSE,
                error="Response has no 'features' list",
            )

        logger.info("Fetched %d features from USGS", len(features))

        return FeedResult(success=True, features=features)
