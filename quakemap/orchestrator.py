"""Orchestrator - Wires Functional Core and Imperative Shell.

This module coordinates the single fetch-then-render pass: fetch the
feed, parse features, style markers, draw them and the legend onto a map
surface it owns, then write the page.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from quakemap.core.config import MapConfig
from quakemap.core.earthquake import parse_earthquakes
from quakemap.core.legend import build_legend_entries
from quakemap.core.markers import (
    DepthExtent,
    build_markers,
    compute_depth_extent,
    format_number,
)
from quakemap.shell.map_renderer import MapRenderer
from quakemap.shell.usgs_client import USGSClient


logger = logging.getLogger(__name__)


STATE_IDLE = "idle"
STATE_FETCHING = "fetching"
STATE_RENDERED = "rendered"
STATE_FAILED = "failed"


@dataclass
class RenderResult:
    """Result of one fetch-then-render run.

    Attributes:
        state: Final state (rendered or failed)
        features_fetched: Raw features returned by the feed
        markers_added: Markers drawn on the map
        features_skipped: Features dropped for lacking a location
        depth_extent: Min/max depth over the parsed earthquakes
        legend_entries: Rows in the legend (0 if nothing was rendered)
        output_path: Written HTML page, if any
        errors: Any errors that occurred
    """
    state: str
    features_fetched: int = 0
    markers_added: int = 0
    features_skipped: int = 0
    depth_extent: DepthExtent = field(default_factory=lambda: DepthExtent(None, None))
    legend_entries: int = 0
    output_path: Path | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Returns True if the map was rendered."""
        return self.state == STATE_RENDERED and not self.errors

    @property
    def summary(self) -> str:
        """Human-readable summary of the run."""
        return (
            f"Fetched {self.features_fetched} features, "
            f"{self.markers_added} markers added, "
            f"{self.features_skipped} skipped"
        )


class Orchestrator:
    """Coordinates fetching earthquakes and rendering the map.

    This class wires together:
    - USGS client (fetches the feed)
    - Core functions (parsing, depth colors, marker and legend styling)
    - Map renderer (draws onto a folium map and saves it)
    """

    def __init__(
        self,
        config: MapConfig,
        usgs_client: USGSClient | None = None,
        renderer: MapRenderer | None = None,
    ) -> None:
        """Initialize orchestrator with configuration.

        Args:
            config: Application configuration
            usgs_client: USGS client (created if not provided)
            renderer: Map renderer (created if not provided)
        """
        self.config = config
        self.usgs_client = usgs_client or USGSClient(timeout=config.timeout_seconds)
        self.renderer = renderer or MapRenderer()
        self.state = STATE_IDLE
        self.surface = None

    def run(self, save: bool = True) -> RenderResult:
        """Run the fetch-then-render pass once.

        Args:
            save: Write the HTML page to config.output_path

        Returns:
            RenderResult describing what was drawn
        """
        self.state = STATE_FETCHING
        feed = self.usgs_client.fetch_features(self.config.feed_url)

        if not feed.success:
            self.state = STATE_FAILED
            logger.error("Feed fetch failed (%s): %s", feed.error_kind, feed.error)
            return RenderResult(
                state=self.state,
                errors=[f"{feed.error_kind}: {feed.error}"],
            )

        # Pure core functions
        earthquakes, skipped = parse_earthquakes(feed.features)
        markers = build_markers(earthquakes)
        extent = compute_depth_extent(earthquakes)

        for earthquake in earthquakes:
            logger.debug(
                "Earthquake - Location: [%s, %s], Magnitude: %s, Depth: %s",
                format_number(earthquake.longitude),
                format_number(earthquake.latitude),
                format_number(earthquake.magnitude),
                format_number(earthquake.depth_km),
            )
        if skipped:
            logger.info("Skipped %d features without a location", skipped)

        self.surface = self.renderer.create_surface(self.config)
        added = self.renderer.add_markers(self.surface, markers)

        logger.info("Depth extent: [%s, %s]", extent.min_depth, extent.max_depth)

        entries = build_legend_entries()
        self.renderer.add_legend(self.surface, entries, self.config.legend_position)

        result = RenderResult(
            state=STATE_RENDERED,
            features_fetched=len(feed.features),
            markers_added=added,
            features_skipped=skipped,
            depth_extent=extent,
            legend_entries=len(entries),
        )

        if save:
            try:
                result.output_path = self.renderer.save(self.surface, self.config.output_path)
            except OSError as e:
                logger.error("Failed to write map: %s", str(e))
                result.errors.append(f"output: {e}")

        self.state = STATE_RENDERED
        logger.info("Completed: %s", result.summary)
        return result
