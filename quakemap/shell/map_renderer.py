"""Map Renderer - Imperative Shell.

This module turns marker and legend definitions from the core module into
a Leaflet map using folium, and writes the result to disk. The map surface
is always passed in explicitly; nothing here holds a global map.
"""

import logging
from pathlib import Path

import folium
from branca.element import MacroElement, Template

from quakemap.core.config import MapConfig
from quakemap.core.legend import LegendEntry, render_legend_html
from quakemap.core.markers import Marker


logger = logging.getLogger(__name__)


class DepthLegend(MacroElement):
    """Static legend rendered as a positioned Leaflet control.

    Attributes:
        html: Inner HTML of the legend box
        position: Leaflet corner (e.g. "bottomright")
    """

    _template = Template("""
        {% macro script(this, kwargs) %}
            var {{ this.get_name() }} = L.control({position: {{ this.position|tojson }}});
            {{ this.get_name() }}.onAdd = function (map) {
                var div = L.DomUtil.create("div", "info legend");
                div.innerHTML = {{ this.html|tojson }};
                div.style.backgroundColor = "#fff";
                return div;
            };
            {{ this.get_name() }}.addTo({{ this._parent.get_name() }});
        {% endmacro %}
    """)

    def __init__(self, html: str, position: str = "bottomright") -> None:
        super().__init__()
        self._name = "DepthLegend"
        self.html = html
        self.position = position


class MapRenderer:
    """Renders earthquake markers and the depth legend onto folium maps.

    This is part of the imperative shell - it builds the HTML document and
    writes it to disk.
    """

    def create_surface(self, config: MapConfig) -> folium.Map:
        """Create a new map with a single base tile layer.

        Args:
            config: Map configuration (center, zoom, tiles)

        Returns:
            A fresh folium.Map owned by the caller
        """
        surface = folium.Map(
            location=list(config.center),
            zoom_start=config.zoom,
            tiles=None,
        )
        folium.TileLayer(
            tiles=config.tile_url,
            attr=config.attribution,
            name="Street Map",
        ).add_to(surface)
        return surface

    def add_markers(self, surface: folium.Map, markers: list[Marker]) -> int:
        """Add one circle marker with a popup per marker definition.

        Args:
            surface: Map to draw on
            markers: Marker definitions from the core module

        Returns:
            Number of markers added
        """
        added = 0
        for marker in markers:
            folium.CircleMarker(
                location=list(marker.location),
                radius=marker.radius,
                color=marker.color,
                weight=marker.weight,
                fill=True,
                fill_color=marker.fill_color,
                fill_opacity=marker.fill_opacity,
                dash_array=marker.dash_array,
                popup=folium.Popup(marker.popup),
            ).add_to(surface)
            added += 1

        logger.debug("Added %d markers to map", added)
        return added

    def add_legend(
        self,
        surface: folium.Map,
        entries: list[LegendEntry],
        position: str = "bottomright",
    ) -> DepthLegend:
        """Attach the depth legend control to the map.

        Args:
            surface: Map to draw on
            entries: Legend entries from the core module
            position: Leaflet corner for the control

        Returns:
            The attached legend element
        """
        legend = DepthLegend(render_legend_html(entries), position=position)
        surface.add_child(legend)
        logger.debug("Added legend with %d entries at %s", len(entries), position)
        return legend

    def save(self, surface: folium.Map, output_path: str | Path) -> Path:
        """Write the map as a standalone HTML page.

        This method performs file I/O.

        Args:
            surface: Map to write
            output_path: Destination file

        Returns:
            Path of the written file
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        surface.save(str(path))
        logger.info("Wrote map to %s", path)
        return path
