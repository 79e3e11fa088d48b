"""Interactive earthquake map built from the USGS GeoJSON feed."""

__version__ = "0.1.0"
