"""KML element dataclasses with readers and writers for geometries, styles, links and data."""

__version__ = "0.1.0"