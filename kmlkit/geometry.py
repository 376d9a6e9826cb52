"""KML geometry elements and related containers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .coord import AltitudeMode, Coord


@dataclass
class GeomProps:
    """Properties shared by the coordinate-carrying geometries."""

    coords: list[Coord] = field(default_factory=list)
    altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND
    extrude: bool = False
    tessellate: bool = False


@dataclass
class Point:
    """``kml:Point``."""

    coord: Coord = field(default_factory=Coord)
    extrude: bool = False
    altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND
    attrs: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float | None = None) -> Point:
        return cls(coord=Coord(x, y, z))


@dataclass
class LineString:
    """``kml:LineString``."""

    coords: list[Coord] = field(default_factory=list)
    extrude: bool = False
    tessellate: bool = False
    altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class LinearRing:
    """``kml:LinearRing``."""

    coords: list[Coord] = field(default_factory=list)
    extrude: bool = False
    tessellate: bool = False
    altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class Polygon:
    """``kml:Polygon`` with one outer and any number of inner rings."""

    outer: LinearRing = field(default_factory=LinearRing)
    inner: list[LinearRing] = field(default_factory=list)
    extrude: bool = False
    tessellate: bool = False
    altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class Element:
    """A generic element for extensions and unsupported KML elements."""

    name: str = ""
    attrs: dict[str, str] = field(default_factory=dict)
    content: str | None = None
    children: list[Element] = field(default_factory=list)


@dataclass
class MultiGeometry:
    """``kml:MultiGeometry``."""

    geometries: list[Geometry] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict)


# An Element stands in for kml:Model.
Geometry = Union[Point, LineString, LinearRing, Polygon, MultiGeometry, Element]


@dataclass
class Location:
    """``kml:Location``."""

    latitude: float = 0.0
    longitude: float = 0.0
    altitude: float = 0.0
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class Orientation:
    """``kml:Orientation``."""

    roll: float = 0.0
    tilt: float = 0.0
    heading: float = 0.0
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class Scale:
    """``kml:Scale``; every axis defaults to 1."""

    x: float = 1.0
    y: float = 1.0
    z: float = 1.0
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class Placemark:
    """``kml:Placemark``; the geometry is optional."""

    name: str | None = None
    description: str | None = None
    geometry: Geometry | None = None
    style_url: str | None = None
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[Element] = field(default_factory=list)