"""Reading geometries, placemarks and positional elements from KML events."""

from __future__ import annotations

from collections.abc import Callable

from .coord import AltitudeMode, coords_from_str
from .errors import InvalidGeometryError
from .geometry import (
    Element,
    GeomProps,
    LinearRing,
    LineString,
    Location,
    MultiGeometry,
    Orientation,
    Placemark,
    Point,
    Polygon,
    Scale,
)
from .xmlevents import EventKind, EventReader, read_element


def _read_float_fields(
    events: EventReader, end_tag: str, values: dict[str, float]
) -> dict[str, float]:
    """Read numeric child elements named in ``values`` until ``end_tag`` closes."""
    while True:
        event = events.next_event()
        if event.kind is EventKind.START:
            if event.local_name in values:
                values[event.local_name] = events.read_float()
        elif event.kind is EventKind.END:
            if event.local_name == end_tag:
                break
        elif event.kind is EventKind.COMMENT:
            continue
        else:
            break
    return values


def _read_geom_props(events: EventReader, end_tag: str) -> GeomProps:
    props = GeomProps()
    while True:
        event = events.next_event()
        if event.kind is EventKind.START:
            name = event.local_name
            if name == "coordinates":
                props.coords = coords_from_str(events.read_str())
            elif name == "altitudeMode":
                props.altitude_mode = AltitudeMode.from_str(events.read_str())
            elif name == "extrude":
                props.extrude = events.read_str() == "1"
            elif name == "tessellate":
                props.tessellate = events.read_str() == "1"
        elif event.kind is EventKind.END:
            if event.local_name == end_tag:
                break
        elif event.kind is EventKind.EOF:
            break
    if not props.coords:
        raise InvalidGeometryError("Geometry must contain coordinates element")
    return props


def read_point(events: EventReader, attrs: dict[str, str]) -> Point:
    """Read a ``Point`` whose start tag has just been consumed."""
    props = _read_geom_props(events, "Point")
    return Point(
        coord=props.coords[0],
        extrude=props.extrude,
        altitude_mode=props.altitude_mode,
        attrs=attrs,
    )


def read_line_string(events: EventReader, attrs: dict[str, str]) -> LineString:
    """Read a ``LineString`` whose start tag has just been consumed."""
    props = _read_geom_props(events, "LineString")
    return LineString(
        coords=props.coords,
        extrude=props.extrude,
        tessellate=props.tessellate,
        altitude_mode=props.altitude_mode,
        attrs=attrs,
    )


def read_linear_ring(events: EventReader, attrs: dict[str, str]) -> LinearRing:
    """Read a ``LinearRing`` whose start tag has just been consumed."""
    props = _read_geom_props(events, "LinearRing")
    return LinearRing(
        coords=props.coords,
        extrude=props.extrude,
        tessellate=props.tessellate,
        altitude_mode=props.altitude_mode,
        attrs=attrs,
    )


def _read_boundary(events: EventReader, end_tag: str) -> list[LinearRing]:
    rings: list[LinearRing] = []
    while True:
        event = events.next_event()
        if event.kind is EventKind.START:
            if event.local_name == "LinearRing":
                rings.append(read_linear_ring(events, event.attrs))
        elif event.kind is EventKind.END:
            if event.local_name == end_tag:
                break
        elif event.kind is EventKind.COMMENT:
            continue
        else:
            break
    return rings


def read_polygon(events: EventReader, attrs: dict[str, str]) -> Polygon:
    """Read a ``Polygon``; an empty outer boundary is an error."""
    polygon = Polygon(attrs=attrs)
    while True:
        event = events.next_event()
        if event.kind is EventKind.START:
            name = event.local_name
            if name == "outerBoundaryIs":
                rings = _read_boundary(events, "outerBoundaryIs")
                if not rings:
                    raise InvalidGeometryError("Polygon must have an outer boundary")
                polygon.outer = rings[0]
            elif name == "innerBoundaryIs":
                polygon.inner.extend(_read_boundary(events, "innerBoundaryIs"))
            elif name == "altitudeMode":
                polygon.altitude_mode = AltitudeMode.from_str(events.read_str())
            elif name == "extrude":
                polygon.extrude = events.read_str() == "1"
            elif name == "tessellate":
                polygon.tessellate = events.read_str() == "1"
        elif event.kind is EventKind.END:
            if event.local_name == "Polygon":
                break
        elif event.kind is EventKind.COMMENT:
            continue
        else:
            break
    return polygon


def read_multi_geometry(events: EventReader, attrs: dict[str, str]) -> MultiGeometry:
    """Read a ``MultiGeometry``; unknown children are skipped."""
    multi = MultiGeometry(attrs=attrs)
    while True:
        event = events.next_event()
        if event.kind is EventKind.START:
            reader = _GEOMETRY_READERS.get(event.local_name)
            if reader is not None:
                multi.geometries.append(reader(events, event.attrs))
        elif event.kind is EventKind.END:
            if event.local_name == "MultiGeometry":
                break
        elif event.kind is EventKind.COMMENT:
            continue
        else:
            break
    return multi


_GEOMETRY_READERS: dict[str, Callable[[EventReader, dict[str, str]], object]] = {
    "Point": read_point,
    "LineString": read_line_string,
    "LinearRing": read_linear_ring,
    "Polygon": read_polygon,
    "MultiGeometry": read_multi_geometry,
}


def read_placemark(events: EventReader, attrs: dict[str, str]) -> Placemark:
    """Read a ``Placemark``; unrecognised children are kept as generic elements."""
    placemark = Placemark(attrs=attrs)
    while True:
        event = events.next_event()
        if event.kind is EventKind.START:
            name = event.local_name
            if name == "name":
                placemark.name = events.read_str()
            elif name == "description":
                placemark.description = events.read_str()
            elif name == "styleUrl":
                placemark.style_url = events.read_str()
            elif name in _GEOMETRY_READERS:
                placemark.geometry = _GEOMETRY_READERS[name](events, event.attrs)
            else:
                child: Element = read_element(events, name, event.attrs)
                placemark.children.append(child)
        elif event.kind is EventKind.END:
            if event.local_name == "Placemark":
                break
        elif event.kind is EventKind.EOF:
            break
    return placemark


def read_location(events: EventReader, attrs: dict[str, str]) -> Location:
    """Read a ``Location``; missing values default to zero."""
    values = _read_float_fields(
        events, "Location", {"longitude": 0.0, "latitude": 0.0, "altitude": 0.0}
    )
    return Location(
        latitude=values["latitude"],
        longitude=values["longitude"],
        altitude=values["altitude"],
        attrs=attrs,
    )


def read_scale(events: EventReader, attrs: dict[str, str]) -> Scale:
    """Read a ``Scale``; missing axes default to one."""
    values = _read_float_fields(events, "Scale", {"x": 1.0, "y": 1.0, "z": 1.0})
    return Scale(x=values["x"], y=values["y"], z=values["z"], attrs=attrs)


def read_orientation(events: EventReader, attrs: dict[str, str]) -> Orientation:
    """Read an ``Orientation``; missing angles default to zero."""
    values = _read_float_fields(
        events, "Orientation", {"roll": 0.0, "tilt": 0.0, "heading": 0.0}
    )
    return Orientation(
        roll=values["roll"],
        tilt=values["tilt"],
        heading=values["heading"],
        attrs=attrs,
    )