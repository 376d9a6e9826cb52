"""Writing geometries, placemarks and generic elements as KML."""

from __future__ import annotations

from .coord import format_float
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
from .xmlwriter import XmlBuilder


def _flag(value: bool) -> str:
    return "1" if value else "0"


def _write_geom_props(out: XmlBuilder, props: GeomProps) -> None:
    out.text_element("extrude", _flag(props.extrude))
    out.text_element("tessellate", _flag(props.tessellate))
    out.text_element("altitudeMode", str(props.altitude_mode))
    if props.coords:
        out.text_element("coordinates", "\n".join(str(c) for c in props.coords))


def write_point(out: XmlBuilder, point: Point) -> None:
    out.start("Point", point.attrs)
    out.text_element("extrude", _flag(point.extrude))
    out.text_element("altitudeMode", str(point.altitude_mode))
    out.text_element("coordinates", str(point.coord))
    out.end("Point")


def write_line_string(out: XmlBuilder, line_string: LineString) -> None:
    out.start("LineString", line_string.attrs)
    _write_geom_props(
        out,
        GeomProps(
            line_string.coords,
            line_string.altitude_mode,
            line_string.extrude,
            line_string.tessellate,
        ),
    )
    out.end("LineString")


def write_linear_ring(out: XmlBuilder, linear_ring: LinearRing) -> None:
    out.start("LinearRing", linear_ring.attrs)
    _write_geom_props(
        out,
        GeomProps(
            linear_ring.coords,
            linear_ring.altitude_mode,
            linear_ring.extrude,
            linear_ring.tessellate,
        ),
    )
    out.end("LinearRing")


def write_polygon(out: XmlBuilder, polygon: Polygon) -> None:
    out.start("Polygon", polygon.attrs)
    _write_geom_props(
        out, GeomProps([], polygon.altitude_mode, polygon.extrude, polygon.tessellate)
    )
    out.start("outerBoundaryIs")
    write_linear_ring(out, polygon.outer)
    out.end("outerBoundaryIs")
    if polygon.inner:
        out.start("innerBoundaryIs")
        for ring in polygon.inner:
            write_linear_ring(out, ring)
        out.end("innerBoundaryIs")
    out.end("Polygon")


def write_multi_geometry(out: XmlBuilder, multi_geometry: MultiGeometry) -> None:
    out.start("MultiGeometry", multi_geometry.attrs)
    for geometry in multi_geometry.geometries:
        write_geometry(out, geometry)
    out.end("MultiGeometry")


_GEOMETRY_WRITERS = {
    Point: write_point,
    LineString: write_line_string,
    LinearRing: write_linear_ring,
    Polygon: write_polygon,
    MultiGeometry: write_multi_geometry,
}


def write_geometry(out: XmlBuilder, geometry) -> None:
    """Write any geometry; a placeholder model element writes nothing."""
    writer = _GEOMETRY_WRITERS.get(type(geometry))
    if writer is not None:
        writer(out, geometry)


def write_location(out: XmlBuilder, location: Location) -> None:
    out.start("Location", location.attrs)
    out.text_element("longitude", format_float(location.longitude))
    out.text_element("latitude", format_float(location.latitude))
    out.text_element("altitude", format_float(location.altitude))
    out.end("Location")


def write_scale(out: XmlBuilder, scale: Scale) -> None:
    out.start("Scale", scale.attrs)
    out.text_element("x", format_float(scale.x))
    out.text_element("y", format_float(scale.y))
    out.text_element("z", format_float(scale.z))
    out.end("Scale")


def write_orientation(out: XmlBuilder, orientation: Orientation) -> None:
    out.start("Orientation", orientation.attrs)
    out.text_element("roll", format_float(orientation.roll))
    out.text_element("tilt", format_float(orientation.tilt))
    out.text_element("heading", format_float(orientation.heading))
    out.end("Orientation")


def write_element(out: XmlBuilder, element: Element) -> None:
    out.start(element.name, element.attrs)
    if element.content is not None:
        out.text(element.content)
    for child in element.children:
        write_element(out, child)
    out.end(element.name)


def write_placemark(out: XmlBuilder, placemark: Placemark) -> None:
    out.start("Placemark", placemark.attrs)
    if placemark.name is not None:
        out.text_element("name", placemark.name)
    if placemark.description is not None:
        out.text_element("description", placemark.description)
    for child in placemark.children:
        write_element(out, child)
    if placemark.geometry is not None:
        write_geometry(out, placemark.geometry)
    if placemark.style_url is not None:
        out.text_element("styleUrl", placemark.style_url)
    out.end("Placemark")