from kmlkit.coord import AltitudeMode, Coord
from kmlkit.geometry import (
    Element,
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


def test_point_from_xyz():
    p = Point.from_xyz(1.0, 1.0, None)
    assert p == Point(coord=Coord(1.0, 1.0, None))
    assert p.altitude_mode is AltitudeMode.CLAMP_TO_GROUND
    assert p.extrude is False
    assert p.attrs == {}


def test_point_from_xyz_keeps_altitude():
    p = Point.from_xyz(2.0, 3.0, 4.0)
    assert p.coord.z == 4.0


def test_default_point_is_at_origin():
    assert Point().coord == Coord(0.0, 0.0, None)


def test_line_string_from_coords():
    coords = [Coord(1.0, 1.0), Coord(2.0, 2.0)]
    line = LineString(coords=coords)
    assert line.coords == coords
    assert line.tessellate is False
    assert line.altitude_mode is AltitudeMode.CLAMP_TO_GROUND


def test_line_string_and_ring_differ():
    coords = [Coord(1.0, 1.0), Coord(2.0, 2.0)]
    assert LineString(coords=coords) == LineString(coords=list(coords))
    assert LineString(coords=coords) != LinearRing(coords=coords)


def test_polygon_holds_rings():
    outer = LinearRing(coords=[Coord(-1.0, 2.0, 0.0), Coord(-1.5, 3.0, 0.0)])
    inner = [LinearRing(coords=[Coord(1.0, 1.0)])]
    poly = Polygon(outer=outer, inner=inner)
    assert poly.outer is outer
    assert poly.inner == inner
    assert Polygon().inner == []


def test_defaults_are_not_shared():
    a = Polygon()
    b = Polygon()
    a.inner.append(LinearRing())
    a.attrs["id"] = "x"
    assert b.inner == []
    assert b.attrs == {}


def test_multi_geometry_nesting():
    inner = MultiGeometry(geometries=[Point.from_xyz(1.0, 1.0)])
    outer = MultiGeometry(geometries=[inner, LineString(coords=[Coord(1.0, 1.0)])])
    assert outer.geometries[0] == inner
    assert len(outer.geometries) == 2


def test_scale_defaults_to_one():
    scale = Scale()
    assert (scale.x, scale.y, scale.z) == (1.0, 1.0, 1.0)


def test_orientation_and_location_defaults():
    assert Orientation() == Orientation(roll=0.0, tilt=0.0, heading=0.0)
    assert Location() == Location(latitude=0.0, longitude=0.0, altitude=0.0)


def test_location_positional_order_is_latitude_first():
    loc = Location(-118.98, 39.55, 1223.0)
    assert loc.latitude == -118.98
    assert loc.longitude == 39.55


def test_placemark_defaults():
    pm = Placemark()
    assert pm.name is None
    assert pm.geometry is None
    assert pm.children == []


def test_element_children():
    child = Element(name="value", content="86")
    parent = Element(name="data", children=[child])
    assert parent.children[0].content == "86"
    assert parent != Element(name="data")