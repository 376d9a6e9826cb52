# kmlkit

KML (Keyhole Markup Language) elements as plain Python dataclasses. The
package also has functions that read each kind of element from an XML event
stream and write it back out as compact KML text.

It has no dependencies beyond the standard library and needs Python 3.10 or
newer.

```
pip install kmlkit
```

## The types

| Module | Contents |
| --- | --- |
| `kmlkit.coord` | `Coord`, `coords_from_str`, `AltitudeMode`, `format_float` |
| `kmlkit.geometry` | `Point`, `LineString`, `LinearRing`, `Polygon`, `MultiGeometry`, `Location`, `Orientation`, `Scale`, `Placemark`, `Element` |
| `kmlkit.style` | `Style`, `StyleMap`, `Pair`, `BalloonStyle`, `IconStyle`, `Icon`, `LabelStyle`, `LineStyle`, `PolyStyle`, `ListStyle`, `Vec2`, `ColorMode`, `ListItemType`, `Units` |
| `kmlkit.link` | `Link`, `LinkTypeIcon`, `RefreshMode`, `ViewRefreshMode` |
| `kmlkit.data` | `SchemaData`, `SimpleData`, `SimpleArrayData`, `Alias`, `ResourceMap` |
| `kmlkit.kml` | `KmlDocument`, `Document`, `Folder`, `KmlVersion`, and the `Kml` union of all element types |

Defaults follow KML. Every `Scale` axis is 1, and a `Link` refreshes every 4
seconds with a view bound scale of 1. Style colours are `ffffffff`. Each
enumeration has a `from_str` class method that takes its KML spelling, and
`str()` gives that spelling back:

```python
from kmlkit.coord import AltitudeMode

AltitudeMode.from_str("relativeToGround")   # AltitudeMode.RELATIVE_TO_GROUND
str(AltitudeMode.ABSOLUTE)                   # 'absolute'
```

`KmlVersion.from_str` maps the 2.2 and 2.3 KML namespace URIs to versions.

## Coordinates

```python
from kmlkit.coord import Coord, coords_from_str, format_float

Coord.from_str(" 1.0,2.0,3 ")   # Coord(x=1.0, y=2.0, z=3.0)
coords_from_str("1,1\n\n 2,2 ") # [Coord(x=1.0, y=1.0, z=None), Coord(x=2.0, y=2.0, z=None)]
str(Coord(1.5, 2.0))             # '1.5,2'
format_float(13.0)               # '13'
```

Any whitespace separates coordinate tuples. The third value, the altitude, is
optional.

## Reading elements

`kmlkit.xmlevents.EventReader` turns KML text (`str` or UTF-8 `bytes`) into a
stream of `XmlEvent`s. It trims whitespace around text, resolves the predefined
and numeric character entities, and raises `MalformedXmlError` when an end tag
does not match its start tag.

Each reading function takes the event reader just after an element's start
tag has been consumed, along with that tag's attributes:

```python
from kmlkit.xmlevents import EventReader
from kmlkit.geometry_reader import read_point

events = EventReader("<Point><coordinates>1,1,1</coordinates></Point>")
start = events.next_event()              # the <Point> start tag
point = read_point(events, start.attrs)
point.coord                              # Coord(x=1.0, y=1.0, z=1.0)
```

- `kmlkit.geometry_reader`: `read_point`, `read_line_string`,
  `read_linear_ring`, `read_polygon`, `read_multi_geometry`, `read_placemark`,
  `read_location`, `read_scale`, `read_orientation`
- `kmlkit.style_reader`: `read_style`, `read_style_map`, `read_pair`,
  `read_balloon_style`, `read_icon_style`, `read_label_style`,
  `read_line_style`, `read_poly_style`, `read_list_style`, `read_link`,
  `read_link_type_icon`
- `kmlkit.xmlevents.read_element` reads any element as a generic `Element`
  tree.

A placemark keeps children it does not model as `Element`s. In style elements,
an `id` attribute goes into the `id` field, and the other attributes stay in
`attrs`.

## Writing elements

Writers append to a `kmlkit.xmlwriter.XmlBuilder`. It adds no whitespace and
escapes text and attribute values:

```python
from kmlkit.geometry import Point
from kmlkit.geometry_writer import write_point
from kmlkit.xmlwriter import XmlBuilder

out = XmlBuilder()
write_point(out, Point.from_xyz(1.0, 1.0, 1.0))
out.getvalue()
# '<Point><extrude>0</extrude><altitudeMode>clampToGround</altitudeMode><coordinates>1,1,1</coordinates></Point>'
```

- `kmlkit.geometry_writer`: `write_point`, `write_line_string`,
  `write_linear_ring`, `write_polygon`, `write_multi_geometry`,
  `write_geometry`, `write_location`, `write_scale`, `write_orientation`,
  `write_placemark`, `write_element`
- `kmlkit.style_writer`: `write_style`, `write_style_map`, `write_pair`,
  `write_balloon_style`, `write_icon_style`, `write_icon`,
  `write_label_style`, `write_line_style`, `write_poly_style`,
  `write_list_style`
- `kmlkit.data_writer`: `write_link`, `write_link_type_icon`,
  `write_resource_map`, `write_alias`, `write_schema_data`,
  `write_simple_data`, `write_simple_array_data`

## Errors

Every error is a subclass of `kmlkit.errors.KmlError`, which is itself a
`ValueError`. For example, a bad number raises `NumParseError`, a geometry
without coordinates raises `InvalidGeometryError`, and an unknown
`altitudeMode` raises `InvalidAltitudeModeError`.

## What it does not do

- There is no single call that reads a whole document or file. You drive the
  `EventReader` yourself and pick the reading function for each element.
- Nothing reads `kml`, `Document` or `Folder` containers. There are also no
  reading functions for `ResourceMap`, `Alias`, `SchemaData`, `SimpleData` or
  `SimpleArrayData`, although their writers exist.
- Nothing writes `KmlDocument`, `Document` or `Folder` containers, and there is
  no writer that takes any member of the `Kml` union.
- It does not open KMZ archives, and it has no command-line tool.