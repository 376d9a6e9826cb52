"""The KML element union, the root document and containers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .data import Alias, ResourceMap, SchemaData, SimpleArrayData, SimpleData
from .errors import InvalidKmlVersionError
from .geometry import (
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
from .link import Link, LinkTypeIcon
from .style import (
    BalloonStyle,
    Icon,
    IconStyle,
    LabelStyle,
    LineStyle,
    ListStyle,
    Pair,
    PolyStyle,
    Style,
    StyleMap,
)


class KmlVersion(Enum):
    """The KML version of a document; 2.3 shares the 2.2 namespace scheme."""

    UNKNOWN = "unknown"
    V22 = "2.2"
    V23 = "2.3"

    @classmethod
    def from_str(cls, s: str) -> KmlVersion:
        """Map a KML namespace to its version."""
        version = _NAMESPACES.get(s)
        if version is None:
            raise InvalidKmlVersionError(s)
        return version


_NAMESPACES = {
    "http://www.opengis.net/kml/2.2": KmlVersion.V22,
    "http://www.opengis.net/kml/2.3": KmlVersion.V23,
}


@dataclass
class KmlDocument:
    """The ``kml`` root element."""

    version: KmlVersion = KmlVersion.UNKNOWN
    attrs: dict[str, str] = field(default_factory=dict)
    elements: list[Kml] = field(default_factory=list)


@dataclass
class Document:
    """``kml:Document`` container."""

    attrs: dict[str, str] = field(default_factory=dict)
    elements: list[Kml] = field(default_factory=list)


@dataclass
class Folder:
    """``kml:Folder`` container."""

    attrs: dict[str, str] = field(default_factory=dict)
    elements: list[Kml] = field(default_factory=list)


Kml = Union[
    KmlDocument,
    Scale,
    Orientation,
    Point,
    Location,
    LineString,
    LinearRing,
    Polygon,
    MultiGeometry,
    Placemark,
    Document,
    Folder,
    Style,
    StyleMap,
    Pair,
    BalloonStyle,
    IconStyle,
    Icon,
    LabelStyle,
    LineStyle,
    PolyStyle,
    ListStyle,
    LinkTypeIcon,
    Link,
    ResourceMap,
    Alias,
    SchemaData,
    SimpleArrayData,
    SimpleData,
    Element,
]