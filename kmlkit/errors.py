"""Exceptions raised while reading and writing KML."""

from __future__ import annotations


class KmlError(ValueError):
    """Base class for every KML error; ``detail`` holds the offending value."""

    template = "{0}"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(self.template.format(detail))


class InvalidInputError(KmlError):
    """The input could not be used as XML."""

    template = "Invalid input supplied for XML"


class MalformedXmlError(KmlError):
    """The XML parser rejected the document."""

    template = "Encountered malformed XML: {0}"


class InvalidXmlEventError(KmlError):
    """An XML event appeared where it is not allowed."""

    template = "Invalid XML event: {0}"


class CoordEmptyError(KmlError):
    """A coordinate tuple is missing a component."""

    template = "Coordinate empty"


class NoElementsError(KmlError):
    """The document held no KML elements."""

    template = "No KML elements found"


class NumParseError(KmlError):
    """A number could not be parsed."""

    template = "Error parsing number from: {0}"


class InvalidKmlVersionError(KmlError):
    """The KML namespace does not name a known version."""

    template = "Invalid KML version: {0}"


class InvalidKmlElementError(KmlError):
    """An element is not valid KML."""

    template = "Invalid KML element: {0}"


class InvalidGeometryError(KmlError):
    """A geometry is missing required parts or cannot be converted."""

    template = "Geometry is invalid: {0}"


class InvalidAltitudeModeError(KmlError):
    """Unknown ``altitudeMode`` value."""

    template = "Invalid altitude mode: {0}"


class InvalidColorModeError(KmlError):
    """Unknown ``colorMode`` value."""

    template = "Invalid color mode: {0}"


class InvalidListItemTypeError(KmlError):
    """Unknown ``listItemType`` value."""

    template = "Invalid list item type: {0}"


class InvalidRefreshModeError(KmlError):
    """Unknown ``refreshMode`` value."""

    template = "Invalid refresh mode: {0}"


class InvalidViewRefreshModeError(KmlError):
    """Unknown ``viewRefreshMode`` value."""

    template = "Invalid view refresh mode: {0}"


class InvalidUnitsError(KmlError):
    """Unknown hot spot units value."""

    template = "Invalid units: {0}"