"""Style elements: styles, style maps and their sub-styles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .errors import InvalidColorModeError, InvalidListItemTypeError, InvalidUnitsError


class ColorMode(Enum):
    """``kml:colorMode``."""

    NORMAL = "normal"
    RANDOM = "random"

    @classmethod
    def from_str(cls, s: str) -> ColorMode:
        try:
            return cls(s)
        except ValueError:
            raise InvalidColorModeError(s) from None

    def __str__(self) -> str:
        return self.value


class ListItemType(Enum):
    """``kml:listItemType``."""

    CHECK = "check"
    CHECK_OFF_ONLY = "checkOffOnly"
    CHECK_HIDE_CHILDREN = "checkHideChildren"
    RADIO_FOLDER = "radioFolder"

    @classmethod
    def from_str(cls, s: str) -> ListItemType:
        try:
            return cls(s)
        except ValueError:
            raise InvalidListItemTypeError(s) from None

    def __str__(self) -> str:
        return self.value


class Units(Enum):
    """Units of a hot spot coordinate."""

    FRACTION = "fraction"
    PIXELS = "pixels"
    INSET_PIXELS = "insetPixels"

    @classmethod
    def from_str(cls, s: str) -> Units:
        try:
            return cls(s)
        except ValueError:
            raise InvalidUnitsError(s) from None

    def __str__(self) -> str:
        return self.value


@dataclass
class Vec2:
    """A two-dimensional position with units, as used by ``hotSpot``."""

    x: float = 1.0
    y: float = 1.0
    xunits: Units = Units.FRACTION
    yunits: Units = Units.FRACTION


@dataclass
class Icon:
    """``kml:Icon`` in its basic link form, holding only an ``href``."""

    href: str = ""
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class BalloonStyle:
    """``kml:BalloonStyle``."""

    id: str | None = None
    bg_color: str | None = None
    text_color: str = "ffffffff"
    text: str | None = None
    display: bool = True
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class IconStyle:
    """``kml:IconStyle``."""

    id: str | None = None
    scale: float = 1.0
    heading: float = 0.0
    hot_spot: Vec2 | None = None
    icon: Icon = field(default_factory=Icon)
    color: str = "ffffffff"
    color_mode: ColorMode = ColorMode.NORMAL
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class LabelStyle:
    """``kml:LabelStyle``."""

    id: str | None = None
    color: str = "ffffffff"
    color_mode: ColorMode = ColorMode.NORMAL
    scale: float = 1.0
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class LineStyle:
    """``kml:LineStyle``."""

    id: str | None = None
    color: str = "ffffffff"
    color_mode: ColorMode = ColorMode.NORMAL
    width: float = 1.0
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class PolyStyle:
    """``kml:PolyStyle``."""

    id: str | None = None
    color: str = "ffffffff"
    color_mode: ColorMode = ColorMode.NORMAL
    fill: bool = True
    outline: bool = True
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class ListStyle:
    """``kml:ListStyle``."""

    id: str | None = None
    bg_color: str = "ffffffff"
    max_snippet_lines: int = 2
    list_item_type: ListItemType = ListItemType.CHECK
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class Style:
    """``kml:Style``."""

    id: str | None = None
    balloon: BalloonStyle | None = None
    icon: IconStyle | None = None
    label: LabelStyle | None = None
    line: LineStyle | None = None
    poly: PolyStyle | None = None
    list: ListStyle | None = None
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class Pair:
    """``kml:Pair`` inside a style map."""

    key: str = ""
    style_url: str = ""
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class StyleMap:
    """``kml:StyleMap``."""

    id: str | None = None
    pairs: list[Pair] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict)