"""Reading styles, style maps and link elements from KML events."""

from __future__ import annotations

import re
from collections.abc import Iterator

from .coord import _parse_float
from .errors import NumParseError
from .link import Link, LinkTypeIcon, RefreshMode, ViewRefreshMode
from .style import (
    BalloonStyle,
    ColorMode,
    Icon,
    IconStyle,
    LabelStyle,
    LineStyle,
    ListStyle,
    Pair,
    PolyStyle,
    Style,
    StyleMap,
    Units,
    Vec2,
)
from .xmlevents import EventKind, EventReader, XmlEvent

_U32_RE = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1


def _child_starts(events: EventReader, end_tag: str) -> Iterator[XmlEvent]:
    """Yield child start tags until ``end_tag`` closes or an unexpected event arrives."""
    while True:
        event = events.next_event()
        if event.kind is EventKind.START:
            yield event
        elif event.kind is EventKind.END:
            if event.local_name == end_tag:
                return
        elif event.kind is EventKind.COMMENT:
            continue
        else:
            return


def _split_id(attrs: dict[str, str]) -> tuple[str | None, dict[str, str]]:
    rest = dict(attrs)
    return rest.pop("id", None), rest


def _parse_u32(text: str) -> int:
    if not _U32_RE.fullmatch(text):
        raise NumParseError(text)
    value = int(text)
    if value > _U32_MAX:
        raise NumParseError(text)
    return value


def read_style(events: EventReader, attrs: dict[str, str]) -> Style:
    """Read a ``Style``; the ``id`` attribute is moved to its own field."""
    style_id, rest = _split_id(attrs)
    style = Style(id=style_id, attrs=rest)
    for event in _child_starts(events, "Style"):
        name = event.local_name
        if name == "BalloonStyle":
            style.balloon = read_balloon_style(events, event.attrs)
        elif name == "IconStyle":
            style.icon = read_icon_style(events, event.attrs)
        elif name == "LabelStyle":
            style.label = read_label_style(events, event.attrs)
        elif name == "LineStyle":
            style.line = read_line_style(events, event.attrs)
        elif name == "PolyStyle":
            style.poly = read_poly_style(events, event.attrs)
        elif name == "ListStyle":
            style.list = read_list_style(events, event.attrs)
    return style


def read_style_map(events: EventReader, attrs: dict[str, str]) -> StyleMap:
    """Read a ``StyleMap`` and its pairs."""
    map_id, rest = _split_id(attrs)
    style_map = StyleMap(id=map_id, attrs=rest)
    for event in _child_starts(events, "StyleMap"):
        if event.local_name == "Pair":
            style_map.pairs.append(read_pair(events, event.attrs))
    return style_map


def read_pair(events: EventReader, attrs: dict[str, str]) -> Pair:
    """Read a ``Pair`` of a style map."""
    pair = Pair(attrs=attrs)
    for event in _child_starts(events, "Pair"):
        if event.local_name == "key":
            pair.key = events.read_str()
        elif event.local_name == "styleUrl":
            pair.style_url = events.read_str()
    return pair


def read_balloon_style(events: EventReader, attrs: dict[str, str]) -> BalloonStyle:
    """Read a ``BalloonStyle``; ``displayMode`` of ``hide`` turns display off."""
    style_id, rest = _split_id(attrs)
    balloon = BalloonStyle(id=style_id, attrs=rest)
    for event in _child_starts(events, "BalloonStyle"):
        name = event.local_name
        if name == "bgColor":
            balloon.bg_color = events.read_str()
        elif name == "textColor":
            balloon.text_color = events.read_str()
        elif name == "text":
            balloon.text = events.read_str()
        elif name == "displayMode":
            balloon.display = events.read_str() != "hide"
    return balloon


def _read_hot_spot(attrs: dict[str, str]) -> Vec2 | None:
    x_str = attrs.get("x")
    y_str = attrs.get("y")
    if x_str is None or y_str is None:
        return None
    x = _parse_float(x_str)
    y = _parse_float(y_str)
    xunits = Units.from_str(attrs["xunits"]) if "xunits" in attrs else Units.FRACTION
    yunits = Units.from_str(attrs["yunits"]) if "yunits" in attrs else Units.FRACTION
    return Vec2(x=x, y=y, xunits=xunits, yunits=yunits)


def _read_basic_icon(events: EventReader, attrs: dict[str, str]) -> Icon:
    icon = Icon(attrs=attrs)
    for event in _child_starts(events, "Icon"):
        if event.local_name == "href":
            icon.href = events.read_str()
    return icon


def read_icon_style(events: EventReader, attrs: dict[str, str]) -> IconStyle:
    """Read an ``IconStyle`` including its hot spot and basic icon."""
    style_id, rest = _split_id(attrs)
    icon_style = IconStyle(id=style_id, attrs=rest)
    for event in _child_starts(events, "IconStyle"):
        name = event.local_name
        if name == "scale":
            icon_style.scale = events.read_float()
        elif name == "heading":
            icon_style.heading = events.read_float()
        elif name == "hotSpot":
            hot_spot = _read_hot_spot(event.attrs)
            if hot_spot is not None:
                icon_style.hot_spot = hot_spot
        elif name == "Icon":
            icon_style.icon = _read_basic_icon(events, event.attrs)
        elif name == "color":
            icon_style.color = events.read_str()
        elif name == "colorMode":
            icon_style.color_mode = ColorMode.from_str(events.read_str())
    return icon_style


def read_label_style(events: EventReader, attrs: dict[str, str]) -> LabelStyle:
    """Read a ``LabelStyle``."""
    style_id, rest = _split_id(attrs)
    label = LabelStyle(id=style_id, attrs=rest)
    for event in _child_starts(events, "LabelStyle"):
        name = event.local_name
        if name == "color":
            label.color = events.read_str()
        elif name == "colorMode":
            label.color_mode = ColorMode.from_str(events.read_str())
        elif name == "scale":
            label.scale = events.read_float()
    return label


def read_line_style(events: EventReader, attrs: dict[str, str]) -> LineStyle:
    """Read a ``LineStyle``."""
    style_id, rest = _split_id(attrs)
    line = LineStyle(id=style_id, attrs=rest)
    for event in _child_starts(events, "LineStyle"):
        name = event.local_name
        if name == "color":
            line.color = events.read_str()
        elif name == "colorMode":
            line.color_mode = ColorMode.from_str(events.read_str())
        elif name == "width":
            line.width = events.read_float()
    return line


def read_poly_style(events: EventReader, attrs: dict[str, str]) -> PolyStyle:
    """Read a ``PolyStyle``; ``fill`` and ``outline`` are false only for ``false`` or ``0``."""
    style_id, rest = _split_id(attrs)
    poly = PolyStyle(id=style_id, attrs=rest)
    for event in _child_starts(events, "PolyStyle"):
        name = event.local_name
        if name == "color":
            poly.color = events.read_str()
        elif name == "colorMode":
            poly.color_mode = ColorMode.from_str(events.read_str())
        elif name == "fill":
            poly.fill = events.read_str() not in ("false", "0")
        elif name == "outline":
            poly.outline = events.read_str() not in ("false", "0")
    return poly


def read_list_style(events: EventReader, attrs: dict[str, str]) -> ListStyle:
    """Read a ``ListStyle``."""
    style_id, rest = _split_id(attrs)
    list_style = ListStyle(id=style_id, attrs=rest)
    for event in _child_starts(events, "ListStyle"):
        name = event.local_name
        if name == "bgColor":
            list_style.bg_color = events.read_str()
        elif name == "maxSnippetLines":
            list_style.max_snippet_lines = _parse_u32(events.read_str())
    return list_style


def _read_link_fields(events: EventReader, link: Link | LinkTypeIcon, end_tag: str) -> None:
    for event in _child_starts(events, end_tag):
        name = event.local_name
        if name == "href":
            link.href = events.read_str()
        elif name == "refreshMode":
            link.refresh_mode = RefreshMode.from_str(events.read_str())
        elif name == "refreshInterval":
            link.refresh_interval = events.read_float()
        elif name == "viewRefreshMode":
            link.view_refresh_mode = ViewRefreshMode.from_str(events.read_str())
        elif name == "viewRefreshTime":
            link.view_refresh_time = events.read_float()
        elif name == "viewBoundScale":
            link.view_bound_scale = events.read_float()
        elif name == "viewFormat":
            link.view_format = events.read_str()
        elif name == "httpQuery":
            link.http_query = events.read_str()


def read_link(events: EventReader, attrs: dict[str, str]) -> Link:
    """Read a ``Link``."""
    link = Link(attrs=attrs)
    _read_link_fields(events, link, "Link")
    return link


def read_link_type_icon(events: EventReader, attrs: dict[str, str]) -> LinkTypeIcon:
    """Read an ``Icon`` in its full link form."""
    icon = LinkTypeIcon(attrs=attrs)
    _read_link_fields(events, icon, "Icon")
    return icon