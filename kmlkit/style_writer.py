"""Writing styles, style maps and sub-styles as KML."""

from __future__ import annotations

from collections.abc import Mapping

from .coord import format_float
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
from .xmlwriter import XmlBuilder


def _attrs_with_id(id_: str | None, attrs: Mapping[str, str]) -> list[tuple[str, str]]:
    """The ``id`` attribute first, when present, then the remaining attributes."""
    leading = [("id", id_)] if id_ is not None else []
    return leading + list(attrs.items())


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def write_style(out: XmlBuilder, style: Style) -> None:
    out.start("Style", _attrs_with_id(style.id, style.attrs))
    if style.balloon is not None:
        write_balloon_style(out, style.balloon)
    if style.icon is not None:
        write_icon_style(out, style.icon)
    if style.label is not None:
        write_label_style(out, style.label)
    if style.line is not None:
        write_line_style(out, style.line)
    if style.poly is not None:
        write_poly_style(out, style.poly)
    if style.list is not None:
        write_list_style(out, style.list)
    out.end("Style")


def write_style_map(out: XmlBuilder, style_map: StyleMap) -> None:
    out.start("StyleMap", _attrs_with_id(style_map.id, style_map.attrs))
    for pair in style_map.pairs:
        write_pair(out, pair)
    out.end("StyleMap")


def write_pair(out: XmlBuilder, pair: Pair) -> None:
    out.start("Pair", pair.attrs)
    out.text_element("key", pair.key)
    out.text_element("styleUrl", pair.style_url)
    out.end("Pair")


def write_balloon_style(out: XmlBuilder, balloon_style: BalloonStyle) -> None:
    out.start("BalloonStyle", _attrs_with_id(balloon_style.id, balloon_style.attrs))
    if balloon_style.bg_color is not None:
        out.text_element("bgColor", balloon_style.bg_color)
    out.text_element("textColor", balloon_style.text_color)
    if balloon_style.text is not None:
        out.text_element("text", balloon_style.text)
    if not balloon_style.display:
        out.text_element("displayMode", "hide")
    out.end("BalloonStyle")


def write_icon_style(out: XmlBuilder, icon_style: IconStyle) -> None:
    out.start("IconStyle", _attrs_with_id(icon_style.id, icon_style.attrs))
    out.text_element("scale", format_float(icon_style.scale))
    out.text_element("heading", format_float(icon_style.heading))
    hot_spot = icon_style.hot_spot
    if hot_spot is not None:
        out.start(
            "hotSpot",
            [
                ("x", format_float(hot_spot.x)),
                ("y", format_float(hot_spot.y)),
                ("xunits", str(hot_spot.xunits)),
                ("yunits", str(hot_spot.yunits)),
            ],
        )
        out.end("hotSpot")
    out.text_element("color", icon_style.color)
    out.text_element("colorMode", str(icon_style.color_mode))
    write_icon(out, icon_style.icon)
    out.end("IconStyle")


def write_icon(out: XmlBuilder, icon: Icon) -> None:
    """Write a basic ``Icon``; only its ``href`` is written."""
    out.start("Icon")
    out.text_element("href", icon.href)
    out.end("Icon")


def write_label_style(out: XmlBuilder, label_style: LabelStyle) -> None:
    out.start("LabelStyle", _attrs_with_id(label_style.id, label_style.attrs))
    out.text_element("color", label_style.color)
    out.text_element("colorMode", str(label_style.color_mode))
    out.text_element("scale", format_float(label_style.scale))
    out.end("LabelStyle")


def write_line_style(out: XmlBuilder, line_style: LineStyle) -> None:
    out.start("LineStyle", _attrs_with_id(line_style.id, line_style.attrs))
    out.text_element("color", line_style.color)
    out.text_element("colorMode", str(line_style.color_mode))
    out.text_element("width", format_float(line_style.width))
    out.end("LineStyle")


def write_poly_style(out: XmlBuilder, poly_style: PolyStyle) -> None:
    out.start("PolyStyle", _attrs_with_id(poly_style.id, poly_style.attrs))
    out.text_element("color", poly_style.color)
    out.text_element("colorMode", str(poly_style.color_mode))
    out.text_element("fill", _bool_text(poly_style.fill))
    out.text_element("outline", _bool_text(poly_style.outline))
    out.end("PolyStyle")


def write_list_style(out: XmlBuilder, list_style: ListStyle) -> None:
    out.start("ListStyle", _attrs_with_id(list_style.id, list_style.attrs))
    out.text_element("bgColor", list_style.bg_color)
    out.text_element("maxSnippetLines", str(list_style.max_snippet_lines))
    out.end("ListStyle")