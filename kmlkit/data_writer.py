"""Writing links, resource maps, aliases and extended data as KML."""

from __future__ import annotations

from collections.abc import Mapping

from .coord import format_float
from .data import Alias, ResourceMap, SchemaData, SimpleArrayData, SimpleData
from .link import Link, LinkTypeIcon
from .xmlwriter import XmlBuilder


def _attrs_with_name(name: str, attrs: Mapping[str, str]) -> list[tuple[str, str]]:
    """The ``name`` attribute first, then the others except any other ``name``."""
    return [("name", name)] + [(k, v) for k, v in attrs.items() if k != "name"]


def _write_link_fields(out: XmlBuilder, tag: str, link: Link | LinkTypeIcon) -> None:
    out.start(tag, link.attrs)
    if link.href is not None:
        out.text_element("href", link.href)
    if link.refresh_mode is not None:
        out.text_element("refreshMode", str(link.refresh_mode))
    out.text_element("refreshInterval", format_float(link.refresh_interval))
    if link.view_refresh_mode is not None:
        out.text_element("viewRefreshMode", str(link.view_refresh_mode))
    out.text_element("viewRefreshTime", format_float(link.view_refresh_time))
    out.text_element("viewBoundScale", format_float(link.view_bound_scale))
    if link.view_format is not None:
        out.text_element("viewFormat", link.view_format)
    if link.http_query is not None:
        out.text_element("httpQuery", link.http_query)
    out.end(tag)


def write_link(out: XmlBuilder, link: Link) -> None:
    _write_link_fields(out, "Link", link)


def write_link_type_icon(out: XmlBuilder, icon: LinkTypeIcon) -> None:
    _write_link_fields(out, "Icon", icon)


def write_resource_map(out: XmlBuilder, resource_map: ResourceMap) -> None:
    out.start("ResourceMap", resource_map.attrs)
    for alias in resource_map.aliases:
        write_alias(out, alias)
    out.end("ResourceMap")


def write_alias(out: XmlBuilder, alias: Alias) -> None:
    out.start("Alias", alias.attrs)
    if alias.target_href is not None:
        out.text_element("targetHref", alias.target_href)
    if alias.source_href is not None:
        out.text_element("sourceHref", alias.source_href)
    out.end("Alias")


def write_schema_data(out: XmlBuilder, schema_data: SchemaData) -> None:
    out.start("SchemaData", schema_data.attrs)
    for simple_data in schema_data.data:
        write_simple_data(out, simple_data)
    for simple_array_data in schema_data.arrays:
        write_simple_array_data(out, simple_array_data)
    out.end("SchemaData")


def write_simple_data(out: XmlBuilder, simple_data: SimpleData) -> None:
    out.start("SimpleData", _attrs_with_name(simple_data.name, simple_data.attrs))
    out.text(simple_data.value)
    out.end("SimpleData")


def write_simple_array_data(out: XmlBuilder, simple_array_data: SimpleArrayData) -> None:
    out.start(
        "SimpleArrayData",
        _attrs_with_name(simple_array_data.name, simple_array_data.attrs),
    )
    for value in simple_array_data.values:
        out.text_element("value", value)
    out.end("SimpleArrayData")