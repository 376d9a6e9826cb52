"""Extended data, aliases and resource maps."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SimpleData:
    """``kml:SimpleData``."""

    name: str = ""
    value: str = ""
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class SimpleArrayData:
    """``kml:SimpleArrayData``."""

    name: str = ""
    values: list[str] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class SchemaData:
    """``kml:SchemaData``."""

    data: list[SimpleData] = field(default_factory=list)
    arrays: list[SimpleArrayData] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class Alias:
    """``kml:Alias``."""

    target_href: str | None = None
    source_href: str | None = None
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class ResourceMap:
    """``kml:ResourceMap``."""

    aliases: list[Alias] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict)