"""A minimal XML builder producing compact output with escaped text."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

_ESCAPES = str.maketrans(
    {"<": "&lt;", ">": "&gt;", "&": "&amp;", "'": "&apos;", '"': "&quot;"}
)


def _escape(text: str) -> str:
    return text.translate(_ESCAPES)


class XmlBuilder:
    """Accumulates XML events into a string without added whitespace."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def start(
        self,
        tag: str,
        attrs: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
    ) -> None:
        """Open ``tag`` with the given attributes, in the order given."""
        pairs = attrs.items() if isinstance(attrs, Mapping) else (attrs or ())
        rendered = "".join(f' {key}="{_escape(value)}"' for key, value in pairs)
        self._parts.append(f"<{tag}{rendered}>")

    def end(self, tag: str) -> None:
        self._parts.append(f"</{tag}>")

    def text(self, content: str) -> None:
        self._parts.append(_escape(content))

    def text_element(self, tag: str, content: str) -> None:
        """Write ``<tag>content</tag>``."""
        self.start(tag)
        self.text(content)
        self.end(tag)

    def getvalue(self) -> str:
        return "".join(self._parts)