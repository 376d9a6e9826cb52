"""A forgiving XML event stream for KML documents and fragments."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from .coord import _parse_float
from .errors import InvalidXmlEventError, MalformedXmlError
from .geometry import Element

_XML_WHITESPACE = " \t\r\n"

_TAG_RE = re.compile(
    r"""<(/?)([^\s/>!?"'=]+)((?:[^>"']|"[^"]*"|'[^']*')*?)(/?)>"""
)
_ATTR_RE = re.compile(r"""([^\s=/>"']+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")
_ENTITY_RE = re.compile(r"&([^;&]*);")
_NAMED_ENTITIES = {"lt": "<", "gt": ">", "amp": "&", "apos": "'", "quot": '"'}


class EventKind(Enum):
    """The kinds of event produced while reading XML."""

    START = "start"
    END = "end"
    EMPTY = "empty"
    TEXT = "text"
    CDATA = "cdata"
    COMMENT = "comment"
    DECL = "decl"
    PI = "pi"
    DOCTYPE = "doctype"
    EOF = "eof"


@dataclass
class XmlEvent:
    """One XML event; ``name`` and ``attrs`` are set for tags, ``text`` otherwise."""

    kind: EventKind
    name: str = ""
    attrs: dict[str, str] = field(default_factory=dict)
    text: str = ""

    @property
    def local_name(self) -> str:
        """The tag name without its namespace prefix."""
        return self.name.rpartition(":")[2]


def _resolve_entity(name: str) -> str:
    if name in _NAMED_ENTITIES:
        return _NAMED_ENTITIES[name]
    if name.startswith("#x"):
        return chr(int(name[2:], 16))
    if name.startswith("#"):
        return chr(int(name[1:], 10))
    raise ValueError(name)


def _unescape(raw: str) -> str | None:
    """Resolve character and predefined entities; ``None`` if any is invalid."""
    if "&" not in raw:
        return raw
    matches = list(_ENTITY_RE.finditer(raw))
    if raw.count("&") != len(matches):
        return None
    try:
        return _ENTITY_RE.sub(lambda m: _resolve_entity(m.group(1)), raw)
    except (ValueError, OverflowError):
        return None


def _parse_attrs(raw: str) -> dict[str, str]:
    """Collect attributes as written; malformed ones are skipped."""
    return {
        m.group(1): m.group(2) if m.group(2) is not None else m.group(3)
        for m in _ATTR_RE.finditer(raw)
    }


def _text_event(raw: str) -> XmlEvent | None:
    trimmed = raw.strip(_XML_WHITESPACE)
    if not trimmed:
        return None
    unescaped = _unescape(trimmed)
    return XmlEvent(EventKind.TEXT, text=trimmed if unescaped is None else unescaped)


def _find_end(text: str, marker: str, start: int, what: str) -> int:
    end = text.find(marker, start)
    if end == -1:
        raise MalformedXmlError(f"unterminated {what}")
    return end


def _tokenize(text: str) -> Iterator[XmlEvent]:
    pos = 0
    length = len(text)
    while pos < length:
        lt = text.find("<", pos)
        if lt == -1:
            event = _text_event(text[pos:])
            if event is not None:
                yield event
            return
        if lt > pos:
            event = _text_event(text[pos:lt])
            if event is not None:
                yield event
        if text.startswith("<!--", lt):
            end = _find_end(text, "-->", lt + 4, "comment")
            yield XmlEvent(EventKind.COMMENT, text=text[lt + 4 : end])
            pos = end + 3
        elif text.startswith("<![CDATA[", lt):
            end = _find_end(text, "]]>", lt + 9, "CDATA section")
            yield XmlEvent(EventKind.CDATA, text=text[lt + 9 : end])
            pos = end + 3
        elif text.startswith("<!", lt):
            end = _find_end(text, ">", lt + 2, "declaration")
            yield XmlEvent(EventKind.DOCTYPE, text=text[lt + 2 : end])
            pos = end + 1
        elif text.startswith("<?", lt):
            end = _find_end(text, "?>", lt + 2, "processing instruction")
            content = text[lt + 2 : end]
            is_decl = content.startswith("xml") and (
                len(content) == 3 or content[3] in _XML_WHITESPACE
            )
            kind = EventKind.DECL if is_decl else EventKind.PI
            yield XmlEvent(kind, text=content)
            pos = end + 2
        else:
            match = _TAG_RE.match(text, lt)
            if match is None:
                raise MalformedXmlError(f"malformed tag at position {lt}")
            closing, name, raw_attrs, self_closing = match.groups()
            if closing:
                yield XmlEvent(EventKind.END, name=name)
            elif self_closing:
                yield XmlEvent(EventKind.EMPTY, name=name, attrs=_parse_attrs(raw_attrs))
            else:
                yield XmlEvent(EventKind.START, name=name, attrs=_parse_attrs(raw_attrs))
            pos = match.end()


class EventReader:
    """Reads XML events from text, trimming whitespace and checking end tags."""

    def __init__(self, text: str | bytes) -> None:
        if isinstance(text, bytes):
            text = text.decode("utf-8", errors="replace")
        self._events = _tokenize(text)
        self._open: list[str] = []

    def __iter__(self) -> Iterator[XmlEvent]:
        while True:
            event = self.next_event()
            if event.kind is EventKind.EOF:
                return
            yield event

    def next_event(self) -> XmlEvent:
        """Return the next event, or an ``EOF`` event once input is exhausted."""
        event = next(self._events, None)
        if event is None:
            return XmlEvent(EventKind.EOF)
        if event.kind is EventKind.START:
            self._open.append(event.name)
        elif event.kind is EventKind.END:
            if not self._open:
                raise MalformedXmlError(f"unmatched end tag </{event.name}>")
            expected = self._open.pop()
            if expected != event.name:
                raise MalformedXmlError(
                    f"expected </{expected}>, found </{event.name}>"
                )
        return event

    def read_str(self) -> str:
        """Read the text content of the element just opened."""
        event = self.next_event()
        if event.kind in (EventKind.TEXT, EventKind.CDATA):
            return event.text
        if event.kind is EventKind.END:
            return ""
        raise InvalidXmlEventError(repr(event))

    def read_float(self) -> float:
        """Read the element content as a number."""
        return _parse_float(self.read_str())


def read_element(events: EventReader, name: str, attrs: dict[str, str]) -> Element:
    """Read a generic element whose start tag has just been consumed."""
    element = Element(name=name, attrs=attrs)
    while True:
        event = events.next_event()
        if event.kind is EventKind.START:
            element.children.append(read_element(events, event.local_name, event.attrs))
        elif event.kind is EventKind.TEXT:
            element.content = event.text
        elif event.kind is EventKind.END:
            if event.local_name == name:
                break
        elif event.kind is EventKind.COMMENT:
            continue
        else:
            break
    return element