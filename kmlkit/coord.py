"""Coordinates, altitude modes and number formatting."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from .errors import CoordEmptyError, InvalidAltitudeModeError, NumParseError


def _parse_float(text: str) -> float:
    """Parse a float strictly: no surrounding whitespace and no underscores."""
    if text != text.strip() or "_" in text:
        raise NumParseError(text)
    try:
        return float(text)
    except ValueError:
        raise NumParseError(text) from None


def format_float(value: float) -> str:
    """Format a float in its shortest form, without exponent or trailing ``.0``."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class Coord:
    """A coordinate tuple; ``z`` is the optional altitude."""

    x: float = 0.0
    y: float = 0.0
    z: float | None = None

    @classmethod
    def from_str(cls, s: str) -> Coord:
        """Parse ``x,y[,z]``; surrounding whitespace is ignored."""
        parts = iter(s.strip().split(","))
        x = _parse_float(next(parts))
        y_str = next(parts, None)
        if y_str is None:
            raise CoordEmptyError()
        y = _parse_float(y_str)
        z_str = next(parts, None)
        z = None if z_str is None else _parse_float(z_str)
        return cls(x, y, z)

    def __str__(self) -> str:
        values = [self.x, self.y] if self.z is None else [self.x, self.y, self.z]
        return ",".join(format_float(v) for v in values)


def coords_from_str(s: str) -> list[Coord]:
    """Parse whitespace-separated coordinate tuples."""
    return [Coord.from_str(part) for part in s.split()]


class AltitudeMode(Enum):
    """``kml:altitudeMode``."""

    CLAMP_TO_GROUND = "clampToGround"
    RELATIVE_TO_GROUND = "relativeToGround"
    ABSOLUTE = "absolute"

    @classmethod
    def from_str(cls, s: str) -> AltitudeMode:
        try:
            return cls(s)
        except ValueError:
            raise InvalidAltitudeModeError(s) from None

    def __str__(self) -> str:
        return self.value