"""``kml:Link`` and ``kml:Icon`` link types and their refresh modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .errors import InvalidRefreshModeError, InvalidViewRefreshModeError


class RefreshMode(Enum):
    """``kml:refreshModeEnumType``."""

    ON_CHANGE = "onChange"
    ON_INTERVAL = "onInterval"
    ON_EXPIRE = "onExpire"

    @classmethod
    def from_str(cls, s: str) -> RefreshMode:
        try:
            return cls(s)
        except ValueError:
            raise InvalidRefreshModeError(s) from None

    def __str__(self) -> str:
        return self.value


class ViewRefreshMode(Enum):
    """``kml:viewRefreshModeEnumType``."""

    NEVER = "never"
    ON_REQUEST = "onRequest"
    ON_STOP = "onStop"
    ON_REGION = "onRegion"

    @classmethod
    def from_str(cls, s: str) -> ViewRefreshMode:
        try:
            return cls(s)
        except ValueError:
            raise InvalidViewRefreshModeError(s) from None

    def __str__(self) -> str:
        return self.value


@dataclass
class _LinkFields:
    href: str | None = None
    refresh_mode: RefreshMode | None = None
    refresh_interval: float = 4.0
    view_refresh_mode: ViewRefreshMode | None = None
    view_refresh_time: float = 4.0
    view_bound_scale: float = 1.0
    view_format: str | None = None
    http_query: str | None = None
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class Link(_LinkFields):
    """``kml:Link``."""


@dataclass
class LinkTypeIcon(_LinkFields):
    """``kml:Icon`` in its full link form."""