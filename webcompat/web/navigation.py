"""
Navigation types and the modern navigation delegate contract
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Callable, Dict, Optional


class NavigationActionPolicy(Enum):
    ALLOW = "allow"
    CANCEL = "cancel"


class NavigationType(IntEnum):
    """Legacy navigation type codes, in the legacy engine's numbering"""

    LINK_CLICKED = 0
    FORM_SUBMITTED = 1
    BACK_FORWARD = 2
    RELOAD = 3
    FORM_RESUBMITTED = 4
    OTHER = 5

    @classmethod
    def from_legacy(cls, value: Any) -> "NavigationType":
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            return cls.OTHER


class Navigation:
    """Opaque token for one navigation event. Carries no state."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"<Navigation at {id(self):#x}>"


@dataclass(frozen=True)
class URLRequest:
    url: str
    method: str = "GET"
    headers: Dict[str, str] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class NavigationAction:
    request: Any
    navigation_type: NavigationType = NavigationType.OTHER

    @property
    def url(self) -> Optional[str]:
        """Best-effort URL of the request, whatever its concrete type"""
        url = getattr(self.request, "url", None)
        if callable(url):
            url = url()
        if url is None:
            return None
        return str(url)


@dataclass(frozen=True)
class Rect:
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    @classmethod
    def from_sequence(cls, values) -> "Rect":
        x, y, width, height = (float(v) for v in values)
        return cls(x, y, width, height)

    def to_native(self):
        """The ((x, y), (width, height)) shape accepted for a native rect"""
        return ((self.x, self.y), (self.width, self.height))


DecisionHandler = Callable[[NavigationActionPolicy], None]


class NavigationDelegate(ABC):
    """Receives navigation events from a WebView"""

    @abstractmethod
    def did_finish(self, web_view, navigation: Navigation) -> None:
        pass

    @abstractmethod
    def did_fail(self, web_view, navigation: Navigation, error: Any) -> None:
        pass

    @abstractmethod
    def decide_policy(self, web_view, navigation_action: NavigationAction,
                      decision_handler: DecisionHandler) -> None:
        """Call ``decision_handler`` before returning.

        A decision made after this method returns arrives too late for the
        legacy engine and is ignored; navigation is then allowed.
        """
