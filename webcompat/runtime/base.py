from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

STATUS_SUCCESS = "success"
STATUS_UNSUPPORTED = "unsupported"
STATUS_ERROR = "error"


@dataclass
class Capability:
    name: str
    available: bool
    notes: str = ""


@dataclass
class InvocationResult:
    """Outcome of one dynamic call. ``value`` is meaningful only on success."""

    selector: str
    status: str
    value: Any = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_SUCCESS

    @property
    def unsupported(self) -> bool:
        return self.status == STATUS_UNSUPPORTED

    @classmethod
    def success(cls, selector: str, value: Any = None) -> "InvocationResult":
        return cls(selector, STATUS_SUCCESS, value)

    @classmethod
    def not_supported(cls, selector: str) -> "InvocationResult":
        return cls(selector, STATUS_UNSUPPORTED)

    @classmethod
    def failed(cls, selector: str, error: BaseException) -> "InvocationResult":
        return cls(selector, STATUS_ERROR, error=error)
