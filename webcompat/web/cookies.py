"""
Cookie store shim over the legacy shared cookie storage
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from ..config import get_config
from ..runtime import invoke, resolve_type
from ..utils.logging import default_log
from .legacy import COOKIES, SET_COOKIE

_MISSING = object()


@dataclass(frozen=True)
class Cookie:
    name: str
    value: str


def _read_field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name, _MISSING)
    value = getattr(record, name, _MISSING)
    if callable(value):
        # Bridged records expose fields as zero-argument accessors
        value = value()
    return value


def _to_cookie(record: Any) -> Optional[Cookie]:
    name = _read_field(record, "name")
    value = _read_field(record, "value")
    if name is _MISSING or value is _MISSING or name is None:
        return None
    return Cookie(name=str(name), value="" if value is None else str(value))


class HTTPCookieStore:
    """Reads and writes cookies on the legacy shared storage by selector name.

    The storage object is resolved once, at construction. Cookie reads always
    go back to the storage.
    """

    def __init__(self, storage: Any = None, storage_class: Optional[str] = None,
                 shared_accessor: Optional[str] = None,
                 log: Optional[Callable[[str, str], None]] = None):
        self.log = log or default_log
        if storage is None:
            cookie_config = get_config().get('cookies') or {}
            storage = self._resolve_storage(
                storage_class or cookie_config.get('storage_class', 'NSHTTPCookieStorage'),
                shared_accessor or cookie_config.get('shared_accessor', 'sharedHTTPCookieStorage'),
            )
        self._storage = storage

    def _resolve_storage(self, storage_class: str, shared_accessor: str) -> Any:
        storage_type = resolve_type(storage_class)
        if storage_type is None:
            self.log(f"Cookie storage '{storage_class}' not found at runtime", "Warning")
            return None

        try:
            result = invoke(storage_type, shared_accessor)
        except TypeError as e:
            self.log(f"Cookie storage '{storage_class}' rejected '{shared_accessor}': {e}", "Warning")
            return None
        if not result.ok or result.value is None:
            self.log(f"Cookie storage '{storage_class}' has no usable '{shared_accessor}'", "Warning")
            return None
        return result.value

    @property
    def is_available(self) -> bool:
        return self._storage is not None

    def get_all_cookies(self, callback: Optional[Callable[[List[Cookie]], None]] = None) -> List[Cookie]:
        """Return every cookie in the storage; empty when it cannot be read."""
        cookies: List[Cookie] = []
        result = None
        if self._storage is not None:
            try:
                result = invoke(self._storage, COOKIES)
            except TypeError as e:
                self.log(f"Cookie storage rejected '{COOKIES}': {e}", "Warning")

        if result is not None and result.ok and result.value is not None:
            try:
                records = list(result.value)
            except Exception as e:
                self.log(f"Cookie storage returned an unreadable collection: {e}", "Warning")
                records = []
            for record in records:
                try:
                    cookie = _to_cookie(record)
                except Exception as e:
                    self.log(f"Skipping cookie record whose fields could not be read: {e}", "Debug")
                    continue
                if cookie is None:
                    self.log(f"Skipping unreadable cookie record: {record!r}", "Debug")
                    continue
                cookies.append(cookie)

        if callback is not None:
            callback(cookies)
        return cookies

    def set_cookie(self, cookie: Any) -> None:
        """Hand ``cookie`` to the storage. There is no completion signal."""
        if self._storage is None:
            self.log("set_cookie ignored: cookie storage unavailable", "Debug")
            return
        try:
            result = invoke(self._storage, SET_COOKIE, cookie)
        except TypeError as e:
            self.log(f"set_cookie rejected by storage: {e}", "Warning")
            return
        if not result.ok:
            self.log(f"set_cookie did not complete ({result.status}): {result.error}", "Warning")


@dataclass
class WebsiteDataStore:
    http_cookie_store: HTTPCookieStore = field(default_factory=HTTPCookieStore)
