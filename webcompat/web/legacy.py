"""
Legacy engine surface, named by selector.

The legacy types are never imported or subclassed by the adapter: they are
resolved by name at run time and called through ``webcompat.runtime``. The
ABCs below document the surface the adapter binds to, using the PyObjC
method names, and serve as the contract for in-process implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

SET_FRAME = "setFrame:"
SET_DELEGATE = "setDelegate:"
LOAD_REQUEST = "loadRequest:"
STOP_LOADING = "stopLoading"
RELOAD = "reload"
LOAD_HTML_STRING = "loadHTMLString:baseURL:"
EVALUATE_JAVASCRIPT = "stringByEvaluatingJavaScriptFromString:"

LEGACY_WEB_VIEW_SELECTORS = (
    SET_FRAME,
    SET_DELEGATE,
    LOAD_REQUEST,
    STOP_LOADING,
    RELOAD,
    LOAD_HTML_STRING,
    EVALUATE_JAVASCRIPT,
)

DID_START_LOAD = "webViewDidStartLoad:"
DID_FINISH_LOAD = "webViewDidFinishLoad:"
DID_FAIL_LOAD = "webView:didFailLoadWithError:"
SHOULD_START_LOAD = "webView:shouldStartLoadWithRequest:navigationType:"

LEGACY_DELEGATE_SELECTORS = (
    DID_START_LOAD,
    DID_FINISH_LOAD,
    DID_FAIL_LOAD,
    SHOULD_START_LOAD,
)

COOKIES = "cookies"
SET_COOKIE = "setCookie:"

LEGACY_COOKIE_STORAGE_SELECTORS = (COOKIES, SET_COOKIE)


class LegacyWebView(ABC):
    """Selector surface of the legacy web view"""

    @abstractmethod
    def setFrame_(self, frame: Any) -> None:
        pass

    @abstractmethod
    def setDelegate_(self, delegate: Any) -> None:
        pass

    @abstractmethod
    def loadRequest_(self, request: Any) -> None:
        pass

    @abstractmethod
    def stopLoading(self) -> None:
        pass

    @abstractmethod
    def reload(self) -> None:
        pass

    @abstractmethod
    def loadHTMLString_baseURL_(self, html: str, base_url: Any) -> None:
        pass

    @abstractmethod
    def stringByEvaluatingJavaScriptFromString_(self, script: str) -> Any:
        pass


class LegacyCookieStorage(ABC):
    """Selector surface of the legacy shared cookie storage"""

    @abstractmethod
    def cookies(self) -> Any:
        pass

    @abstractmethod
    def setCookie_(self, cookie: Any) -> None:
        pass
