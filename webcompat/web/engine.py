"""
Web Engine Adapter
Modern web view surface backed by a legacy engine resolved by name at run time
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional, Union
from urllib.parse import urlparse

from ..config import get_config
from ..errors import WebCompatError
from ..runtime import CapabilityMap, InvocationResult, instantiate, invoke, resolve_type, supports
from ..utils.logging import default_log, get_logger
from .configuration import WebViewConfiguration
from .cookies import WebsiteDataStore
from .delegate import LegacyWebViewDelegate
from .legacy import (
    EVALUATE_JAVASCRIPT,
    LEGACY_WEB_VIEW_SELECTORS,
    LOAD_HTML_STRING,
    LOAD_REQUEST,
    RELOAD,
    SET_DELEGATE,
    SET_FRAME,
    STOP_LOADING,
)
from .navigation import NavigationDelegate, Rect, URLRequest

logger = get_logger(__name__)

DEFAULT_LEGACY_CLASS = "UIWebView"

CompletionHandler = Callable[[Any, Optional[BaseException]], None]


def _coerce_base_url(base_url: Optional[str]) -> Optional[str]:
    if not base_url:
        return None
    if not urlparse(base_url).scheme:
        return None
    return base_url


class WebView:
    """Modern web view whose every operation is a named call on a legacy engine.

    When the legacy engine type cannot be resolved the view stays degraded for
    its whole life: operations do nothing and evaluate_javascript completes
    with ``(None, None)``.
    """

    def __init__(self, frame: Optional[Rect] = None,
                 configuration: Optional[WebViewConfiguration] = None,
                 legacy_class: Optional[str] = None,
                 log: Optional[Callable[[str, str], None]] = None):
        self.log = log or default_log
        self._configuration = configuration or WebViewConfiguration()
        self.navigation_delegate: Optional[NavigationDelegate] = None
        self.custom_user_agent: Optional[str] = None
        self.url: Optional[str] = None

        self._internal_web_view: Any = None
        self._internal_delegate: Optional[LegacyWebViewDelegate] = None

        engine_config = get_config().get('web_engine') or {}
        if not isinstance(engine_config, dict):
            self.log(f"Ignoring malformed web_engine settings: {engine_config!r}", "Warning")
            engine_config = {}
        self.legacy_class = legacy_class or engine_config.get('legacy_class') or DEFAULT_LEGACY_CLASS
        if frame is None:
            frame = self._configured_frame(engine_config.get('frame'))

        web_view_class = resolve_type(self.legacy_class)
        if web_view_class is not None:
            self._internal_web_view = instantiate(web_view_class)

        if self._internal_web_view is None:
            self.capabilities = CapabilityMap.unavailable(self.legacy_class, LEGACY_WEB_VIEW_SELECTORS)
            self.log(f"{self.legacy_class} not found at runtime; web view is inert", "Warning")
            return

        self.capabilities = CapabilityMap.probe(
            self._internal_web_view, LEGACY_WEB_VIEW_SELECTORS, self.legacy_class)
        missing = self.capabilities.get_unavailable_capabilities()
        if missing:
            self.log(f"{self.legacy_class} lacks {', '.join(sorted(missing))}", "Warning")

        if supports(self._internal_web_view, SET_FRAME):
            self._dispatch(SET_FRAME, frame.to_native())

        self._internal_delegate = LegacyWebViewDelegate(self)
        self._dispatch(SET_DELEGATE, self._internal_delegate)

        self._configuration.user_content_controller.attach(self)

    def _configured_frame(self, values: Any) -> Rect:
        if values is None:
            return Rect()
        try:
            return Rect.from_sequence(values)
        except (TypeError, ValueError) as e:
            self.log(f"Ignoring malformed web_engine.frame {values!r}: {e}", "Warning")
            return Rect()

    # Properties

    @property
    def configuration(self) -> WebViewConfiguration:
        return self._configuration

    @property
    def is_available(self) -> bool:
        return self._internal_web_view is not None

    @property
    def internal_view(self) -> Any:
        """The legacy engine instance, for embedding into a view hierarchy"""
        return self._internal_web_view

    # Dispatch

    def _dispatch(self, selector: str, *args: Any) -> Optional[InvocationResult]:
        if self._internal_web_view is None:
            return None
        try:
            result = invoke(self._internal_web_view, selector, *args)
        except WebCompatError as e:
            self.log(f"{selector} rejected: {e}", "Error")
            return None
        if result.unsupported:
            logger.debug(f"{self.legacy_class} does not support {selector}")
        elif not result.ok:
            self.log(f"{selector} failed: {result.error}", "Error")
        return result

    # Web methods

    def load(self, request: Union[URLRequest, str]) -> None:
        if isinstance(request, str):
            request = URLRequest(request)
        self.url = request.url
        self._dispatch(LOAD_REQUEST, request)

    def stop_loading(self) -> None:
        self._dispatch(STOP_LOADING)

    def reload(self) -> None:
        self._dispatch(RELOAD)

    def load_html_string(self, html_content: str, base_url: Optional[str] = None) -> None:
        self._dispatch(LOAD_HTML_STRING, html_content, _coerce_base_url(base_url))

    def evaluate_javascript(self, script: str,
                            completion_handler: Optional[CompletionHandler] = None) -> Any:
        """Evaluate ``script`` synchronously; the completion runs before returning."""
        result = self._dispatch(EVALUATE_JAVASCRIPT, script)
        value = result.value if result is not None and result.ok else None
        if completion_handler is not None:
            completion_handler(value, None)
        return value


# Composition root: the only process-wide cookie store lives here

_default_data_store: Optional[WebsiteDataStore] = None
_data_store_lock = threading.Lock()


def get_default_data_store() -> WebsiteDataStore:
    """Get or create the shared website data store"""
    global _default_data_store

    with _data_store_lock:
        if _default_data_store is None:
            logger.info("Creating default website data store")
            _default_data_store = WebsiteDataStore()
        return _default_data_store


def reset_default_data_store() -> None:
    """Drop the shared data store so the next access resolves it again"""
    global _default_data_store

    with _data_store_lock:
        _default_data_store = None


def create_web_view(frame: Optional[Rect] = None,
                    configuration: Optional[WebViewConfiguration] = None,
                    **kwargs: Any) -> WebView:
    """Create a WebView wired to the shared data store and configured media flags"""
    if configuration is None:
        configuration = WebViewConfiguration.from_config(website_data_store=get_default_data_store())
    return WebView(frame, configuration, **kwargs)
