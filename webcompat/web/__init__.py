from .configuration import WebViewConfiguration
from .cookies import Cookie, HTTPCookieStore, WebsiteDataStore
from .engine import WebView, create_web_view, get_default_data_store, reset_default_data_store
from .navigation import (
    Navigation,
    NavigationAction,
    NavigationActionPolicy,
    NavigationDelegate,
    NavigationType,
    Rect,
    URLRequest,
)
from .user_content import (
    ScriptMessage,
    ScriptMessageHandler,
    UserContentController,
    UserScript,
    UserScriptInjectionTime,
)

__all__ = [
    "Cookie",
    "HTTPCookieStore",
    "Navigation",
    "NavigationAction",
    "NavigationActionPolicy",
    "NavigationDelegate",
    "NavigationType",
    "Rect",
    "ScriptMessage",
    "ScriptMessageHandler",
    "URLRequest",
    "UserContentController",
    "UserScript",
    "UserScriptInjectionTime",
    "WebView",
    "WebViewConfiguration",
    "WebsiteDataStore",
    "create_web_view",
    "get_default_data_store",
    "reset_default_data_store",
]
