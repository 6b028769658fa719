"""
In-process stand-ins for the legacy engine and cookie storage.

They are registered by name, so the adapter finds them exactly as it would
find the platform types: through resolve_type and selector lookups.
"""

import pytest

from webcompat.config import update_config
from webcompat.runtime import register_type
from webcompat.web.legacy import LegacyCookieStorage, LegacyWebView


class FakeLegacyWebView(LegacyWebView):
    """Records every selector call and lets tests fire delegate callbacks"""

    def __init__(self):
        self.calls = []
        self.evaluated = []
        self.delegate = None
        self.frame = None
        self.results = {"1+1": "2"}

    def setFrame_(self, frame):
        self.frame = frame

    def setDelegate_(self, delegate):
        self.delegate = delegate

    def loadRequest_(self, request):
        self.calls.append(("loadRequest:", request))

    def stopLoading(self):
        self.calls.append(("stopLoading",))

    def reload(self):
        self.calls.append(("reload",))

    def loadHTMLString_baseURL_(self, html, base_url):
        self.calls.append(("loadHTMLString:baseURL:", html, base_url))

    def stringByEvaluatingJavaScriptFromString_(self, script):
        self.evaluated.append(script)
        return self.results.get(script, "")

    # Events the real engine would emit

    def start_load(self):
        self.delegate.webViewDidStartLoad_(self)

    def finish_load(self):
        self.delegate.webViewDidFinishLoad_(self)

    def fail_load(self, error):
        self.delegate.webView_didFailLoadWithError_(self, error)

    def should_start(self, request, navigation_type=0):
        return self.delegate.webView_shouldStartLoadWithRequest_navigationType_(
            self, request, navigation_type)


class FakeCookieStorage(LegacyCookieStorage):
    _shared = None
    shared_lookups = 0

    def __init__(self):
        self._cookies = []

    @classmethod
    def sharedHTTPCookieStorage(cls):
        cls.shared_lookups += 1
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def cookies(self):
        return list(self._cookies)

    def setCookie_(self, cookie):
        self._cookies.append(cookie)


class FakeCookie:
    """Cookie record exposing its fields as accessors, like a bridged object"""

    def __init__(self, name, value):
        self._name = name
        self._value = value

    def name(self):
        return self._name

    def value(self):
        return self._value


@pytest.fixture(autouse=True)
def fake_platform(clean_state):
    """Register the fakes and point the settings at them"""
    FakeCookieStorage._shared = None
    FakeCookieStorage.shared_lookups = 0
    register_type("FakeWebView", FakeLegacyWebView)
    register_type("FakeCookieStorage", FakeCookieStorage)
    update_config({
        'web_engine': {'legacy_class': 'FakeWebView'},
        'cookies': {'storage_class': 'FakeCookieStorage'},
    })
    yield


@pytest.fixture
def fake_web_view_class():
    return FakeLegacyWebView


@pytest.fixture
def fake_cookie_storage_class():
    return FakeCookieStorage


@pytest.fixture
def cookie_record():
    return FakeCookie
