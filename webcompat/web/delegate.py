"""
Bridge from legacy web view delegate callbacks to the modern navigation delegate.

The legacy engine calls these methods by their PyObjC names. Each callback
turns into at most one call on the owner's NavigationDelegate.
"""

from __future__ import annotations

import weakref
from typing import Any

from ..utils.logging import get_logger
from .navigation import Navigation, NavigationAction, NavigationActionPolicy, NavigationType

logger = get_logger(__name__)


class LegacyWebViewDelegate:
    """Single delegate installed on the legacy web view.

    Holds only a weak reference to its WebView. Once the WebView is gone every
    callback does nothing.
    """

    def __init__(self, owner):
        self._owner = weakref.ref(owner)

    @property
    def owner(self):
        return self._owner()

    def _delegate_target(self):
        owner = self._owner()
        if owner is None:
            return None, None
        return owner, owner.navigation_delegate

    def webViewDidStartLoad_(self, web_view: Any) -> None:
        # No counterpart in the modern delegate contract
        pass

    def webViewDidFinishLoad_(self, web_view: Any) -> None:
        owner, delegate = self._delegate_target()
        if delegate is None:
            return
        try:
            delegate.did_finish(owner, Navigation())
        except Exception:
            logger.exception("Navigation delegate raised in did_finish")

    def webView_didFailLoadWithError_(self, web_view: Any, error: Any) -> None:
        owner, delegate = self._delegate_target()
        if delegate is None:
            return
        try:
            delegate.did_fail(owner, Navigation(), error)
        except Exception:
            logger.exception("Navigation delegate raised in did_fail")

    def webView_shouldStartLoadWithRequest_navigationType_(self, web_view: Any, request: Any,
                                                           navigation_type: Any) -> bool:
        owner, delegate = self._delegate_target()
        if delegate is None:
            return True

        action = NavigationAction(request, NavigationType.from_legacy(navigation_type))
        decision = {"policy": NavigationActionPolicy.ALLOW, "decided": False, "returned": False}

        def decision_handler(policy: NavigationActionPolicy) -> None:
            if decision["returned"]:
                logger.warning(f"Navigation decision {policy} for {action.url} arrived after "
                               "the legacy engine was answered; ignored")
                return
            if decision["decided"]:
                logger.debug(f"Duplicate navigation decision {policy} for {action.url} ignored")
                return
            decision["decided"] = True
            decision["policy"] = policy

        try:
            delegate.decide_policy(owner, action, decision_handler)
        except Exception:
            logger.exception(f"Navigation delegate raised in decide_policy for {action.url}")
        finally:
            decision["returned"] = True

        return decision["policy"] == NavigationActionPolicy.ALLOW
