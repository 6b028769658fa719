"""
User scripts and script message handlers.

The legacy engine has neither native user scripts nor a native message
bridge. Scripts are emulated by evaluating their source on the attached
view. Message handlers cannot be emulated and are only accepted.
"""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

from ..utils.logging import default_log

UNSUPPORTED_FEATURES = (
    "script_message_handlers",
    "main_frame_only_scripts",
)


class UserScriptInjectionTime(Enum):
    AT_DOCUMENT_START = "at_document_start"


@dataclass(frozen=True)
class UserScript:
    source: str
    injection_time: UserScriptInjectionTime = UserScriptInjectionTime.AT_DOCUMENT_START
    for_main_frame_only: bool = True


@dataclass(frozen=True)
class ScriptMessage:
    name: str
    body: Any


class ScriptMessageHandler(ABC):

    @abstractmethod
    def did_receive_script_message(self, user_content_controller: "UserContentController",
                                   message: ScriptMessage) -> None:
        pass


class UserContentController:
    """Ordered user scripts, replayed on the attached web view."""

    unsupported_features = UNSUPPORTED_FEATURES

    def __init__(self, log: Optional[Callable[[str, str], None]] = None):
        self.log = log or default_log
        self._scripts: List[UserScript] = []
        self._attached: Optional[weakref.ref] = None

    @property
    def user_scripts(self) -> Tuple[UserScript, ...]:
        return tuple(self._scripts)

    @property
    def attached_web_view(self):
        return self._attached() if self._attached is not None else None

    def attach(self, web_view) -> None:
        """Attach to ``web_view`` and inject every registered script in order."""
        if self.attached_web_view is web_view:
            return
        self._attached = weakref.ref(web_view)
        for script in self._scripts:
            self._inject(script)

    def add_user_script(self, script: UserScript) -> None:
        self._scripts.append(script)
        self._inject(script)

    def remove_script_message_handler(self, name: str) -> None:
        """Accepted for compatibility; there is no handler table to remove from."""

    def add_script_message_handler(self, handler: ScriptMessageHandler, name: str) -> None:
        """Accept the registration. No message will ever be delivered to ``handler``."""
        self.log(f"add_script_message_handler('{name}') not natively supported by the legacy engine; "
                 "messages on this channel will not be delivered", "Warning")

    def _inject(self, script: UserScript) -> None:
        web_view = self.attached_web_view
        if web_view is None:
            return
        web_view.evaluate_javascript(script.source)
