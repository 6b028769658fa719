from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..config import get_config
from .cookies import WebsiteDataStore
from .user_content import UserContentController


@dataclass
class WebViewConfiguration:
    """Everything a WebView needs at construction, handed over as one value."""

    user_content_controller: UserContentController = field(default_factory=UserContentController)
    allows_inline_media_playback: bool = True
    media_types_requiring_user_action_for_playback: List[Any] = field(default_factory=list)
    website_data_store: WebsiteDataStore = field(default_factory=WebsiteDataStore)

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None,
                    **overrides: Any) -> "WebViewConfiguration":
        """Build a configuration with media flags taken from settings"""
        if config is None:
            config = get_config()
        media = config.get('media') or {}
        values: Dict[str, Any] = {
            'allows_inline_media_playback': bool(media.get('allows_inline_media_playback', True)),
            'media_types_requiring_user_action_for_playback': list(
                media.get('media_types_requiring_user_action_for_playback') or []),
        }
        values.update(overrides)
        return cls(**values)
