"""
Configuration management for webcompat
Provides configuration loading and access functions
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .utils.logging import get_logger

logger = get_logger(__name__)

CONFIG_ENV_VAR = "WEBCOMPAT_CONFIG"

DEFAULT_CONFIG: Dict[str, Any] = {
    'web_engine': {
        'legacy_class': 'UIWebView',
        'frame': [0, 0, 0, 0],
    },
    'cookies': {
        'storage_class': 'NSHTTPCookieStorage',
        'shared_accessor': 'sharedHTTPCookieStorage',
    },
    'media': {
        'allows_inline_media_playback': True,
        'media_types_requiring_user_action_for_playback': [],
    },
    'logging': {
        'level': 'INFO'
    }
}

_config_cache: Optional[Dict[str, Any]] = None


def get_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Get application configuration, loading from file if needed"""
    global _config_cache

    if _config_cache is None:
        _config_cache = load_config(config_path)

    return _config_cache


def _deep_update(base: Dict[str, Any], updates: Dict[str, Any]) -> None:
    """Recursively update nested dictionaries"""
    for key, value in updates.items():
        if isinstance(value, dict) and key in base and isinstance(base[key], dict):
            _deep_update(base[key], value)
        else:
            base[key] = value


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML file, layered over the defaults"""
    if config_path is None:
        possible_paths = [
            os.environ.get(CONFIG_ENV_VAR, ""),
            "configs/webcompat.yaml",
            "webcompat.yaml",
            "config/webcompat.yaml"
        ]

        for path in possible_paths:
            if path and Path(path).exists():
                config_path = path
                break

    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path and Path(config_path).exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise ValueError("top level of the config file must be a mapping")
            _deep_update(config, loaded)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            return copy.deepcopy(DEFAULT_CONFIG)

    return config


def reload_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Reload configuration from file"""
    global _config_cache
    _config_cache = load_config(config_path)
    return _config_cache


def update_config(updates: Dict[str, Any]) -> None:
    """Update configuration values in memory"""
    global _config_cache

    if _config_cache is None:
        _config_cache = get_config()

    _deep_update(_config_cache, updates)


def clear_config_cache() -> None:
    """Forget the cached configuration so the next access reloads it"""
    global _config_cache
    _config_cache = None
