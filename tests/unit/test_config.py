"""
Unit tests for YAML settings and the configuration bundle
"""

from webcompat.config import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG,
    get_config,
    load_config,
    reload_config,
    update_config,
)
from webcompat.web.configuration import WebViewConfiguration
from webcompat.web.cookies import WebsiteDataStore
from webcompat.web.user_content import UserContentController


class TestLoadConfig:

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(str(tmp_path / "missing.yaml")) == DEFAULT_CONFIG

    def test_file_is_layered_over_defaults(self, tmp_path):
        path = tmp_path / "webcompat.yaml"
        path.write_text("web_engine:\n  legacy_class: 'legacy.views:WebView'\n", encoding="utf-8")

        config = load_config(str(path))

        assert config['web_engine']['legacy_class'] == 'legacy.views:WebView'
        assert config['web_engine']['frame'] == [0, 0, 0, 0]
        assert config['cookies'] == DEFAULT_CONFIG['cookies']

    def test_invalid_yaml_falls_back(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("web_engine: [unclosed", encoding="utf-8")
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_non_mapping_falls_back(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- one\n- two\n", encoding="utf-8")
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_environment_variable_path(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("media:\n  allows_inline_media_playback: false\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        assert load_config()['media']['allows_inline_media_playback'] is False

    def test_defaults_are_not_shared(self, tmp_path):
        config = load_config(str(tmp_path / "missing.yaml"))
        config['web_engine']['legacy_class'] = 'Changed'
        assert DEFAULT_CONFIG['web_engine']['legacy_class'] == 'UIWebView'


class TestConfigCache:

    def test_update_deep_merges(self):
        update_config({'cookies': {'shared_accessor': 'sharedStorage'}})
        config = get_config()
        assert config['cookies']['shared_accessor'] == 'sharedStorage'
        assert config['cookies']['storage_class'] == 'FakeCookieStorage'

    def test_reload_replaces_cache(self, tmp_path):
        path = tmp_path / "reload.yaml"
        path.write_text("logging:\n  level: DEBUG\n", encoding="utf-8")

        config = reload_config(str(path))

        assert get_config() is config
        assert config['logging']['level'] == 'DEBUG'


class TestWebViewConfiguration:

    def test_defaults(self):
        configuration = WebViewConfiguration()
        assert isinstance(configuration.user_content_controller, UserContentController)
        assert isinstance(configuration.website_data_store, WebsiteDataStore)
        assert configuration.allows_inline_media_playback is True
        assert configuration.media_types_requiring_user_action_for_playback == []

    def test_from_config_media_flags(self):
        config = {'media': {
            'allows_inline_media_playback': False,
            'media_types_requiring_user_action_for_playback': ['audio'],
        }}
        configuration = WebViewConfiguration.from_config(config)
        assert configuration.allows_inline_media_playback is False
        assert configuration.media_types_requiring_user_action_for_playback == ['audio']

    def test_from_config_overrides(self):
        data_store = WebsiteDataStore()
        configuration = WebViewConfiguration.from_config({}, website_data_store=data_store)
        assert configuration.website_data_store is data_store
        assert configuration.allows_inline_media_playback is True
