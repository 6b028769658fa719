"""
Tests for the webcompat command line
"""

import json

from webcompat.cli import main, probe_engine


class TestProbe:

    def test_probe_engine_report(self):
        report = probe_engine("FakeWebView")
        assert report["available"] is True
        assert report["target"] == "FakeWebView"
        assert all(cap["available"] for cap in report["capabilities"].values())

    def test_probe_missing_engine_report(self):
        report = probe_engine("MissingWebView")
        assert report["available"] is False
        assert "MissingWebView" in report["error"]
        assert not any(cap["available"] for cap in report["capabilities"].values())

    def test_probe_json_output(self, capsys):
        assert main(["probe", "--json"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["engine"]["engine"] == "FakeWebView"
        assert output["cookies"]["available"] is True
        assert output["cookies"]["cookie_count"] == 0

    def test_probe_missing_engine_exit_status(self, capsys):
        assert main(["probe", "--engine", "MissingWebView"]) == 1
        assert "MissingWebView unavailable" in capsys.readouterr().out

    def test_probe_text_lists_selectors(self, capsys):
        assert main(["probe"]) == 0
        out = capsys.readouterr().out
        assert "loadHTMLString:baseURL:" in out
        assert "Cookie storage FakeCookieStorage: resolved" in out


class TestConfigCommand:

    def test_prints_effective_config(self, capsys):
        assert main(["config"]) == 0
        out = capsys.readouterr().out
        assert "legacy_class: FakeWebView" in out

    def test_config_file_option(self, tmp_path, capsys):
        path = tmp_path / "cli.yaml"
        path.write_text("web_engine:\n  legacy_class: OtherWebView\n", encoding="utf-8")

        assert main(["--config", str(path), "config"]) == 0
        assert "legacy_class: OtherWebView" in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()
