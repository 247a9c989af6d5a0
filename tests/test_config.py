"""Tests for config/settings: server port (PORT env), scan command/timeout, deep merge, read_config."""

import sys

from src.config.settings import (
    _deep_merge,
    default_scan_command,
    get_scan_config,
    get_server_config,
    read_config,
)


class TestServerConfig:
    def test_missing_port_env_defaults_to_8090(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        assert get_server_config({})["port"] == 8090

    def test_empty_port_env_defaults_to_8090(self, monkeypatch):
        monkeypatch.setenv("PORT", "")
        assert get_server_config({})["port"] == 8090

    def test_port_env_overrides_config(self, monkeypatch):
        monkeypatch.setenv("PORT", "9123")
        assert get_server_config({"server": {"port": 7000}})["port"] == 9123

    def test_config_port_used_without_env(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        out = get_server_config({"server": {"port": 7000}})
        assert out["port"] == 7000
        # other keys still come from the example file
        assert out["host"] == "0.0.0.0"
        assert out["log_level"] == "info"


class TestScanConfig:
    def test_default_command_is_pip_outdated(self):
        out = get_scan_config({})
        assert out["command"] == default_scan_command()
        assert out["command"][0] == sys.executable
        assert out["command"][-2:] == ["list", "--outdated"]
        assert out["timeout_sec"] == 60.0

    def test_command_string_is_split(self):
        out = get_scan_config({"scan": {"command": "go list -m -u all"}})
        assert out["command"] == ["go", "list", "-m", "-u", "all"]

    def test_command_string_keeps_quoted_arguments(self):
        out = get_scan_config({"scan": {"command": "sh -c 'pip list --outdated'"}})
        assert out["command"] == ["sh", "-c", "pip list --outdated"]

    def test_null_timeout_means_unbounded(self):
        assert get_scan_config({"scan": {"timeout_sec": None}})["timeout_sec"] is None


class TestConfigLoading:
    def test_deep_merge_override_wins(self):
        base = {"a": {"x": 1, "y": 2}, "b": 1}
        out = _deep_merge(base, {"a": {"y": 3}})
        assert out == {"a": {"x": 1, "y": 3}, "b": 1}
        assert base["a"]["y"] == 2

    def test_read_config_falls_back_to_example(self, tmp_path):
        config, path = read_config(str(tmp_path / "missing.yaml"))
        assert path.endswith("config.yaml.example")
        assert config["server"]["port"] == 8090

    def test_read_config_from_env(self, tmp_path, monkeypatch):
        p = tmp_path / "c.yaml"
        p.write_text("server:\n  port: 9999\n", encoding="utf-8")
        monkeypatch.setenv("DEVDASH_CONFIG", str(p))
        config, path = read_config()
        assert config == {"server": {"port": 9999}}
        assert path == str(p.resolve())
