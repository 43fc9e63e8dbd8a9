import logging
import os
import tempfile

import pytest
import yaml

from support_logging.config import Config


class TestConfig:
    def test_default_config(self, config):
        """Verify defaults are loaded when no file is given."""
        assert config["server"]["host"] == "0.0.0.0"
        assert config["server"]["port"] == 48061
        assert config["server"]["debug"] is False
        assert config["read"]["max_limit"] == 100
        assert config["storage"]["backend"] == "memory"
        assert config["storage"]["path"] == "./data/logs.ndjson"
        assert config["logging"]["level"] == "INFO"

    def test_load_from_yaml(self):
        """Write a temp YAML with overrides, verify merge."""
        override = {
            "read": {"max_limit": 500},
            "storage": {"backend": "file"},
        }
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".yaml", delete=False
        ) as f:
            yaml.dump(override, f)
            temp_path = f.name

        try:
            cfg = Config(temp_path)
            assert cfg["read"]["max_limit"] == 500
            assert cfg["storage"]["backend"] == "file"
            assert cfg["storage"]["path"] == "./data/logs.ndjson"  # default preserved
            assert cfg["server"]["port"] == 48061  # default preserved
        finally:
            os.unlink(temp_path)

    def test_missing_file_uses_defaults(self):
        cfg = Config("/nonexistent/path/config.yaml")
        assert cfg["read"]["max_limit"] == 100

    def test_invalid_yaml_uses_defaults(self, tmp_path, caplog):
        path = tmp_path / "bad.yaml"
        path.write_text("read: [unclosed\n")
        cfg = Config(str(path))
        assert cfg["read"]["max_limit"] == 100
        assert "Invalid YAML" in caplog.text

    def test_deep_merge(self):
        base = {"server": {"host": "localhost", "port": 5000, "debug": False}}
        override = {"server": {"port": 9090}}
        result = Config._deep_merge(base, override)
        assert result["server"]["port"] == 9090
        assert result["server"]["host"] == "localhost"
        assert result["server"]["debug"] is False

    def test_get_and_contains(self, config):
        assert config.get("read")["max_limit"] == 100
        assert config.get("nonexistent") is None
        assert config.get("nonexistent", "fallback") == "fallback"
        assert "storage" in config
        assert "nonexistent" not in config

    def test_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "svc.yaml"
        path.write_text("read:\n  max_limit: 7\n")
        monkeypatch.setenv("CONFIG_PATH", str(path))
        cfg = Config.from_env()
        assert cfg.path == str(path)
        assert cfg["read"]["max_limit"] == 7

    @pytest.mark.parametrize("body", [
        "read:\n  max_limit: 0\n",
        "read:\n  max_limit: ten\n",
        "read:\n  max_limit: true\n",
        "storage:\n  backend: cassandra\n",
    ])
    def test_unusable_values_rejected(self, tmp_path, body):
        path = tmp_path / "bad.yaml"
        path.write_text(body)
        with pytest.raises(ValueError):
            Config(str(path))

    def test_log_level(self, tmp_path):
        path = tmp_path / "log.yaml"
        path.write_text("logging:\n  level: debug\n")
        assert Config(str(path)).log_level == logging.DEBUG
        path.write_text("logging:\n  level: chatty\n")
        assert Config(str(path)).log_level == logging.INFO
