"""
Unit tests for configuration system.
"""

import logging
import os
import tempfile
import pytest
from mknetwork.config.settings import ClientConfig, configure_logging


class TestClientConfig:
    """Tests for ClientConfig."""

    def test_default_values(self):
        config = ClientConfig()
        assert config.timeout == 30.0
        assert config.user_agent is None
        assert config.platform_source == "MKNetwork"
        assert config.log_level == "WARNING"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MKNETWORK_TIMEOUT", "5")
        monkeypatch.setenv("MKNETWORK_USER_AGENT", "agent/1.0")
        monkeypatch.setenv("MKNETWORK_PLATFORM_SOURCE", "Tests")
        monkeypatch.setenv("MKNETWORK_LOG_LEVEL", "debug")

        config = ClientConfig.from_env()
        assert config.timeout == 5.0
        assert config.user_agent == "agent/1.0"
        assert config.platform_source == "Tests"
        assert config.log_level == "DEBUG"

    def test_from_yaml_file(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("""
timeout: 12.5
user_agent: yaml-agent
""")
            yaml_file = f.name

        try:
            config = ClientConfig.from_file(yaml_file)
            assert config.timeout == 12.5
            assert config.user_agent == "yaml-agent"
            assert config.platform_source == "MKNetwork"
        finally:
            os.unlink(yaml_file)

    def test_from_json_file(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            f.write('{"timeout": 3, "log_level": "INFO"}')
            json_file = f.name

        try:
            config = ClientConfig.from_file(json_file)
            assert config.timeout == 3
            assert config.log_level == "INFO"
        finally:
            os.unlink(json_file)

    def test_from_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            ClientConfig.from_file("/nonexistent/config.yaml")

    def test_from_file_unsupported_format(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".ini", delete=False) as f:
            f.write("timeout=3")
            ini_file = f.name

        try:
            with pytest.raises(ValueError, match="Unsupported config file format"):
                ClientConfig.from_file(ini_file)
        finally:
            os.unlink(ini_file)

    def test_load_file_overrides_env(self, monkeypatch):
        monkeypatch.setenv("MKNETWORK_TIMEOUT", "5")
        monkeypatch.setenv("MKNETWORK_USER_AGENT", "env-agent")

        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("user_agent: file-agent\n")
            yaml_file = f.name

        try:
            config = ClientConfig.load(yaml_file)
            assert config.user_agent == "file-agent"
            assert config.timeout == 5.0
        finally:
            os.unlink(yaml_file)

    def test_from_file_unknown_key(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("timeout: 3\nretries: 5\n")
            yaml_file = f.name

        try:
            with pytest.raises(ValueError, match="Unknown configuration key: retries"):
                ClientConfig.from_file(yaml_file)
        finally:
            os.unlink(yaml_file)

    def test_from_file_empty_yaml_gives_defaults(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml_file = f.name

        try:
            assert ClientConfig.from_file(yaml_file) == ClientConfig()
        finally:
            os.unlink(yaml_file)

    def test_load_rejects_unsupported_format(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".txt", delete=False) as f:
            f.write("timeout: 3\n")
            txt_file = f.name

        try:
            with pytest.raises(ValueError, match="Unsupported config file format"):
                ClientConfig.load(txt_file)
        finally:
            os.unlink(txt_file)

    def test_load_unknown_key(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            f.write('{"retries": 5}')
            json_file = f.name

        try:
            with pytest.raises(ValueError, match="Unknown configuration key: retries"):
                ClientConfig.load(json_file)
        finally:
            os.unlink(json_file)

    def test_load_without_file(self, monkeypatch):
        monkeypatch.delenv("MKNETWORK_TIMEOUT", raising=False)
        config = ClientConfig.load(None)
        assert config.timeout == 30.0

    def test_validate_success(self):
        config = ClientConfig()
        config.validate()  # Should not raise

    def test_validate_invalid_timeout(self):
        config = ClientConfig(timeout=0)
        with pytest.raises(ValueError, match="timeout must be positive"):
            config.validate()

    def test_validate_invalid_log_level(self):
        config = ClientConfig(log_level="LOUD")
        with pytest.raises(ValueError, match="log_level must be one of"):
            config.validate()

    def test_validate_empty_platform_source(self):
        config = ClientConfig(platform_source="")
        with pytest.raises(ValueError, match="platform_source is required"):
            config.validate()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_package_logger_level(self):
        logger = configure_logging(ClientConfig(log_level="debug"))
        try:
            assert logger.name == "mknetwork"
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(logging.NOTSET)
