# tests/test_config.py
import logging
import logging.handlers

import pytest

from txbridge.config.settings import ServerConfig, UpstreamSettings
from txbridge.exceptions import ConfigurationError
from txbridge.monitoring.logging_config import LogConfig
from txbridge.utils.logger import get_logger

class TestUpstreamSettings:
    def test_reads_base_url_from_environment(self):
        settings = UpstreamSettings.from_env({"PYTHON_API_URL": "http://api.test"})
        assert settings.require_base_url() == "http://api.test"

    @pytest.mark.parametrize("environ", [{}, {"PYTHON_API_URL": ""}])
    def test_missing_base_url_raises(self, environ):
        settings = UpstreamSettings.from_env(environ)
        assert settings.base_url is None
        with pytest.raises(ConfigurationError, match="PYTHON_API_URL"):
            settings.require_base_url()

    def test_process_environment_is_read_on_every_call(self, monkeypatch):
        monkeypatch.setenv("PYTHON_API_URL", "http://one.test")
        assert UpstreamSettings.from_env().base_url == "http://one.test"
        monkeypatch.setenv("PYTHON_API_URL", "http://two.test")
        assert UpstreamSettings.from_env().base_url == "http://two.test"

class TestServerConfig:
    def test_defaults_without_file(self):
        config = ServerConfig(environ={})
        assert config.get("server.host") == "0.0.0.0"
        assert config.get("server.port") == 8000
        assert config.get("server.cors_origins") == ["*"]
        assert config.get("logging.level") == "INFO"
        assert config.get("missing.key", "fallback") == "fallback"

    def test_missing_file_falls_back_to_defaults(self, tmp_path):
        config = ServerConfig(str(tmp_path / "nope.yaml"), environ={})
        assert config.get("server.port") == 8000

    def test_file_values_merge_over_defaults(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "server:\n"
            "  port: 9001\n"
            "  cors_origins:\n"
            "    - https://app.example.com\n"
            "logging:\n"
            "  level: DEBUG\n"
        )

        config = ServerConfig(str(path), environ={})

        assert config.get("server.port") == 9001
        assert config.get("server.host") == "0.0.0.0"
        assert config.get("server.cors_origins") == ["https://app.example.com"]
        assert config.get("logging.level") == "DEBUG"

    def test_non_mapping_file_rejected(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigurationError):
            ServerConfig(str(path), environ={})

    def test_environment_overrides(self):
        config = ServerConfig(environ={
            "TXBRIDGE_HOST": "127.0.0.1",
            "TXBRIDGE_PORT": "8123",
            "TXBRIDGE_LOG_LEVEL": "WARNING",
        })
        assert config.get("server.host") == "127.0.0.1"
        assert config.get("server.port") == 8123
        assert config.get("logging.level") == "WARNING"

    def test_invalid_port_override_rejected(self):
        with pytest.raises(ConfigurationError, match="TXBRIDGE_PORT"):
            ServerConfig(environ={"TXBRIDGE_PORT": "eighty"})

    def test_update_nested_key(self):
        config = ServerConfig(environ={})
        config.update("server.port", 1234)
        config.update("extra.flag", True)
        assert config.get("server.port") == 1234
        assert config.get("extra.flag") is True

class TestLogging:
    @pytest.fixture
    def clean_root(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield root
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers = handlers
        root.setLevel(level)

    def test_get_logger_defaults_to_info(self):
        logger = get_logger("txbridge.tests.default")
        assert logger.level == logging.INFO

    def test_get_logger_explicit_level(self):
        logger = get_logger("txbridge.tests.debug", logging.DEBUG)
        assert logger.level == logging.DEBUG

    def test_log_config_writes_rotating_file(self, tmp_path, clean_root):
        log_dir = tmp_path / "logs"
        config = LogConfig(log_dir=str(log_dir), level="warning")

        root = config.setup_logging()

        assert log_dir.exists()
        assert root.level == logging.WARNING
        assert any(
            isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers
        )
        assert config.log_file().startswith(str(log_dir))

    def test_log_config_console_only(self, clean_root):
        config = LogConfig()
        assert config.log_file() is None
        before = len(clean_root.handlers)
        config.setup_logging()
        assert len(clean_root.handlers) == before + 1

    def test_log_config_replaces_its_own_handlers(self, tmp_path, clean_root):
        foreign = logging.NullHandler()
        clean_root.addHandler(foreign)

        LogConfig(log_dir=str(tmp_path), level="INFO").setup_logging()
        LogConfig(log_dir=str(tmp_path), level="DEBUG").setup_logging()

        ours = [h for h in clean_root.handlers if h.get_name() == "txbridge"]
        assert len(ours) == 2
        assert sum(isinstance(h, logging.handlers.RotatingFileHandler) for h in ours) == 1
        assert foreign in clean_root.handlers
        assert clean_root.level == logging.DEBUG
