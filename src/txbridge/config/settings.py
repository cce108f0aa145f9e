# File: src/txbridge/config/settings.py

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import yaml

from ..exceptions import ConfigurationError

UPSTREAM_URL_ENV = "PYTHON_API_URL"


@dataclass(frozen=True)
class UpstreamSettings:
    """Where the upstream transaction service lives.

    Built fresh for every request so a changed environment is picked up
    without restarting the process.
    """
    base_url: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "UpstreamSettings":
        environ = os.environ if environ is None else environ
        return cls(base_url=environ.get(UPSTREAM_URL_ENV) or None)

    def require_base_url(self) -> str:
        if not self.base_url:
            raise ConfigurationError(f"{UPSTREAM_URL_ENV} environment variable is not set")
        return self.base_url


def get_upstream_settings() -> UpstreamSettings:
    """FastAPI dependency returning the settings for the current request."""
    return UpstreamSettings.from_env()


class ServerConfig:
    """Settings of the serving process, read from an optional YAML file."""

    ENV_OVERRIDES = {
        "TXBRIDGE_HOST": ("server.host", str),
        "TXBRIDGE_PORT": ("server.port", int),
        "TXBRIDGE_LOG_LEVEL": ("logging.level", str),
    }

    def __init__(self, config_path: Optional[str] = None,
                 environ: Optional[Mapping[str, str]] = None):
        self.config_path = config_path
        self.config = self._load_config()
        self._apply_env(os.environ if environ is None else environ)

    def _load_config(self) -> Dict[str, Any]:
        config = self._default_config()
        if not self.config_path or not os.path.exists(self.config_path):
            return config

        with open(self.config_path, 'r') as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ConfigurationError(f"{self.config_path} must contain a mapping")

        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(config.get(section), dict):
                config[section].update(values)
            else:
                config[section] = values
        return config

    def _default_config(self) -> Dict[str, Any]:
        return {
            "server": {
                "host": "0.0.0.0",
                "port": 8000,
                "cors_origins": ["*"]
            },
            "logging": {
                "level": "INFO",
                "log_dir": None
            }
        }

    def _apply_env(self, environ: Mapping[str, str]) -> None:
        for env_name, (key, cast) in self.ENV_OVERRIDES.items():
            raw = environ.get(env_name)
            if not raw:
                continue
            try:
                self.update(key, cast(raw))
            except ValueError:
                raise ConfigurationError(f"{env_name} has an invalid value: {raw!r}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        try:
            keys = key.split('.')
            value = self.config
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def update(self, key: str, value: Any):
        """Update configuration value in memory."""
        keys = key.split('.')
        config = self.config
        for k in keys[:-1]:
            config = config.setdefault(k, {})
        config[keys[-1]] = value
