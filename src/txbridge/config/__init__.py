# src/txbridge/config/__init__.py
from .settings import ServerConfig, UpstreamSettings, get_upstream_settings

__all__ = ['ServerConfig', 'UpstreamSettings', 'get_upstream_settings']
