# src/txbridge/monitoring/__init__.py
from .logging_config import LogConfig

__all__ = ["LogConfig"]
