# src/txbridge/upstream/__init__.py
from .client import UpstreamClient, build_transactions_url

__all__ = ['UpstreamClient', 'build_transactions_url']
