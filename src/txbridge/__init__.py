# src/txbridge/__init__.py
"""Backend-for-frontend proxy for address transaction history."""

__version__ = "0.1.0"
