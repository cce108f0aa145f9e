# src/txbridge/api/routes/__init__.py
from .transactions import router as transactions_router

__all__ = ['transactions_router']
