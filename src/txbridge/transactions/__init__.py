# src/txbridge/transactions/__init__.py
from .models import Transaction, TransactionsResponse, UpstreamTransaction
from .mapper import map_transaction, map_transactions
from .service import TransactionService

__all__ = [
    'Transaction',
    'TransactionsResponse',
    'UpstreamTransaction',
    'map_transaction',
    'map_transactions',
    'TransactionService',
]
