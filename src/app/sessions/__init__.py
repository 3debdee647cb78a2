"""Sessão com o data store.

Exporta a sessão autenticável e a política de retry.
"""

from app.sessions.datastore_session import DataStoreSession
from app.sessions.retry_policy import RetryPolicy

__all__ = [
    "DataStoreSession",
    "RetryPolicy",
]
