"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    DataStoreAuthError,
    DataStoreError,
    DataStoreNotAuthenticatedError,
    InfrastructureError,
)

__all__ = [
    "DataStoreAuthError",
    "DataStoreError",
    "DataStoreNotAuthenticatedError",
    "InfrastructureError",
]
