"""Protocolos e contratos do core da aplicação."""

from .datastore import DataStoreClientProtocol

__all__ = [
    "DataStoreClientProtocol",
]
