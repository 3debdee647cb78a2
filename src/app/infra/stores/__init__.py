"""Stores — implementações concretas de persistência.

Módulos disponíveis:
    - memory_stores: Data store em memória para desenvolvimento/testes

O data store real (PocketBase) fica em api/connectors/pocketbase.
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryDataStore

__all__ = [
    "MemoryDataStore",
]
