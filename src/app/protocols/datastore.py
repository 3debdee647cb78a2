"""Protocolo de domínio para o data store de collections (PocketBase).

Interface leve (ABC) dependida por Application. A camada api fornece a
implementação HTTP; app/infra/stores fornece a versão em memória.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class DataStoreClientProtocol(ABC):
    """Contrato mínimo assíncrono para CRUD em collections.

    O token de sessão é sempre passado explicitamente: o client não guarda
    estado de autenticação (quem guarda é DataStoreSession).
    """

    @abstractmethod
    async def auth_with_password(
        self,
        collection: str,
        identity: str,
        password: str,
    ) -> str:
        """Troca credenciais por um token de sessão.

        Raises:
            DataStoreAuthError: Credenciais rejeitadas.
            DataStoreError: Falha de transporte ou resposta inválida.
        """

    @abstractmethod
    async def create_record(
        self,
        collection: str,
        data: dict[str, Any],
        *,
        token: str,
    ) -> dict[str, Any]:
        """Cria registro e retorna o registro criado (com `id`)."""

    @abstractmethod
    async def update_record(
        self,
        collection: str,
        record_id: str,
        data: dict[str, Any],
        *,
        token: str,
    ) -> dict[str, Any]:
        """Atualiza registro existente pelo id e retorna o registro atualizado."""

    async def aclose(self) -> None:  # noqa: B027 - hook opcional
        """Libera recursos de conexão (opcional)."""
