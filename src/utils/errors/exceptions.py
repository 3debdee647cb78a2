"""Exceções de domínio para falhas recuperáveis de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class DataStoreError(InfrastructureError):
    """Falha ao acessar o data store (PocketBase).

    Nunca carrega tokens, senhas ou corpo de mensagens.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class DataStoreAuthError(DataStoreError):
    """Troca de credenciais rejeitada ou sessão expirada."""


class DataStoreNotAuthenticatedError(DataStoreError):
    """Operação tentada sem sessão válida no data store."""
