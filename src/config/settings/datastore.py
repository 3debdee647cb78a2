"""Settings do data store (PocketBase).

Configurações de acesso às collections `messages` e `heating_state`,
credenciais da conta de serviço e disciplina de retry.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

DataStoreBackend = Literal["pocketbase", "memory"]

# Endereço interno padrão do PocketBase (rede do docker-compose)
DEFAULT_POCKETBASE_URL: str = "http://pocketbase:8095"


@dataclass(frozen=True)
class DataStoreSettings:
    """Configurações do data store.

    Attributes:
        backend: Backend de persistência (pocketbase|memory)
        base_url: URL base do PocketBase
        username: Identidade da conta de serviço
        password: Senha da conta de serviço
        auth_collection: Collection usada no auth-with-password
        collection_messages: Collection de mensagens brutas
        collection_heating_state: Collection de estado por zona
        request_timeout_seconds: Timeout das requisições HTTP
        max_retries: Tentativas por operação (auth e escrita)
        retry_delay_seconds: Espera fixa entre tentativas
    """

    backend: DataStoreBackend = "pocketbase"
    base_url: str = DEFAULT_POCKETBASE_URL

    # Credenciais da conta de serviço
    username: str = ""
    password: str = ""
    auth_collection: str = "users"

    # Collections
    collection_messages: str = "messages"
    collection_heating_state: str = "heating_state"

    # Timeouts e retries
    request_timeout_seconds: float = 30.0
    max_retries: int = 3
    retry_delay_seconds: float = 5.0

    def validate(self) -> list[str]:
        """Valida configurações do data store.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if self.backend not in ("pocketbase", "memory"):
            errors.append(f"DATASTORE_BACKEND inválido: {self.backend}")

        if self.backend == "pocketbase":
            if not self.base_url:
                errors.append("POCKETBASE_URL não configurado")
            if not self.username:
                errors.append("PB_USERNAME não configurado")
            if not self.password:
                errors.append("PB_PASSWORD não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("POCKETBASE_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 1:
            errors.append("DATASTORE_MAX_RETRIES deve ser >= 1")

        if self.retry_delay_seconds < 0:
            errors.append("DATASTORE_RETRY_DELAY_SECONDS deve ser >= 0")

        return errors


def _load_from_env() -> DataStoreSettings:
    """Carrega DataStoreSettings a partir de variáveis de ambiente."""
    backend_str = os.getenv("DATASTORE_BACKEND", "pocketbase").lower()
    backend: DataStoreBackend = "memory" if backend_str == "memory" else "pocketbase"
    return DataStoreSettings(
        backend=backend,
        base_url=os.getenv("POCKETBASE_URL", DEFAULT_POCKETBASE_URL),
        username=os.getenv("PB_USERNAME", ""),
        password=os.getenv("PB_PASSWORD", ""),
        auth_collection=os.getenv("POCKETBASE_AUTH_COLLECTION", "users"),
        collection_messages=os.getenv("POCKETBASE_COLLECTION_MESSAGES", "messages"),
        collection_heating_state=os.getenv(
            "POCKETBASE_COLLECTION_HEATING_STATE", "heating_state"
        ),
        request_timeout_seconds=float(
            os.getenv("POCKETBASE_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        max_retries=int(os.getenv("DATASTORE_MAX_RETRIES", "3")),
        retry_delay_seconds=float(os.getenv("DATASTORE_RETRY_DELAY_SECONDS", "5")),
    )


@lru_cache(maxsize=1)
def get_datastore_settings() -> DataStoreSettings:
    """Retorna instância cacheada de DataStoreSettings."""
    return _load_from_env()
