"""Factories — criação de implementações concretas.

Centraliza a escolha do backend do data store e o wiring da sessão e do
use case a partir das settings de ambiente.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.stores import MemoryDataStore
from app.sessions.datastore_session import DataStoreSession
from app.sessions.retry_policy import RetryPolicy
from app.use_cases.sms import ProcessHeatingSmsUseCase
from config.settings import get_base_settings, get_datastore_settings

if TYPE_CHECKING:
    from app.protocols.datastore import DataStoreClientProtocol
    from config.settings import DataStoreSettings

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Data Store Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_datastore_client(
    settings: DataStoreSettings | None = None,
) -> DataStoreClientProtocol:
    """Cria client do data store baseado na configuração.

    Lê DATASTORE_BACKEND da env:
    - "pocketbase": PocketBaseHttpClient (padrão)
    - "memory": MemoryDataStore com zonas provisionadas (dev only)
    """
    datastore = settings or get_datastore_settings()

    if datastore.backend == "memory":
        environment = get_base_settings().environment
        if environment != "development":
            logger.warning(
                "memory_datastore_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        store = MemoryDataStore()
        store.seed_heating_state(datastore.collection_heating_state)
        logger.info("datastore_client_created", extra={"backend": "memory"})
        return store

    # Import local: a camada app só conhece o connector no composition root
    from api.connectors.pocketbase import create_pocketbase_client

    client = create_pocketbase_client(datastore)
    logger.info("datastore_client_created", extra={"backend": "pocketbase"})
    return client


def create_datastore_session(
    settings: DataStoreSettings | None = None,
    client: DataStoreClientProtocol | None = None,
) -> DataStoreSession:
    """Cria a sessão autenticável do data store (sem autenticar ainda)."""
    datastore = settings or get_datastore_settings()
    return DataStoreSession(
        client=client or create_datastore_client(datastore),
        identity=datastore.username or ("dev" if datastore.backend == "memory" else ""),
        password=datastore.password or ("dev" if datastore.backend == "memory" else ""),
        auth_collection=datastore.auth_collection,
        policy=RetryPolicy(
            max_attempts=datastore.max_retries,
            delay_seconds=datastore.retry_delay_seconds,
        ),
    )


def create_heating_sms_use_case(
    session: DataStoreSession,
    settings: DataStoreSettings | None = None,
) -> ProcessHeatingSmsUseCase:
    """Cria o use case de processamento de SMS ligado à sessão."""
    datastore = settings or get_datastore_settings()
    return ProcessHeatingSmsUseCase(
        session=session,
        messages_collection=datastore.collection_messages,
        heating_state_collection=datastore.collection_heating_state,
    )
