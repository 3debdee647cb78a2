"""Data store em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import copy
import uuid
from datetime import UTC, datetime
from typing import Any

from app.constants.heating_sms import Zone
from app.protocols.datastore import DataStoreClientProtocol
from utils.errors import DataStoreAuthError, DataStoreError


class MemoryDataStore(DataStoreClientProtocol):
    """Imita o contrato de collections do PocketBase — apenas para dev/test."""

    def __init__(self, users: dict[str, str] | None = None) -> None:
        """Inicializa store.

        Args:
            users: Mapa identity -> password aceito no auth. Vazio aceita
                qualquer credencial não vazia.
        """
        self._users = dict(users or {})
        self._tokens: set[str] = set()
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}
        self.calls: list[tuple[str, str]] = []  # (operação, collection)

    async def auth_with_password(
        self,
        collection: str,
        identity: str,
        password: str,
    ) -> str:
        self.calls.append(("auth", collection))
        if not identity or not password:
            raise DataStoreAuthError("memory_missing_credentials")
        if self._users and self._users.get(identity) != password:
            raise DataStoreAuthError("memory_invalid_credentials", status_code=400)
        token = uuid.uuid4().hex
        self._tokens.add(token)
        return token

    async def create_record(
        self,
        collection: str,
        data: dict[str, Any],
        *,
        token: str,
    ) -> dict[str, Any]:
        self.calls.append(("create", collection))
        self._check_token(token)
        record_id = data.get("id") or uuid.uuid4().hex[:15]
        now = datetime.now(UTC).isoformat()
        record = {**copy.deepcopy(data), "id": record_id, "created": now, "updated": now}
        self._collections.setdefault(collection, {})[record_id] = record
        return copy.deepcopy(record)

    async def update_record(
        self,
        collection: str,
        record_id: str,
        data: dict[str, Any],
        *,
        token: str,
    ) -> dict[str, Any]:
        self.calls.append(("update", collection))
        self._check_token(token)
        records = self._collections.get(collection, {})
        if record_id not in records:
            raise DataStoreError(
                f"memory_record_not_found ({collection}/{record_id})",
                status_code=404,
            )
        record = records[record_id]
        record.update(copy.deepcopy(data))
        record["updated"] = datetime.now(UTC).isoformat()
        return copy.deepcopy(record)

    def set_user(self, identity: str, password: str) -> None:
        """Cadastra ou troca a senha aceita para `identity`."""
        self._users[identity] = password

    def revoke_tokens(self) -> None:
        """Expira todas as sessões emitidas (simula token expirado)."""
        self._tokens.clear()

    def get_record(self, collection: str, record_id: str) -> dict[str, Any] | None:
        record = self._collections.get(collection, {}).get(record_id)
        return copy.deepcopy(record) if record is not None else None

    def list_records(self, collection: str) -> list[dict[str, Any]]:
        return [copy.deepcopy(r) for r in self._collections.get(collection, {}).values()]

    def seed_heating_state(self, collection: str = "heating_state") -> None:
        """Provisiona um registro por zona (passo externo no PocketBase real)."""
        records = self._collections.setdefault(collection, {})
        now = datetime.now(UTC).isoformat()
        for zone in Zone:
            records.setdefault(
                zone.storage_key,
                {
                    "id": zone.storage_key,
                    "temperature": None,
                    "isHeatingOn": False,
                    "isFrostProtectionOn": False,
                    "lastCommand": "",
                    "lastCommandSuccess": True,
                    "created": now,
                    "updated": now,
                },
            )

    def _check_token(self, token: str) -> None:
        if token not in self._tokens:
            raise DataStoreAuthError("memory_invalid_token", status_code=401)
