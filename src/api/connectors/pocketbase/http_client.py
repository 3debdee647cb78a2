"""Cliente HTTP para a API REST do PocketBase.

Endpoints usados:
- POST /api/collections/{auth}/auth-with-password
- POST /api/collections/{collection}/records
- PATCH /api/collections/{collection}/records/{id}

Não guarda token: a sessão (app/sessions/datastore_session.py) é quem
decide quando autenticar e quando invalidar. Retry também fica na sessão.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from app.protocols.datastore import DataStoreClientProtocol
from utils.errors import DataStoreAuthError, DataStoreError

from .errors import classify_pocketbase_error

if TYPE_CHECKING:
    from config.settings import DataStoreSettings

logger: logging.Logger = logging.getLogger(__name__)


class PocketBaseHttpClient(DataStoreClientProtocol):
    """Client assíncrono do PocketBase sobre httpx.

    Uma única AsyncClient é reutilizada (pool de conexões).
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Inicializa client.

        Args:
            base_url: URL base do PocketBase (ex: http://pocketbase:8095)
            timeout_seconds: Timeout por requisição
            http_client: AsyncClient pré-configurado (testes: MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._http = http_client or httpx.AsyncClient(timeout=timeout_seconds)

    async def auth_with_password(
        self,
        collection: str,
        identity: str,
        password: str,
    ) -> str:
        endpoint = f"/api/collections/{collection}/auth-with-password"
        if not identity or not password:
            raise DataStoreAuthError("pocketbase_missing_credentials")

        body = await self._request(
            "POST",
            endpoint,
            json={"identity": identity, "password": password},
        )
        token = body.get("token")
        if not isinstance(token, str) or not token:
            raise DataStoreAuthError("pocketbase_auth_without_token")
        return token

    async def create_record(
        self,
        collection: str,
        data: dict[str, Any],
        *,
        token: str,
    ) -> dict[str, Any]:
        endpoint = f"/api/collections/{collection}/records"
        return await self._request("POST", endpoint, json=data, token=token)

    async def update_record(
        self,
        collection: str,
        record_id: str,
        data: dict[str, Any],
        *,
        token: str,
    ) -> dict[str, Any]:
        endpoint = f"/api/collections/{collection}/records/{record_id}"
        return await self._request("PATCH", endpoint, json=data, token=token)

    async def health(self) -> bool:
        """Consulta GET /api/health (sem autenticação)."""
        try:
            response = await self._http.get(
                f"{self._base_url}/api/health", timeout=self._timeout_seconds
            )
        except httpx.HTTPError:
            return False
        return response.status_code == 200

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        json: dict[str, Any],
        token: str | None = None,
    ) -> dict[str, Any]:
        """Executa requisição e devolve o corpo JSON (objeto).

        Raises:
            DataStoreAuthError: 401/403
            DataStoreError: Demais falhas HTTP, transporte ou JSON inválido
        """
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = token

        try:
            response = await self._http.request(
                method,
                f"{self._base_url}{endpoint}",
                json=json,
                headers=headers,
                timeout=self._timeout_seconds,
            )
        except (httpx.TimeoutException, httpx.TransportError) as exc:
            logger.warning(
                "pocketbase_connection_error",
                extra={"endpoint": endpoint, "error_type": type(exc).__name__},
            )
            raise DataStoreError("pocketbase_connection_error") from exc

        if response.status_code >= 400:
            raise classify_pocketbase_error(response, endpoint)

        try:
            body = response.json()
        except ValueError as exc:
            logger.error("pocketbase_invalid_json", extra={"endpoint": endpoint})
            raise DataStoreError("pocketbase_invalid_json") from exc

        if not isinstance(body, dict):
            raise DataStoreError("pocketbase_response_not_object")

        logger.debug(
            "pocketbase_request_ok",
            extra={
                "method": method,
                "endpoint": endpoint,
                "status_code": response.status_code,
            },
        )
        return body


def create_pocketbase_client(
    settings: DataStoreSettings | None = None,
) -> PocketBaseHttpClient:
    """Factory para criar client PocketBase com config padrão.

    Args:
        settings: DataStoreSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_datastore_settings

    datastore = settings or get_datastore_settings()
    return PocketBaseHttpClient(
        base_url=datastore.base_url,
        timeout_seconds=datastore.request_timeout_seconds,
    )
