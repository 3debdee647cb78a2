"""Classificação de erros da API REST do PocketBase (sem PII).

Formato de erro do PocketBase:
    {"code": 400, "message": "Failed to create record.", "data": {...}}
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from utils.errors import DataStoreAuthError, DataStoreError

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)

# Status que indicam token inválido/expirado ou credencial rejeitada
AUTH_STATUS_CODES = frozenset({401, 403})


def classify_pocketbase_error(response: httpx.Response, endpoint: str) -> DataStoreError:
    """Converte resposta de erro em DataStoreError tipado.

    - 401/403: DataStoreAuthError (a sessão invalida o token e reautentica)
    - demais status: DataStoreError com status_code
    """
    status_code = response.status_code
    pb_message = _extract_message(response)

    logger.warning(
        "pocketbase_request_failed",
        extra={
            "endpoint": endpoint,
            "status_code": status_code,
            "pb_message": pb_message,
        },
    )

    if status_code in AUTH_STATUS_CODES:
        return DataStoreAuthError(
            f"pocketbase_auth_error ({status_code})",
            status_code=status_code,
        )

    return DataStoreError(f"pocketbase_http_error ({status_code})", status_code=status_code)


def _extract_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return ""
    if isinstance(body, dict):
        return str(body.get("message", ""))
    return ""
