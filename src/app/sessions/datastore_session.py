"""Sessão autenticada com o data store (conta de serviço única).

O token é estado mutável do processo, mas fica encapsulado aqui: quem
precisa persistir recebe a DataStoreSession explicitamente.

Concorrência:
    Requisições concorrentes compartilham o token. Uma falha em uma
    requisição pode invalidar um token que outra acabou de validar; isso só
    custa uma reautenticação extra (a troca de credenciais é idempotente).
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from app.sessions.retry_policy import RetryPolicy
from utils.errors import DataStoreNotAuthenticatedError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from app.protocols.datastore import DataStoreClientProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DataStoreSession:
    """Mantém o token de sessão e aplica a disciplina de retry/reautenticação.

    - ensure_authenticated(): troca credenciais se não há token (3x, 5s)
    - with_retry(op): garante sessão antes de cada tentativa, invalida na falha
    """

    __slots__ = (
        "_auth_collection",
        "_auth_lock",
        "_client",
        "_has_authenticated",
        "_identity",
        "_password",
        "_policy",
        "_token",
    )

    def __init__(
        self,
        client: DataStoreClientProtocol,
        identity: str,
        password: str,
        auth_collection: str = "users",
        policy: RetryPolicy | None = None,
    ) -> None:
        """Inicializa sessão (sem autenticar).

        Args:
            client: Client do data store
            identity: Usuário da conta de serviço
            password: Senha da conta de serviço
            auth_collection: Collection de autenticação
            policy: Política de retry para auth e escritas
        """
        self._client = client
        self._identity = identity
        self._password = password
        self._auth_collection = auth_collection
        self._policy = policy or RetryPolicy()
        self._token: str | None = None
        self._has_authenticated = False
        self._auth_lock = asyncio.Lock()

    @property
    def client(self) -> DataStoreClientProtocol:
        return self._client

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    @property
    def is_authenticated(self) -> bool:
        """True se há token válido em cache."""
        return self._token is not None

    @property
    def has_authenticated(self) -> bool:
        """True se alguma troca de credenciais já teve sucesso."""
        return self._has_authenticated

    def invalidate(self, token: str | None = None) -> None:
        """Descarta o token, forçando reautenticação na próxima tentativa.

        Se `token` for informado, só descarta se ainda for o token atual
        (outra requisição pode já ter reautenticado).
        """
        if token is not None and token != self._token:
            return
        if self._token is not None:
            logger.info("datastore_session_invalidated")
        self._token = None

    async def ensure_authenticated(self) -> bool:
        """Garante sessão válida, autenticando se necessário.

        Nunca levanta exceção: após esgotar as tentativas registra a falha e
        deixa o sistema sem autenticação (próximas chamadas tentam de novo).

        Returns:
            True se há sessão válida ao final.
        """
        if self._token is not None:
            return True

        async with self._auth_lock:
            # Outra corrotina pode ter autenticado enquanto esperávamos o lock
            if self._token is not None:
                return True
            try:
                token = await self._policy.run(
                    self._exchange_credentials,
                    operation_name="datastore_auth",
                )
            except Exception as exc:
                logger.error(
                    "datastore_auth_failed",
                    extra={
                        "attempts": self._policy.max_attempts,
                        "error_type": type(exc).__name__,
                    },
                )
                return False

            self._token = token
            self._has_authenticated = True
            logger.info("datastore_authenticated")
            return True

    async def with_retry(
        self,
        operation: Callable[[str], Awaitable[T]],
        max_retries: int | None = None,
        operation_name: str = "datastore_operation",
    ) -> T:
        """Executa operação autenticada com retry e invalidação de sessão.

        Args:
            operation: Recebe o token atual e executa a chamada ao data store.
            max_retries: Tentativas (padrão: da política da sessão).
            operation_name: Nome para logs.

        Returns:
            Resultado da operação.

        Raises:
            Exception: Última falha após esgotar as tentativas.
        """
        policy = self._policy
        if max_retries is not None and max_retries != policy.max_attempts:
            policy = RetryPolicy(
                max_attempts=max_retries,
                delay_seconds=policy.delay_seconds,
                sleep=policy.sleep,
            )

        used_token: str | None = None

        async def _attempt() -> T:
            nonlocal used_token
            token = self._token
            if token is None:
                raise DataStoreNotAuthenticatedError("datastore_not_authenticated")
            used_token = token
            return await operation(token)

        def _on_failure(_exc: Exception) -> None:
            nonlocal used_token
            if used_token is not None:
                self.invalidate(used_token)
            used_token = None

        return await policy.run(
            _attempt,
            operation_name=operation_name,
            before_attempt=self._ensure_before_attempt,
            on_failure=_on_failure,
        )

    async def create_record(self, collection: str, data: dict[str, Any]) -> dict[str, Any]:
        """Cria registro na collection com retry."""
        return await self.with_retry(
            lambda token: self._client.create_record(collection, data, token=token),
            operation_name=f"create:{collection}",
        )

    async def update_record(
        self,
        collection: str,
        record_id: str,
        data: dict[str, Any],
    ) -> dict[str, Any]:
        """Atualiza registro existente com retry."""
        return await self.with_retry(
            lambda token: self._client.update_record(
                collection, record_id, data, token=token
            ),
            operation_name=f"update:{collection}",
        )

    async def _ensure_before_attempt(self) -> None:
        await self.ensure_authenticated()

    async def _exchange_credentials(self) -> str:
        return await self._client.auth_with_password(
            self._auth_collection,
            self._identity,
            self._password,
        )
