"""Política explícita de retry: tentativas fixas com espera fixa."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_DELAY_SECONDS = 5.0


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """Executa uma operação assíncrona com tentativas limitadas.

    Attributes:
        max_attempts: Total de tentativas (>= 1)
        delay_seconds: Espera fixa entre tentativas (sem backoff)
        sleep: Função de espera (injetável em testes)
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    delay_seconds: float = DEFAULT_DELAY_SECONDS
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts deve ser >= 1")
        if self.delay_seconds < 0:
            raise ValueError("delay_seconds deve ser >= 0")

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        *,
        operation_name: str = "operation",
        before_attempt: Callable[[], Awaitable[None]] | None = None,
        on_failure: Callable[[Exception], None] | None = None,
    ) -> T:
        """Executa `operation` até sucesso ou esgotar as tentativas.

        Args:
            operation: Coroutine factory sem argumentos.
            operation_name: Nome para logs.
            before_attempt: Hook aguardado antes de cada tentativa.
            on_failure: Callback chamado a cada falha (ex: invalidar sessão).

        Returns:
            Resultado da primeira tentativa bem-sucedida.

        Raises:
            Exception: A última falha, após esgotar as tentativas.
        """
        for attempt in range(1, self.max_attempts + 1):
            try:
                if before_attempt is not None:
                    await before_attempt()
                return await operation()
            except Exception as exc:
                if on_failure is not None:
                    on_failure(exc)
                if attempt >= self.max_attempts:
                    logger.error(
                        "retry_exhausted",
                        extra={
                            "operation": operation_name,
                            "attempts": attempt,
                            "error_type": type(exc).__name__,
                        },
                    )
                    raise
                logger.warning(
                    "retry_scheduled",
                    extra={
                        "operation": operation_name,
                        "attempt": attempt,
                        "max_attempts": self.max_attempts,
                        "delay_seconds": self.delay_seconds,
                        "error_type": type(exc).__name__,
                    },
                )
                await self.sleep(self.delay_seconds)

        # Inalcançável: max_attempts >= 1 garante return ou raise no loop
        raise RuntimeError("retry_policy_without_attempts")
