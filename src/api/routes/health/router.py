"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service="heating-sms-bridge",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: pronto somente com sessão autenticada no data store."""
    session = getattr(request.app.state, "datastore_session", None)
    session_check, datastore_check = await asyncio.gather(
        _check_session(session),
        _check_datastore(getattr(session, "client", None)),
    )

    ready = session_check.status == "ok" and datastore_check.status in {"ok", "degraded"}

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "session": session_check.as_dict(),
            "datastore": datastore_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_session(session: Any | None) -> DependencyCheck:
    if session is None:
        return DependencyCheck(status="failed", error="not_configured")
    if not session.is_authenticated:
        return DependencyCheck(status="failed", error="not_authenticated")
    return DependencyCheck(status="ok")


async def _check_datastore(client: Any | None) -> DependencyCheck:
    if client is None:
        return DependencyCheck(status="failed", error="not_configured")
    health = getattr(client, "health", None)
    if not callable(health):
        # Backend sem endpoint de health (memória)
        return DependencyCheck(status="degraded", error="health_not_supported")
    started_at = time.perf_counter()
    try:
        healthy = await asyncio.wait_for(health(), timeout=3.0)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        logger.warning("readiness_datastore_check_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", error=type(exc).__name__)
    latency_ms = round((time.perf_counter() - started_at) * 1000, 2)
    if not healthy:
        return DependencyCheck(status="failed", latency_ms=latency_ms, error="unhealthy")
    return DependencyCheck(status="ok", latency_ms=latency_ms)
