"""Entrypoint da aplicação heating-sms-bridge.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    heating-sms-bridge            # porta de PORT (padrão 3038), TLS se hardened

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 3038
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import get_datastore_session, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_server_settings, get_sms_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Dispara a autenticação inicial no data store em background
      (falha não derruba o processo; requisições reautenticam sob demanda)

    Shutdown:
    - Cancela autenticação pendente e fecha conexões
    """
    logger.info("app_starting", extra={"service": "heating-sms-bridge"})
    validate_runtime_settings()

    session = get_datastore_session()
    app.state.datastore_session = session
    app.state.auth_task = asyncio.create_task(session.ensure_authenticated())

    yield

    logger.info("app_shutting_down", extra={"service": "heating-sms-bridge"})
    auth_task = getattr(app.state, "auth_task", None)
    if auth_task is not None and not auth_task.done():
        auth_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await auth_task
    await session.client.aclose()


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="heating-sms-bridge",
        description="Webhook de SMS do controlador de aquecimento",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url=None,
        openapi_url="/openapi.json",
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "heating-sms-bridge"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint do processo: sobe uvicorn, com TLS na variante hardened.

    Raises:
        RuntimeError: Variante hardened sem material TLS válido.
    """
    import uvicorn

    from app.infra.crypto import TlsMaterialError, write_tls_files

    server = get_server_settings()
    ssl_options: dict[str, str] = {}
    tls_files = None

    if get_sms_settings().is_hardened:
        try:
            tls_files = write_tls_files(server.tls_key_b64, server.tls_cert_b64)
        except TlsMaterialError as exc:
            logger.critical("tls_material_invalid", extra={"error": str(exc)})
            raise RuntimeError(f"TLS obrigatório na variante hardened: {exc}") from exc
        ssl_options = {
            "ssl_keyfile": str(tls_files.keyfile),
            "ssl_certfile": str(tls_files.certfile),
        }

    logger.info(
        "server_starting",
        extra={"host": server.host, "port": server.port, "tls": bool(ssl_options)},
    )
    try:
        uvicorn.run(
            "app.app:app",
            host=server.host,
            port=server.port,
            log_level=logging.getLevelName(logging.getLogger().level).lower(),
            **ssl_options,
        )
    finally:
        if tls_files is not None:
            tls_files.cleanup()


if __name__ == "__main__":
    main()
