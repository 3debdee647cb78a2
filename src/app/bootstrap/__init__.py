"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas (PocketBase ou memória) aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_datastore_session

    # Na inicialização do serviço
    initialize_app()

    # Sessão compartilhada do processo
    session = get_datastore_session()
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_datastore_settings,
    get_server_settings,
    get_sms_settings,
)

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Na variante hardened o material TLS é sempre obrigatório.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Configuração inválida em modo estrito.
    """
    base = get_base_settings()
    sms = get_sms_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"sms: {error}" for error in sms.validate())
    errors.extend(f"datastore: {error}" for error in get_datastore_settings().validate())

    tls_errors = get_server_settings().validate(require_tls=sms.is_hardened)
    errors.extend(f"server: {error}" for error in tls_errors)

    if not errors:
        logger.info(
            "settings_validated",
            extra={
                "component": "bootstrap",
                "result": "ok",
                "environment": base.environment,
                "variant": sms.variant,
            },
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode or (sms.is_hardened and tls_errors):
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_datastore_session():
    """Obtém a sessão do data store (singleton do processo).

    Returns:
        DataStoreSession configurada conforme env
    """
    from app.bootstrap.dependencies import create_datastore_session

    return create_datastore_session()


@lru_cache(maxsize=1)
def get_heating_sms_use_case():
    """Obtém o use case de processamento de SMS (singleton)."""
    from app.bootstrap.dependencies import create_heating_sms_use_case

    return create_heating_sms_use_case(get_datastore_session())
