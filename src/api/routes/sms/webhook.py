"""Endpoint de webhook do gateway SMS.

Endpoint:
- POST /webhook/sms: recebimento de eventos `sms:received`

Fluxo:
1. (basic) tenta autenticar se a sessão nunca autenticou; 403 se falhar
2. Valida envelope (`event`) e payload → 400 sem persistência
3. (hardened) Valida remetente contra a allow-list → 400 sem persistência
4. Persiste mensagem, parseia e atualiza zonas (use case)
5. 200 com o id da mensagem; qualquer falha de persistência → 500
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.normalizers.sms import extract_sms_payload, normalize_inbound_sms, parse_webhook_body
from api.validators.sms import SmsEnvelopeError, validate_event_type, validate_sender
from app.bootstrap import get_datastore_session, get_heating_sms_use_case
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from config.logging import mask_phone_number
from config.settings import get_sms_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)


async def _ensure_datastore_session() -> bool:
    """Reautentica sob demanda se a sessão nunca autenticou (basic)."""
    session = get_datastore_session()
    if session.has_authenticated:
        return True
    await session.ensure_authenticated()
    return session.has_authenticated


@router.post("", response_model=None)
async def receive_webhook(request: Request) -> JSONResponse:
    """Recebimento de SMS do controlador de aquecimento.

    Returns:
        200 {"success": true, "messageId": ...} ou {"error": ...} com 4xx/5xx.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))

    try:
        settings = get_sms_settings()

        if not settings.is_hardened and not await _ensure_datastore_session():
            logger.warning(
                "sms_webhook_rejected",
                extra={"channel": "sms", "reason": "datastore_not_authenticated"},
            )
            return _error_response(
                status.HTTP_403_FORBIDDEN, "Not authenticated with data store"
            )

        raw_body = await request.body()

        try:
            body = parse_webhook_body(raw_body)
            validate_event_type(body, settings.event_type)
            payload = extract_sms_payload(body)
            if settings.is_hardened:
                validate_sender(payload.phone_number, settings.allowed_phone_number)
        except SmsEnvelopeError as exc:
            logger.warning(
                "sms_webhook_rejected",
                extra={
                    "channel": "sms",
                    "reason": type(exc).__name__,
                    "error": str(exc),
                    "payload_size": len(raw_body),
                },
            )
            return _error_response(status.HTTP_400_BAD_REQUEST, exc.public_message)

        logger.info(
            "sms_webhook_received",
            extra={
                "channel": "sms",
                "sender": mask_phone_number(payload.phone_number),
                "message_length": len(payload.message),
            },
        )

        try:
            result = await get_heating_sms_use_case().execute(normalize_inbound_sms(payload))
        except Exception:
            logger.exception(
                "sms_webhook_processing_failed",
                extra={"channel": "sms", "correlation_id": get_correlation_id()},
            )
            return _error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
            )

        logger.info(
            "sms_webhook_processed",
            extra={
                "channel": "sms",
                "message_id": result.message_id,
                "zones_updated": [zone.storage_key for zone in result.zones_updated],
            },
        )
        return JSONResponse(
            content={"success": True, "messageId": result.message_id},
            status_code=status.HTTP_200_OK,
        )

    finally:
        reset_correlation_id(token)
