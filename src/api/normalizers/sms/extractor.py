"""Extrator do envelope do gateway SMS.

Estrutura do webhook:
    {
        "event": "sms:received",
        "payload": {
            "message": "Hovedenhet: PÅ 21C T",
            "phoneNumber": "+4791234567",
            "receivedAt": "2026-10-18T10:30:00.000+02:00"
        }
    }
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from api.validators.sms.errors import InvalidJsonError, InvalidPayloadError


class SmsPayload(BaseModel):
    """Conteúdo do SMS recebido pelo gateway."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    message: str
    phone_number: str = Field(..., alias="phoneNumber")
    received_at: str = Field(..., alias="receivedAt")


def parse_webhook_body(raw_body: bytes) -> dict[str, Any]:
    """Parseia o corpo bruto do webhook.

    Raises:
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto.
    """
    try:
        body = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(body, dict):
        raise InvalidJsonError("payload_not_object")

    return body


def extract_sms_payload(body: dict[str, Any]) -> SmsPayload:
    """Extrai e valida `payload` do envelope.

    Raises:
        InvalidPayloadError: `payload` ausente ou incompleto.
    """
    raw_payload = body.get("payload")
    if not isinstance(raw_payload, dict):
        raise InvalidPayloadError("payload_missing")

    try:
        return SmsPayload.model_validate(raw_payload)
    except PydanticValidationError as exc:
        fields = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
        raise InvalidPayloadError(f"payload_invalid:{','.join(fields)}") from exc
