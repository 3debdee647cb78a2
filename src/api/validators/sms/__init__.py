"""Validators do webhook SMS do controlador de aquecimento.

Responsabilidades:
- Validar o tipo de evento do envelope (`sms:received`)
- Validar o remetente contra a allow-list (variante hardened)
"""

from __future__ import annotations

from typing import Any

from api.validators.sms.errors import (
    InvalidEventTypeError,
    InvalidJsonError,
    InvalidPayloadError,
    SenderNotAllowedError,
    SmsEnvelopeError,
)


def validate_event_type(body: dict[str, Any], expected_event: str) -> None:
    """Garante que `body["event"]` é exatamente o evento esperado.

    Raises:
        InvalidEventTypeError: Evento ausente ou diferente.
    """
    event = body.get("event")
    if event != expected_event:
        raise InvalidEventTypeError(f"unexpected_event:{event!r}")


def validate_sender(phone_number: str, allowed_phone_number: str) -> None:
    """Garante que o SMS veio do número do controlador.

    A comparação ignora espaços nas bordas; o número precisa ser idêntico.

    Raises:
        SenderNotAllowedError: Número diferente ou allow-list vazia.
    """
    allowed = allowed_phone_number.strip()
    if not allowed or phone_number.strip() != allowed:
        raise SenderNotAllowedError("sender_not_allowed")


__all__ = [
    "InvalidEventTypeError",
    "InvalidJsonError",
    "InvalidPayloadError",
    "SenderNotAllowedError",
    "SmsEnvelopeError",
    "validate_event_type",
    "validate_sender",
]
