"""Normalizer SMS — converte o payload do gateway para o modelo interno."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.heating import MessageRecord

if TYPE_CHECKING:
    from api.normalizers.sms.extractor import SmsPayload


def normalize_inbound_sms(payload: SmsPayload) -> MessageRecord:
    """Monta o MessageRecord preservando o texto exatamente como recebido."""
    return MessageRecord(
        message=payload.message,
        phone_number=payload.phone_number,
        received_at=payload.received_at,
    )
