"""Settings específicas do webhook SMS.

O gateway SMS entrega eventos `sms:received` com o texto enviado pelo
controlador de aquecimento. Duas variantes de operação:

- basic: sem allow-list de remetente; 403 enquanto o data store nunca autenticou
- hardened: allow-list de remetente obrigatória e TLS obrigatório
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

WebhookVariant = Literal["basic", "hardened"]

SMS_RECEIVED_EVENT: str = "sms:received"


@dataclass(frozen=True)
class SmsWebhookSettings:
    """Configurações do webhook SMS.

    Attributes:
        variant: Variante de operação (basic|hardened)
        event_type: Valor obrigatório do campo `event` do envelope
        allowed_phone_number: Número do controlador aceito (hardened)
    """

    variant: WebhookVariant = "basic"
    event_type: str = SMS_RECEIVED_EVENT
    allowed_phone_number: str = ""

    @property
    def is_hardened(self) -> bool:
        """Retorna True se a variante hardened está ativa."""
        return self.variant == "hardened"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do webhook SMS."""
        errors: list[str] = []

        if self.variant not in ("basic", "hardened"):
            errors.append(f"SMS_WEBHOOK_VARIANT inválido: {self.variant}")

        if not self.event_type:
            errors.append("SMS_EVENT_TYPE não pode ser vazio")

        if self.is_hardened and not self.allowed_phone_number:
            errors.append("SMS_ALLOWED_PHONE_NUMBER obrigatório na variante hardened")

        return errors


def _load_from_env() -> SmsWebhookSettings:
    """Carrega SmsWebhookSettings de variáveis de ambiente."""
    variant_str = os.getenv("SMS_WEBHOOK_VARIANT", "basic").lower()
    variant: WebhookVariant = "hardened" if variant_str == "hardened" else "basic"
    return SmsWebhookSettings(
        variant=variant,
        event_type=os.getenv("SMS_EVENT_TYPE", SMS_RECEIVED_EVENT),
        allowed_phone_number=os.getenv("SMS_ALLOWED_PHONE_NUMBER", "").strip(),
    )


@lru_cache(maxsize=1)
def get_sms_settings() -> SmsWebhookSettings:
    """Retorna instância cacheada de SmsWebhookSettings."""
    return _load_from_env()
