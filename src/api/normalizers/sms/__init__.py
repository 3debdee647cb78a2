"""Normalizer SMS do gateway — extração e normalização do envelope.

Responsabilidades:
- Parsear o corpo JSON do webhook
- Extrair `payload` (message, phoneNumber, receivedAt)
- Normalizar para MessageRecord
"""

from .extractor import SmsPayload, extract_sms_payload, parse_webhook_body
from .normalizer import normalize_inbound_sms

__all__ = [
    "SmsPayload",
    "extract_sms_payload",
    "normalize_inbound_sms",
    "parse_webhook_body",
]
