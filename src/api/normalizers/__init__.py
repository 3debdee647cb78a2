"""Normalizers por canal — conversão de payloads externos para modelos internos.

Estrutura:
- sms/: envelope do gateway SMS (`sms:received`)
"""

from .sms import extract_sms_payload, normalize_inbound_sms, parse_webhook_body

__all__ = [
    "extract_sms_payload",
    "normalize_inbound_sms",
    "parse_webhook_body",
]
