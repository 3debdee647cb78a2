"""Erros de validação do envelope do webhook SMS.

Todos mapeiam para 400 na rota; nenhum dispara persistência.
"""

from __future__ import annotations


class SmsEnvelopeError(ValueError):
    """Erro base para envelopes de webhook SMS rejeitados."""

    public_message = "Invalid request"


class InvalidJsonError(SmsEnvelopeError):
    """Corpo não é JSON ou não é objeto."""

    public_message = "Invalid JSON body"


class InvalidEventTypeError(SmsEnvelopeError):
    """Campo `event` ausente ou diferente do evento esperado."""

    public_message = "Invalid event type"


class InvalidPayloadError(SmsEnvelopeError):
    """`payload` ausente ou sem os campos obrigatórios."""

    public_message = "Invalid payload"


class SenderNotAllowedError(SmsEnvelopeError):
    """Remetente fora da allow-list (variante hardened)."""

    public_message = "Sender not allowed"
