"""Router principal do SMS — agrega os endpoints do canal.

O prefixo é aplicado aqui porque o webhook usa path vazio (POST /webhook/sms
sem barra final, evitando redirect 307 no gateway).
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.sms.webhook import router as webhook_router

SMS_WEBHOOK_PREFIX = "/webhook/sms"

router = APIRouter()

router.include_router(webhook_router, prefix=SMS_WEBHOOK_PREFIX)
