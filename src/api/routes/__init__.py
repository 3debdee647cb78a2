"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhook SMS, health)
- Validação inicial de request (envelope, remetente)
- Delegação para use cases
- Respostas HTTP apropriadas

Estrutura:
- routes/sms/: webhook do gateway SMS
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
