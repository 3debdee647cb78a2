"""Serviços de aplicação.

Unidades puras reutilizáveis (sem IO direto).
Implementações concretas de IO ficam em app/infra/ e api/connectors/.
"""

from app.services.heating_message_parser import parse_heating_message

__all__ = [
    "parse_heating_message",
]
