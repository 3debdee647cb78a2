"""Validators por canal — validação de envelopes recebidos.

Estrutura:
- sms/: tipo de evento e allow-list de remetente
"""

__all__: list[str] = []
