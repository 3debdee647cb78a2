"""Connectors — adapters de borda para APIs externas.

Estrutura:
- pocketbase/: API REST do PocketBase (collections `messages` e `heating_state`)
"""

__all__: list[str] = []
