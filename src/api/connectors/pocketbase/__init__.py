"""Conector PocketBase - adapter de borda para o data store.

Este módulo é o único ponto de IO com o PocketBase.
Responsabilidades:
- Troca de credenciais (auth-with-password)
- Create/update de registros em collections
- Classificação de erros (auth, permanente, transitório)
"""

from .errors import classify_pocketbase_error
from .http_client import PocketBaseHttpClient, create_pocketbase_client

__all__ = [
    "PocketBaseHttpClient",
    "classify_pocketbase_error",
    "create_pocketbase_client",
]
