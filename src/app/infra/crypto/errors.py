"""Erros de criptografia/TLS.

Definido em app/infra para manter boundaries corretas.
"""


class TlsMaterialError(RuntimeError):
    """Material TLS ausente, base64 inválido ou PEM ilegível."""
