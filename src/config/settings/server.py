"""Settings do servidor HTTP (uvicorn).

Porta de escuta e material TLS em base64 (variante hardened).
"""

from __future__ import annotations

import base64
import binascii
import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_PORT: int = 3038


@dataclass(frozen=True)
class ServerSettings:
    """Configurações do servidor.

    Attributes:
        host: Interface de escuta
        port: Porta de escuta
        tls_key_b64: Chave privada PEM codificada em base64
        tls_cert_b64: Certificado PEM codificado em base64
    """

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    tls_key_b64: str = ""
    tls_cert_b64: str = ""

    def validate(self, require_tls: bool = False) -> list[str]:
        """Valida configurações do servidor.

        Args:
            require_tls: Se True, exige material TLS decodificável.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not 0 < self.port < 65536:
            errors.append(f"PORT inválida: {self.port}")

        if require_tls:
            if not self.tls_key_b64:
                errors.append("TLS_KEY_B64 não configurado")
            elif not _is_base64(self.tls_key_b64):
                errors.append("TLS_KEY_B64 não é base64 válido")
            if not self.tls_cert_b64:
                errors.append("TLS_CERT_B64 não configurado")
            elif not _is_base64(self.tls_cert_b64):
                errors.append("TLS_CERT_B64 não é base64 válido")

        return errors


def _is_base64(value: str) -> bool:
    try:
        base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        return False
    return True


def _load_from_env() -> ServerSettings:
    """Carrega ServerSettings de variáveis de ambiente."""
    return ServerSettings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", str(DEFAULT_PORT))),
        tls_key_b64=os.getenv("TLS_KEY_B64", "").strip(),
        tls_cert_b64=os.getenv("TLS_CERT_B64", "").strip(),
    )


@lru_cache(maxsize=1)
def get_server_settings() -> ServerSettings:
    """Retorna instância cacheada de ServerSettings."""
    return _load_from_env()
