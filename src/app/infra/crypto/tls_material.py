"""Material TLS vindo de variáveis de ambiente em base64.

O servidor (uvicorn) precisa de arquivos; a chave e o certificado são
decodificados, validados com `cryptography` e gravados em arquivos
temporários com permissão 0600.
"""

from __future__ import annotations

import base64
import binascii
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from cryptography import x509
from cryptography.hazmat.primitives import serialization

from .errors import TlsMaterialError


@dataclass(frozen=True, slots=True)
class TlsFiles:
    """Caminhos dos arquivos PEM prontos para o servidor."""

    keyfile: Path
    certfile: Path

    def cleanup(self) -> None:
        for path in (self.keyfile, self.certfile):
            path.unlink(missing_ok=True)


def decode_pem(value_b64: str, name: str) -> bytes:
    """Decodifica PEM em base64.

    Raises:
        TlsMaterialError: Valor vazio ou base64 inválido.
    """
    if not value_b64 or not value_b64.strip():
        raise TlsMaterialError(f"{name} ausente")
    try:
        return base64.b64decode(value_b64.strip(), validate=True)
    except (ValueError, binascii.Error) as exc:
        raise TlsMaterialError(f"{name} não é base64 válido") from exc


def load_tls_material(key_b64: str, cert_b64: str) -> tuple[bytes, bytes]:
    """Decodifica e valida chave privada e certificado.

    Returns:
        (key_pem, cert_pem)

    Raises:
        TlsMaterialError: Se qualquer um for inválido.
    """
    key_pem = decode_pem(key_b64, "TLS_KEY_B64")
    cert_pem = decode_pem(cert_b64, "TLS_CERT_B64")

    try:
        serialization.load_pem_private_key(key_pem, password=None)
    except (ValueError, TypeError) as exc:
        raise TlsMaterialError("TLS_KEY_B64 não contém chave PEM válida") from exc

    try:
        x509.load_pem_x509_certificate(cert_pem)
    except ValueError as exc:
        raise TlsMaterialError("TLS_CERT_B64 não contém certificado PEM válido") from exc

    return key_pem, cert_pem


def write_tls_files(key_b64: str, cert_b64: str, directory: str | None = None) -> TlsFiles:
    """Valida o material TLS e grava em arquivos temporários privados.

    Se a gravação do certificado falhar, o arquivo da chave é removido.
    """
    key_pem, cert_pem = load_tls_material(key_b64, cert_b64)
    keyfile = _write_private(key_pem, suffix="-key.pem", directory=directory)
    try:
        certfile = _write_private(cert_pem, suffix="-cert.pem", directory=directory)
    except OSError:
        keyfile.unlink(missing_ok=True)
        raise
    return TlsFiles(keyfile=keyfile, certfile=certfile)


def _write_private(content: bytes, suffix: str, directory: str | None) -> Path:
    fd, name = tempfile.mkstemp(prefix="heating-sms-", suffix=suffix, dir=directory)
    path = Path(name)
    try:
        os.fchmod(fd, 0o600)
        os.write(fd, content)
    except OSError:
        os.close(fd)
        path.unlink(missing_ok=True)
        raise
    os.close(fd)
    return path
