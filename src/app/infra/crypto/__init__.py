"""Material TLS do servidor (variante hardened).

Localizado em app/infra/ para manter boundaries corretas.
"""

from .errors import TlsMaterialError
from .tls_material import TlsFiles, decode_pem, load_tls_material, write_tls_files

__all__ = [
    "TlsFiles",
    "TlsMaterialError",
    "decode_pem",
    "load_tls_material",
    "write_tls_files",
]
