"""Hash de credenciales para `/auth`.

iRacing no acepta el password en claro: espera
`base64(sha256(password + email.lower()))`. Cualquier variación (orden,
mayúsculas, alfabeto base64) no rompe la conexión pero sí el login.
"""

from __future__ import annotations

import base64
import hashlib


def encode_password(password: str, email: str) -> str:
    """Deriva el token de login (44 caracteres, base64 estándar con padding)."""

    digest = hashlib.sha256((password + email.lower()).encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")
