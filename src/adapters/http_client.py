"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y la persistencia de cookies de sesión.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - El cliente guarda las cookies de `/auth` en su jar y las reenvía en cada
      request posterior, incluida la del enlace resuelto.
    - Centraliza timeouts/headers para todas las llamadas a la API.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        cookies=httpx.Cookies(),
        transport=transport,
    )
