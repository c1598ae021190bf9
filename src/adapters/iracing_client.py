"""Cliente de la API de datos de iRacing (members-ng).

Por qué está en adapters:
- Habla HTTP (httpx) y traduce fallos de transporte/HTTP a errores del dominio.
- El Core solo ve `Member` a través del contrato `MemberSource`.

Protocolo:
- `/auth` recibe `{email, password}` con el password ya hasheado y deja una
  cookie de sesión en el cliente.
- Los endpoints de datos no devuelven el payload: devuelven `{"link": url}` y
  hay que hacer un segundo GET a ese enlace.
"""

from __future__ import annotations

from typing import Sequence

import httpx
from pydantic import ValidationError

from adapters.credentials import encode_password
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import (
    ApiTransportError,
    DeserializationError,
    DownForMaintenanceError,
    HttpStatusError,
    UnknownApiResponseError,
)
from core.domain.models import (
    ApiFailure,
    ApiResponse,
    LinkResponse,
    Member,
    MembersPayload,
    T,
    parse_api_response,
)
from core.logger import get_logger
from core.services.roster import MAX_BATCH_SIZE

logger = get_logger("client")


def check_response(response: httpx.Response) -> None:
    """Clasifica una respuesta antes de leer su JSON.

    - 503 es la señal documentada de mantenimiento programado.
    - Cualquier otro 4xx/5xx es un error HTTP genérico.
    """

    if response.status_code == httpx.codes.SERVICE_UNAVAILABLE:
        raise DownForMaintenanceError()
    if response.is_error:
        raise HttpStatusError(response.status_code, str(response.request.url))


async def _send(client: httpx.AsyncClient, request: httpx.Request) -> httpx.Response:
    logger.debug("%s %s%s", request.method, request.url.host, request.url.path)
    try:
        return await client.send(request)
    except httpx.RequestError as exc:
        raise ApiTransportError(f"{request.method} {request.url.host}: {exc}") from exc


class IRacingSession:
    """Sesión autenticada contra la API.

    Solo se construye vía `login`. El cliente httpx y su jar de cookies son el
    único estado mutable y pertenecen a esta instancia.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: httpx.URL) -> None:
        self._client = client
        self._base_url = base_url

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @classmethod
    async def login(
        cls,
        email: str,
        password: str,
        *,
        settings: AppSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> IRacingSession:
        settings = settings or AppSettings()
        owns_client = client is None
        client = client or build_async_client(settings)
        base_url = httpx.URL(settings.base_url)

        request = client.build_request(
            "POST",
            base_url.join("auth"),
            json={"email": email, "password": encode_password(password, email)},
        )
        try:
            response = await _send(client, request)
            check_response(response)
        except Exception:
            if owns_client:
                await client.aclose()
            raise

        logger.info("Authenticated as %s", email)
        return cls(client, base_url)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> IRacingSession:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def fetch_link(self, request: httpx.Request, model: type[T]) -> ApiResponse[T]:
        """Ejecuta `request` y resuelve el enlace que devuelve.

        Siempre dos round trips; el enlace no se cachea entre llamadas.
        """

        link_response = await _send(self._client, request)
        check_response(link_response)
        try:
            link = LinkResponse.model_validate_json(link_response.content)
        except ValidationError as exc:
            raise DeserializationError(
                f"expected a link object from {request.url.path}"
            ) from exc

        data_response = await _send(self._client, self._client.build_request("GET", link.link))
        check_response(data_response)
        try:
            payload = data_response.json()
        except ValueError as exc:
            raise DeserializationError("linked payload is not valid JSON") from exc

        return parse_api_response(model, payload)

    async def get_members(self, cust_ids: Sequence[int]) -> list[Member]:
        """Miembros con licencias para un lote de hasta 10 `cust_ids`."""

        if not cust_ids:
            return []
        if len(cust_ids) > MAX_BATCH_SIZE:
            raise ValueError(f"at most {MAX_BATCH_SIZE} cust_ids per request, got {len(cust_ids)}")

        request = self._client.build_request(
            "GET",
            self._base_url.join("data/member/get/"),
            params={
                "cust_ids": ",".join(str(cust_id) for cust_id in cust_ids),
                "include_licenses": "true",
            },
        )
        result = await self.fetch_link(request, MembersPayload)
        if isinstance(result, ApiFailure):
            logger.debug("Unrecognized member payload: %s", result.error)
            raise UnknownApiResponseError() from result.error
        return list(result.data.members)

