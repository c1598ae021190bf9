"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta de los payloads de la API sin acoplar el Core
  a httpx.
- Los modelos son inmutables (`frozen`): un `Member` deserializado no cambia.

Nota:
- Estos modelos describen *qué* devuelve la API, no *cómo* se obtiene.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

import httpx
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.config import ConfigDict

# Los ids de iRacing son u32.
U32_MAX = 2**32 - 1


class License(BaseModel):
    """Licencia de un piloto en una disciplina."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    category: str = Field(
        ...,
        description="Disciplina de la licencia ('road', 'oval', 'dirt_road', 'dirt_oval').",
    )
    irating: int = Field(
        default=0,
        ge=0,
        description="iRating en la disciplina; 0 si la API no lo envía.",
    )
    group_name: str = Field(
        ...,
        description="Nivel de licencia (p.ej. 'Class B').",
    )
    safety_rating: float = Field(
        ...,
        description="Safety rating asociado a la licencia.",
    )

    @field_validator("irating", mode="before")
    @classmethod
    def _null_irating(cls, value: Any) -> Any:
        return 0 if value is None else value


class Member(BaseModel):
    """Miembro de iRacing con sus licencias, en el orden de la API."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    cust_id: int = Field(
        ...,
        ge=0,
        le=U32_MAX,
        description="Identificador numérico del miembro.",
    )
    display_name: str = Field(
        ...,
        description="Nombre público del piloto.",
    )
    licenses: list[License] = Field(
        ...,
        description="Licencias del piloto (una por disciplina en la práctica).",
    )


class MembersPayload(BaseModel):
    """Forma de éxito de `/data/member/get`."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    members: list[Member]


class LinkResponse(BaseModel):
    """Puntero devuelto por los endpoints de datos.

    El enlace suele ser una URL pre-firmada: se guarda como `str` para no
    re-normalizar su query.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    link: str = Field(..., min_length=1)

    @field_validator("link")
    @classmethod
    def _absolute_http(cls, value: str) -> str:
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as exc:
            raise ValueError(str(exc)) from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError("link must be an absolute http(s) URL")
        return value


class DriverRequest(BaseModel):
    """Fila del CSV de pilotos."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(..., ge=0, le=U32_MAX)


class Summary(BaseModel):
    """Proyección de solo lectura para tabla y CSV."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    irating: str = Field(..., alias="iRating")
    license: str
    sr: str = Field(..., alias="SR")

    def as_row(self) -> list[str]:
        return [self.id, self.name, self.irating, self.license, self.sr]


T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class ApiSuccess(Generic[T]):
    data: T


@dataclass(frozen=True)
class ApiFailure:
    """Respuesta con forma desconocida.

    `error` conserva el fallo de validación para diagnóstico; hacia fuera solo
    se expone como `UnknownApiResponseError`.
    """

    payload: Any
    error: ValidationError | None = None


ApiResponse = Union[ApiSuccess[T], ApiFailure]


def parse_api_response(model: type[T], payload: Any) -> ApiResponse[T]:
    """Intenta primero la forma de éxito; si no encaja, devuelve `ApiFailure`."""

    try:
        return ApiSuccess(model.model_validate(payload))
    except ValidationError as exc:
        return ApiFailure(payload=payload, error=exc)
