"""Contrato de fuentes de miembros.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El orquestador de lotes puede testearse con una fuente en memoria sin HTTP.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import Member


@runtime_checkable
class MemberSource(Protocol):
    """Contrato mínimo para obtener miembros por identificador.

    Reglas de diseño:
    - `get_members` es asíncrono porque típicamente hará I/O (HTTP).
    - Recibe como mucho un lote; el orden de la respuesta es el de la API.
    """

    async def get_members(self, cust_ids: Sequence[int]) -> list[Member]:
        """Devuelve los miembros de un lote de `cust_ids`."""

        ...
