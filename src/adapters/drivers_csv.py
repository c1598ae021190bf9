"""Lectura del CSV de pilotos.

Formato: CSV con cabecera y una columna `id` (entero sin signo) por fila.
Las demás columnas se ignoran.
"""

from __future__ import annotations

import csv
from pathlib import Path

from pydantic import ValidationError

from core.domain.errors import DriverFileError
from core.domain.models import DriverRequest


def read_driver_ids(path: Path) -> list[int]:
    """Devuelve los `id` en el orden del fichero."""

    if not path.is_file():
        raise DriverFileError(f"drivers file not found: {path}")

    with path.open(newline="", encoding="utf-8-sig") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames or "id" not in reader.fieldnames:
            raise DriverFileError(f"{path}: missing 'id' column")

        ids: list[int] = []
        for row in reader:
            try:
                driver = DriverRequest.model_validate(row)
            except ValidationError as exc:
                raise DriverFileError(
                    f"{path}:{reader.line_num}: invalid driver id {row.get('id')!r}"
                ) from exc
            ids.append(driver.id)
    return ids
