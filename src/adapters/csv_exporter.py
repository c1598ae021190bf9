"""Exportación CSV del resumen.

Por qué CSV:
- Es lo que consumen las hojas de cálculo de las ligas.
- El fichero va junto al CSV de entrada, con timestamp unix para no pisar
  exportaciones anteriores.
"""

from __future__ import annotations

import csv
import time
from pathlib import Path
from typing import Iterable

from core.domain.models import Summary

CSV_FIELDS = ["id", "name", "iRating", "license", "SR"]


def export_path_for(drivers_path: Path, timestamp: int | None = None) -> Path:
    """`<dir>/<stem>-<unix>.csv` junto al fichero de pilotos."""

    timestamp = int(time.time()) if timestamp is None else timestamp
    stem = drivers_path.stem or "drivers"
    return drivers_path.with_name(f"{stem}-{timestamp}.csv")


def export_summaries_csv(*, summaries: Iterable[Summary], output_path: Path) -> Path:
    """Escribe los resúmenes con las mismas celdas que la tabla."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for summary in summaries:
            writer.writerow(summary.model_dump(by_alias=True))
    return output_path
