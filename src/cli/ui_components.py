"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `report` y `doctor`.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.discipline import Discipline
from core.domain.models import Summary

SUMMARY_HEADERS = ("Id", "Name", "iRating", "License", "SR")


def print_banner(console: Console, discipline: Discipline) -> None:
    """Imprime la cabecera del reporte."""

    title = Text("irating-fetch", style="bold cyan")
    subtitle = Text(f"{discipline.label()} licenses", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(0, 4)))


def build_summary_table(summaries: Iterable[Summary]) -> Table:
    """Tabla Rich con una fila por piloto; celdas idénticas a las del CSV."""

    table = Table()
    id_header, name_header, irating_header, license_header, sr_header = SUMMARY_HEADERS
    table.add_column(id_header, style="cyan", no_wrap=True)
    table.add_column(name_header, style="white")
    table.add_column(irating_header, style="green", justify="right")
    table.add_column(license_header, style="magenta")
    table.add_column(sr_header, justify="right")
    for summary in summaries:
        # Text avoids Rich markup in driver names
        table.add_row(*(Text(cell) for cell in summary.as_row()))
    return table
