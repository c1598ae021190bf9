"""CLI de irating-fetch (Typer).

Por qué la CLI hace el prompting:
- El Core recibe credenciales ya resueltas y nunca lee del terminal, así se
  puede testear sin TTY.
- Config/env/TOML se resuelven aquí una sola vez por ejecución.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import NoReturn, Sequence

import typer
from rich.console import Console
from rich.markup import escape

from adapters.csv_exporter import export_path_for, export_summaries_csv
from adapters.drivers_csv import read_driver_ids
from adapters.iracing_client import IRacingSession
from cli.doctor import app as doctor_app
from cli.ui_components import build_summary_table, print_banner
from core.config import AppSettings, load_settings
from core.domain.discipline import Discipline
from core.domain.errors import (
    ConfigError,
    DriverFileError,
    IRacingApiError,
    LicenseNotFoundError,
)
from core.domain.models import Member
from core.logger import setup_logger
from core.services.licenses import summarize
from core.services.roster import BatchErrorPolicy, PipelineHooks, fetch_all

app = typer.Typer(no_args_is_help=True, help="Licencias e iRating de una lista de pilotos de iRacing.")
app.add_typer(doctor_app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _fail(exc: Exception) -> NoReturn:
    _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    raise typer.Exit(code=1)


def _warn(message: str) -> None:
    _err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def _resolve_credentials(settings: AppSettings) -> tuple[str, str]:
    email = settings.auth.email or typer.prompt("Email")
    password = settings.auth.password or typer.prompt("Password", hide_input=True)
    return email.strip(), password.strip()


async def _collect_members(
    settings: AppSettings,
    email: str,
    password: str,
    ids: Sequence[int],
    policy: BatchErrorPolicy,
    hooks: PipelineHooks,
) -> list[Member]:
    session = await IRacingSession.login(email, password, settings=settings)
    async with session:
        return await fetch_all(session, ids, policy=policy, hooks=hooks)


@app.command()
def report(
    mode: Discipline = typer.Option(..., "--mode", "-m", help="Disciplina de la licencia."),
    drivers: Path = typer.Option(
        Path("drivers.csv"), "--drivers", "-d", help="CSV con una columna 'id'."
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="TOML con [auth] email/password."
    ),
    skip_missing: bool = typer.Option(
        False, "--skip-missing", help="Omitir pilotos sin licencia en la disciplina."
    ),
    continue_on_error: bool = typer.Option(
        False, "--continue-on-error", help="Seguir con el resto de lotes si uno falla."
    ),
    banner: bool = typer.Option(True, "--banner/--no-banner"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Consulta los pilotos, imprime la tabla y exporta el CSV."""

    setup_logger(level=logging.DEBUG if verbose else logging.INFO)

    try:
        settings = load_settings(config)
        ids = read_driver_ids(drivers)
    except (ConfigError, DriverFileError) as exc:
        _fail(exc)

    email, password = _resolve_credentials(settings)
    policy = BatchErrorPolicy.CONTINUE if continue_on_error else BatchErrorPolicy.ABORT
    hooks = PipelineHooks(warning=_warn)

    try:
        members = asyncio.run(_collect_members(settings, email, password, ids, policy, hooks))
        summaries = summarize(members, mode, skip_missing=skip_missing, hooks=hooks)
    except (IRacingApiError, LicenseNotFoundError) as exc:
        _fail(exc)

    if banner:
        print_banner(_console, mode)
    _console.print(build_summary_table(summaries))

    try:
        output_path = export_summaries_csv(summaries=summaries, output_path=export_path_for(drivers))
    except OSError as exc:
        _fail(exc)
    _err_console.print(f"[green]Saved CSV to:[/green] {escape(str(output_path))}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
