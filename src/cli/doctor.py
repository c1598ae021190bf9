"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
from pathlib import Path

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.iracing_client import check_response
from core.config import AppSettings, get_user_config_file, load_settings
from core.domain.errors import ConfigError, DownForMaintenanceError, IRacingApiError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: AppSettings) -> tuple[str, str]:
    """Probe the API origin and classify the answer like any other call."""

    try:
        async with build_async_client(settings) as client:
            response = await client.get(settings.base_url)
        check_response(response)
    except DownForMaintenanceError as exc:
        return "MAINTENANCE", str(exc)
    except IRacingApiError as exc:
        return "FAIL", str(exc)
    except httpx.HTTPError as exc:
        return "FAIL", str(exc)
    return "OK", f"HTTP {response.status_code}"


@app.command()
def run(
    config: Path | None = typer.Option(None, "--config", "-c", help="TOML file to check."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    try:
        settings = load_settings(config)
    except ConfigError as exc:
        _console.print(f"[red]Config:[/red] {exc}")
        raise typer.Exit(code=1)

    table = Table(title="irating-fetch Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    for label, path in (("Project config", Path("config.toml")), ("User config", get_user_config_file())):
        table.add_row(label, "FOUND" if path.is_file() else "MISSING", str(path))
    table.add_row("Email", "OK" if settings.auth.email else "PROMPT", "Asked interactively when missing")
    table.add_row("Password", "OK" if settings.auth.password else "PROMPT", "Asked interactively when missing")
    table.add_row("Base URL", "OK", settings.base_url)

    # Connectivity (best-effort)
    status, detail = asyncio.run(_check_api(settings))
    table.add_row("API reachability", status, detail)

    _console.print(table)

    if status == "MAINTENANCE":
        _console.print("\n[yellow]Note:[/yellow] iRacing is in scheduled maintenance; `report` will fail until it ends.")
