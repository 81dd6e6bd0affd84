"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
import shutil

import typer
from rich.console import Console
from rich.table import Table

from adapters.json_file_store import JsonFileStore
from adapters.process_runner import SubprocessRunner
from core.config import AppSettings, write_user_settings
from core.services.listing_parser import find_device_id
from core.version import APP_VERSION

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_listing(settings: AppSettings) -> tuple[bool, str]:
    try:
        output = await SubprocessRunner(settings).execute(settings.listing_command())
    except Exception as exc:
        return False, str(exc)
    device_id = find_device_id(output)
    if device_id is None:
        return False, "No device banner in the listing"
    return True, device_id


def _check_cache(store: JsonFileStore) -> tuple[str, str]:
    if not store.exists():
        return "EMPTY", "No cached device yet"
    try:
        cached = store.read_as_structured()
    except ValueError as exc:
        return "FAIL", f"Unreadable cache: {exc}"
    version = cached.get("version") if isinstance(cached, dict) else None
    if version != APP_VERSION:
        return "STALE", f"Cached version {version!r}, will be refreshed"
    return "OK", f"Device {cached.get('id')!r}"


@app.command()
def run(
    listing: bool = typer.Option(True, "--listing/--no-listing", help="Also run the listing command."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    store = JsonFileStore.from_settings(settings)

    table = Table(title="scandev Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    executable = shutil.which(settings.scanimage)
    table.add_row("scanimage", "OK" if executable else "FAIL", executable or f"{settings.scanimage!r} not found")
    table.add_row("Command", "OK", settings.listing_command())

    cache_status, cache_detail = _check_cache(store)
    table.add_row("Cache", cache_status, f"{store.path} ({cache_detail})")

    ok_listing = True
    if listing and executable:
        ok_listing, detail_listing = asyncio.run(_check_listing(settings))
        table.add_row("Listing", "OK" if ok_listing else "FAIL", detail_listing)

    _console.print(table)

    if not executable:
        _console.print(
            "\n[yellow]Note:[/yellow] install sane-utils or run `scandev doctor set-scanimage` with its path."
        )
    elif not ok_listing:
        _console.print("\n[yellow]Note:[/yellow] check that the scanner is connected and visible to `scanimage -L`.")


@app.command(name="set-scanimage")
def set_scanimage(
    path: str = typer.Argument(..., help="scanimage executable (name on PATH or absolute path)."),
) -> None:
    """Store the scanimage executable in the user config .env."""

    if not path.strip():
        raise typer.BadParameter("path is required")

    env_path = write_user_settings({"scanimage": path.strip()})
    _console.print(f"[green]Saved scanimage path to:[/green] {env_path}")
