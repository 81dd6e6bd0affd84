"""scandev CLI (Typer).

Commands:
- `show`: cached device (or a fresh listing when the cache is stale)
- `parse`: build a device from a saved listing or JSON file, no cache involved
- `reset`: forget the cached device
- `doctor`: environment checks and configuration
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.json_file_store import JsonFileStore
from adapters.process_runner import SubprocessRunner
from cli import doctor
from cli.ui_components import build_features_table, print_banner
from core.config import AppSettings
from core.domain.errors import CommandExecutionError, DeviceListingError, UnsupportedInputTypeError
from core.domain.models import DeviceModel
from core.services.device_assembler import DeviceService, build_device_model, serialize_device

app = typer.Typer(no_args_is_help=True, help="Scanner capability model built from `scanimage -A`.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, rich_tracebacks=True)],
        force=True,
    )


def build_service(settings: AppSettings) -> DeviceService:
    return DeviceService(
        runner=SubprocessRunner(settings),
        store=JsonFileStore.from_settings(settings),
        settings=settings,
    )


def _fail(exc: Exception, *, hint: str | None = None) -> NoReturn:
    _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    if hint:
        _err_console.print(f"[yellow]Hint:[/yellow] {escape(hint)}")
    raise typer.Exit(code=1) from exc


def _render(device: DeviceModel, as_json: bool) -> None:
    if as_json:
        _console.print_json(serialize_device(device))
        return
    print_banner(_console, device)
    _console.print(build_features_table(device))


@app.command()
def show(
    refresh: bool = typer.Option(False, "--refresh", help="Ignore the cache and list the device again."),
    as_json: bool = typer.Option(False, "--json", help="Print the model as JSON."),
) -> None:
    """Show the device capabilities."""

    settings = AppSettings()
    configure_logging(settings.log_level)
    service = build_service(settings)

    try:
        if refresh:
            device = asyncio.run(service.refresh_device())
        else:
            device = asyncio.run(service.get_device())
    except (CommandExecutionError, DeviceListingError) as exc:
        _fail(exc)
    except ValueError as exc:
        # Unreadable or invalid cache file (JSONDecodeError, ValidationError).
        _fail(exc, hint=f"run `scandev reset` to discard {settings.cache_path}")

    _render(device, as_json)


@app.command()
def parse(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Listing text or device JSON."),
    as_json: bool = typer.Option(False, "--json", help="Print the model as JSON."),
) -> None:
    """Build a device from a saved `scanimage -A` listing (or a cached JSON)."""

    settings = AppSettings()
    configure_logging(settings.log_level)

    raw = path.read_text(encoding="utf-8")

    try:
        source: object = json.loads(raw) if path.suffix.lower() == ".json" else raw
        device = build_device_model(source)
    except (UnsupportedInputTypeError, ValueError) as exc:
        _fail(exc)

    _render(device, as_json)


@app.command()
def reset() -> None:
    """Delete the cached device."""

    settings = AppSettings()
    configure_logging(settings.log_level)
    build_service(settings).reset_device()
    _console.print(f"[green]Cache cleared:[/green] {settings.cache_path}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
