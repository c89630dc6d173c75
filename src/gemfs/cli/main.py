"""
CLI for the resource loader.

Commands:
    gemfs map ID - Print the absolute path for a resource
    gemfs read ID - Write resource bytes to stdout or a file
    gemfs digest ID... - Print SHA-256 digests of resources
    gemfs info ID - Print resource metadata as JSON
    gemfs config - Show current configuration
    gemfs version - Print version
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, NoReturn, Optional

import orjson
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gemfs import __version__
from gemfs.config import Settings, clear_settings_cache, get_settings
from gemfs.exceptions import GemFSError
from gemfs.loader import ResourceLoader
from gemfs.logging import setup_logging

app = typer.Typer(
    name="gemfs",
    help="Root-relative resource loading with hash-checked caching",
    no_args_is_help=True,
)

console = Console()
error_console = Console(stderr=True)

RootOption = Annotated[
    Optional[Path],
    typer.Option("--root", "-r", help="Resource root (overrides GEMFS_ROOT)"),
]


def _get_settings_safe() -> Settings | None:
    """Get settings, returning None if configuration is invalid."""
    try:
        clear_settings_cache()
        return get_settings()
    except ValueError:
        return None


def _build_loader(root: Path | None) -> ResourceLoader:
    """Create a loader from settings, applying the --root override."""
    settings = _get_settings_safe()
    if settings is None:
        error_console.print(
            "[red]Error:[/red] Configuration is invalid. "
            "Run 'gemfs config' to see the current values."
        )
        raise typer.Exit(1)

    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    if root is not None:
        settings = settings.model_copy(update={"ROOT": root})
    return ResourceLoader.from_settings(settings)


def _fail(error: GemFSError) -> NoReturn:
    error_console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False)
    raise typer.Exit(1)


@app.command("map")
def map_(
    identifier: Annotated[str, typer.Argument(help="Root-relative resource identifier")],
    root: RootOption = None,
) -> None:
    """Print the absolute path an identifier maps to. No disk access."""
    loader = _build_loader(root)
    console.print(str(loader.map(identifier)), highlight=False, soft_wrap=True, markup=False)


@app.command()
def read(
    identifier: Annotated[str, typer.Argument(help="Root-relative resource identifier")],
    root: RootOption = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write content to this file instead of stdout"),
    ] = None,
) -> None:
    """Load a resource and write its raw bytes."""
    loader = _build_loader(root)
    try:
        content = loader.read(identifier)
    except GemFSError as e:
        _fail(e)

    if output is not None:
        output.write_bytes(content)
        console.print(f"[dim]Wrote {len(content)} bytes to[/dim] {escape(str(output))}")
    else:
        typer.echo(content, nl=False)


@app.command()
def digest(
    identifiers: Annotated[list[str], typer.Argument(help="Resource identifiers")],
    root: RootOption = None,
) -> None:
    """Print the SHA-256 digest of each resource, sha256sum style."""
    loader = _build_loader(root)
    failed = False
    for identifier in identifiers:
        try:
            loader.read(identifier)
            info = loader.info(identifier)
        except GemFSError as e:
            error_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
            failed = True
            continue
        console.print(f"{info.hexdigest}  {identifier}", highlight=False, soft_wrap=True, markup=False)

    if failed:
        raise typer.Exit(1)


@app.command()
def info(
    identifier: Annotated[str, typer.Argument(help="Root-relative resource identifier")],
    root: RootOption = None,
) -> None:
    """Print path, size and digest of a resource as JSON."""
    loader = _build_loader(root)
    try:
        loader.read(identifier)
        resource_info = loader.info(identifier)
    except GemFSError as e:
        _fail(e)

    console.print(
        orjson.dumps(resource_info.to_dict(), option=orjson.OPT_INDENT_2).decode(),
        highlight=False,
        soft_wrap=True,
        markup=False,
    )


@app.command()
def config() -> None:
    """Show current configuration."""
    console.print()
    console.print("[bold]gemfs Configuration[/bold]")
    console.print()

    settings = _get_settings_safe()
    if settings is None:
        error_console.print("[red]Configuration is invalid.[/red]")
        error_console.print()
        error_console.print("Check the GEMFS_* environment variables:")
        error_console.print("  - GEMFS_CHUNK_SIZE (positive integer)")
        error_console.print("  - GEMFS_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
        raise typer.Exit(1)

    table = Table(title="Settings", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for key, value in settings.redacted_display().items():
        display_value = str(value) if value is not None else "[dim]not set[/dim]"
        table.add_row(key, display_value)

    console.print(table)
    console.print()


@app.command()
def version() -> None:
    """Print the version number."""
    console.print(f"gemfs version {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
