"""Shared CLI helpers."""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import ScanConfig, load_config
from ..exceptions import CodeScoutError, SerializationError
from ..logging_config import setup_logging

console = Console()

OUTPUT_FORMATS = ("rich", "json")

# Shared option definitions
FORMAT_OPTION = typer.Option(
    "rich",
    "--format",
    "-f",
    help="Output format: rich (human-readable) or json",
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
QUIET_OPTION = typer.Option(False, "--quiet", "-q", help="Only log errors")
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Configuration file (TOML)",
    exists=True,
    file_okay=True,
    dir_okay=False,
)


def resolve_config(
    config: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
    **overrides,
) -> ScanConfig:
    """Build the config from CLI options, then set up logging from its verbosity."""
    settings = load_config(config_file=config, verbose=verbose, quiet=quiet, **overrides)
    setup_logging(
        verbose=settings.verbosity == "verbose", quiet=settings.verbosity == "quiet"
    )
    return settings


def check_format(fmt: str) -> str:
    if fmt not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"Unknown format {fmt!r}. Choose from: {', '.join(OUTPUT_FORMATS)}",
            param_hint="--format",
        )
    return fmt


def emit_json(data: Any) -> None:
    """Print data as indented JSON on stdout."""
    try:
        text = json.dumps(data, indent=2)
    except (TypeError, ValueError) as e:
        raise SerializationError("json", str(e))
    typer.echo(text)


@contextmanager
def cli_errors(fmt: str = "rich") -> Iterator[None]:
    """Report CodeScoutError and exit with code 1.

    With ``fmt == "json"`` the error is written to stdout as
    ``{"error": {"type", "message", "details"}}``.
    """
    try:
        yield
    except typer.Exit:
        raise
    except CodeScoutError as e:
        if fmt == "json":
            typer.echo(json.dumps({"error": e.to_dict()}, indent=2))
        else:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)
