"""Per-file commands: dependencies, functions, annotations, import resolution."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..exceptions import UnsupportedLanguageError
from ..scanning import (
    PATTERNS,
    AnnotationExtractor,
    DependencyDetector,
    FunctionExtractor,
    ImportResolver,
    detect_family,
    file_extension,
    supported_extensions,
)
from . import app
from ._common import (
    CONFIG_OPTION,
    FORMAT_OPTION,
    QUIET_OPTION,
    VERBOSE_OPTION,
    check_format,
    cli_errors,
    console,
    emit_json,
    resolve_config,
)

FILE_ARGUMENT = typer.Argument(
    ...,
    help="Source file to scan",
    exists=True,
    file_okay=True,
    dir_okay=False,
)


@app.command()
def deps(
    path: Path = FILE_ARGUMENT,
    fmt: str = FORMAT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    List import/require/use statements in a file.

    [bold cyan]Examples:[/bold cyan]

      code-scout deps src/app.ts

      code-scout deps main.py --format json
    """
    check_format(fmt)
    with cli_errors(fmt):
        resolve_config(config, verbose=verbose, quiet=quiet)
        dependencies = DependencyDetector().scan(path)

        if fmt == "json":
            emit_json([d.to_dict() for d in dependencies])
            return

        if not dependencies:
            console.print("[dim]No dependencies found[/dim]")
            return

        table = Table(title=f"Dependencies: {escape(str(path))}")
        table.add_column("Line", justify="right", style="cyan")
        table.add_column("Kind", style="magenta")
        table.add_column("Dependency")
        for dep in dependencies:
            table.add_row(str(dep.line_number), dep.import_type, escape(dep.dependency))
        console.print(table)


@app.command()
def functions(
    path: Path = FILE_ARGUMENT,
    fmt: str = FORMAT_OPTION,
    show_body: bool = typer.Option(False, "--body", "-b", help="Print each function body"),
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    List functions with their approximate line spans.

    Boundaries come from brace counting or indentation, not a parser.
    """
    check_format(fmt)
    with cli_errors(fmt):
        settings = resolve_config(config, verbose=verbose, quiet=quiet)
        if not PATTERNS[detect_family(path)].extracts_functions:
            raise UnsupportedLanguageError(
                file_extension(path), supported_extensions(functions_only=True)
            )
        records = FunctionExtractor(max_scan_lines=settings.max_scan_lines).scan(path)

        if fmt == "json":
            emit_json([r.to_dict() for r in records])
            return

        if not records:
            console.print("[dim]No functions found[/dim]")
            return

        table = Table(title=f"Functions: {escape(str(path))}")
        table.add_column("Name", style="bold")
        table.add_column("Lines", justify="right", style="cyan")
        table.add_column("Signature", overflow="fold")
        for record in records:
            table.add_row(
                escape(record.name),
                f"{record.line_start}-{record.line_end}",
                escape(record.signature),
            )
        console.print(table)

        if show_body:
            for record in records:
                console.rule(f"{escape(record.name)} ({record.line_start}-{record.line_end})")
                console.print(record.content, markup=False, highlight=False)


@app.command()
def todos(
    path: Path = FILE_ARGUMENT,
    fmt: str = FORMAT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """List TODO, FIXME, NOTE, HACK and XXX comments in a file."""
    check_format(fmt)
    with cli_errors(fmt):
        resolve_config(config, verbose=verbose, quiet=quiet)
        items = AnnotationExtractor().scan(path)

        if fmt == "json":
            emit_json([i.to_dict() for i in items])
            return

        if not items:
            console.print("[dim]No annotations found[/dim]")
            return

        table = Table(title=f"Annotations: {escape(str(path))}")
        table.add_column("Line", justify="right", style="cyan")
        table.add_column("Type", style="yellow")
        table.add_column("Message", overflow="fold")
        for item in items:
            table.add_row(str(item.line_number), item.todo_type, escape(item.message))
        console.print(table)


@app.command()
def resolve(
    path: Path = FILE_ARGUMENT,
    fmt: str = FORMAT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    Resolve a file's relative imports to files on disk.

    Package imports (not starting with . or /) are skipped.
    """
    check_format(fmt)
    with cli_errors(fmt):
        settings = resolve_config(config, verbose=verbose, quiet=quiet)
        resolved = ImportResolver(extensions=settings.resolve_extensions).resolve(path)

        if fmt == "json":
            emit_json(resolved)
            return

        if not resolved:
            console.print("[dim]No local imports resolved[/dim]")
            return

        for target in resolved:
            console.print(escape(target), highlight=False)
