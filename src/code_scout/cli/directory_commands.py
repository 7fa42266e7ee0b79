"""Directory commands: project type detection and whole-tree scans."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..file_ops import safe_scan_directory
from ..scanning import FileAnalyzer, IgnoreMatcher, ProjectTypeDetector
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

DIR_ARGUMENT = typer.Argument(
    Path("."),
    help="Directory to inspect",
    exists=True,
    file_okay=False,
    dir_okay=True,
)


@app.command()
def project(
    path: Path = DIR_ARGUMENT,
    fmt: str = FORMAT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """Guess a directory's ecosystem from its marker files."""
    check_format(fmt)
    with cli_errors(fmt):
        resolve_config(config, verbose=verbose, quiet=quiet)
        guess = ProjectTypeDetector().detect(path)

        if fmt == "json":
            emit_json(guess.to_dict())
            return

        console.print(
            f"[bold]{escape(guess.detected_type)}[/bold] "
            f"[dim](confidence {guess.confidence:.0%})[/dim]"
        )
        if guess.indicators:
            console.print(f"  Indicators: {escape(', '.join(guess.indicators))}")


@app.command()
def scan(
    path: Path = DIR_ARGUMENT,
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        "-e",
        help="Extra ignore token (substring, or *.ext); repeatable",
    ),
    fmt: str = FORMAT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    Scan every text file under a directory.

    Skips the default ignore list (node_modules, .git, build output, caches,
    editor folders, *.pyc, OS metadata), binary files and oversized files.

    [bold cyan]Examples:[/bold cyan]

      code-scout scan .

      code-scout scan src -e generated -e "*.min.js" --format json
    """
    check_format(fmt)
    with cli_errors(fmt):
        settings = resolve_config(config, verbose=verbose, quiet=quiet)
        matcher = IgnoreMatcher(list(settings.exclude_patterns) + list(exclude or []))
        files = list(
            safe_scan_directory(
                path, should_ignore=matcher, max_file_size=settings.max_file_size_bytes
            )
        )

        analyzer = FileAnalyzer(max_scan_lines=settings.max_scan_lines)
        result = analyzer.analyze(files)
        guess = ProjectTypeDetector().detect(path)

        if fmt == "json":
            payload = result.to_dict()
            payload["project_type"] = guess.to_dict()
            emit_json(payload)
            return

        console.print(
            f"[bold cyan]{escape(str(path))}[/bold cyan]: "
            f"{escape(guess.detected_type)}, {result.scanned_count} file(s) scanned"
        )

        per_file = {}
        for dep in result.dependencies:
            per_file.setdefault(dep.file, [0, 0, 0])[0] += 1
        for fn in result.functions:
            per_file.setdefault(fn.file, [0, 0, 0])[1] += 1
        for item in result.annotations:
            per_file.setdefault(item.file, [0, 0, 0])[2] += 1

        if per_file:
            table = Table()
            table.add_column("File")
            table.add_column("Deps", justify="right", style="cyan")
            table.add_column("Functions", justify="right", style="green")
            table.add_column("TODOs", justify="right", style="yellow")
            for file in sorted(per_file):
                counts = per_file[file]
                rel = Path(file).relative_to(path) if Path(file).is_relative_to(path) else file
                table.add_row(escape(str(rel)), *(str(c) for c in counts))
            console.print(table)

        console.print(
            f"Totals: {len(result.dependencies)} deps, {len(result.functions)} functions, "
            f"{len(result.annotations)} annotations"
        )
        for failed, reason in sorted(result.failures.items()):
            console.print(f"[yellow]Skipped[/yellow] {escape(failed)}: {escape(reason)}")
