"""Text commands: comment stripping and token estimates."""

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..file_ops import safe_read_file
from ..scanning import detect_family, estimate_tokens, filter_comments
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
from .file_commands import FILE_ARGUMENT


@app.command()
def strip(
    path: Path = FILE_ARGUMENT,
    keep_comments: bool = typer.Option(
        False, "--keep-comments", help="Print the file unchanged"
    ),
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    Print a file with its comments removed.

    [bold cyan]Examples:[/bold cyan]

      code-scout strip src/app.ts > app.nocomments.ts
    """
    with cli_errors():
        resolve_config(config, verbose=verbose, quiet=quiet)
        content = safe_read_file(path)
        typer.echo(filter_comments(content, detect_family(path), include=keep_comments))


@app.command()
def tokens(
    path: Path = FILE_ARGUMENT,
    strip_comments: Optional[bool] = typer.Option(
        None,
        "--strip-comments/--keep-comments",
        help="Estimate on comment-free text (default from config include_comments)",
    ),
    fmt: str = FORMAT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """Estimate how many LLM tokens a file costs."""
    check_format(fmt)
    with cli_errors(fmt):
        settings = resolve_config(config, verbose=verbose, quiet=quiet)
        include = settings.include_comments if strip_comments is None else not strip_comments

        content = filter_comments(safe_read_file(path), detect_family(path), include=include)
        estimate = estimate_tokens(content)

        if fmt == "json":
            emit_json(estimate.to_dict())
            return

        table = Table(title=f"Token estimate: {path.name}", show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        table.add_row("Characters", f"{estimate.char_count:,}")
        table.add_row("Words", f"{estimate.word_count:,}")
        table.add_row("Lines", f"{estimate.line_count:,}")
        table.add_row("GPT-4", f"{estimate.gpt4_estimate:,}")
        table.add_row("Claude", f"{estimate.claude_estimate:,}")
        table.add_row("Gemini", f"{estimate.gemini_estimate:,}")
        console.print(table)
        if not include:
            console.print("[dim]Comments excluded[/dim]")
