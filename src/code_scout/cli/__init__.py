"""CLI entry point: registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="code-scout",
    help="Code Scout - heuristic multi-language source scanner",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"code-scout {__version__}")
        raise typer.Exit()


@app.callback()
def _root(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Scan source files for imports, functions, TODOs and more."""


# Import subcommands to register them
from .file_commands import deps as _deps, functions as _functions, todos as _todos  # noqa: F401, E402
from .file_commands import resolve as _resolve  # noqa: F401, E402
from .text_commands import strip as _strip, tokens as _tokens  # noqa: F401, E402
from .directory_commands import project as _project, scan as _scan  # noqa: F401, E402


def main() -> None:
    app()
