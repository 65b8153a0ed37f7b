"""Command line front end: group the lines of a text file."""

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import Annotated, Final

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

import keygroup as kg

logger = logging.getLogger(__name__)

CONSOLE: Final = Console()
ERR_CONSOLE: Final = Console(stderr=True)

app = typer.Typer(help="Group lines of text by a key, in first-occurrence order.")


class By(StrEnum):
    """Built-in keys computed from each line."""

    IDENTITY = "identity"
    CASEFOLD = "casefold"
    LENGTH = "length"
    FIRST_WORD = "first-word"


def _first_word(line: str) -> str:
    words = line.split(maxsplit=1)
    return words[0] if words else ""


KEYS: Final[dict[By, Callable[[str], object]]] = {
    By.IDENTITY: lambda line: line,
    By.CASEFOLD: str.casefold,
    By.LENGTH: len,
    By.FIRST_WORD: _first_word,
}


def field_key(index: int, sep: str | None) -> Callable[[str], str]:
    """Key extracting the `index`-th field of a line split on `sep` (whitespace when None)."""

    def _field(line: str) -> str:
        return line.split(sep)[index]

    return _field


def _render_table(groups: kg.Groups[object, str]) -> Table:
    table = Table(title=f"{len(groups)} groups")
    table.add_column("key", style="bold cyan")
    table.add_column("count", justify="right", style="green")
    table.add_column("members")
    for g in groups.iter_groups():
        table.add_row(escape(repr(g.key)), str(len(g.values)), escape(", ".join(g.values)))
    return table


def enable_debug_logging() -> None:
    """Send debug records of the `keygroup` loggers to stderr through rich."""
    pkg_logger = logging.getLogger("keygroup")
    pkg_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
        pkg_logger.addHandler(RichHandler(console=ERR_CONSOLE, show_path=False))


@app.callback()
def main(
    *,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debugging output.")
    ] = False,
) -> None:
    """Group lines of text by a key, in first-occurrence order."""
    if verbose:
        enable_debug_logging()


@app.command()
def lines(
    source: Annotated[
        typer.FileText, typer.Argument(help="Text file to read, '-' for stdin.")
    ],
    *,
    by: Annotated[By, typer.Option(help="Key computed from each line.")] = By.IDENTITY,
    field: Annotated[
        int | None,
        typer.Option(min=0, help="Group on the N-th field (0-based), overrides --by."),
    ] = None,
    sep: Annotated[
        str | None, typer.Option(help="Field separator, whitespace by default.")
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the groups as JSON.")
    ] = False,
) -> None:
    """Group the lines of SOURCE, reading them one at a time."""
    key = KEYS[by] if field is None else field_key(field, sep)
    logger.debug("grouping lines of %s", source.name)
    result = kg.Iter(source).map(lambda line: line.rstrip("\r\n")).try_group_by(key)
    if result.is_err():
        ERR_CONSOLE.print(
            f"[bold red]error:[/] {escape(repr(result.unwrap_err()))}", highlight=False
        )
        raise typer.Exit(code=1)
    groups = result.unwrap()
    match as_json:
        case True:
            CONSOLE.print_json(data={str(k): v for k, v in groups.items()})
        case False:
            CONSOLE.print(_render_table(groups))
