import contextlib
from collections.abc import Iterator

import typer
from rich.markup import escape

from ..errors import IniError, ParseError
from .console import err_console

UNITS = ["B", "KiB", "MiB", "GiB"]


def bytes_to_unit(size: int) -> str:
    """Format a file size for the `info` table, i.e. 1536 becomes "1.50 KiB"."""

    *smaller, largest = UNITS

    num = float(size)
    for unit in smaller:
        if abs(num) < 1024:
            return f"{num:.2f} {unit}"

        num /= 1024

    return f"{num:.2f} {largest}"


def describe(error: IniError) -> str:
    """Format an error for the terminal, including where parsing stopped."""

    if isinstance(error, ParseError) and error.lineno is not None:
        return f"line {error.lineno}: {error.message}\n  {error.line}"

    return error.message


@contextlib.contextmanager
def handle_errors() -> Iterator[None]:
    """Print INI errors and exit with status 1 instead of showing a traceback."""

    try:
        yield
    except IniError as e:
        err_console.print(
            f"[red]error[/red] ({e.kind.name.lower()}): {escape(describe(e))}",
            highlight=False,
        )
        raise typer.Exit(code=1) from e
