import logging
import pathlib
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.table import Table

from .. import files
from ..document import Document
from .console import console
from .utils import bytes_to_unit, handle_errors


def log_level(verbose: int) -> int:
    """Map the number of -v flags to a logging level.

    One flag logs only CRITICAL records, each further flag goes one level down,
    so five flags log everything down to DEBUG.
    """

    return logging.CRITICAL - (verbose - 1) * (logging.CRITICAL - logging.ERROR)


app = typer.Typer(no_args_is_help=True)

File = Annotated[
    pathlib.Path, typer.Argument(exists=True, dir_okay=False, resolve_path=True)
]
Encoding = Annotated[
    Optional[str], typer.Option(help="file encoding (guessed if not given)")
]
Output = Annotated[
    Optional[pathlib.Path],
    typer.Option("--output", "-o", dir_okay=False, help="where to write the result"),
]


@app.callback()
def configure_logging(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            min=0,
            max=5,
            help="log parsing and file access (repeat up to 5 times for more detail)",
        ),
    ] = 0
):
    """Read, query and rewrite strict INI files."""

    if verbose == 0:
        logging.disable()
        return

    # Undo a previous disable() in the same process.
    logging.disable(logging.NOTSET)
    logging.basicConfig(level=log_level(verbose))


@app.command()
def check(file: File, encoding: Encoding = None):
    """Check that a file is valid INI."""

    with handle_errors():
        Document.from_file(file, encoding)

    typer.echo("ok")


@app.command()
def sections(file: File, encoding: Encoding = None):
    """List the section names in lexical order."""

    with handle_errors():
        doc = Document.from_file(file, encoding)

    for name in doc.get_section_names():
        typer.echo(name)


@app.command()
def show(
    file: File,
    section: Annotated[Optional[str], typer.Argument()] = None,
    encoding: Encoding = None,
):
    """Show the properties of a file as a table.
    If section is given, only that section is shown.
    """

    table = Table()
    for column in ("Section", "Key", "Value"):
        table.add_column(column)

    with handle_errors():
        doc = Document.from_file(file, encoding)
        names = doc.get_section_names() if section is None else [section]

        for name in names:
            properties = doc.get_section(name)

            for key in sorted(properties):
                table.add_row(escape(name), escape(key), escape(properties[key]))

    console.print(table)


@app.command()
def get(file: File, section: str, key: str, encoding: Encoding = None):
    """Print the value of a property."""

    with handle_errors():
        value = Document.from_file(file, encoding).get(section, key)

    typer.echo(value)


@app.command("set")
def set_(
    file: File,
    section: str,
    key: str,
    value: str,
    output: Output = None,
    encoding: Encoding = None,
):
    """Change the value of an existing property and save the file.
    The file is rewritten in place unless an output path is given.
    """

    with handle_errors():
        doc = Document.from_file(file, encoding)
        doc.set(section, key, value)
        doc.save_file(output or file)


@app.command()
def fmt(file: File, output: Output = None, encoding: Encoding = None):
    """Rewrite a file in canonical form: sorted, without comments or blank lines.
    The result is printed unless an output path is given.
    """

    with handle_errors():
        doc = Document.from_file(file, encoding)

        if output is None:
            typer.echo(doc.to_str(), nl=False)
        else:
            doc.save_file(output)


@app.command()
def info(file: File, encoding: Encoding = None):
    """Show information on an INI file."""

    with handle_errors():
        raw = files.read_bytes(file)
        text, encoding = files.decode(raw, encoding, file)
        doc = Document.from_str(text)

    # Lines as the parser sees them: a final newline does not start another one.
    nlines = len(text.removesuffix("\n").split("\n")) if text else 0

    table = Table(show_header=False)
    table.add_column()
    table.add_column()

    table.add_row("path", escape(str(file)))
    table.add_row("encoding", encoding)
    table.add_row("size", bytes_to_unit(len(raw)))
    table.add_row("lines", str(nlines))
    table.add_row("sections", str(len(doc)))
    table.add_row("properties", str(sum(len(p) for p in doc.sections.values())))

    console.print(table)
