from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from fullname_parser.cli.utils import parse_names, write_json
from fullname_parser.core.exceptions import FullnameParserError

console = Console(stderr=True)


def batch_command(
    names_file: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    omit_empty: bool = typer.Option(
        False,
        "--omit-empty",
        help="Drop empty fields from each parsed record",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Parse one name per line of a text file and export JSON.
    """
    try:
        records = parse_names(names_file, omit_empty=omit_empty, verbose=verbose)
    except FullnameParserError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1)

    if verbose:
        console.log("Exporting JSON")

    write_json(records, out=out, pretty=pretty)

    if verbose:
        console.log("Export complete")
