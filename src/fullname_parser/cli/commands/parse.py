from __future__ import annotations

import typer
from rich.console import Console

from fullname_parser.cli.utils import name_table, write_json
from fullname_parser.parser_core import parse_fullname

console = Console()


def parse_command(
    name: str = typer.Argument(..., help="Full name to parse, quoted"),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print JSON instead of a table",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    omit_empty: bool = typer.Option(
        False,
        "--omit-empty",
        help="Drop empty fields from JSON output",
    ),
):
    """
    Parse a single name.
    """
    parsed = parse_fullname(name)

    if as_json:
        write_json(parsed.to_dict(omit_empty=omit_empty), out=None, pretty=pretty)
        return

    console.print(name_table(parsed, source=name))
