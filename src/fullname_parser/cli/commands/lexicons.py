from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from fullname_parser.lexicons import LEXICONS

console = Console()


def lexicons_command(
    kind: Optional[str] = typer.Option(
        None,
        "--kind",
        "-k",
        help="One of: " + ", ".join(LEXICONS),
    ),
):
    """
    Show the built-in word tables.
    """
    if kind is not None and kind not in LEXICONS:
        console.print(f"[red]Unknown word table:[/red] {kind}")
        raise typer.Exit(code=1)

    kinds = [kind] if kind else list(LEXICONS)

    for k in kinds:
        words = sorted(LEXICONS[k])
        table = Table()
        table.add_column(f"{k} ({len(words)})")
        for word in words:
            table.add_row(word)
        console.print(table)
