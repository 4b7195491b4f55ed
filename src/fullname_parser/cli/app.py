from __future__ import annotations

import typer

from fullname_parser.cli.commands.batch import batch_command
from fullname_parser.cli.commands.lexicons import lexicons_command
from fullname_parser.cli.commands.parse import parse_command

app = typer.Typer(
    name="fullname",
    help="Split free-form personal names into title, first, middle, last, nickname and suffix",
    add_completion=False,
)

app.command("parse")(parse_command)
app.command("batch")(batch_command)
app.command("lexicons")(lexicons_command)


def main():
    app()


if __name__ == "__main__":
    main()
