"""
CLI command modules for fullname_parser.

Each command module defines a single Typer-compatible command function.
"""

from fullname_parser.cli.commands.batch import batch_command
from fullname_parser.cli.commands.lexicons import lexicons_command
from fullname_parser.cli.commands.parse import parse_command

__all__ = [
    "batch_command",
    "lexicons_command",
    "parse_command",
]
