"""
parser_core.py
Public parsing entry points.
"""

from __future__ import annotations
from typing import Iterable, List

from fullname_parser.core.context import ParseState
from fullname_parser.core.pipeline import Pipeline
from fullname_parser.models import ParsedName


def parse_fullname(fullname: str) -> ParsedName:
    """
    Parse a free-form personal name.

        >>> parse_fullname("de la Vega, Dr. Juan Q. Xavier III, Jr.")
        ParsedName(title='Dr.', first='Juan', middle='Q. Xavier', last='de la Vega', nick='', suffix='III, Jr.')

    Never fails on string input; parts that cannot be identified are
    returned as empty strings.
    """
    if not isinstance(fullname, str):
        raise TypeError(f"fullname must be a str, got {type(fullname).__name__}")

    state = Pipeline(ParseState(raw_name=fullname)).run()
    return state.to_parsed_name()


def parse_many(names: Iterable[str]) -> List[ParsedName]:
    """Parse each name independently, preserving input order."""
    return [parse_fullname(name) for name in names]
