from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from fullname_parser.models import NamePart, ParsedName


@dataclass
class ParseState:
    """
    Working state for a single parse.
    Owned by one call; each pass reads and replaces parts of it.
    """

    raw_name: str

    parts: List[NamePart] = field(default_factory=list)

    title: str = ""
    first: str = ""
    middle: str = ""
    last: str = ""
    nick: str = ""
    suffix: str = ""

    def to_parsed_name(self) -> ParsedName:
        return ParsedName(
            title=self.title,
            first=self.first,
            middle=self.middle,
            last=self.last,
            nick=self.nick,
            suffix=self.suffix,
        )
