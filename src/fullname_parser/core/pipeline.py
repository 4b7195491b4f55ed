from __future__ import annotations

from typing import Callable, List, Tuple

from fullname_parser.core.context import ParseState
from fullname_parser.extraction import (
    extract_extra_suffixes,
    extract_first_name,
    extract_last_name,
    extract_nicknames,
    extract_suffixes,
    extract_titles,
    join_conjunctions,
    join_middle_names,
    join_prefixes,
    tokenize_name,
)
from fullname_parser.logging import get_logger

log = get_logger("pipeline")


class Pipeline:
    """
    Runs the name passes, in order, over one ParseState.
    The actual rules live in fullname_parser.extraction.
    """

    def __init__(self, state: ParseState):
        self.state = state
        self.log = log
        self.passes: List[Tuple[str, Callable[[], None]]] = [
            ("nicknames", self.find_nicknames),
            ("tokenize", self.split_name),
            ("suffixes", self.find_suffixes),
            ("titles", self.find_titles),
            ("prefixes", self.join_prefixes),
            ("conjunctions", self.join_conjunctions),
            ("extra_suffixes", self.find_extra_suffixes),
            ("last", self.find_last_name),
            ("first", self.find_first_name),
            ("middle", self.find_middle_name),
        ]

    def run(self) -> ParseState:
        self.log.debug("Start parsing fullname: %r", self.state.raw_name)

        for name, step in self.passes:
            step()
            self.log.debug("After %s: parts=%s", name, self.state.parts)

        self.log.debug("Parsing complete: %s", self.state.to_parsed_name())
        return self.state

    # ---------------------------------------------------------
    # Passes
    # ---------------------------------------------------------
    def find_nicknames(self) -> None:
        nicknames, stripped = extract_nicknames(self.state.raw_name)
        self.state.nick = ",".join(nicknames)
        self.state.raw_name = stripped

    def split_name(self) -> None:
        self.state.parts = tokenize_name(self.state.raw_name)

    def find_suffixes(self) -> None:
        if len(self.state.parts) < 2:
            return
        suffixes, self.state.parts = extract_suffixes(self.state.parts)
        self.state.suffix = ", ".join(suffixes)

    def find_titles(self) -> None:
        if len(self.state.parts) < 2:
            return
        titles, self.state.parts = extract_titles(self.state.parts)
        self.state.title = ", ".join(titles)

    def join_prefixes(self) -> None:
        if len(self.state.parts) < 2:
            return
        self.state.parts = join_prefixes(self.state.parts)

    def join_conjunctions(self) -> None:
        if len(self.state.parts) < 2:
            return
        self.state.parts = join_conjunctions(self.state.parts)

    def find_extra_suffixes(self) -> None:
        if len(self.state.parts) < 2:
            return
        extras, self.state.parts = extract_extra_suffixes(self.state.parts)
        if extras:
            base = [self.state.suffix] if self.state.suffix else []
            self.state.suffix = ", ".join(base + extras)

    def find_last_name(self) -> None:
        if not self.state.parts:
            return
        self.state.last, self.state.parts = extract_last_name(self.state.parts)

    def find_first_name(self) -> None:
        if not self.state.parts:
            return
        self.state.first, self.state.parts = extract_first_name(self.state.parts)

    def find_middle_name(self) -> None:
        if not self.state.parts:
            return
        self.state.middle = join_middle_names(self.state.parts)
        self.state.parts = []
