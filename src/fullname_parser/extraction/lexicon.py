"""
Generic word-table matcher shared by the suffix and title passes.

A token matches when its lower-cased form, minus one trailing period, is in
the table:  "Jr." -> "jr",  "III" -> "iii",  "M.D.." -> "m.d."

Matched tokens are removed from the part list. When a removed token carried
a comma, the token sliding into its place is marked with a comma instead
(its own flag is dropped). A comma on the final token just disappears.
"""

from __future__ import annotations

from typing import AbstractSet, List, Tuple

from fullname_parser.lexicons import SUFFIXES, TITLES
from fullname_parser.models import NamePart


def normalize_token(token: str) -> str:
    lowered = token.lower()
    if lowered.endswith("."):
        return lowered[:-1]
    return lowered


def matches_lexicon(token: str, lexicon: AbstractSet[str]) -> bool:
    if not token:
        return False
    return normalize_token(token) in lexicon


def extract_lexicon_parts(
    parts: List[NamePart],
    lexicon: AbstractSet[str],
) -> Tuple[List[str], List[NamePart]]:
    """
    Pull every token found in ``lexicon`` out of ``parts``.

    Returns:
        (matched token texts in original casing and order, remaining parts)
    """
    found: List[str] = []
    remaining: List[NamePart] = []
    carry_comma = False

    for part in parts:
        if matches_lexicon(part.text, lexicon):
            found.append(part.text)
            carry_comma = carry_comma or part.comma
            continue

        if carry_comma:
            part = NamePart(part.text, comma=True)
            carry_comma = False
        remaining.append(part)

    return found, remaining


def extract_suffixes(parts: List[NamePart]) -> Tuple[List[str], List[NamePart]]:
    return extract_lexicon_parts(parts, SUFFIXES)


def extract_titles(parts: List[NamePart]) -> Tuple[List[str], List[NamePart]]:
    return extract_lexicon_parts(parts, TITLES)
