# src/fullname_parser/extraction/assignment.py

from __future__ import annotations

from typing import List, Tuple

from fullname_parser.models import NamePart

# Positions 0 and 1 are kept for the first/last name candidates.
PROTECTED_POSITIONS = 2


def extract_extra_suffixes(parts: List[NamePart]) -> Tuple[List[str], List[NamePart]]:
    """
    Treat comma-marked tokens beyond the first two positions as suffixes.

        "de la Vega, Juan Q. Xavier, Genius" -> extra suffix "Genius"

    Only applies when at least two tokens carry a comma. Suffixes are
    returned in right-to-left order.
    """
    if sum(1 for part in parts if part.comma) < 2:
        return [], list(parts)

    head = parts[:PROTECTED_POSITIONS]
    tail = parts[PROTECTED_POSITIONS:]

    extras = [part.text for part in reversed(tail) if part.comma]
    kept = head + [part for part in tail if not part.comma]
    return extras, kept


def extract_last_name(parts: List[NamePart]) -> Tuple[str, List[NamePart]]:
    """
    The last name is the right-most comma-marked token, or the final token.

    Comma flags carry no meaning after this step; the remaining parts are
    returned with them cleared.
    """
    index = len(parts) - 1
    for i, part in enumerate(parts):
        if part.comma:
            index = i

    last = parts[index].text
    rest = [NamePart(part.text) for j, part in enumerate(parts) if j != index]
    return last, rest


def extract_first_name(parts: List[NamePart]) -> Tuple[str, List[NamePart]]:
    return parts[0].text, list(parts[1:])


def join_middle_names(parts: List[NamePart]) -> str:
    return " ".join(part.text for part in parts)
