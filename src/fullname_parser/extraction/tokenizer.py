# src/fullname_parser/extraction/tokenizer.py

from __future__ import annotations

import re
from typing import List

from fullname_parser.models import NamePart

# Runs of two or more whitespace characters (str patterns are Unicode-aware,
# so this covers NBSP and the other space separators too).
_WS_RUN_RE = re.compile(r"\s{2,}")


def collapse_whitespace(text: str) -> str:
    """Replace every run of 2+ whitespace characters with a single space."""
    return _WS_RUN_RE.sub(" ", text)


def tokenize_name(text: str) -> List[NamePart]:
    """
    Split a (nickname-free) name into NameParts.

    The string is whitespace-collapsed, trimmed and split on single spaces.
    A trailing comma on a token is removed and recorded as ``comma=True``.

        "de la Vega, Juan"  -> [de, la, Vega(,), Juan]

    Empty input yields a single empty part; later passes tolerate it.
    """
    parts: List[NamePart] = []

    for raw_token in collapse_whitespace(text).strip().split(" "):
        token = raw_token.strip()
        if token.endswith(","):
            parts.append(NamePart(token[:-1], comma=True))
        else:
            parts.append(NamePart(token))

    return parts
