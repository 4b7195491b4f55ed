# src/fullname_parser/extraction/nickname.py

from __future__ import annotations

import re
from typing import List, Tuple

# Optional leading whitespace, an opening quote/bracket, the nickname, and a
# closing quote/bracket. Brackets and quotes may not appear inside.
NICKNAME_RE = re.compile(r"""\s?['"(\[]([^\[\])'"]+)['")\]]""")


def extract_nicknames(raw: str) -> Tuple[List[str], str]:
    """
    Find quoted or bracketed nicknames and cut them out of ``raw``.

        'Juan "Doc" Xavier'      -> (["Doc"], "Juan Xavier")
        "Dr. Juan (Doc Vega)"    -> (["Doc Vega"], "Dr. Juan")

    All matches are collected on the original string first; then every
    occurrence of each matched span is removed, so a repeated identical
    span disappears entirely. Unbalanced delimiters never match and are
    left in place.

    Returns:
        (nicknames in order of appearance, stripped string)
    """
    matches = list(NICKNAME_RE.finditer(raw))
    nicknames = [m.group(1) for m in matches]

    stripped = raw
    for m in matches:
        stripped = stripped.replace(m.group(0), "")

    return nicknames, stripped
