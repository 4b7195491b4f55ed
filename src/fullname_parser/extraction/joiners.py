# src/fullname_parser/extraction/joiners.py

from __future__ import annotations

from typing import AbstractSet, List

from fullname_parser.lexicons import CONJUNCTIONS, PREFIXES
from fullname_parser.models import NamePart


def join_prefixes(
    parts: List[NamePart],
    prefixes: AbstractSet[str] = PREFIXES,
) -> List[NamePart]:
    """
    Fuse surname particles with the token that follows them.

        [van, der, Berg]  -> ["van der Berg"]
        [de, la, Vega(,)] -> ["de la Vega"(,)]

    Works right to left so chains of particles compose. Matching is exact
    (case-sensitive). The fused token keeps the comma flag of its right
    half. The last token is never treated as a particle.
    """
    if len(parts) < 2:
        return list(parts)

    # Built right to left; joined[-1] is the token right of the current one.
    joined: List[NamePart] = [parts[-1]]
    for part in reversed(parts[:-1]):
        if part.text in prefixes:
            right = joined.pop()
            joined.append(NamePart(f"{part.text} {right.text}", right.comma))
        else:
            joined.append(part)

    joined.reverse()
    return joined


def join_conjunctions(
    parts: List[NamePart],
    conjunctions: AbstractSet[str] = CONJUNCTIONS,
) -> List[NamePart]:
    """
    Fuse ``A <conj> B`` triples into a single token.

        [Juan, et, Glova, Q.]  -> ["Juan et Glova", Q.]
        [A, and, B, and, C]    -> ["A and B and C"]

    Works right to left; the fused token keeps the comma flag of ``B``.
    """
    if len(parts) < 3:
        return list(parts)

    joined = list(parts)
    i = len(joined) - 3
    while i >= 0:
        if joined[i + 1].text in conjunctions:
            left, conj, right = joined[i:i + 3]
            joined[i:i + 3] = [
                NamePart(f"{left.text} {conj.text} {right.text}", right.comma)
            ]
            # The fused token can never be a conjunction itself.
            i -= 1
        i -= 1

    return joined
