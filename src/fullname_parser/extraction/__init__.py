"""
fullname_parser.extraction package

One module per stage of the name pipeline:

- nickname:   quoted / bracketed nickname removal
- tokenizer:  whitespace split + trailing-comma flags
- lexicon:    suffix / title word-table matching
- joiners:    particle and conjunction fusing
- assignment: extra suffixes, last / first / middle names
"""

from fullname_parser.extraction.assignment import (
    extract_extra_suffixes,
    extract_first_name,
    extract_last_name,
    join_middle_names,
)
from fullname_parser.extraction.joiners import join_conjunctions, join_prefixes
from fullname_parser.extraction.lexicon import (
    extract_lexicon_parts,
    extract_suffixes,
    extract_titles,
)
from fullname_parser.extraction.nickname import extract_nicknames
from fullname_parser.extraction.tokenizer import collapse_whitespace, tokenize_name

__all__ = [
    "collapse_whitespace",
    "extract_extra_suffixes",
    "extract_first_name",
    "extract_last_name",
    "extract_lexicon_parts",
    "extract_nicknames",
    "extract_suffixes",
    "extract_titles",
    "join_conjunctions",
    "join_middle_names",
    "join_prefixes",
    "tokenize_name",
]
