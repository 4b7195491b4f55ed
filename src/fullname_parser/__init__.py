"""
fullname_parser: split a free-form personal name into title, first, middle,
last, nickname and suffix.

    from fullname_parser import parse_fullname

    parse_fullname("Dr. Juan Xavier (Doc Vega)")
    # ParsedName(title='Dr.', first='Juan', middle='', last='Xavier',
    #            nick='Doc Vega', suffix='')
"""

from fullname_parser.models import NamePart, ParsedName
from fullname_parser.parser_core import parse_fullname, parse_many

__version__ = "0.1.0"

__all__ = [
    "NamePart",
    "ParsedName",
    "parse_fullname",
    "parse_many",
    "__version__",
]
