from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True)
class NamePart:
    """
    One token of the name being parsed.

    Attributes:
        text:  token text with any trailing comma removed.
        comma: True when the token was immediately followed by a comma.
    """
    text: str
    comma: bool = False


@dataclass(frozen=True)
class ParsedName:
    title: str = ""
    first: str = ""
    middle: str = ""
    last: str = ""
    nick: str = ""
    suffix: str = ""

    @property
    def is_empty(self) -> bool:
        return not any(self.to_dict().values())

    def to_dict(self, omit_empty: bool = False) -> Dict[str, str]:
        data = asdict(self)
        if omit_empty:
            return {key: value for key, value in data.items() if value}
        return data
