from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, List

from rich.console import Console
from rich.table import Table

from fullname_parser.core.exceptions import BatchInputError
from fullname_parser.logging import get_logger
from fullname_parser.models import ParsedName
from fullname_parser.parser_core import parse_fullname

console = Console(stderr=True)
log = get_logger("cli")

FIELD_LABELS = (
    ("title", "Title"),
    ("first", "First"),
    ("middle", "Middle"),
    ("last", "Last"),
    ("nick", "Nick"),
    ("suffix", "Suffix"),
)


def read_names(path: Path) -> List[str]:
    """
    Read one name per line, skipping blank lines.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise BatchInputError(f"{path} is not valid UTF-8: {exc}") from exc

    return [line.strip() for line in text.splitlines() if line.strip()]


def parse_names(path: Path, *, omit_empty: bool = False, verbose: bool = False) -> List[Dict[str, Any]]:
    """
    Parse every name in a batch file into export records.
    """
    t0 = time.perf_counter()

    names = read_names(path)
    log.info("Parsing %d names from %s", len(names), path)
    records = [
        {"input": name, "parsed": parse_fullname(name).to_dict(omit_empty=omit_empty)}
        for name in names
    ]

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Parsed {len(records)} names in {elapsed:.2f}s")

    return records


def name_table(parsed: ParsedName, *, source: str | None = None) -> Table:
    table = Table(title=source or "Parsed name")
    table.add_column("Field", style="bold")
    table.add_column("Value")

    values = parsed.to_dict()
    for key, label in FIELD_LABELS:
        table.add_row(label, values[key])

    return table


def write_json(
    data: Any,
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
