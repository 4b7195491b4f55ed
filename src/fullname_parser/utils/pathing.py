# src/fullname_parser/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union


# We assume this file lives at:
#   <project_root>/src/fullname_parser/utils/pathing.py
#
# Path(__file__).resolve().parents gives:
#   [0] .../src/fullname_parser/utils
#   [1] .../src/fullname_parser
#   [2] .../src
#   [3] .../ (project root)
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the absolute path to the project root directory.

    The project root is defined as the directory that contains:
      - src/
      - tests/
      - config/
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Absolute paths are returned unchanged.
    """
    path = Path(relative)
    if path.is_absolute():
        return path
    return project_root() / path


def config_file_path(filename: Union[str, Path] = "fullname_parser.yml") -> Path:
    """
    Return the absolute path to a file under the top-level config/ directory.
    """
    return resolve_project_path(Path("config") / filename)


def tests_data_path(*parts: Union[str, Path]) -> Path:
    """
    Return the absolute path to a file under tests/data/.

    Examples:
        tests_data_path("contacts.txt")
    """
    return resolve_project_path(Path("tests") / "data" / Path(*parts))
