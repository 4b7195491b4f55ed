import os
from pathlib import Path

import yaml

from fullname_parser.core.exceptions import ConfigError
from fullname_parser.utils.pathing import config_file_path

CONFIG_ENV_VAR = "FULLNAME_PARSER_CONFIG"

DEFAULT_LOGGING = {
    "level": "INFO",
    "dir": "logs",
    "file": None,
    "rotate": False,
    "per_module_files": False,
}


class FPConfig:
    def __init__(self, data):
        self.logging = {**DEFAULT_LOGGING, **(data.get("logging") or {})}
        self.debug = bool(data.get("debug", False))
        self.source = data.get("_source")


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return config_file_path()


def load_config(path: Path | None = None) -> 'FPConfig':
    path = path or config_path()
    if not path.exists():
        return FPConfig({})

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in config file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    logging_section = data.get("logging")
    if logging_section is not None and not isinstance(logging_section, dict):
        raise ConfigError(
            f"'logging' in config file {path} must be a mapping, got {type(logging_section).__name__}"
        )

    data["_source"] = str(path)
    return FPConfig(data)

_config_cache = None

def get_config() -> 'FPConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
