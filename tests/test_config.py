# tests/test_config.py

from __future__ import annotations

import pytest

from fullname_parser.config import (
    CONFIG_ENV_VAR,
    DEFAULT_LOGGING,
    config_path,
    get_config,
    load_config,
    reset_config,
)
from fullname_parser.core.exceptions import ConfigError
from fullname_parser.logging import get_logger, list_active_loggers
from fullname_parser.utils import config_file_path


def test_missing_config_falls_back_to_defaults(tmp_path) -> None:
    cfg = load_config(tmp_path / "missing.yml")
    assert cfg.debug is False
    assert cfg.logging == DEFAULT_LOGGING
    assert cfg.source is None


def test_load_config_merges_logging_section(tmp_path) -> None:
    path = tmp_path / "fp.yml"
    path.write_text("debug: true\nlogging:\n  level: WARNING\n", encoding="utf-8")

    cfg = load_config(path)

    assert cfg.debug is True
    assert cfg.logging["level"] == "WARNING"
    assert cfg.logging["dir"] == DEFAULT_LOGGING["dir"]
    assert cfg.source == str(path)


def test_malformed_yaml_raises_config_error(tmp_path) -> None:
    path = tmp_path / "broken.yml"
    path.write_text("logging: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_non_mapping_yaml_raises_config_error(tmp_path) -> None:
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


@pytest.mark.parametrize("document", ["logging:\n  - INFO\n  - DEBUG\n", "logging: DEBUG\n"])
def test_non_mapping_logging_section_raises_config_error(tmp_path, document) -> None:
    path = tmp_path / "bad_logging.yml"
    path.write_text(document, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_empty_logging_section_uses_defaults(tmp_path) -> None:
    path = tmp_path / "empty_logging.yml"
    path.write_text("logging:\n", encoding="utf-8")
    assert load_config(path).logging == DEFAULT_LOGGING


def test_env_var_overrides_config_path(tmp_path, monkeypatch) -> None:
    path = tmp_path / "override.yml"
    path.write_text("debug: true\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    reset_config()
    try:
        assert config_path() == path
        assert get_config().debug is True
    finally:
        reset_config()


def test_default_config_path_points_at_project_config(monkeypatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert config_path() == config_file_path()
    assert config_path().name == "fullname_parser.yml"


def test_get_logger_namespaces_module_loggers() -> None:
    logger = get_logger("tests")
    assert logger.name == "fullname_parser.tests"
    assert "fullname_parser.tests" in list_active_loggers()
