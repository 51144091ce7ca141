# File: src/mstair/vardump/xlogging/test_logger_util.py
"""
Tests for LogLevelConfig: parsing, per-logger overrides and matching precedence.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest

from mstair.vardump.xlogging import logger_util as lu
from mstair.vardump.xlogging.logger_constants import TRACE, initialize_logger_constants
from mstair.vardump.xlogging.logger_util import LogEnvVar, LogLevelConfig


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear LOG_LEVEL* vars and reset the singleton, skipping .env loads."""
    monkeypatch.setattr(lu, "fs_load_dotenv", lambda *a, **k: False)
    for k in [k for k in os.environ if k.startswith("LOG_LEVEL")]:
        monkeypatch.delenv(k, raising=False)
    monkeypatch.setattr(lu, "_log_level_config_instance", None, raising=False)
    yield
    monkeypatch.setattr(lu, "_log_level_config_instance", None, raising=False)


# ---------- LogEnvVar ----------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("name", "module"),
    [
        ("LOG_LEVEL", ""),
        ("LOG_LEVELS", ""),
        ("LOG_LEVEL_ROOT", ""),
        ("LOG_LEVEL_MSTAIR_VARDUMP_DUMPER", "mstair.vardump.dumper"),
        ("LOG_LEVEL_MY__APP", "my_app"),
    ],
)
def test_env_var_names(name: str, module: str) -> None:
    var = LogEnvVar.from_env_var(name, "DEBUG")
    assert var is not None
    assert var.module == module


@pytest.mark.unit
@pytest.mark.parametrize("name", ["LOGLEVEL", "LOG_LEVEL_lower", "VARDUMP_DEPTH"])
def test_unrelated_env_var_names(name: str) -> None:
    assert LogEnvVar.from_env_var(name, "DEBUG") is None


# ---------- Parsing ----------


@pytest.mark.unit
def test_bare_level_sets_default(monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    assert LogLevelConfig().get_effective_level("any.module") == logging.INFO


@pytest.mark.unit
@pytest.mark.parametrize(
    "value", ["a:DEBUG;b:INFO", "a=DEBUG,b=INFO", "a:DEBUG b:INFO", '"a":"DEBUG"; b=INFO']
)
def test_pattern_separators(
    monkeypatch: pytest.MonkeyPatch, clean_env: None, value: str
) -> None:
    monkeypatch.setenv("LOG_LEVELS", value)
    cfg = LogLevelConfig()
    assert cfg.pattern_to_level == {"a": logging.DEBUG, "b": logging.INFO}


@pytest.mark.unit
def test_trace_level_name(monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
    initialize_logger_constants()
    monkeypatch.setenv("LOG_LEVEL_MSTAIR_VARDUMP_DUMPER", "TRACE")
    cfg = LogLevelConfig()
    assert cfg.get_effective_level("mstair.vardump.dumper.structural") == TRACE


@pytest.mark.unit
def test_unknown_and_numeric_levels_ignored(
    monkeypatch: pytest.MonkeyPatch, clean_env: None
) -> None:
    monkeypatch.setenv("LOG_LEVELS", "a:LOUD; 10; b:DEBUG:extra")
    assert LogLevelConfig().pattern_to_level == {}


# ---------- Matching ----------


@pytest.mark.unit
def test_precedence_exact_ancestor_glob_default(
    monkeypatch: pytest.MonkeyPatch, clean_env: None
) -> None:
    monkeypatch.setenv("LOG_LEVELS", "ERROR; mstair.*:INFO; mstair.vardump:DEBUG")
    monkeypatch.setenv("LOG_LEVEL_MSTAIR_VARDUMP_BASE", "CRITICAL")
    cfg = LogLevelConfig()
    assert cfg.get_effective_level("mstair.vardump.base") == logging.CRITICAL
    assert cfg.get_effective_level("mstair.vardump.dumper.model") == logging.DEBUG
    assert cfg.get_effective_level("mstair.other") == logging.INFO
    assert cfg.get_effective_level("elsewhere") == logging.ERROR


@pytest.mark.unit
def test_glob_prefers_longest_fixed_prefix(
    monkeypatch: pytest.MonkeyPatch, clean_env: None
) -> None:
    monkeypatch.setenv("LOG_LEVELS", "m*:DEBUG; mstair.v*:WARNING")
    assert LogLevelConfig().get_effective_level("mstair.vardump") == logging.WARNING


@pytest.mark.unit
def test_matching_is_case_insensitive(monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
    monkeypatch.setenv("LOG_LEVELS", "MSTAIR.VarDump:DEBUG")
    assert LogLevelConfig().get_effective_level("mstair.vardump.x") == logging.DEBUG


@pytest.mark.unit
def test_fallback_default(clean_env: None) -> None:
    cfg = LogLevelConfig()
    assert cfg.get_effective_level("x") == logging.WARNING
    assert cfg.get_effective_level("x", default=logging.ERROR) == logging.ERROR


# ---------- Lifecycle ----------


@pytest.mark.unit
def test_singleton_and_reload(monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    first = LogLevelConfig.get_instance()
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    assert LogLevelConfig.get_instance() is first
    assert first.get_effective_level("x") == logging.INFO
    first.update_from_environment()
    assert first.get_effective_level("x") == logging.ERROR


# End of file: src/mstair/vardump/xlogging/test_logger_util.py
