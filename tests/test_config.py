"""Tests for config loading and validation."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from expectly.config import ExpectlyConfig, load_config


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "expectly.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_defaults():
    cfg = ExpectlyConfig()
    assert cfg.stop_on_failure is False
    assert cfg.traceback is True
    assert cfg.max_traceback_frames is None
    assert cfg.colour is False
    assert cfg.debug_log is None


def test_empty_file_yields_defaults(tmp_yaml):
    cfg = load_config(tmp_yaml(""))
    assert cfg == ExpectlyConfig()


def test_load_full_config(tmp_yaml):
    path = tmp_yaml("""\
        stop_on_failure: true
        traceback: false
        max_traceback_frames: 5
        colour: true
        verbose: true
    """)
    cfg = load_config(path)
    assert cfg.stop_on_failure is True
    assert cfg.traceback is False
    assert cfg.max_traceback_frames == 5
    assert cfg.colour is True
    assert cfg.verbose is True


def test_unknown_keys_are_rejected(tmp_yaml):
    with pytest.raises(ValidationError):
        load_config(tmp_yaml("stop_on_fail: true\n"))


def test_max_traceback_frames_must_be_positive():
    with pytest.raises(ValidationError, match="at least 1"):
        ExpectlyConfig(max_traceback_frames=0)


def test_relative_debug_log_resolves_against_config_dir(tmp_yaml, tmp_path):
    cfg = load_config(tmp_yaml("debug_log: logs/debug.log\n"))
    assert cfg.debug_log == str((tmp_path / "logs" / "debug.log").resolve())


def test_debug_log_expands_environment(tmp_yaml, tmp_path, monkeypatch):
    monkeypatch.setenv("EXPECTLY_TEST_LOG_DIR", str(tmp_path / "out"))
    cfg = load_config(tmp_yaml("debug_log: ${EXPECTLY_TEST_LOG_DIR}/debug.log\n"))
    assert cfg.debug_log == str(tmp_path / "out" / "debug.log")


def test_debug_log_default_value_is_used(tmp_yaml, tmp_path, monkeypatch):
    monkeypatch.delenv("EXPECTLY_TEST_LOG", raising=False)
    cfg = load_config(tmp_yaml("debug_log: ${EXPECTLY_TEST_LOG:-fallback.log}\n"))
    assert cfg.debug_log == str((tmp_path / "fallback.log").resolve())


def test_debug_log_unset_variable_is_rejected(monkeypatch):
    monkeypatch.delenv("EXPECTLY_TEST_MISSING", raising=False)
    with pytest.raises(ValidationError, match="unset variable"):
        ExpectlyConfig(debug_log="${EXPECTLY_TEST_MISSING}/debug.log")
