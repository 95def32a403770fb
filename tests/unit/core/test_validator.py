from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Default value injection.
2. Rejection of non-boolean flags.
3. Path and log level normalization.
4. Strict mode validation.
"""

import os

import pytest

from filereq.core.validator import validate_config


def test_validate_none_returns_defaults() -> None:
    cfg, warnings = validate_config(None)

    assert cfg["follow_symlinks"] is True
    assert cfg["log_level"] == "INFO"
    assert cfg["log_file"] is None
    assert len(warnings) == 1


def test_validate_empty_dict_returns_defaults() -> None:
    cfg, warnings = validate_config({})

    assert cfg["base_dir"] == os.path.abspath(os.getcwd())
    assert cfg["print_tree"] is False
    assert cfg["json_output"] is False
    assert warnings == []


def test_validate_non_bool_flags_fall_back_to_defaults() -> None:
    raw = {"follow_symlinks": "no", "print_tree": 1, "json_output": True}
    cfg, warnings = validate_config(raw, strict=False)

    assert cfg["follow_symlinks"] is True
    assert cfg["print_tree"] is False
    assert cfg["json_output"] is True
    assert len(warnings) == 2
    assert any("follow_symlinks" in w for w in warnings)


def test_validate_normalizes_base_dir(tmp_path) -> None:
    cfg, _ = validate_config({"base_dir": f"  {tmp_path}/sub/..  "})
    assert cfg["base_dir"] == str(tmp_path)


def test_validate_blank_base_dir_falls_back_to_cwd() -> None:
    cfg, _ = validate_config({"base_dir": "   "})
    assert cfg["base_dir"] == os.path.abspath(os.getcwd())


def test_validate_log_file_is_made_absolute(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    cfg, _ = validate_config({"log_file": "logs/filereq.log"})
    assert cfg["log_file"] == str(tmp_path / "logs" / "filereq.log")

    cfg, _ = validate_config({"log_file": "  "})
    assert cfg["log_file"] is None


def test_validate_log_level_is_upper_cased() -> None:
    cfg, warnings = validate_config({"log_level": "debug"})
    assert cfg["log_level"] == "DEBUG"
    assert warnings == []


def test_validate_unknown_log_level_falls_back() -> None:
    cfg, warnings = validate_config({"log_level": "chatty"})
    assert cfg["log_level"] == "INFO"
    assert any("chatty" in w for w in warnings)


def test_strict_raises_on_bad_type() -> None:
    with pytest.raises(TypeError):
        validate_config({"follow_symlinks": "maybe"}, strict=True)

    with pytest.raises(TypeError):
        validate_config({"print_tree": 1}, strict=True)

    with pytest.raises(TypeError):
        validate_config({"base_dir": 12}, strict=True)

    with pytest.raises(TypeError):
        validate_config({"log_file": 3.5}, strict=True)

    with pytest.raises(ValueError):
        validate_config({"log_level": "chatty"}, strict=True)

    with pytest.raises(TypeError):
        validate_config([], strict=True)
