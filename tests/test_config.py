"""Pruebas de carga de configuración.

Tests for configuration loading.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from tallywatch.config import AuditSettings, load_config, load_yaml_mapping


def test_defaults() -> None:
    settings = load_config()

    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_DIR is None
    assert settings.STRICT_TIMESTAMPS is False
    assert settings.TIMESTAMP_FORMAT == "%Y-%m-%dT%H:%M:%S"
    assert (settings.TRUMP_KEY, settings.BIDEN_KEY) == ("trumpd", "bidenj")
    assert settings.RACE_INDEX == 0


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TALLYWATCH_LOG_LEVEL", "debug")
    monkeypatch.setenv("TALLYWATCH_STRICT_TIMESTAMPS", "true")
    monkeypatch.setenv("TALLYWATCH_LOG_DIR", str(tmp_path))

    settings = load_config()

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.STRICT_TIMESTAMPS is True
    assert settings.LOG_DIR == tmp_path


def test_yaml_values_are_loaded(tmp_path: Path) -> None:
    config_path = tmp_path / "tallywatch.yaml"
    config_path.write_text("strict_timestamps: true\ntrump_key: trump\nrace_index: 2\n", encoding="utf-8")

    settings = load_config(config_path)

    assert settings.STRICT_TIMESTAMPS is True
    assert settings.TRUMP_KEY == "trump"
    assert settings.RACE_INDEX == 2


def test_environment_wins_over_yaml(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config_path = tmp_path / "tallywatch.yaml"
    config_path.write_text("log_level: WARNING\n", encoding="utf-8")
    monkeypatch.setenv("TALLYWATCH_LOG_LEVEL", "ERROR")

    assert load_config(config_path).LOG_LEVEL == "ERROR"


@pytest.mark.parametrize(
    "content",
    ["log_level: LOUD\n", "race_index: -1\n", "trump_key: ''\n"],
)
def test_invalid_values_raise_value_error(tmp_path: Path, content: str) -> None:
    config_path = tmp_path / "tallywatch.yaml"
    config_path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(config_path)


def test_yaml_syntax_error(tmp_path: Path) -> None:
    config_path = tmp_path / "broken.yaml"
    config_path.write_text("log_level: [unclosed\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_yaml_mapping(config_path)


def test_yaml_must_be_mapping(tmp_path: Path) -> None:
    config_path = tmp_path / "list.yaml"
    config_path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_yaml_mapping(config_path)


def test_missing_yaml_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_settings_accept_keyword_values() -> None:
    settings = AuditSettings(TRUMP_KEY="t", BIDEN_KEY="b")

    assert (settings.TRUMP_KEY, settings.BIDEN_KEY) == ("t", "b")
