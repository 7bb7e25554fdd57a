from __future__ import annotations

import json
from pathlib import Path

import pytest

from errorsnap import SnapshotSettings, load_settings, normalize_settings, settings_from_env


def test_normalize_settings_defaults() -> None:
    assert normalize_settings(None) == SnapshotSettings()
    settings = SnapshotSettings(text_indent=4)
    assert normalize_settings(settings) is settings


def test_normalize_settings_rejects_non_mappings() -> None:
    for raw in ("nonsense", ["follow_context"], 3):
        with pytest.raises(TypeError):
            normalize_settings(raw)


def test_normalize_settings_coerces_loose_values() -> None:
    settings = normalize_settings(
        {"follow_context": "no", "indent": "2", "ensure_ascii": 1, "log": "yes", "unknown": True}
    )

    assert settings == SnapshotSettings(
        follow_context=False,
        text_indent=2,
        ensure_ascii=True,
        log_enabled=True,
    )


def test_normalize_settings_ignores_bad_values() -> None:
    settings = normalize_settings({"follow_context": "maybe", "text_indent": -1, "ensure_ascii": None})

    assert settings == SnapshotSettings()
    assert normalize_settings({"text_indent": "wide"}).text_indent is None


def test_load_settings_yaml_section(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("errorsnap:\n  text_indent: 2\n  follow_context: false\n", encoding="utf-8")

    settings = load_settings(path)

    assert settings.text_indent == 2
    assert settings.follow_context is False


def test_load_settings_json_top_level(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"ensure_ascii": True}), encoding="utf-8")

    assert load_settings(str(path)).ensure_ascii is True


def test_load_settings_empty_yaml(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    assert load_settings(path) == SnapshotSettings()


def test_load_settings_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.yaml")

    toml_path = tmp_path / "settings.toml"
    toml_path.write_text("indent = 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(toml_path)

    list_path = tmp_path / "list.yaml"
    list_path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(list_path)


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("ERRORSNAP_FOLLOW_CONTEXT", "false")
    monkeypatch.setenv("ERRORSNAP_TEXT_INDENT", "3")
    monkeypatch.delenv("ERRORSNAP_ENSURE_ASCII", raising=False)
    monkeypatch.setenv("ERRORSNAP_LOG", "1")

    settings = settings_from_env()

    assert settings == SnapshotSettings(follow_context=False, text_indent=3, log_enabled=True)


def test_settings_from_explicit_mapping() -> None:
    assert settings_from_env({"ERRORSNAP_ENSURE_ASCII": "true"}).ensure_ascii is True
    assert settings_from_env({}) == SnapshotSettings()
