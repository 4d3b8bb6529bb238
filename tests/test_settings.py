from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from pickerdates.settings import EnvSettings, build_settings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    for name in ("PICKER_ENV", "PICKER_TIMEZONE", "PICKER_CONFIG_PATH"):
        monkeypatch.delenv(name, raising=False)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


def test_defaults_without_config_file() -> None:
    settings = load_settings()

    assert settings.config_path is None
    assert settings.timezone == ZoneInfo("UTC")
    assert settings.yaml.bounds.min_date == date(1900, 1, 1)
    assert settings.yaml.bounds.max_date == date(2099, 12, 31)
    assert settings.min_date == datetime(1900, 1, 1, tzinfo=ZoneInfo("UTC"))
    assert not settings.yaml.policy.disable_past
    assert settings.yaml.value_type == "date"


def test_yaml_config_is_loaded(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config_path = tmp_path / "picker.yaml"
    config_path.write_text(
        "bounds:\n"
        "  min_date: 2024-01-01\n"
        "  max_date: 2024-12-31\n"
        "policy:\n"
        "  disable_past: true\n"
        "value_type: date-time\n"
        "unknown_section: ignored\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("PICKER_CONFIG_PATH", str(config_path))
    monkeypatch.setenv("PICKER_TIMEZONE", "Europe/Berlin")

    settings = load_settings()

    berlin = ZoneInfo("Europe/Berlin")
    assert settings.config_path == config_path.resolve()
    assert settings.min_date == datetime(2024, 1, 1, tzinfo=berlin)
    assert settings.max_date == datetime(2024, 12, 31, tzinfo=berlin)
    assert settings.yaml.policy.disable_past
    assert not settings.yaml.policy.disable_future
    assert settings.yaml.value_type == "date-time"


def test_load_settings_is_cached() -> None:
    assert load_settings() is load_settings()


def test_empty_yaml_file_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.yaml"
    config_path.write_text("", encoding="utf-8")

    settings = build_settings(EnvSettings(picker_config_path=config_path))
    assert settings.yaml.bounds.max_date == date(2099, 12, 31)


def test_missing_config_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match=r"Picker config file not found"):
        build_settings(EnvSettings(picker_config_path=tmp_path / "missing.yaml"))


def test_non_mapping_yaml_raises(tmp_path: Path) -> None:
    config_path = tmp_path / "list.yaml"
    config_path.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"YAML mapping"):
        build_settings(EnvSettings(picker_config_path=config_path))


def test_inverted_bounds_are_rejected(tmp_path: Path) -> None:
    config_path = tmp_path / "inverted.yaml"
    config_path.write_text("bounds:\n  min_date: 2025-01-01\n  max_date: 2024-01-01\n", encoding="utf-8")

    with pytest.raises(ValidationError, match=r"min_date must be on or before"):
        build_settings(EnvSettings(picker_config_path=config_path))


def test_unknown_timezone_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PICKER_TIMEZONE", "Nowhere/Special")

    with pytest.raises(ValidationError, match=r"Unknown timezone"):
        EnvSettings()
