from __future__ import annotations

import logging
from datetime import date, datetime, time
from functools import lru_cache
from pathlib import Path
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOGGER = logging.getLogger(__name__)

DEFAULT_MIN_DATE = date(1900, 1, 1)
DEFAULT_MAX_DATE = date(2099, 12, 31)


class BoundsSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    min_date: date = DEFAULT_MIN_DATE
    max_date: date = DEFAULT_MAX_DATE

    @model_validator(mode="after")
    def validate_order(self) -> BoundsSettings:
        if self.min_date > self.max_date:
            raise ValueError("bounds.min_date must be on or before bounds.max_date")
        return self


class PolicySettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    disable_past: bool = False
    disable_future: bool = False


class PickerYamlSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    bounds: BoundsSettings = Field(default_factory=BoundsSettings)
    policy: PolicySettings = Field(default_factory=PolicySettings)
    value_type: Literal["date", "time", "date-time"] = "date"


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    picker_env: Literal["dev", "test", "prod"] = "dev"
    picker_timezone: str = "UTC"
    picker_config_path: Path | None = None

    @field_validator("picker_timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        text = value.strip()
        try:
            ZoneInfo(text)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return text


class AppSettings(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    env: EnvSettings
    yaml: PickerYamlSettings
    config_path: Path | None
    timezone: ZoneInfo
    min_date: datetime
    max_date: datetime


def _load_yaml_settings(path: Path | None) -> PickerYamlSettings:
    if path is None:
        return PickerYamlSettings()
    if not path.exists():
        raise FileNotFoundError(f"Picker config file not found: {path}")

    raw_config = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ValueError("Picker config must be a YAML mapping/object at the top level")
    return PickerYamlSettings.model_validate(raw_config)


def build_settings(env: EnvSettings) -> AppSettings:
    config_path = env.picker_config_path.resolve() if env.picker_config_path is not None else None
    yaml_settings = _load_yaml_settings(config_path)
    timezone = ZoneInfo(env.picker_timezone)
    LOGGER.info("Loaded picker settings from %s", config_path or "defaults")
    return AppSettings(
        env=env,
        yaml=yaml_settings,
        config_path=config_path,
        timezone=timezone,
        min_date=datetime.combine(yaml_settings.bounds.min_date, time.min, tzinfo=timezone),
        max_date=datetime.combine(yaml_settings.bounds.max_date, time.min, tzinfo=timezone),
    )


@lru_cache(maxsize=1)
def load_settings() -> AppSettings:
    return build_settings(EnvSettings())
