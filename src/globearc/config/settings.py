# src/globearc/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/globearc/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `GLOBEARC_CONFIG_PATH` (relative paths resolve against the project root)
- environment variables (e.g., `GLOBEARC_LOG_LEVEL`)

Design rule:
- Visual tuning knobs (north offset, arc height, step count) live in YAML, not in the geometry code.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, FiniteFloat, model_validator

from globearc.core.env import load_dotenv_if_present, resolve_project_path
from globearc.domain.models import Place


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `globearc.config`."""
    text = resources.files("globearc.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "GlobeArc"
    log_level: str = "INFO"


class CameraSettings(BaseModel):
    north_offset_deg: float = Field(25.0, ge=-90, le=90)
    zoom: float = Field(1.0, ge=0, le=22)
    pitch: float = Field(0.0, ge=0, le=85)


class ArcSettings(BaseModel):
    steps: int = Field(200, ge=1, le=10_000)
    height_deg: FiniteFloat = 10.0


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    camera: CameraSettings = Field(default_factory=CameraSettings)
    arc: ArcSettings = Field(default_factory=ArcSettings)
    origin: Place
    destinations: list[Place] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_unique_ids(self) -> "Settings":
        ids = [p.id for p in self.destinations]
        dupes = sorted({i for i in ids if ids.count(i) > 1})
        if dupes:
            raise ValueError(f"Duplicate destination ids: {', '.join(dupes)}")
        return self

    def find_destination(self, destination_id: str) -> Place | None:
        key = destination_id.strip().lower()
        for place in self.destinations:
            if place.id == key:
                return place
        return None


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload.

    Note: We intentionally keep this whitelist small. `.env` is loaded by the caller.
    """
    data = dict(data)

    log_level = os.getenv("GLOBEARC_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("GLOBEARC_CONFIG_PATH")
    if config_path:
        raw = _read_yaml_file(resolve_project_path(config_path))
    else:
        raw = _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
