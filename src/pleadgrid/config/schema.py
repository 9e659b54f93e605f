"""Typed configuration schema and loader for the pleadgrid package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, PositiveFloat, conint

from pleadgrid.layout.geometry import PageGeometry

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class LayoutSettings(BaseModel):
    """Page size, margins and grid offsets, in points and line slots."""

    page_width: PositiveFloat
    page_height: PositiveFloat
    top_margin: float
    bottom_margin: float
    left_text_x: float
    right_margin: float
    line_count: int
    left_num_x: float
    caption_start_offset: float
    title_offset: float
    body_start_offset_first: float
    body_start_offset_other: float
    line_number_shift: float
    footer_gap: float

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    def to_geometry(self) -> PageGeometry:
        """Build the immutable geometry; raises ``ConfigurationError`` when unusable."""

        return PageGeometry(**self.model_dump())


class FontSettings(BaseModel):
    """Standard PDF fonts and point sizes used by the renderer."""

    body_font: str
    bold_font: str
    body_size: PositiveFloat
    caption_size: PositiveFloat
    title_size: PositiveFloat
    line_number_size: PositiveFloat
    footer_size: PositiveFloat

    model_config = ConfigDict(extra="forbid")


class AttachmentDefaults(BaseModel):
    """Caption fields used when no attachment record exists yet."""

    title: str = "DECLARATION (ATTACHMENT)"
    court_line: str = "SUPERIOR COURT OF CALIFORNIA, COUNTY OF ORANGE"
    case_name: str = ""
    case_number: str = ""

    model_config = ConfigDict(extra="forbid")


class OverflowSettings(BaseModel):
    """Inline-versus-attachment decision settings for narrative fields."""

    threshold_chars: conint(ge=0) = 900  # type: ignore[valid-type]
    auto_attach: bool = True
    attachment_key: str = "pleading_paper_v1"
    attachment_defaults: AttachmentDefaults = AttachmentDefaults()

    model_config = ConfigDict(extra="forbid")


class StorageSettings(BaseModel):
    """Where the JSON attachment store lives."""

    directory: str | None = None
    directory_env: str = "PLEADGRID_STORE_DIR"

    model_config = ConfigDict(extra="forbid")


class RenderSettings(BaseModel):
    """Rendering details that are not part of the grid."""

    footer_text: str = ""
    author: str = "pleadgrid"

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)  # type: ignore[valid-type]
    layout: LayoutSettings
    fonts: FontSettings
    overflow: OverflowSettings
    storage: StorageSettings
    render: RenderSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def _read_yaml(path: str | os.PathLike[str]) -> dict[str, Any]:
    with Path(path).open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level of a config file must be a mapping")
    return data


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``storage.directory_env``.
    """

    with (
        importlib_resources.files("pleadgrid.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    merged = deep_merge_dicts(defaults, _read_yaml(path)) if path is not None else defaults
    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    store_env = cfg.storage.directory_env
    if environ.get(store_env):
        cfg.storage.directory = environ[store_env]

    return cfg


__all__ = [
    "ConfigModel",
    "LayoutSettings",
    "FontSettings",
    "AttachmentDefaults",
    "OverflowSettings",
    "StorageSettings",
    "RenderSettings",
    "deep_merge_dicts",
    "load_config",
]
