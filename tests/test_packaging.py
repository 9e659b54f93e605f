"""Tests for packaging metadata."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any


def _load_pyproject() -> dict[str, Any]:
    path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with path.open("rb") as fh:
        return tomllib.load(fh)


def test_console_script_entrypoint() -> None:
    scripts = _load_pyproject().get("project", {}).get("scripts", {})
    assert scripts.get("pleadgrid") == "pleadgrid.cli:app"


def test_runtime_dependencies_declared() -> None:
    deps = " ".join(_load_pyproject()["project"]["dependencies"]).lower()
    for name in ("pydantic", "pyyaml", "typer", "reportlab"):
        assert name in deps


def test_test_extra() -> None:
    extras = _load_pyproject()["project"]["optional-dependencies"]
    assert any(dep.startswith("pytest") for dep in extras["test"])
