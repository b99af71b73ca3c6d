# tests/test_packaging.py
"""Tests for the project metadata."""

import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def test_project_readme_is_not_a_design_document() -> None:
    project = tomllib.loads((ROOT / "pyproject.toml").read_text())["project"]

    readme = project.get("readme")
    assert readme is None or (ROOT / readme).name.lower().startswith("readme")
    assert "starlette>=0.48" in project["dependencies"]
