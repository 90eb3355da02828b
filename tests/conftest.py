"""Shared pytest fixtures for tokenbuild tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def examples_dir() -> Path:
    """Return path to the bundled example projects."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def write_tokens(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Return a helper writing a JSON token file relative to tmp_path."""

    def _write(relative: str, data: Any) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def light_dark_project(tmp_path: Path, write_tokens: Callable[[str, Any], Path]) -> Path:
    """A project with base light/dark colors and semantic aliases."""
    write_tokens(
        "tokens/base/light.json",
        {"color": {"bg": {"$value": "#fff"}, "fg": {"$value": "#111"}}},
    )
    write_tokens("tokens/base/dark.json", {"color": {"bg": {"$value": "#000"}}})
    write_tokens(
        "tokens/semantic/light.json",
        {"surface": {"$value": "{color.bg}", "$description": "Page background"}},
    )
    write_tokens("tokens/semantic/dark.json", {"surface": {"$value": "{color.fg}"}})
    return tmp_path
