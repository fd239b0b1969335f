"""Shared pytest fixtures for dictarith tests."""
from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture()
def sample() -> dict[str, int]:
    return {"a": 1, "abc": 4, "b": 2}


@pytest.fixture()
def json_file(tmp_path: Path):
    """Return a factory that writes a JSON document to a temporary file."""

    def _make(data: object, name: str = "data.json") -> Path:
        p = tmp_path / name
        p.write_text(json.dumps(data), encoding="utf-8")
        return p

    return _make
