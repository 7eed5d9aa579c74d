"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path
from typing import Any, Callable

import pytest


@pytest.fixture
def test_data_dir() -> Path:
    """Return path to test data directory."""
    return Path(__file__).parent / "test_data"


@pytest.fixture
def write_jsonl(tmp_path: Path) -> Callable[..., Path]:
    """Write records (dicts or raw strings) as a JSONL file and return its path."""

    def _write(records: list[Any], name: str = "transcript.jsonl") -> Path:
        lines = [r if isinstance(r, str) else json.dumps(r) for r in records]
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_records() -> list[dict[str, str]]:
    """A small, well-formed conversation."""
    return [
        {"role": "system", "content": "Be terse."},
        {"role": "user", "content": "Hi"},
        {"role": "assistant", "content": "Hello!"},
    ]
