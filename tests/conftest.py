"""
Pytest configuration for problem_guard.

Provides fixtures for:
- A conforming merged problem record (unsolved problem, point omitted)
- A fully populated solved record
- Settings isolated from the developer environment
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from problem_guard.config import Settings, get_settings


@pytest.fixture
def unsolved_problem() -> Dict[str, Any]:
    """
    Conforming record with every nullable field null and point omitted.
    """
    return {
        "id": "abc_1",
        "contest_id": "abc",
        "title": "Sum",
        "first_user_id": None,
        "first_contest_id": None,
        "first_submission_id": None,
        "fastest_user_id": None,
        "fastest_contest_id": None,
        "fastest_submission_id": None,
        "execution_time": None,
        "shortest_user_id": None,
        "shortest_contest_id": None,
        "shortest_submission_id": None,
        "source_code_length": None,
        "solver_count": 0,
    }


@pytest.fixture
def solved_problem() -> Dict[str, Any]:
    """
    Conforming record with every field populated.
    """
    return {
        "id": "abc138_a",
        "contest_id": "abc138",
        "title": "A. Red or Not",
        "first_user_id": "tourist",
        "first_contest_id": "abc138",
        "first_submission_id": 6932281,
        "fastest_user_id": "kenkoooo",
        "fastest_contest_id": "abc138",
        "fastest_submission_id": 6933017,
        "execution_time": 1,
        "shortest_user_id": "maspy",
        "shortest_contest_id": "abc138",
        "shortest_submission_id": 6935421,
        "source_code_length": 28,
        "solver_count": 9321,
        "point": 100.0,
    }


@pytest.fixture
def write_json(tmp_path: Path):
    """
    Write a decoded value to a JSON file under tmp_path and return its path.
    """

    def _write(value: Any, name: str = "merged-problems.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(value), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """
    Keep tests independent of a developer's .env and environment overrides.
    """
    for name in Settings.model_fields:
        alias = Settings.model_fields[name].alias
        if alias:
            monkeypatch.delenv(alias, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
