# tests/test_cli_hill_climb.py
"""
End-to-end checks for the hill-climb CLI via main(argv).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from app.logging_config import configure_logging
from cli.hill_climb import main


@pytest.fixture
def map_file(tmp_path: Path, example_text: str) -> Path:
    path = tmp_path / "example.txt"
    path.write_text(example_text, encoding="utf-8")
    return path


def test_reports_both_answers(map_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(map_file)]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out == {"shortest_from_start": 31, "shortest_from_lowest": 29}


def test_unreachable_goal_reports_null(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "walled.txt"
    path.write_text("Sac\naEa\naaa\n", encoding="utf-8")

    assert main([str(path)]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out == {"shortest_from_start": None, "shortest_from_lowest": None}


def test_config_override(map_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cfg = tmp_path / "search.yaml"
    cfg.write_text("search:\n  max_climb: 25\n", encoding="utf-8")

    assert main([str(map_file), "--config", str(cfg)]) == 0

    out = json.loads(capsys.readouterr().out)
    # Straight walk from S to E once climbing is free.
    assert out["shortest_from_start"] == 7


def test_bad_map_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("abc\nabc\n", encoding="utf-8")

    assert main([str(path)]) == 1
    assert "Hill climb FAILED" in capsys.readouterr().err


def test_missing_map_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "FileNotFoundError" in capsys.readouterr().err


def test_bad_log_level_fails(map_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(map_file), "--log-level", "LOUD"]) == 1
    assert "Hill climb FAILED" in capsys.readouterr().err


def test_configure_logging_sets_level_by_name() -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_runs_without_shipped_config(
    map_file: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # Installed copies have no config/ directory next to the packages.
    import settings.loader as loader

    monkeypatch.setattr(loader, "DEFAULT_SETTINGS_PATH", tmp_path / "config" / "search.yaml")

    assert main([str(map_file)]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out == {"shortest_from_start": 31, "shortest_from_lowest": 29}


def test_explicit_missing_config_fails(map_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(map_file), "--config", str(tmp_path / "missing.yaml")]) == 1
    assert "Missing config file" in capsys.readouterr().err
