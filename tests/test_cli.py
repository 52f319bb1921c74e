"""Tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from pytest import CaptureFixture, MonkeyPatch

from cartola_analytics.cli import run_cli


@pytest.fixture
def snapshot_file(tmp_path: Path, snapshot: dict[str, Any]) -> Path:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(snapshot), encoding="utf-8")
    return path


def _run(monkeypatch: MonkeyPatch, *args: str) -> None:
    monkeypatch.setattr("sys.argv", ["cartola-cli", *args])
    run_cli()


def test_dashboard_json(monkeypatch: MonkeyPatch, capsys: CaptureFixture[str], snapshot_file: Path) -> None:
    _run(monkeypatch, "--data", str(snapshot_file), "dashboard", "42", "--json")

    body = json.loads(capsys.readouterr().out)
    assert body["totals"]["points_total"] == 20.0
    assert body["team"]["name"] == "Galo Doido"


def test_dashboard_table(monkeypatch: MonkeyPatch, capsys: CaptureFixture[str], snapshot_file: Path) -> None:
    _run(monkeypatch, "--data", str(snapshot_file), "dashboard", "42", "--away")

    out = capsys.readouterr().out
    assert "Galo Doido" in out
    assert "Everson" in out


def test_drilldown(monkeypatch: MonkeyPatch, capsys: CaptureFixture[str], snapshot_file: Path) -> None:
    _run(monkeypatch, "--data", str(snapshot_file), "drilldown", "42", "--kind", "sg")

    out = capsys.readouterr().out
    assert "Everson" in out
    assert "Hulk" not in out


def test_chart_writes_file(
    monkeypatch: MonkeyPatch, capsys: CaptureFixture[str], snapshot_file: Path, tmp_path: Path
) -> None:
    output = tmp_path / "dashboard.html"
    _run(monkeypatch, "--data", str(snapshot_file), "chart", "42", "-o", str(output))

    assert output.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")


def test_unknown_team_exits_with_error(
    monkeypatch: MonkeyPatch, capsys: CaptureFixture[str], snapshot_file: Path
) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, "--data", str(snapshot_file), "dashboard", "555")

    assert exc_info.value.code == 2
    assert "555" in capsys.readouterr().err


def test_missing_data_file_exits_with_error(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, "--data", str(tmp_path / "missing.json"), "dashboard", "42")

    assert exc_info.value.code == 2
