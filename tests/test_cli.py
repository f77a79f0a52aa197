"""Tests for the coach CLI."""

import json

import pytest
from typer.testing import CliRunner

from src.cli.main import app

runner = CliRunner()


@pytest.fixture
def export_file(tmp_path, sample_export):
    """Dashboard export written to disk."""
    path = tmp_path / "export.json"
    path.write_text(json.dumps(sample_export, ensure_ascii=False), encoding="utf-8")
    return path


def test_classify_json(export_file):
    """Test that every workout of the export gets its label."""
    result = runner.invoke(app, ["classify", str(export_file), "--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    labels = {item["id"]: item["type"] for item in data}
    assert labels == {
        "long": "Longão",
        "tempo": "Tempo Run",
        "intervals": "Intervalado",
        "recovery": "Regenerativo",
        "strength": "Atividade",
    }
    # Pace derived from duration and distance
    recovery = next(item for item in data if item["id"] == "recovery")
    assert recovery["avgPace"] == "6:10"


def test_classify_table(export_file):
    """Test the rich table output."""
    result = runner.invoke(app, ["classify", str(export_file)])

    assert result.exit_code == 0, result.output
    assert "Classified Workouts" in result.output
    assert "Regenerativo" in result.output


def test_classify_uses_configured_defaults(tmp_path, sample_export, monkeypatch):
    """Test that a profile without thresholds falls back to settings."""
    sample_export["profile"] = {"name": "Sem limiar"}
    path = tmp_path / "export.json"
    path.write_text(json.dumps(sample_export), encoding="utf-8")
    monkeypatch.setenv("DEFAULT_THRESHOLD_HR", "150")

    result = runner.invoke(app, ["classify", str(path)])

    assert result.exit_code == 0, result.output
    assert "using 150 bpm" in result.output


def test_classify_missing_file(tmp_path):
    """Test a readable error for a missing export."""
    result = runner.invoke(app, ["classify", str(tmp_path / "nope.json")])

    assert result.exit_code == 1
    assert "Cannot read" in result.output


def test_classify_invalid_export(tmp_path):
    """Test validation errors are reported without a traceback."""
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"workouts": [{"id": "x", "distance": -3}]}), encoding="utf-8")

    result = runner.invoke(app, ["classify", str(path)])

    assert result.exit_code == 1
    assert "Invalid dashboard export" in result.output
    assert "workouts.0.distance" in result.output


def test_summary_json(export_file):
    """Test dashboard numbers as JSON."""
    result = runner.invoke(app, ["summary", str(export_file), "--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["workout_count"] == 5
    assert data["latest_pace"] == "5:36"
    assert data["type_counts"]["Tempo Run"] == 1


def test_summary_with_filters(export_file):
    """Test filtered summary output with goals and races."""
    result = runner.invoke(app, ["summary", str(export_file), "--month", "6", "--year", "2025"])

    assert result.exit_code == 0, result.output
    assert "Dashboard" in result.output
    assert "Sub 45 nos 10k" in result.output
    assert "Maratona de Manaus" in result.output
    assert "Corrida antiga" not in result.output


def test_show_workout(export_file):
    """Test the detail view of one workout."""
    result = runner.invoke(app, ["show", str(export_file), "intervals"])

    assert result.exit_code == 0, result.output
    assert "Intervalado" in result.output
    assert "Laps" in result.output
    assert "Recent history" in result.output


def test_show_unknown_workout(export_file):
    """Test that an unknown id exits with an error."""
    result = runner.invoke(app, ["show", str(export_file), "missing"])

    assert result.exit_code == 1
    assert "Workout missing not found" in result.output


def test_zones(export_file):
    """Test heart-rate zones for the export profile."""
    result = runner.invoke(app, ["zones", str(export_file)])

    assert result.exit_code == 0, result.output
    assert "Threshold HR: 170 bpm" in result.output
    assert "Z5" in result.output


def test_thresholds_json():
    """Test the active thresholds as JSON."""
    result = runner.invoke(app, ["thresholds", "--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["threshold_hr"] == 170
    assert data["threshold_pace_seconds"] == 300
    assert data["long_run_km"] == 16
    assert data["interval_step_markers"] == ["interval", "active"]


def test_pace_command():
    """Test pace strings converted to seconds."""
    result = runner.invoke(app, ["pace", "--", "5:05", "1:02:30", "--:--"])

    assert result.exit_code == 0, result.output
    assert "305 s" in result.output
    assert "3750 s" in result.output
    assert "unknown" in result.output


def test_version():
    """Test the version flag."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "coach version" in result.output


def test_summary_orders_export_newest_first(tmp_path, sample_export):
    """Test that an export in ascending date order still reports the newest workout."""
    sample_export["workouts"].reverse()
    path = tmp_path / "ascending.json"
    path.write_text(json.dumps(sample_export, ensure_ascii=False), encoding="utf-8")

    result = runner.invoke(app, ["summary", str(path), "--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["latest_training_load"] == 210
    assert data["latest_pace"] == "5:36"


def test_show_history_newest_first(tmp_path, sample_export):
    """Test recent history of a workout follows workout dates."""
    sample_export["workouts"].reverse()
    path = tmp_path / "ascending.json"
    path.write_text(json.dumps(sample_export, ensure_ascii=False), encoding="utf-8")

    result = runner.invoke(app, ["show", str(path), "strength", "--history", "1"])

    assert result.exit_code == 0, result.output
    assert "15/06/2025" in result.output
    assert "30/05/2025" not in result.output


def test_show_rejects_negative_history(export_file):
    """Test that a negative history length is a usage error."""
    result = runner.invoke(app, ["show", str(export_file), "intervals", "--history", "-1"])

    assert result.exit_code == 2


def test_classify_warns_on_unreadable_threshold_pace(tmp_path, sample_export):
    """Test that an unparseable profile pace is reported before falling back."""
    sample_export["profile"]["lactateThresholdPace"] = "abc"
    path = tmp_path / "export.json"
    path.write_text(json.dumps(sample_export, ensure_ascii=False), encoding="utf-8")

    result = runner.invoke(app, ["classify", str(path)])

    assert result.exit_code == 0, result.output
    assert "No usable lactate-threshold data" in result.output
