"""Tests for dashboard queries."""

from datetime import date

import pytest

from src.runcoach.dashboard import (
    available_years,
    filter_workouts,
    newest_first,
    recent_history,
    summarize,
)
from src.runcoach.models import Workout, WorkoutType


@pytest.fixture
def workouts():
    """Classified workouts, newest first."""
    return [
        Workout(
            id="a",
            date=date(2025, 6, 15),
            type=WorkoutType.LONG_RUN,
            distance_km=21.1,
            average_pace="5:36",
            training_load=210,
        ),
        Workout(
            id="b",
            date=date(2025, 6, 12),
            type=WorkoutType.TEMPO_RUN,
            distance_km=8.0,
            average_pace="5:05",
            training_load=140,
        ),
        Workout(
            id="c",
            date=date(2024, 12, 30),
            type=WorkoutType.BASE_RUN,
            distance_km=10.0,
            average_pace="5:40",
            training_load=90,
        ),
        Workout(id="d", type=WorkoutType.BASE_RUN, distance_km=5.0),
    ]


def test_filter_by_query(workouts):
    """Test case-insensitive label and distance search."""
    assert [w.id for w in filter_workouts(workouts, query="tempo")] == ["b"]
    assert [w.id for w in filter_workouts(workouts, query="RODAGEM")] == ["c", "d"]
    assert [w.id for w in filter_workouts(workouts, query="21")] == ["a"]
    assert len(filter_workouts(workouts)) == 4


def test_filter_by_month_and_year(workouts):
    """Test calendar filters skip undated workouts."""
    assert [w.id for w in filter_workouts(workouts, month=6)] == ["a", "b"]
    assert [w.id for w in filter_workouts(workouts, year=2024)] == ["c"]
    assert [w.id for w in filter_workouts(workouts, month=6, year=2024)] == []


def test_available_years(workouts):
    """Test distinct years newest first."""
    assert available_years(workouts) == [2025, 2024]


def test_summarize(workouts):
    """Test dashboard headline numbers."""
    summary = summarize(workouts)

    assert summary.workout_count == 4
    assert summary.total_km == pytest.approx(44.1)
    assert summary.latest_pace == "5:36"
    assert summary.latest_training_load == 210
    assert summary.type_counts == {
        WorkoutType.LONG_RUN: 1,
        WorkoutType.TEMPO_RUN: 1,
        WorkoutType.BASE_RUN: 2,
    }


def test_summarize_empty():
    """Test the summary of no workouts."""
    summary = summarize([])

    assert summary.workout_count == 0
    assert summary.total_km == 0
    assert summary.latest_pace == "--:--"
    assert summary.type_counts == {}


def test_recent_history(workouts):
    """Test the history slice excludes the selected workout."""
    assert [w.id for w in recent_history(workouts, "b")] == ["a", "c", "d"]
    assert [w.id for w in recent_history(workouts, "a", limit=2)] == ["b", "c"]


def test_newest_first(workouts):
    """Test ordering by date with undated workouts last."""
    shuffled = [workouts[3], workouts[2], workouts[0], workouts[1]]

    assert [w.id for w in newest_first(shuffled)] == ["a", "b", "c", "d"]
    assert newest_first([]) == []
