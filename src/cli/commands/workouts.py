"""Workout commands for the coach CLI."""

import json
import sys
from datetime import date
from pathlib import Path

import typer

from src.cli import display, loader
from src.runcoach.dashboard import filter_workouts, recent_history, summarize


def classify(
    snapshot: Path = typer.Argument(..., help="Dashboard JSON export", dir_okay=False),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Classify every workout of an export against the athlete profile."""
    workouts = loader.prepare_workouts(loader.load_snapshot(snapshot))

    if json_output:
        data = [
            {
                "id": w.id,
                "date": w.workout_date.isoformat() if w.workout_date else None,
                "distance": w.distance_km,
                "avgPace": w.average_pace,
                "avgHR": w.average_heart_rate,
                "type": w.workout_type.value,
            }
            for w in workouts
        ]
        print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        display.display_workouts(workouts, title="Classified Workouts")


def summary(
    snapshot: Path = typer.Argument(..., help="Dashboard JSON export", dir_okay=False),
    query: str = typer.Option("", "--query", "-q", help="Filter by type or distance"),
    month: int | None = typer.Option(None, "--month", "-m", min=1, max=12, help="Month 1-12"),
    year: int | None = typer.Option(None, "--year", "-y", help="Year"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show dashboard numbers, filtered workouts, goals and upcoming races."""
    data = loader.load_snapshot(snapshot)
    workouts = filter_workouts(loader.prepare_workouts(data), query, month, year)
    stats = summarize(workouts)

    if json_output:
        print(json.dumps(stats.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return

    display.display_summary(stats)
    display.display_workouts(workouts)
    display.display_goals(data.goals)
    display.display_races(data.upcoming_races(date.today()))


def show(
    snapshot: Path = typer.Argument(..., help="Dashboard JSON export", dir_okay=False),
    workout_id: str = typer.Argument(..., help="Workout id"),
    history: int = typer.Option(3, "--history", "-n", min=0, help="Recent workouts to list"),
) -> None:
    """Show one workout with its laps and recent history."""
    workouts = loader.prepare_workouts(loader.load_snapshot(snapshot))

    workout = next((w for w in workouts if w.id == workout_id), None)
    if workout is None:
        display.display_error(f"Workout {workout_id} not found")
        sys.exit(1)

    display.display_workout_detail(workout, recent_history(workouts, workout.id, limit=history))
