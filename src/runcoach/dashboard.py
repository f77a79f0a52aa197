"""Dashboard queries over classified workouts."""

from collections import Counter
from collections.abc import Sequence

from pydantic import BaseModel, Field

from .models import Workout, WorkoutType
from .pace import UNKNOWN_PACE


class DashboardSummary(BaseModel):
    """Headline numbers shown at the top of the dashboard."""

    workout_count: int = 0
    total_km: float = 0
    latest_pace: str = UNKNOWN_PACE
    latest_training_load: float = 0
    type_counts: dict[WorkoutType, int] = Field(default_factory=dict)


def filter_workouts(
    workouts: Sequence[Workout],
    query: str = "",
    month: int | None = None,
    year: int | None = None,
) -> list[Workout]:
    """
    Filter workouts the way the history list does.

    Args:
        workouts: Workouts to search
        query: Case-insensitive text matched against the label or distance
        month: Calendar month 1-12, or None for all
        year: Calendar year, or None for all

    Returns:
        Matching workouts in their original order
    """
    needle = query.lower()
    matches = []
    for workout in workouts:
        if needle and not (
            needle in workout.workout_type.value.lower() or needle in str(workout.distance_km)
        ):
            continue
        if month is not None or year is not None:
            if workout.workout_date is None:
                continue
            if month is not None and workout.workout_date.month != month:
                continue
            if year is not None and workout.workout_date.year != year:
                continue
        matches.append(workout)
    return matches


def available_years(workouts: Sequence[Workout]) -> list[int]:
    """Distinct workout years, newest first."""
    years = {w.workout_date.year for w in workouts if w.workout_date is not None}
    return sorted(years, reverse=True)


def newest_first(workouts: Sequence[Workout]) -> list[Workout]:
    """Workouts ordered by date, newest first; undated workouts go last."""
    dated = [w for w in workouts if w.workout_date is not None]
    undated = [w for w in workouts if w.workout_date is None]
    return sorted(dated, key=lambda w: w.workout_date, reverse=True) + undated


def summarize(workouts: Sequence[Workout]) -> DashboardSummary:
    """
    Compute dashboard headline numbers.

    Workouts are expected newest first, so the first one is the latest.
    """
    if not workouts:
        return DashboardSummary()

    latest = workouts[0]
    return DashboardSummary(
        workout_count=len(workouts),
        total_km=round(sum(w.distance_km for w in workouts), 2),
        latest_pace=latest.average_pace,
        latest_training_load=latest.training_load,
        type_counts=dict(Counter(w.workout_type for w in workouts)),
    )


def recent_history(workouts: Sequence[Workout], exclude_id: str, limit: int = 5) -> list[Workout]:
    """Most recent workouts other than ``exclude_id``, used as coaching context."""
    return [w for w in workouts if w.id != exclude_id][:limit]
