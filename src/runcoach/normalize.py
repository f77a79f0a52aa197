"""Normalization of raw recorded workout metrics."""

import logging
from collections.abc import Sequence
from typing import Any

from .models import Biomechanics, Lap, Workout
from .pace import UNKNOWN_PACE, format_pace, parse_pace

logger = logging.getLogger(__name__)

# Lap paces that only mean "no pace" when they come from the device
_ZERO_PACES = frozenset({"0:00", "00:00"})

DEFAULT_TITLE = "Treino Importado"


def calculate_pace(duration: str, distance_km: float) -> str:
    """
    Average pace per kilometer from an elapsed time and a distance.

    Args:
        duration: Elapsed time as H:MM:SS or M:SS
        distance_km: Distance covered in kilometers

    Returns:
        Pace as M:SS, or "--:--" when it cannot be computed
    """
    if not distance_km or distance_km <= 0:
        return UNKNOWN_PACE
    total_seconds = parse_pace(duration)
    if not total_seconds:
        return UNKNOWN_PACE
    return format_pace(total_seconds / distance_km)


def _recorded(raw: Any) -> float:
    """Positive numeric value of a recorded field, 0.0 when missing or junk."""
    if raw is None:
        return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return value if value > 0 else 0.0


def average_from_laps(laps: Sequence[Lap], field: str) -> float:
    """Mean of the positive, recorded values of one lap field (0.0 when none)."""
    values = [value for value in (_recorded(getattr(lap, field, None)) for lap in laps) if value]
    if not values:
        return 0.0
    return sum(values) / len(values)


def oscillation_mm_to_cm(value: float | None) -> float:
    """Convert device vertical oscillation (mm) to centimetres, one decimal."""
    if not value or value <= 0:
        return 0.0
    return round(value / 10, 1)


def title_from_filename(filename: str | None) -> str:
    """Display title of an imported file: ``.md`` dropped, underscores as spaces."""
    if not filename:
        return DEFAULT_TITLE
    return filename.removesuffix(".md").replace("_", " ")


def normalize_lap(lap: Lap) -> Lap:
    """
    Recompute a lap's pace from its duration and distance.

    The recorded pace is only kept when no pace can be computed and the
    recorded value is not a zero placeholder. Vertical oscillation is
    converted from the device's millimetres to centimetres.
    """
    pace = calculate_pace(lap.duration, lap.distance_km)
    if pace == UNKNOWN_PACE and lap.average_pace and lap.average_pace not in _ZERO_PACES:
        pace = lap.average_pace

    oscillation = lap.vertical_oscillation
    if oscillation is not None:
        oscillation = oscillation_mm_to_cm(oscillation)

    return lap.model_copy(update={"average_pace": pace, "vertical_oscillation": oscillation})


def _normalize_biomechanics(
    recorded: Biomechanics | None, raw_laps: Sequence[Lap], laps: Sequence[Lap]
) -> Biomechanics | None:
    """Workout running dynamics, missing values filled from lap averages."""
    if recorded is None and not laps:
        return None
    recorded = recorded or Biomechanics()

    # Lap averages are taken before the mm -> cm conversion of each lap
    raw_oscillation = _recorded(recorded.vertical_oscillation) or average_from_laps(
        raw_laps, "vertical_oscillation"
    )
    return recorded.model_copy(
        update={
            "cadence": _recorded(recorded.cadence) or round(average_from_laps(laps, "cadence")),
            "vertical_oscillation": oscillation_mm_to_cm(raw_oscillation),
            "ground_contact_time": round(
                _recorded(recorded.ground_contact_time)
                or average_from_laps(laps, "ground_contact_time")
            ),
            "stride_length": _recorded(recorded.stride_length)
            or round(average_from_laps(laps, "stride_length"), 2),
        }
    )


def normalize_workout(workout: Workout) -> Workout:
    """
    Fill derived summary metrics of an imported workout.

    Laps are normalized and sorted by lap number, the average pace is derived
    from duration and distance, and missing average heart rate and running
    dynamics are filled from lap averages. Vertical oscillation is recorded
    in millimetres and converted to centimetres, so a workout is normalized
    once, right after it is imported.

    Args:
        workout: Workout as imported

    Returns:
        A normalized copy; the input is not modified
    """
    laps = sorted((normalize_lap(lap) for lap in workout.laps), key=lambda lap: lap.lap_number)

    pace = calculate_pace(workout.duration, workout.distance_km)
    if pace == UNKNOWN_PACE:
        pace = workout.average_pace

    heart_rate = workout.average_heart_rate or round(average_from_laps(laps, "average_heart_rate"))
    if heart_rate != workout.average_heart_rate:
        logger.debug(f"Workout {workout.id}: average HR filled from laps ({heart_rate} bpm)")

    update = {
        "laps": laps,
        "average_pace": pace,
        "average_heart_rate": heart_rate,
        "biomechanics": _normalize_biomechanics(workout.biomechanics, workout.laps, laps),
    }
    if workout.filename:
        update["title"] = title_from_filename(workout.filename)

    return workout.model_copy(update=update)
