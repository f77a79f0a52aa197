"""
Workout classification relative to the athlete's lactate threshold.

A workout gets exactly one WorkoutType label. Rules are evaluated in a fixed
order and the first match wins:

1. zero distance -> Atividade
2. long distance -> Longão
3. uneven lap paces with fast laps -> Intervalado
4. moderately uneven lap paces -> Fartlek
5. threshold HR and pace over a few kilometers -> Tempo Run
6. low HR, slow pace, short distance -> Regenerativo
7. anything else -> Rodagem

Every heart-rate and pace comparison is made against the athlete's own
threshold values, never against absolute numbers.
"""

import logging
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, Field

from .models import AthleteProfile, Lap, Workout, WorkoutType
from .pace import parse_pace

logger = logging.getLogger(__name__)

# Reference values used when the profile has no lactate-threshold data
DEFAULT_THRESHOLD_HR = 170
DEFAULT_THRESHOLD_PACE = "5:00"


class ClassificationThresholds(BaseModel):
    """Tunable constants of the classification rules."""

    model_config = {"frozen": True}

    long_run_km: float = Field(default=16, description="Minimum distance of a long run", gt=0)

    # Lap variability
    min_laps_for_variability: int = Field(
        default=3,
        description="Laps required before lap paces are compared",
        ge=2,
    )
    lap_noise_floor_seconds: int = Field(
        default=60,
        description="Lap paces at or below this many s/km are discarded as noise",
        ge=0,
    )
    interval_variability: float = Field(
        default=0.20,
        description="Pace spread ratio above which a workout is an interval session",
        gt=0,
    )
    fartlek_variability: float = Field(
        default=0.15,
        description="Pace spread ratio above which a workout is a fartlek",
        gt=0,
    )
    high_intensity_buffer_seconds: int = Field(
        default=5,
        description="A lap faster than threshold pace minus this buffer counts as hard",
        ge=0,
    )
    interval_step_markers: tuple[str, ...] = Field(
        default=("interval", "active"),
        description="Lowercase step-type fragments that mark a work interval",
    )

    # Tempo run
    tempo_hr_low: float = Field(default=0.90, description="Lower HR bound, fraction of threshold")
    tempo_hr_high: float = Field(default=1.05, description="Upper HR bound, fraction of threshold")
    tempo_pace_window_seconds: int = Field(
        default=20,
        description="Maximum distance from threshold pace in s/km",
        ge=0,
    )
    tempo_min_km: float = Field(default=4, description="Tempo runs are longer than this", ge=0)

    # Recovery run
    recovery_hr_ratio: float = Field(
        default=0.80,
        description="Recovery HR stays below this fraction of threshold",
    )
    recovery_pace_margin_seconds: int = Field(
        default=60,
        description="Recovery pace is slower than threshold pace plus this margin",
        ge=0,
    )
    recovery_max_km: float = Field(default=10, description="Recovery runs are shorter than this")


DEFAULT_THRESHOLDS = ClassificationThresholds()


class ThresholdReference(BaseModel):
    """Athlete's lactate-threshold heart rate and pace, resolved to numbers."""

    model_config = {"frozen": True}

    heart_rate: int = Field(gt=0)
    pace_seconds: int = Field(gt=0)

    @classmethod
    def from_profile(
        cls,
        profile: AthleteProfile,
        default_hr: int = DEFAULT_THRESHOLD_HR,
        default_pace: str = DEFAULT_THRESHOLD_PACE,
    ) -> "ThresholdReference":
        """
        Resolve the reference values of a profile.

        Missing or unreadable profile values are replaced with the given
        defaults and a warning is logged.

        Raises:
            ValueError: If the default pace itself cannot be parsed
        """
        heart_rate = profile.lactate_threshold_hr
        if not heart_rate:
            logger.warning(
                f"Profile '{profile.name}' has no lactate-threshold HR, using {default_hr} bpm"
            )
            heart_rate = default_hr

        pace_seconds = parse_pace(profile.lactate_threshold_pace)
        if not pace_seconds:
            logger.warning(
                f"Profile '{profile.name}' has no usable lactate-threshold pace "
                f"({profile.lactate_threshold_pace!r}), using {default_pace}"
            )
            pace_seconds = parse_pace(default_pace)
            if not pace_seconds:
                raise ValueError(f"Invalid default threshold pace: {default_pace!r}")

        return cls(heart_rate=heart_rate, pace_seconds=pace_seconds)


class LapVariability(BaseModel):
    """Spread of lap paces within one workout."""

    min_pace: int = Field(description="Fastest lap pace in s/km")
    max_pace: int = Field(description="Slowest lap pace in s/km")
    has_high_intensity: bool = Field(
        description="A lap ran faster than threshold or was tagged as a work interval"
    )

    @property
    def ratio(self) -> float:
        """(slowest - fastest) / fastest; larger means more uneven effort."""
        return (self.max_pace - self.min_pace) / self.min_pace


def _has_interval_step(laps: Iterable[Lap], markers: Sequence[str]) -> bool:
    for lap in laps:
        step = (lap.step_type or "").lower()
        if any(marker in step for marker in markers):
            return True
    return False


def analyze_laps(
    laps: Sequence[Lap],
    reference: ThresholdReference,
    thresholds: ClassificationThresholds = DEFAULT_THRESHOLDS,
) -> LapVariability | None:
    """
    Measure how uneven the lap paces of a workout are.

    Args:
        laps: Laps in chronological order
        reference: Athlete's threshold values
        thresholds: Classification constants

    Returns:
        Lap variability, or None when there are too few laps or no lap
        pace above the noise floor
    """
    if len(laps) < thresholds.min_laps_for_variability:
        return None

    paces = []
    for lap in laps:
        seconds = parse_pace(lap.average_pace)
        if seconds is not None and seconds > thresholds.lap_noise_floor_seconds:
            paces.append(seconds)
    if not paces:
        return None

    fast_cutoff = reference.pace_seconds - thresholds.high_intensity_buffer_seconds
    has_high_intensity = any(pace < fast_cutoff for pace in paces) or _has_interval_step(
        laps, thresholds.interval_step_markers
    )

    return LapVariability(
        min_pace=min(paces),
        max_pace=max(paces),
        has_high_intensity=has_high_intensity,
    )


def classify_workout(
    workout: Workout,
    profile: AthleteProfile,
    thresholds: ClassificationThresholds = DEFAULT_THRESHOLDS,
    reference: ThresholdReference | None = None,
) -> WorkoutType:
    """
    Assign a workout type label.

    Pure function: neither argument is modified and the same inputs always
    yield the same label.

    Args:
        workout: Workout with raw metrics
        profile: Athlete profile providing the threshold reference
        thresholds: Classification constants
        reference: Pre-resolved threshold reference; resolved from the
            profile with the default fallbacks when omitted

    Returns:
        The workout type label
    """
    if reference is None:
        reference = ThresholdReference.from_profile(profile)

    distance = workout.distance_km
    if distance == 0:
        return WorkoutType.ACTIVITY

    if distance >= thresholds.long_run_km:
        return WorkoutType.LONG_RUN

    variability = analyze_laps(workout.laps, reference, thresholds)
    if variability is not None:
        ratio = variability.ratio
        if ratio > thresholds.interval_variability and variability.has_high_intensity:
            return WorkoutType.INTERVAL
        if thresholds.fartlek_variability < ratio <= thresholds.interval_variability:
            return WorkoutType.FARTLEK

    heart_rate = workout.average_heart_rate
    threshold_hr = reference.heart_rate
    pace = parse_pace(workout.average_pace)

    # Tempo run
    in_threshold_hr_zone = (
        thresholds.tempo_hr_low * threshold_hr
        <= heart_rate
        <= thresholds.tempo_hr_high * threshold_hr
    )
    near_threshold_pace = (
        pace is not None
        and abs(pace - reference.pace_seconds) < thresholds.tempo_pace_window_seconds
    )
    if in_threshold_hr_zone and near_threshold_pace and distance > thresholds.tempo_min_km:
        return WorkoutType.TEMPO_RUN

    # Recovery
    low_intensity_hr = 0 < heart_rate < thresholds.recovery_hr_ratio * threshold_hr
    slow_pace = (
        pace is not None
        and pace > reference.pace_seconds + thresholds.recovery_pace_margin_seconds
    )
    if low_intensity_hr and slow_pace and distance < thresholds.recovery_max_km:
        return WorkoutType.RECOVERY

    return WorkoutType.BASE_RUN


def classify_workouts(
    workouts: Iterable[Workout],
    profile: AthleteProfile,
    thresholds: ClassificationThresholds = DEFAULT_THRESHOLDS,
    reference: ThresholdReference | None = None,
) -> list[Workout]:
    """
    Label every workout against the current profile.

    Args:
        workouts: Workouts as loaded
        profile: Athlete profile
        thresholds: Classification constants
        reference: Pre-resolved threshold reference (resolved once if omitted)

    Returns:
        Copies of the workouts with workout_type set, in input order
    """
    if reference is None:
        reference = ThresholdReference.from_profile(profile)

    classified = [
        workout.model_copy(
            update={"workout_type": classify_workout(workout, profile, thresholds, reference)}
        )
        for workout in workouts
    ]
    logger.info(f"Classified {len(classified)} workouts")
    return classified
