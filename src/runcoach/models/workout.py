"""Workout and lap data models."""

from collections.abc import Mapping
from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..pace import format_interval, pace_to_seconds
from .enums import WorkoutType


def _interval_to_text(v: Any) -> Any:
    if v is None or isinstance(v, Mapping):
        return format_interval(v)
    return v


class Biomechanics(BaseModel):
    """Running dynamics averaged over a workout."""

    cadence: float = Field(default=0, description="Steps per minute", ge=0)
    vertical_oscillation: float = Field(
        default=0,
        description="Vertical oscillation; millimetres as recorded, centimetres once normalized",
        alias="verticalOscillation",
        ge=0,
    )
    ground_contact_time: float | str = Field(
        default=0,
        description="Ground contact time in milliseconds",
        alias="groundContactTime",
    )
    stride_length: float = Field(
        default=0,
        description="Stride length in metres",
        alias="strideLength",
        ge=0,
    )

    model_config = {"populate_by_name": True}


class Lap(BaseModel):
    """A recorded lap segment within a workout."""

    lap_number: int = Field(default=0, description="1-based lap index", alias="lapNumber")
    step_type: str | None = Field(
        default=None,
        description="Structured-workout step label from the recording device",
        alias="stepType",
    )
    duration: str = Field(default="00:00:00", description="Lap duration as H:MM:SS or M:SS")
    distance_km: float = Field(
        default=0,
        description="Lap distance in kilometers",
        alias="distance",
        ge=0,
    )
    average_pace: str = Field(
        default="--:--",
        description="Average lap pace as M:SS per km",
        alias="avgPace",
    )
    average_heart_rate: float | None = Field(default=None, alias="avgHR", ge=0)
    max_heart_rate: float | None = Field(default=None, alias="maxHR", ge=0)
    cadence: float | None = Field(default=None, ge=0)
    ground_contact_time: str | None = Field(default=None, alias="groundContactTime")
    stride_length: float | None = Field(default=None, alias="strideLength", ge=0)
    vertical_oscillation: float | None = Field(default=None, alias="verticalOscillation", ge=0)
    vertical_ratio: float | None = Field(default=None, alias="verticalRatio", ge=0)

    model_config = {"populate_by_name": True}

    @field_validator("duration", mode="before")
    @classmethod
    def interval_to_text(cls, v: Any) -> Any:
        return _interval_to_text(v)


class Workout(BaseModel):
    """
    A workout imported from the athlete's recording device.

    The ``workout_type`` label is a projection: it is recomputed from the raw
    metrics and the current profile on every load, never treated as stored truth.
    """

    id: str = Field(description="Unique identifier for the workout")
    workout_date: date | None = Field(default=None, description="Local date", alias="date")
    title: str = Field(default="Treino Importado", description="Display title")
    workout_type: WorkoutType = Field(
        default=WorkoutType.BASE_RUN,
        description="Classifier label",
        alias="type",
    )
    distance_km: float = Field(
        default=0,
        description="Total distance in kilometers",
        alias="distance",
        ge=0,
    )
    duration: str = Field(default="00:00:00", description="Elapsed time as H:MM:SS")
    average_pace: str = Field(
        default="--:--",
        description="Average pace as M:SS per km",
        alias="avgPace",
    )
    average_heart_rate: int = Field(
        default=0,
        description="Average heart rate in bpm; 0 when not recorded",
        alias="avgHR",
        ge=0,
    )
    max_heart_rate: int | None = Field(default=None, alias="maxHR", ge=0)
    training_load: float = Field(default=0, alias="trainingLoad", ge=0)
    elevation_gain: float | None = Field(default=None, alias="elevationGain")
    average_power: float | None = Field(default=None, alias="avgPower", ge=0)
    max_power: float | None = Field(default=None, alias="maxPower", ge=0)
    biomechanics: Biomechanics | None = None
    laps: list[Lap] = Field(default_factory=list, description="Laps in chronological order")
    ai_analysis: str | None = Field(default=None, alias="aiAnalysis")
    filename: str | None = Field(default=None, description="Imported file name, source of the title")

    model_config = {"populate_by_name": True}

    @field_validator("duration", mode="before")
    @classmethod
    def interval_to_text(cls, v: Any) -> Any:
        """Accept stored intervals given as hours/minutes/seconds mappings."""
        return _interval_to_text(v)

    @property
    def duration_seconds(self) -> int:
        """Elapsed time in seconds (0 when the duration is not recorded)."""
        return pace_to_seconds(self.duration)
