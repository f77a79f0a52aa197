"""Data models for the running coach dashboard."""

from .enums import Experience, RaceStatus, WorkoutType
from .planning import DashboardSnapshot, Race, TrainingGoal
from .profile import AthleteProfile, HRZones, PersonalRecords, ZoneRange
from .workout import Biomechanics, Lap, Workout

__all__ = [
    # Main models
    "AthleteProfile",
    "Workout",
    "DashboardSnapshot",
    # Nested models
    "Lap",
    "Biomechanics",
    "HRZones",
    "ZoneRange",
    "PersonalRecords",
    "TrainingGoal",
    "Race",
    # Enums
    "WorkoutType",
    "Experience",
    "RaceStatus",
]
