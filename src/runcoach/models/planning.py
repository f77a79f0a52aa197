"""Training goals, race calendar and the dashboard snapshot."""

from datetime import date

from pydantic import BaseModel, Field

from .enums import RaceStatus
from .profile import AthleteProfile
from .workout import Workout


class TrainingGoal(BaseModel):
    """A training goal tracked on the dashboard."""

    id: str
    title: str
    target_date: date = Field(alias="targetDate")
    target_value: str = Field(default="", alias="targetValue")
    target_distance: float | None = Field(default=None, alias="targetDistance", ge=0)
    target_pace: str | None = Field(default=None, alias="targetPace")
    progress: float = Field(default=0, description="Completion percentage", ge=0, le=100)

    model_config = {"populate_by_name": True}


class Race(BaseModel):
    """A race on the athlete's calendar."""

    id: str
    name: str
    race_date: date = Field(alias="date")
    distance: str = Field(description="Distance label, e.g. '10km'")
    location: str = ""
    status: RaceStatus = RaceStatus.INTERESTED

    model_config = {"populate_by_name": True}


class DashboardSnapshot(BaseModel):
    """Everything loaded for one dashboard session, before classification."""

    profile: AthleteProfile = Field(default_factory=AthleteProfile)
    workouts: list[Workout] = Field(default_factory=list)
    goals: list[TrainingGoal] = Field(default_factory=list)
    races: list[Race] = Field(default_factory=list)

    def upcoming_races(self, today: date) -> list[Race]:
        """Races on or after ``today``, soonest first."""
        return sorted(
            (race for race in self.races if race.race_date >= today),
            key=lambda race: race.race_date,
        )
