"""Athlete profile data models."""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from .enums import Experience


class ZoneRange(BaseModel):
    """Heart-rate zone expressed in beats per minute."""

    label: str
    low_bpm: int
    high_bpm: int | None = None  # None for the open-ended top zone


class HRZones(BaseModel):
    """Heart-rate zone bounds as percentages of lactate-threshold HR."""

    z1_low: float = Field(default=65, alias="z1Low", ge=0)
    z1_high: float = Field(default=80, alias="z1High", ge=0)
    z2_high: float = Field(default=89, alias="z2High", ge=0)
    z3_high: float = Field(default=95, alias="z3High", ge=0)
    z4_high: float = Field(default=100, alias="z4High", ge=0)

    model_config = {"populate_by_name": True}

    def bpm_ranges(self, threshold_hr: int) -> list[ZoneRange]:
        """
        Convert zone percentages into bpm bands.

        Args:
            threshold_hr: Lactate-threshold heart rate in bpm

        Returns:
            Zones Z1 through Z5, lowest first
        """

        def bpm(pct: float) -> int:
            return round(pct / 100 * threshold_hr)

        return [
            ZoneRange(label="Z1", low_bpm=bpm(self.z1_low), high_bpm=bpm(self.z1_high)),
            ZoneRange(label="Z2", low_bpm=bpm(self.z1_high), high_bpm=bpm(self.z2_high)),
            ZoneRange(label="Z3", low_bpm=bpm(self.z2_high), high_bpm=bpm(self.z3_high)),
            ZoneRange(label="Z4", low_bpm=bpm(self.z3_high), high_bpm=bpm(self.z4_high)),
            ZoneRange(label="Z5", low_bpm=bpm(self.z4_high)),
        ]


class PersonalRecords(BaseModel):
    """Best times over standard race distances."""

    k5: str = "--:--"
    k10: str = "--:--"
    k21: str = "--:--"
    k42: str = "--:--"


class AthleteProfile(BaseModel):
    """
    Athlete profile used as the reference frame for classification.

    Lactate-threshold values are optional; callers resolve missing ones to
    explicit defaults before classifying.
    """

    name: str = Field(default="Atleta", description="Display name")
    birth_date: date | None = Field(
        default=None,
        description="Date of birth",
        alias="birthDate",
    )
    weight: float = Field(default=0, description="Body weight in kilograms", ge=0)
    height: float = Field(default=0, description="Height in centimetres", ge=0)
    body_fat: float = Field(
        default=0,
        description="Body fat percentage",
        alias="bodyFat",
        ge=0,
        le=100,
    )
    resting_hr: int = Field(default=0, description="Resting heart rate", alias="restingHR", ge=0)
    max_hr: int = Field(default=0, description="Maximum heart rate", alias="maxHR", ge=0)
    vo2_max: float = Field(default=0, description="Estimated VO2max", alias="vo2Max", ge=0)
    lactate_threshold_pace: str | None = Field(
        default=None,
        description="Lactate-threshold pace as M:SS per km",
        alias="lactateThresholdPace",
    )
    lactate_threshold_hr: int | None = Field(
        default=None,
        description="Lactate-threshold heart rate in bpm",
        alias="lactateThresholdHR",
        ge=0,
    )
    hr_zones: HRZones = Field(default_factory=HRZones, alias="hrZones")
    prs: PersonalRecords = Field(default_factory=PersonalRecords)
    experience: Experience = Field(default=Experience.BEGINNER)
    photo_url: str | None = Field(default=None, alias="photoUrl")

    model_config = {"populate_by_name": True}

    @field_validator("lactate_threshold_hr")
    @classmethod
    def zero_threshold_is_missing(cls, v: int | None) -> int | None:
        """Treat a stored 0 bpm as not recorded."""
        return v or None

    def age_on(self, today: date) -> int:
        """Completed years on the given day (0 when birth date is unknown)."""
        if self.birth_date is None:
            return 0
        born = self.birth_date
        age = today.year - born.year
        if (today.month, today.day) < (born.month, born.day):
            age -= 1
        return age

    @property
    def age(self) -> int:
        """Current age in completed years."""
        return self.age_on(date.today())
