"""Shared fixtures for the test suite."""

import pytest

from src.runcoach.config import reset_settings
from src.runcoach.models import AthleteProfile, Lap, Workout


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from its own environment."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def profile():
    """Athlete with a 170 bpm / 5:00 min/km lactate threshold."""
    return AthleteProfile(
        name="Ana",
        lactateThresholdHR=170,
        lactateThresholdPace="5:00",
    )


@pytest.fixture
def make_workout():
    """Build a workout from keyword metrics and a list of lap paces."""

    def _make(
        distance: float = 8.0,
        pace: str = "5:30",
        heart_rate: int = 150,
        lap_paces: list[str] | None = None,
        step_types: list[str | None] | None = None,
        workout_id: str = "w1",
    ) -> Workout:
        laps = []
        for index, lap_pace in enumerate(lap_paces or [], start=1):
            step = step_types[index - 1] if step_types else None
            laps.append(Lap(lap_number=index, average_pace=lap_pace, step_type=step))
        return Workout(
            id=workout_id,
            distance_km=distance,
            average_pace=pace,
            average_heart_rate=heart_rate,
            laps=laps,
        )

    return _make


@pytest.fixture
def sample_export():
    """Dashboard export as produced by the web app, camelCase keys."""
    return {
        "profile": {
            "name": "Ana",
            "birthDate": "1990-05-20",
            "weight": 58.5,
            "restingHR": 48,
            "maxHR": 192,
            "vo2Max": 52.0,
            "lactateThresholdPace": "5:00",
            "lactateThresholdHR": 170,
            "hrZones": {"z1Low": 65, "z1High": 80, "z2High": 89, "z3High": 95, "z4High": 100},
            "prs": {"k5": "22:10", "k10": "46:30", "k21": "1:45:00", "k42": "--:--"},
            "experience": "Intermediário",
        },
        "workouts": [
            {
                "id": "long",
                "date": "2025-06-15",
                "distance": 21.1,
                "duration": "01:58:10",
                "avgPace": "5:36",
                "avgHR": 148,
                "trainingLoad": 210,
            },
            {
                "id": "tempo",
                "date": "2025-06-12",
                "distance": 8.0,
                "duration": "00:40:40",
                "avgPace": "5:05",
                "avgHR": 160,
                "trainingLoad": 140,
            },
            {
                "id": "intervals",
                "date": "2025-06-10",
                "distance": 4.0,
                "duration": "00:20:00",
                "avgHR": 165,
                "trainingLoad": 120,
                "laps": [
                    {"lapNumber": 1, "duration": "00:04:00", "distance": 1.0, "stepType": "active"},
                    {"lapNumber": 2, "duration": "00:04:00", "distance": 1.0, "stepType": "active"},
                    {"lapNumber": 3, "duration": "00:06:00", "distance": 1.0, "stepType": "recovery"},
                    {"lapNumber": 4, "duration": "00:04:00", "distance": 1.0, "stepType": "active"},
                ],
            },
            {
                "id": "recovery",
                "date": "2025-05-30",
                "distance": 6.0,
                "duration": "00:37:00",
                "avgHR": 120,
                "trainingLoad": 40,
            },
            {
                "id": "strength",
                "date": "2025-05-28",
                "distance": 0,
                "duration": "00:45:00",
            },
        ],
        "goals": [
            {
                "id": "g1",
                "title": "Sub 45 nos 10k",
                "targetDate": "2099-11-01",
                "targetValue": "44:59",
                "targetDistance": 10,
                "targetPace": "4:30",
                "progress": 60,
            }
        ],
        "races": [
            {
                "id": "r1",
                "name": "Maratona de Manaus",
                "date": "2099-10-20",
                "distance": "42km",
                "location": "Ponta Negra",
                "status": "Inscrito",
            },
            {
                "id": "r0",
                "name": "Corrida antiga",
                "date": "2020-01-01",
                "distance": "5km",
                "location": "Centro",
                "status": "Interessado",
            },
        ],
    }
