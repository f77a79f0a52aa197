"""Enumeration types for athlete and workout data models."""

from enum import Enum


class WorkoutType(str, Enum):
    """Workout label assigned by the classifier."""

    LONG_RUN = "Longão"
    INTERVAL = "Intervalado"
    FARTLEK = "Fartlek"
    TEMPO_RUN = "Tempo Run"
    RECOVERY = "Regenerativo"
    BASE_RUN = "Rodagem"
    ACTIVITY = "Atividade"  # Zero-distance, non-running placeholder


class Experience(str, Enum):
    """Self-reported athlete level."""

    BEGINNER = "Iniciante"
    INTERMEDIATE = "Intermediário"
    ADVANCED = "Avançado"
    ELITE = "Elite"


class RaceStatus(str, Enum):
    """Athlete's commitment to a race on the calendar."""

    REGISTERED = "Inscrito"
    PLANNED = "Planejado"
    INTERESTED = "Interessado"
