"""Dashboard export loading for the coach CLI."""

import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from src.cli.display import display_error, display_warning
from src.runcoach.classifier import ThresholdReference, classify_workouts
from src.runcoach.config import get_settings
from src.runcoach.dashboard import newest_first
from src.runcoach.models import AthleteProfile, DashboardSnapshot, Workout
from src.runcoach.normalize import normalize_workout
from src.runcoach.pace import parse_pace

logger = logging.getLogger(__name__)


def load_snapshot(path: Path) -> DashboardSnapshot:
    """
    Read a dashboard JSON export.

    Args:
        path: Path to the export file

    Returns:
        Validated snapshot

    Raises:
        SystemExit: If the file cannot be read or is not a valid export
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        display_error(f"Cannot read {path}: {e}")
        sys.exit(1)

    try:
        snapshot = DashboardSnapshot.model_validate_json(raw)
    except ValidationError as e:
        display_error(f"Invalid dashboard export {path}: {e.error_count()} error(s)")
        for error in e.errors()[:5]:
            location = ".".join(str(part) for part in error["loc"])
            display_error(f"  {location}: {error['msg']}")
        sys.exit(1)

    logger.debug(f"Loaded {len(snapshot.workouts)} workouts from {path}")
    return snapshot


def resolve_reference(profile: AthleteProfile) -> ThresholdReference:
    """Threshold reference of a profile, falling back to configured defaults."""
    settings = get_settings()
    if not profile.lactate_threshold_hr or not parse_pace(profile.lactate_threshold_pace):
        display_warning(
            "No usable lactate-threshold data in profile; "
            f"using {settings.default_threshold_hr} bpm / {settings.default_threshold_pace} /km"
        )
    try:
        return ThresholdReference.from_profile(
            profile,
            default_hr=settings.default_threshold_hr,
            default_pace=settings.default_threshold_pace,
        )
    except ValueError as e:
        display_error(str(e))
        sys.exit(1)


def prepare_workouts(snapshot: DashboardSnapshot) -> list[Workout]:
    """Normalize and classify every workout of a snapshot, newest first."""
    settings = get_settings()
    reference = resolve_reference(snapshot.profile)
    workouts = [normalize_workout(w) for w in snapshot.workouts]
    classified = classify_workouts(workouts, snapshot.profile, settings.thresholds, reference)
    return newest_first(classified)
