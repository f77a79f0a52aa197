"""Profile and reference commands for the coach CLI."""

import json
from pathlib import Path

import typer
from rich.markup import escape

from src.cli import display, loader
from src.runcoach.config import get_settings
from src.runcoach.models import AthleteProfile
from src.runcoach.pace import parse_pace


def zones(
    snapshot: Path = typer.Argument(..., help="Dashboard JSON export", dir_okay=False),
) -> None:
    """Show heart-rate zones in bpm for the athlete profile."""
    profile = loader.load_snapshot(snapshot).profile
    reference = loader.resolve_reference(profile)
    display.display_zones(profile.hr_zones.bpm_ranges(reference.heart_rate), reference.heart_rate)


def thresholds(
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show the active classification thresholds and default reference."""
    settings = get_settings()
    reference = loader.resolve_reference(
        AthleteProfile(
            lactateThresholdHR=settings.default_threshold_hr,
            lactateThresholdPace=settings.default_threshold_pace,
        )
    )

    if json_output:
        data = {
            "threshold_hr": reference.heart_rate,
            "threshold_pace_seconds": reference.pace_seconds,
            **settings.thresholds.model_dump(mode="json"),
        }
        print(json.dumps(data, indent=2))
    else:
        display.display_thresholds(settings.thresholds, reference)


def pace(
    values: list[str] = typer.Argument(..., help="Paces such as 5:05 or 1:02:30"),
) -> None:
    """Convert pace strings to seconds."""
    for value in values:
        seconds = parse_pace(value)
        shown = f"{seconds} s" if seconds is not None else "[dim]unknown[/dim]"
        display.console.print(f"[cyan]{escape(value) or '(empty)'}[/cyan] → {shown}")
