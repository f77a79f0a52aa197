#!/usr/bin/env python3
"""
coach - running coach dashboard CLI

Classify workouts and inspect an athlete's dashboard export from the terminal.

Usage:
    coach classify export.json       # Label every workout
    coach summary export.json        # Dashboard numbers, goals and races
    coach show export.json <id>      # One workout with laps
    coach zones export.json          # Heart-rate zones in bpm
    coach thresholds                 # Active classification thresholds
    coach pace 5:05 1:02:30          # Pace strings to seconds
"""

import typer
from rich.console import Console

from src.cli import __version__
from src.cli.commands import profile, workouts
from src.runcoach.config import configure_logging

# Create the main app
app = typer.Typer(
    name="coach",
    help="Classify and review running workouts from the terminal.",
    no_args_is_help=True,
    add_completion=True,
)

# Console for output
console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"coach version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, is_eager=True, help="Show version"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    coach - classify and review running workouts.

    Labels are recomputed from the athlete profile on every run.
    """
    configure_logging("DEBUG" if verbose else None)


# Register commands directly on the app
app.command(name="classify")(workouts.classify)
app.command(name="summary")(workouts.summary)
app.command(name="show")(workouts.show)
app.command(name="zones")(profile.zones)
app.command(name="thresholds")(profile.thresholds)
app.command(name="pace")(profile.pace)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
