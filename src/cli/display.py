"""Display utilities for the coach CLI with Rich formatting."""

from collections.abc import Sequence
from datetime import date

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.runcoach.classifier import ClassificationThresholds, ThresholdReference
from src.runcoach.dashboard import DashboardSummary
from src.runcoach.models import Race, TrainingGoal, Workout, WorkoutType, ZoneRange
from src.runcoach.pace import format_pace

console = Console()

WORKOUT_TYPE_STYLES = {
    WorkoutType.LONG_RUN: "bold orange1",
    WorkoutType.INTERVAL: "bold red",
    WorkoutType.TEMPO_RUN: "bold magenta",
    WorkoutType.RECOVERY: "bold blue",
    WorkoutType.FARTLEK: "bold yellow",
    WorkoutType.ACTIVITY: "dim",
}


def styled_type(workout_type: WorkoutType) -> str:
    """Workout label wrapped in its Rich style."""
    style = WORKOUT_TYPE_STYLES.get(workout_type, "bold green")
    return f"[{style}]{workout_type.value}[/{style}]"


def format_date(value: date | None) -> str:
    """Format a date as DD/MM/YYYY."""
    return value.strftime("%d/%m/%Y") if value else "-"


def display_workouts(workouts: Sequence[Workout], title: str = "Workouts") -> None:
    """Display workouts with their labels in a table."""
    table = Table(title=f"{title} ({len(workouts)})", show_header=True, border_style="cyan")
    table.add_column("Date", style="cyan")
    table.add_column("Type")
    table.add_column("Distance", justify="right", style="green")
    table.add_column("Time", justify="right")
    table.add_column("Pace", justify="right", style="yellow")
    table.add_column("HR", justify="right", style="red")
    table.add_column("Laps", justify="right", style="dim")

    for workout in workouts:
        table.add_row(
            format_date(workout.workout_date),
            styled_type(workout.workout_type),
            f"{workout.distance_km:.2f} km",
            workout.duration,
            workout.average_pace,
            str(workout.average_heart_rate) if workout.average_heart_rate else "-",
            str(len(workout.laps)),
        )

    console.print(table)


def display_workout_detail(workout: Workout, history: Sequence[Workout]) -> None:
    """Display one workout with its laps and the recent history around it."""
    lines = [
        f"[bold]{workout.title}[/bold]  {styled_type(workout.workout_type)}",
        f"Date: {format_date(workout.workout_date)}",
        f"Distance: {workout.distance_km:.2f} km | Time: {workout.duration} "
        f"| Pace: {workout.average_pace} /km",
        f"HR: {workout.average_heart_rate or '--'} bpm | Max: {workout.max_heart_rate or '--'} "
        f"| Load: {workout.training_load:g}",
    ]
    if workout.biomechanics:
        bio = workout.biomechanics
        lines.append(
            f"Cadence: {bio.cadence:g} spm | Oscillation: {bio.vertical_oscillation:g} cm "
            f"| GCT: {bio.ground_contact_time} ms | Stride: {bio.stride_length:g} m"
        )
    console.print(
        Panel("\n".join(lines), title="[bold cyan]Workout[/bold cyan]", border_style="cyan")
    )

    if workout.laps:
        table = Table(title="Laps", show_header=True, border_style="dim")
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Step")
        table.add_column("Distance", justify="right", style="green")
        table.add_column("Time", justify="right")
        table.add_column("Pace", justify="right", style="yellow")
        table.add_column("HR", justify="right", style="red")
        for lap in workout.laps:
            table.add_row(
                str(lap.lap_number),
                lap.step_type or "",
                f"{lap.distance_km:.2f} km",
                lap.duration,
                lap.average_pace,
                str(round(lap.average_heart_rate)) if lap.average_heart_rate else "-",
            )
        console.print(table)

    if history:
        console.print("[bold]Recent history[/bold]")
        for previous in history:
            console.print(
                f"  {format_date(previous.workout_date)}: {styled_type(previous.workout_type)}, "
                f"{previous.distance_km:.2f} km at {previous.average_pace}"
            )


def display_summary(summary: DashboardSummary) -> None:
    """Display dashboard headline numbers."""
    table = Table(title="Dashboard", show_header=True, border_style="cyan")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Workouts", f"{summary.workout_count:,}")
    table.add_row("Total Volume", f"{summary.total_km:,.1f} km")
    table.add_row("Pace (latest)", f"{summary.latest_pace} /km")
    table.add_row("Load (latest)", f"{summary.latest_training_load:g}")
    for workout_type, count in sorted(summary.type_counts.items(), key=lambda item: -item[1]):
        table.add_row(styled_type(workout_type), str(count))

    console.print(table)


def display_goals(goals: Sequence[TrainingGoal]) -> None:
    """Display training goals with progress."""
    if not goals:
        return
    table = Table(title="Goals", show_header=True, border_style="dim")
    table.add_column("Goal", style="cyan")
    table.add_column("Target")
    table.add_column("Date", style="yellow")
    table.add_column("Progress", justify="right", style="green")
    for goal in goals:
        table.add_row(
            goal.title,
            goal.target_value,
            format_date(goal.target_date),
            f"{goal.progress:.0f}%",
        )
    console.print(table)


def display_races(races: Sequence[Race]) -> None:
    """Display upcoming races."""
    if not races:
        return
    table = Table(title="Upcoming Races", show_header=True, border_style="dim")
    table.add_column("Date", style="yellow")
    table.add_column("Race", style="cyan")
    table.add_column("Distance", justify="right")
    table.add_column("Location")
    table.add_column("Status", style="green")
    for race in races:
        table.add_row(
            format_date(race.race_date),
            race.name,
            race.distance,
            race.location,
            race.status.value,
        )
    console.print(table)


def display_zones(zones: Sequence[ZoneRange], threshold_hr: int) -> None:
    """Display heart-rate zones in bpm."""
    console.print(f"[bold]Threshold HR:[/bold] {threshold_hr} bpm")
    table = Table(title="Heart Rate Zones", show_header=True, border_style="cyan")
    table.add_column("Zone", style="cyan")
    table.add_column("From", justify="right", style="green")
    table.add_column("To", justify="right", style="green")
    for zone in reversed(zones):
        table.add_row(
            zone.label,
            str(zone.low_bpm),
            str(zone.high_bpm) if zone.high_bpm is not None else "max",
        )
    console.print(table)


def display_thresholds(thresholds: ClassificationThresholds, reference: ThresholdReference) -> None:
    """Display the active classification constants."""
    table = Table(title="Classification Thresholds", show_header=True, border_style="cyan")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Threshold HR", f"{reference.heart_rate} bpm")
    table.add_row("Threshold pace", f"{format_pace(reference.pace_seconds)} /km")
    for name, value in thresholds.model_dump().items():
        if isinstance(value, (list, tuple)):
            value = ", ".join(value)
        table.add_row(name, str(value))

    console.print(table)


def display_error(message: str) -> None:
    """Display error message."""
    console.print(f"[red]✗[/red] {message}")


def display_warning(message: str) -> None:
    """Display warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def display_info(message: str) -> None:
    """Display info message."""
    console.print(f"[dim]ℹ[/dim] {message}")
