"""CLI commands for RehabROM."""

import math
from typing import Optional

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from rehab_rom import __version__
from rehab_rom.config import get_settings
from rehab_rom.models.rom import Severity, ValidationResult

app = typer.Typer(
    name="rehab-rom",
    help="Anatomical ROM constraints and postoperative phase engine",
    add_completion=False,
)
console = Console()

_SEVERITY_COLORS = {
    Severity.MILD: "yellow",
    Severity.MODERATE: "dark_orange",
    Severity.SEVERE: "red",
}


def _display_result(title: str, result: ValidationResult) -> None:
    """Display a validation verdict in rich format."""
    if result.valid and result.severity is None:
        console.print(Panel("[green]Within normal range[/green]", title=title, border_style="green"))
        return

    color = _SEVERITY_COLORS.get(result.severity, "green")
    body = f"[bold]Valid:[/bold] {result.valid}\n"
    if result.severity:
        body += f"[bold]Severity:[/bold] {result.severity.value}\n"
    if result.warning:
        body += f"[bold]Warning:[/bold] {result.warning}\n"
    if result.corrected_angle is not None:
        body += f"[bold]Corrected angle:[/bold] {result.corrected_angle:g}°\n"
    if result.recommendation:
        body += f"[bold]Recommendation:[/bold] {result.recommendation}"
    console.print(Panel(body.rstrip(), title=title, border_style=color))


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        console.print(f"[red]{name} must be a finite number, got: {value}[/red]")
        raise typer.Exit(1)


def _parse_rom_pairs(pairs: list[str]) -> dict[str, float]:
    """Parse ``movement=degrees`` pairs from the command line."""
    rom: dict[str, float] = {}
    for pair in pairs:
        movement, sep, value = pair.partition("=")
        if not sep:
            console.print(f"[red]Expected movement=degrees, got: {pair}[/red]")
            raise typer.Exit(1)
        try:
            rom[movement.strip()] = float(value)
        except ValueError:
            console.print(f"[red]Invalid angle for {movement}: {value}[/red]")
            raise typer.Exit(1)
        _require_finite(movement, rom[movement.strip()])
    return rom


@app.command()
def limits(
    age: Optional[int] = typer.Option(None, "--age", "-a", help="Show age-adjusted limits"),
):
    """List anatomical ROM limits."""
    from rehab_rom.constraints import ANATOMICAL_ROM_LIMITS, get_age_adjusted_rom

    title = "Anatomical ROM Limits" if age is None else f"Anatomical ROM Limits (age {age})"
    table = Table(title=title)
    table.add_column("Movement")
    table.add_column("Warning", justify="right")
    table.add_column("Max", justify="right")
    table.add_column("Hypermobility", justify="right")
    table.add_column("Description")

    for movement, limit in ANATOMICAL_ROM_LIMITS.items():
        if age is not None:
            limit = get_age_adjusted_rom(movement, age)
        table.add_row(
            movement.value,
            f"{limit.warning}°",
            f"{limit.max}°",
            f"{limit.hypermobility}°",
            limit.description,
        )
    console.print(table)


@app.command()
def validate(
    movement: str = typer.Argument(..., help="Joint movement, e.g. kneeFlexion"),
    angle: float = typer.Argument(..., help="Measured angle in degrees"),
    age: Optional[int] = typer.Option(None, "--age", "-a", help="Patient age"),
    output_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Validate a joint angle against anatomical limits."""
    from rehab_rom.constraints import validate_joint_angle

    _require_finite("Angle", angle)
    result = validate_joint_angle(movement, angle, age=age)

    if output_json:
        console.print(result.model_dump_json(indent=2), soft_wrap=True)
    else:
        _display_result(f"{movement} {angle:g}°", result)

    if not result.valid:
        raise typer.Exit(1)


@app.command()
def functional(
    activity: str = typer.Argument(..., help="Activity, e.g. walking or tieShoes"),
    rom: list[str] = typer.Option(
        [], "--rom", "-r", help="Current ROM as movement=degrees, repeatable"
    ),
):
    """Check whether current ROM is sufficient for an everyday activity."""
    from rehab_rom.constraints import check_functional_rom, list_activities

    if activity not in list_activities():
        console.print(
            f"[yellow]No requirements known for {activity}. "
            f"Known activities: {', '.join(list_activities())}[/yellow]"
        )

    result = check_functional_rom(activity, _parse_rom_pairs(rom))

    if result.sufficient:
        console.print(f"[green]ROM sufficient for {activity}[/green]")
        return

    table = Table(title=f"ROM deficits for {activity}")
    table.add_column("Deficit")
    for deficit in result.deficits:
        table.add_row(deficit)
    console.print(table)


@app.command()
def phase(
    surgery: str = typer.Argument(..., help="Surgery type, e.g. acl_reconstruction"),
    weeks: float = typer.Argument(..., help="Weeks since surgery"),
    output_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show the active postoperative phase."""
    from rehab_rom.postop import get_post_op_phase, list_surgery_types

    _require_finite("Weeks", weeks)
    active = get_post_op_phase(surgery, weeks)
    if active is None:
        known = ", ".join(s.value for s in list_surgery_types())
        console.print(f"[red]Unknown surgery type: {surgery}. Use one of: {known}[/red]")
        raise typer.Exit(1)

    if output_json:
        console.print(active.model_dump_json(indent=2), soft_wrap=True)
        return

    console.print(
        Panel(
            f"[bold]Phase:[/bold] {active.phase} - {active.name}\n"
            f"[bold]Weeks:[/bold] {active.week_range.min}-{active.week_range.max}",
            title=f"{surgery}, week {weeks:g}",
        )
    )

    if active.rom_limits:
        table = Table(title="ROM Ceilings")
        table.add_column("Movement")
        table.add_column("Max", justify="right")
        table.add_column("Weight bearing")
        table.add_column("Resistance")
        for movement, limit in active.rom_limits.items():
            table.add_row(
                movement.value,
                f"{limit.max}°",
                "yes" if limit.weight_bearing else "no",
                "yes" if limit.resistance_allowed else "no",
            )
        console.print(table)


@app.command("postop-validate")
def postop_validate(
    surgery: str = typer.Argument(..., help="Surgery type, e.g. acl_reconstruction"),
    weeks: float = typer.Argument(..., help="Weeks since surgery"),
    movement: str = typer.Argument(..., help="Joint movement, e.g. kneeFlexion"),
    angle: float = typer.Argument(..., help="Measured angle in degrees"),
    output_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Validate a joint angle against the active postoperative phase."""
    from rehab_rom.postop import validate_post_op_rom

    _require_finite("Weeks", weeks)
    _require_finite("Angle", angle)
    result = validate_post_op_rom(surgery, weeks, movement, angle)

    if output_json:
        console.print(result.model_dump_json(indent=2), soft_wrap=True)
    else:
        _display_result(f"{surgery} week {weeks:g}: {movement} {angle:g}°", result)

    if not result.valid:
        raise typer.Exit(1)


@app.command()
def guide(
    surgery: str = typer.Argument(..., help="Surgery type, e.g. acl_reconstruction"),
    weeks: float = typer.Argument(..., help="Weeks since surgery"),
    raw: bool = typer.Option(False, "--raw", help="Print markdown source"),
):
    """Print the exercise guide for the active postoperative phase."""
    from rehab_rom.postop import generate_post_op_exercise_guide

    _require_finite("Weeks", weeks)
    text = generate_post_op_exercise_guide(surgery, weeks)
    if raw:
        console.print(text, markup=False, highlight=False)
    else:
        console.print(Markdown(text))


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Host to bind"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to bind"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
):
    """Start the REST API server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    console.print(f"Starting RehabROM API server on {host}:{port}")
    uvicorn.run(
        "rehab_rom.api.app:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


@app.command()
def version():
    """Show version information."""
    console.print(f"RehabROM v{__version__}")
