"""Typer CLI for cabinet projects."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from casework.application import DesignSession, EditResult
from casework.application.config import ConfigError, load_state, save_project
from casework.cli.commands import display_load_error, validate_command
from casework.domain import (
    DEFAULT_STANDARDS,
    ConstructionType,
    DesignState,
    MeasurementFormat,
    decimal_to_fraction,
    format_measurement,
    parse_fraction,
)
from casework.domain.services import (
    max_doors,
    optimal_drawer_heights,
    suggested_door_count,
)
from casework.infrastructure import (
    CutListFormatter,
    JsonExporter,
    MaterialReportFormatter,
    SheetOptimizationFormatter,
    ShoppingListFormatter,
)

app = typer.Typer(
    name="casework",
    help="Design parametric cabinets and derive cut lists, materials and costs.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Design parametric cabinets and derive cut lists, materials and costs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _open_session(project_file: Path) -> DesignSession:
    """Load a project file into a session, exiting with code 1 on failure."""
    try:
        state = load_state(project_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    return DesignSession(state)


def _dimension(text: str, label: str) -> float:
    value = parse_fraction(text)
    if value <= 0:
        typer.echo(f"Error: {label} must be a positive measurement, got {text!r}", err=True)
        raise typer.Exit(code=1)
    return value


def _check(result: EditResult) -> None:
    """Echo adjustments of an edit, or exit when it was rejected."""
    if not result.accepted:
        typer.echo(f"Error: {result.reason}", err=True)
        raise typer.Exit(code=1)
    for adjustment in result.adjustments:
        typer.echo(f"Note: {adjustment}")


@app.command()
def new(
    output_file: Annotated[
        Path,
        typer.Argument(help="Path of the project file to create"),
    ],
    name: Annotated[str, typer.Option("--name", "-n", help="Project name")] = "Untitled Project",
    width: Annotated[str, typer.Option("--width", "-w", help='Cabinet width, e.g. "24" or "23 1/2"')] = "24",
    height: Annotated[str, typer.Option("--height", "-h", help="Cabinet height in inches")] = "34.5",
    depth: Annotated[str, typer.Option("--depth", "-d", help="Cabinet depth in inches")] = "24",
    construction: Annotated[
        ConstructionType,
        typer.Option("--construction", help="Box construction"),
    ] = ConstructionType.FRAMELESS,
    doors: Annotated[
        int | None,
        typer.Option("--doors", help="Door count (default: suggested for the width)"),
    ] = None,
    smart_drawers: Annotated[
        bool,
        typer.Option("--smart-drawers", help="Fill the cabinet with the optimal drawer layout"),
    ] = False,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing file"),
    ] = False,
) -> None:
    """Create a project file holding one cabinet."""
    if output_file.exists() and not force:
        typer.echo(f"Error: {output_file} already exists (use --force to overwrite)", err=True)
        raise typer.Exit(code=1)

    session = DesignSession(DesignState(project_name=name))
    _check(
        session.add_cabinet(
            width=_dimension(width, "Width"),
            height=_dimension(height, "Height"),
            depth=_dimension(depth, "Depth"),
            construction=construction,
        )
    )
    cabinet_id = session.state.selected_cabinet_id
    if smart_drawers:
        _check(session.apply_smart_drawer_defaults(cabinet_id))
    if doors is None:
        _check(session.apply_smart_door_defaults(cabinet_id))
    else:
        _check(session.update_cabinet(cabinet_id, "doors", doors))

    try:
        save_project(session.state, output_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Created {output_file}")


@app.command()
def cutlist(
    project_file: Annotated[Path, typer.Argument(help="Path to the JSON project file")],
    display: Annotated[
        MeasurementFormat,
        typer.Option("--display", help="Measurement display mode"),
    ] = MeasurementFormat.FRACTION,
) -> None:
    """Display the cut list of a project."""
    session = _open_session(project_file)
    formatter = CutListFormatter(display)
    typer.echo(formatter.format(session.cut_list()))


@app.command()
def materials(
    project_file: Annotated[Path, typer.Argument(help="Path to the JSON project file")],
) -> None:
    """Show the material estimate and project cost."""
    session = _open_session(project_file)
    formatter = MaterialReportFormatter()
    typer.echo(formatter.format(session.materials(), session.estimate()))


@app.command()
def sheets(
    project_file: Annotated[Path, typer.Argument(help="Path to the JSON project file")],
    display: Annotated[
        MeasurementFormat,
        typer.Option("--display", help="Measurement display mode"),
    ] = MeasurementFormat.FRACTION,
    parts: Annotated[
        bool,
        typer.Option("--parts/--no-parts", help="List every part in each group"),
    ] = True,
) -> None:
    """Show sheet requirements grouped by material and thickness."""
    session = _open_session(project_file)
    formatter = SheetOptimizationFormatter(display, show_parts=parts)
    typer.echo(formatter.format(session.sheet_optimization()))


@app.command()
def shopping(
    project_file: Annotated[Path, typer.Argument(help="Path to the JSON project file")],
) -> None:
    """Show the consolidated shopping list of a project."""
    session = _open_session(project_file)
    formatter = ShoppingListFormatter()
    typer.echo(formatter.format(session.shopping_list(), session.state.project_name))


@app.command(name="export-json")
def export_json(
    project_file: Annotated[Path, typer.Argument(help="Path to the JSON project file")],
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to a file instead of stdout"),
    ] = None,
) -> None:
    """Export the cut list, materials, sheets and estimate as JSON."""
    session = _open_session(project_file)
    content = JsonExporter().export(
        session.state.project_name,
        session.cut_list(),
        session.materials(),
        session.sheet_optimization(),
        session.estimate(),
    )
    if output_file is None:
        typer.echo(content)
        return
    output_file.write_text(content + "\n", encoding="utf-8")
    typer.echo(f"Exported to {output_file}")


@app.command()
def convert(
    value: Annotated[str, typer.Argument(help='Measurement such as "3/4", "1 1/2" or 2.375')],
) -> None:
    """Convert a measurement between fractional and decimal inches."""
    decimal = parse_fraction(value)
    typer.echo(f"Decimal:  {decimal:.3f}")
    typer.echo(f"Fraction: {decimal_to_fraction(decimal)}")


@app.command()
def suggest(
    width: Annotated[str, typer.Option("--width", "-w", help="Cabinet width in inches")],
    height: Annotated[
        str | None,
        typer.Option("--height", "-h", help="Cabinet height, to suggest a drawer layout"),
    ] = None,
    toekick: Annotated[
        str,
        typer.Option("--toekick", help="Toekick height in inches"),
    ] = "4",
) -> None:
    """Suggest door counts and a drawer layout for a cabinet size."""
    cabinet_width = _dimension(width, "Width")
    typer.echo(f"Width: {format_measurement(cabinet_width)}")
    typer.echo(f"  Maximum doors:   {max_doors(cabinet_width)}")
    typer.echo(f"  Suggested doors: {suggested_door_count(cabinet_width)}")

    if height is None:
        return
    cabinet_height = _dimension(height, "Height")
    heights = optimal_drawer_heights(cabinet_height, parse_fraction(toekick))
    min_height = DEFAULT_STANDARDS.smart_defaults.min_drawer_height
    if any(h < min_height for h in heights):
        typer.echo(
            f"Error: too short for a drawer layout; drawers must be at least {min_height:g} inches",
            err=True,
        )
        raise typer.Exit(code=1)
    typer.echo(f"Height: {format_measurement(cabinet_height)}")
    typer.echo("  Drawer layout (top-down):")
    for i, drawer_height in enumerate(heights, start=1):
        typer.echo(f"    Drawer {i}: {format_measurement(drawer_height)}")


if __name__ == "__main__":
    app()
