"""Validate command for checking project files.

This module provides the `validate` command that loads a JSON project file
and runs the advisory checks on every cabinet in it.
"""

from pathlib import Path
from typing import Annotated

import typer

from casework.application.config import (
    ConfigError,
    ValidationResult,
    config_to_state,
    load_project,
    validate_design,
)


def validate_command(
    project_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file to validate"),
    ],
) -> None:
    """Validate a cabinet project file.

    Checks the project file for:
    - JSON syntax errors
    - Schema errors (missing or invalid fields)
    - Design advisories (dimensions, drawer layout, door space)

    Exit codes:
        0 - Project is valid with no warnings
        1 - Project has errors
        2 - Project is valid but has warnings

    Example:
        casework validate kitchen.json
    """
    typer.echo(f"Validating {project_file}...")
    typer.echo()

    try:
        config = load_project(project_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_design(config_to_state(config))
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def display_load_error(error: ConfigError) -> None:
    """Display a project loading error on stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation" and error.details:
        for detail in error.details:
            path = detail.get("path") or "<root>"
            typer.echo(f"  {path}: {detail.get('message', 'Unknown error')}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.suggestions:
        typer.echo("Suggestions:")
        for suggestion in result.suggestions:
            typer.echo(f"  {suggestion.path}: {suggestion.message}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Project is valid.")
