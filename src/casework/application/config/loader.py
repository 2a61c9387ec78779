"""Project file loading and saving with comprehensive error handling.

This module reads and writes JSON project files. It handles file system
errors, JSON parsing errors, and Pydantic validation errors with clear,
actionable error messages.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from casework.application.config.adapter import config_to_state, state_to_config
from casework.application.config.schema import ProjectConfiguration
from casework.domain import DesignState

logger = logging.getLogger(__name__)

FILE_FORMAT_VERSION = "1.0"
APP_NAME = "casework"


class ConfigError(Exception):
    """A project file could not be read, parsed, validated or written.

    Attributes:
        message: Summary suitable for showing to the user.
        error_type: One of file_not_found, permission_denied,
            file_read_error, file_write_error, json_parse or validation.
        path: The project file involved, when there is one.
        details: Line and column of a JSON syntax error, or one entry per
            failed field with its JSON path.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location the way it appears in the file.

    Examples:
        >>> _format_json_path(("cabinets", 0, "width"))
        'cabinets[0].width'
        >>> _format_json_path(("cabinets", 1, "drawers", 0, "startY"))
        'cabinets[1].drawers[0].startY'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Extract path, message, value and error type from a Pydantic error."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Project validation failed:"]
    for detail in details:
        path = detail["path"] or "<root>"
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {detail['message']}")
    return "\n".join(lines)


def load_project_from_dict(
    data: dict[str, Any], path: Path | None = None
) -> ProjectConfiguration:
    """Validate project data from a dictionary.

    This is useful for data coming from sources other than files, such as
    API requests.

    Raises:
        ConfigError: If the data fails validation.
    """
    if not isinstance(data, dict):
        raise ConfigError(
            message="Project data must be a JSON object",
            error_type="validation",
            path=path,
        )
    try:
        return ProjectConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_project(path: Path) -> ProjectConfiguration:
    """Load and validate a project file.

    Args:
        path: Path to the JSON project file

    Returns:
        A validated ProjectConfiguration instance

    Raises:
        ConfigError: If the file cannot be read or validated. The
            ``error_type`` attribute indicates the category.

    Example:
        >>> from pathlib import Path
        >>> try:
        ...     config = load_project(Path("kitchen.json"))
        ... except ConfigError as e:
        ...     print(f"Error: {e}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Project file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading project file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading project file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in project file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    config = load_project_from_dict(data, path=path)
    logger.info(f"Loaded project '{config.name}' with {len(config.cabinets)} cabinets from {path}")
    return config


def load_state(path: Path) -> DesignState:
    """Load a project file straight into a design state."""
    return config_to_state(load_project(path))


def project_to_dict(state: DesignState, saved_at: datetime | None = None) -> dict[str, Any]:
    """Serialize a design state into the project file shape."""
    config = state_to_config(state)
    config.date = (saved_at or datetime.now(timezone.utc)).isoformat()
    config.version = FILE_FORMAT_VERSION
    config.app_name = APP_NAME
    return config.model_dump(mode="json", by_alias=True, exclude_none=True)


def save_project(state: DesignState, path: Path) -> Path:
    """Write a design state to a JSON project file.

    Raises:
        ConfigError: If the file cannot be written.
    """
    data = project_to_dict(state)
    try:
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied writing project file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error writing project file: {path}: {e}",
            error_type="file_write_error",
            path=path,
        )
    logger.info(f"Saved project '{state.project_name}' to {path}")
    return path
