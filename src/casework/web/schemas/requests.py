"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from casework.domain import MeasurementFormat


class ProjectRequest(BaseModel):
    """Request carrying a project snapshot."""

    project: dict[str, Any] = Field(..., description="Project file JSON")
    cabinet_id: str | None = Field(
        default=None, description="Restrict the result to one cabinet"
    )


class CutListRequest(ProjectRequest):
    """Request for a cut list."""

    display: MeasurementFormat = Field(
        default=MeasurementFormat.FRACTION, description="Measurement display mode"
    )
