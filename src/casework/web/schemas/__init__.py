"""Pydantic schemas for the REST API."""

from casework.web.schemas.requests import CutListRequest, ProjectRequest
from casework.web.schemas.responses import (
    CutListEntrySchema,
    CutListResponse,
    DoorSuggestionSchema,
    DrawerLayoutSchema,
    DrawerPlacementSchema,
    ErrorResponseSchema,
    EstimateSchema,
    MaterialsResponse,
    MaterialUsageSchema,
    PartInstanceSchema,
    SheetGroupSchema,
    ValidationIssueSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "CutListRequest",
    "ProjectRequest",
    # Responses
    "CutListEntrySchema",
    "CutListResponse",
    "DoorSuggestionSchema",
    "DrawerLayoutSchema",
    "DrawerPlacementSchema",
    "ErrorResponseSchema",
    "EstimateSchema",
    "MaterialsResponse",
    "MaterialUsageSchema",
    "PartInstanceSchema",
    "SheetGroupSchema",
    "ValidationIssueSchema",
    "ValidationResultSchema",
]
