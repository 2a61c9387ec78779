"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, Field


class CutListEntrySchema(BaseModel):
    """One line of the cut list."""

    cabinet: str = Field(..., description="Cabinet name")
    part: str = Field(..., description="Part name")
    quantity: int = Field(..., description="Number of pieces")
    width: float = Field(..., description="Width in inches")
    height: float = Field(..., description="Height in inches")
    thickness: float = Field(..., description="Thickness in inches")
    material: str = Field(..., description="Material key")
    notes: str = Field(default="", description="Shop notes")
    grain_direction: str = Field(..., description="Grain direction")
    edgebanding: str = Field(..., description="Edges to band")
    hardware: str = Field(..., description="Joinery or hardware")
    assembly_sequence: int = Field(..., description="Assembly order within the cabinet")
    size: str = Field(default="", description="Formatted width x height")


class CutListResponse(BaseModel):
    """Response for cut list generation."""

    project: str = Field(..., description="Project name")
    entries: list[CutListEntrySchema] = Field(default_factory=list)
    total_parts: int = Field(..., description="Pieces of sheet material to cut")


class MaterialUsageSchema(BaseModel):
    """Area, sheets and cost of one material."""

    area: float = Field(..., description="Area in square feet")
    sheets: int = Field(..., description="4x8 sheets needed")
    cost: float = Field(..., description="Cost of the sheets")


class PartInstanceSchema(BaseModel):
    """One physical part in a sheet group."""

    name: str
    cabinet: str
    width: float
    height: float
    area: float


class SheetGroupSchema(BaseModel):
    """Parts sharing one material and thickness."""

    material: str
    thickness: float
    parts: list[PartInstanceSchema] = Field(default_factory=list)
    total_area: float = Field(..., description="Total area in square inches")
    sheets_needed: int
    waste_percent: float


class EstimateSchema(BaseModel):
    """Project cost estimate."""

    material_cost: float
    labor_hours: float
    labor_cost: float
    total: float


class MaterialsResponse(BaseModel):
    """Response for material estimation."""

    materials: dict[str, MaterialUsageSchema] = Field(default_factory=dict)
    sheet_optimization: dict[str, SheetGroupSchema] = Field(default_factory=dict)
    estimate: EstimateSchema


class ValidationIssueSchema(BaseModel):
    """A single validation error, warning or suggestion."""

    path: str
    message: str
    suggestion: str | None = None


class ValidationResultSchema(BaseModel):
    """Response for design validation."""

    is_valid: bool = Field(..., description="Whether the design has no errors")
    errors: list[ValidationIssueSchema] = Field(default_factory=list)
    warnings: list[ValidationIssueSchema] = Field(default_factory=list)
    suggestions: list[ValidationIssueSchema] = Field(default_factory=list)


class DoorSuggestionSchema(BaseModel):
    """Door counts for a cabinet width."""

    width: float
    max_doors: int = Field(..., description="Most doors that fit the width")
    suggested_doors: int = Field(..., description="Comfortable door count")
    door_limit: int = Field(..., description="Limit honoring double-door mode")


class DrawerPlacementSchema(BaseModel):
    """A drawer of a suggested layout."""

    height: float
    start_y: float
    size: str = Field(..., description="Formatted height")


class DrawerLayoutSchema(BaseModel):
    """Suggested drawer layout for a cabinet height."""

    height: float
    toekick_height: float
    drawers: list[DrawerPlacementSchema] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Error response body."""

    error: str
    error_type: str
    details: list | dict | None = None
