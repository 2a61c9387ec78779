"""Pydantic schema models for project files.

A project file is the JSON snapshot written by the designer:
``{name, date, cabinets[], materialCosts, laborRate}`` with camelCase keys.
Models accept both the camelCase keys and the Python field names.

The enums are reused from the domain layer so values stay consistent.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from casework.domain.standards import DEFAULT_STANDARDS
from casework.domain.value_objects import (
    ConstructionType,
    FrontStyle,
    HandleSide,
    HingeType,
    PullType,
    SlideType,
)

# Supported versions for project files
# Version 1.0: Initial project snapshot
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class _ProjectModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
        allow_inf_nan=False,
    )


def _coerce_id(v: Any) -> Any:
    """Ids written as numbers (timestamps) are read as strings."""
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return str(int(v)) if float(v).is_integer() else str(v)
    return v


class HardwareConfig(_ProjectModel):
    """Hardware selection of one cabinet."""

    hinges: HingeType = HingeType.CONCEALED_BLUM
    slides: SlideType = SlideType.UNDERMOUNT_BLUM
    pulls: PullType = PullType.BAR


class DrawerConfig(_ProjectModel):
    """A drawer positioned from the bottom of its cabinet.

    Attributes:
        id: Drawer identifier, unique within the project.
        height: Drawer height in inches.
        start_y: Height of the drawer bottom above the cabinet bottom.
    """

    id: str | None = None
    height: float = Field(..., gt=0)
    start_y: float = Field(default=0.0, ge=0)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        return _coerce_id(v)


class PricingConfig(_ProjectModel):
    """Per-cabinet pricing summary carried by older project files."""

    material_cost: float = 0.0
    hardware_cost: float = 0.0
    labor_hours: float = 0.0
    total_cost: float = 0.0


class CabinetConfig(_ProjectModel):
    """One cabinet in a project file.

    Drawer and door rules that depend on the whole cabinet (drawers that
    fit, door limits) are reported by the advisory validators rather than
    rejected here, so a questionable file can still be loaded and checked.
    """

    id: str | None = None
    name: str = "Cabinet"
    cabinet_type: str = Field(default="base", alias="type")
    construction: ConstructionType = ConstructionType.FRAMELESS
    x_position: float = 0.0
    z_position: float = 0.0
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    depth: float = Field(..., gt=0)
    material: str = "plywood"
    thickness: float = Field(default=0.75, gt=0)
    doors: int = Field(default=0, ge=0)
    door_style: FrontStyle = FrontStyle.SHAKER
    double_door: bool = False
    door_drawer_gap: float = Field(default=0.125, ge=0)
    door_overhang: float = Field(default=0.5, ge=0)
    door_handles: dict[int, HandleSide] = Field(default_factory=dict)
    drawers: list[DrawerConfig] = Field(default_factory=list)
    drawer_style: FrontStyle = FrontStyle.SHAKER
    shelves: int = Field(default=1, ge=0)
    back_panel: bool = True
    toekick: bool = True
    toekick_height: float = Field(default=4.0, ge=0)
    toekick_depth: float = Field(default=3.0, ge=0)
    color: str = "#8B7355"
    edgebanding: bool = True
    edgeband_color: str = "#8B7355"
    hardware: HardwareConfig = Field(default_factory=HardwareConfig)
    countertop: bool = False
    countertop_material: str = "Quartz"
    countertop_thickness: float = Field(default=1.25, gt=0)
    crown: bool = False
    crown_height: float = Field(default=3.0, gt=0)
    pricing: PricingConfig | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        return _coerce_id(v)

    @field_validator("drawer_style")
    @classmethod
    def validate_drawer_style(cls, v: FrontStyle) -> FrontStyle:
        """Glass fronts are only made for doors."""
        if v is FrontStyle.GLASS:
            raise ValueError("drawer_style cannot be 'glass'")
        return v

    @model_validator(mode="after")
    def validate_handles(self) -> "CabinetConfig":
        """Door handles may only reference existing doors."""
        bad = sorted(i for i in self.door_handles if not 0 <= i < self.doors)
        if bad:
            raise ValueError(
                f"door_handles references doors {bad} but the cabinet has {self.doors} doors"
            )
        return self


class ProjectConfiguration(_ProjectModel):
    """Root model of a project file.

    Attributes:
        name: Project name.
        date: When the project was saved (ISO 8601), if recorded.
        export_date: When the file was exported, if it was.
        version: File format version.
        app_name: Name of the application that wrote the file.
        cabinets: Cabinets in layout order.
        material_costs: Per-sheet price by material key.
        labor_rate: Hourly labor rate.

    Example:
        >>> config = ProjectConfiguration(
        ...     name="Vanity",
        ...     cabinets=[CabinetConfig(width=30, height=34.5, depth=21)],
        ... )
    """

    name: str = "Untitled Project"
    date: str | None = None
    export_date: str | None = None
    version: str | None = Field(default=None, pattern=r"^\d+\.\d+$")
    app_name: str | None = None
    cabinets: list[CabinetConfig] = Field(default_factory=list)
    material_costs: dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_STANDARDS.default_material_costs)
    )
    labor_rate: float = Field(default=DEFAULT_STANDARDS.default_labor_rate, ge=0)

    @field_validator("version")
    @classmethod
    def validate_supported_version(cls, v: str | None) -> str | None:
        """Accept supported versions and newer minors of a supported major."""
        if v is None or v in SUPPORTED_VERSIONS:
            return v
        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v
        raise ValueError(
            f"Unsupported version: {v}. Supported versions: "
            f"{', '.join(sorted(SUPPORTED_VERSIONS))}"
        )

    @field_validator("material_costs")
    @classmethod
    def validate_material_costs(cls, v: dict[str, float]) -> dict[str, float]:
        negative = sorted(k for k, price in v.items() if price < 0)
        if negative:
            raise ValueError(f"Material costs cannot be negative: {', '.join(negative)}")
        return v

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "ProjectConfiguration":
        """Cabinet ids and drawer ids must each be unique within the project."""
        cabinet_ids = [c.id for c in self.cabinets if c.id is not None]
        if len(cabinet_ids) != len(set(cabinet_ids)):
            raise ValueError("Cabinet ids must be unique")
        drawer_ids = [d.id for c in self.cabinets for d in c.drawers if d.id is not None]
        if len(drawer_ids) != len(set(drawer_ids)):
            raise ValueError("Drawer ids must be unique")
        return self
