"""Domain entities for cabinet design.

Entities are frozen: an edit never changes a cabinet in place, it produces
the next revision with ``dataclasses.replace``. A ``DesignState`` is
therefore safe to hand to the renderer or to keep in the undo history.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

from .standards import DEFAULT_STANDARDS
from .value_objects import (
    ConstructionType,
    FrontStyle,
    HandleSide,
    HardwareSelection,
)

__all__ = [
    "Cabinet",
    "DesignState",
    "Door",
    "Drawer",
    "new_id",
]


def new_id() -> str:
    """Generate a fresh entity id."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Drawer:
    """A drawer owned by exactly one cabinet.

    Attributes:
        id: Identifier, unique within the design.
        height: Drawer (front opening) height in inches.
        start_y: Height of the drawer bottom above the cabinet bottom.
    """

    id: str
    height: float
    start_y: float

    def __post_init__(self) -> None:
        if self.height <= 0:
            raise ValueError("Drawer height must be positive")
        if self.start_y < 0:
            raise ValueError("Drawer start_y cannot be negative")

    @property
    def top(self) -> float:
        """Height of the drawer top above the cabinet bottom."""
        return self.start_y + self.height


@dataclass(frozen=True)
class Door:
    """A logical door derived from a cabinet's door count."""

    index: int
    width: float
    height: float
    handle_side: HandleSide = HandleSide.LEFT


@dataclass(frozen=True)
class Cabinet:
    """A parametric cabinet.

    Attributes:
        id: Stable identifier.
        name: Display name.
        width: Overall width in inches.
        height: Overall height in inches, toekick included.
        depth: Overall depth in inches.
        thickness: Wall material thickness.
        construction: Frameless or face-frame box.
        material: Symbolic sheet material key used for costing.
        cabinet_type: Cabinet family (base, wall, tall).
        x_position: Horizontal layout offset (renderer only).
        z_position: Depth-axis layout offset (renderer only).
        doors: Number of doors sharing the opening above the drawers.
        door_style: Door front style.
        double_door: Allow up to two doors regardless of width.
        door_drawer_gap: Reveal between fronts.
        door_overhang: How far fronts extend past the box edge.
        door_handles: Sparse door index to handle side mapping.
        drawers: Drawers in stored order.
        drawer_style: Drawer front style (never glass).
        shelves: Adjustable shelf count.
        back_panel: Whether a back panel is cut.
        toekick: Whether the cabinet has a recessed base.
        toekick_height: Height of the toekick.
        toekick_depth: Setback of the toekick.
        countertop: Whether a countertop is fitted.
        countertop_material: Countertop material name.
        countertop_thickness: Countertop thickness.
        crown: Whether crown molding is fitted.
        crown_height: Crown molding height.
        edgebanding: Whether exposed edges are banded.
        color: Display color of the box.
        edgeband_color: Display color of the edgebanding.
        hardware: Selected hinges, slides and pulls.
    """

    id: str = field(default_factory=new_id)
    name: str = "Cabinet"
    width: float = 24.0
    height: float = 34.5
    depth: float = 24.0
    thickness: float = 0.75
    construction: ConstructionType = ConstructionType.FRAMELESS
    material: str = "plywood"
    cabinet_type: str = "base"
    x_position: float = 0.0
    z_position: float = 0.0
    doors: int = 0
    door_style: FrontStyle = FrontStyle.SHAKER
    double_door: bool = False
    door_drawer_gap: float = 0.125
    door_overhang: float = 0.5
    door_handles: Mapping[int, HandleSide] = field(
        default_factory=lambda: MappingProxyType({})
    )
    drawers: tuple[Drawer, ...] = ()
    drawer_style: FrontStyle = FrontStyle.SHAKER
    shelves: int = 1
    back_panel: bool = True
    toekick: bool = True
    toekick_height: float = 4.0
    toekick_depth: float = 3.0
    countertop: bool = False
    countertop_material: str = "Quartz"
    countertop_thickness: float = 1.25
    crown: bool = False
    crown_height: float = 3.0
    edgebanding: bool = True
    color: str = "#8B7355"
    edgeband_color: str = "#8B7355"
    hardware: HardwareSelection = field(default_factory=HardwareSelection)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("All dimensions must be positive")
        if self.thickness <= 0:
            raise ValueError("Material thickness must be positive")
        if self.doors < 0:
            raise ValueError("Door count cannot be negative")
        if self.shelves < 0:
            raise ValueError("Shelf count cannot be negative")
        if self.toekick_height < 0 or self.toekick_depth < 0:
            raise ValueError("Toekick dimensions cannot be negative")
        # Normalize mutable inputs so revisions never share containers.
        if not isinstance(self.drawers, tuple):
            object.__setattr__(self, "drawers", tuple(self.drawers))
        if not isinstance(self.door_handles, MappingProxyType):
            handles = {int(k): HandleSide(v) for k, v in dict(self.door_handles).items()}
            object.__setattr__(self, "door_handles", MappingProxyType(handles))

    @property
    def has_drawers(self) -> bool:
        return len(self.drawers) > 0

    def drawer(self, drawer_id: str) -> Drawer | None:
        """Find an owned drawer by id."""
        return next((d for d in self.drawers if d.id == drawer_id), None)

    def with_changes(self, **changes: Any) -> "Cabinet":
        """Return the next revision of this cabinet."""
        return replace(self, **changes)

    def __deepcopy__(self, memo: dict[int, Any]) -> "Cabinet":
        # Every field is immutable; the mapping proxy itself cannot be pickled.
        return self


@dataclass(frozen=True)
class DesignState:
    """Everything a design revision consists of.

    This is the snapshot the history keeps and the read-only view handed to
    the renderer.

    Attributes:
        cabinets: Cabinets in layout order.
        project_name: Project display name.
        material_costs: Per-sheet price by material key.
        labor_rate: Hourly labor rate.
        selected_cabinet_id: Cabinet selected in the UI, if any.
        selected_drawer_id: Drawer selected in the UI, if any.
        selected_door_index: Door selected in the UI, if any.
        hidden_doors: Keys ``"<cabinet id>-<door index>"`` hidden by the renderer.
        hidden_drawers: Drawer ids hidden by the renderer.
    """

    cabinets: tuple[Cabinet, ...] = ()
    project_name: str = "Untitled Project"
    material_costs: Mapping[str, float] = field(
        default_factory=lambda: DEFAULT_STANDARDS.default_material_costs
    )
    labor_rate: float = DEFAULT_STANDARDS.default_labor_rate
    selected_cabinet_id: str | None = None
    selected_drawer_id: str | None = None
    selected_door_index: int | None = None
    hidden_doors: frozenset[str] = frozenset()
    hidden_drawers: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if not isinstance(self.cabinets, tuple):
            object.__setattr__(self, "cabinets", tuple(self.cabinets))
        if not isinstance(self.material_costs, MappingProxyType):
            object.__setattr__(
                self, "material_costs", MappingProxyType(dict(self.material_costs))
            )
        if not isinstance(self.hidden_doors, frozenset):
            object.__setattr__(self, "hidden_doors", frozenset(self.hidden_doors))
        if not isinstance(self.hidden_drawers, frozenset):
            object.__setattr__(self, "hidden_drawers", frozenset(self.hidden_drawers))
        if self.labor_rate < 0:
            raise ValueError("Labor rate cannot be negative")

    def cabinet(self, cabinet_id: str) -> Cabinet | None:
        """Find a cabinet by id."""
        return next((c for c in self.cabinets if c.id == cabinet_id), None)

    def replace_cabinet(self, cabinet: Cabinet) -> "DesignState":
        """Return a state with the cabinet of the same id swapped in."""
        return replace(
            self,
            cabinets=tuple(cabinet if c.id == cabinet.id else c for c in self.cabinets),
        )

    def with_changes(self, **changes: Any) -> "DesignState":
        return replace(self, **changes)

    def __deepcopy__(self, memo: dict[int, Any]) -> "DesignState":
        return self
