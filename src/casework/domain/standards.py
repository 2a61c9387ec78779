"""Shop construction standards.

Every dimension and catalog value the derivation engine, cut-list generator
and shopping list rely on lives here as an immutable configuration object.
Services take a ``ConstructionStandards`` explicitly and fall back to
``DEFAULT_STANDARDS``; nothing reads these values as module state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .value_objects import FrontStyle, HingeType, PullType, SlideType

__all__ = [
    "ConstructionStandards",
    "DEFAULT_STANDARDS",
    "DrawerBoxSpec",
    "FaceFrameSpec",
    "FrontStyleSpec",
    "HardwarePricing",
    "SheetSpec",
    "SmartDefaults",
]


@dataclass(frozen=True)
class FrontStyleSpec:
    """Frame dimensions for one door/drawer front style.

    Attributes:
        rail_width: Width of the horizontal frame members (0 for slab styles).
        stile_width: Width of the vertical frame members (0 for slab styles).
        panel_thickness: Thickness of the center panel held in the frame groove.
        panel_setback: How far the panel sits back in the groove.
        center_raise: Raise of the center field on raised-panel fronts.
        glass_thickness: Thickness of the glass insert on glass fronts.
    """

    rail_width: float = 0.0
    stile_width: float = 0.0
    panel_thickness: float = 0.0
    panel_setback: float = 0.0
    center_raise: float = 0.0
    glass_thickness: float = 0.0


def _default_front_styles() -> Mapping[FrontStyle, FrontStyleSpec]:
    return MappingProxyType(
        {
            FrontStyle.SHAKER: FrontStyleSpec(
                rail_width=2.5,
                stile_width=2.5,
                panel_thickness=0.25,
                panel_setback=0.375,
            ),
            FrontStyle.FLAT: FrontStyleSpec(),
            FrontStyle.RAISED: FrontStyleSpec(
                rail_width=2.5, stile_width=2.5, center_raise=0.25
            ),
            FrontStyle.GLASS: FrontStyleSpec(
                rail_width=2.0, stile_width=2.0, glass_thickness=0.125
            ),
        }
    )


@dataclass(frozen=True)
class DrawerBoxSpec:
    """Drawer box construction.

    Attributes:
        side_thickness: Thickness of box sides, front and back.
        bottom_thickness: Thickness of the box bottom.
        front_back_height: Maximum box height.
        material: Sheet material every box part is cut from.
        opening_inset: Amount the front opening is narrower than the cabinet.
        front_height_reduction: Amount a front is shorter than its drawer.
        depth_clearance: Amount the box is shallower than the cabinet.
        height_clearance: Minimum gap between box top and drawer height.
    """

    side_thickness: float = 0.5
    bottom_thickness: float = 0.25
    front_back_height: float = 4.0
    material: str = "plywood"
    opening_inset: float = 2.0
    front_height_reduction: float = 0.5
    depth_clearance: float = 2.0
    height_clearance: float = 1.0


@dataclass(frozen=True)
class FaceFrameSpec:
    """Face frame member dimensions."""

    frame_width: float = 1.5
    frame_thickness: float = 0.75


@dataclass(frozen=True)
class SmartDefaults:
    """Constants driving door counts and drawer layouts.

    Attributes:
        drawer_reveal: Gap between stacked drawer fronts.
        small_drawer: Height of the utensil drawer.
        medium_drawer: Height of a standard drawer.
        min_door_width: Narrowest usable door.
        door_spacing: Space consumed between doors when counting the maximum.
        optimal_max_door_width: Widest door before splitting is suggested.
        min_drawer_height: Smallest allowed drawer.
        door_clearance: Clearance subtracted from the door opening height.
        door_width_clearance: Clearance subtracted from each door's share of width.
        new_drawer_height: Height of a drawer added on top of the stack.
        double_door_limit: Door limit when double-door mode is enabled.
    """

    drawer_reveal: float = 0.125
    small_drawer: float = 4.0
    medium_drawer: float = 6.0
    min_door_width: float = 8.0
    door_spacing: float = 1.0
    optimal_max_door_width: float = 24.0
    min_drawer_height: float = 2.0
    door_clearance: float = 1.0
    door_width_clearance: float = 1.0
    new_drawer_height: float = 6.0
    double_door_limit: int = 2


@dataclass(frozen=True)
class SheetSpec:
    """Sheet goods used by both material aggregations.

    Attributes:
        nominal_area_sqft: Area used by the cost aggregation (a 4x8 sheet).
        width: Sheet width in inches for the cut-planning aggregation.
        height: Sheet height in inches for the cut-planning aggregation.
        waste_factor: Kerf and trim allowance applied by the cut-planning view.
    """

    nominal_area_sqft: float = 32.0
    width: float = 96.0
    height: float = 48.0
    waste_factor: float = 0.10

    @property
    def area_sqin(self) -> float:
        """Exact sheet area in square inches."""
        return self.width * self.height


def _default_hinge_prices() -> Mapping[HingeType, float]:
    return MappingProxyType(
        {
            HingeType.CONCEALED_BLUM: 3.50,
            HingeType.CONCEALED_GRASS: 3.00,
            HingeType.EUROPEAN: 2.50,
            HingeType.BUTT: 1.50,
        }
    )


def _default_slide_prices() -> Mapping[SlideType, float]:
    return MappingProxyType(
        {
            SlideType.UNDERMOUNT_BLUM: 45.00,
            SlideType.SIDE_MOUNT: 15.00,
            SlideType.CENTER_MOUNT: 12.00,
            SlideType.SOFT_CLOSE: 35.00,
        }
    )


def _default_pull_prices() -> Mapping[PullType, float]:
    return MappingProxyType(
        {
            PullType.BAR: 4.50,
            PullType.CUP: 5.00,
            PullType.KNOB: 3.00,
            PullType.EDGE: 6.50,
            PullType.RECESSED: 8.00,
        }
    )


@dataclass(frozen=True)
class HardwarePricing:
    """Unit prices for hardware, finishes and supplies on the shopping list."""

    hinge_each: Mapping[HingeType, float] = field(default_factory=_default_hinge_prices)
    slide_pair: Mapping[SlideType, float] = field(default_factory=_default_slide_prices)
    pull_each: Mapping[PullType, float] = field(default_factory=_default_pull_prices)
    hinges_per_door: int = 2
    edgebanding_roll_feet: float = 200.0
    edgebanding_roll_price: float = 25.0
    primer_coverage_sqft: float = 350.0
    primer_price_gallon: float = 35.0
    topcoat_coverage_sqft: float = 400.0
    topcoat_price_gallon: float = 40.0
    default_sheet_price: float = 50.0
    misc_supplies: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType(
            {
                "Wood Glue (16oz)": 8.00,
                "Sandpaper Assortment": 15.00,
                "Wood Filler": 6.00,
                "Finishing Cloth (pkg)": 10.00,
                "Masking Tape": 5.00,
            }
        )
    )


@dataclass(frozen=True)
class ConstructionStandards:
    """All shop standards in one immutable bundle.

    Attributes:
        door_styles: Style table used for door decomposition.
        drawer_styles: Style table used for drawer-front decomposition.
        drawer_box: Drawer box construction.
        face_frame: Face frame member sizes.
        smart_defaults: Door and drawer layout constants.
        sheet: Sheet goods dimensions and waste allowance.
        pricing: Hardware and supply prices.
        front_thickness: Thickness of door/drawer fronts and frame members.
        back_panel_thickness: Thickness of the back panel.
        shelf_depth_reduction: Amount shelves are shallower than the cabinet.
        hardware_material: Material key tagging hardware lines.
        glass_material: Material key excluded from sheet aggregation.
        default_material_costs: Per-sheet prices for a new project.
        default_labor_rate: Hourly labor rate for a new project.
        labor_hours_per_cabinet: Labor estimate per cabinet.
    """

    door_styles: Mapping[FrontStyle, FrontStyleSpec] = field(
        default_factory=_default_front_styles
    )
    drawer_styles: Mapping[FrontStyle, FrontStyleSpec] = field(
        default_factory=_default_front_styles
    )
    drawer_box: DrawerBoxSpec = field(default_factory=DrawerBoxSpec)
    face_frame: FaceFrameSpec = field(default_factory=FaceFrameSpec)
    smart_defaults: SmartDefaults = field(default_factory=SmartDefaults)
    sheet: SheetSpec = field(default_factory=SheetSpec)
    pricing: HardwarePricing = field(default_factory=HardwarePricing)
    front_thickness: float = 0.75
    back_panel_thickness: float = 0.25
    shelf_depth_reduction: float = 1.0
    hardware_material: str = "hardware"
    glass_material: str = "glass"
    default_material_costs: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType(
            {
                "plywood": 45.0,
                "hardwood": 75.0,
                "mdf": 35.0,
                "birch": 65.0,
                "oak": 70.0,
                "maple": 85.0,
                "cherry": 95.0,
                "walnut": 100.0,
            }
        )
    )
    default_labor_rate: float = 50.0
    labor_hours_per_cabinet: float = 4.0

    def __post_init__(self) -> None:
        missing = [style for style in FrontStyle if style not in self.door_styles]
        if missing:
            raise ValueError(f"Door style table is missing: {missing}")
        missing = [
            style
            for style in FrontStyle
            if style is not FrontStyle.GLASS and style not in self.drawer_styles
        ]
        if missing:
            raise ValueError(f"Drawer style table is missing: {missing}")


DEFAULT_STANDARDS = ConstructionStandards()
