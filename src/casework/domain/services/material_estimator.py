"""Material aggregation and sheet estimates.

Two independent views are computed from the same cut list:

* ``MaterialEstimator`` rolls parts up per material key for costing. It uses
  the nominal 32 sq ft sheet and no waste allowance.
* ``SheetOptimizer`` groups individual part instances per material and
  thickness for cut planning, and adds a waste allowance for kerf and trim.

They are deliberately kept apart; the cost estimate and the cut-planning
view each depend on their own conventions.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Mapping

from ..standards import DEFAULT_STANDARDS, ConstructionStandards
from .cut_list import CutListEntry

logger = logging.getLogger(__name__)

__all__ = [
    "MaterialEstimator",
    "MaterialUsage",
    "PartInstance",
    "ProjectEstimate",
    "SheetOptimizationGroup",
    "SheetOptimizer",
    "estimate_project_cost",
    "sheet_group_key",
]

SQ_INCHES_PER_SQ_FOOT = 144


@dataclass(frozen=True)
class MaterialUsage:
    """Aggregated usage of one sheet material.

    Attributes:
        area: Total part area in square feet.
        sheets: Whole sheets to buy.
        cost: Sheets times the material's unit price.
    """

    area: float
    sheets: int
    cost: float


@dataclass(frozen=True)
class PartInstance:
    """A single physical part, one per unit of cut-list quantity."""

    name: str
    cabinet: str
    width: float
    height: float
    area: float


@dataclass(frozen=True)
class SheetOptimizationGroup:
    """Part instances sharing one material and thickness.

    Attributes:
        material: Material key.
        thickness: Material thickness in inches.
        parts: Individual part instances, largest area first.
        total_area: Raw area of all instances in square inches.
        sheets_needed: Sheets after the waste allowance.
        waste_percent: Share of bought sheet area not used by parts,
            rounded to one decimal place.
    """

    material: str
    thickness: float
    parts: tuple[PartInstance, ...]
    total_area: float
    sheets_needed: int
    waste_percent: float


@dataclass(frozen=True)
class ProjectEstimate:
    """Project cost summary."""

    material_cost: float
    labor_hours: float
    labor_cost: float
    total: float


def _is_sheet_good(entry: CutListEntry, standards: ConstructionStandards) -> bool:
    return entry.material not in (standards.hardware_material, standards.glass_material)


def sheet_group_key(material: str, thickness: float) -> str:
    """Key of a sheet optimization group, e.g. ``plywood-0.75``."""
    return f"{material}-{thickness:g}"


class MaterialEstimator:
    """Rolls a cut list up into sheet counts and costs per material.

    Args:
        material_costs: Per-sheet prices; defaults to the standard costs.
        standards: Shop standards.
        fallback_price: Price of materials missing from ``material_costs``.
            When unset they are costed at 0 with a warning.
    """

    def __init__(
        self,
        material_costs: Mapping[str, float] | None = None,
        standards: ConstructionStandards = DEFAULT_STANDARDS,
        fallback_price: float | None = None,
    ) -> None:
        self.standards = standards
        self.fallback_price = fallback_price
        self.material_costs = dict(
            standards.default_material_costs if material_costs is None else material_costs
        )

    def calculate_materials(
        self, cut_list: Iterable[CutListEntry]
    ) -> dict[str, MaterialUsage]:
        """Calculate area, sheets and cost per material key.

        Hardware and glass lines are skipped. Materials appear in the order
        they are first seen in the cut list.
        """
        areas: dict[str, float] = {}
        for entry in cut_list:
            if not _is_sheet_good(entry, self.standards):
                continue
            areas[entry.material] = (
                areas.get(entry.material, 0.0) + entry.area / SQ_INCHES_PER_SQ_FOOT
            )

        usage: dict[str, MaterialUsage] = {}
        for material, area in areas.items():
            sheets = math.ceil(area / self.standards.sheet.nominal_area_sqft)
            unit_price = self.material_costs.get(material, self.fallback_price)
            if unit_price is None:
                logger.warning(f"No unit price for material '{material}', costing at 0")
                unit_price = 0.0
            usage[material] = MaterialUsage(
                area=area, sheets=sheets, cost=sheets * unit_price
            )
        return usage

    def total_cost(self, usage: Mapping[str, MaterialUsage]) -> float:
        """Sum the cost of all materials."""
        return sum(u.cost for u in usage.values())


class SheetOptimizer:
    """Groups part instances per material and thickness for cut planning.

    This is an area estimate, not a packing: sheets are counted from the
    waste-adjusted area of each group.
    """

    def __init__(self, standards: ConstructionStandards = DEFAULT_STANDARDS) -> None:
        self.standards = standards

    def generate_sheet_optimization(
        self, cut_list: Iterable[CutListEntry]
    ) -> dict[str, SheetOptimizationGroup]:
        """Build one group per ``(material, thickness)``.

        Hardware, glass and zero-dimension lines are skipped.
        """
        grouped: dict[str, list[PartInstance]] = {}
        keys: dict[str, tuple[str, float]] = {}
        for entry in cut_list:
            if not _is_sheet_good(entry, self.standards):
                continue
            if entry.width == 0 or entry.height == 0:
                continue
            key = sheet_group_key(entry.material, entry.thickness)
            keys.setdefault(key, (entry.material, entry.thickness))
            instances = grouped.setdefault(key, [])
            for _ in range(entry.quantity):
                instances.append(
                    PartInstance(
                        name=entry.part,
                        cabinet=entry.cabinet,
                        width=entry.width,
                        height=entry.height,
                        area=entry.width * entry.height,
                    )
                )

        sheet = self.standards.sheet
        groups: dict[str, SheetOptimizationGroup] = {}
        for key, instances in grouped.items():
            material, thickness = keys[key]
            total_area = sum(p.area for p in instances)
            sheets_needed = math.ceil(total_area * (1 + sheet.waste_factor) / sheet.area_sqin)
            bought = sheets_needed * sheet.area_sqin
            waste_percent = round((bought - total_area) / bought * 100, 1) if bought else 0.0
            groups[key] = SheetOptimizationGroup(
                material=material,
                thickness=thickness,
                parts=tuple(sorted(instances, key=lambda p: p.area, reverse=True)),
                total_area=total_area,
                sheets_needed=sheets_needed,
                waste_percent=waste_percent,
            )
            logger.debug(
                f"Sheet group {key}: {len(instances)} parts, {sheets_needed} sheets, "
                f"{waste_percent}% waste"
            )
        return groups


def estimate_project_cost(
    materials: Mapping[str, MaterialUsage],
    cabinet_count: int,
    labor_rate: float,
    hours_per_cabinet: float = DEFAULT_STANDARDS.labor_hours_per_cabinet,
) -> ProjectEstimate:
    """Combine material cost with a flat per-cabinet labor estimate.

    Example:
        >>> estimate_project_cost({}, cabinet_count=2, labor_rate=50).total
        400.0
    """
    material_cost = float(sum(u.cost for u in materials.values()))
    labor_hours = cabinet_count * hours_per_cabinet
    labor_cost = labor_hours * labor_rate
    return ProjectEstimate(
        material_cost=material_cost,
        labor_hours=labor_hours,
        labor_cost=labor_cost,
        total=material_cost + labor_cost,
    )
