"""Shopping list generation.

Consolidates everything to buy for a set of cabinets: sheet goods,
hardware, edgebanding, finish and shop supplies, each priced from the
catalog in ``HardwarePricing``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Mapping, Sequence

from ..standards import DEFAULT_STANDARDS, ConstructionStandards
from ..value_objects import HingeType, PullType, SlideType
from .cut_list import CutListEntry
from .derivation import door_opening_height, door_opening_width, drawer_front_width
from .material_estimator import MaterialEstimator

if TYPE_CHECKING:
    from ..entities import Cabinet

logger = logging.getLogger(__name__)

__all__ = [
    "EdgebandingEstimate",
    "FinishLine",
    "PurchaseLine",
    "SheetPurchase",
    "ShoppingList",
    "ShoppingListGenerator",
]

SHEET_SIZE_LABEL = "4x8"


@dataclass(frozen=True)
class SheetPurchase:
    """Sheets of one material to buy.

    Attributes:
        total_area: Part area in square feet.
        sheets_needed: Whole sheets to buy.
        sheet_size: Nominal sheet size label.
        waste_percent: Share of the bought area left over.
        cost_per_sheet: Unit price.
        total_cost: Sheets times unit price.
    """

    total_area: float
    sheets_needed: int
    sheet_size: str
    waste_percent: float
    cost_per_sheet: float
    total_cost: float


@dataclass(frozen=True)
class PurchaseLine:
    """A counted item with a unit price (hinges, slide pairs, pulls, supplies)."""

    quantity: int
    unit_price: float

    @property
    def total_cost(self) -> float:
        return self.quantity * self.unit_price


@dataclass(frozen=True)
class EdgebandingEstimate:
    linear_feet: float
    rolls_needed: int
    price_per_roll: float

    @property
    def total_cost(self) -> float:
        return self.rolls_needed * self.price_per_roll


@dataclass(frozen=True)
class FinishLine:
    gallons: int
    price_per_gallon: float

    @property
    def total_cost(self) -> float:
        return self.gallons * self.price_per_gallon


@dataclass(frozen=True)
class ShoppingList:
    """Everything to buy for a project.

    Attributes:
        sheet_materials: Sheet purchases per material key.
        hinges: Hinge counts per hinge type label.
        slides: Slide pair counts per slide type label.
        pulls: Pull counts per pull type label.
        edgebanding: Edgebanding rolls.
        surface_area: Total area to finish in square feet.
        finishes: Finish gallons per product.
        misc_supplies: Shop supplies per item.
    """

    sheet_materials: dict[str, SheetPurchase] = field(default_factory=dict)
    hinges: dict[str, PurchaseLine] = field(default_factory=dict)
    slides: dict[str, PurchaseLine] = field(default_factory=dict)
    pulls: dict[str, PurchaseLine] = field(default_factory=dict)
    edgebanding: EdgebandingEstimate = EdgebandingEstimate(0.0, 0, 0.0)
    surface_area: float = 0.0
    finishes: dict[str, FinishLine] = field(default_factory=dict)
    misc_supplies: dict[str, PurchaseLine] = field(default_factory=dict)

    @property
    def hardware_lines(self) -> list[PurchaseLine]:
        return [*self.hinges.values(), *self.slides.values(), *self.pulls.values()]

    @property
    def total_cost(self) -> float:
        """Total estimated cost of every line."""
        return (
            sum(s.total_cost for s in self.sheet_materials.values())
            + sum(line.total_cost for line in self.hardware_lines)
            + self.edgebanding.total_cost
            + sum(f.total_cost for f in self.finishes.values())
            + sum(m.total_cost for m in self.misc_supplies.values())
        )

    @property
    def item_count(self) -> int:
        """Number of hardware pieces (hinges, slide pairs and pulls)."""
        return sum(line.quantity for line in self.hardware_lines)


class ShoppingListGenerator:
    """Builds a ``ShoppingList`` from cabinets and their cut list."""

    def __init__(self, standards: ConstructionStandards = DEFAULT_STANDARDS) -> None:
        self.standards = standards

    def generate(
        self,
        cabinets: Sequence[Cabinet],
        cut_list: Iterable[CutListEntry],
        material_costs: Mapping[str, float] | None = None,
    ) -> ShoppingList:
        """Generate the shopping list.

        Args:
            cabinets: Cabinets in layout order.
            cut_list: Cut list generated from the same cabinets.
            material_costs: Per-sheet prices; unknown materials use the
                catalog default sheet price.
        """
        pricing = self.standards.pricing
        costs = dict(material_costs or {})

        hinges: dict[HingeType, int] = {}
        slides: dict[SlideType, int] = {}
        pulls: dict[PullType, int] = {}
        linear_inches = 0.0
        surface_sq_in = 0.0
        for cabinet in cabinets:
            hw = cabinet.hardware
            drawer_count = len(cabinet.drawers)
            if cabinet.doors > 0:
                hinges[hw.hinges] = (
                    hinges.get(hw.hinges, 0) + cabinet.doors * pricing.hinges_per_door
                )
            if drawer_count:
                slides[hw.slides] = slides.get(hw.slides, 0) + drawer_count
            pull_count = cabinet.doors + drawer_count
            if pull_count:
                pulls[hw.pulls] = pulls.get(hw.pulls, 0) + pull_count
            linear_inches += self._edgebanding_inches(cabinet)
            surface_sq_in += self._surface_area(cabinet)

        surface_area = surface_sq_in / 144
        linear_feet = linear_inches / 12
        cabinet_factor = max(1, math.ceil(len(cabinets) / 3))

        shopping = ShoppingList(
            sheet_materials=self._sheet_materials(cut_list, costs),
            hinges={
                t.value: PurchaseLine(q, pricing.hinge_each[t]) for t, q in hinges.items()
            },
            slides={
                t.value: PurchaseLine(q, pricing.slide_pair[t]) for t, q in slides.items()
            },
            pulls={
                t.value: PurchaseLine(q, pricing.pull_each[t]) for t, q in pulls.items()
            },
            edgebanding=EdgebandingEstimate(
                linear_feet=linear_feet,
                rolls_needed=math.ceil(linear_feet / pricing.edgebanding_roll_feet),
                price_per_roll=pricing.edgebanding_roll_price,
            ),
            surface_area=surface_area,
            finishes={
                "Primer": FinishLine(
                    math.ceil(surface_area / pricing.primer_coverage_sqft),
                    pricing.primer_price_gallon,
                ),
                "Topcoat (Poly/Lacquer)": FinishLine(
                    math.ceil(surface_area / pricing.topcoat_coverage_sqft),
                    pricing.topcoat_price_gallon,
                ),
            },
            misc_supplies={
                item: PurchaseLine(cabinet_factor, price)
                for item, price in pricing.misc_supplies.items()
            },
        )
        logger.debug(
            f"Shopping list for {len(cabinets)} cabinets: "
            f"{shopping.item_count} hardware items, ${shopping.total_cost:.2f}"
        )
        return shopping

    def _sheet_materials(
        self, cut_list: Iterable[CutListEntry], costs: Mapping[str, float]
    ) -> dict[str, SheetPurchase]:
        fallback = self.standards.pricing.default_sheet_price
        estimator = MaterialEstimator(costs, self.standards, fallback_price=fallback)
        sheet_area = self.standards.sheet.nominal_area_sqft
        purchases: dict[str, SheetPurchase] = {}
        for material, usage in estimator.calculate_materials(cut_list).items():
            bought = usage.sheets * sheet_area
            purchases[material] = SheetPurchase(
                total_area=usage.area,
                sheets_needed=usage.sheets,
                sheet_size=SHEET_SIZE_LABEL,
                waste_percent=(
                    round((bought - usage.area) / bought * 100, 1) if bought else 0.0
                ),
                cost_per_sheet=costs.get(material, fallback),
                total_cost=usage.cost,
            )
        return purchases

    def _edgebanding_inches(self, cabinet: Cabinet) -> float:
        """Banded edges: shelf perimeters, drawer front top/bottom, door perimeters."""
        inches = 0.0
        if cabinet.shelves > 0:
            shelf_width = cabinet.width - cabinet.thickness * 2
            shelf_depth = cabinet.depth - self.standards.shelf_depth_reduction
            inches += 2 * (shelf_width + shelf_depth) * cabinet.shelves
        inches += drawer_front_width(cabinet, self.standards) * 2 * len(cabinet.drawers)
        if cabinet.doors > 0:
            width = door_opening_width(cabinet, self.standards)
            height = door_opening_height(cabinet, self.standards)
            if width > 0 and height > 0:
                inches += 2 * (width + height) * cabinet.doors
        return inches

    def _surface_area(self, cabinet: Cabinet) -> float:
        """Finished area in square inches, fronts counted on both faces."""
        area = 2 * cabinet.depth * cabinet.height
        area += 2 * cabinet.width * cabinet.depth
        area += cabinet.width * cabinet.height
        if cabinet.doors > 0:
            width = door_opening_width(cabinet, self.standards)
            height = door_opening_height(cabinet, self.standards)
            if width > 0 and height > 0:
                area += width * height * 2 * cabinet.doors
        front_width = drawer_front_width(cabinet, self.standards)
        for drawer in cabinet.drawers:
            area += front_width * drawer.height * 2
        return area

