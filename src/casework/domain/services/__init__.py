"""Domain services for cabinet design.

This package provides the services that turn cabinet parameters into
shop output:
- Derived geometry (door counts, openings, drawer layouts)
- Cut list generation
- Material and sheet estimates
- Shopping list consolidation
"""

from .cut_list import CutListEntry, CutListGenerator
from .derivation import (
    door_limit,
    door_opening_height,
    door_opening_width,
    doors_for,
    drawer_box_height,
    drawer_front_height,
    drawer_front_width,
    max_doors,
    optimal_drawer_heights,
    place_drawers,
    suggested_door_count,
    toekick_top,
    top_of_drawer_stack,
)
from .material_estimator import (
    MaterialEstimator,
    MaterialUsage,
    PartInstance,
    ProjectEstimate,
    SheetOptimizationGroup,
    SheetOptimizer,
    estimate_project_cost,
    sheet_group_key,
)
from .shopping_list import (
    EdgebandingEstimate,
    FinishLine,
    PurchaseLine,
    SheetPurchase,
    ShoppingList,
    ShoppingListGenerator,
)

__all__ = [
    # Cut list
    "CutListEntry",
    "CutListGenerator",
    # Derivation
    "door_limit",
    "door_opening_height",
    "door_opening_width",
    "doors_for",
    "drawer_box_height",
    "drawer_front_height",
    "drawer_front_width",
    "max_doors",
    "optimal_drawer_heights",
    "place_drawers",
    "suggested_door_count",
    "toekick_top",
    "top_of_drawer_stack",
    # Materials
    "MaterialEstimator",
    "MaterialUsage",
    "PartInstance",
    "ProjectEstimate",
    "SheetOptimizationGroup",
    "SheetOptimizer",
    "estimate_project_cost",
    "sheet_group_key",
    # Shopping list
    "EdgebandingEstimate",
    "FinishLine",
    "PurchaseLine",
    "SheetPurchase",
    "ShoppingList",
    "ShoppingListGenerator",
]
