"""Domain layer - core business logic."""

from .entities import Cabinet, DesignState, Door, Drawer, new_id
from .measurements import decimal_to_fraction, format_measurement, parse_fraction
from .services import (
    CutListEntry,
    CutListGenerator,
    MaterialEstimator,
    MaterialUsage,
    SheetOptimizationGroup,
    SheetOptimizer,
    ShoppingList,
    ShoppingListGenerator,
)
from .standards import DEFAULT_STANDARDS, ConstructionStandards
from .value_objects import (
    ConstructionType,
    FrontStyle,
    GrainDirection,
    HandleSide,
    HardwareSelection,
    HingeType,
    MeasurementFormat,
    PullType,
    SlideType,
)

__all__ = [
    "Cabinet",
    "ConstructionStandards",
    "ConstructionType",
    "CutListEntry",
    "CutListGenerator",
    "DEFAULT_STANDARDS",
    "DesignState",
    "Door",
    "Drawer",
    "FrontStyle",
    "GrainDirection",
    "HandleSide",
    "HardwareSelection",
    "HingeType",
    "MaterialEstimator",
    "MaterialUsage",
    "MeasurementFormat",
    "PullType",
    "SheetOptimizationGroup",
    "SheetOptimizer",
    "ShoppingList",
    "ShoppingListGenerator",
    "SlideType",
    "decimal_to_fraction",
    "format_measurement",
    "new_id",
    "parse_fraction",
]
