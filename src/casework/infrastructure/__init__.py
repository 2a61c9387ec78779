"""Infrastructure layer - report formatters and exporters."""

from .formatters import (
    CutListFormatter,
    JsonExporter,
    MaterialReportFormatter,
    SheetOptimizationFormatter,
    ShoppingListFormatter,
)

__all__ = [
    "CutListFormatter",
    "JsonExporter",
    "MaterialReportFormatter",
    "SheetOptimizationFormatter",
    "ShoppingListFormatter",
]
