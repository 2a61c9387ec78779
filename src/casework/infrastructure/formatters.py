"""Output formatters and exporters for cabinet designs.

Every dimension shown to a user goes through ``format_measurement`` so
fractional display is consistent across reports.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from casework.domain import MeasurementFormat, format_measurement
from casework.domain.services import (
    CutListEntry,
    MaterialUsage,
    ProjectEstimate,
    SheetOptimizationGroup,
    ShoppingList,
)


class CutListFormatter:
    """Formats cut lists for display, grouped by cabinet."""

    def __init__(self, mode: MeasurementFormat | str = MeasurementFormat.FRACTION) -> None:
        """Initialize formatter.

        Args:
            mode: Measurement display mode for dimensions.
        """
        self.mode = MeasurementFormat(mode)

    def _dim(self, value: float) -> str:
        return format_measurement(value, self.mode)

    def format(self, cut_list: list[CutListEntry]) -> str:
        """Format cut list as a table."""
        if not cut_list:
            return "No parts in cut list."

        width = 118 if self.mode is MeasurementFormat.BOTH else 100
        lines = [
            "CUT LIST",
            "=" * width,
        ]
        current_cabinet: str | None = None
        for entry in cut_list:
            if entry.cabinet != current_cabinet:
                current_cabinet = entry.cabinet
                lines.append("")
                lines.append(current_cabinet.upper())
                lines.append(
                    f"{'#':>3} {'Part':<30} {'Qty':>4} {'Width':<20} {'Height':<20} "
                    f"{'Thick':<8} {'Material':<10} {'Grain'}"
                )
                lines.append("-" * width)

            if entry.width == 0 and entry.height == 0:
                lines.append(
                    f"{entry.assembly_sequence:>3} {entry.part:<30} {entry.quantity:>4} "
                    f"{entry.notes}"
                )
                continue
            lines.append(
                f"{entry.assembly_sequence:>3} {entry.part:<30} {entry.quantity:>4} "
                f"{self._dim(entry.width):<20} {self._dim(entry.height):<20} "
                f"{self._dim(entry.thickness):<8} {entry.material:<10} "
                f"{entry.grain_direction.value}"
            )

        sheet_parts = [e for e in cut_list if e.width > 0 and e.height > 0]
        total_area = sum(e.area for e in sheet_parts)
        lines.append("")
        lines.append("-" * width)
        lines.append(
            f"{'TOTAL':<20} {sum(e.quantity for e in sheet_parts)} parts, "
            f"{total_area / 144:.2f} sq ft"
        )
        return "\n".join(lines)


class MaterialReportFormatter:
    """Formats material usage and project cost reports."""

    def format(
        self,
        materials: Mapping[str, MaterialUsage],
        estimate: ProjectEstimate | None = None,
    ) -> str:
        """Format material usage as a report."""
        lines = [
            "MATERIAL ESTIMATE",
            "=" * 60,
            "",
        ]
        if not materials:
            lines.append("No sheet materials required.")

        for material, usage in materials.items():
            lines.append(material.title())
            lines.append(f"  Area needed: {usage.area:.2f} sq ft")
            lines.append(f"  4x8 sheets:  {usage.sheets}")
            lines.append(f"  Cost:        ${usage.cost:,.2f}")
            lines.append("")

        lines.append("-" * 60)
        lines.append("TOTAL (all materials)")
        lines.append(f"  Area: {sum(u.area for u in materials.values()):.2f} sq ft")
        lines.append(f"  4x8 sheets: {sum(u.sheets for u in materials.values())}")
        lines.append(f"  Cost: ${sum(u.cost for u in materials.values()):,.2f}")

        if estimate is not None:
            lines.append("")
            lines.append("PROJECT ESTIMATE")
            lines.append(f"  Materials: ${estimate.material_cost:,.2f}")
            lines.append(
                f"  Labor:     ${estimate.labor_cost:,.2f} ({estimate.labor_hours:g} hours)"
            )
            lines.append(f"  Total:     ${estimate.total:,.2f}")

        return "\n".join(lines)


class SheetOptimizationFormatter:
    """Formats sheet optimization groups for cut planning."""

    def __init__(
        self,
        mode: MeasurementFormat | str = MeasurementFormat.FRACTION,
        show_parts: bool = True,
    ) -> None:
        self.mode = MeasurementFormat(mode)
        self.show_parts = show_parts

    def format(self, groups: Mapping[str, SheetOptimizationGroup]) -> str:
        lines = [
            "SHEET OPTIMIZATION",
            "=" * 70,
        ]
        if not groups:
            lines.append("No sheet parts.")
            return "\n".join(lines)

        for group in groups.values():
            lines.append("")
            lines.append(
                f"{group.material.title()} - {format_measurement(group.thickness, self.mode)}"
            )
            lines.append(
                f"  {len(group.parts)} parts, {group.total_area / 144:.2f} sq ft, "
                f"{group.sheets_needed} sheets (96x48), {group.waste_percent:.1f}% waste"
            )
            if self.show_parts:
                for part in group.parts:
                    size = (
                        f"{format_measurement(part.width, self.mode)} x "
                        f"{format_measurement(part.height, self.mode)}"
                    )
                    lines.append(f"    {part.cabinet:<16} {part.name:<30} {size}")

        return "\n".join(lines)


class ShoppingListFormatter:
    """Formats a shopping list as a priced checklist."""

    def format(self, shopping: ShoppingList, project_name: str = "") -> str:
        title = f"SHOPPING LIST - {project_name}" if project_name else "SHOPPING LIST"
        lines = [title, "=" * 60]

        lines.append("")
        lines.append("SHEET MATERIALS")
        for material, sheet in shopping.sheet_materials.items():
            lines.append(
                f"[ ] {sheet.sheets_needed}x {material} {sheet.sheet_size} "
                f"@ ${sheet.cost_per_sheet:.2f} = ${sheet.total_cost:.2f} "
                f"({sheet.total_area:.2f} sq ft, {sheet.waste_percent:.1f}% waste)"
            )

        for heading, lines_by_type, unit in (
            ("HINGES", shopping.hinges, "each"),
            ("DRAWER SLIDES", shopping.slides, "pair"),
            ("PULLS & KNOBS", shopping.pulls, "each"),
        ):
            if not lines_by_type:
                continue
            lines.append("")
            lines.append(heading)
            for name, line in lines_by_type.items():
                lines.append(
                    f"[ ] {line.quantity}x {name} @ ${line.unit_price:.2f}/{unit} "
                    f"= ${line.total_cost:.2f}"
                )

        edgebanding = shopping.edgebanding
        lines.append("")
        lines.append("EDGEBANDING")
        lines.append(
            f"[ ] {edgebanding.rolls_needed}x roll ({edgebanding.linear_feet:.1f} linear ft) "
            f"= ${edgebanding.total_cost:.2f}"
        )

        lines.append("")
        lines.append(f"FINISH MATERIALS ({shopping.surface_area:.1f} sq ft)")
        for name, finish in shopping.finishes.items():
            lines.append(
                f"[ ] {finish.gallons} gal {name} @ ${finish.price_per_gallon:.2f} "
                f"= ${finish.total_cost:.2f}"
            )

        lines.append("")
        lines.append("MISCELLANEOUS SUPPLIES")
        for name, line in shopping.misc_supplies.items():
            lines.append(f"[ ] {line.quantity}x {name} = ${line.total_cost:.2f}")

        lines.append("")
        lines.append("-" * 60)
        lines.append(f"Hardware items: {shopping.item_count}")
        lines.append(f"Total estimated cost: ${shopping.total_cost:,.2f}")
        return "\n".join(lines)


class JsonExporter:
    """Exports derived design data as JSON-ready dictionaries."""

    def cut_list(self, cut_list: list[CutListEntry]) -> list[dict[str, Any]]:
        return [
            {
                "cabinet": e.cabinet,
                "part": e.part,
                "quantity": e.quantity,
                "width": e.width,
                "height": e.height,
                "thickness": e.thickness,
                "material": e.material,
                "notes": e.notes,
                "grain_direction": e.grain_direction.value,
                "edgebanding": e.edgebanding,
                "hardware": e.hardware,
                "assembly_sequence": e.assembly_sequence,
            }
            for e in cut_list
        ]

    def materials(self, materials: Mapping[str, MaterialUsage]) -> dict[str, Any]:
        return {
            key: {"area": u.area, "sheets": u.sheets, "cost": u.cost}
            for key, u in materials.items()
        }

    def sheet_optimization(
        self, groups: Mapping[str, SheetOptimizationGroup]
    ) -> dict[str, Any]:
        return {
            key: {
                "material": g.material,
                "thickness": g.thickness,
                "parts": [
                    {
                        "name": p.name,
                        "cabinet": p.cabinet,
                        "width": p.width,
                        "height": p.height,
                        "area": p.area,
                    }
                    for p in g.parts
                ],
                "total_area": g.total_area,
                "sheets_needed": g.sheets_needed,
                "waste_percent": g.waste_percent,
            }
            for key, g in groups.items()
        }

    def estimate(self, estimate: ProjectEstimate) -> dict[str, Any]:
        return {
            "material_cost": estimate.material_cost,
            "labor_hours": estimate.labor_hours,
            "labor_cost": estimate.labor_cost,
            "total": estimate.total,
        }

    def export(
        self,
        project_name: str,
        cut_list: list[CutListEntry],
        materials: Mapping[str, MaterialUsage],
        groups: Mapping[str, SheetOptimizationGroup],
        estimate: ProjectEstimate,
    ) -> str:
        """Export all derived views as a JSON string."""
        data = {
            "project": project_name,
            "cut_list": self.cut_list(cut_list),
            "materials": self.materials(materials),
            "sheet_optimization": self.sheet_optimization(groups),
            "estimate": self.estimate(estimate),
        }
        return json.dumps(data, indent=2)
