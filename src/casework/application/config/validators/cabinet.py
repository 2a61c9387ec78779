"""Advisory validator for cabinet designs.

Checks cabinets against practical shop limits: overall dimensions and
standard sizes, proportions, drawer layout and the space left for doors.
Drawers that overlap or stick out of the cabinet, and door counts above
the width limit, are errors; everything else is advisory.
"""

from __future__ import annotations

from typing import Sequence

from casework.domain import DEFAULT_STANDARDS, Cabinet, ConstructionStandards, DesignState
from casework.domain.services import door_limit, toekick_top

from .base import ValidationResult

# Dimension limits (inches)
WIDTH_RANGE = (6.0, 48.0)
HEIGHT_RANGE = (12.0, 96.0)
DEPTH_RANGE = (6.0, 30.0)
STANDARD_WIDTHS = (9, 12, 15, 18, 21, 24, 27, 30, 33, 36, 42, 48)
STANDARD_HEIGHTS = {
    "base": (30, 34.5),
    "wall": (12, 15, 18, 24, 30, 36, 42),
    "tall": (84, 90, 96),
}
STANDARD_DEPTHS = {
    "base": (24,),
    "wall": (12, 14),
    "tall": (24,),
}
STANDARD_SIZE_TOLERANCE = 0.5
WIDE_SINGLE_DOOR_CABINET = 36.0
MAX_HEIGHT_TO_WIDTH = 4.0

# Drawer and door limits (inches)
DRAWER_HEIGHT_RANGE = (2.0, 12.0)
MIN_DRAWER_GAP = 0.125
MIN_DOOR_HEIGHT = 12.0


def closest_standard(value: float, standards: Sequence[float]) -> float:
    """Return the standard size nearest to ``value`` (first wins on ties)."""
    best = standards[0]
    for candidate in standards[1:]:
        if abs(candidate - value) < abs(best - value):
            best = candidate
    return best


class CabinetDesignValidator:
    """Validator for cabinet dimensions, drawer layout and door space.

    Example:
        >>> result = CabinetDesignValidator().validate_cabinet(Cabinet(width=60))
        >>> result.warnings[0].message
        'Width exceeds maximum (48"). Consider adding center support.'
    """

    def __init__(self, standards: ConstructionStandards = DEFAULT_STANDARDS) -> None:
        self.standards = standards

    @property
    def name(self) -> str:
        """Return the validator name."""
        return "cabinet"

    def validate(self, state: DesignState) -> ValidationResult:
        """Validate every cabinet of a design."""
        result = ValidationResult()
        for i, cabinet in enumerate(state.cabinets):
            result.merge(self.validate_cabinet(cabinet, path=f"cabinets[{i}]"))
        return result

    def validate_cabinet(self, cabinet: Cabinet, path: str = "cabinet") -> ValidationResult:
        result = ValidationResult()
        self._check_dimensions(cabinet, path, result)
        self._check_drawers(cabinet, path, result)
        self._check_doors(cabinet, path, result)
        return result

    def _check_dimensions(
        self, cabinet: Cabinet, path: str, result: ValidationResult
    ) -> None:
        for field, value, (low, high) in (
            ("width", cabinet.width, WIDTH_RANGE),
            ("height", cabinet.height, HEIGHT_RANGE),
            ("depth", cabinet.depth, DEPTH_RANGE),
        ):
            label = field.capitalize()
            if value < low:
                result.add_warning(
                    path=f"{path}.{field}",
                    message=f'{label} is below minimum ({low:g}"). This may cause structural issues.',
                )
            if value > high:
                result.add_warning(
                    path=f"{path}.{field}",
                    message=f'{label} exceeds maximum ({high:g}"). Consider adding center support.',
                )

        closest = closest_standard(cabinet.width, STANDARD_WIDTHS)
        if abs(cabinet.width - closest) > STANDARD_SIZE_TOLERANCE:
            result.add_suggestion(f"{path}.width", f'Consider standard size: {closest:g}"')

        heights = STANDARD_HEIGHTS.get(cabinet.cabinet_type)
        if heights:
            closest = closest_standard(cabinet.height, heights)
            if abs(cabinet.height - closest) > STANDARD_SIZE_TOLERANCE:
                result.add_suggestion(
                    f"{path}.height",
                    f'Standard {cabinet.cabinet_type} height: {closest:g}"',
                )
        depths = STANDARD_DEPTHS.get(cabinet.cabinet_type)
        if depths:
            closest = closest_standard(cabinet.depth, depths)
            if abs(cabinet.depth - closest) > STANDARD_SIZE_TOLERANCE:
                result.add_suggestion(
                    f"{path}.depth",
                    f'Standard {cabinet.cabinet_type} depth: {closest:g}"',
                )

        if cabinet.height / cabinet.width > MAX_HEIGHT_TO_WIDTH:
            result.add_warning(
                path=path,
                message="Cabinet is very tall relative to width.",
                suggestion="Add a nailer or mounting system.",
            )
        if cabinet.depth > cabinet.width:
            result.add_warning(
                path=path,
                message="Cabinet depth exceeds width. This is unusual and may look odd.",
            )
        if cabinet.width > WIDE_SINGLE_DOOR_CABINET and cabinet.doors == 1:
            result.add_suggestion(
                f"{path}.doors",
                f'Cabinet wider than {WIDE_SINGLE_DOOR_CABINET:g}" should use double doors or multiple doors.',
            )

    def _check_drawers(self, cabinet: Cabinet, path: str, result: ValidationResult) -> None:
        if not cabinet.drawers:
            return
        floor = toekick_top(cabinet)
        available = cabinet.height - floor
        low, high = DRAWER_HEIGHT_RANGE

        for i, drawer in enumerate(cabinet.drawers):
            drawer_path = f"{path}.drawers[{i}]"
            if drawer.height < low:
                result.add_warning(
                    path=drawer_path,
                    message=f'Drawer {i + 1}: Height ({drawer.height:g}") is below minimum ({low:g}").',
                )
            if drawer.height > high:
                result.add_warning(
                    path=drawer_path,
                    message=f'Drawer {i + 1}: Height ({drawer.height:g}") exceeds recommended maximum ({high:g}").',
                )
            if drawer.start_y < floor:
                result.add_warning(
                    path=drawer_path, message=f"Drawer {i + 1}: Starts below toekick area."
                )
            if drawer.top > cabinet.height:
                result.add_error(
                    path=drawer_path,
                    message=f"Drawer {i + 1}: Extends beyond cabinet height.",
                    value=drawer.top,
                )

        # Neighbors are compared in height order; numbering follows that order.
        ordered = sorted(cabinet.drawers, key=lambda d: d.start_y)
        for i, (lower, upper) in enumerate(zip(ordered, ordered[1:])):
            gap = upper.start_y - lower.top
            if gap < 0:
                result.add_error(
                    path=f"{path}.drawers",
                    message=f'Drawers {i + 1} and {i + 2} overlap by {abs(gap):.2f}".',
                    value=gap,
                )
            elif gap < MIN_DRAWER_GAP:
                result.add_warning(
                    path=f"{path}.drawers",
                    message=(
                        f'Gap between drawers {i + 1} and {i + 2} ({gap:.3f}") is too small. '
                        f'Minimum: {MIN_DRAWER_GAP:g}".'
                    ),
                )

        total = sum(d.height for d in cabinet.drawers)
        gaps = (len(cabinet.drawers) + 1) * MIN_DRAWER_GAP
        if total + gaps > available:
            result.add_warning(
                path=f"{path}.drawers",
                message=(
                    f'Total drawer height ({total:.1f}") plus gaps exceeds '
                    f'available space ({available:.1f}").'
                ),
            )

    def _check_doors(self, cabinet: Cabinet, path: str, result: ValidationResult) -> None:
        if cabinet.doors <= 0:
            return

        limit = door_limit(cabinet, self.standards)
        if cabinet.doors > limit:
            result.add_error(
                path=f"{path}.doors",
                message=f'{cabinet.doors} doors do not fit a {cabinet.width:g}" wide cabinet. Maximum: {limit}.',
                value=cabinet.doors,
            )

        if cabinet.drawers:
            space = cabinet.height - max(d.top for d in cabinet.drawers)
            if space < MIN_DOOR_HEIGHT:
                result.add_warning(
                    path=f"{path}.doors",
                    message=(
                        f'Not enough space for door ({space:.1f}"). '
                        f'Minimum door height: {MIN_DOOR_HEIGHT:g}".'
                    ),
                    suggestion="Consider reducing drawer heights or removing a drawer.",
                )

        defaults = self.standards.smart_defaults
        door_width = cabinet.width / cabinet.doors
        if door_width < defaults.min_door_width:
            result.add_warning(
                path=f"{path}.doors",
                message=f'Each door would be {door_width:.1f}" wide. Minimum: {defaults.min_door_width:g}".',
                suggestion="Reduce number of doors or increase cabinet width.",
            )
        if door_width > defaults.optimal_max_door_width and cabinet.doors == 1:
            result.add_suggestion(
                f"{path}.doors",
                f'Door width ({door_width:.1f}") is wide. Consider using double doors.',
            )


def validate_cabinet(
    cabinet: Cabinet,
    standards: ConstructionStandards = DEFAULT_STANDARDS,
    path: str = "cabinet",
) -> ValidationResult:
    """Run the advisory checks on a single cabinet."""
    return CabinetDesignValidator(standards).validate_cabinet(cabinet, path)


def validate_design(
    state: DesignState, standards: ConstructionStandards = DEFAULT_STANDARDS
) -> ValidationResult:
    """Run the advisory checks on every cabinet of a design."""
    return CabinetDesignValidator(standards).validate(state)
