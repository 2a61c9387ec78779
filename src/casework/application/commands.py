"""Application commands (use cases) for editing a design.

``DesignEditor`` is stateless: every operation takes a ``DesignState`` and
returns an ``EditResult`` holding the next state. Rule violations are
reported as rejections; the input state is returned unchanged.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Any, Callable

from casework.domain import (
    DEFAULT_STANDARDS,
    Cabinet,
    ConstructionStandards,
    ConstructionType,
    DesignState,
    FrontStyle,
    HandleSide,
    HingeType,
    PullType,
    SlideType,
    new_id,
    parse_fraction,
)
from casework.domain.services import (
    door_limit,
    max_doors,
    optimal_drawer_heights,
    place_drawers,
    suggested_door_count,
    toekick_top,
    top_of_drawer_stack,
)

from .dtos import EditResult

logger = logging.getLogger(__name__)

__all__ = ["CABINET_FIELDS", "DRAWER_FIELDS", "DesignEditor"]


def _integer(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Expected a whole number, got {value!r}")
    number = float(value)
    if not math.isfinite(number) or number != int(number):
        raise ValueError(f"Expected a whole number, got {value!r}")
    return int(number)


def _finite(value: Any) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Expected a finite number, got {value!r}")
    return number


def _boolean(value: Any) -> bool:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "on", "1"):
            return True
        if lowered in ("false", "no", "off", "0"):
            return False
        raise ValueError(f"Expected true or false, got {value!r}")
    return bool(value)


def _text(value: Any) -> str:
    return str(value)


# Editable cabinet fields and how to coerce incoming values.
CABINET_FIELDS: dict[str, Callable[[Any], Any]] = {
    "name": _text,
    "width": parse_fraction,
    "height": parse_fraction,
    "depth": parse_fraction,
    "thickness": parse_fraction,
    "construction": ConstructionType,
    "material": _text,
    "cabinet_type": _text,
    "x_position": _finite,
    "z_position": _finite,
    "doors": _integer,
    "door_style": FrontStyle,
    "double_door": _boolean,
    "door_drawer_gap": parse_fraction,
    "door_overhang": parse_fraction,
    "drawer_style": FrontStyle,
    "shelves": _integer,
    "back_panel": _boolean,
    "toekick": _boolean,
    "toekick_height": parse_fraction,
    "toekick_depth": parse_fraction,
    "countertop": _boolean,
    "countertop_material": _text,
    "countertop_thickness": parse_fraction,
    "crown": _boolean,
    "crown_height": parse_fraction,
    "edgebanding": _boolean,
    "color": _text,
    "edgeband_color": _text,
    "hinges": HingeType,
    "slides": SlideType,
    "pulls": PullType,
}

_HARDWARE_FIELDS = ("hinges", "slides", "pulls")
_POSITIVE_FIELDS = (
    "width",
    "height",
    "depth",
    "thickness",
    "countertop_thickness",
    "crown_height",
)
_NON_NEGATIVE_FIELDS = (
    "door_drawer_gap",
    "door_overhang",
    "toekick_height",
    "toekick_depth",
)

DRAWER_FIELDS = ("height", "start_y")


def _label(field_name: str) -> str:
    return field_name.replace("_", " ").title()


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


class DesignEditor:
    """Validated editing operations on a design.

    Example:
        >>> editor = DesignEditor()
        >>> result = editor.add_cabinet(DesignState())
        >>> result.description
        'Added Cabinet 1'
    """

    def __init__(self, standards: ConstructionStandards = DEFAULT_STANDARDS) -> None:
        self.standards = standards

    # ------------------------------------------------------------------
    # Cabinets
    # ------------------------------------------------------------------

    def add_cabinet(self, state: DesignState, **overrides: Any) -> EditResult:
        """Append a default cabinet to the right of the rightmost one and select it."""
        x_position = 0.0
        if state.cabinets:
            rightmost = max(state.cabinets, key=lambda c: c.x_position + c.width)
            x_position = rightmost.x_position + rightmost.width

        fields: dict[str, Any] = {
            "name": f"Cabinet {len(state.cabinets) + 1}",
            "x_position": x_position,
        }
        fields.update(overrides)
        try:
            cabinet = Cabinet(**fields)
        except (TypeError, ValueError) as e:
            return EditResult.rejected(state, str(e))

        next_state = state.with_changes(
            cabinets=(*state.cabinets, cabinet),
            selected_cabinet_id=cabinet.id,
            selected_drawer_id=None,
            selected_door_index=None,
        )
        logger.debug(f"Added cabinet {cabinet.id} at x={x_position}")
        return EditResult.applied(next_state, f"Added {cabinet.name}")

    def delete_cabinet(self, state: DesignState, cabinet_id: str) -> EditResult:
        """Remove a cabinet and every selection or hidden key referring to it."""
        cabinet = state.cabinet(cabinet_id)
        if cabinet is None:
            return EditResult.rejected(state, f"Cabinet not found: {cabinet_id}")

        drawer_ids = {d.id for d in cabinet.drawers}
        changes: dict[str, Any] = {
            "cabinets": tuple(c for c in state.cabinets if c.id != cabinet_id),
            "hidden_doors": frozenset(
                key for key in state.hidden_doors if not key.startswith(f"{cabinet_id}-")
            ),
            "hidden_drawers": state.hidden_drawers - drawer_ids,
        }
        if state.selected_cabinet_id == cabinet_id:
            changes.update(
                selected_cabinet_id=None,
                selected_drawer_id=None,
                selected_door_index=None,
            )
        return EditResult.applied(
            state.with_changes(**changes), f"Deleted {cabinet.name}"
        )

    def update_cabinet(
        self, state: DesignState, cabinet_id: str, field: str, value: Any
    ) -> EditResult:
        """Set one cabinet field.

        Rejects unknown fields, values that cannot be coerced, non-positive
        dimensions, door counts over the limit, glass drawer fronts and
        heights that would leave a drawer sticking out of the cabinet. A
        width reduction that no longer fits the current doors clamps the
        door count and reports the adjustment.
        """
        cabinet = state.cabinet(cabinet_id)
        if cabinet is None:
            return EditResult.rejected(state, f"Cabinet not found: {cabinet_id}")

        coerce = CABINET_FIELDS.get(field)
        if coerce is None:
            return EditResult.rejected(state, f"Unknown cabinet field: {field}")
        try:
            new_value = coerce(value)
        except (TypeError, ValueError, OverflowError):
            return EditResult.rejected(state, f"Invalid value for {field}: {value!r}")

        if field in _POSITIVE_FIELDS and new_value <= 0:
            return EditResult.rejected(state, f"{_label(field)} must be positive")
        if field in _NON_NEGATIVE_FIELDS and new_value < 0:
            return EditResult.rejected(state, f"{_label(field)} cannot be negative")

        adjustments: list[str] = []
        changes: dict[str, Any]
        if field in _HARDWARE_FIELDS:
            changes = {"hardware": replace(cabinet.hardware, **{field: new_value})}
        else:
            changes = {field: new_value}

        if field == "doors":
            reason = self._check_door_count(cabinet, new_value)
            if reason:
                return EditResult.rejected(state, reason)
            changes["door_handles"] = self._trim_handles(cabinet, new_value)

        elif field == "width":
            limit = max_doors(new_value, self.standards)
            if not cabinet.double_door and cabinet.doors > limit:
                changes.update(doors=limit, door_handles=self._trim_handles(cabinet, limit))
                adjustments.append(
                    f'Cabinet width of {new_value:g}" can only fit '
                    f"{_plural(limit, 'door')}. Reducing door count."
                )

        elif field == "double_door":
            limit = door_limit(cabinet.with_changes(double_door=new_value), self.standards)
            if cabinet.doors > limit:
                changes.update(doors=limit, door_handles=self._trim_handles(cabinet, limit))
                adjustments.append(f"Door count reduced to {limit} to fit.")

        elif field == "drawer_style" and new_value is FrontStyle.GLASS:
            return EditResult.rejected(state, "Glass fronts are only available for doors")

        elif field == "height":
            stack_top = top_of_drawer_stack(cabinet) if cabinet.drawers else 0.0
            if stack_top > new_value:
                return EditResult.rejected(
                    state,
                    f'Cabinet height of {new_value:g}" would cut into the drawers. '
                    f'Minimum: {stack_top:.1f}"',
                )

        elif field == "shelves" and new_value < 0:
            return EditResult.rejected(state, "Shelf count cannot be negative")

        try:
            updated = cabinet.with_changes(**changes)
        except ValueError as e:
            return EditResult.rejected(state, str(e))

        for note in adjustments:
            logger.info(f"{cabinet.name}: {note}")
        return EditResult.applied(
            state.replace_cabinet(updated),
            f"Updated {updated.name}: {_label(field)}",
            adjustments,
        )

    def apply_smart_door_defaults(self, state: DesignState, cabinet_id: str) -> EditResult:
        """Set the door count suggested for the cabinet's width."""
        cabinet = state.cabinet(cabinet_id)
        if cabinet is None:
            return EditResult.rejected(state, f"Cabinet not found: {cabinet_id}")
        return self.update_cabinet(
            state, cabinet_id, "doors", suggested_door_count(cabinet.width, self.standards)
        )

    def set_door_handle(
        self,
        state: DesignState,
        cabinet_id: str,
        door_index: int,
        side: HandleSide | str,
    ) -> EditResult:
        """Choose which side a door's handle is mounted on."""
        cabinet = state.cabinet(cabinet_id)
        if cabinet is None:
            return EditResult.rejected(state, f"Cabinet not found: {cabinet_id}")
        if not 0 <= door_index < cabinet.doors:
            return EditResult.rejected(
                state, f"{cabinet.name} has no door {door_index + 1}"
            )
        try:
            handle = HandleSide(side)
        except ValueError:
            return EditResult.rejected(state, f"Invalid handle side: {side!r}")

        handles = dict(cabinet.door_handles)
        handles[door_index] = handle
        updated = cabinet.with_changes(door_handles=handles)
        return EditResult.applied(
            state.replace_cabinet(updated),
            f"Set door {door_index + 1} handle on {cabinet.name} to {handle.value}",
        )

    # ------------------------------------------------------------------
    # Drawers
    # ------------------------------------------------------------------

    def add_drawer(self, state: DesignState, cabinet_id: str) -> EditResult:
        """Add a standard drawer on top of the drawer stack."""
        cabinet = state.cabinet(cabinet_id)
        if cabinet is None:
            return EditResult.rejected(state, f"Cabinet not found: {cabinet_id}")

        height = self.standards.smart_defaults.new_drawer_height
        start_y = top_of_drawer_stack(cabinet)
        if start_y + height > cabinet.height:
            return EditResult.rejected(
                state,
                "Cannot add drawer: would exceed cabinet height. "
                f'Minimum drawer height is {self.standards.smart_defaults.min_drawer_height:g} inches.',
            )

        drawer = place_drawers([height], start_y, self.standards)[0]
        updated = cabinet.with_changes(drawers=(*cabinet.drawers, drawer))
        return EditResult.applied(
            state.replace_cabinet(updated), f"Added drawer to {cabinet.name}"
        )

    def update_drawer(
        self,
        state: DesignState,
        cabinet_id: str,
        drawer_id: str,
        field: str,
        value: Any,
    ) -> EditResult:
        """Change a drawer's ``height`` or ``start_y``."""
        cabinet = state.cabinet(cabinet_id)
        if cabinet is None:
            return EditResult.rejected(state, f"Cabinet not found: {cabinet_id}")
        drawer = cabinet.drawer(drawer_id)
        if drawer is None:
            return EditResult.rejected(state, f"Drawer not found: {drawer_id}")
        if field not in DRAWER_FIELDS:
            return EditResult.rejected(state, f"Unknown drawer field: {field}")

        number = parse_fraction(value)
        min_height = self.standards.smart_defaults.min_drawer_height
        if field == "height":
            if number < min_height:
                return EditResult.rejected(
                    state, f"Drawer height must be at least {min_height:g} inches"
                )
            if drawer.start_y + number > cabinet.height:
                return EditResult.rejected(
                    state,
                    "Drawer height cannot exceed remaining cabinet space. "
                    f"Maximum: {cabinet.height - drawer.start_y:.1f} inches",
                )
        else:
            if number < 0:
                return EditResult.rejected(state, "Drawer position cannot be negative")
            if number + drawer.height > cabinet.height:
                return EditResult.rejected(
                    state, "Drawer position would exceed cabinet height"
                )

        moved = replace(drawer, **{field: number})
        updated = cabinet.with_changes(
            drawers=tuple(moved if d.id == drawer_id else d for d in cabinet.drawers)
        )
        return EditResult.applied(
            state.replace_cabinet(updated), f"Updated drawer in {cabinet.name}"
        )

    def delete_drawer(
        self, state: DesignState, cabinet_id: str, drawer_id: str
    ) -> EditResult:
        cabinet = state.cabinet(cabinet_id)
        if cabinet is None:
            return EditResult.rejected(state, f"Cabinet not found: {cabinet_id}")
        if cabinet.drawer(drawer_id) is None:
            return EditResult.rejected(state, f"Drawer not found: {drawer_id}")

        updated = cabinet.with_changes(
            drawers=tuple(d for d in cabinet.drawers if d.id != drawer_id)
        )
        next_state = state.replace_cabinet(updated).with_changes(
            hidden_drawers=state.hidden_drawers - {drawer_id},
            selected_drawer_id=(
                None if state.selected_drawer_id == drawer_id else state.selected_drawer_id
            ),
        )
        return EditResult.applied(next_state, f"Deleted drawer from {cabinet.name}")

    def apply_smart_drawer_defaults(
        self, state: DesignState, cabinet_id: str
    ) -> EditResult:
        """Replace the cabinet's drawers with the optimal tiered layout."""
        cabinet = state.cabinet(cabinet_id)
        if cabinet is None:
            return EditResult.rejected(state, f"Cabinet not found: {cabinet_id}")

        base_y = toekick_top(cabinet)
        heights = optimal_drawer_heights(cabinet.height, base_y, self.standards)
        min_height = self.standards.smart_defaults.min_drawer_height
        if any(h < min_height for h in heights):
            return EditResult.rejected(
                state,
                f"{cabinet.name} is too short for a drawer layout; "
                f"drawers must be at least {min_height:g} inches",
            )

        drawers = place_drawers(heights, base_y, self.standards, id_factory=new_id)
        old_ids = {d.id for d in cabinet.drawers}
        next_state = state.replace_cabinet(cabinet.with_changes(drawers=drawers))
        next_state = next_state.with_changes(
            hidden_drawers=next_state.hidden_drawers - old_ids,
            selected_drawer_id=(
                None
                if state.selected_drawer_id in old_ids
                else state.selected_drawer_id
            ),
        )
        return EditResult.applied(
            next_state, f"Applied smart defaults to {cabinet.name}"
        )

    # ------------------------------------------------------------------
    # Selection and visibility (not recorded in history)
    # ------------------------------------------------------------------

    def select(
        self,
        state: DesignState,
        cabinet_id: str | None = None,
        drawer_id: str | None = None,
        door_index: int | None = None,
    ) -> EditResult:
        """Select a cabinet, optionally narrowing to one drawer or door."""
        if cabinet_id is not None and state.cabinet(cabinet_id) is None:
            return EditResult.rejected(state, f"Cabinet not found: {cabinet_id}")
        next_state = state.with_changes(
            selected_cabinet_id=cabinet_id,
            selected_drawer_id=drawer_id,
            selected_door_index=door_index,
        )
        return EditResult.applied(next_state, "Selection changed", record_history=False)

    def toggle_hidden_door(
        self, state: DesignState, cabinet_id: str, door_index: int
    ) -> EditResult:
        key = f"{cabinet_id}-{door_index}"
        hidden = state.hidden_doors ^ {key}
        return EditResult.applied(
            state.with_changes(hidden_doors=hidden),
            "Toggled door visibility",
            record_history=False,
        )

    def toggle_hidden_drawer(self, state: DesignState, drawer_id: str) -> EditResult:
        hidden = state.hidden_drawers ^ {drawer_id}
        return EditResult.applied(
            state.with_changes(hidden_drawers=hidden),
            "Toggled drawer visibility",
            record_history=False,
        )

    # ------------------------------------------------------------------
    # Project settings
    # ------------------------------------------------------------------

    def set_project_name(self, state: DesignState, name: str) -> EditResult:
        name = name.strip()
        if not name:
            return EditResult.rejected(state, "Project name cannot be empty")
        return EditResult.applied(
            state.with_changes(project_name=name), f"Renamed project to {name}"
        )

    def set_material_cost(
        self, state: DesignState, material: str, price: float
    ) -> EditResult:
        """Set the per-sheet price of a material, adding the material if new."""
        if not math.isfinite(price):
            return EditResult.rejected(state, f"Invalid material cost: {price!r}")
        if price < 0:
            return EditResult.rejected(state, "Material cost cannot be negative")
        costs = dict(state.material_costs)
        costs[material] = float(price)
        return EditResult.applied(
            state.with_changes(material_costs=costs), f"Updated {material} cost"
        )

    def set_labor_rate(self, state: DesignState, rate: float) -> EditResult:
        if not math.isfinite(rate):
            return EditResult.rejected(state, f"Invalid labor rate: {rate!r}")
        if rate < 0:
            return EditResult.rejected(state, "Labor rate cannot be negative")
        return EditResult.applied(
            state.with_changes(labor_rate=float(rate)), "Updated labor rate"
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_door_count(self, cabinet: Cabinet, doors: int) -> str | None:
        if doors < 0:
            return "Door count cannot be negative"
        if cabinet.double_door:
            limit = self.standards.smart_defaults.double_door_limit
            if doors > limit:
                return f"Double Door mode allows maximum {limit} doors."
            return None
        limit = max_doors(cabinet.width, self.standards)
        if doors > limit:
            return (
                "Cannot add that many doors. Maximum for a "
                f'{cabinet.width:g}" wide cabinet is {_plural(limit, "door")}. '
                'Enable "Double Door" to add a 2nd door.'
            )
        return None

    @staticmethod
    def _trim_handles(cabinet: Cabinet, doors: int) -> dict[int, HandleSide]:
        return {i: side for i, side in cabinet.door_handles.items() if i < doors}
