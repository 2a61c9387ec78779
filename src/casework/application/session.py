"""Interactive design session: editor, undo history and derived reads."""

from __future__ import annotations

import logging
from typing import Any

from casework.domain import DEFAULT_STANDARDS, ConstructionStandards, DesignState, HandleSide
from casework.domain.services import (
    CutListEntry,
    CutListGenerator,
    MaterialEstimator,
    MaterialUsage,
    ProjectEstimate,
    SheetOptimizationGroup,
    SheetOptimizer,
    ShoppingList,
    ShoppingListGenerator,
    estimate_project_cost,
)

from .commands import DesignEditor
from .config.validators import ValidationResult, validate_design
from .dtos import EditResult
from .history import HistoryManager

logger = logging.getLogger(__name__)

INITIAL_DESCRIPTION = "Initial state"


class DesignSession:
    """Holds the current design and records accepted edits.

    The state given at creation is pushed as the baseline entry, so the
    first edit can be undone. Selection and visibility changes update the
    current state without creating history entries.

    Derived views (cut list, materials and so on) are recomputed from the
    current state on every call.
    """

    def __init__(
        self,
        state: DesignState | None = None,
        standards: ConstructionStandards = DEFAULT_STANDARDS,
        history: HistoryManager[DesignState] | None = None,
        editor: DesignEditor | None = None,
    ) -> None:
        self.standards = standards
        self.editor = editor or DesignEditor(standards)
        self.history = history if history is not None else HistoryManager()
        self.state = state if state is not None else DesignState()
        self.history.push_state(self.state, INITIAL_DESCRIPTION)

    def apply(self, result: EditResult) -> EditResult:
        """Adopt an editor result, recording it in history when appropriate."""
        if not result.accepted:
            logger.debug(f"Edit rejected: {result.reason}")
            return result
        if result.state == self.state:
            return result
        self.state = result.state
        if result.record_history:
            self.history.push_state(self.state, result.description)
        return result

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def add_cabinet(self, **overrides: Any) -> EditResult:
        return self.apply(self.editor.add_cabinet(self.state, **overrides))

    def delete_cabinet(self, cabinet_id: str) -> EditResult:
        return self.apply(self.editor.delete_cabinet(self.state, cabinet_id))

    def update_cabinet(self, cabinet_id: str, field: str, value: Any) -> EditResult:
        return self.apply(self.editor.update_cabinet(self.state, cabinet_id, field, value))

    def add_drawer(self, cabinet_id: str) -> EditResult:
        return self.apply(self.editor.add_drawer(self.state, cabinet_id))

    def update_drawer(
        self, cabinet_id: str, drawer_id: str, field: str, value: Any
    ) -> EditResult:
        return self.apply(
            self.editor.update_drawer(self.state, cabinet_id, drawer_id, field, value)
        )

    def delete_drawer(self, cabinet_id: str, drawer_id: str) -> EditResult:
        return self.apply(self.editor.delete_drawer(self.state, cabinet_id, drawer_id))

    def apply_smart_drawer_defaults(self, cabinet_id: str) -> EditResult:
        return self.apply(self.editor.apply_smart_drawer_defaults(self.state, cabinet_id))

    def apply_smart_door_defaults(self, cabinet_id: str) -> EditResult:
        return self.apply(self.editor.apply_smart_door_defaults(self.state, cabinet_id))

    def set_door_handle(
        self, cabinet_id: str, door_index: int, side: HandleSide | str
    ) -> EditResult:
        return self.apply(
            self.editor.set_door_handle(self.state, cabinet_id, door_index, side)
        )

    def select(
        self,
        cabinet_id: str | None = None,
        drawer_id: str | None = None,
        door_index: int | None = None,
    ) -> EditResult:
        return self.apply(
            self.editor.select(self.state, cabinet_id, drawer_id, door_index)
        )

    def toggle_hidden_door(self, cabinet_id: str, door_index: int) -> EditResult:
        return self.apply(self.editor.toggle_hidden_door(self.state, cabinet_id, door_index))

    def toggle_hidden_drawer(self, drawer_id: str) -> EditResult:
        return self.apply(self.editor.toggle_hidden_drawer(self.state, drawer_id))

    def set_project_name(self, name: str) -> EditResult:
        return self.apply(self.editor.set_project_name(self.state, name))

    def set_material_cost(self, material: str, price: float) -> EditResult:
        return self.apply(self.editor.set_material_cost(self.state, material, price))

    def set_labor_rate(self, rate: float) -> EditResult:
        return self.apply(self.editor.set_labor_rate(self.state, rate))

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def undo(self) -> bool:
        """Restore the previous recorded state. Returns False if there is none."""
        return self._restore(self.history.undo())

    def redo(self) -> bool:
        return self._restore(self.history.redo())

    def jump_to(self, index: int) -> bool:
        return self._restore(self.history.jump_to(index))

    def _restore(self, state: DesignState | None) -> bool:
        if state is None:
            return False
        self.state = state
        return True

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def cut_list(self) -> list[CutListEntry]:
        return CutListGenerator(self.standards).generate(self.state.cabinets)

    def materials(self) -> dict[str, MaterialUsage]:
        estimator = MaterialEstimator(self.state.material_costs, self.standards)
        return estimator.calculate_materials(self.cut_list())

    def sheet_optimization(self) -> dict[str, SheetOptimizationGroup]:
        return SheetOptimizer(self.standards).generate_sheet_optimization(self.cut_list())

    def shopping_list(self) -> ShoppingList:
        return ShoppingListGenerator(self.standards).generate(
            self.state.cabinets, self.cut_list(), self.state.material_costs
        )

    def estimate(self) -> ProjectEstimate:
        return estimate_project_cost(
            self.materials(),
            cabinet_count=len(self.state.cabinets),
            labor_rate=self.state.labor_rate,
            hours_per_cabinet=self.standards.labor_hours_per_cabinet,
        )

    def validate(self) -> ValidationResult:
        return validate_design(self.state, self.standards)
