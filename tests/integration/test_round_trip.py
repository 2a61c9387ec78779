"""Integration tests for saving and reloading projects."""

from pathlib import Path

import pytest

from casework.application import DesignSession
from casework.application.config import load_state, save_project


class TestRoundTrip:
    """A saved project reloads into the same design."""

    def test_kitchen_round_trip(self, kitchen_path: Path, tmp_path: Path) -> None:
        original = load_state(kitchen_path)
        saved = save_project(original, tmp_path / "kitchen.json")
        reloaded = load_state(saved)

        assert reloaded.cabinets == original.cabinets
        assert reloaded.project_name == original.project_name
        assert dict(reloaded.material_costs) == dict(original.material_costs)
        assert reloaded.labor_rate == original.labor_rate
        assert DesignSession(reloaded).cut_list() == DesignSession(original).cut_list()

    def test_legacy_ids_are_kept(self, fixtures_path: Path, tmp_path: Path) -> None:
        original = load_state(fixtures_path / "legacy_ids.json")
        reloaded = load_state(save_project(original, tmp_path / "legacy.json"))

        assert [c.id for c in reloaded.cabinets] == [c.id for c in original.cabinets]

    def test_edited_session_round_trip(self, kitchen_path: Path, tmp_path: Path) -> None:
        session = DesignSession(load_state(kitchen_path))
        session.apply_smart_drawer_defaults("cab-1")
        session.update_cabinet("cab-2", "door_style", "raised")
        session.set_labor_rate(65)

        reloaded = load_state(save_project(session.state, tmp_path / "edited.json"))
        assert reloaded.cabinets == session.state.cabinets
        assert reloaded.labor_rate == 65
        assert DesignSession(reloaded).estimate() == session.estimate()

    @pytest.mark.parametrize(
        "field, value",
        [
            ("door_overhang", "-1"),
            ("door_overhang", "abc"),
            ("door_drawer_gap", "-1/8"),
            ("toekick_height", "-2"),
            ("crown_height", "abc"),
            ("crown_height", "-3"),
            ("countertop_thickness", "0"),
            ("countertop_thickness", "1 1/2"),
            ("x_position", "inf"),
            ("doors", "inf"),
            ("shelves", float("inf")),
            ("width", "1" + "0" * 400 + "/1"),
            ("drawer_style", "glass"),
        ],
    )
    def test_any_edit_leaves_a_savable_project(
        self, kitchen_path: Path, tmp_path: Path, field: str, value: object
    ) -> None:
        """Accepted or rejected, an edit never leaves a state the file format refuses."""
        session = DesignSession(load_state(kitchen_path))
        session.update_cabinet("cab-1", field, value)

        reloaded = load_state(save_project(session.state, tmp_path / "edit.json"))
        assert reloaded.cabinets == session.state.cabinets
