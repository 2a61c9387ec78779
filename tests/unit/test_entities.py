"""Unit tests for domain entities.

These tests verify:
- Cabinet and Drawer validation
- Immutability and normalization of collections
- DesignState lookups and revisions
"""

from dataclasses import FrozenInstanceError

import pytest

from casework.domain import Cabinet, DesignState, Drawer, HandleSide


class TestDrawer:
    """Tests for Drawer entity."""

    def test_top(self) -> None:
        drawer = Drawer(id="d", height=6, start_y=4)
        assert drawer.top == 10

    def test_rejects_zero_height(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            Drawer(id="d", height=0, start_y=4)
        assert "must be positive" in str(exc_info.value)

    def test_rejects_negative_start(self) -> None:
        with pytest.raises(ValueError):
            Drawer(id="d", height=6, start_y=-1)


class TestCabinet:
    """Tests for Cabinet entity."""

    def test_defaults(self) -> None:
        """A default cabinet is a 24" base with one shelf."""
        cabinet = Cabinet()
        assert (cabinet.width, cabinet.height, cabinet.depth) == (24.0, 34.5, 24.0)
        assert cabinet.shelves == 1
        assert cabinet.doors == 0
        assert cabinet.drawers == ()
        assert cabinet.id

    def test_ids_are_unique(self) -> None:
        assert Cabinet().id != Cabinet().id

    @pytest.mark.parametrize("field", ["width", "height", "depth"])
    def test_rejects_non_positive_dimensions(self, field: str) -> None:
        with pytest.raises(ValueError) as exc_info:
            Cabinet(**{field: 0})
        assert "must be positive" in str(exc_info.value)

    def test_rejects_negative_doors(self) -> None:
        with pytest.raises(ValueError):
            Cabinet(doors=-1)

    def test_is_frozen(self) -> None:
        cabinet = Cabinet()
        with pytest.raises(FrozenInstanceError):
            cabinet.width = 30  # type: ignore

    def test_drawer_list_becomes_tuple(self) -> None:
        cabinet = Cabinet(drawers=[Drawer(id="d", height=6, start_y=4)])  # type: ignore[arg-type]
        assert isinstance(cabinet.drawers, tuple)

    def test_door_handles_are_normalized(self) -> None:
        """String keys and values from JSON become ints and HandleSide."""
        cabinet = Cabinet(doors=2, door_handles={"1": "right"})  # type: ignore[dict-item]
        assert cabinet.door_handles[1] is HandleSide.RIGHT

    def test_door_handles_are_read_only(self) -> None:
        cabinet = Cabinet(doors=1, door_handles={0: HandleSide.LEFT})
        with pytest.raises(TypeError):
            cabinet.door_handles[0] = HandleSide.RIGHT  # type: ignore[index]

    def test_with_changes_returns_new_revision(self) -> None:
        cabinet = Cabinet(width=24)
        wider = cabinet.with_changes(width=30)
        assert wider.width == 30
        assert cabinet.width == 24
        assert wider.id == cabinet.id

    def test_drawer_lookup(self, sink_base: Cabinet) -> None:
        assert sink_base.drawer("drw-1") is sink_base.drawers[0]
        assert sink_base.drawer("missing") is None
        assert sink_base.has_drawers


class TestDesignState:
    """Tests for DesignState."""

    def test_cabinet_lookup(self, design_state: DesignState) -> None:
        assert design_state.cabinet("cab-1").name == "Sink Base"
        assert design_state.cabinet("nope") is None

    def test_replace_cabinet(self, design_state: DesignState) -> None:
        cabinet = design_state.cabinet("cab-1").with_changes(name="Renamed")
        updated = design_state.replace_cabinet(cabinet)
        assert updated.cabinet("cab-1").name == "Renamed"
        assert design_state.cabinet("cab-1").name == "Sink Base"

    def test_default_material_costs(self) -> None:
        state = DesignState()
        assert state.material_costs["plywood"] == 45.0
        assert state.labor_rate == 50.0

    def test_rejects_negative_labor_rate(self) -> None:
        with pytest.raises(ValueError):
            DesignState(labor_rate=-1)

    def test_equal_states_compare_equal(self) -> None:
        cabinet = Cabinet(id="c")
        assert DesignState(cabinets=(cabinet,)) == DesignState(cabinets=[cabinet])  # type: ignore[arg-type]
