"""Unit tests for the project file schema models."""

import pytest
from pydantic import ValidationError

from casework.application.config import (
    CabinetConfig,
    DrawerConfig,
    ProjectConfiguration,
)
from casework.domain import ConstructionType, FrontStyle, HandleSide, HingeType


def _cabinet(**overrides) -> dict:
    data = {"width": 24, "height": 34.5, "depth": 24}
    data.update(overrides)
    return data


class TestCabinetConfig:
    """Tests for CabinetConfig."""

    def test_defaults(self) -> None:
        config = CabinetConfig.model_validate(_cabinet())
        assert config.id is None
        assert config.name == "Cabinet"
        assert config.cabinet_type == "base"
        assert config.construction is ConstructionType.FRAMELESS
        assert config.thickness == 0.75
        assert config.shelves == 1
        assert config.hardware.hinges is HingeType.CONCEALED_BLUM

    def test_camel_case_keys(self) -> None:
        config = CabinetConfig.model_validate(
            _cabinet(
                type="wall",
                construction="faceFrame",
                xPosition=30,
                doorStyle="raised",
                doorHandles={"0": "right"},
                doors=1,
                backPanel=False,
            )
        )
        assert config.cabinet_type == "wall"
        assert config.construction is ConstructionType.FACE_FRAME
        assert config.x_position == 30
        assert config.door_style is FrontStyle.RAISED
        assert config.door_handles == {0: HandleSide.RIGHT}
        assert config.back_panel is False

    def test_python_field_names(self) -> None:
        config = CabinetConfig(width=24, height=34.5, depth=24, x_position=12)
        assert config.x_position == 12

    @pytest.mark.parametrize("field", ["width", "height", "depth"])
    def test_required_dimensions(self, field: str) -> None:
        data = _cabinet()
        del data[field]
        with pytest.raises(ValidationError):
            CabinetConfig.model_validate(data)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"width": 0},
            {"height": -1},
            {"doors": -1},
            {"shelves": -2},
            {"thickness": 0},
        ],
    )
    def test_rejects_out_of_range(self, overrides: dict) -> None:
        with pytest.raises(ValidationError):
            CabinetConfig.model_validate(_cabinet(**overrides))

    def test_rejects_unknown_field(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CabinetConfig.model_validate(_cabinet(legs=4))
        assert exc_info.value.errors()[0]["type"] == "extra_forbidden"

    def test_rejects_glass_drawers(self) -> None:
        with pytest.raises(ValidationError, match="glass"):
            CabinetConfig.model_validate(_cabinet(drawerStyle="glass"))

    def test_rejects_unknown_enum_value(self) -> None:
        with pytest.raises(ValidationError):
            CabinetConfig.model_validate(_cabinet(doorStyle="louvered"))

    def test_rejects_handles_for_missing_doors(self) -> None:
        with pytest.raises(ValidationError, match="door_handles"):
            CabinetConfig.model_validate(_cabinet(doors=1, doorHandles={"1": "left"}))

    def test_numeric_ids_become_strings(self) -> None:
        config = CabinetConfig.model_validate(
            _cabinet(id=1730572200000, drawers=[{"id": 7, "height": 6}])
        )
        assert config.id == "1730572200000"
        assert config.drawers[0].id == "7"
        assert config.drawers[0].start_y == 0

    def test_legacy_pricing_block(self) -> None:
        config = CabinetConfig.model_validate(
            _cabinet(pricing={"materialCost": 90, "totalCost": 310})
        )
        assert config.pricing.material_cost == 90
        assert config.pricing.total_cost == 310


class TestDrawerConfig:
    """Tests for DrawerConfig."""

    def test_rejects_zero_height(self) -> None:
        with pytest.raises(ValidationError):
            DrawerConfig(height=0)

    def test_rejects_negative_start(self) -> None:
        with pytest.raises(ValidationError):
            DrawerConfig.model_validate({"height": 6, "startY": -1})


class TestProjectConfiguration:
    """Tests for the root project model."""

    def test_empty_project(self) -> None:
        config = ProjectConfiguration()
        assert config.name == "Untitled Project"
        assert config.cabinets == []
        assert config.material_costs["plywood"] == 45
        assert config.labor_rate == 50

    @pytest.mark.parametrize("version", ["1.0", "1.3"])
    def test_supported_versions(self, version: str) -> None:
        assert ProjectConfiguration(version=version).version == version

    def test_unsupported_major_version(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported version: 2.0"):
            ProjectConfiguration(version="2.0")

    def test_malformed_version(self) -> None:
        with pytest.raises(ValidationError):
            ProjectConfiguration(version="one")

    def test_rejects_negative_prices(self) -> None:
        with pytest.raises(ValidationError, match="plywood"):
            ProjectConfiguration.model_validate({"materialCosts": {"plywood": -1}})

    def test_rejects_negative_labor_rate(self) -> None:
        with pytest.raises(ValidationError):
            ProjectConfiguration.model_validate({"laborRate": -10})

    def test_duplicate_cabinet_ids(self) -> None:
        with pytest.raises(ValidationError, match="Cabinet ids must be unique"):
            ProjectConfiguration.model_validate(
                {"cabinets": [_cabinet(id="a"), _cabinet(id="a")]}
            )

    def test_duplicate_drawer_ids_across_cabinets(self) -> None:
        drawers = [{"id": "d", "height": 6, "startY": 4}]
        with pytest.raises(ValidationError, match="Drawer ids must be unique"):
            ProjectConfiguration.model_validate(
                {"cabinets": [_cabinet(drawers=drawers), _cabinet(drawers=drawers)]}
            )
