"""Unit tests for the advisory design validator."""

import pytest

from casework.application.config import (
    CabinetDesignValidator,
    ValidationResult,
    validate_cabinet,
    validate_design,
)
from casework.application.config.validators.cabinet import closest_standard
from casework.domain import Cabinet, ConstructionStandards, DesignState, Drawer
from casework.domain.standards import SmartDefaults


def _messages(items) -> list[str]:
    return [item.message for item in items]


class TestValidationResult:
    """Tests for the result container."""

    def test_exit_codes(self) -> None:
        result = ValidationResult()
        assert result.exit_code == 0
        result.add_warning("a", "warn")
        assert result.exit_code == 2
        result.add_error("a", "broken")
        assert result.exit_code == 1
        assert not result.is_valid

    def test_duplicate_suggestions_are_dropped(self) -> None:
        result = ValidationResult()
        result.add_suggestion("a", "same").add_suggestion("a", "same")
        assert len(result.suggestions) == 1

    def test_merge(self) -> None:
        merged = ValidationResult().add_error("a", "x").merge(
            ValidationResult().add_warning("b", "y")
        )
        assert len(merged.errors) == 1
        assert len(merged.warnings) == 1


class TestDimensions:
    """Tests for dimension and proportion checks."""

    def test_standard_cabinet_is_clean(self) -> None:
        result = validate_cabinet(Cabinet(width=24, height=34.5, depth=24, doors=1))
        assert result.exit_code == 0
        assert result.suggestions == []

    def test_too_wide(self) -> None:
        result = validate_cabinet(Cabinet(width=60))
        assert 'Width exceeds maximum (48"). Consider adding center support.' in _messages(
            result.warnings
        )
        assert result.warnings[0].path == "cabinet.width"

    def test_too_narrow(self) -> None:
        result = validate_cabinet(Cabinet(width=4, depth=4))
        assert any(m.startswith("Width is below minimum") for m in _messages(result.warnings))

    def test_standard_width_suggestion(self) -> None:
        result = validate_cabinet(Cabinet(width=25))
        assert 'Consider standard size: 24"' in _messages(result.suggestions)

    def test_standard_height_uses_cabinet_type(self) -> None:
        result = validate_cabinet(Cabinet(cabinet_type="wall", height=31, depth=12, width=24))
        assert 'Standard wall height: 30"' in _messages(result.suggestions)

    def test_unknown_type_has_no_height_suggestion(self) -> None:
        result = validate_cabinet(Cabinet(cabinet_type="island", height=40))
        assert not any("height" in m for m in _messages(result.suggestions))

    def test_tall_and_narrow(self) -> None:
        result = validate_cabinet(Cabinet(width=12, height=60, depth=12))
        warning = next(
            w for w in result.warnings if w.message == "Cabinet is very tall relative to width."
        )
        assert warning.suggestion == "Add a nailer or mounting system."

    def test_deeper_than_wide(self) -> None:
        result = validate_cabinet(Cabinet(width=12, depth=24))
        assert "Cabinet depth exceeds width. This is unusual and may look odd." in _messages(
            result.warnings
        )

    @pytest.mark.parametrize(
        "value, expected", [(25, 24), (22.4, 21), (22.5, 21), (100, 48), (1, 9)]
    )
    def test_closest_standard(self, value: float, expected: float) -> None:
        assert closest_standard(value, (9, 12, 15, 18, 21, 24, 27, 30, 33, 36, 42, 48)) == expected


class TestDrawers:
    """Tests for drawer layout checks."""

    def test_overlapping_drawers_are_errors(self) -> None:
        cabinet = Cabinet(
            drawers=(Drawer(id="a", height=6, start_y=4), Drawer(id="b", height=6, start_y=8))
        )
        result = validate_cabinet(cabinet)
        assert 'Drawers 1 and 2 overlap by 2.00".' in _messages(result.errors)
        assert result.exit_code == 1

    def test_overlap_is_checked_in_height_order(self) -> None:
        cabinet = Cabinet(
            drawers=(Drawer(id="b", height=6, start_y=8), Drawer(id="a", height=6, start_y=4))
        )
        assert len(validate_cabinet(cabinet).errors) == 1

    def test_touching_drawers_warn(self) -> None:
        cabinet = Cabinet(
            drawers=(Drawer(id="a", height=6, start_y=4), Drawer(id="b", height=6, start_y=10))
        )
        result = validate_cabinet(cabinet)
        assert result.is_valid
        assert any("too small" in m for m in _messages(result.warnings))

    def test_drawer_beyond_cabinet(self) -> None:
        cabinet = Cabinet(height=20, drawers=(Drawer(id="a", height=10, start_y=12),))
        result = validate_cabinet(cabinet)
        assert "Drawer 1: Extends beyond cabinet height." in _messages(result.errors)

    def test_drawer_in_toekick(self) -> None:
        cabinet = Cabinet(drawers=(Drawer(id="a", height=6, start_y=2),))
        assert "Drawer 1: Starts below toekick area." in _messages(
            validate_cabinet(cabinet).warnings
        )

    def test_drawer_height_range(self) -> None:
        cabinet = Cabinet(
            drawers=(
                Drawer(id="a", height=1.5, start_y=4),
                Drawer(id="b", height=14, start_y=6),
            )
        )
        messages = _messages(validate_cabinet(cabinet).warnings)
        assert any("is below minimum" in m and m.startswith("Drawer 1") for m in messages)
        assert any("exceeds recommended maximum" in m for m in messages)


class TestDoors:
    """Tests for door checks."""

    def test_door_count_over_limit(self) -> None:
        result = validate_cabinet(Cabinet(width=24, doors=4))
        assert result.errors[0].path == "cabinet.doors"
        assert result.errors[0].value == 4

    def test_double_door_allows_two(self) -> None:
        result = validate_cabinet(Cabinet(width=12, doors=2, double_door=True))
        assert result.is_valid

    def test_not_enough_door_space(self) -> None:
        cabinet = Cabinet(doors=1, drawers=(Drawer(id="a", height=22, start_y=4),))
        warning = next(w for w in validate_cabinet(cabinet).warnings if w.path == "cabinet.doors")
        assert warning.message.startswith("Not enough space for door (8.5\")")

    def test_narrow_doors(self) -> None:
        result = validate_cabinet(Cabinet(width=21, doors=3))
        assert any(m.startswith("Each door would be 7.0\" wide") for m in _messages(result.warnings))

    def test_wide_single_door(self) -> None:
        result = validate_cabinet(Cabinet(width=30, doors=1))
        assert 'Door width (30.0") is wide. Consider using double doors.' in _messages(
            result.suggestions
        )

    def test_door_widths_follow_standards(self) -> None:
        standards = ConstructionStandards(
            smart_defaults=SmartDefaults(min_door_width=10, optimal_max_door_width=36)
        )
        narrow = validate_cabinet(Cabinet(width=18, doors=2), standards)
        assert 'Each door would be 9.0" wide. Minimum: 10".' in _messages(narrow.warnings)

        wide = validate_cabinet(Cabinet(width=30, doors=1), standards)
        assert not any("double doors" in m for m in _messages(wide.suggestions))


class TestValidateDesign:
    """Tests for whole-design validation."""

    def test_paths_index_cabinets(self) -> None:
        state = DesignState(cabinets=(Cabinet(width=24), Cabinet(width=60)))
        result = validate_design(state)
        assert result.warnings[0].path == "cabinets[1].width"

    def test_empty_design(self) -> None:
        assert validate_design(DesignState()).exit_code == 0

    def test_validator_name(self) -> None:
        assert CabinetDesignValidator().name == "cabinet"
