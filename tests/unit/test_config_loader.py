"""Unit tests for loading and saving project files."""

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from casework.application.config import (
    ConfigError,
    load_project,
    load_project_from_dict,
    load_state,
    project_to_dict,
    save_project,
)
from casework.application.config.loader import _format_json_path
from casework.domain import DesignState


class TestFormatJsonPath:
    """Tests for turning pydantic locations into JSON paths."""

    @pytest.mark.parametrize(
        "loc, expected",
        [
            ((), ""),
            (("name",), "name"),
            (("cabinets", 0, "width"), "cabinets[0].width"),
            (("cabinets", 1, "drawers", 0, "startY"), "cabinets[1].drawers[0].startY"),
            ((0, "width"), "[0].width"),
        ],
    )
    def test_paths(self, loc: tuple, expected: str) -> None:
        assert _format_json_path(loc) == expected


class TestLoadProject:
    """Tests for load_project and load_project_from_dict."""

    def test_loads_kitchen(self, kitchen_path: Path) -> None:
        config = load_project(kitchen_path)
        assert config.name == "Test Kitchen"
        assert config.version == "1.0"
        assert [c.id for c in config.cabinets] == ["cab-1", "cab-2"]
        assert config.material_costs == {"plywood": 45, "mdf": 35}

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"
        with pytest.raises(ConfigError) as exc_info:
            load_project(path)
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == path

    def test_invalid_json(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_project(fixtures_path / "invalid_json.json")
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert "line" in error.details[0]
        assert "column" in error.details[0]

    def test_unknown_field(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_project(fixtures_path / "unknown_field.json")
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "cabinets[0].legs"
        assert error.details[0]["error_type"] == "extra_forbidden"
        assert "cabinets[0].legs" in str(error)

    def test_reports_every_failure(self) -> None:
        data = {
            "cabinets": [
                {"width": 0, "height": 34.5, "depth": 24},
                {"width": 24, "height": 34.5, "depth": 24, "drawers": [{"height": -1}]},
            ]
        }
        with pytest.raises(ConfigError) as exc_info:
            load_project_from_dict(data)
        paths = [d["path"] for d in exc_info.value.details]
        assert paths == ["cabinets[0].width", "cabinets[1].drawers[0].height"]
        assert "(got: 0)" in exc_info.value.message

    def test_non_finite_numbers(self) -> None:
        data = {"cabinets": [{"width": float("inf"), "height": 34.5, "depth": 24}]}
        with pytest.raises(ConfigError) as exc_info:
            load_project_from_dict(data)
        assert [d["path"] for d in exc_info.value.details] == ["cabinets[0].width"]

    def test_non_object(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_project_from_dict([1, 2])  # type: ignore[arg-type]
        assert exc_info.value.error_type == "validation"

    def test_legacy_file(self, fixtures_path: Path) -> None:
        state = load_state(fixtures_path / "legacy_ids.json")
        first, second = state.cabinets
        assert first.id == "1730572200000"
        assert first.drawers[0].id == "1730572200001"
        assert second.id
        assert second.id != first.id
        assert state.labor_rate == 50


class TestSaveProject:
    """Tests for serialization and saving."""

    def test_project_to_dict_shape(self, design_state: DesignState) -> None:
        saved_at = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
        data = project_to_dict(design_state, saved_at=saved_at)
        assert data["name"] == "Test Kitchen"
        assert data["date"] == "2026-03-01T12:00:00+00:00"
        assert data["version"] == "1.0"
        assert data["appName"] == "casework"
        assert data["laborRate"] == 50
        assert "pricing" not in data["cabinets"][0]

        cabinet = data["cabinets"][0]
        assert cabinet["id"] == "cab-1"
        assert cabinet["type"] == "base"
        assert cabinet["xPosition"] == 0
        assert cabinet["drawers"] == [{"id": "drw-1", "height": 6, "startY": 4}]
        assert cabinet["hardware"]["hinges"] == "Concealed (Blum)"

    def test_save_writes_json(self, design_state: DesignState, tmp_path: Path) -> None:
        path = save_project(design_state, tmp_path / "out.json")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["cabinets"][0]["name"] == "Sink Base"

    def test_save_then_load(self, design_state: DesignState, tmp_path: Path) -> None:
        path = save_project(design_state, tmp_path / "out.json")
        loaded = load_state(path)
        assert loaded.cabinets == design_state.cabinets
        assert loaded.project_name == design_state.project_name
        assert dict(loaded.material_costs) == dict(design_state.material_costs)

    def test_save_to_missing_directory(self, design_state: DesignState, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            save_project(design_state, tmp_path / "nope" / "out.json")
        assert exc_info.value.error_type == "file_write_error"
