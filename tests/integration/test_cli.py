"""Integration tests for the casework CLI.

These tests verify the commands work end-to-end, including:
- Project files are validated with the right exit codes
- Reports are derived from project files
- New projects are created with smart defaults
- Load errors are reported on every command
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from casework.application.config import load_state
from casework.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "projects"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_project(self, runner: CliRunner) -> None:
        """The kitchen fixture has no advisories."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "kitchen.json")])

        assert result.exit_code == 0
        assert "Validation passed. Project is valid." in result.output

    def test_project_with_warnings(self, runner: CliRunner) -> None:
        """A 60" cabinet is valid but too wide."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "with_warnings.json")])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "cabinets[0].width" in result.output
        assert "Validation passed with 1 warning(s)" in result.output

    def test_overlapping_drawers(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "overlapping_drawers.json")]
        )

        assert result.exit_code == 1
        assert "overlap" in result.output
        assert "Validation failed: 1 error(s)" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line " in result.output

    def test_unknown_field_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "unknown_field.json")])

        assert result.exit_code == 1
        assert "cabinets[0].legs" in result.output


class TestReportCommands:
    """Tests for the read-only report commands."""

    def test_cutlist(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["cutlist", str(FIXTURES_PATH / "kitchen.json")])

        assert result.exit_code == 0
        assert "CUT LIST" in result.output
        assert "SINK BASE" in result.output
        assert "PANTRY BASE" in result.output
        assert "Face Frame Stiles" in result.output

    def test_cutlist_decimal(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["cutlist", str(FIXTURES_PATH / "kitchen.json"), "--display", "decimal"]
        )

        assert result.exit_code == 0
        assert '34.500"' in result.output

    def test_materials(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["materials", str(FIXTURES_PATH / "kitchen.json")])

        assert result.exit_code == 0
        assert "MATERIAL ESTIMATE" in result.output
        assert "PROJECT ESTIMATE" in result.output
        assert "(8 hours)" in result.output

    def test_sheets_without_parts(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["sheets", str(FIXTURES_PATH / "kitchen.json"), "--no-parts"]
        )

        assert result.exit_code == 0
        assert 'Plywood - 3/4"' in result.output
        assert "Side Panel" not in result.output

    def test_shopping(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["shopping", str(FIXTURES_PATH / "kitchen.json")])

        assert result.exit_code == 0
        assert "SHOPPING LIST - Test Kitchen" in result.output
        assert "HINGES" in result.output
        assert "Total estimated cost: $" in result.output

    def test_export_json_to_stdout(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["export-json", str(FIXTURES_PATH / "kitchen.json")])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["project"] == "Test Kitchen"
        assert len(data["cut_list"]) == 26

    def test_export_json_to_file(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "kitchen-export.json"
        result = runner.invoke(
            app, ["export-json", str(FIXTURES_PATH / "kitchen.json"), "-o", str(output)]
        )

        assert result.exit_code == 0
        assert f"Exported to {output}" in result.output
        assert json.loads(output.read_text(encoding="utf-8"))["estimate"]["total"] > 0

    def test_report_on_missing_file(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["materials", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output


class TestNewCommand:
    """Tests for creating project files."""

    def test_creates_project(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "vanity.json"
        result = runner.invoke(
            app, ["new", str(output), "--name", "Vanity", "--width", "48", "--depth", "21"]
        )

        assert result.exit_code == 0
        assert f"Created {output}" in result.output
        state = load_state(output)
        assert state.project_name == "Vanity"
        cabinet = state.cabinets[0]
        assert (cabinet.width, cabinet.depth) == (48, 21)
        assert cabinet.doors == 2

    def test_fractional_width(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "narrow.json"
        result = runner.invoke(app, ["new", str(output), "--width", "14 1/2"])

        assert result.exit_code == 0
        assert load_state(output).cabinets[0].width == 14.5

    def test_smart_drawers(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "drawers.json"
        result = runner.invoke(app, ["new", str(output), "--smart-drawers", "--doors", "0"])

        assert result.exit_code == 0
        drawers = load_state(output).cabinets[0].drawers
        assert [d.height for d in drawers] == pytest.approx([4.0, 13.125, 13.125])

    def test_too_many_doors(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "doors.json"
        result = runner.invoke(app, ["new", str(output), "--doors", "3"])

        assert result.exit_code == 1
        assert "Maximum for a 24\" wide cabinet is 2 doors." in result.output
        assert not output.exists()

    def test_invalid_width(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["new", str(tmp_path / "x.json"), "--width", "wide"])

        assert result.exit_code == 1
        assert "Width must be a positive measurement" in result.output

    def test_refuses_to_overwrite(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "existing.json"
        output.write_text("{}", encoding="utf-8")

        result = runner.invoke(app, ["new", str(output)])
        assert result.exit_code == 1
        assert "already exists" in result.output

        result = runner.invoke(app, ["new", str(output), "--force"])
        assert result.exit_code == 0


class TestCalculatorCommands:
    """Tests for convert and suggest."""

    def test_convert_fraction(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["convert", "1 1/2"])

        assert result.exit_code == 0
        assert "Decimal:  1.500" in result.output
        assert 'Fraction: 1 1/2"' in result.output

    def test_convert_decimal(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["convert", "2.375"])

        assert 'Fraction: 2 3/8"' in result.output

    def test_suggest_doors(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["suggest", "--width", "48"])

        assert result.exit_code == 0
        assert "Maximum doors:   5" in result.output
        assert "Suggested doors: 2" in result.output
        assert "Drawer layout" not in result.output

    def test_suggest_drawers(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["suggest", "--width", "24", "--height", "34.5"])

        assert result.exit_code == 0
        assert 'Drawer 1: 4" (4.000")' in result.output
        assert 'Drawer 2: 13 1/8" (13.125")' in result.output

    def test_suggest_too_short(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["suggest", "--width", "24", "--height", "6"])

        assert result.exit_code == 1
        assert "too short for a drawer layout" in result.output
