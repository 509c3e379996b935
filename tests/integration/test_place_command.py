"""Integration tests for the place CLI command.

These tests verify the place command works end-to-end:
- Text and JSON output for single and double doors
- Configuration and placement errors exit with code 1
- Output can be written to a file
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from doorhardware.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestPlaceCommand:
    """Tests for the place command."""

    def test_single_door_text(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["place", str(FIXTURES_PATH / "single_door.json")])

        assert result.exit_code == 0
        assert "HARDWARE PLACEMENT: front" in result.output
        for placement_id in ("front.hinge-2", "front.lock-0", "front.handle-interior"):
            assert placement_id in result.output
        assert "CLEARANCE CONFLICTS" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["place", str(FIXTURES_PATH / "hinges_and_pulls.json"), "--format", "json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        leaf = data["leaf"]
        assert leaf["leaf_id"] == "pantry"
        assert [p["id"] for p in leaf["placements"]] == [
            "pantry.hinge-0",
            "pantry.hinge-1",
            "pantry.handle-exterior",
            "pantry.handle-interior",
        ]
        assert leaf["placements"][0]["position"] == [800, 150.0, -25]
        assert leaf["placements"][2]["position"] == [70, 1000, 40]
        assert leaf["conflicts"] == []

    def test_double_door_text(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["place", str(FIXTURES_PATH / "double_door.json")])

        assert result.exit_code == 0
        assert "DOUBLE DOOR HARDWARE PLACEMENT" in result.output
        assert "meeting gap 0.0 mm" in result.output
        assert "inactive.bolt-top" in result.output

    def test_placement_failure(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["place", str(FIXTURES_PATH / "tall_door_two_hinges.json")]
        )

        assert result.exit_code == 1
        assert "minimum_hinge_count_violation" in result.output

    def test_unknown_field(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["place", str(FIXTURES_PATH / "unknown_field.json")])

        assert result.exit_code == 1
        assert "door.material" in result.output

    def test_unknown_format(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["place", str(FIXTURES_PATH / "single_door.json"), "--format", "xml"]
        )
        assert result.exit_code == 1
        assert "Unknown format" in result.output

    def test_output_file(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "placements.json"
        result = runner.invoke(
            app,
            [
                "place",
                str(FIXTURES_PATH / "hinges_and_pulls.json"),
                "--format",
                "json",
                "--output",
                str(output),
            ],
        )

        assert result.exit_code == 0
        assert "Wrote placements" in result.output
        assert json.loads(output.read_text())["leaf"]["leaf_id"] == "pantry"
