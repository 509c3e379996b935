"""Unit tests for configuration loading, schemas and adapters.

Tests cover:
- load_config() file, JSON and schema errors
- load_config_from_dict() validation
- Schema version compatibility
- Single/double door exclusivity
- Conversion to domain objects
"""

import json
from pathlib import Path
from typing import Any

import pytest

from doorhardware.application import PlaceHardwareCommand
from doorhardware.application.config import (
    ConfigError,
    DoubleDoorJob,
    SingleDoorJob,
    config_to_job,
    config_to_placement_config,
    load_config,
    load_config_from_dict,
)
from doorhardware.domain.placement import DEFAULT_PLACEMENT_CONFIG, FailureRule
from doorhardware.domain.value_objects import (
    BoltPosition,
    DistributionMode,
    HardwareKind,
    HingeSide,
    HingeType,
    LockType,
)


def make_single_config(**overrides: Any) -> dict[str, Any]:
    """Create a minimal single-door configuration dictionary."""
    data: dict[str, Any] = {
        "schema_version": "1.0",
        "door": {"height": 2000, "width": 900, "leaf_thickness": 40},
    }
    data.update(overrides)
    return data


def make_double_config(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "schema_version": "1.0",
        "double_door": {
            "active_leaf": {
                "leaf_id": "active",
                "height": 2000,
                "width": 800,
                "leaf_thickness": 40,
                "hinge_side": "right",
            },
            "inactive_leaf": {
                "leaf_id": "inactive",
                "height": 2000,
                "width": 800,
                "leaf_thickness": 40,
            },
        },
    }
    data["double_door"].update(overrides)
    return data


class TestLoadConfig:
    """Tests for load_config() error handling."""

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"schema_version": "1.0",', encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 1

    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "door.json"
        path.write_text(json.dumps(make_single_config()), encoding="utf-8")
        config = load_config(path)
        assert config.door is not None
        assert config.door.width == 900


class TestSchemaValidation:
    """Tests for schema validation through load_config_from_dict()."""

    def test_minimal_single_door(self) -> None:
        config = load_config_from_dict(make_single_config())
        assert not config.is_double_door
        assert config.door.hinge_side is HingeSide.LEFT  # type: ignore[union-attr]

    def test_unknown_field_rejected(self) -> None:
        data = make_single_config()
        data["door"]["colour"] = "red"
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "door.colour"

    def test_negative_width_rejected(self) -> None:
        data = make_single_config()
        data["door"]["width"] = -5
        with pytest.raises(ConfigError, match="door.width"):
            load_config_from_dict(data)

    def test_bolt_position_path(self) -> None:
        data = make_single_config(hardware={"bolts": {"positions": ["top", "middle"]}})
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)
        assert exc_info.value.details[0]["path"] == "hardware.bolts.positions[1]"

    def test_newer_minor_version_accepted(self) -> None:
        config = load_config_from_dict(make_single_config(schema_version="1.4"))
        assert config.schema_version == "1.4"

    def test_unsupported_major_version(self) -> None:
        with pytest.raises(ConfigError, match="Unsupported schema version"):
            load_config_from_dict(make_single_config(schema_version="2.0"))

    def test_door_and_double_door_exclusive(self) -> None:
        data = make_double_config()
        data["door"] = {"height": 2000, "width": 900, "leaf_thickness": 40}
        with pytest.raises(ConfigError, match="exactly one"):
            load_config_from_dict(data)

    def test_neither_door_nor_double_door(self) -> None:
        with pytest.raises(ConfigError):
            load_config_from_dict({"schema_version": "1.0"})

    def test_double_door_heights_must_match(self) -> None:
        data = make_double_config()
        data["double_door"]["inactive_leaf"]["height"] = 2100
        with pytest.raises(ConfigError, match="same height"):
            load_config_from_dict(data)

    def test_range_rules_left_to_calculators(self) -> None:
        """Out-of-range lock heights load fine; placement reports them."""
        config = load_config_from_dict(make_single_config(hardware={"lock": {"height": 500}}))
        assert config.hardware.lock.height == 500  # type: ignore[union-attr]


class TestAdapters:
    """Tests for converting schemas into domain objects."""

    def test_single_door_job(self) -> None:
        data = make_single_config(
            hardware={
                "hinges": {
                    "count": 3,
                    "type": "concealed",
                    "placement_rules": {"top_offset": 180, "distribution_mode": "weighted"},
                },
                "lock": {"type": "mortise", "edge_offset": 55},
                "handles": {"type": "pull", "side": "exterior"},
            }
        )
        job = config_to_job(load_config_from_dict(data))

        assert isinstance(job, SingleDoorJob)
        assert job.leaf.width == 900
        assert job.hardware.hinges.count == 3
        assert job.hardware.hinges.hinge_type is HingeType.CONCEALED
        rules = job.hardware.hinges.placement_rules
        assert rules.top_offset == 180
        assert rules.bottom_offset == 150
        assert rules.distribution_mode is DistributionMode.WEIGHTED
        assert job.hardware.lock is not None
        assert job.hardware.lock.lock_type is LockType.MORTISE
        assert job.hardware.bolts is None

    def test_missing_hardware_means_default_hinges(self) -> None:
        job = config_to_job(load_config_from_dict(make_single_config()))
        assert isinstance(job, SingleDoorJob)
        assert job.hardware.hinges.count == 2
        assert job.hardware.lock is None

    def test_double_door_job(self) -> None:
        data = make_double_config(
            astragal="overlap",
            hardware={"bolts": {"positions": ["bottom"]}},
        )
        job = config_to_job(load_config_from_dict(data))

        assert isinstance(job, DoubleDoorJob)
        assert job.door.active_leaf.hinge_side is HingeSide.RIGHT
        assert job.door.astragal.value == "overlap"
        assert job.hardware.bolts.positions == frozenset({BoltPosition.BOTTOM})

    def test_placement_tuning(self) -> None:
        data = make_single_config(placement={"weighted_exponent": 0.6})
        placement = config_to_placement_config(load_config_from_dict(data).placement)
        assert placement.weighted_exponent == 0.6
        assert placement.handle_offset_with_lock == 60

    def test_no_tuning_uses_defaults(self) -> None:
        assert config_to_placement_config(None) is DEFAULT_PLACEMENT_CONFIG

    def test_clearance_overrides_merge_with_standard_table(self) -> None:
        data = make_single_config(
            placement={"clearances": [{"kinds": ["handle", "lock"], "clearance": 20}]}
        )
        placement = config_to_placement_config(load_config_from_dict(data).placement)
        clearances = placement.clearances
        assert clearances[frozenset({HardwareKind.LOCK, HardwareKind.HANDLE})] == 20
        assert clearances[frozenset({HardwareKind.HINGE, HardwareKind.LOCK})] == 150

    def test_lock_thickness_overrides_merge_with_standard_table(self) -> None:
        data = make_single_config(placement={"lock_min_thickness": {"cylinder": 42}})
        placement = config_to_placement_config(load_config_from_dict(data).placement)
        assert placement.lock_min_thickness[LockType.CYLINDER] == 42
        assert placement.lock_min_thickness[LockType.MORTISE] == 40

    def test_lock_thickness_override_applies_to_validation(self) -> None:
        """A 40mm leaf fails once cylinder locks need 42mm."""
        data = make_single_config(
            hardware={"lock": {"type": "cylinder"}},
            placement={"lock_min_thickness": {"cylinder": 42}},
        )
        output = PlaceHardwareCommand().validate(load_config_from_dict(data))
        assert output.results["leaf"].rules == (FailureRule.THICKNESS_INSUFFICIENT,)

    def test_clearance_rule_with_three_kinds_rejected(self) -> None:
        data = make_single_config(
            placement={
                "clearances": [{"kinds": ["hinge", "lock", "bolt"], "clearance": 50}]
            }
        )
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)
        assert exc_info.value.error_type == "validation"
