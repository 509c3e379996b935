"""Unit tests for inactive-leaf bolt placement."""

import pytest

from doorhardware.domain.placement import (
    BoltPlacementCalculator,
    FailureRule,
    PlacementValidationError,
)
from doorhardware.domain.value_objects import (
    BoltPosition,
    BoltSpec,
    BoltType,
    DoorLeafConfig,
    HingeSide,
)


@pytest.fixture
def calculator() -> BoltPlacementCalculator:
    return BoltPlacementCalculator()


@pytest.fixture
def inactive_leaf() -> DoorLeafConfig:
    """A narrow left-hung inactive leaf meeting the active leaf on its right."""
    return DoorLeafConfig(height=2000, width=450, leaf_thickness=40, leaf_id="inactive")


class TestBoltPlacement:
    """Tests for computed bolt placements."""

    def test_top_and_bottom_bolts(
        self, calculator: BoltPlacementCalculator, inactive_leaf: DoorLeafConfig
    ) -> None:
        top, bottom = calculator.calculate(inactive_leaf, BoltSpec())
        assert top.id == "inactive.bolt-top"
        assert top.position.as_tuple() == (410.0, 1800.0, -20.0)
        assert bottom.id == "inactive.bolt-bottom"
        assert bottom.position.as_tuple() == (410.0, 200.0, -20.0)

    def test_rotation_points_toward_frame(
        self, calculator: BoltPlacementCalculator, inactive_leaf: DoorLeafConfig
    ) -> None:
        top, bottom = calculator.calculate(inactive_leaf, BoltSpec())
        assert top.transform.rotation.axis == (0.0, 0.0, 1.0)
        assert top.transform.rotation.angle == 0.0
        assert bottom.transform.rotation.angle == 180.0

    def test_surface_bolts_on_face(
        self, calculator: BoltPlacementCalculator, inactive_leaf: DoorLeafConfig
    ) -> None:
        placements = calculator.calculate(inactive_leaf, BoltSpec(bolt_type=BoltType.SURFACE))
        assert all(p.position.z == 0.0 for p in placements)
        assert all(p.transform.rotation.angle == 0.0 for p in placements)

    def test_explicit_meeting_edge(
        self, calculator: BoltPlacementCalculator, inactive_leaf: DoorLeafConfig
    ) -> None:
        top, _ = calculator.calculate(inactive_leaf, BoltSpec(meeting_edge=HingeSide.LEFT))
        assert top.position.x == 40.0

    def test_single_position(
        self, calculator: BoltPlacementCalculator, inactive_leaf: DoorLeafConfig
    ) -> None:
        placements = calculator.calculate(
            inactive_leaf, BoltSpec(positions=frozenset({BoltPosition.BOTTOM}))
        )
        assert [p.id for p in placements] == ["inactive.bolt-bottom"]
        assert placements[0].metadata.index == 0


class TestBoltValidation:
    """Tests for bolt validation failures."""

    def test_flush_bolt_on_thin_leaf_fails(self, calculator: BoltPlacementCalculator) -> None:
        """Flush bolts need at least 40mm of leaf thickness."""
        thin = DoorLeafConfig(height=2000, width=450, leaf_thickness=30)
        result = calculator.validate(thin, BoltSpec(bolt_type=BoltType.FLUSH))
        assert result.rules == (FailureRule.THICKNESS_INSUFFICIENT,)

    def test_surface_bolt_on_thin_leaf_passes(self, calculator: BoltPlacementCalculator) -> None:
        thin = DoorLeafConfig(height=2000, width=450, leaf_thickness=30)
        assert calculator.validate(thin, BoltSpec(bolt_type=BoltType.SURFACE)).is_valid

    def test_no_positions(
        self, calculator: BoltPlacementCalculator, inactive_leaf: DoorLeafConfig
    ) -> None:
        result = calculator.validate(inactive_leaf, BoltSpec(positions=frozenset()))
        assert result.rules == (FailureRule.NO_POSITIONS_SPECIFIED,)

    @pytest.mark.parametrize("offset", [149.0, 301.0])
    def test_offset_out_of_range(
        self, calculator: BoltPlacementCalculator, inactive_leaf: DoorLeafConfig, offset: float
    ) -> None:
        result = calculator.validate(inactive_leaf, BoltSpec(top_offset=offset))
        assert result.rules == (FailureRule.OFFSET_OUT_OF_RANGE,)
        assert result.failures[0].details["top_offset"] == offset

    def test_unrequested_offset_still_checked(
        self, calculator: BoltPlacementCalculator, inactive_leaf: DoorLeafConfig
    ) -> None:
        """Both offsets are range-checked even when only one bolt is placed."""
        spec = BoltSpec(
            positions=frozenset({BoltPosition.BOTTOM}), top_offset=500, bottom_offset=200
        )
        result = calculator.validate(inactive_leaf, spec)
        assert result.rules == (FailureRule.OFFSET_OUT_OF_RANGE,)
        assert result.failures[0].details["top_offset"] == 500

    def test_calculate_raises(self, calculator: BoltPlacementCalculator) -> None:
        thin = DoorLeafConfig(height=2000, width=450, leaf_thickness=30)
        with pytest.raises(PlacementValidationError):
            calculator.calculate(thin, BoltSpec())
