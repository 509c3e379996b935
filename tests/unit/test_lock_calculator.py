"""Unit tests for lock placement.

Tests cover:
- Height, edge offset and backset range validation
- Minimum leaf thickness per lock type
- Hinge proximity as a hard failure
- Backset and depth per lock type
- Edge resolution and orientation
"""

import pytest

from doorhardware.domain.placement import (
    FailureRule,
    HingePlacementCalculator,
    LockPlacementCalculator,
    PlacementValidationError,
    nearest_mortise_backset,
)
from doorhardware.domain.value_objects import (
    DoorLeafConfig,
    HardwareKind,
    HingeSide,
    HingeSpec,
    HingeType,
    LockSpec,
    LockType,
)


@pytest.fixture
def calculator() -> LockPlacementCalculator:
    return LockPlacementCalculator()


def hinges_for(leaf: DoorLeafConfig, count: int = 2, hinge_type: HingeType = HingeType.BUTT):
    """Place hinges on a leaf with default rules."""
    return HingePlacementCalculator().calculate(
        leaf, HingeSpec(count=count, hinge_type=hinge_type)
    )


class TestLockValidation:
    """Tests for lock validation rules."""

    def test_standard_lock_passes(
        self, calculator: LockPlacementCalculator, standard_leaf: DoorLeafConfig
    ) -> None:
        """A lock at 1050mm clears hinges at 150 and 1850."""
        result = calculator.validate(standard_leaf, LockSpec(height=1050), hinges_for(standard_leaf))
        assert result.is_valid

    def test_lock_near_hinge_fails(
        self, calculator: LockPlacementCalculator, standard_leaf: DoorLeafConfig
    ) -> None:
        """A lock at 900mm is only 100mm from the middle hinge at 1000mm."""
        hinges = hinges_for(standard_leaf, count=3)
        assert hinges[1].metadata.y_position == 1000.0

        result = calculator.validate(standard_leaf, LockSpec(height=900), hinges)

        assert result.rules == (FailureRule.HINGE_PROXIMITY_VIOLATION,)
        details = result.failures[0].details
        assert details["hinge_id"] == "leaf.hinge-1"
        assert details["distance"] == pytest.approx(100.0)

    def test_piano_hinge_not_proximity_checked(
        self, calculator: LockPlacementCalculator, standard_leaf: DoorLeafConfig
    ) -> None:
        hinges = hinges_for(standard_leaf, hinge_type=HingeType.PIANO)
        assert calculator.validate(standard_leaf, LockSpec(height=1000), hinges).is_valid

    @pytest.mark.parametrize("height", [799.0, 1201.0])
    def test_height_out_of_range(
        self, calculator: LockPlacementCalculator, standard_leaf: DoorLeafConfig, height: float
    ) -> None:
        result = calculator.validate(standard_leaf, LockSpec(height=height))
        assert result.rules == (FailureRule.HEIGHT_OUT_OF_RANGE,)

    def test_height_above_short_leaf(self, calculator: LockPlacementCalculator) -> None:
        leaf = DoorLeafConfig(height=1000, width=600, leaf_thickness=40)
        result = calculator.validate(leaf, LockSpec(height=1050))
        assert result.has_rule(FailureRule.HEIGHT_OUT_OF_RANGE)

    @pytest.mark.parametrize("edge_offset", [49.0, 91.0])
    def test_edge_offset_out_of_range(
        self,
        calculator: LockPlacementCalculator,
        standard_leaf: DoorLeafConfig,
        edge_offset: float,
    ) -> None:
        result = calculator.validate(standard_leaf, LockSpec(edge_offset=edge_offset))
        assert result.rules == (FailureRule.EDGE_OFFSET_OUT_OF_RANGE,)

    def test_backset_wider_than_leaf(self, calculator: LockPlacementCalculator) -> None:
        leaf = DoorLeafConfig(height=2000, width=60, leaf_thickness=40)
        result = calculator.validate(leaf, LockSpec(backset=70))
        assert result.has_rule(FailureRule.EDGE_OFFSET_OUT_OF_RANGE)

    @pytest.mark.parametrize(
        "lock_type,minimum",
        [
            (LockType.CYLINDER, 35),
            (LockType.MORTISE, 40),
            (LockType.DEADBOLT, 38),
            (LockType.SMART, 40),
        ],
    )
    def test_minimum_thickness_per_type(
        self, calculator: LockPlacementCalculator, lock_type: LockType, minimum: float
    ) -> None:
        thin = DoorLeafConfig(height=2000, width=900, leaf_thickness=minimum - 1)
        exact = DoorLeafConfig(height=2000, width=900, leaf_thickness=minimum)

        result = calculator.validate(thin, LockSpec(lock_type=lock_type))

        assert result.rules == (FailureRule.THICKNESS_INSUFFICIENT,)
        assert result.failures[0].details["minimum"] == minimum
        assert calculator.validate(exact, LockSpec(lock_type=lock_type)).is_valid

    def test_calculate_raises(
        self, calculator: LockPlacementCalculator, standard_leaf: DoorLeafConfig
    ) -> None:
        with pytest.raises(PlacementValidationError) as exc_info:
            calculator.calculate(standard_leaf, LockSpec(height=700))
        assert exc_info.value.kind is HardwareKind.LOCK
        assert "height_out_of_range" in str(exc_info.value)


class TestLockPlacement:
    """Tests for computed lock placements."""

    def test_cylinder_lock_on_opening_edge(
        self, calculator: LockPlacementCalculator, standard_leaf: DoorLeafConfig
    ) -> None:
        lock = calculator.calculate(standard_leaf, LockSpec(), hinges_for(standard_leaf))
        assert lock.id == "leaf.lock-0"
        assert lock.position.as_tuple() == (840.0, 1050.0, -20.0)
        assert lock.metadata.side == "right"
        assert lock.transform.rotation.angle == 90.0

    def test_right_hung_leaf_locks_on_left(
        self, calculator: LockPlacementCalculator, right_hung_leaf: DoorLeafConfig
    ) -> None:
        lock = calculator.calculate(right_hung_leaf, LockSpec())
        assert lock.position.x == 60.0
        assert lock.transform.rotation.angle == -90.0

    def test_explicit_edge(
        self, calculator: LockPlacementCalculator, standard_leaf: DoorLeafConfig
    ) -> None:
        lock = calculator.calculate(standard_leaf, LockSpec(edge=HingeSide.LEFT))
        assert lock.position.x == 60.0

    def test_cylinder_backset(
        self, calculator: LockPlacementCalculator, standard_leaf: DoorLeafConfig
    ) -> None:
        lock = calculator.calculate(standard_leaf, LockSpec(backset=70))
        assert lock.position.x == 830.0

    @pytest.mark.parametrize(
        "edge_offset,backset",
        [(50.0, 44.0), (60.0, 57.0), (50.5, 44.0), (90.0, 57.0)],
    )
    def test_mortise_snaps_to_standard_backset(
        self,
        calculator: LockPlacementCalculator,
        standard_leaf: DoorLeafConfig,
        edge_offset: float,
        backset: float,
    ) -> None:
        """Mortise locks use the nearest standard backset, ties to 44mm."""
        assert nearest_mortise_backset(edge_offset) == backset
        lock = calculator.calculate(
            standard_leaf, LockSpec(lock_type=LockType.MORTISE, edge_offset=edge_offset)
        )
        assert lock.position.x == 900 - backset

    def test_mortise_depth(self, calculator: LockPlacementCalculator) -> None:
        """Mortise depth is 70% of the thickness, capped at 40mm."""
        medium = DoorLeafConfig(height=2000, width=900, leaf_thickness=44)
        thick = DoorLeafConfig(height=2000, width=900, leaf_thickness=60)
        spec = LockSpec(lock_type=LockType.MORTISE)

        assert calculator.calculate(medium, spec).position.z == pytest.approx(-30.8)
        assert calculator.calculate(thick, spec).position.z == -40.0

    def test_smart_lock_depth(
        self, calculator: LockPlacementCalculator, standard_leaf: DoorLeafConfig
    ) -> None:
        lock = calculator.calculate(standard_leaf, LockSpec(lock_type=LockType.SMART))
        assert lock.position.z == -5.0

    def test_deadbolt_centered_in_leaf(
        self, calculator: LockPlacementCalculator, standard_leaf: DoorLeafConfig
    ) -> None:
        lock = calculator.calculate(standard_leaf, LockSpec(lock_type=LockType.DEADBOLT))
        assert lock.position.z == -20.0
