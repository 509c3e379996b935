"""Unit tests for double-door coordination.

Tests the DoubleDoorCoordinator including:
- Hardware allocation between active and inactive leaves
- Hinge side mirroring for equal-width leaves
- Meeting gaps per astragal type
- Assembly-frame symmetry about the meeting line
- Inactive leaf opening sequence
"""

import pytest

from doorhardware.domain.placement import (
    DoubleDoorCoordinator,
    DoubleDoorHardware,
    PlacementValidationError,
)
from doorhardware.domain.value_objects import (
    AstragalType,
    BoltSpec,
    BoltType,
    DoorLeafConfig,
    DoubleDoorConfig,
    HandleSpec,
    HardwareKind,
    HingeSide,
    LeafState,
    LockSpec,
)


def make_double_door(
    active_width: float = 800,
    inactive_width: float = 800,
    active_side: HingeSide = HingeSide.RIGHT,
    inactive_side: HingeSide = HingeSide.LEFT,
    astragal: AstragalType = AstragalType.NONE,
    thickness: float = 40,
) -> DoubleDoorConfig:
    """Create a pair of 2000mm leaves."""
    return DoubleDoorConfig(
        active_leaf=DoorLeafConfig(
            height=2000,
            width=active_width,
            leaf_thickness=thickness,
            hinge_side=active_side,
            leaf_id="active",
        ),
        inactive_leaf=DoorLeafConfig(
            height=2000,
            width=inactive_width,
            leaf_thickness=thickness,
            hinge_side=inactive_side,
            leaf_id="inactive",
        ),
        astragal=astragal,
    )


@pytest.fixture
def coordinator() -> DoubleDoorCoordinator:
    return DoubleDoorCoordinator()


class TestHardwareAllocation:
    """Tests for which leaf receives which hardware."""

    def test_active_leaf_gets_lock_and_handles(
        self, coordinator: DoubleDoorCoordinator
    ) -> None:
        result = coordinator.coordinate(make_double_door(), DoubleDoorHardware())
        assert result.active.lock is not None
        assert len(result.active.handles) == 2
        assert result.active.bolts == ()

    def test_inactive_leaf_gets_bolts_only(
        self, coordinator: DoubleDoorCoordinator
    ) -> None:
        """The inactive leaf is never independently lockable."""
        result = coordinator.coordinate(make_double_door(), DoubleDoorHardware())
        assert result.inactive.lock is None
        assert result.inactive.handles == ()
        assert [p.id for p in result.inactive.by_kind(HardwareKind.BOLT)] == [
            "inactive.bolt-top",
            "inactive.bolt-bottom",
        ]

    def test_bolts_on_meeting_edge(self, coordinator: DoubleDoorCoordinator) -> None:
        result = coordinator.coordinate(make_double_door(), DoubleDoorHardware())
        for bolt in result.inactive.bolts:
            assert bolt.position.x == 760

    def test_placements_combine_both_leaves(
        self, coordinator: DoubleDoorCoordinator
    ) -> None:
        result = coordinator.coordinate(make_double_door(), DoubleDoorHardware())
        assert len(result.placements) == 2 + 1 + 2 + 2 + 2
        ids = [p.id for p in result.placements]
        assert len(set(ids)) == len(ids)

    def test_inactive_leaf_failure_raises(
        self, coordinator: DoubleDoorCoordinator
    ) -> None:
        hardware = DoubleDoorHardware(bolts=BoltSpec(positions=frozenset()))
        with pytest.raises(PlacementValidationError) as exc_info:
            coordinator.coordinate(make_double_door(), hardware)
        assert exc_info.value.kind is HardwareKind.BOLT

    def test_thin_leaves_reject_flush_bolts(
        self, coordinator: DoubleDoorCoordinator
    ) -> None:
        door = make_double_door(thickness=36)
        with pytest.raises(PlacementValidationError):
            coordinator.coordinate(door, DoubleDoorHardware())
        surface = DoubleDoorHardware(bolts=BoltSpec(bolt_type=BoltType.SURFACE))
        assert coordinator.coordinate(door, surface).inactive.bolts


class TestHingeMirroring:
    """Tests for hinge side mirroring."""

    def test_equal_widths_mirrored(self) -> None:
        """The active leaf's hinge side wins."""
        door = make_double_door(inactive_side=HingeSide.RIGHT)
        mirrored = DoubleDoorCoordinator.mirror_hinge_sides(door)
        assert mirrored.active_leaf.hinge_side is HingeSide.RIGHT
        assert mirrored.inactive_leaf.hinge_side is HingeSide.LEFT

    def test_already_mirrored_unchanged(self) -> None:
        door = make_double_door()
        assert DoubleDoorCoordinator.mirror_hinge_sides(door) is door

    def test_unequal_widths_unchanged(self) -> None:
        door = make_double_door(
            active_width=900, inactive_width=450, inactive_side=HingeSide.RIGHT
        )
        assert DoubleDoorCoordinator.mirror_hinge_sides(door) is door

    def test_coordinate_places_mirrored_hinges(
        self, coordinator: DoubleDoorCoordinator
    ) -> None:
        door = make_double_door(inactive_side=HingeSide.RIGHT)
        result = coordinator.coordinate(door, DoubleDoorHardware())
        assert result.config.inactive_leaf.hinge_side is HingeSide.LEFT
        assert all(h.position.x == 0.0 for h in result.inactive.hinges)


class TestMeetingEdgeAlignment:
    """Tests for keeping lock, handles and bolts off the hinge edges."""

    def test_bolts_follow_mirrored_leaf(
        self, coordinator: DoubleDoorCoordinator
    ) -> None:
        """Bolts pinned to what becomes the hinge edge move to the meeting edge."""
        door = make_double_door(active_side=HingeSide.LEFT, inactive_side=HingeSide.LEFT)
        hardware = DoubleDoorHardware(bolts=BoltSpec(meeting_edge=HingeSide.RIGHT))
        result = coordinator.coordinate(door, hardware)

        assert result.config.inactive_leaf.hinge_side is HingeSide.RIGHT
        assert [h.position.x for h in result.inactive.hinges] == [800, 800]
        assert [b.position.x for b in result.inactive.bolts] == [40.0, 40.0]

    def test_lock_and_handles_moved_off_hinge_edge(
        self, coordinator: DoubleDoorCoordinator
    ) -> None:
        hardware = DoubleDoorHardware(
            lock=LockSpec(edge=HingeSide.RIGHT),
            handles=HandleSpec(edge=HingeSide.RIGHT),
        )
        result = coordinator.coordinate(make_double_door(), hardware)

        assert result.active.lock is not None
        assert result.active.lock.position.x == 60.0
        assert all(h.position.x == 60.0 for h in result.active.handles)

    def test_matching_edges_kept(self) -> None:
        door = make_double_door()
        hardware = DoubleDoorHardware(bolts=BoltSpec(meeting_edge=HingeSide.RIGHT))
        active, inactive = DoubleDoorCoordinator.split_hardware(door, hardware)
        assert inactive.bolts is hardware.bolts
        assert active.lock is hardware.lock
        assert active.handles is hardware.handles


class TestMeetingGap:
    """Tests for meeting gaps and the assembly frame."""

    @pytest.mark.parametrize(
        "astragal,gap",
        [
            (AstragalType.NONE, 3.0),
            (AstragalType.SURFACE, 0.0),
            (AstragalType.OVERLAP, -10.0),
        ],
    )
    def test_gap_per_astragal(self, astragal: AstragalType, gap: float) -> None:
        assert DoubleDoorCoordinator.meeting_gap(astragal) == gap

    def test_left_leaf_follows_hinge_sides(
        self, coordinator: DoubleDoorCoordinator
    ) -> None:
        result = coordinator.coordinate(make_double_door(), DoubleDoorHardware())
        assert result.left_leaf.leaf_id == "inactive"
        assert result.right_leaf.leaf_id == "active"

    def test_meeting_line(self, coordinator: DoubleDoorCoordinator) -> None:
        result = coordinator.coordinate(make_double_door(), DoubleDoorHardware())
        assert result.meeting_line_x == pytest.approx(801.5)

    @pytest.mark.parametrize(
        "astragal", [AstragalType.NONE, AstragalType.SURFACE, AstragalType.OVERLAP]
    )
    def test_hinges_symmetric_about_meeting_line(
        self, coordinator: DoubleDoorCoordinator, astragal: AstragalType
    ) -> None:
        """Equal-width mirrored leaves have hinges at equal and opposite offsets."""
        result = coordinator.coordinate(
            make_double_door(astragal=astragal), DoubleDoorHardware()
        )
        offsets = result.hinge_offsets_from_meeting_line()
        for active, inactive in zip(offsets["active"], offsets["inactive"]):
            assert active == pytest.approx(-inactive)
            assert abs(active) == pytest.approx(800 + result.meeting_gap / 2)


class TestOpeningSequence:
    """Tests for inactive leaf sequencing."""

    @pytest.mark.parametrize(
        "state,allowed",
        [
            (LeafState.CLOSED, False),
            (LeafState.OPENING, False),
            (LeafState.OPEN, True),
            (LeafState.CLOSING, False),
        ],
    )
    def test_inactive_opens_only_after_active(
        self, state: LeafState, allowed: bool
    ) -> None:
        assert DoubleDoorCoordinator.inactive_leaf_may_open(state) is allowed
