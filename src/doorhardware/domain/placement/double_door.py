"""Double-door coordination.

This module provides DoubleDoorCoordinator, which places hardware on the
active and inactive leaves of a double door, mirrors the hinge sides of
equal-width leaves, and computes the gap at the meeting edge.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TypeVar

from doorhardware.domain.value_objects import (
    AstragalType,
    BoltSpec,
    DoorLeafConfig,
    DoubleDoorConfig,
    HandleSpec,
    HingeSide,
    HingeSpec,
    LeafState,
    LockSpec,
)

from .config import DEFAULT_PLACEMENT_CONFIG, PlacementConfig
from .constants import (
    MEETING_GAP_NO_ASTRAGAL,
    MEETING_GAP_OVERLAP_ASTRAGAL,
    MEETING_GAP_SURFACE_ASTRAGAL,
)
from .placement_service import HardwarePlacementService, LeafHardware, LeafPlacement
from .results import HardwareConflict, HardwarePlacement

logger = logging.getLogger(__name__)

_EdgeSpec = TypeVar("_EdgeSpec", LockSpec, HandleSpec, BoltSpec)

MEETING_GAPS: dict[AstragalType, float] = {
    AstragalType.NONE: MEETING_GAP_NO_ASTRAGAL,
    AstragalType.SURFACE: MEETING_GAP_SURFACE_ASTRAGAL,
    AstragalType.OVERLAP: MEETING_GAP_OVERLAP_ASTRAGAL,
}


@dataclass(frozen=True)
class DoubleDoorHardware:
    """Hardware selections for a double door.

    The inactive leaf is never independently lockable, so it carries hinges
    and bolts only.

    Attributes:
        active_hinges: Hinge selection for the active leaf.
        lock: Lock selection for the active leaf.
        handles: Handle selection for the active leaf.
        inactive_hinges: Hinge selection for the inactive leaf.
        bolts: Bolt selection for the inactive leaf.
    """

    active_hinges: HingeSpec = field(default_factory=HingeSpec)
    lock: LockSpec = field(default_factory=LockSpec)
    handles: HandleSpec = field(default_factory=HandleSpec)
    inactive_hinges: HingeSpec = field(default_factory=HingeSpec)
    bolts: BoltSpec = field(default_factory=BoltSpec)


@dataclass(frozen=True)
class DoubleDoorPlacement:
    """Placement sets for both leaves of a double door.

    The assembly frame places the left-hand leaf (the leaf hung on its left
    edge; the active leaf when that is ambiguous) at x = 0, followed by the
    meeting gap and then the right-hand leaf.

    Attributes:
        config: The effective configuration, after hinge-side mirroring.
        active: Placement set for the active leaf.
        inactive: Placement set for the inactive leaf.
        meeting_gap: Gap between the leaves at rest (negative when they overlap).
    """

    config: DoubleDoorConfig
    active: LeafPlacement
    inactive: LeafPlacement
    meeting_gap: float

    @property
    def placements(self) -> tuple[HardwarePlacement, ...]:
        return self.active.placements + self.inactive.placements

    @property
    def conflicts(self) -> tuple[HardwareConflict, ...]:
        return self.active.conflicts + self.inactive.conflicts

    @property
    def left_leaf(self) -> DoorLeafConfig:
        """The leaf occupying the left of the opening."""
        active = self.config.active_leaf
        inactive = self.config.inactive_leaf
        if inactive.hinge_side is HingeSide.LEFT and active.hinge_side is HingeSide.RIGHT:
            return inactive
        return active

    @property
    def right_leaf(self) -> DoorLeafConfig:
        if self.left_leaf is self.config.active_leaf:
            return self.config.inactive_leaf
        return self.config.active_leaf

    @property
    def meeting_line_x(self) -> float:
        """X of the meeting line in the assembly frame."""
        return self.left_leaf.width + self.meeting_gap / 2

    def assembly_x(self, leaf: DoorLeafConfig, local_x: float) -> float:
        """Convert a leaf-local X coordinate to the assembly frame."""
        if leaf.leaf_id == self.left_leaf.leaf_id:
            return local_x
        return self.left_leaf.width + self.meeting_gap + local_x

    def hinge_offsets_from_meeting_line(self) -> dict[str, tuple[float, ...]]:
        """Hinge X offsets from the meeting line, keyed by leaf id.

        For equal-width mirrored leaves the offsets have equal magnitude and
        opposite sign.
        """
        offsets: dict[str, tuple[float, ...]] = {}
        for result in (self.active, self.inactive):
            offsets[result.leaf.leaf_id] = tuple(
                self.assembly_x(result.leaf, hinge.position.x) - self.meeting_line_x
                for hinge in result.hinges
            )
        return offsets


class DoubleDoorCoordinator:
    """Coordinates hardware placement across the two leaves of a double door.

    The active leaf receives hinges, lock and handles; the inactive leaf
    receives hinges and bolts. Each leaf is placed independently after
    hinge-side mirroring and meeting-edge alignment.

    Example:
        coordinator = DoubleDoorCoordinator()
        result = coordinator.coordinate(double_door, DoubleDoorHardware())
        if coordinator.inactive_leaf_may_open(animation_state):
            ...
    """

    def __init__(self, config: PlacementConfig = DEFAULT_PLACEMENT_CONFIG) -> None:
        self.service = HardwarePlacementService(config)

    @staticmethod
    def meeting_gap(astragal: AstragalType) -> float:
        """Gap between the leaves at the meeting edge for an astragal type."""
        return MEETING_GAPS[astragal]

    @staticmethod
    def mirror_hinge_sides(config: DoubleDoorConfig) -> DoubleDoorConfig:
        """Force equal-width leaves onto opposite hinge sides.

        The active leaf's hinge side wins. Leaves of different widths are
        returned unchanged.
        """
        if not config.has_equal_widths:
            return config
        mirrored_side = config.active_leaf.hinge_side.opposite
        if config.inactive_leaf.hinge_side is mirrored_side:
            return config
        logger.info(
            f"Mirroring inactive leaf {config.inactive_leaf.leaf_id} to "
            f"{mirrored_side.value}-hand hinges"
        )
        return replace(
            config,
            inactive_leaf=replace(config.inactive_leaf, hinge_side=mirrored_side),
        )

    @staticmethod
    def split_hardware(
        config: DoubleDoorConfig, hardware: DoubleDoorHardware
    ) -> tuple[LeafHardware, LeafHardware]:
        """Allocate hardware to the active and inactive leaves.

        The lock and handles of the active leaf and the bolts of the inactive
        leaf always sit on the edge facing the other leaf. An explicit edge
        naming the hinge edge is moved to the meeting edge.

        Args:
            config: Double door after hinge-side mirroring.
            hardware: Hardware selections for both leaves.

        Returns:
            Tuple of (active leaf hardware, inactive leaf hardware).
        """
        active_leaf = config.active_leaf
        inactive_leaf = config.inactive_leaf
        active = LeafHardware(
            hinges=hardware.active_hinges,
            lock=_on_meeting_edge(hardware.lock, "edge", active_leaf),
            handles=_on_meeting_edge(hardware.handles, "edge", active_leaf),
        )
        inactive = LeafHardware(
            hinges=hardware.inactive_hinges,
            bolts=_on_meeting_edge(hardware.bolts, "meeting_edge", inactive_leaf),
        )
        return active, inactive

    @staticmethod
    def inactive_leaf_may_open(active_leaf_state: LeafState) -> bool:
        """Check whether the inactive leaf may be opened.

        The inactive leaf may open only once the active leaf reports that it
        is fully open. The state is owned by the animation layer and only
        read here.
        """
        return active_leaf_state is LeafState.OPEN

    def coordinate(
        self,
        config: DoubleDoorConfig,
        hardware: DoubleDoorHardware,
    ) -> DoubleDoorPlacement:
        """Place hardware on both leaves of a double door.

        Args:
            config: The double door's leaves and astragal.
            hardware: Hardware selections for both leaves.

        Returns:
            DoubleDoorPlacement with both placement sets and the meeting gap.

        Raises:
            PlacementValidationError: If either leaf's hardware fails validation.
        """
        effective = self.mirror_hinge_sides(config)
        active_hardware, inactive_hardware = self.split_hardware(effective, hardware)

        active = self.service.place_leaf(effective.active_leaf, active_hardware)
        inactive = self.service.place_leaf(effective.inactive_leaf, inactive_hardware)

        gap = self.meeting_gap(effective.astragal)
        logger.debug(
            f"Coordinated double door {effective.active_leaf.leaf_id}/"
            f"{effective.inactive_leaf.leaf_id} with {gap}mm meeting gap"
        )
        return DoubleDoorPlacement(
            config=effective, active=active, inactive=inactive, meeting_gap=gap
        )


def _on_meeting_edge(spec: _EdgeSpec, attribute: str, leaf: DoorLeafConfig) -> _EdgeSpec:
    """Return ``spec`` with an explicit edge moved off the hinge edge."""
    edge = getattr(spec, attribute)
    if edge is None or edge is leaf.opening_edge:
        return spec
    logger.info(
        f"Moving {type(spec).__name__} on {leaf.leaf_id} from the {edge.value} "
        f"hinge edge to the {leaf.opening_edge.value} meeting edge"
    )
    return replace(spec, **{attribute: leaf.opening_edge})
