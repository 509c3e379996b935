"""Hardware selection value objects.

One frozen dataclass per hardware kind. Range and feasibility rules are
checked by the placement calculators so that they can be reported as
structured validation failures; construction only rejects values that can
never be meaningful (such as a negative backset).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ._enums import (
    BoltPosition,
    BoltType,
    DistributionMode,
    HandleSide,
    HandleType,
    HingeSide,
    HingeType,
    LockType,
)


@dataclass(frozen=True)
class HingePlacementRules:
    """Vertical placement overrides for a hinge set.

    Attributes:
        top_offset: Distance from the top of the leaf to the top hinge (mm).
        bottom_offset: Distance from the bottom of the leaf to the bottom hinge (mm).
        distribution_mode: How intermediate hinges are spread.
    """

    top_offset: float = 150.0
    bottom_offset: float = 150.0
    distribution_mode: DistributionMode = DistributionMode.EVEN


@dataclass(frozen=True)
class HingeSpec:
    """Hinge selection for a leaf.

    Attributes:
        count: Number of hinges. Ignored for piano hinges.
        hinge_type: Hinge style.
        placement_rules: Vertical placement overrides.
    """

    count: int = 2
    hinge_type: HingeType = HingeType.BUTT
    placement_rules: HingePlacementRules = field(default_factory=HingePlacementRules)


@dataclass(frozen=True)
class LockSpec:
    """Lock selection for a leaf.

    Attributes:
        lock_type: Lock mechanism.
        height: Height of the lock center above the bottom of the leaf (mm).
        edge_offset: Distance from the lock edge to the lock center (mm).
        edge: Edge the lock is fitted to. Defaults to the edge opposite
            the hinges.
        backset: Explicit backset for cylinder locks (mm). Overrides
            edge_offset for the X position when given.
    """

    lock_type: LockType = LockType.CYLINDER
    height: float = 1050.0
    edge_offset: float = 60.0
    edge: HingeSide | None = None
    backset: float | None = None

    def __post_init__(self) -> None:
        if self.backset is not None and self.backset <= 0:
            raise ValueError("Backset must be positive")


@dataclass(frozen=True)
class HandleSpec:
    """Handle selection for a leaf.

    Attributes:
        handle_type: Handle style.
        height: Explicit handle height (mm). When omitted the handle follows
            the lock height, or the default handle height without a lock.
        side: Face(s) receiving a handle.
        edge: Edge the handle sits near. Defaults to the lock's edge, else
            the edge opposite the hinges.
        edge_offset: Explicit distance from the edge (mm).
    """

    handle_type: HandleType = HandleType.LEVER
    height: float | None = None
    side: HandleSide = HandleSide.BOTH
    edge: HingeSide | None = None
    edge_offset: float | None = None

    def __post_init__(self) -> None:
        if self.edge_offset is not None and self.edge_offset < 0:
            raise ValueError("Handle edge_offset must be non-negative")


@dataclass(frozen=True)
class BoltSpec:
    """Bolt selection for an inactive leaf.

    Attributes:
        bolt_type: Bolt style.
        positions: Bolt locations along the meeting edge.
        top_offset: Distance from the top of the leaf to the top bolt (mm).
        bottom_offset: Distance from the bottom of the leaf to the bottom bolt (mm).
        meeting_edge: Edge that meets the active leaf. Defaults to the edge
            opposite the hinges.
    """

    bolt_type: BoltType = BoltType.FLUSH
    positions: frozenset[BoltPosition] = frozenset(
        {BoltPosition.TOP, BoltPosition.BOTTOM}
    )
    top_offset: float = 200.0
    bottom_offset: float = 200.0
    meeting_edge: HingeSide | None = None

    def __post_init__(self) -> None:
        # Accept any iterable of positions but store an immutable set.
        object.__setattr__(self, "positions", frozenset(self.positions))
