"""Single-leaf placement service.

This module provides HardwarePlacementService, a facade that runs the
placement calculators for one leaf in dependency order (hinges, lock,
handles, bolts) and finishes with conflict detection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from doorhardware.domain.value_objects import (
    BoltSpec,
    DoorLeafConfig,
    HandleSpec,
    HardwareKind,
    HingeSpec,
    LockSpec,
)

from .bolt_calculator import BoltPlacementCalculator
from .config import DEFAULT_PLACEMENT_CONFIG, PlacementConfig
from .conflict_detector import ConflictDetector
from .handle_calculator import HandlePlacementCalculator
from .hinge_calculator import HingePlacementCalculator
from .lock_calculator import LockPlacementCalculator
from .results import (
    HardwareConflict,
    HardwarePlacement,
    ValidationFailure,
    ValidationResult,
)
from .weight_estimator import estimate_leaf_weight

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeafHardware:
    """Hardware selections for one leaf.

    Attributes:
        hinges: Hinge selection (every leaf is hung on hinges).
        lock: Optional lock selection.
        handles: Optional handle selection.
        bolts: Optional bolt selection (inactive leaves).
    """

    hinges: HingeSpec = field(default_factory=HingeSpec)
    lock: LockSpec | None = None
    handles: HandleSpec | None = None
    bolts: BoltSpec | None = None


@dataclass(frozen=True)
class LeafPlacement:
    """Complete placement set for one leaf.

    Attributes:
        leaf: The leaf the hardware was placed on.
        hinges: Hinge placements in ascending vertical order.
        lock: Lock placement, if a lock was requested.
        handles: Handle placements, exterior first.
        bolts: Bolt placements, top first.
        conflicts: Advisory clearance conflicts across all placements.
    """

    leaf: DoorLeafConfig
    hinges: tuple[HardwarePlacement, ...]
    lock: HardwarePlacement | None = None
    handles: tuple[HardwarePlacement, ...] = ()
    bolts: tuple[HardwarePlacement, ...] = ()
    conflicts: tuple[HardwareConflict, ...] = ()

    @property
    def placements(self) -> tuple[HardwarePlacement, ...]:
        """Every placement in calculation order."""
        lock = (self.lock,) if self.lock is not None else ()
        return self.hinges + lock + self.handles + self.bolts

    @property
    def has_blocking_conflicts(self) -> bool:
        """Check if any conflict is at error severity."""
        return any(c.is_error for c in self.conflicts)

    def by_kind(self, kind: HardwareKind) -> tuple[HardwarePlacement, ...]:
        return tuple(p for p in self.placements if p.kind is kind)

    def get(self, placement_id: str) -> HardwarePlacement:
        """Look up a placement by id.

        Raises:
            KeyError: If no placement has the given id.
        """
        for placement in self.placements:
            if placement.id == placement_id:
                return placement
        raise KeyError(f"Unknown placement: {placement_id}")


class HardwarePlacementService:
    """Service for placing all hardware on a single leaf.

    Each calculator reads only the outputs it depends on: the lock
    validator reads the hinge placements and the handle calculator reads
    the lock placement. Everything else is independent.

    Example:
        service = HardwarePlacementService()
        result = service.place_leaf(leaf, LeafHardware(
            hinges=HingeSpec(count=3),
            lock=LockSpec(),
            handles=HandleSpec(),
        ))
        for conflict in result.conflicts:
            print(conflict.formatted_message)
    """

    def __init__(self, config: PlacementConfig = DEFAULT_PLACEMENT_CONFIG) -> None:
        """Initialize the service and its calculators.

        Args:
            config: Placement tunables shared by every calculator.
        """
        self.config = config
        self.hinge_calculator = HingePlacementCalculator(config)
        self.lock_calculator = LockPlacementCalculator(config)
        self.handle_calculator = HandlePlacementCalculator(config)
        self.bolt_calculator = BoltPlacementCalculator()
        self.conflict_detector = ConflictDetector(config.clearances, config.default_clearance)

    def resolve_weight(
        self, leaf: DoorLeafConfig, door_weight_kg: float | None = None
    ) -> float:
        """Leaf weight for hinge count validation: explicit, else estimated."""
        if door_weight_kg is not None:
            return door_weight_kg
        return estimate_leaf_weight(leaf)

    def place_leaf(
        self,
        leaf: DoorLeafConfig,
        hardware: LeafHardware,
        door_weight_kg: float | None = None,
    ) -> LeafPlacement:
        """Place every requested piece of hardware on a leaf.

        Calculators fail fast: the first failing calculator raises and no
        partial placement set is returned. Conflict detection runs only after
        all hardware has been placed.

        Args:
            leaf: Leaf receiving the hardware.
            hardware: Hardware selections for the leaf.
            door_weight_kg: Explicit leaf weight; estimated when omitted.

        Returns:
            LeafPlacement with all placements and advisory conflicts.

        Raises:
            PlacementValidationError: If any calculator rejects its selection.
        """
        weight = self.resolve_weight(leaf, door_weight_kg)
        hinges = self.hinge_calculator.calculate(leaf, hardware.hinges, weight)

        lock = None
        if hardware.lock is not None:
            lock = self.lock_calculator.calculate(leaf, hardware.lock, hinges)

        handles: tuple[HardwarePlacement, ...] = ()
        if hardware.handles is not None:
            handles = self.handle_calculator.calculate(leaf, hardware.handles, lock)

        bolts: tuple[HardwarePlacement, ...] = ()
        if hardware.bolts is not None:
            bolts = self.bolt_calculator.calculate(leaf, hardware.bolts)

        placement = LeafPlacement(
            leaf=leaf, hinges=hinges, lock=lock, handles=handles, bolts=bolts
        )
        conflicts = self.conflict_detector.detect(placement.placements)
        logger.debug(
            f"Placed {len(placement.placements)} item(s) on {leaf.leaf_id} "
            f"with {len(conflicts)} conflict(s)"
        )
        return LeafPlacement(
            leaf=leaf,
            hinges=hinges,
            lock=lock,
            handles=handles,
            bolts=bolts,
            conflicts=conflicts,
        )

    def validate_leaf(
        self,
        leaf: DoorLeafConfig,
        hardware: LeafHardware,
        door_weight_kg: float | None = None,
    ) -> ValidationResult:
        """Collect every validation failure for a leaf without raising.

        Hinge proximity is checked against the computed hinge positions only
        when the hinges themselves are valid.

        Args:
            leaf: Leaf receiving the hardware.
            hardware: Hardware selections for the leaf.
            door_weight_kg: Explicit leaf weight; estimated when omitted.

        Returns:
            ValidationResult with the failures of every calculator.
        """
        weight = self.resolve_weight(leaf, door_weight_kg)
        failures: list[ValidationFailure] = []

        hinge_result = self.hinge_calculator.validate(leaf, hardware.hinges, weight)
        failures.extend(hinge_result.failures)
        hinges: tuple[HardwarePlacement, ...] = ()
        if hinge_result.is_valid:
            hinges = self.hinge_calculator.calculate(leaf, hardware.hinges, weight)

        lock = None
        if hardware.lock is not None:
            lock_result = self.lock_calculator.validate(leaf, hardware.lock, hinges)
            failures.extend(lock_result.failures)
            if lock_result.is_valid:
                lock = self.lock_calculator.calculate(leaf, hardware.lock, hinges)

        if hardware.handles is not None:
            failures.extend(
                self.handle_calculator.validate(leaf, hardware.handles, lock).failures
            )

        if hardware.bolts is not None:
            failures.extend(self.bolt_calculator.validate(leaf, hardware.bolts).failures)

        return ValidationResult.from_failures(failures)
