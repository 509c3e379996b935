"""Lock placement calculator.

This module provides LockPlacementCalculator, which positions a single lock
on the opening edge of a leaf and validates it against the leaf thickness
and the hinges already placed on the leaf.
"""

from __future__ import annotations

import logging
from typing import Sequence

from doorhardware.domain.value_objects import (
    AxisAngle,
    DoorLeafConfig,
    HardwareKind,
    HingeSide,
    LockSpec,
    LockType,
    Point3D,
    Transform3D,
)

from .config import DEFAULT_PLACEMENT_CONFIG, PlacementConfig
from .constants import (
    LOCK_MAX_EDGE_OFFSET,
    LOCK_MAX_HEIGHT,
    LOCK_MIN_EDGE_OFFSET,
    LOCK_MIN_HEIGHT,
    LOCK_MIN_HINGE_DISTANCE,
    MORTISE_DEPTH_RATIO,
    MORTISE_MAX_DEPTH,
    MORTISE_STANDARD_BACKSETS,
    SMART_LOCK_INSET,
)
from .results import (
    FailureRule,
    HardwarePlacement,
    PlacementMetadata,
    PlacementValidationError,
    ValidationFailure,
    ValidationResult,
)

logger = logging.getLogger(__name__)


def nearest_mortise_backset(edge_offset: float) -> float:
    """Snap a requested edge offset to the nearest standard mortise backset.

    Ties resolve to the smaller backset.
    """
    return min(MORTISE_STANDARD_BACKSETS, key=lambda b: (abs(b - edge_offset), b))


class LockPlacementCalculator:
    """Calculates the placement of a single lock on a leaf.

    Proximity to hinges is a hard failure here: a lock closer than 150mm
    (vertically) to any discrete hinge is never placed. Continuous hinges
    (piano hinges) run the full height and are not checked.
    """

    def __init__(self, config: PlacementConfig = DEFAULT_PLACEMENT_CONFIG) -> None:
        self.config = config

    def resolve_edge(self, leaf: DoorLeafConfig, spec: LockSpec) -> HingeSide:
        """Edge the lock is fitted to (defaults to the edge opposite the hinges)."""
        return spec.edge if spec.edge is not None else leaf.opening_edge

    def validate(
        self,
        leaf: DoorLeafConfig,
        spec: LockSpec,
        hinges: Sequence[HardwarePlacement] = (),
    ) -> ValidationResult:
        """Validate a lock selection against a leaf and its hinges.

        Checks:
        - Lock height within 800-1200mm and within the leaf
        - Edge offset within 50-90mm
        - Leaf thickness meets the minimum for the lock type
        - At least 150mm vertical distance from every discrete hinge

        Args:
            leaf: Leaf receiving the lock.
            spec: Lock selection.
            hinges: Hinge placements already computed for the leaf.

        Returns:
            ValidationResult listing every violated rule.
        """
        failures: list[ValidationFailure] = []

        if not LOCK_MIN_HEIGHT <= spec.height <= LOCK_MAX_HEIGHT or spec.height > leaf.height:
            failures.append(
                ValidationFailure(
                    rule=FailureRule.HEIGHT_OUT_OF_RANGE,
                    message=(
                        f"Lock height {spec.height:.1f}mm must be between "
                        f"{LOCK_MIN_HEIGHT:.0f}mm and {LOCK_MAX_HEIGHT:.0f}mm "
                        f"and within the {leaf.height:.0f}mm leaf"
                    ),
                    details={
                        "height": spec.height,
                        "minimum": LOCK_MIN_HEIGHT,
                        "maximum": LOCK_MAX_HEIGHT,
                        "door_height": leaf.height,
                    },
                )
            )

        if not LOCK_MIN_EDGE_OFFSET <= spec.edge_offset <= LOCK_MAX_EDGE_OFFSET:
            failures.append(
                ValidationFailure(
                    rule=FailureRule.EDGE_OFFSET_OUT_OF_RANGE,
                    message=(
                        f"Lock edge offset {spec.edge_offset:.1f}mm must be between "
                        f"{LOCK_MIN_EDGE_OFFSET:.0f}mm and {LOCK_MAX_EDGE_OFFSET:.0f}mm"
                    ),
                    details={
                        "edge_offset": spec.edge_offset,
                        "minimum": LOCK_MIN_EDGE_OFFSET,
                        "maximum": LOCK_MAX_EDGE_OFFSET,
                    },
                )
            )

        backset = self._backset(spec)
        if backset >= leaf.width:
            failures.append(
                ValidationFailure(
                    rule=FailureRule.EDGE_OFFSET_OUT_OF_RANGE,
                    message=(
                        f"Lock backset {backset:.1f}mm does not fit on a "
                        f"{leaf.width:.0f}mm wide leaf"
                    ),
                    details={"backset": backset, "door_width": leaf.width},
                )
            )

        min_thickness = self.config.lock_min_thickness[spec.lock_type]
        if leaf.leaf_thickness < min_thickness:
            failures.append(
                ValidationFailure(
                    rule=FailureRule.THICKNESS_INSUFFICIENT,
                    message=(
                        f"{spec.lock_type.value.capitalize()} lock requires a leaf at "
                        f"least {min_thickness:.0f}mm thick "
                        f"(got {leaf.leaf_thickness:.1f}mm)"
                    ),
                    details={
                        "leaf_thickness": leaf.leaf_thickness,
                        "minimum": min_thickness,
                        "lock_type": spec.lock_type.value,
                    },
                )
            )

        for hinge in hinges:
            if hinge.metadata.length is not None:
                continue
            distance = abs(spec.height - hinge.metadata.y_position)
            if distance < LOCK_MIN_HINGE_DISTANCE:
                failures.append(
                    ValidationFailure(
                        rule=FailureRule.HINGE_PROXIMITY_VIOLATION,
                        message=(
                            f"Lock at {spec.height:.1f}mm is {distance:.1f}mm from "
                            f"{hinge.id} (requires {LOCK_MIN_HINGE_DISTANCE:.0f}mm)"
                        ),
                        details={
                            "lock_height": spec.height,
                            "hinge_id": hinge.id,
                            "hinge_y": hinge.metadata.y_position,
                            "distance": distance,
                            "minimum": LOCK_MIN_HINGE_DISTANCE,
                        },
                    )
                )

        return ValidationResult.from_failures(failures)

    def calculate(
        self,
        leaf: DoorLeafConfig,
        spec: LockSpec,
        hinges: Sequence[HardwarePlacement] = (),
    ) -> HardwarePlacement:
        """Calculate the lock placement for a leaf.

        Args:
            leaf: Leaf receiving the lock.
            spec: Lock selection.
            hinges: Hinge placements already computed for the leaf.

        Returns:
            The lock placement.

        Raises:
            PlacementValidationError: If the selection fails validation.
        """
        result = self.validate(leaf, spec, hinges)
        if not result.is_valid:
            raise PlacementValidationError(HardwareKind.LOCK, result)

        edge = self.resolve_edge(leaf, spec)
        x = leaf.x_from_edge(edge, self._backset(spec))
        position = Point3D(x, spec.height, self._depth(leaf, spec.lock_type))
        # Turned 90 degrees toward the opening edge, mirrored by edge side.
        rotation = AxisAngle.about_y(90.0 if edge is HingeSide.RIGHT else -90.0)

        placement = HardwarePlacement(
            id=f"{leaf.leaf_id}.lock-0",
            kind=HardwareKind.LOCK,
            transform=Transform3D(position, rotation),
            metadata=PlacementMetadata(
                index=0,
                hardware_type=spec.lock_type.value,
                side=edge.value,
                y_position=spec.height,
            ),
        )
        logger.debug(
            f"Placed {spec.lock_type.value} lock on {leaf.leaf_id} at "
            f"({position.x}, {position.y}, {position.z})"
        )
        return placement

    def _backset(self, spec: LockSpec) -> float:
        """Horizontal distance from the lock edge to the lock center."""
        if spec.lock_type is LockType.CYLINDER and spec.backset is not None:
            return spec.backset
        if spec.lock_type is LockType.MORTISE:
            return nearest_mortise_backset(spec.edge_offset)
        return spec.edge_offset

    def _depth(self, leaf: DoorLeafConfig, lock_type: LockType) -> float:
        """Z position of the lock body for each lock type."""
        if lock_type in (LockType.CYLINDER, LockType.DEADBOLT):
            return -leaf.leaf_thickness / 2
        if lock_type is LockType.MORTISE:
            return -min(MORTISE_MAX_DEPTH, MORTISE_DEPTH_RATIO * leaf.leaf_thickness)
        if lock_type is LockType.SMART:
            return -SMART_LOCK_INSET
        raise ValueError(f"Unsupported lock type: {lock_type}")
