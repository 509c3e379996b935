"""Hinge placement calculator.

This module provides HingePlacementCalculator, which distributes hinges
vertically along the hinge-side edge of a leaf and applies the depth and
orientation rules for each hinge type.
"""

from __future__ import annotations

import logging

from doorhardware.domain.value_objects import (
    AxisAngle,
    DistributionMode,
    DoorLeafConfig,
    HardwareKind,
    HingeSide,
    HingeSpec,
    HingeType,
    Point3D,
    Transform3D,
)

from .config import DEFAULT_PLACEMENT_CONFIG, PlacementConfig
from .constants import (
    CONCEALED_HINGE_BACK_FACE_CLEARANCE,
    CONCEALED_HINGE_MIN_THICKNESS,
    HEAVY_DOOR_WEIGHT_THRESHOLD_KG,
    MIN_HINGE_COUNT,
    MIN_HINGE_EDGE_OFFSET,
    MIN_HINGE_SPACING,
    TALL_DOOR_HEIGHT_THRESHOLD,
    VERY_HEAVY_DOOR_WEIGHT_THRESHOLD_KG,
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


def minimum_hinge_count(door_height: float, door_weight_kg: float | None = None) -> int:
    """Determine the minimum hinge count for a leaf.

    Standard hinge count guidelines:
    - 2 hinges by default
    - 3 hinges for leaves taller than 2100mm or heavier than 50kg
    - 4 hinges for leaves heavier than 80kg

    Args:
        door_height: Height of the leaf in millimeters.
        door_weight_kg: Estimated leaf weight, if known.

    Returns:
        Minimum number of hinges required (2, 3, or 4).
    """
    weight = door_weight_kg or 0.0
    if weight > VERY_HEAVY_DOOR_WEIGHT_THRESHOLD_KG:
        return 4
    if door_height > TALL_DOOR_HEIGHT_THRESHOLD or weight > HEAVY_DOOR_WEIGHT_THRESHOLD_KG:
        return 3
    return MIN_HINGE_COUNT


class HingePlacementCalculator:
    """Calculates hinge placements for a single leaf.

    Hinges are pinned to the hinge-side edge: X is exactly 0 for left-hung
    leaves and exactly the leaf width for right-hung leaves. Type-specific
    refinements (barrel offset, cup inset) are reported as a mount offset so
    the anchor never drifts off the edge.

    Example:
        calculator = HingePlacementCalculator()
        hinges = calculator.calculate(leaf, HingeSpec(count=3))
    """

    def __init__(self, config: PlacementConfig = DEFAULT_PLACEMENT_CONFIG) -> None:
        """Initialize the calculator.

        Args:
            config: Placement tunables.
        """
        self.config = config

    def validate(
        self,
        leaf: DoorLeafConfig,
        spec: HingeSpec,
        door_weight_kg: float | None = None,
    ) -> ValidationResult:
        """Validate a hinge selection against a leaf.

        Checks:
        - Hinge count meets the minimum for the leaf height and weight
        - Top and bottom offsets are each at least 100mm
        - The span between the end hinges fits (count - 2) x 150mm
        - Concealed hinges have a leaf at least 16mm thick

        Piano hinges run the full leaf height and skip these checks.

        Args:
            leaf: Leaf receiving the hinges.
            spec: Hinge selection.
            door_weight_kg: Estimated leaf weight for the minimum count rule.

        Returns:
            ValidationResult listing every violated rule.
        """
        if spec.hinge_type is HingeType.PIANO:
            return ValidationResult.ok()

        failures: list[ValidationFailure] = []
        rules = spec.placement_rules

        required = minimum_hinge_count(leaf.height, door_weight_kg)
        if spec.count < required:
            failures.append(
                ValidationFailure(
                    rule=FailureRule.MINIMUM_HINGE_COUNT_VIOLATION,
                    message=(
                        f"{spec.count} hinge(s) specified but a {leaf.height:.0f}mm leaf"
                        f" requires at least {required}"
                    ),
                    details={
                        "count": spec.count,
                        "required": required,
                        "door_height": leaf.height,
                        "door_weight_kg": door_weight_kg,
                    },
                )
            )

        for name, offset in (
            ("top_offset", rules.top_offset),
            ("bottom_offset", rules.bottom_offset),
        ):
            if offset < MIN_HINGE_EDGE_OFFSET:
                failures.append(
                    ValidationFailure(
                        rule=FailureRule.INSUFFICIENT_OFFSET_SPACE,
                        message=(
                            f"Hinge {name} {offset:.1f}mm is below the "
                            f"{MIN_HINGE_EDGE_OFFSET:.0f}mm minimum"
                        ),
                        details={name: offset, "minimum": MIN_HINGE_EDGE_OFFSET},
                    )
                )

        available = leaf.height - rules.top_offset - rules.bottom_offset
        needed = max(spec.count - 2, 0) * MIN_HINGE_SPACING
        if available < needed or available < 0:
            failures.append(
                ValidationFailure(
                    rule=FailureRule.INSUFFICIENT_OFFSET_SPACE,
                    message=(
                        f"Available hinge span {available:.1f}mm cannot fit "
                        f"{spec.count} hinges (needs {needed:.1f}mm)"
                    ),
                    details={
                        "available_span": available,
                        "required_span": needed,
                        "count": spec.count,
                        "top_offset": rules.top_offset,
                        "bottom_offset": rules.bottom_offset,
                    },
                )
            )

        if (
            spec.hinge_type is HingeType.CONCEALED
            and leaf.leaf_thickness < CONCEALED_HINGE_MIN_THICKNESS
        ):
            failures.append(
                ValidationFailure(
                    rule=FailureRule.THICKNESS_INSUFFICIENT,
                    message=(
                        f"Concealed hinges require a leaf at least "
                        f"{CONCEALED_HINGE_MIN_THICKNESS:.0f}mm thick "
                        f"(got {leaf.leaf_thickness:.1f}mm)"
                    ),
                    details={
                        "leaf_thickness": leaf.leaf_thickness,
                        "minimum": CONCEALED_HINGE_MIN_THICKNESS,
                        "hinge_type": spec.hinge_type.value,
                    },
                )
            )

        return ValidationResult.from_failures(failures)

    def hinge_y_positions(self, leaf: DoorLeafConfig, spec: HingeSpec) -> tuple[float, ...]:
        """Calculate hinge Y positions from the bottom of the leaf.

        The end hinges sit at the bottom and top offsets. Intermediate hinges
        are spread linearly (even) or along a t^exponent curve (weighted),
        where t runs from 0 at the bottom hinge to 1 at the top hinge.

        Args:
            leaf: Leaf receiving the hinges.
            spec: Hinge selection.

        Returns:
            Ascending tuple of Y positions.

        Raises:
            PlacementValidationError: If fewer than two hinges are requested.
        """
        if spec.count < MIN_HINGE_COUNT:
            failure = ValidationFailure(
                rule=FailureRule.MINIMUM_HINGE_COUNT_VIOLATION,
                message=(
                    f"Hinge positions need at least {MIN_HINGE_COUNT} "
                    f"hinges (got {spec.count})"
                ),
                details={"count": spec.count, "required": MIN_HINGE_COUNT},
            )
            raise PlacementValidationError(
                HardwareKind.HINGE, ValidationResult.fail([failure])
            )

        rules = spec.placement_rules
        first = rules.bottom_offset
        last = leaf.height - rules.top_offset
        span = last - first
        intervals = spec.count - 1

        positions: list[float] = []
        for i in range(spec.count):
            t = i / intervals
            if rules.distribution_mode is DistributionMode.WEIGHTED:
                t = t**self.config.weighted_exponent
            positions.append(first + span * t)
        # Pin the end hinges exactly to avoid floating-point drift at t == 1.
        positions[0] = first
        positions[-1] = last

        return tuple(sorted(positions))

    def calculate(
        self,
        leaf: DoorLeafConfig,
        spec: HingeSpec,
        door_weight_kg: float | None = None,
    ) -> tuple[HardwarePlacement, ...]:
        """Calculate hinge placements for a leaf.

        Args:
            leaf: Leaf receiving the hinges.
            spec: Hinge selection.
            door_weight_kg: Estimated leaf weight for the minimum count rule.

        Returns:
            Placements in ascending vertical order.

        Raises:
            PlacementValidationError: If the selection fails validation.
        """
        result = self.validate(leaf, spec, door_weight_kg)
        if not result.is_valid:
            raise PlacementValidationError(HardwareKind.HINGE, result)

        x = leaf.hinge_edge_x
        rotation = self._rotation(leaf.hinge_side)

        if spec.hinge_type is HingeType.PIANO:
            y = leaf.height / 2
            placement = HardwarePlacement(
                id=f"{leaf.leaf_id}.hinge-0",
                kind=HardwareKind.HINGE,
                transform=Transform3D(Point3D(x, y, 0.0), rotation),
                metadata=PlacementMetadata(
                    index=0,
                    hardware_type=spec.hinge_type.value,
                    side=leaf.hinge_side.value,
                    y_position=y,
                    length=leaf.height,
                ),
            )
            logger.debug(f"Placed piano hinge on {leaf.leaf_id} at x={x}")
            return (placement,)

        z = self._depth(leaf, spec.hinge_type)
        mount_offset = self._mount_offset(leaf.hinge_side, spec.hinge_type)
        placements = tuple(
            HardwarePlacement(
                id=f"{leaf.leaf_id}.hinge-{index}",
                kind=HardwareKind.HINGE,
                transform=Transform3D(Point3D(x, y, z), rotation),
                metadata=PlacementMetadata(
                    index=index,
                    hardware_type=spec.hinge_type.value,
                    side=leaf.hinge_side.value,
                    y_position=y,
                    mount_offset=mount_offset,
                ),
            )
            for index, y in enumerate(self.hinge_y_positions(leaf, spec))
        )
        logger.debug(
            f"Placed {len(placements)} {spec.hinge_type.value} hinges on "
            f"{leaf.leaf_id}: {[p.metadata.y_position for p in placements]}"
        )
        return placements

    def _depth(self, leaf: DoorLeafConfig, hinge_type: HingeType) -> float:
        """Z position of the hinge anchor for each hinge type."""
        if hinge_type is HingeType.CONCEALED:
            return -(leaf.leaf_thickness - CONCEALED_HINGE_BACK_FACE_CLEARANCE)
        if hinge_type in (HingeType.BUTT, HingeType.PIANO):
            return 0.0
        raise ValueError(f"Unsupported hinge type: {hinge_type}")

    def _rotation(self, hinge_side: HingeSide) -> AxisAngle:
        """Barrel axis vertical, body turned 90 degrees toward the opening edge."""
        return AxisAngle.about_y(90.0 if hinge_side is HingeSide.LEFT else -90.0)

    def _mount_offset(self, hinge_side: HingeSide, hinge_type: HingeType) -> Point3D:
        """Refinement from the edge anchor to the hinge body.

        Butt hinges shift half a barrel diameter into the leaf. Concealed
        hinge cups shift by the edge inset and sit at half cup depth.
        """
        inward = 1.0 if hinge_side is HingeSide.LEFT else -1.0
        if hinge_type is HingeType.BUTT:
            return Point3D(inward * self.config.butt_barrel_diameter / 2, 0.0, 0.0)
        if hinge_type is HingeType.CONCEALED:
            return Point3D(
                inward * self.config.concealed_edge_inset,
                0.0,
                -self.config.concealed_cup_depth / 2,
            )
        raise ValueError(f"Unsupported hinge type: {hinge_type}")
