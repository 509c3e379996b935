"""Inactive-leaf bolt placement calculator."""

from __future__ import annotations

import logging

from doorhardware.domain.value_objects import (
    AxisAngle,
    BoltPosition,
    BoltSpec,
    BoltType,
    DoorLeafConfig,
    HardwareKind,
    HingeSide,
    Point3D,
    Transform3D,
)

from .constants import (
    BOLT_MAX_OFFSET,
    BOLT_MEETING_EDGE_INSET,
    BOLT_MIN_OFFSET,
    BOLT_MIN_THICKNESS,
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

# Placement order along the meeting edge.
_POSITION_ORDER: tuple[BoltPosition, ...] = (BoltPosition.TOP, BoltPosition.BOTTOM)


class BoltPlacementCalculator:
    """Calculates top/bottom bolt placements on an inactive leaf.

    Bolts sit 40mm in from the meeting edge. Flush and automatic bolts are
    let into the leaf edge and need a leaf at least 40mm thick; surface
    bolts are face-mounted.
    """

    def resolve_meeting_edge(self, leaf: DoorLeafConfig, spec: BoltSpec) -> HingeSide:
        """Edge meeting the active leaf (defaults to the edge opposite the hinges)."""
        return spec.meeting_edge if spec.meeting_edge is not None else leaf.opening_edge

    def validate(self, leaf: DoorLeafConfig, spec: BoltSpec) -> ValidationResult:
        """Validate a bolt selection against a leaf.

        Checks:
        - At least one of top/bottom is requested
        - Both offsets lie within 150-300mm and within the leaf, whichever
          positions are requested
        - Flush and automatic bolts have a leaf at least 40mm thick

        Args:
            leaf: Inactive leaf receiving the bolts.
            spec: Bolt selection.

        Returns:
            ValidationResult listing every violated rule.
        """
        failures: list[ValidationFailure] = []

        if not spec.positions:
            failures.append(
                ValidationFailure(
                    rule=FailureRule.NO_POSITIONS_SPECIFIED,
                    message="At least one bolt position (top or bottom) is required",
                    details={"positions": []},
                )
            )

        for position in _POSITION_ORDER:
            name = f"{position.value}_offset"
            offset = self._offset(spec, position)
            if not BOLT_MIN_OFFSET <= offset <= BOLT_MAX_OFFSET or offset > leaf.height:
                failures.append(
                    ValidationFailure(
                        rule=FailureRule.OFFSET_OUT_OF_RANGE,
                        message=(
                            f"Bolt {name} {offset:.1f}mm must be between "
                            f"{BOLT_MIN_OFFSET:.0f}mm and {BOLT_MAX_OFFSET:.0f}mm"
                        ),
                        details={
                            name: offset,
                            "minimum": BOLT_MIN_OFFSET,
                            "maximum": BOLT_MAX_OFFSET,
                            "door_height": leaf.height,
                        },
                    )
                )

        if (
            spec.bolt_type in (BoltType.FLUSH, BoltType.AUTOMATIC)
            and leaf.leaf_thickness < BOLT_MIN_THICKNESS
        ):
            failures.append(
                ValidationFailure(
                    rule=FailureRule.THICKNESS_INSUFFICIENT,
                    message=(
                        f"{spec.bolt_type.value.capitalize()} bolts require a leaf at "
                        f"least {BOLT_MIN_THICKNESS:.0f}mm thick "
                        f"(got {leaf.leaf_thickness:.1f}mm)"
                    ),
                    details={
                        "leaf_thickness": leaf.leaf_thickness,
                        "minimum": BOLT_MIN_THICKNESS,
                        "bolt_type": spec.bolt_type.value,
                    },
                )
            )

        return ValidationResult.from_failures(failures)

    def calculate(
        self, leaf: DoorLeafConfig, spec: BoltSpec
    ) -> tuple[HardwarePlacement, ...]:
        """Calculate bolt placements, top first.

        Raises:
            PlacementValidationError: If the selection fails validation.
        """
        result = self.validate(leaf, spec)
        if not result.is_valid:
            raise PlacementValidationError(HardwareKind.BOLT, result)

        edge = self.resolve_meeting_edge(leaf, spec)
        x = leaf.x_from_edge(edge, BOLT_MEETING_EDGE_INSET)
        z = self._depth(leaf, spec.bolt_type)

        placements: list[HardwarePlacement] = []
        for position in _POSITION_ORDER:
            if position not in spec.positions:
                continue
            if position is BoltPosition.TOP:
                y = leaf.height - spec.top_offset
            else:
                y = spec.bottom_offset
            placements.append(
                HardwarePlacement(
                    id=f"{leaf.leaf_id}.bolt-{position.value}",
                    kind=HardwareKind.BOLT,
                    transform=Transform3D(
                        Point3D(x, y, z), self._rotation(spec.bolt_type, position)
                    ),
                    metadata=PlacementMetadata(
                        index=len(placements),
                        hardware_type=spec.bolt_type.value,
                        side=position.value,
                        y_position=y,
                    ),
                )
            )

        logger.debug(
            f"Placed {len(placements)} {spec.bolt_type.value} bolt(s) on {leaf.leaf_id}"
        )
        return tuple(placements)

    def _offset(self, spec: BoltSpec, position: BoltPosition) -> float:
        return spec.top_offset if position is BoltPosition.TOP else spec.bottom_offset

    def _depth(self, leaf: DoorLeafConfig, bolt_type: BoltType) -> float:
        if bolt_type in (BoltType.FLUSH, BoltType.AUTOMATIC):
            return -leaf.leaf_thickness / 2
        if bolt_type is BoltType.SURFACE:
            return 0.0
        raise ValueError(f"Unsupported bolt type: {bolt_type}")

    def _rotation(self, bolt_type: BoltType, position: BoltPosition) -> AxisAngle:
        """Rotation about the depth axis; edge bolts extend toward the frame."""
        if bolt_type is BoltType.SURFACE:
            return AxisAngle.about_z(0.0)
        return AxisAngle.about_z(0.0 if position is BoltPosition.TOP else 180.0)
