"""Handle placement calculator.

This module provides HandlePlacementCalculator, which places one handle per
requested face and coordinates the grip line with the lock when one is
fitted.
"""

from __future__ import annotations

import logging

from doorhardware.domain.value_objects import (
    AxisAngle,
    DoorLeafConfig,
    HandleSide,
    HandleSpec,
    HandleType,
    HardwareKind,
    HingeSide,
    Point3D,
    Transform3D,
)

from .config import DEFAULT_PLACEMENT_CONFIG, PlacementConfig
from .constants import BAR_HANDLE_STANDOFF, PULL_HANDLE_STANDOFF
from .results import (
    FailureRule,
    HardwarePlacement,
    PlacementMetadata,
    PlacementValidationError,
    ValidationFailure,
    ValidationResult,
)

logger = logging.getLogger(__name__)


class HandlePlacementCalculator:
    """Calculates handle placements for a leaf.

    With a lock fitted and no explicit height, the handle height follows
    the lock height so both share one grip line, and the handle sits on the
    lock's edge.
    """

    def __init__(self, config: PlacementConfig = DEFAULT_PLACEMENT_CONFIG) -> None:
        self.config = config

    def resolve_height(
        self, spec: HandleSpec, lock: HardwarePlacement | None = None
    ) -> float:
        """Handle height: explicit override, else lock height, else the default."""
        if spec.height is not None:
            return spec.height
        if lock is not None:
            return lock.metadata.y_position
        return self.config.default_handle_height

    def resolve_edge(
        self,
        leaf: DoorLeafConfig,
        spec: HandleSpec,
        lock: HardwarePlacement | None = None,
    ) -> HingeSide:
        """Edge the handle sits near."""
        if spec.edge is not None:
            return spec.edge
        if lock is not None:
            return HingeSide(lock.metadata.side)
        return leaf.opening_edge

    def resolve_edge_offset(
        self, spec: HandleSpec, lock: HardwarePlacement | None = None
    ) -> float:
        """Distance from the edge: explicit override, else 60mm with a lock, 70mm without."""
        if spec.edge_offset is not None:
            return spec.edge_offset
        if lock is not None:
            return self.config.handle_offset_with_lock
        return self.config.handle_offset_without_lock

    def validate(
        self,
        leaf: DoorLeafConfig,
        spec: HandleSpec,
        lock: HardwarePlacement | None = None,
    ) -> ValidationResult:
        """Validate a handle selection against a leaf.

        Checks that the resolved height lies on the leaf and that the
        resolved edge offset leaves the handle on the leaf.
        """
        failures: list[ValidationFailure] = []

        height = self.resolve_height(spec, lock)
        if not 0 <= height <= leaf.height:
            failures.append(
                ValidationFailure(
                    rule=FailureRule.HEIGHT_OUT_OF_RANGE,
                    message=(
                        f"Handle height {height:.1f}mm lies outside the "
                        f"{leaf.height:.0f}mm leaf"
                    ),
                    details={"height": height, "door_height": leaf.height},
                )
            )

        offset = self.resolve_edge_offset(spec, lock)
        if offset >= leaf.width:
            failures.append(
                ValidationFailure(
                    rule=FailureRule.EDGE_OFFSET_OUT_OF_RANGE,
                    message=(
                        f"Handle edge offset {offset:.1f}mm does not fit on a "
                        f"{leaf.width:.0f}mm wide leaf"
                    ),
                    details={"edge_offset": offset, "door_width": leaf.width},
                )
            )

        return ValidationResult.from_failures(failures)

    def calculate(
        self,
        leaf: DoorLeafConfig,
        spec: HandleSpec,
        lock: HardwarePlacement | None = None,
    ) -> tuple[HardwarePlacement, ...]:
        """Calculate handle placements, one per requested face.

        Args:
            leaf: Leaf receiving the handles.
            spec: Handle selection.
            lock: Lock placement on the same leaf, for height/edge coordination.

        Returns:
            Exterior placement first, then interior, for the requested faces.

        Raises:
            PlacementValidationError: If the selection fails validation.
        """
        result = self.validate(leaf, spec, lock)
        if not result.is_valid:
            raise PlacementValidationError(HardwareKind.HANDLE, result)

        height = self.resolve_height(spec, lock)
        edge = self.resolve_edge(leaf, spec, lock)
        x = leaf.x_from_edge(edge, self.resolve_edge_offset(spec, lock))
        group = f"{leaf.leaf_id}.handle-set"

        placements: list[HardwarePlacement] = []
        for index, face in enumerate(spec.side.faces()):
            position = Point3D(x, height, self._depth(leaf, spec.handle_type, face))
            placements.append(
                HardwarePlacement(
                    id=f"{leaf.leaf_id}.handle-{face.value}",
                    kind=HardwareKind.HANDLE,
                    transform=Transform3D(
                        position, self._rotation(spec.handle_type, edge, face)
                    ),
                    metadata=PlacementMetadata(
                        index=index,
                        hardware_type=spec.handle_type.value,
                        side=face.value,
                        y_position=height,
                        group=group,
                    ),
                )
            )

        logger.debug(
            f"Placed {len(placements)} {spec.handle_type.value} handle(s) on "
            f"{leaf.leaf_id} at height {height}"
        )
        return tuple(placements)

    def _depth(self, leaf: DoorLeafConfig, handle_type: HandleType, face: HandleSide) -> float:
        """Z position for each handle type and face.

        Levers and knobs mount flush on the face; pulls and bars stand off it.
        """
        if handle_type in (HandleType.LEVER, HandleType.KNOB):
            standoff = 0.0
        elif handle_type is HandleType.PULL:
            standoff = PULL_HANDLE_STANDOFF
        elif handle_type is HandleType.BAR:
            standoff = BAR_HANDLE_STANDOFF
        else:
            raise ValueError(f"Unsupported handle type: {handle_type}")

        if face is HandleSide.EXTERIOR:
            return standoff
        return -leaf.leaf_thickness - standoff

    def _rotation(self, handle_type: HandleType, edge: HingeSide, face: HandleSide) -> AxisAngle:
        """Orientation for each handle type, edge and face.

        Levers and knobs face the opening edge, mirrored by edge and face.
        Pulls and bars hang vertically and are flipped between faces.
        """
        if handle_type in (HandleType.LEVER, HandleType.KNOB):
            edge_sign = 1.0 if edge is HingeSide.RIGHT else -1.0
            face_sign = 1.0 if face is HandleSide.EXTERIOR else -1.0
            return AxisAngle.about_y(90.0 * edge_sign * face_sign)
        if handle_type in (HandleType.PULL, HandleType.BAR):
            return AxisAngle.about_y(0.0 if face is HandleSide.EXTERIOR else 180.0)
        raise ValueError(f"Unsupported handle type: {handle_type}")
