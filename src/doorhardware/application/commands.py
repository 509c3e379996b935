"""Application commands (use cases) for door hardware placement."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from doorhardware.application.config import (
    DoorHardwareConfiguration,
    DoubleDoorJob,
    config_to_job,
    config_to_placement_config,
)
from doorhardware.domain.placement import (
    DoubleDoorCoordinator,
    DoubleDoorPlacement,
    HardwareConflict,
    HardwarePlacementService,
    LeafPlacement,
    PlacementValidationError,
    ValidationResult,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlacementOutput:
    """Output of a placement run.

    Exactly one of ``single`` and ``double`` is set when ``errors`` is empty.

    Attributes:
        single: Placement set for a single-leaf door.
        double: Placement sets for a double door.
        errors: Validation errors that prevented placement.
    """

    single: LeafPlacement | None = None
    double: DoubleDoorPlacement | None = None
    errors: tuple[PlacementValidationError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def conflicts(self) -> tuple[HardwareConflict, ...]:
        """Clearance conflicts across every placed leaf."""
        if self.double is not None:
            return self.double.conflicts
        if self.single is not None:
            return self.single.conflicts
        return ()


@dataclass(frozen=True)
class ValidationOutput:
    """Validation results keyed by leaf id, in placement order."""

    results: dict[str, ValidationResult] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return all(result.is_valid for result in self.results.values())


class PlaceHardwareCommand:
    """Command to place hardware described by a configuration.

    Example:
        command = PlaceHardwareCommand()
        output = command.execute(load_config(Path("door.json")))
        if output.is_valid:
            ...
    """

    def execute(self, config: DoorHardwareConfiguration) -> PlacementOutput:
        """Place all hardware for a single or double door.

        Validation failures are returned in ``errors`` rather than raised.

        Args:
            config: Validated door hardware configuration.

        Returns:
            PlacementOutput with the placement set or the errors.
        """
        placement_config = config_to_placement_config(config.placement)
        job = config_to_job(config)
        try:
            if isinstance(job, DoubleDoorJob):
                coordinator = DoubleDoorCoordinator(placement_config)
                return PlacementOutput(double=coordinator.coordinate(job.door, job.hardware))
            service = HardwarePlacementService(placement_config)
            return PlacementOutput(single=service.place_leaf(job.leaf, job.hardware))
        except PlacementValidationError as e:
            logger.info(f"Placement rejected: {e.kind.value} failed {len(e.result.failures)} rule(s)")
            return PlacementOutput(errors=(e,))

    def validate(self, config: DoorHardwareConfiguration) -> ValidationOutput:
        """Collect validation failures for every leaf without placing anything.

        Double doors are validated after hinge-side mirroring, so the result
        describes the leaves exactly as they would be placed.
        """
        service = HardwarePlacementService(config_to_placement_config(config.placement))
        job = config_to_job(config)
        if not isinstance(job, DoubleDoorJob):
            return ValidationOutput(
                results={job.leaf.leaf_id: service.validate_leaf(job.leaf, job.hardware)}
            )

        door = DoubleDoorCoordinator.mirror_hinge_sides(job.door)
        active, inactive = DoubleDoorCoordinator.split_hardware(door, job.hardware)
        return ValidationOutput(
            results={
                door.active_leaf.leaf_id: service.validate_leaf(door.active_leaf, active),
                door.inactive_leaf.leaf_id: service.validate_leaf(door.inactive_leaf, inactive),
            }
        )
