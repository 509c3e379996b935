"""Domain layer - core placement logic."""

from .placement import (
    ConflictDetector,
    DoubleDoorCoordinator,
    DoubleDoorHardware,
    DoubleDoorPlacement,
    HardwareConflict,
    HardwarePlacement,
    HardwarePlacementService,
    LeafHardware,
    LeafPlacement,
    PlacementConfig,
    PlacementValidationError,
    ValidationResult,
)
from .value_objects import (
    BoltSpec,
    DoorLeafConfig,
    DoubleDoorConfig,
    HandleSpec,
    HingeSpec,
    LockSpec,
    Point3D,
    Transform3D,
)

__all__ = [
    "BoltSpec",
    "ConflictDetector",
    "DoorLeafConfig",
    "DoubleDoorConfig",
    "DoubleDoorCoordinator",
    "DoubleDoorHardware",
    "DoubleDoorPlacement",
    "HandleSpec",
    "HardwareConflict",
    "HardwarePlacement",
    "HardwarePlacementService",
    "HingeSpec",
    "LeafHardware",
    "LeafPlacement",
    "LockSpec",
    "PlacementConfig",
    "PlacementValidationError",
    "Point3D",
    "Transform3D",
    "ValidationResult",
]
