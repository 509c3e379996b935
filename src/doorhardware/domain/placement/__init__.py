"""Hardware placement domain services and result types.

This package provides:
- Placement calculators for hinges, locks, handles and bolts
- ConflictDetector for pairwise clearance checking
- HardwarePlacementService for placing all hardware on one leaf
- DoubleDoorCoordinator for active/inactive leaf pairs
- Result types for placements, validation and conflicts
"""

from __future__ import annotations

from .bolt_calculator import BoltPlacementCalculator
from .config import DEFAULT_PLACEMENT_CONFIG, PlacementConfig
from .conflict_detector import ConflictDetector
from .constants import (
    BOLT_MAX_OFFSET,
    BOLT_MEETING_EDGE_INSET,
    BOLT_MIN_OFFSET,
    BOLT_MIN_THICKNESS,
    DEFAULT_CLEARANCE,
    HARDWARE_CLEARANCES,
    LOCK_MAX_EDGE_OFFSET,
    LOCK_MAX_HEIGHT,
    LOCK_MIN_EDGE_OFFSET,
    LOCK_MIN_HEIGHT,
    LOCK_MIN_HINGE_DISTANCE,
    LOCK_MIN_THICKNESS,
    MIN_HINGE_EDGE_OFFSET,
    MIN_HINGE_SPACING,
    WEIGHTED_DISTRIBUTION_EXPONENT,
)
from .double_door import (
    DoubleDoorCoordinator,
    DoubleDoorHardware,
    DoubleDoorPlacement,
)
from .handle_calculator import HandlePlacementCalculator
from .hinge_calculator import HingePlacementCalculator, minimum_hinge_count
from .lock_calculator import LockPlacementCalculator, nearest_mortise_backset
from .placement_service import HardwarePlacementService, LeafHardware, LeafPlacement
from .results import (
    FailureCategory,
    FailureRule,
    HardwareConflict,
    HardwarePlacement,
    PlacementMetadata,
    PlacementValidationError,
    ValidationFailure,
    ValidationResult,
)
from .weight_estimator import estimate_leaf_weight

__all__ = [
    # Calculators
    "BoltPlacementCalculator",
    "HandlePlacementCalculator",
    "HingePlacementCalculator",
    "LockPlacementCalculator",
    "minimum_hinge_count",
    "nearest_mortise_backset",
    # Conflicts
    "ConflictDetector",
    # Orchestration
    "DoubleDoorCoordinator",
    "DoubleDoorHardware",
    "DoubleDoorPlacement",
    "HardwarePlacementService",
    "LeafHardware",
    "LeafPlacement",
    "estimate_leaf_weight",
    # Configuration
    "DEFAULT_PLACEMENT_CONFIG",
    "PlacementConfig",
    # Results
    "FailureCategory",
    "FailureRule",
    "HardwareConflict",
    "HardwarePlacement",
    "PlacementMetadata",
    "PlacementValidationError",
    "ValidationFailure",
    "ValidationResult",
    # Constants
    "BOLT_MAX_OFFSET",
    "BOLT_MEETING_EDGE_INSET",
    "BOLT_MIN_OFFSET",
    "BOLT_MIN_THICKNESS",
    "DEFAULT_CLEARANCE",
    "HARDWARE_CLEARANCES",
    "LOCK_MAX_EDGE_OFFSET",
    "LOCK_MAX_HEIGHT",
    "LOCK_MIN_EDGE_OFFSET",
    "LOCK_MIN_HEIGHT",
    "LOCK_MIN_HINGE_DISTANCE",
    "LOCK_MIN_THICKNESS",
    "MIN_HINGE_EDGE_OFFSET",
    "MIN_HINGE_SPACING",
    "WEIGHTED_DISTRIBUTION_EXPONENT",
]
