"""Placement constants for door hardware.

This module contains the threshold values, standard offsets and clearance
requirements used throughout the placement calculators. All lengths are
millimeters.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from doorhardware.domain.value_objects import HardwareKind, LockType

# ==============================================================================
# Hinge Constants
# ==============================================================================

# Minimum hinge count thresholds
MIN_HINGE_COUNT: int = 2
TALL_DOOR_HEIGHT_THRESHOLD: float = 2100.0
HEAVY_DOOR_WEIGHT_THRESHOLD_KG: float = 50.0
VERY_HEAVY_DOOR_WEIGHT_THRESHOLD_KG: float = 80.0

# Vertical placement limits
MIN_HINGE_EDGE_OFFSET: float = 100.0
MIN_HINGE_SPACING: float = 150.0

# Power-law exponent for weighted distribution (biases hinges toward the top)
WEIGHTED_DISTRIBUTION_EXPONENT: float = 0.8

# Hinge depth and refinement
CONCEALED_HINGE_BACK_FACE_CLEARANCE: float = 10.0
BUTT_HINGE_BARREL_DIAMETER: float = 13.0
CONCEALED_HINGE_EDGE_INSET: float = 5.0
CONCEALED_HINGE_CUP_DEPTH: float = 12.0

# Thinnest leaf that can take a concealed hinge cup
CONCEALED_HINGE_MIN_THICKNESS: float = 16.0


# ==============================================================================
# Lock Constants
# ==============================================================================

LOCK_MIN_HEIGHT: float = 800.0
LOCK_MAX_HEIGHT: float = 1200.0
LOCK_MIN_EDGE_OFFSET: float = 50.0
LOCK_MAX_EDGE_OFFSET: float = 90.0
LOCK_MIN_HINGE_DISTANCE: float = 150.0

# Minimum leaf thickness for each lock body
LOCK_MIN_THICKNESS: Mapping[LockType, float] = MappingProxyType(
    {
        LockType.CYLINDER: 35.0,
        LockType.MORTISE: 40.0,
        LockType.DEADBOLT: 38.0,
        LockType.SMART: 40.0,
    }
)

# Standard mortise lock backsets
MORTISE_STANDARD_BACKSETS: tuple[float, ...] = (44.0, 57.0)
MORTISE_MAX_DEPTH: float = 40.0
MORTISE_DEPTH_RATIO: float = 0.7
SMART_LOCK_INSET: float = 5.0


# ==============================================================================
# Handle Constants
# ==============================================================================

HANDLE_EDGE_OFFSET_WITH_LOCK: float = 60.0
HANDLE_EDGE_OFFSET_WITHOUT_LOCK: float = 70.0
DEFAULT_HANDLE_HEIGHT: float = 1000.0
PULL_HANDLE_STANDOFF: float = 40.0
BAR_HANDLE_STANDOFF: float = 50.0


# ==============================================================================
# Bolt Constants
# ==============================================================================

BOLT_MIN_OFFSET: float = 150.0
BOLT_MAX_OFFSET: float = 300.0
BOLT_MIN_THICKNESS: float = 40.0
BOLT_MEETING_EDGE_INSET: float = 40.0


# ==============================================================================
# Clearance Constants
# ==============================================================================

# Required centroid clearance between hardware kinds
HARDWARE_CLEARANCES: Mapping[frozenset[HardwareKind], float] = MappingProxyType(
    {
        frozenset({HardwareKind.HINGE, HardwareKind.LOCK}): 150.0,
        frozenset({HardwareKind.HINGE, HardwareKind.HANDLE}): 100.0,
        frozenset({HardwareKind.HINGE, HardwareKind.BOLT}): 200.0,
        frozenset({HardwareKind.LOCK, HardwareKind.HANDLE}): 50.0,
        frozenset({HardwareKind.LOCK, HardwareKind.BOLT}): 300.0,
        frozenset({HardwareKind.HANDLE, HardwareKind.BOLT}): 200.0,
    }
)
DEFAULT_CLEARANCE: float = 100.0

# Conflicts closer than this fraction of the required clearance are errors
CONFLICT_ERROR_RATIO: float = 0.5


# ==============================================================================
# Double Door Constants
# ==============================================================================

MEETING_GAP_NO_ASTRAGAL: float = 3.0
MEETING_GAP_SURFACE_ASTRAGAL: float = 0.0
MEETING_GAP_OVERLAP_ASTRAGAL: float = -10.0


# ==============================================================================
# Weight Estimation Constants
# ==============================================================================

# Core densities in kg per cubic meter
SOLID_CORE_DENSITY: float = 700.0
GLAZED_CORE_DENSITY: float = 450.0
HOLLOW_CORE_DENSITY: float = 300.0
