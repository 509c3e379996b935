"""Value objects for the door hardware domain.

This module provides immutable data types used throughout the placement
engine. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Enumerations
from ._enums import (
    AstragalType,
    BoltPosition,
    BoltType,
    ConflictSeverity,
    DistributionMode,
    HandleSide,
    HandleType,
    HardwareKind,
    HingeSide,
    HingeType,
    LeafCore,
    LeafState,
    LockType,
    OpeningDirection,
)

# Geometry primitives
from ._geometry import (
    AxisAngle,
    Point3D,
    Transform3D,
)

# Door leaves
from ._door import (
    DoorLeafConfig,
    DoubleDoorConfig,
)

# Hardware selections
from ._hardware import (
    BoltSpec,
    HandleSpec,
    HingePlacementRules,
    HingeSpec,
    LockSpec,
)

__all__ = [
    # Enumerations
    "AstragalType",
    "BoltPosition",
    "BoltType",
    "ConflictSeverity",
    "DistributionMode",
    "HandleSide",
    "HandleType",
    "HardwareKind",
    "HingeSide",
    "HingeType",
    "LeafCore",
    "LeafState",
    "LockType",
    "OpeningDirection",
    # Geometry primitives
    "AxisAngle",
    "Point3D",
    "Transform3D",
    # Door leaves
    "DoorLeafConfig",
    "DoubleDoorConfig",
    # Hardware selections
    "BoltSpec",
    "HandleSpec",
    "HingePlacementRules",
    "HingeSpec",
    "LockSpec",
]
