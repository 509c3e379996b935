"""Configuration schemas for door hardware placement.

All schema models are re-exported here for convenience.
"""

from doorhardware.application.config.schemas.base import (
    SUPPORTED_VERSIONS,
    DoorLeafConfigSchema,
)
from doorhardware.application.config.schemas.hardware_schema import (
    BoltConfigSchema,
    DoubleDoorHardwareConfigSchema,
    HandleConfigSchema,
    HingeConfigSchema,
    HingePlacementRulesSchema,
    LeafHardwareConfigSchema,
    LockConfigSchema,
)
from doorhardware.application.config.schemas.placement_schema import (
    ClearanceRuleSchema,
    PlacementTuningSchema,
)
from doorhardware.application.config.schemas.root import (
    DoorHardwareConfiguration,
    DoubleDoorConfigSchema,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "BoltConfigSchema",
    "ClearanceRuleSchema",
    "DoorHardwareConfiguration",
    "DoorLeafConfigSchema",
    "DoubleDoorConfigSchema",
    "DoubleDoorHardwareConfigSchema",
    "HandleConfigSchema",
    "HingeConfigSchema",
    "HingePlacementRulesSchema",
    "LeafHardwareConfigSchema",
    "LockConfigSchema",
    "PlacementTuningSchema",
]
