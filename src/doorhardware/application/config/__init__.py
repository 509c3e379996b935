"""Configuration loading for door hardware placement."""

from doorhardware.application.config.adapter import (
    DoubleDoorJob,
    SingleDoorJob,
    config_to_job,
    config_to_placement_config,
)
from doorhardware.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from doorhardware.application.config.schemas import (
    SUPPORTED_VERSIONS,
    DoorHardwareConfiguration,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "DoorHardwareConfiguration",
    "DoubleDoorJob",
    "SingleDoorJob",
    "config_to_job",
    "config_to_placement_config",
    "load_config",
    "load_config_from_dict",
]
