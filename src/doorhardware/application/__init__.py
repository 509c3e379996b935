"""Application layer - use cases and orchestration."""

from .commands import PlaceHardwareCommand, PlacementOutput, ValidationOutput

__all__ = [
    "PlaceHardwareCommand",
    "PlacementOutput",
    "ValidationOutput",
]
