"""Placement configuration.

This module provides PlacementConfig for tuning the empirical constants used
by the placement calculators and the conflict detector.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from doorhardware.domain.value_objects import HardwareKind, LockType

from .constants import (
    BUTT_HINGE_BARREL_DIAMETER,
    CONCEALED_HINGE_CUP_DEPTH,
    CONCEALED_HINGE_EDGE_INSET,
    DEFAULT_CLEARANCE,
    DEFAULT_HANDLE_HEIGHT,
    HANDLE_EDGE_OFFSET_WITH_LOCK,
    HANDLE_EDGE_OFFSET_WITHOUT_LOCK,
    HARDWARE_CLEARANCES,
    LOCK_MIN_THICKNESS,
    WEIGHTED_DISTRIBUTION_EXPONENT,
)


@dataclass(frozen=True)
class PlacementConfig:
    """Configuration for the placement calculators.

    The defaults reproduce the standard placement rules. The weighted hinge
    exponent and the handle edge offsets are empirical values kept adjustable
    here rather than hard-coded in the calculators.

    Attributes:
        weighted_exponent: Power-law exponent for weighted hinge spacing (0-1).
        handle_offset_with_lock: Handle distance from the edge when a lock
            is fitted (mm).
        handle_offset_without_lock: Handle distance from the edge without a
            lock (mm).
        default_handle_height: Handle height when neither an override nor a
            lock height is available (mm).
        butt_barrel_diameter: Barrel diameter of butt hinges (mm).
        concealed_edge_inset: Edge inset of concealed hinge cups (mm).
        concealed_cup_depth: Bore depth of concealed hinge cups (mm).
        clearances: Required clearance per unordered pair of hardware kinds.
        default_clearance: Clearance for pairs missing from ``clearances``.
        lock_min_thickness: Minimum leaf thickness per lock type.
    """

    weighted_exponent: float = WEIGHTED_DISTRIBUTION_EXPONENT
    handle_offset_with_lock: float = HANDLE_EDGE_OFFSET_WITH_LOCK
    handle_offset_without_lock: float = HANDLE_EDGE_OFFSET_WITHOUT_LOCK
    default_handle_height: float = DEFAULT_HANDLE_HEIGHT
    butt_barrel_diameter: float = BUTT_HINGE_BARREL_DIAMETER
    concealed_edge_inset: float = CONCEALED_HINGE_EDGE_INSET
    concealed_cup_depth: float = CONCEALED_HINGE_CUP_DEPTH
    clearances: Mapping[frozenset[HardwareKind], float] = field(
        default_factory=lambda: HARDWARE_CLEARANCES
    )
    default_clearance: float = DEFAULT_CLEARANCE
    lock_min_thickness: Mapping[LockType, float] = field(
        default_factory=lambda: LOCK_MIN_THICKNESS
    )

    def __post_init__(self) -> None:
        if not 0 < self.weighted_exponent <= 1:
            raise ValueError("weighted_exponent must be between 0 and 1")
        if self.handle_offset_with_lock <= 0 or self.handle_offset_without_lock <= 0:
            raise ValueError("Handle edge offsets must be positive")
        if self.default_handle_height <= 0:
            raise ValueError("default_handle_height must be positive")
        if self.butt_barrel_diameter <= 0:
            raise ValueError("butt_barrel_diameter must be positive")
        if self.concealed_edge_inset < 0 or self.concealed_cup_depth <= 0:
            raise ValueError("Concealed hinge dimensions must be positive")
        if self.default_clearance <= 0:
            raise ValueError("default_clearance must be positive")
        for pair, clearance in self.clearances.items():
            if len(pair) not in (1, 2):
                raise ValueError("Clearance keys must pair one or two hardware kinds")
            if clearance <= 0:
                raise ValueError("Clearances must be positive")
        missing = set(LockType) - set(self.lock_min_thickness)
        if missing:
            names = ", ".join(sorted(t.value for t in missing))
            raise ValueError(f"lock_min_thickness is missing lock types: {names}")
        # Freeze caller-supplied tables.
        object.__setattr__(self, "clearances", MappingProxyType(dict(self.clearances)))
        object.__setattr__(
            self, "lock_min_thickness", MappingProxyType(dict(self.lock_min_thickness))
        )


DEFAULT_PLACEMENT_CONFIG = PlacementConfig()
