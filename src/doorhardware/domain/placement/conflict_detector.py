"""Pairwise clearance checking across placed hardware.

This module provides ConflictDetector, which compares the centroid
distance of every pair of placements on a leaf against the clearance
required for their hardware kinds. The result is advisory: the detector
never raises and callers decide whether error-severity conflicts block a
configuration.
"""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Mapping, Sequence

from doorhardware.domain.value_objects import ConflictSeverity, HardwareKind

from .config import DEFAULT_PLACEMENT_CONFIG
from .constants import CONFLICT_ERROR_RATIO
from .results import HardwareConflict, HardwarePlacement

logger = logging.getLogger(__name__)


class ConflictDetector:
    """Detects placements closer than their required clearance.

    Placements sharing an assembly group (the two faces of one handle set)
    form a single through-leaf assembly and are not compared with each
    other.

    Example:
        detector = ConflictDetector()
        conflicts = detector.detect(hinges + (lock,) + handles)
        blocking = [c for c in conflicts if c.is_error]
    """

    def __init__(
        self,
        clearances: Mapping[frozenset[HardwareKind], float] | None = None,
        default_clearance: float | None = None,
    ) -> None:
        """Initialize the detector.

        Args:
            clearances: Required clearance per unordered pair of kinds.
                Defaults to the standard clearance table.
            default_clearance: Clearance for pairs missing from the table.
        """
        self.clearances = (
            clearances if clearances is not None else DEFAULT_PLACEMENT_CONFIG.clearances
        )
        self.default_clearance = (
            default_clearance
            if default_clearance is not None
            else DEFAULT_PLACEMENT_CONFIG.default_clearance
        )

    def required_clearance(self, first: HardwareKind, second: HardwareKind) -> float:
        """Clearance required between two hardware kinds (order-independent)."""
        return self.clearances.get(frozenset({first, second}), self.default_clearance)

    def detect(
        self, placements: Sequence[HardwarePlacement]
    ) -> tuple[HardwareConflict, ...]:
        """Check every unordered pair of placements.

        Args:
            placements: All placements on one leaf.

        Returns:
            Conflicts in pair order (possibly empty).
        """
        conflicts: list[HardwareConflict] = []

        for first, second in combinations(placements, 2):
            if first.metadata.group is not None and first.metadata.group == second.metadata.group:
                continue

            required = self.required_clearance(first.kind, second.kind)
            distance = first.position.distance_to(second.position)
            if distance >= required:
                continue

            severity = (
                ConflictSeverity.ERROR
                if distance < required * CONFLICT_ERROR_RATIO
                else ConflictSeverity.WARNING
            )
            conflict = HardwareConflict(
                first_id=first.id,
                second_id=second.id,
                distance=distance,
                required_clearance=required,
                severity=severity,
            )
            if conflict.is_error:
                logger.warning(conflict.formatted_message)
            else:
                logger.debug(conflict.formatted_message)
            conflicts.append(conflict)

        return tuple(conflicts)
