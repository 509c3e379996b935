"""Leaf weight estimation for hinge count validation."""

from __future__ import annotations

from doorhardware.domain.value_objects import DoorLeafConfig, LeafCore

from .constants import GLAZED_CORE_DENSITY, HOLLOW_CORE_DENSITY, SOLID_CORE_DENSITY

# Core densities in kg per cubic meter
CORE_DENSITIES: dict[LeafCore, float] = {
    LeafCore.SOLID: SOLID_CORE_DENSITY,
    LeafCore.GLAZED: GLAZED_CORE_DENSITY,
    LeafCore.HOLLOW: HOLLOW_CORE_DENSITY,
}

MM3_PER_M3: float = 1e9


def estimate_leaf_weight(leaf: DoorLeafConfig) -> float:
    """Estimate the weight of a leaf in kilograms.

    Uses the explicit ``weight_kg`` when the leaf carries one; otherwise
    weight = volume (m^3) x core density (kg/m^3).

    Args:
        leaf: Leaf to estimate.

    Returns:
        Estimated weight in kilograms.
    """
    if leaf.weight_kg is not None:
        return leaf.weight_kg
    volume_m3 = leaf.width * leaf.height * leaf.leaf_thickness / MM3_PER_M3
    return volume_m3 * CORE_DENSITIES[leaf.core]
