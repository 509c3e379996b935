"""Base enums and shared models for door hardware configuration schemas.

Enums are imported directly from the domain layer (value_objects) so that
configuration values and domain values share one definition.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)

from doorhardware.domain.value_objects import (
    AstragalType,
    BoltPosition,
    BoltType,
    DistributionMode,
    HandleSide,
    HandleType,
    HingeSide,
    HingeType,
    LeafCore,
    LockType,
    OpeningDirection,
)

# Supported schema versions for configuration files
# Version 1.0: Single and double doors with hinges, locks, handles and bolts
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

__all__ = [
    "AstragalType",
    "BoltPosition",
    "BoltType",
    "DistributionMode",
    "DoorLeafConfigSchema",
    "HandleSide",
    "HandleType",
    "HingeSide",
    "HingeType",
    "LeafCore",
    "LockType",
    "OpeningDirection",
    "SUPPORTED_VERSIONS",
]


class DoorLeafConfigSchema(BaseModel):
    """Door leaf dimensions and orientation.

    Attributes:
        leaf_id: Prefix for placement ids produced for this leaf.
        height: Leaf height in millimeters.
        width: Leaf width in millimeters.
        leaf_thickness: Leaf thickness in millimeters.
        hinge_side: Edge carrying the hinges.
        opening_direction: Swing direction relative to the exterior face.
        weight_kg: Known leaf weight; estimated from the core when omitted.
        core: Leaf construction used for weight estimation.

    Example:
        ```json
        "door": {
          "height": 2100,
          "width": 900,
          "leaf_thickness": 44,
          "hinge_side": "left"
        }
        ```
    """

    model_config = ConfigDict(extra="forbid")

    leaf_id: str = Field(default="leaf", min_length=1)
    height: float = Field(..., gt=0, le=6000, description="Leaf height in mm")
    width: float = Field(..., gt=0, le=3000, description="Leaf width in mm")
    leaf_thickness: float = Field(..., gt=0, le=200, description="Leaf thickness in mm")
    hinge_side: HingeSide = HingeSide.LEFT
    opening_direction: OpeningDirection = OpeningDirection.INWARD
    weight_kg: float | None = Field(default=None, gt=0)
    core: LeafCore = LeafCore.HOLLOW
