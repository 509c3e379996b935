"""Hardware selection configuration schemas.

Range rules (lock height window, bolt offsets, hinge spacing and so on) are
deliberately not encoded as schema bounds: the placement calculators report
them as structured validation failures. The schemas only reject values that
are never meaningful, such as negative lengths.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)

from doorhardware.application.config.schemas.base import (
    BoltPosition,
    BoltType,
    DistributionMode,
    HandleSide,
    HandleType,
    HingeSide,
    HingeType,
    LockType,
)


class HingePlacementRulesSchema(BaseModel):
    """Vertical placement overrides for hinges.

    Attributes:
        top_offset: Distance from the top of the leaf to the top hinge (mm).
        bottom_offset: Distance from the bottom of the leaf to the bottom hinge (mm).
        distribution_mode: Spread of intermediate hinges ("even" or "weighted").
    """

    model_config = ConfigDict(extra="forbid")

    top_offset: float = Field(default=150.0, ge=0)
    bottom_offset: float = Field(default=150.0, ge=0)
    distribution_mode: DistributionMode = DistributionMode.EVEN


class HingeConfigSchema(BaseModel):
    """Hinge selection.

    Example:
        ```json
        "hinges": {
          "count": 3,
          "type": "butt",
          "placement_rules": {"top_offset": 180, "bottom_offset": 250}
        }
        ```
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    count: int = Field(default=2, ge=0, le=12)
    hinge_type: HingeType = Field(default=HingeType.BUTT, alias="type")
    placement_rules: HingePlacementRulesSchema | None = None


class LockConfigSchema(BaseModel):
    """Lock selection.

    Attributes:
        lock_type: Lock mechanism.
        height: Lock center height (mm).
        edge_offset: Distance from the lock edge (mm).
        edge: Lock edge; defaults to the edge opposite the hinges.
        backset: Explicit cylinder backset (mm).
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    lock_type: LockType = Field(default=LockType.CYLINDER, alias="type")
    height: float = Field(default=1050.0, ge=0)
    edge_offset: float = Field(default=60.0, ge=0)
    edge: HingeSide | None = None
    backset: float | None = Field(default=None, gt=0)


class HandleConfigSchema(BaseModel):
    """Handle selection.

    Attributes:
        handle_type: Handle style.
        height: Explicit height (mm); follows the lock when omitted.
        side: Face(s) receiving a handle.
        edge: Handle edge; defaults to the lock edge.
        edge_offset: Explicit distance from the edge (mm).
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    handle_type: HandleType = Field(default=HandleType.LEVER, alias="type")
    height: float | None = Field(default=None, ge=0)
    side: HandleSide = HandleSide.BOTH
    edge: HingeSide | None = None
    edge_offset: float | None = Field(default=None, ge=0)


class BoltConfigSchema(BaseModel):
    """Inactive-leaf bolt selection.

    Example:
        ```json
        "bolts": {
          "type": "flush",
          "positions": ["top", "bottom"],
          "top_offset": 200,
          "bottom_offset": 200
        }
        ```
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    bolt_type: BoltType = Field(default=BoltType.FLUSH, alias="type")
    positions: list[BoltPosition] = Field(
        default_factory=lambda: [BoltPosition.TOP, BoltPosition.BOTTOM]
    )
    top_offset: float = Field(default=200.0, ge=0)
    bottom_offset: float = Field(default=200.0, ge=0)
    meeting_edge: HingeSide | None = None


class LeafHardwareConfigSchema(BaseModel):
    """Hardware for a single-leaf door."""

    model_config = ConfigDict(extra="forbid")

    hinges: HingeConfigSchema = Field(default_factory=HingeConfigSchema)
    lock: LockConfigSchema | None = None
    handles: HandleConfigSchema | None = None
    bolts: BoltConfigSchema | None = None


class DoubleDoorHardwareConfigSchema(BaseModel):
    """Hardware for both leaves of a double door."""

    model_config = ConfigDict(extra="forbid")

    active_hinges: HingeConfigSchema = Field(default_factory=HingeConfigSchema)
    lock: LockConfigSchema = Field(default_factory=LockConfigSchema)
    handles: HandleConfigSchema = Field(default_factory=HandleConfigSchema)
    inactive_hinges: HingeConfigSchema = Field(default_factory=HingeConfigSchema)
    bolts: BoltConfigSchema = Field(default_factory=BoltConfigSchema)
