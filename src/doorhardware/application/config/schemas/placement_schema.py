"""Placement tuning configuration schema."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveFloat,
)

from doorhardware.domain.value_objects import HardwareKind, LockType


class ClearanceRuleSchema(BaseModel):
    """Required clearance between two kinds of hardware.

    Attributes:
        kinds: The pair of hardware kinds. A single kind sets the clearance
            between two pieces of that kind.
        clearance: Required centroid distance in millimeters.
    """

    model_config = ConfigDict(extra="forbid")

    kinds: list[HardwareKind] = Field(..., min_length=1, max_length=2)
    clearance: float = Field(..., gt=0)


class PlacementTuningSchema(BaseModel):
    """Adjustable placement constants.

    Every field is optional; omitted fields keep the standard value. The
    clearance and lock thickness tables are merged entry by entry onto the
    standard tables.

    Example:
        ```json
        "placement": {
          "weighted_exponent": 0.75,
          "handle_offset_without_lock": 65,
          "clearances": [{"kinds": ["lock", "handle"], "clearance": 40}],
          "lock_min_thickness": {"smart": 45}
        }
        ```
    """

    model_config = ConfigDict(extra="forbid")

    weighted_exponent: float | None = Field(default=None, gt=0, le=1)
    handle_offset_with_lock: float | None = Field(default=None, gt=0)
    handle_offset_without_lock: float | None = Field(default=None, gt=0)
    default_handle_height: float | None = Field(default=None, gt=0)
    butt_barrel_diameter: float | None = Field(default=None, gt=0)
    concealed_edge_inset: float | None = Field(default=None, ge=0)
    concealed_cup_depth: float | None = Field(default=None, gt=0)
    default_clearance: float | None = Field(default=None, gt=0)
    clearances: list[ClearanceRuleSchema] | None = None
    lock_min_thickness: dict[LockType, PositiveFloat] | None = None
