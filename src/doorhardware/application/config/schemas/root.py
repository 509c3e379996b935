"""Root configuration schema.

This module contains the root DoorHardwareConfiguration model, which holds
either a single leaf (``door`` + ``hardware``) or a double door
(``double_door``).
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from doorhardware.application.config.schemas.base import (
    SUPPORTED_VERSIONS,
    AstragalType,
    DoorLeafConfigSchema,
)
from doorhardware.application.config.schemas.hardware_schema import (
    DoubleDoorHardwareConfigSchema,
    LeafHardwareConfigSchema,
)
from doorhardware.application.config.schemas.placement_schema import (
    PlacementTuningSchema,
)


class DoubleDoorConfigSchema(BaseModel):
    """A pair of leaves hung in one opening.

    Attributes:
        active_leaf: Leaf carrying the lock and handles.
        inactive_leaf: Secondary leaf secured by bolts.
        astragal: Meeting-edge treatment ("none", "surface" or "overlap").
        hardware: Hardware selections for both leaves.
    """

    model_config = ConfigDict(extra="forbid")

    active_leaf: DoorLeafConfigSchema
    inactive_leaf: DoorLeafConfigSchema
    astragal: AstragalType = AstragalType.NONE
    hardware: DoubleDoorHardwareConfigSchema = Field(
        default_factory=DoubleDoorHardwareConfigSchema
    )

    @model_validator(mode="after")
    def validate_leaves(self) -> "DoubleDoorConfigSchema":
        """Leaves need distinct ids and a shared height."""
        if self.active_leaf.leaf_id == self.inactive_leaf.leaf_id:
            raise ValueError("active_leaf and inactive_leaf need distinct leaf_id values")
        if self.active_leaf.height != self.inactive_leaf.height:
            raise ValueError("Both leaves of a double door must share the same height")
        return self


class DoorHardwareConfiguration(BaseModel):
    """Root configuration model for door hardware placement.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        door: Single leaf dimensions (with ``hardware``).
        hardware: Hardware for the single leaf.
        double_door: Double door definition (instead of ``door``).
        placement: Optional placement tuning.

    Example:
        >>> config = DoorHardwareConfiguration(
        ...     schema_version="1.0",
        ...     door=DoorLeafConfigSchema(height=2000, width=900, leaf_thickness=40),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    door: DoorLeafConfigSchema | None = None
    hardware: LeafHardwareConfigSchema | None = None
    double_door: DoubleDoorConfigSchema | None = None
    placement: PlacementTuningSchema | None = None

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted for
        forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(s.split(".")[0]) for s in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_door_or_double_door(self) -> "DoorHardwareConfiguration":
        """Exactly one of ``door`` and ``double_door`` must be given."""
        if (self.door is None) == (self.double_door is None):
            raise ValueError("Specify exactly one of 'door' or 'double_door'")
        if self.double_door is not None and self.hardware is not None:
            raise ValueError(
                "'hardware' applies to single doors; use 'double_door.hardware'"
            )
        return self

    @property
    def is_double_door(self) -> bool:
        return self.double_door is not None
