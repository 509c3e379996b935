"""Door leaf value objects."""

from __future__ import annotations

from dataclasses import dataclass

from ._enums import AstragalType, HingeSide, LeafCore, OpeningDirection


@dataclass(frozen=True)
class DoorLeafConfig:
    """Dimensions and orientation of one door leaf.

    The leaf's local frame has its origin at the bottom-left corner of the
    exterior face: X runs across the leaf, Y runs up, and Z runs through the
    leaf toward the interior face (negative values).

    Attributes:
        height: Leaf height in millimeters.
        width: Leaf width in millimeters.
        leaf_thickness: Leaf thickness in millimeters.
        hinge_side: Edge carrying the hinges.
        opening_direction: Swing direction relative to the exterior face.
        leaf_id: Prefix for placement identifiers produced for this leaf.
        weight_kg: Known leaf weight. When omitted the weight is estimated
            from the dimensions and core construction.
        core: Leaf construction used for weight estimation.
    """

    height: float
    width: float
    leaf_thickness: float
    hinge_side: HingeSide = HingeSide.LEFT
    opening_direction: OpeningDirection = OpeningDirection.INWARD
    leaf_id: str = "leaf"
    weight_kg: float | None = None
    core: LeafCore = LeafCore.HOLLOW

    def __post_init__(self) -> None:
        if self.height <= 0 or self.width <= 0 or self.leaf_thickness <= 0:
            raise ValueError("Leaf dimensions must be positive")
        if not self.leaf_id:
            raise ValueError("leaf_id must not be empty")
        if self.weight_kg is not None and self.weight_kg <= 0:
            raise ValueError("weight_kg must be positive when given")

    @property
    def hinge_edge_x(self) -> float:
        """X coordinate of the hinge-side edge."""
        return 0.0 if self.hinge_side is HingeSide.LEFT else self.width

    @property
    def opening_edge(self) -> HingeSide:
        """The edge opposite the hinges."""
        return self.hinge_side.opposite

    def edge_x(self, edge: HingeSide) -> float:
        """X coordinate of the given edge."""
        return 0.0 if edge is HingeSide.LEFT else self.width

    def x_from_edge(self, edge: HingeSide, offset: float) -> float:
        """X coordinate lying ``offset`` millimeters in from ``edge``."""
        if edge is HingeSide.LEFT:
            return offset
        return self.width - offset


@dataclass(frozen=True)
class DoubleDoorConfig:
    """A pair of leaves hung in one opening.

    Attributes:
        active_leaf: Leaf carrying the lock and handles.
        inactive_leaf: Secondary leaf secured by bolts.
        astragal: Treatment of the seam where the leaves meet.
    """

    active_leaf: DoorLeafConfig
    inactive_leaf: DoorLeafConfig
    astragal: AstragalType = AstragalType.NONE

    def __post_init__(self) -> None:
        if self.active_leaf.leaf_id == self.inactive_leaf.leaf_id:
            raise ValueError("Active and inactive leaves need distinct leaf_id values")
        if self.active_leaf.height != self.inactive_leaf.height:
            raise ValueError("Both leaves of a double door must share the same height")

    @property
    def has_equal_widths(self) -> bool:
        return self.active_leaf.width == self.inactive_leaf.width
