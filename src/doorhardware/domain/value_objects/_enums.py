"""Enumerations for door leaves and hardware selections."""

from __future__ import annotations

from enum import Enum


class HingeSide(str, Enum):
    """Edge of the leaf that carries the hinges."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> HingeSide:
        """The other edge of the leaf."""
        return HingeSide.RIGHT if self is HingeSide.LEFT else HingeSide.LEFT


class OpeningDirection(str, Enum):
    """Direction the leaf swings relative to the exterior face."""

    INWARD = "inward"
    OUTWARD = "outward"


class HardwareKind(str, Enum):
    """Kind of hardware placed on a leaf."""

    HINGE = "hinge"
    LOCK = "lock"
    HANDLE = "handle"
    BOLT = "bolt"


class HingeType(str, Enum):
    """Hinge styles.

    Attributes:
        BUTT: Surface-mounted butt hinge with an exposed barrel.
        CONCEALED: Cup hinge bored into the back of the leaf.
        PIANO: Continuous hinge running the full leaf height.
    """

    BUTT = "butt"
    CONCEALED = "concealed"
    PIANO = "piano"


class DistributionMode(str, Enum):
    """How intermediate hinges are spread between the end hinges."""

    EVEN = "even"
    WEIGHTED = "weighted"


class LockType(str, Enum):
    """Lock mechanisms."""

    CYLINDER = "cylinder"
    MORTISE = "mortise"
    DEADBOLT = "deadbolt"
    SMART = "smart"


class HandleType(str, Enum):
    """Handle styles."""

    LEVER = "lever"
    KNOB = "knob"
    PULL = "pull"
    BAR = "bar"


class HandleSide(str, Enum):
    """Which face(s) of the leaf receive a handle."""

    BOTH = "both"
    EXTERIOR = "exterior"
    INTERIOR = "interior"

    def faces(self) -> tuple[HandleSide, ...]:
        """Expand to the individual mounting faces, exterior first."""
        if self is HandleSide.BOTH:
            return (HandleSide.EXTERIOR, HandleSide.INTERIOR)
        return (self,)


class BoltType(str, Enum):
    """Inactive-leaf bolt styles."""

    FLUSH = "flush"
    SURFACE = "surface"
    AUTOMATIC = "automatic"


class BoltPosition(str, Enum):
    """Bolt location along the meeting edge."""

    TOP = "top"
    BOTTOM = "bottom"


class AstragalType(str, Enum):
    """Treatment of the seam between two meeting leaves."""

    NONE = "none"
    SURFACE = "surface"
    OVERLAP = "overlap"


class LeafCore(str, Enum):
    """Leaf construction, used for weight estimation."""

    SOLID = "solid"
    HOLLOW = "hollow"
    GLAZED = "glazed"


class LeafState(str, Enum):
    """Motion state of a leaf, as reported by the animation layer."""

    CLOSED = "closed"
    OPENING = "opening"
    OPEN = "open"
    CLOSING = "closing"

    @classmethod
    def from_open_flag(cls, is_open: bool) -> LeafState:
        """Adapt a plain "is the leaf open" flag to a state."""
        return cls.OPEN if is_open else cls.CLOSED


class ConflictSeverity(str, Enum):
    """Severity of a clearance conflict."""

    WARNING = "warning"
    ERROR = "error"
