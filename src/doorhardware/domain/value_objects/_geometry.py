"""3D geometry value objects in door-local space."""

from __future__ import annotations

from dataclasses import dataclass
from math import dist, isclose, radians, sqrt


@dataclass(frozen=True)
class Point3D:
    """3D point in door-local space (millimeters).

    Unlike the leaf dimensions, coordinates may be negative: Z runs from the
    exterior face (0) into the leaf (down to -leaf_thickness) and beyond for
    hardware standing off the interior face.
    """

    x: float
    y: float
    z: float

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def distance_to(self, other: Point3D) -> float:
        """Euclidean distance to another point."""
        return dist(self.as_tuple(), other.as_tuple())

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class AxisAngle:
    """Rotation expressed as a unit axis and an angle in degrees.

    Attributes:
        axis: Rotation axis as (x, y, z). Must be unit length.
        angle: Rotation angle in degrees, right-hand rule about the axis.
    """

    axis: tuple[float, float, float]
    angle: float

    def __post_init__(self) -> None:
        length = sqrt(sum(c * c for c in self.axis))
        if not isclose(length, 1.0, abs_tol=1e-9):
            raise ValueError("Rotation axis must be a unit vector")

    @property
    def angle_radians(self) -> float:
        """Rotation angle in radians, for renderers that expect them."""
        return radians(self.angle)

    @classmethod
    def about_x(cls, angle: float) -> AxisAngle:
        return cls(axis=(1.0, 0.0, 0.0), angle=angle)

    @classmethod
    def about_y(cls, angle: float) -> AxisAngle:
        return cls(axis=(0.0, 1.0, 0.0), angle=angle)

    @classmethod
    def about_z(cls, angle: float) -> AxisAngle:
        return cls(axis=(0.0, 0.0, 1.0), angle=angle)

    @classmethod
    def identity(cls) -> AxisAngle:
        return cls.about_y(0.0)


@dataclass(frozen=True)
class Transform3D:
    """Position and orientation of one piece of hardware on a leaf."""

    position: Point3D
    rotation: AxisAngle
