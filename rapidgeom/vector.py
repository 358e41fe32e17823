"""
Vector module - free displacement vectors in 2D and 3D.

Vectors are translation invariant: ``relative_to`` / ``place_in`` only rotate
them into or out of a frame's basis, and mirroring ignores the position of the
mirror axis or plane.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Generic, Optional, Sequence, Tuple

import numpy as np

from .units import Coordinates, Units

if TYPE_CHECKING:
    from .axis import Axis2d, Axis3d
    from .direction import Direction2d, Direction3d
    from .frame import Frame2d, Frame3d
    from .plane import Plane3d
    from .point import Point2d, Point3d
    from .sketch_plane import SketchPlane3d


def rotation_matrix(axis: Sequence[float], angle: float) -> np.ndarray:
    """
    Rotation matrix about a unit axis through the origin (Rodrigues' formula).

    Args:
        axis: Unit axis components (x, y, z)
        angle: Rotation angle in radians, counterclockwise looking down the axis

    Returns:
        3x3 rotation matrix
    """
    K = np.array(
        [
            [0.0, -axis[2], axis[1]],
            [axis[2], 0.0, -axis[0]],
            [-axis[1], axis[0], 0.0],
        ]
    )
    I = np.eye(3)
    return I + np.sin(angle) * K + (1.0 - np.cos(angle)) * (K @ K)


@dataclass(frozen=True)
class Vector2d(Generic[Units, Coordinates]):
    """A 2D displacement, optionally tagged with units and a coordinate system."""

    x: float
    y: float

    # ========== Constructors ==========

    @classmethod
    def zero(cls) -> "Vector2d":
        return cls(0.0, 0.0)

    @classmethod
    def xy(cls, x: float, y: float) -> "Vector2d":
        return cls(float(x), float(y))

    @classmethod
    def from_components(cls, components: Tuple[float, float]) -> "Vector2d":
        x, y = components
        return cls(float(x), float(y))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Vector2d":
        return cls(float(array[0]), float(array[1]))

    @classmethod
    def from_polar(cls, length: float, angle: float) -> "Vector2d":
        return cls(length * math.cos(angle), length * math.sin(angle))

    @classmethod
    def from_points(cls, start: "Point2d", end: "Point2d") -> "Vector2d":
        """Vector from ``start`` to ``end``."""
        return cls(end.x - start.x, end.y - start.y)

    @classmethod
    def with_length(cls, length: float, direction: "Direction2d") -> "Vector2d":
        return cls(length * direction.x, length * direction.y)

    # ========== Accessors ==========

    @property
    def components(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y])

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y

    # ========== Arithmetic ==========

    def __add__(self, other: object) -> "Vector2d":
        if not isinstance(other, Vector2d):
            return NotImplemented
        return Vector2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "Vector2d":
        if not isinstance(other, Vector2d):
            return NotImplemented
        return Vector2d(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2d":
        return Vector2d(-self.x, -self.y)

    def __mul__(self, scale: object) -> "Vector2d":
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Vector2d(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __truediv__(self, divisor: object) -> "Vector2d":
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return Vector2d(self.x / divisor, self.y / divisor)

    def dot(self, other: "Vector2d") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2d") -> float:
        """Scalar (z component of the) cross product."""
        return self.x * other.y - self.y * other.x

    def component_in(self, direction: "Direction2d") -> float:
        return self.x * direction.x + self.y * direction.y

    def scale_by(self, scale: float) -> "Vector2d":
        return Vector2d(self.x * scale, self.y * scale)

    def reverse(self) -> "Vector2d":
        return -self

    def normalize(self) -> "Vector2d":
        """Scale to unit length; the zero vector stays zero."""
        length = self.length
        if length == 0.0:
            return Vector2d.zero()
        return Vector2d(self.x / length, self.y / length)

    def direction(self) -> Optional["Direction2d"]:
        """Direction of this vector, or ``None`` for the zero vector."""
        from .direction import Direction2d

        return Direction2d.from_vector(self)

    def perpendicular_to(self) -> "Vector2d":
        """The vector rotated a quarter turn counterclockwise."""
        return Vector2d(-self.y, self.x)

    def equal_within(self, tolerance: float, other: "Vector2d") -> bool:
        return (self - other).length <= tolerance

    # ========== Transformations ==========

    def rotate_by(self, angle: float) -> "Vector2d":
        c = math.cos(angle)
        s = math.sin(angle)
        return Vector2d(c * self.x - s * self.y, s * self.x + c * self.y)

    def rotate_counterclockwise(self) -> "Vector2d":
        return Vector2d(-self.y, self.x)

    def rotate_clockwise(self) -> "Vector2d":
        return Vector2d(self.y, -self.x)

    def mirror_across(self, axis: "Axis2d") -> "Vector2d":
        """Reflect across the axis direction; the axis origin is irrelevant."""
        d = axis.direction
        a = 1.0 - 2.0 * d.y * d.y
        b = 2.0 * d.x * d.y
        c = 1.0 - 2.0 * d.x * d.x
        return Vector2d(a * self.x + b * self.y, c * self.y + b * self.x)

    def project_onto(self, axis: "Axis2d") -> "Vector2d":
        """Component of this vector along the axis direction."""
        d = axis.direction
        length = self.component_in(d)
        return Vector2d(length * d.x, length * d.y)

    # ========== Frame conversion ==========

    def relative_to(self, frame: "Frame2d") -> "Vector2d":
        return Vector2d(
            self.component_in(frame.x_direction),
            self.component_in(frame.y_direction),
        )

    def place_in(self, frame: "Frame2d") -> "Vector2d":
        dx = frame.x_direction
        dy = frame.y_direction
        return Vector2d(
            self.x * dx.x + self.y * dy.x,
            self.x * dx.y + self.y * dy.y,
        )

    def place_onto(self, sketch_plane: "SketchPlane3d") -> "Vector3d":
        """Embed this vector (expressed in the sketch plane) in 3D."""
        dx = sketch_plane.x_direction
        dy = sketch_plane.y_direction
        return Vector3d(
            self.x * dx.x + self.y * dy.x,
            self.x * dx.y + self.y * dy.y,
            self.x * dx.z + self.y * dy.z,
        )

    # ========== Serialization ==========

    def to_json(self) -> Dict[str, float]:
        return {"x": float(self.x), "y": float(self.y)}

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> "Vector2d":
        return Vector2d(float(json_data["x"]), float(json_data["y"]))

    def to_python(self) -> str:
        return f"Vector2d.xy({self.x}, {self.y})"


@dataclass(frozen=True)
class Vector3d(Generic[Units, Coordinates]):
    """A 3D displacement, optionally tagged with units and a coordinate system."""

    x: float
    y: float
    z: float

    # ========== Constructors ==========

    @classmethod
    def zero(cls) -> "Vector3d":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def xyz(cls, x: float, y: float, z: float) -> "Vector3d":
        return cls(float(x), float(y), float(z))

    @classmethod
    def from_components(cls, components: Tuple[float, float, float]) -> "Vector3d":
        x, y, z = components
        return cls(float(x), float(y), float(z))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Vector3d":
        return cls(float(array[0]), float(array[1]), float(array[2]))

    @classmethod
    def from_points(cls, start: "Point3d", end: "Point3d") -> "Vector3d":
        """Vector from ``start`` to ``end``."""
        return cls(end.x - start.x, end.y - start.y, end.z - start.z)

    @classmethod
    def with_length(cls, length: float, direction: "Direction3d") -> "Vector3d":
        return cls(length * direction.x, length * direction.y, length * direction.z)

    # ========== Accessors ==========

    @property
    def components(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y, self.z)

    @property
    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    # ========== Arithmetic ==========

    def __add__(self, other: object) -> "Vector3d":
        if not isinstance(other, Vector3d):
            return NotImplemented
        return Vector3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> "Vector3d":
        if not isinstance(other, Vector3d):
            return NotImplemented
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3d":
        return Vector3d(-self.x, -self.y, -self.z)

    def __mul__(self, scale: object) -> "Vector3d":
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Vector3d(self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def __truediv__(self, divisor: object) -> "Vector3d":
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return Vector3d(self.x / divisor, self.y / divisor, self.z / divisor)

    def dot(self, other: "Vector3d") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3d") -> "Vector3d":
        return Vector3d(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def component_in(self, direction: "Direction3d") -> float:
        return self.x * direction.x + self.y * direction.y + self.z * direction.z

    def scale_by(self, scale: float) -> "Vector3d":
        return Vector3d(self.x * scale, self.y * scale, self.z * scale)

    def reverse(self) -> "Vector3d":
        return -self

    def normalize(self) -> "Vector3d":
        """Scale to unit length; the zero vector stays zero."""
        length = self.length
        if length == 0.0:
            return Vector3d.zero()
        return Vector3d(self.x / length, self.y / length, self.z / length)

    def direction(self) -> Optional["Direction3d"]:
        """Direction of this vector, or ``None`` for the zero vector."""
        from .direction import Direction3d

        return Direction3d.from_vector(self)

    def perpendicular_to(self) -> "Vector3d":
        """
        An arbitrary vector perpendicular to this one.

        The component with the smallest magnitude is dropped so the result is
        as long as possible. The zero vector maps to the zero vector.
        """
        ax = abs(self.x)
        ay = abs(self.y)
        az = abs(self.z)
        if ax <= ay:
            if ax <= az:
                return Vector3d(0.0, -self.z, self.y)
            return Vector3d(-self.y, self.x, 0.0)
        if ay <= az:
            return Vector3d(self.z, 0.0, -self.x)
        return Vector3d(-self.y, self.x, 0.0)

    def equal_within(self, tolerance: float, other: "Vector3d") -> bool:
        return (self - other).length <= tolerance

    # ========== Transformations ==========

    def rotate_around(self, axis: "Axis3d", angle: float) -> "Vector3d":
        """Rotate about the axis direction; the axis origin is irrelevant."""
        d = axis.direction
        R = rotation_matrix((d.x, d.y, d.z), angle)
        return Vector3d.from_array(R @ self.to_array())

    def mirror_across(self, plane: "Plane3d") -> "Vector3d":
        """Reflect across the plane orientation; the plane origin is irrelevant."""
        n = plane.normal_direction
        scale = -2.0 * self.component_in(n)
        return Vector3d(
            self.x + scale * n.x,
            self.y + scale * n.y,
            self.z + scale * n.z,
        )

    def project_onto(self, plane: "Plane3d") -> "Vector3d":
        """Drop the component along the plane normal."""
        n = plane.normal_direction
        normal_component = self.component_in(n)
        return Vector3d(
            self.x - normal_component * n.x,
            self.y - normal_component * n.y,
            self.z - normal_component * n.z,
        )

    def project_onto_axis(self, axis: "Axis3d") -> "Vector3d":
        d = axis.direction
        length = self.component_in(d)
        return Vector3d(length * d.x, length * d.y, length * d.z)

    def project_into(self, sketch_plane: "SketchPlane3d") -> Vector2d:
        """
        Project onto the sketch plane and express the result in its 2D basis.

        The normal component drops out of the dot products, so this always
        succeeds.
        """
        return Vector2d(
            self.component_in(sketch_plane.x_direction),
            self.component_in(sketch_plane.y_direction),
        )

    # ========== Frame conversion ==========

    def relative_to(self, frame: "Frame3d") -> "Vector3d":
        return Vector3d(
            self.component_in(frame.x_direction),
            self.component_in(frame.y_direction),
            self.component_in(frame.z_direction),
        )

    def place_in(self, frame: "Frame3d") -> "Vector3d":
        dx = frame.x_direction
        dy = frame.y_direction
        dz = frame.z_direction
        return Vector3d(
            self.x * dx.x + self.y * dy.x + self.z * dz.x,
            self.x * dx.y + self.y * dy.y + self.z * dz.y,
            self.x * dx.z + self.y * dy.z + self.z * dz.z,
        )

    # ========== Serialization ==========

    def to_json(self) -> Dict[str, float]:
        return {"x": float(self.x), "y": float(self.y), "z": float(self.z)}

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> "Vector3d":
        return Vector3d(
            float(json_data["x"]), float(json_data["y"]), float(json_data["z"])
        )

    def to_python(self) -> str:
        return f"Vector3d.xyz({self.x}, {self.y}, {self.z})"
