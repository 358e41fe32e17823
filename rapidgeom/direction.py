"""
Direction module - unit-length orientations in 2D and 3D.

Every checked constructor (``from_angle``, ``from_vector``, ``from_points``,
``orthonormalize``...) guarantees unit length, returning ``None`` when the
input has no direction. ``unsafe`` skips all of that: the caller promises
that the components already have unit length, and every derived result is
meaningless if they do not. Only a debug ``assert`` guards it.

Derived operations delegate to the vector layer and then either rely on the
operation being length preserving (rotation, mirroring, frame conversion with
an orthonormal frame) or renormalize through a checked constructor
(projection).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Generic, Optional, Tuple

from .constants import DESERIALIZE_TOLERANCE, UNIT_LENGTH_TOLERANCE
from .errors import InvalidDirectionError
from .quantity import normalize_angle
from .units import Coordinates
from .vector import Vector2d, Vector3d

if TYPE_CHECKING:
    from .axis import Axis2d, Axis3d
    from .frame import Frame2d, Frame3d
    from .plane import Plane3d
    from .point import Point2d, Point3d
    from .sketch_plane import SketchPlane3d

logger = logging.getLogger(__name__)


def _check_unit_json(components: Tuple[float, ...]) -> None:
    squared_length = sum(c * c for c in components)
    if abs(squared_length - 1.0) > DESERIALIZE_TOLERANCE:
        logger.warning(
            f"Rejecting serialized direction {components}: squared length {squared_length}"
        )
        raise InvalidDirectionError(
            f"Direction components {components} do not have unit length"
        )


@dataclass(frozen=True)
class Direction2d(Generic[Coordinates]):
    """A 2D unit direction."""

    x: float
    y: float

    # ========== Constructors ==========

    @classmethod
    def unsafe(cls, x: float, y: float) -> "Direction2d":
        """
        Build a direction from components without normalizing them.

        The caller is responsible for ``x**2 + y**2 == 1``. Nothing is
        checked outside of debug runs.
        """
        assert abs(x * x + y * y - 1.0) <= UNIT_LENGTH_TOLERANCE, (x, y)
        return cls(x, y)

    @classmethod
    def positive_x(cls) -> "Direction2d":
        return cls(1.0, 0.0)

    @classmethod
    def negative_x(cls) -> "Direction2d":
        return cls(-1.0, 0.0)

    @classmethod
    def positive_y(cls) -> "Direction2d":
        return cls(0.0, 1.0)

    @classmethod
    def negative_y(cls) -> "Direction2d":
        return cls(0.0, -1.0)

    @classmethod
    def from_angle(cls, angle: float) -> "Direction2d":
        """Direction at ``angle`` radians counterclockwise from positive X."""
        return cls(math.cos(angle), math.sin(angle))

    @classmethod
    def from_vector(cls, vector: Vector2d) -> Optional["Direction2d"]:
        """Normalize a vector; ``None`` if it has zero length."""
        length = vector.length
        if length == 0.0:
            logger.debug(f"No direction for zero-length vector {vector}")
            return None
        return cls.unsafe(vector.x / length, vector.y / length)

    @classmethod
    def from_points(
        cls, first: "Point2d", second: "Point2d"
    ) -> Optional["Direction2d"]:
        """Direction from ``first`` to ``second``; ``None`` if they coincide."""
        return cls.from_vector(Vector2d.from_points(first, second))

    @classmethod
    def orthonormalize(
        cls, x_vector: Vector2d, xy_vector: Vector2d
    ) -> Optional[Tuple["Direction2d", "Direction2d"]]:
        """
        Gram-Schmidt two vectors into a pair of perpendicular directions.

        The first direction is that of ``x_vector``. The second is
        perpendicular to it, on the same side as ``xy_vector``.

        Args:
            x_vector: Vector giving the first direction
            xy_vector: Vector selecting the side of the second direction

        Returns:
            (x_direction, y_direction), or ``None`` if either vector is zero or
            the two are exactly parallel
        """
        x_direction = cls.from_vector(x_vector)
        if x_direction is None:
            return None
        perpendicular = x_direction.perpendicular_to()
        side = xy_vector.component_in(perpendicular)
        if side > 0.0:
            return x_direction, perpendicular
        if side < 0.0:
            return x_direction, perpendicular.reverse()
        logger.debug(f"Cannot orthonormalize parallel vectors {x_vector}, {xy_vector}")
        return None

    # ========== Accessors ==========

    @property
    def components(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_vector(self) -> Vector2d:
        return Vector2d(self.x, self.y)

    def to_angle(self) -> float:
        """Counterclockwise angle from positive X, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def component_in(self, other: "Direction2d") -> float:
        return self.x * other.x + self.y * other.y

    def angle_from(self, other: "Direction2d") -> float:
        """
        Signed counterclockwise angle from ``other`` to this direction.

        Uses ``atan2`` of the cross and dot products, so the sign survives and
        the result stays accurate for nearly parallel directions.

        Returns:
            Angle in (-pi, pi]
        """
        cross = other.x * self.y - other.y * self.x
        dot = other.x * self.x + other.y * self.y
        return normalize_angle(math.atan2(cross, dot))

    def equal_within(self, tolerance: float, other: "Direction2d") -> bool:
        return abs(self.angle_from(other)) <= tolerance

    # ========== Transformations ==========

    def reverse(self) -> "Direction2d":
        return Direction2d(-self.x, -self.y)

    def perpendicular_to(self) -> "Direction2d":
        """This direction rotated a quarter turn counterclockwise."""
        return Direction2d(-self.y, self.x)

    def rotate_counterclockwise(self) -> "Direction2d":
        return Direction2d(-self.y, self.x)

    def rotate_clockwise(self) -> "Direction2d":
        return Direction2d(self.y, -self.x)

    def rotate_by(self, angle: float) -> "Direction2d":
        rotated = self.to_vector().rotate_by(angle)
        return Direction2d.unsafe(rotated.x, rotated.y)

    def mirror_across(self, axis: "Axis2d") -> "Direction2d":
        mirrored = self.to_vector().mirror_across(axis)
        return Direction2d.unsafe(mirrored.x, mirrored.y)

    # ========== Frame conversion ==========

    def relative_to(self, frame: "Frame2d") -> "Direction2d":
        local = self.to_vector().relative_to(frame)
        return Direction2d.unsafe(local.x, local.y)

    def place_in(self, frame: "Frame2d") -> "Direction2d":
        placed = self.to_vector().place_in(frame)
        return Direction2d.unsafe(placed.x, placed.y)

    def place_onto(self, sketch_plane: "SketchPlane3d") -> "Direction3d":
        placed = self.to_vector().place_onto(sketch_plane)
        return Direction3d.unsafe(placed.x, placed.y, placed.z)

    # ========== Serialization ==========

    def to_json(self) -> Dict[str, float]:
        return {"x": float(self.x), "y": float(self.y)}

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> "Direction2d":
        x = float(json_data["x"])
        y = float(json_data["y"])
        _check_unit_json((x, y))
        direction = Direction2d.from_vector(Vector2d(x, y))
        assert direction is not None
        return direction

    def to_python(self) -> str:
        return f"Direction2d.unsafe({self.x}, {self.y})"


@dataclass(frozen=True)
class Direction3d(Generic[Coordinates]):
    """A 3D unit direction."""

    x: float
    y: float
    z: float

    # ========== Constructors ==========

    @classmethod
    def unsafe(cls, x: float, y: float, z: float) -> "Direction3d":
        """
        Build a direction from components without normalizing them.

        The caller is responsible for ``x**2 + y**2 + z**2 == 1``. Nothing is
        checked outside of debug runs.
        """
        assert abs(x * x + y * y + z * z - 1.0) <= UNIT_LENGTH_TOLERANCE, (x, y, z)
        return cls(x, y, z)

    @classmethod
    def positive_x(cls) -> "Direction3d":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def negative_x(cls) -> "Direction3d":
        return cls(-1.0, 0.0, 0.0)

    @classmethod
    def positive_y(cls) -> "Direction3d":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def negative_y(cls) -> "Direction3d":
        return cls(0.0, -1.0, 0.0)

    @classmethod
    def positive_z(cls) -> "Direction3d":
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def negative_z(cls) -> "Direction3d":
        return cls(0.0, 0.0, -1.0)

    @classmethod
    def from_azimuth_and_elevation(
        cls, azimuth: float, elevation: float
    ) -> "Direction3d":
        """
        Direction from spherical angles relative to the global XY plane.

        Args:
            azimuth: Angle from positive X toward positive Y, in the XY plane
            elevation: Angle up from the XY plane toward positive Z
        """
        cos_elevation = math.cos(elevation)
        return cls(
            cos_elevation * math.cos(azimuth),
            cos_elevation * math.sin(azimuth),
            math.sin(elevation),
        )

    @classmethod
    def from_vector(cls, vector: Vector3d) -> Optional["Direction3d"]:
        """Normalize a vector; ``None`` if it has zero length."""
        length = vector.length
        if length == 0.0:
            logger.debug(f"No direction for zero-length vector {vector}")
            return None
        return cls.unsafe(vector.x / length, vector.y / length, vector.z / length)

    @classmethod
    def from_points(
        cls, first: "Point3d", second: "Point3d"
    ) -> Optional["Direction3d"]:
        """Direction from ``first`` to ``second``; ``None`` if they coincide."""
        return cls.from_vector(Vector3d.from_points(first, second))

    @classmethod
    def orthonormalize_pair(
        cls, x_vector: Vector3d, xy_vector: Vector3d
    ) -> Optional[Tuple["Direction3d", "Direction3d"]]:
        """
        Gram-Schmidt two vectors into a pair of perpendicular directions.

        The first direction is that of ``x_vector``; the second is the part of
        ``xy_vector`` perpendicular to it, pointing to the same side.
        ``None`` if either vector is zero or they are exactly parallel.
        """
        x_direction = cls.from_vector(x_vector)
        if x_direction is None:
            return None
        y_vector = xy_vector - x_direction.to_vector() * xy_vector.component_in(
            x_direction
        )
        y_direction = cls.from_vector(y_vector)
        if y_direction is None:
            logger.debug(
                f"Cannot orthonormalize parallel vectors {x_vector}, {xy_vector}"
            )
            return None
        return x_direction, y_direction

    @classmethod
    def orthonormalize(
        cls, x_vector: Vector3d, xy_vector: Vector3d, xyz_vector: Vector3d
    ) -> Optional[Tuple["Direction3d", "Direction3d", "Direction3d"]]:
        """
        Gram-Schmidt three vectors into an orthonormal triple.

        The third direction points to the same side of the first two as
        ``xyz_vector``. ``None`` if ``xyz_vector`` lies exactly in the plane
        of the other two, or if the first two are degenerate.
        """
        pair = cls.orthonormalize_pair(x_vector, xy_vector)
        if pair is None:
            return None
        x_direction, y_direction = pair
        z_vector = (
            xyz_vector
            - x_direction.to_vector() * xyz_vector.component_in(x_direction)
            - y_direction.to_vector() * xyz_vector.component_in(y_direction)
        )
        z_direction = cls.from_vector(z_vector)
        if z_direction is None:
            logger.debug(f"Cannot orthonormalize coplanar vector {xyz_vector}")
            return None
        return x_direction, y_direction, z_direction

    # ========== Accessors ==========

    @property
    def components(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_vector(self) -> Vector3d:
        return Vector3d(self.x, self.y, self.z)

    @property
    def azimuth(self) -> float:
        return math.atan2(self.y, self.x)

    @property
    def elevation(self) -> float:
        return math.atan2(self.z, math.hypot(self.x, self.y))

    def component_in(self, other: "Direction3d") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Direction3d") -> Vector3d:
        return self.to_vector().cross(other.to_vector())

    def angle_from(self, other: "Direction3d") -> float:
        """Unsigned angle between the two directions, in [0, pi]."""
        cross_length = self.cross(other).length
        return math.atan2(cross_length, self.component_in(other))

    def equal_within(self, tolerance: float, other: "Direction3d") -> bool:
        return self.angle_from(other) <= tolerance

    def perpendicular_to(self) -> "Direction3d":
        perpendicular = self.to_vector().perpendicular_to()
        length = perpendicular.length
        return Direction3d.unsafe(
            perpendicular.x / length, perpendicular.y / length, perpendicular.z / length
        )

    def perpendicular_basis(self) -> Tuple["Direction3d", "Direction3d"]:
        """
        Two directions that form a right-handed basis together with this one.

        Returns:
            (x_direction, y_direction) with ``x × y == self``
        """
        x_direction = self.perpendicular_to()
        y = self.cross(x_direction)
        return x_direction, Direction3d.unsafe(y.x, y.y, y.z)

    # ========== Transformations ==========

    def reverse(self) -> "Direction3d":
        return Direction3d(-self.x, -self.y, -self.z)

    def rotate_around(self, axis: "Axis3d", angle: float) -> "Direction3d":
        rotated = self.to_vector().rotate_around(axis, angle)
        return Direction3d.unsafe(rotated.x, rotated.y, rotated.z)

    def mirror_across(self, plane: "Plane3d") -> "Direction3d":
        mirrored = self.to_vector().mirror_across(plane)
        return Direction3d.unsafe(mirrored.x, mirrored.y, mirrored.z)

    def project_onto(self, plane: "Plane3d") -> Optional["Direction3d"]:
        """
        Drop the normal component and renormalize.

        ``None`` when this direction is parallel to the plane normal.
        """
        return Direction3d.from_vector(self.to_vector().project_onto(plane))

    def project_into(
        self, sketch_plane: "SketchPlane3d"
    ) -> Optional[Direction2d]:
        """
        Project onto the sketch plane and express in its 2D basis.

        ``None`` when this direction is parallel to the sketch plane normal.
        """
        return Direction2d.from_vector(self.to_vector().project_into(sketch_plane))

    # ========== Frame conversion ==========

    def relative_to(self, frame: "Frame3d") -> "Direction3d":
        local = self.to_vector().relative_to(frame)
        return Direction3d.unsafe(local.x, local.y, local.z)

    def place_in(self, frame: "Frame3d") -> "Direction3d":
        placed = self.to_vector().place_in(frame)
        return Direction3d.unsafe(placed.x, placed.y, placed.z)

    # ========== Serialization ==========

    def to_json(self) -> Dict[str, float]:
        return {"x": float(self.x), "y": float(self.y), "z": float(self.z)}

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> "Direction3d":
        x = float(json_data["x"])
        y = float(json_data["y"])
        z = float(json_data["z"])
        _check_unit_json((x, y, z))
        direction = Direction3d.from_vector(Vector3d(x, y, z))
        assert direction is not None
        return direction

    def to_python(self) -> str:
        return f"Direction3d.unsafe({self.x}, {self.y}, {self.z})"
