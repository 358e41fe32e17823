"""
Point module - locations in 2D and 3D affine space.

Points differ from vectors in how they transform: ``relative_to`` subtracts the
frame origin before projecting onto the basis, mirroring measures from the
mirror axis or plane origin, and rotation happens about a center point or axis.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Generic, Iterable, Optional, Tuple, Union

import numpy as np

from .units import Coordinates, Units
from .vector import Vector2d, Vector3d

if TYPE_CHECKING:
    from .axis import Axis2d, Axis3d
    from .direction import Direction2d, Direction3d
    from .frame import Frame2d, Frame3d
    from .plane import Plane3d
    from .sketch_plane import SketchPlane3d

logger = logging.getLogger(__name__)


def _circumcenter_weights(
    a2: float, b2: float, c2: float
) -> Optional[Tuple[float, float, float]]:
    """
    Barycentric circumcenter weights from squared side lengths.

    ``a2`` is opposite the third point, ``b2`` opposite the first and ``c2``
    opposite the second. The weights sum to exactly zero for collinear or
    coincident points, which is the only degeneracy check performed.
    """
    t1 = a2 * (b2 + c2 - a2)
    t2 = b2 * (c2 + a2 - b2)
    t3 = c2 * (a2 + b2 - c2)
    total = t1 + t2 + t3
    # Exact comparison; nearly collinear points are accepted.
    if total == 0.0:
        return None
    return t2 / total, t3 / total, t1 / total


@dataclass(frozen=True)
class Point2d(Generic[Units, Coordinates]):
    """A 2D location."""

    x: float
    y: float

    # ========== Constructors ==========

    @classmethod
    def origin(cls) -> "Point2d":
        return cls(0.0, 0.0)

    @classmethod
    def xy(cls, x: float, y: float) -> "Point2d":
        return cls(float(x), float(y))

    @classmethod
    def from_coordinates(cls, coordinates: Tuple[float, float]) -> "Point2d":
        x, y = coordinates
        return cls(float(x), float(y))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Point2d":
        return cls(float(array[0]), float(array[1]))

    @classmethod
    def from_polar(cls, radius: float, angle: float) -> "Point2d":
        return cls(radius * math.cos(angle), radius * math.sin(angle))

    @classmethod
    def midpoint(cls, first: "Point2d", second: "Point2d") -> "Point2d":
        return cls.interpolate_from(first, second, 0.5)

    @classmethod
    def interpolate_from(
        cls, first: "Point2d", second: "Point2d", parameter: float
    ) -> "Point2d":
        """Linear interpolation; ``parameter`` 0 gives ``first``, 1 gives ``second``."""
        if parameter <= 0.5:
            return cls(
                first.x + parameter * (second.x - first.x),
                first.y + parameter * (second.y - first.y),
            )
        return cls(
            second.x + (1.0 - parameter) * (first.x - second.x),
            second.y + (1.0 - parameter) * (first.y - second.y),
        )

    @classmethod
    def centroid(cls, points: Iterable["Point2d"]) -> Optional["Point2d"]:
        """Average of the given points; ``None`` if there are none."""
        points = list(points)
        if not points:
            return None
        coordinates = np.array([[p.x, p.y] for p in points])
        return cls.from_array(coordinates.mean(axis=0))

    @classmethod
    def circumcenter(
        cls, first: "Point2d", second: "Point2d", third: "Point2d"
    ) -> Optional["Point2d"]:
        """
        Center of the circle through three points.

        Computed as a weighted centroid with squared side lengths as weights.

        Returns:
            The circumcenter, or ``None`` if the points are collinear or two of
            them coincide
        """
        weights = _circumcenter_weights(
            first.squared_distance_from(second),
            second.squared_distance_from(third),
            third.squared_distance_from(first),
        )
        if weights is None:
            logger.debug(f"No circumcenter for degenerate triangle {first}, {second}, {third}")
            return None
        w1, w2, w3 = weights
        return cls(
            w1 * first.x + w2 * second.x + w3 * third.x,
            w1 * first.y + w2 * second.y + w3 * third.y,
        )

    # ========== Accessors ==========

    @property
    def coordinates(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y])

    # ========== Arithmetic ==========

    def __add__(self, other: object) -> "Point2d":
        # Point + Vector = Point
        if not isinstance(other, Vector2d):
            return NotImplemented
        return Point2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Union["Point2d", Vector2d]:
        # Point - Point = Vector
        if isinstance(other, Point2d):
            return Vector2d(self.x - other.x, self.y - other.y)
        # Point - Vector = Point
        if isinstance(other, Vector2d):
            return Point2d(self.x - other.x, self.y - other.y)
        return NotImplemented

    # ========== Queries ==========

    def squared_distance_from(self, other: "Point2d") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance_from(self, other: "Point2d") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def signed_distance_along(self, axis: "Axis2d") -> float:
        """Distance along the axis from its origin to this point's projection."""
        origin = axis.origin_point
        d = axis.direction
        return (self.x - origin.x) * d.x + (self.y - origin.y) * d.y

    def signed_distance_from(self, axis: "Axis2d") -> float:
        """Perpendicular distance from the axis, positive to its left."""
        origin = axis.origin_point
        d = axis.direction
        return d.x * (self.y - origin.y) - d.y * (self.x - origin.x)

    def equal_within(self, tolerance: float, other: "Point2d") -> bool:
        return self.distance_from(other) <= tolerance

    # ========== Transformations ==========

    def translate_by(self, vector: Vector2d) -> "Point2d":
        return Point2d(self.x + vector.x, self.y + vector.y)

    def translate_in(self, direction: "Direction2d", distance: float) -> "Point2d":
        return Point2d(self.x + distance * direction.x, self.y + distance * direction.y)

    def rotate_around(self, center: "Point2d", angle: float) -> "Point2d":
        rotated = (self - center).rotate_by(angle)
        return center + rotated

    def mirror_across(self, axis: "Axis2d") -> "Point2d":
        origin = axis.origin_point
        mirrored = (self - origin).mirror_across(axis)
        return origin + mirrored

    def scale_about(self, center: "Point2d", scale: float) -> "Point2d":
        return Point2d(
            center.x + scale * (self.x - center.x),
            center.y + scale * (self.y - center.y),
        )

    def project_onto(self, axis: "Axis2d") -> "Point2d":
        """Closest point on the axis."""
        return axis.origin_point.translate_in(
            axis.direction, self.signed_distance_along(axis)
        )

    # ========== Frame conversion ==========

    def relative_to(self, frame: "Frame2d") -> "Point2d":
        displacement = self - frame.origin_point
        return Point2d(
            displacement.component_in(frame.x_direction),
            displacement.component_in(frame.y_direction),
        )

    def place_in(self, frame: "Frame2d") -> "Point2d":
        return frame.origin_point + Vector2d(self.x, self.y).place_in(frame)

    def place_onto(self, sketch_plane: "SketchPlane3d") -> "Point3d":
        """Embed a point given in sketch plane coordinates in 3D."""
        return sketch_plane.origin_point + Vector2d(self.x, self.y).place_onto(
            sketch_plane
        )

    # ========== Serialization ==========

    def to_json(self) -> Dict[str, float]:
        return {"x": float(self.x), "y": float(self.y)}

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> "Point2d":
        return Point2d(float(json_data["x"]), float(json_data["y"]))

    def to_python(self) -> str:
        return f"Point2d.xy({self.x}, {self.y})"


@dataclass(frozen=True)
class Point3d(Generic[Units, Coordinates]):
    """A 3D location."""

    x: float
    y: float
    z: float

    # ========== Constructors ==========

    @classmethod
    def origin(cls) -> "Point3d":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def xyz(cls, x: float, y: float, z: float) -> "Point3d":
        return cls(float(x), float(y), float(z))

    @classmethod
    def from_coordinates(cls, coordinates: Tuple[float, float, float]) -> "Point3d":
        x, y, z = coordinates
        return cls(float(x), float(y), float(z))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Point3d":
        return cls(float(array[0]), float(array[1]), float(array[2]))

    @classmethod
    def midpoint(cls, first: "Point3d", second: "Point3d") -> "Point3d":
        return cls.interpolate_from(first, second, 0.5)

    @classmethod
    def interpolate_from(
        cls, first: "Point3d", second: "Point3d", parameter: float
    ) -> "Point3d":
        if parameter <= 0.5:
            return cls(
                first.x + parameter * (second.x - first.x),
                first.y + parameter * (second.y - first.y),
                first.z + parameter * (second.z - first.z),
            )
        return cls(
            second.x + (1.0 - parameter) * (first.x - second.x),
            second.y + (1.0 - parameter) * (first.y - second.y),
            second.z + (1.0 - parameter) * (first.z - second.z),
        )

    @classmethod
    def centroid(cls, points: Iterable["Point3d"]) -> Optional["Point3d"]:
        points = list(points)
        if not points:
            return None
        coordinates = np.array([[p.x, p.y, p.z] for p in points])
        return cls.from_array(coordinates.mean(axis=0))

    @classmethod
    def circumcenter(
        cls, first: "Point3d", second: "Point3d", third: "Point3d"
    ) -> Optional["Point3d"]:
        """Center of the circle through three points; ``None`` if degenerate."""
        weights = _circumcenter_weights(
            first.squared_distance_from(second),
            second.squared_distance_from(third),
            third.squared_distance_from(first),
        )
        if weights is None:
            logger.debug(f"No circumcenter for degenerate triangle {first}, {second}, {third}")
            return None
        w1, w2, w3 = weights
        return cls(
            w1 * first.x + w2 * second.x + w3 * third.x,
            w1 * first.y + w2 * second.y + w3 * third.y,
            w1 * first.z + w2 * second.z + w3 * third.z,
        )

    # ========== Accessors ==========

    @property
    def coordinates(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    # ========== Arithmetic ==========

    def __add__(self, other: object) -> "Point3d":
        if not isinstance(other, Vector3d):
            return NotImplemented
        return Point3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Union["Point3d", Vector3d]:
        if isinstance(other, Point3d):
            return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector3d):
            return Point3d(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    # ========== Queries ==========

    def squared_distance_from(self, other: "Point3d") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def distance_from(self, other: "Point3d") -> float:
        return math.hypot(self.x - other.x, self.y - other.y, self.z - other.z)

    def signed_distance_along(self, axis: "Axis3d") -> float:
        return (self - axis.origin_point).component_in(axis.direction)

    def distance_from_axis(self, axis: "Axis3d") -> float:
        displacement = self - axis.origin_point
        return displacement.cross(axis.direction.to_vector()).length

    def signed_distance_from(self, plane: "Plane3d") -> float:
        """Distance from the plane, positive on the side its normal points to."""
        return (self - plane.origin_point).component_in(plane.normal_direction)

    def equal_within(self, tolerance: float, other: "Point3d") -> bool:
        return self.distance_from(other) <= tolerance

    # ========== Transformations ==========

    def translate_by(self, vector: Vector3d) -> "Point3d":
        return Point3d(self.x + vector.x, self.y + vector.y, self.z + vector.z)

    def translate_in(self, direction: "Direction3d", distance: float) -> "Point3d":
        return Point3d(
            self.x + distance * direction.x,
            self.y + distance * direction.y,
            self.z + distance * direction.z,
        )

    def rotate_around(self, axis: "Axis3d", angle: float) -> "Point3d":
        origin = axis.origin_point
        return origin + (self - origin).rotate_around(axis, angle)

    def mirror_across(self, plane: "Plane3d") -> "Point3d":
        return self.translate_in(
            plane.normal_direction, -2.0 * self.signed_distance_from(plane)
        )

    def scale_about(self, center: "Point3d", scale: float) -> "Point3d":
        return Point3d(
            center.x + scale * (self.x - center.x),
            center.y + scale * (self.y - center.y),
            center.z + scale * (self.z - center.z),
        )

    def project_onto(self, plane: "Plane3d") -> "Point3d":
        """Drop the component along the plane normal."""
        return self.translate_in(
            plane.normal_direction, -self.signed_distance_from(plane)
        )

    def project_onto_axis(self, axis: "Axis3d") -> "Point3d":
        return axis.origin_point.translate_in(
            axis.direction, self.signed_distance_along(axis)
        )

    def project_into(self, sketch_plane: "SketchPlane3d") -> Point2d:
        """Project onto the sketch plane and return its 2D sketch coordinates."""
        displacement = self - sketch_plane.origin_point
        return Point2d(
            displacement.component_in(sketch_plane.x_direction),
            displacement.component_in(sketch_plane.y_direction),
        )

    # ========== Frame conversion ==========

    def relative_to(self, frame: "Frame3d") -> "Point3d":
        displacement = self - frame.origin_point
        return Point3d(
            displacement.component_in(frame.x_direction),
            displacement.component_in(frame.y_direction),
            displacement.component_in(frame.z_direction),
        )

    def place_in(self, frame: "Frame3d") -> "Point3d":
        return frame.origin_point + Vector3d(self.x, self.y, self.z).place_in(frame)

    # ========== Serialization ==========

    def to_json(self) -> Dict[str, float]:
        return {"x": float(self.x), "y": float(self.y), "z": float(self.z)}

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> "Point3d":
        return Point3d(
            float(json_data["x"]), float(json_data["y"]), float(json_data["z"])
        )

    def to_python(self) -> str:
        return f"Point3d.xyz({self.x}, {self.y}, {self.z})"
