"""
Circle module - circles in 2D and circles embedded in 3D.

The radius is expected to be non-negative but is never checked; scaling by a
negative factor keeps it non-negative.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from .axis import Axis2d, Axis3d
from .direction import Direction2d, Direction3d
from .plane import Plane3d
from .point import Point2d, Point3d
from .transform import map_fields
from .vector import Vector2d, Vector3d

if TYPE_CHECKING:
    from .frame import Frame2d, Frame3d
    from .sketch_plane import SketchPlane3d

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Circle2d:
    """A circle given by its center point and radius."""

    center_point: Point2d
    radius: float

    # ========== Constructors ==========

    @classmethod
    def with_radius(cls, radius: float, center_point: Point2d) -> "Circle2d":
        return cls(center_point, float(radius))

    @classmethod
    def swept_around(cls, center_point: Point2d, point: Point2d) -> "Circle2d":
        """Circle centered at ``center_point`` passing through ``point``."""
        return cls(center_point, center_point.distance_from(point))

    @classmethod
    def through_points(
        cls, first: Point2d, second: Point2d, third: Point2d
    ) -> Optional["Circle2d"]:
        """
        Circle through three points.

        The radius is the mean of the three center-to-point distances, which
        are equal in exact arithmetic.

        Returns:
            The circle, or ``None`` if the points are collinear or two of them
            coincide
        """
        center = Point2d.circumcenter(first, second, third)
        if center is None:
            return None
        radius = (
            center.distance_from(first)
            + center.distance_from(second)
            + center.distance_from(third)
        ) / 3.0
        return cls(center, radius)

    # ========== Queries ==========

    @property
    def diameter(self) -> float:
        return 2.0 * self.radius

    @property
    def area(self) -> float:
        return math.pi * self.radius * self.radius

    @property
    def circumference(self) -> float:
        return 2.0 * math.pi * self.radius

    def contains(self, point: Point2d) -> bool:
        """Whether ``point`` lies inside the circle or on its boundary."""
        return point.squared_distance_from(self.center_point) <= self.radius * self.radius

    # ========== Transformations ==========

    def translate_by(self, vector: Vector2d) -> "Circle2d":
        return map_fields(self, lambda p: p.translate_by(vector))

    def translate_in(self, direction: Direction2d, distance: float) -> "Circle2d":
        return map_fields(self, lambda p: p.translate_in(direction, distance))

    def rotate_around(self, center: Point2d, angle: float) -> "Circle2d":
        return map_fields(self, lambda p: p.rotate_around(center, angle))

    def mirror_across(self, axis: Axis2d) -> "Circle2d":
        return map_fields(self, lambda p: p.mirror_across(axis))

    def scale_about(self, point: Point2d, scale: float) -> "Circle2d":
        return map_fields(
            self, lambda p: p.scale_about(point, scale), radius=abs(scale) * self.radius
        )

    # ========== Frame conversion ==========

    def relative_to(self, frame: "Frame2d") -> "Circle2d":
        return map_fields(self, lambda p: p.relative_to(frame))

    def place_in(self, frame: "Frame2d") -> "Circle2d":
        return map_fields(self, lambda p: p.place_in(frame))

    def place_onto(self, sketch_plane: "SketchPlane3d") -> "Circle3d":
        """Embed in 3D; the axial direction is the sketch plane normal."""
        return map_fields(
            self,
            lambda p: p.place_onto(sketch_plane),
            target=Circle3d,
            axial_direction=sketch_plane.normal_direction,
        )

    # ========== Serialization ==========

    def to_json(self) -> Dict[str, Any]:
        return {
            "center_point": self.center_point.to_json(),
            "radius": float(self.radius),
        }

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> "Circle2d":
        return Circle2d(
            Point2d.from_json(json_data["center_point"]), float(json_data["radius"])
        )


@dataclass(frozen=True)
class Circle3d:
    """A circle in 3D: center point, axial (normal) direction and radius."""

    center_point: Point3d
    axial_direction: Direction3d
    radius: float

    # ========== Constructors ==========

    @classmethod
    def with_radius(
        cls, radius: float, axial_direction: Direction3d, center_point: Point3d
    ) -> "Circle3d":
        return cls(center_point, axial_direction, float(radius))

    @classmethod
    def on(cls, sketch_plane: "SketchPlane3d", circle: Circle2d) -> "Circle3d":
        return circle.place_onto(sketch_plane)

    @classmethod
    def through_points(
        cls, first: Point3d, second: Point3d, third: Point3d
    ) -> Optional["Circle3d"]:
        """
        Circle through three points.

        The axial direction follows the right-hand rule for the point order.

        Returns:
            The circle, or ``None`` if the points are collinear or two of them
            coincide
        """
        center = Point3d.circumcenter(first, second, third)
        if center is None:
            return None
        axial_direction = Direction3d.from_vector((second - first).cross(third - first))
        if axial_direction is None:
            logger.debug(f"No axial direction for points {first}, {second}, {third}")
            return None
        radius = (
            center.distance_from(first)
            + center.distance_from(second)
            + center.distance_from(third)
        ) / 3.0
        return cls(center, axial_direction, radius)

    # ========== Queries ==========

    @property
    def diameter(self) -> float:
        return 2.0 * self.radius

    @property
    def area(self) -> float:
        return math.pi * self.radius * self.radius

    @property
    def circumference(self) -> float:
        return 2.0 * math.pi * self.radius

    @property
    def axis(self) -> Axis3d:
        return Axis3d.through(self.center_point, self.axial_direction)

    @property
    def plane(self) -> Plane3d:
        return Plane3d.through(self.center_point, self.axial_direction)

    # ========== Transformations ==========

    def flip(self) -> "Circle3d":
        return Circle3d(self.center_point, self.axial_direction.reverse(), self.radius)

    def translate_by(self, vector: Vector3d) -> "Circle3d":
        return map_fields(self, lambda p: p.translate_by(vector))

    def translate_in(self, direction: Direction3d, distance: float) -> "Circle3d":
        return map_fields(self, lambda p: p.translate_in(direction, distance))

    def rotate_around(self, axis: Axis3d, angle: float) -> "Circle3d":
        return map_fields(
            self,
            lambda p: p.rotate_around(axis, angle),
            lambda d: d.rotate_around(axis, angle),
        )

    def mirror_across(self, plane: Plane3d) -> "Circle3d":
        return map_fields(
            self, lambda p: p.mirror_across(plane), lambda d: d.mirror_across(plane)
        )

    def scale_about(self, point: Point3d, scale: float) -> "Circle3d":
        """Scale about a point; a negative scale also flips the axial direction."""
        return map_fields(
            self,
            lambda p: p.scale_about(point, scale),
            lambda d: d.reverse() if scale < 0.0 else d,
            radius=abs(scale) * self.radius,
        )

    # ========== Frame conversion ==========

    def relative_to(self, frame: "Frame3d") -> "Circle3d":
        return map_fields(
            self, lambda p: p.relative_to(frame), lambda d: d.relative_to(frame)
        )

    def place_in(self, frame: "Frame3d") -> "Circle3d":
        return map_fields(self, lambda p: p.place_in(frame), lambda d: d.place_in(frame))

    # ========== Serialization ==========

    def to_json(self) -> Dict[str, Any]:
        return {
            "center_point": self.center_point.to_json(),
            "axial_direction": self.axial_direction.to_json(),
            "radius": float(self.radius),
        }

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> "Circle3d":
        return Circle3d(
            Point3d.from_json(json_data["center_point"]),
            Direction3d.from_json(json_data["axial_direction"]),
            float(json_data["radius"]),
        )
