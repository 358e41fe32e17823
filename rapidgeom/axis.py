"""
Axis module - infinite oriented lines in 2D and 3D.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from .direction import Direction2d, Direction3d
from .point import Point2d, Point3d
from .transform import map_fields, map_fields_optional
from .vector import Vector2d, Vector3d

if TYPE_CHECKING:
    from .frame import Frame2d, Frame3d
    from .plane import Plane3d
    from .sketch_plane import SketchPlane3d


@dataclass(frozen=True)
class Axis2d:
    """A 2D line through ``origin_point`` along ``direction``."""

    origin_point: Point2d
    direction: Direction2d

    @classmethod
    def x(cls) -> "Axis2d":
        return cls(Point2d.origin(), Direction2d.positive_x())

    @classmethod
    def y(cls) -> "Axis2d":
        return cls(Point2d.origin(), Direction2d.positive_y())

    @classmethod
    def through(cls, point: Point2d, direction: Direction2d) -> "Axis2d":
        return cls(point, direction)

    @classmethod
    def through_points(cls, first: Point2d, second: Point2d) -> Optional["Axis2d"]:
        """Axis from ``first`` toward ``second``; ``None`` if they coincide."""
        direction = Direction2d.from_points(first, second)
        if direction is None:
            return None
        return cls(first, direction)

    def point_at(self, distance: float) -> Point2d:
        return self.origin_point.translate_in(self.direction, distance)

    def reverse(self) -> "Axis2d":
        return Axis2d(self.origin_point, self.direction.reverse())

    def move_to(self, point: Point2d) -> "Axis2d":
        return Axis2d(point, self.direction)

    def translate_by(self, vector: Vector2d) -> "Axis2d":
        return map_fields(self, lambda p: p.translate_by(vector))

    def translate_in(self, direction: Direction2d, distance: float) -> "Axis2d":
        return map_fields(self, lambda p: p.translate_in(direction, distance))

    def rotate_around(self, center: Point2d, angle: float) -> "Axis2d":
        return map_fields(
            self,
            lambda p: p.rotate_around(center, angle),
            lambda d: d.rotate_by(angle),
        )

    def mirror_across(self, axis: "Axis2d") -> "Axis2d":
        return map_fields(
            self, lambda p: p.mirror_across(axis), lambda d: d.mirror_across(axis)
        )

    def relative_to(self, frame: "Frame2d") -> "Axis2d":
        return map_fields(
            self, lambda p: p.relative_to(frame), lambda d: d.relative_to(frame)
        )

    def place_in(self, frame: "Frame2d") -> "Axis2d":
        return map_fields(self, lambda p: p.place_in(frame), lambda d: d.place_in(frame))

    def place_onto(self, sketch_plane: "SketchPlane3d") -> "Axis3d":
        return map_fields(
            self,
            lambda p: p.place_onto(sketch_plane),
            lambda d: d.place_onto(sketch_plane),
            target=Axis3d,
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "origin_point": self.origin_point.to_json(),
            "direction": self.direction.to_json(),
        }

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> "Axis2d":
        return Axis2d(
            Point2d.from_json(json_data["origin_point"]),
            Direction2d.from_json(json_data["direction"]),
        )


@dataclass(frozen=True)
class Axis3d:
    """A 3D line through ``origin_point`` along ``direction``."""

    origin_point: Point3d
    direction: Direction3d

    @classmethod
    def x(cls) -> "Axis3d":
        return cls(Point3d.origin(), Direction3d.positive_x())

    @classmethod
    def y(cls) -> "Axis3d":
        return cls(Point3d.origin(), Direction3d.positive_y())

    @classmethod
    def z(cls) -> "Axis3d":
        return cls(Point3d.origin(), Direction3d.positive_z())

    @classmethod
    def through(cls, point: Point3d, direction: Direction3d) -> "Axis3d":
        return cls(point, direction)

    @classmethod
    def through_points(cls, first: Point3d, second: Point3d) -> Optional["Axis3d"]:
        """Axis from ``first`` toward ``second``; ``None`` if they coincide."""
        direction = Direction3d.from_points(first, second)
        if direction is None:
            return None
        return cls(first, direction)

    def point_at(self, distance: float) -> Point3d:
        return self.origin_point.translate_in(self.direction, distance)

    def reverse(self) -> "Axis3d":
        return Axis3d(self.origin_point, self.direction.reverse())

    def move_to(self, point: Point3d) -> "Axis3d":
        return Axis3d(point, self.direction)

    def translate_by(self, vector: Vector3d) -> "Axis3d":
        return map_fields(self, lambda p: p.translate_by(vector))

    def translate_in(self, direction: Direction3d, distance: float) -> "Axis3d":
        return map_fields(self, lambda p: p.translate_in(direction, distance))

    def rotate_around(self, axis: "Axis3d", angle: float) -> "Axis3d":
        return map_fields(
            self,
            lambda p: p.rotate_around(axis, angle),
            lambda d: d.rotate_around(axis, angle),
        )

    def mirror_across(self, plane: "Plane3d") -> "Axis3d":
        return map_fields(
            self, lambda p: p.mirror_across(plane), lambda d: d.mirror_across(plane)
        )

    def project_onto(self, plane: "Plane3d") -> Optional["Axis3d"]:
        """Project onto a plane; ``None`` if the axis is perpendicular to it."""
        return map_fields_optional(
            self, lambda p: p.project_onto(plane), lambda d: d.project_onto(plane)
        )

    def project_into(self, sketch_plane: "SketchPlane3d") -> Optional[Axis2d]:
        """
        Project into a sketch plane's 2D coordinates.

        ``None`` if the axis is perpendicular to the sketch plane.
        """
        return map_fields_optional(
            self,
            lambda p: p.project_into(sketch_plane),
            lambda d: d.project_into(sketch_plane),
            target=Axis2d,
        )

    def relative_to(self, frame: "Frame3d") -> "Axis3d":
        return map_fields(
            self, lambda p: p.relative_to(frame), lambda d: d.relative_to(frame)
        )

    def place_in(self, frame: "Frame3d") -> "Axis3d":
        return map_fields(self, lambda p: p.place_in(frame), lambda d: d.place_in(frame))

    def to_json(self) -> Dict[str, Any]:
        return {
            "origin_point": self.origin_point.to_json(),
            "direction": self.direction.to_json(),
        }

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> "Axis3d":
        return Axis3d(
            Point3d.from_json(json_data["origin_point"]),
            Direction3d.from_json(json_data["direction"]),
        )
