"""
Plane module - oriented infinite planes in 3D.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from .axis import Axis3d
from .direction import Direction3d
from .point import Point3d
from .transform import map_fields
from .vector import Vector3d

if TYPE_CHECKING:
    from .frame import Frame3d


@dataclass(frozen=True)
class Plane3d:
    """A plane through ``origin_point`` with unit ``normal_direction``."""

    origin_point: Point3d
    normal_direction: Direction3d

    @classmethod
    def xy(cls) -> "Plane3d":
        return cls(Point3d.origin(), Direction3d.positive_z())

    @classmethod
    def yz(cls) -> "Plane3d":
        return cls(Point3d.origin(), Direction3d.positive_x())

    @classmethod
    def zx(cls) -> "Plane3d":
        return cls(Point3d.origin(), Direction3d.positive_y())

    @classmethod
    def through(cls, point: Point3d, normal_direction: Direction3d) -> "Plane3d":
        return cls(point, normal_direction)

    @classmethod
    def with_normal(cls, normal_direction: Direction3d, point: Point3d) -> "Plane3d":
        return cls(point, normal_direction)

    @classmethod
    def through_points(
        cls, first: Point3d, second: Point3d, third: Point3d
    ) -> Optional["Plane3d"]:
        """
        Plane through three points, normal following the right-hand rule.

        Returns ``None`` if the points are collinear or two of them coincide.
        """
        first_vector = second - first
        second_vector = third - second
        normal = Direction3d.from_vector(first_vector.cross(second_vector))
        if normal is None:
            return None
        return cls(first, normal)

    @property
    def normal_axis(self) -> Axis3d:
        return Axis3d.through(self.origin_point, self.normal_direction)

    def offset_by(self, distance: float) -> "Plane3d":
        """Shift the plane along its own normal."""
        return self.translate_in(self.normal_direction, distance)

    def reverse_normal(self) -> "Plane3d":
        return Plane3d(self.origin_point, self.normal_direction.reverse())

    flip = reverse_normal

    def move_to(self, point: Point3d) -> "Plane3d":
        return Plane3d(point, self.normal_direction)

    def translate_by(self, vector: Vector3d) -> "Plane3d":
        return map_fields(self, lambda p: p.translate_by(vector))

    def translate_in(self, direction: Direction3d, distance: float) -> "Plane3d":
        return map_fields(self, lambda p: p.translate_in(direction, distance))

    def rotate_around(self, axis: Axis3d, angle: float) -> "Plane3d":
        return map_fields(
            self,
            lambda p: p.rotate_around(axis, angle),
            lambda d: d.rotate_around(axis, angle),
        )

    def mirror_across(self, plane: "Plane3d") -> "Plane3d":
        return map_fields(
            self, lambda p: p.mirror_across(plane), lambda d: d.mirror_across(plane)
        )

    def relative_to(self, frame: "Frame3d") -> "Plane3d":
        return map_fields(
            self, lambda p: p.relative_to(frame), lambda d: d.relative_to(frame)
        )

    def place_in(self, frame: "Frame3d") -> "Plane3d":
        return map_fields(self, lambda p: p.place_in(frame), lambda d: d.place_in(frame))

    def to_json(self) -> Dict[str, Any]:
        return {
            "origin_point": self.origin_point.to_json(),
            "normal_direction": self.normal_direction.to_json(),
        }

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> "Plane3d":
        return Plane3d(
            Point3d.from_json(json_data["origin_point"]),
            Direction3d.from_json(json_data["normal_direction"]),
        )
