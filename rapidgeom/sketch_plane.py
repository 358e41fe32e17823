"""
SketchPlane module - planes with their own 2D coordinate system.

A sketch plane is a 3D origin plus two perpendicular in-plane directions. It
is the bridge between dimensions: ``project_into`` takes 3D geometry down into
its 2D coordinates, ``place_onto`` lifts 2D geometry back up. Its normal is
always ``x_direction × y_direction`` and is derived, not stored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from .axis import Axis3d
from .constants import DESERIALIZE_TOLERANCE, UNIT_LENGTH_TOLERANCE
from .direction import Direction3d
from .errors import InvalidFrameError
from .plane import Plane3d
from .point import Point3d
from .transform import map_fields
from .vector import Vector3d

if TYPE_CHECKING:
    from .frame import Frame3d

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SketchPlane3d:
    """A plane carrying an origin and orthonormal in-plane X and Y directions."""

    origin_point: Point3d
    x_direction: Direction3d
    y_direction: Direction3d

    # ========== Standard sketch planes ==========

    @classmethod
    def xy(cls) -> "SketchPlane3d":
        return cls(Point3d.origin(), Direction3d.positive_x(), Direction3d.positive_y())

    @classmethod
    def yx(cls) -> "SketchPlane3d":
        return cls(Point3d.origin(), Direction3d.positive_y(), Direction3d.positive_x())

    @classmethod
    def yz(cls) -> "SketchPlane3d":
        return cls(Point3d.origin(), Direction3d.positive_y(), Direction3d.positive_z())

    @classmethod
    def zy(cls) -> "SketchPlane3d":
        return cls(Point3d.origin(), Direction3d.positive_z(), Direction3d.positive_y())

    @classmethod
    def zx(cls) -> "SketchPlane3d":
        return cls(Point3d.origin(), Direction3d.positive_z(), Direction3d.positive_x())

    @classmethod
    def xz(cls) -> "SketchPlane3d":
        return cls(Point3d.origin(), Direction3d.positive_x(), Direction3d.positive_z())

    # ========== Constructors ==========

    @classmethod
    def unsafe(
        cls,
        origin_point: Point3d,
        x_direction: Direction3d,
        y_direction: Direction3d,
    ) -> "SketchPlane3d":
        """Unchecked construction; the caller guarantees perpendicular directions."""
        assert abs(x_direction.component_in(y_direction)) <= UNIT_LENGTH_TOLERANCE
        return cls(origin_point, x_direction, y_direction)

    @classmethod
    def with_normal_direction(
        cls, normal_direction: Direction3d, origin_point: Point3d
    ) -> "SketchPlane3d":
        """Sketch plane with the given normal and an arbitrary in-plane basis."""
        x_direction, y_direction = normal_direction.perpendicular_basis()
        return cls(origin_point, x_direction, y_direction)

    @classmethod
    def from_plane(cls, plane: Plane3d) -> "SketchPlane3d":
        return cls.with_normal_direction(plane.normal_direction, plane.origin_point)

    @classmethod
    def through_points(
        cls, first: Point3d, second: Point3d, third: Point3d
    ) -> Optional["SketchPlane3d"]:
        """
        Sketch plane with origin ``first``, X toward ``second`` and ``third``
        on the positive Y side.

        Returns ``None`` if the points are collinear or any two coincide.
        """
        pair = Direction3d.orthonormalize_pair(second - first, third - first)
        if pair is None:
            logger.debug(f"No sketch plane through {first}, {second}, {third}")
            return None
        x_direction, y_direction = pair
        return cls(first, x_direction, y_direction)

    # ========== Accessors ==========

    @property
    def normal_direction(self) -> Direction3d:
        normal = self.x_direction.cross(self.y_direction)
        return Direction3d.unsafe(normal.x, normal.y, normal.z)

    @property
    def x_axis(self) -> Axis3d:
        return Axis3d.through(self.origin_point, self.x_direction)

    @property
    def y_axis(self) -> Axis3d:
        return Axis3d.through(self.origin_point, self.y_direction)

    @property
    def normal_axis(self) -> Axis3d:
        return Axis3d.through(self.origin_point, self.normal_direction)

    def to_plane(self) -> Plane3d:
        return Plane3d.through(self.origin_point, self.normal_direction)

    def to_frame(self) -> "Frame3d":
        """Right-handed frame with this sketch plane as its XY plane."""
        from .frame import Frame3d

        return Frame3d(
            self.origin_point, self.x_direction, self.y_direction, self.normal_direction
        )

    # ========== Transformations ==========

    def offset_by(self, distance: float) -> "SketchPlane3d":
        normal = self.normal_direction
        return map_fields(self, lambda p: p.translate_in(normal, distance))

    def reverse_x(self) -> "SketchPlane3d":
        return SketchPlane3d(self.origin_point, self.x_direction.reverse(), self.y_direction)

    def reverse_y(self) -> "SketchPlane3d":
        return SketchPlane3d(self.origin_point, self.x_direction, self.y_direction.reverse())

    def move_to(self, point: Point3d) -> "SketchPlane3d":
        return SketchPlane3d(point, self.x_direction, self.y_direction)

    def translate_by(self, vector: Vector3d) -> "SketchPlane3d":
        return map_fields(self, lambda p: p.translate_by(vector))

    def translate_along(self, axis: Axis3d, distance: float) -> "SketchPlane3d":
        return map_fields(self, lambda p: p.translate_in(axis.direction, distance))

    def rotate_around(self, axis: Axis3d, angle: float) -> "SketchPlane3d":
        return map_fields(
            self,
            lambda p: p.rotate_around(axis, angle),
            lambda d: d.rotate_around(axis, angle),
        )

    def mirror_across(self, plane: Plane3d) -> "SketchPlane3d":
        return map_fields(
            self, lambda p: p.mirror_across(plane), lambda d: d.mirror_across(plane)
        )

    # ========== Frame conversion ==========

    def relative_to(self, frame: "Frame3d") -> "SketchPlane3d":
        return map_fields(
            self, lambda p: p.relative_to(frame), lambda d: d.relative_to(frame)
        )

    def place_in(self, frame: "Frame3d") -> "SketchPlane3d":
        return map_fields(self, lambda p: p.place_in(frame), lambda d: d.place_in(frame))

    # ========== Serialization ==========

    def to_json(self) -> Dict[str, Any]:
        return {
            "origin_point": self.origin_point.to_json(),
            "x_direction": self.x_direction.to_json(),
            "y_direction": self.y_direction.to_json(),
        }

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> "SketchPlane3d":
        x_direction = Direction3d.from_json(json_data["x_direction"])
        y_direction = Direction3d.from_json(json_data["y_direction"])
        if abs(x_direction.component_in(y_direction)) > DESERIALIZE_TOLERANCE:
            logger.warning("Rejecting serialized SketchPlane3d: axes are not orthogonal")
            raise InvalidFrameError(
                f"SketchPlane3d axes {x_direction}, {y_direction} are not orthogonal"
            )
        pair = Direction3d.orthonormalize_pair(
            x_direction.to_vector(), y_direction.to_vector()
        )
        assert pair is not None
        return SketchPlane3d(Point3d.from_json(json_data["origin_point"]), *pair)
