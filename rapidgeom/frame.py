"""
Frame module - local coordinate systems in 2D and 3D.

A frame is an origin point plus an orthonormal basis of directions. Frames are
the authority for ``relative_to`` / ``place_in``: every other type converts
itself by reading ``origin_point`` and the ``*_direction`` fields of a frame.

Frames are transformed like every other composite, by mapping each field and
rebuilding, so a mirrored frame comes out left-handed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from .axis import Axis2d, Axis3d
from .constants import DESERIALIZE_TOLERANCE, UNIT_LENGTH_TOLERANCE
from .direction import Direction2d, Direction3d
from .errors import InvalidFrameError
from .plane import Plane3d
from .point import Point2d, Point3d
from .sketch_plane import SketchPlane3d
from .transform import map_fields
from .vector import Vector2d, Vector3d

logger = logging.getLogger(__name__)


def check_orthogonal(directions: Sequence[Any], tolerance: float) -> bool:
    """Whether every pair of the given directions is perpendicular within tolerance."""
    for i, first in enumerate(directions):
        for second in directions[i + 1 :]:
            if abs(first.component_in(second)) > tolerance:
                return False
    return True


def _require_orthogonal(name: str, directions: Sequence[Any]) -> None:
    if not check_orthogonal(directions, DESERIALIZE_TOLERANCE):
        logger.warning(f"Rejecting serialized {name}: axes are not orthogonal")
        raise InvalidFrameError(f"{name} axes {directions} are not orthogonal")


@dataclass(frozen=True)
class Frame2d:
    """A 2D coordinate system: origin point plus perpendicular X and Y directions."""

    origin_point: Point2d
    x_direction: Direction2d
    y_direction: Direction2d

    # ========== Constructors ==========

    @classmethod
    def at_origin(cls) -> "Frame2d":
        """The global XY frame."""
        return cls(Point2d.origin(), Direction2d.positive_x(), Direction2d.positive_y())

    @classmethod
    def at_point(cls, point: Point2d) -> "Frame2d":
        """Frame at ``point`` with global X and Y directions."""
        return cls(point, Direction2d.positive_x(), Direction2d.positive_y())

    @classmethod
    def unsafe(
        cls, origin_point: Point2d, x_direction: Direction2d, y_direction: Direction2d
    ) -> "Frame2d":
        """Unchecked construction; the caller guarantees perpendicular directions."""
        assert check_orthogonal([x_direction, y_direction], UNIT_LENGTH_TOLERANCE)
        return cls(origin_point, x_direction, y_direction)

    @classmethod
    def with_x_direction(
        cls, x_direction: Direction2d, origin_point: Optional[Point2d] = None
    ) -> "Frame2d":
        """Right-handed frame whose X direction is given."""
        origin = origin_point if origin_point is not None else Point2d.origin()
        return cls(origin, x_direction, x_direction.rotate_counterclockwise())

    @classmethod
    def with_y_direction(
        cls, y_direction: Direction2d, origin_point: Optional[Point2d] = None
    ) -> "Frame2d":
        """Right-handed frame whose Y direction is given."""
        origin = origin_point if origin_point is not None else Point2d.origin()
        return cls(origin, y_direction.rotate_clockwise(), y_direction)

    @classmethod
    def with_angle(
        cls, angle: float, origin_point: Optional[Point2d] = None
    ) -> "Frame2d":
        """Right-handed frame with X direction at ``angle`` from global X."""
        return cls.with_x_direction(Direction2d.from_angle(angle), origin_point)

    @classmethod
    def with_x_axis(cls, axis: Axis2d) -> "Frame2d":
        return cls.with_x_direction(axis.direction, axis.origin_point)

    @classmethod
    def with_y_axis(cls, axis: Axis2d) -> "Frame2d":
        return cls.with_y_direction(axis.direction, axis.origin_point)

    # ========== Accessors ==========

    @property
    def x_axis(self) -> Axis2d:
        return Axis2d.through(self.origin_point, self.x_direction)

    @property
    def y_axis(self) -> Axis2d:
        return Axis2d.through(self.origin_point, self.y_direction)

    @property
    def is_right_handed(self) -> bool:
        return self.x_direction.to_vector().cross(self.y_direction.to_vector()) > 0.0

    # ========== Transformations ==========

    def reverse_x(self) -> "Frame2d":
        return Frame2d(self.origin_point, self.x_direction.reverse(), self.y_direction)

    def reverse_y(self) -> "Frame2d":
        return Frame2d(self.origin_point, self.x_direction, self.y_direction.reverse())

    def move_to(self, point: Point2d) -> "Frame2d":
        return Frame2d(point, self.x_direction, self.y_direction)

    def translate_by(self, vector: Vector2d) -> "Frame2d":
        return map_fields(self, lambda p: p.translate_by(vector))

    def translate_along(self, axis: Axis2d, distance: float) -> "Frame2d":
        return map_fields(self, lambda p: p.translate_in(axis.direction, distance))

    def rotate_by(self, angle: float) -> "Frame2d":
        """Rotate the basis about the frame's own origin."""
        return map_fields(self, lambda p: p, lambda d: d.rotate_by(angle))

    def rotate_around(self, center: Point2d, angle: float) -> "Frame2d":
        return map_fields(
            self,
            lambda p: p.rotate_around(center, angle),
            lambda d: d.rotate_by(angle),
        )

    def mirror_across(self, axis: Axis2d) -> "Frame2d":
        return map_fields(
            self, lambda p: p.mirror_across(axis), lambda d: d.mirror_across(axis)
        )

    # ========== Frame conversion ==========

    def relative_to(self, frame: "Frame2d") -> "Frame2d":
        return map_fields(
            self, lambda p: p.relative_to(frame), lambda d: d.relative_to(frame)
        )

    def place_in(self, frame: "Frame2d") -> "Frame2d":
        return map_fields(self, lambda p: p.place_in(frame), lambda d: d.place_in(frame))

    def place_onto(self, sketch_plane: SketchPlane3d) -> SketchPlane3d:
        """Embed this frame in 3D as the sketch plane spanned by its axes."""
        return map_fields(
            self,
            lambda p: p.place_onto(sketch_plane),
            lambda d: d.place_onto(sketch_plane),
            target=SketchPlane3d,
        )

    # ========== Serialization ==========

    def to_json(self) -> Dict[str, Any]:
        return {
            "origin_point": self.origin_point.to_json(),
            "x_direction": self.x_direction.to_json(),
            "y_direction": self.y_direction.to_json(),
        }

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> "Frame2d":
        x_direction = Direction2d.from_json(json_data["x_direction"])
        y_direction = Direction2d.from_json(json_data["y_direction"])
        _require_orthogonal("Frame2d", [x_direction, y_direction])
        # Remove the accepted skew so conversions stay unit length.
        basis = Direction2d.orthonormalize(
            x_direction.to_vector(), y_direction.to_vector()
        )
        assert basis is not None
        return Frame2d(Point2d.from_json(json_data["origin_point"]), *basis)


@dataclass(frozen=True)
class Frame3d:
    """A 3D coordinate system: origin point plus three perpendicular directions."""

    origin_point: Point3d
    x_direction: Direction3d
    y_direction: Direction3d
    z_direction: Direction3d

    # ========== Constructors ==========

    @classmethod
    def at_origin(cls) -> "Frame3d":
        """The global XYZ frame."""
        return cls.at_point(Point3d.origin())

    @classmethod
    def at_point(cls, point: Point3d) -> "Frame3d":
        return cls(
            point,
            Direction3d.positive_x(),
            Direction3d.positive_y(),
            Direction3d.positive_z(),
        )

    @classmethod
    def unsafe(
        cls,
        origin_point: Point3d,
        x_direction: Direction3d,
        y_direction: Direction3d,
        z_direction: Direction3d,
    ) -> "Frame3d":
        """Unchecked construction; the caller guarantees an orthonormal basis."""
        assert check_orthogonal(
            [x_direction, y_direction, z_direction], UNIT_LENGTH_TOLERANCE
        )
        return cls(origin_point, x_direction, y_direction, z_direction)

    @classmethod
    def with_z_direction(
        cls, z_direction: Direction3d, origin_point: Optional[Point3d] = None
    ) -> "Frame3d":
        """
        Right-handed frame with the given Z direction.

        X and Y are chosen arbitrarily (but deterministically) perpendicular
        to Z.
        """
        origin = origin_point if origin_point is not None else Point3d.origin()
        x_direction, y_direction = z_direction.perpendicular_basis()
        return cls(origin, x_direction, y_direction, z_direction)

    @classmethod
    def with_z_axis(cls, axis: Axis3d) -> "Frame3d":
        return cls.with_z_direction(axis.direction, axis.origin_point)

    @classmethod
    def from_x_and_xy(
        cls,
        origin_point: Point3d,
        x_vector: Vector3d,
        xy_vector: Vector3d,
    ) -> Optional["Frame3d"]:
        """
        Right-handed frame from an X vector and a vector in the XY plane.

        Returns ``None`` if either vector is zero or they are parallel.
        """
        pair = Direction3d.orthonormalize_pair(x_vector, xy_vector)
        if pair is None:
            return None
        x_direction, y_direction = pair
        z = x_direction.cross(y_direction)
        return cls(
            origin_point, x_direction, y_direction, Direction3d.unsafe(z.x, z.y, z.z)
        )

    # ========== Accessors ==========

    @property
    def x_axis(self) -> Axis3d:
        return Axis3d.through(self.origin_point, self.x_direction)

    @property
    def y_axis(self) -> Axis3d:
        return Axis3d.through(self.origin_point, self.y_direction)

    @property
    def z_axis(self) -> Axis3d:
        return Axis3d.through(self.origin_point, self.z_direction)

    @property
    def is_right_handed(self) -> bool:
        return self.x_direction.cross(self.y_direction).component_in(self.z_direction) > 0.0

    @property
    def xy_plane(self) -> Plane3d:
        return Plane3d.through(self.origin_point, self.z_direction)

    @property
    def yz_plane(self) -> Plane3d:
        return Plane3d.through(self.origin_point, self.x_direction)

    @property
    def zx_plane(self) -> Plane3d:
        return Plane3d.through(self.origin_point, self.y_direction)

    @property
    def xy_sketch_plane(self) -> SketchPlane3d:
        return SketchPlane3d(self.origin_point, self.x_direction, self.y_direction)

    @property
    def yx_sketch_plane(self) -> SketchPlane3d:
        return SketchPlane3d(self.origin_point, self.y_direction, self.x_direction)

    @property
    def yz_sketch_plane(self) -> SketchPlane3d:
        return SketchPlane3d(self.origin_point, self.y_direction, self.z_direction)

    @property
    def zy_sketch_plane(self) -> SketchPlane3d:
        return SketchPlane3d(self.origin_point, self.z_direction, self.y_direction)

    @property
    def zx_sketch_plane(self) -> SketchPlane3d:
        return SketchPlane3d(self.origin_point, self.z_direction, self.x_direction)

    @property
    def xz_sketch_plane(self) -> SketchPlane3d:
        return SketchPlane3d(self.origin_point, self.x_direction, self.z_direction)

    # ========== Transformations ==========

    def reverse_x(self) -> "Frame3d":
        return Frame3d(
            self.origin_point, self.x_direction.reverse(), self.y_direction, self.z_direction
        )

    def reverse_y(self) -> "Frame3d":
        return Frame3d(
            self.origin_point, self.x_direction, self.y_direction.reverse(), self.z_direction
        )

    def reverse_z(self) -> "Frame3d":
        return Frame3d(
            self.origin_point, self.x_direction, self.y_direction, self.z_direction.reverse()
        )

    def move_to(self, point: Point3d) -> "Frame3d":
        return Frame3d(point, self.x_direction, self.y_direction, self.z_direction)

    def translate_by(self, vector: Vector3d) -> "Frame3d":
        return map_fields(self, lambda p: p.translate_by(vector))

    def translate_along(self, axis: Axis3d, distance: float) -> "Frame3d":
        return map_fields(self, lambda p: p.translate_in(axis.direction, distance))

    def rotate_around(self, axis: Axis3d, angle: float) -> "Frame3d":
        return map_fields(
            self,
            lambda p: p.rotate_around(axis, angle),
            lambda d: d.rotate_around(axis, angle),
        )

    def mirror_across(self, plane: Plane3d) -> "Frame3d":
        return map_fields(
            self, lambda p: p.mirror_across(plane), lambda d: d.mirror_across(plane)
        )

    # ========== Frame conversion ==========

    def relative_to(self, frame: "Frame3d") -> "Frame3d":
        return map_fields(
            self, lambda p: p.relative_to(frame), lambda d: d.relative_to(frame)
        )

    def place_in(self, frame: "Frame3d") -> "Frame3d":
        return map_fields(self, lambda p: p.place_in(frame), lambda d: d.place_in(frame))

    # ========== Serialization ==========

    def to_json(self) -> Dict[str, Any]:
        return {
            "origin_point": self.origin_point.to_json(),
            "x_direction": self.x_direction.to_json(),
            "y_direction": self.y_direction.to_json(),
            "z_direction": self.z_direction.to_json(),
        }

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> "Frame3d":
        x_direction = Direction3d.from_json(json_data["x_direction"])
        y_direction = Direction3d.from_json(json_data["y_direction"])
        z_direction = Direction3d.from_json(json_data["z_direction"])
        _require_orthogonal("Frame3d", [x_direction, y_direction, z_direction])
        basis = Direction3d.orthonormalize(
            x_direction.to_vector(), y_direction.to_vector(), z_direction.to_vector()
        )
        assert basis is not None
        return Frame3d(Point3d.from_json(json_data["origin_point"]), *basis)
