"""
Unit tests for SketchPlane3d.
"""

import math

import numpy.testing as npt
import pytest

from rapidgeom import (
    Axis3d,
    Direction3d,
    Frame3d,
    Plane3d,
    Point3d,
    SketchPlane3d,
)


class TestStandardSketchPlanes:
    @pytest.mark.parametrize(
        "sketch_plane, normal",
        [
            (SketchPlane3d.xy(), Direction3d.positive_z()),
            (SketchPlane3d.yx(), Direction3d.negative_z()),
            (SketchPlane3d.yz(), Direction3d.positive_x()),
            (SketchPlane3d.zy(), Direction3d.negative_x()),
            (SketchPlane3d.zx(), Direction3d.positive_y()),
            (SketchPlane3d.xz(), Direction3d.negative_y()),
        ],
    )
    def test_normal_direction(self, sketch_plane, normal):
        assert sketch_plane.normal_direction == normal

    def test_to_plane(self):
        assert SketchPlane3d.xy().to_plane() == Plane3d.xy()

    def test_to_frame_is_right_handed(self):
        frame = SketchPlane3d.xz().to_frame()
        assert frame.is_right_handed
        assert frame.z_direction == Direction3d.negative_y()


class TestSketchPlaneConstruction:
    def test_through_points(self):
        sketch_plane = SketchPlane3d.through_points(
            Point3d.xyz(1, 1, 1), Point3d.xyz(3, 1, 1), Point3d.xyz(1, 1, 4)
        )
        assert sketch_plane.origin_point == Point3d(1.0, 1.0, 1.0)
        assert sketch_plane.x_direction == Direction3d.positive_x()
        assert sketch_plane.y_direction == Direction3d.positive_z()
        assert sketch_plane.normal_direction == Direction3d.negative_y()

    def test_through_points_third_off_perpendicular(self):
        sketch_plane = SketchPlane3d.through_points(
            Point3d.xyz(0, 0, 0), Point3d.xyz(2, 0, 0), Point3d.xyz(5, 3, 0)
        )
        assert sketch_plane.y_direction == Direction3d.positive_y()

    def test_through_collinear_points_is_none(self):
        assert (
            SketchPlane3d.through_points(
                Point3d.xyz(1, 2, 0), Point3d.xyz(2, 2, 0), Point3d.xyz(4, 2, 0)
            )
            is None
        )

    def test_with_normal_direction(self):
        normal = Direction3d.from_azimuth_and_elevation(0.4, 0.2)
        sketch_plane = SketchPlane3d.with_normal_direction(normal, Point3d.xyz(1, 2, 3))
        x = sketch_plane.x_direction
        y = sketch_plane.y_direction
        assert x.component_in(y) == pytest.approx(0.0, abs=1e-12)
        assert x.component_in(normal) == pytest.approx(0.0, abs=1e-12)
        npt.assert_allclose(
            sketch_plane.normal_direction.components, normal.components, atol=1e-12
        )

    def test_from_plane(self):
        plane = Plane3d.through(Point3d.xyz(0, 0, 4), Direction3d.negative_x())
        sketch_plane = SketchPlane3d.from_plane(plane)
        assert sketch_plane.origin_point == plane.origin_point
        npt.assert_allclose(
            sketch_plane.normal_direction.components, [-1.0, 0.0, 0.0], atol=1e-12
        )

    def test_unsafe_checks_in_debug_mode(self):
        if not __debug__:
            pytest.skip("assertions disabled")
        with pytest.raises(AssertionError):
            SketchPlane3d.unsafe(
                Point3d.origin(),
                Direction3d.positive_x(),
                Direction3d.from_azimuth_and_elevation(0.5, 0.0),
            )


class TestSketchPlaneTransformations:
    def test_axes(self):
        sketch_plane = SketchPlane3d.zx().move_to(Point3d.xyz(1, 2, 3))
        assert sketch_plane.x_axis == Axis3d(Point3d(1.0, 2.0, 3.0), Direction3d.positive_z())
        assert sketch_plane.normal_axis.direction == Direction3d.positive_y()

    def test_offset_by(self):
        assert SketchPlane3d.xy().offset_by(2.0).origin_point == Point3d(0.0, 0.0, 2.0)
        assert SketchPlane3d.yx().offset_by(2.0).origin_point == Point3d(0.0, 0.0, -2.0)

    def test_reverse_flips_normal(self):
        assert SketchPlane3d.xy().reverse_x().normal_direction == Direction3d.negative_z()
        assert SketchPlane3d.xy().reverse_y().normal_direction == Direction3d.negative_z()

    def test_translate_along(self):
        sketch_plane = SketchPlane3d.xy().translate_along(Axis3d.y(), 3.0)
        assert sketch_plane.origin_point == Point3d(0.0, 3.0, 0.0)

    def test_rotate_around(self):
        sketch_plane = SketchPlane3d.xy().rotate_around(Axis3d.x(), math.pi / 2)
        npt.assert_allclose(sketch_plane.y_direction.components, [0.0, 0.0, 1.0], atol=1e-12)
        npt.assert_allclose(
            sketch_plane.normal_direction.components, [0.0, -1.0, 0.0], atol=1e-12
        )

    def test_mirror_across_flips_handedness(self):
        mirrored = SketchPlane3d.xy().mirror_across(Plane3d.yz())
        assert mirrored.x_direction == Direction3d.negative_x()
        assert mirrored.y_direction == Direction3d.positive_y()
        assert mirrored.normal_direction == Direction3d.negative_z()

    def test_frame_round_trip(self):
        frame = Frame3d.with_z_direction(
            Direction3d.from_azimuth_and_elevation(-0.6, 0.9), Point3d.xyz(1, 0, -2)
        )
        sketch_plane = SketchPlane3d.yz().move_to(Point3d.xyz(2, 2, 2))
        round_trip = sketch_plane.place_in(frame).relative_to(frame)
        npt.assert_allclose(round_trip.origin_point.coordinates, [2.0, 2.0, 2.0], atol=1e-12)
        npt.assert_allclose(round_trip.x_direction.components, [0.0, 1.0, 0.0], atol=1e-12)
        npt.assert_allclose(round_trip.y_direction.components, [0.0, 0.0, 1.0], atol=1e-12)
