"""
Unit tests for Direction2d and Direction3d, including the degenerate cases.
"""

import logging
import math

import numpy.testing as npt
import pytest

from rapidgeom import (
    Axis2d,
    Axis3d,
    Direction2d,
    Direction3d,
    Plane3d,
    Point2d,
    Point3d,
    SketchPlane3d,
    Vector2d,
    Vector3d,
)


def squared_length(direction):
    return sum(c * c for c in direction.components)


class TestDirection2dConstruction:
    def test_from_angle_is_unit(self):
        for angle in [0.0, 0.3, 1.0, 2.5, -2.9, 10.0]:
            assert abs(squared_length(Direction2d.from_angle(angle)) - 1.0) < 1e-12

    def test_from_points(self):
        direction = Direction2d.from_points(Point2d.xy(1, 1), Point2d.xy(4, 5))
        npt.assert_allclose(direction.components, [0.6, 0.8])

    def test_from_coincident_points_is_none(self):
        p = Point2d.xy(2.5, -1)
        assert Direction2d.from_points(p, p) is None

    def test_degenerate_result_is_logged(self, caplog):
        p = Point2d.xy(2.5, -1)
        with caplog.at_level(logging.DEBUG, logger="rapidgeom.direction"):
            Direction2d.from_points(p, p)
        assert "zero-length" in caplog.text

    @pytest.mark.skipif(not __debug__, reason="assertions are stripped under -O")
    def test_unsafe_asserts_in_debug_mode(self):
        with pytest.raises(AssertionError):
            Direction2d.unsafe(3.0, 4.0)

    def test_unsafe_does_not_normalize(self):
        d = Direction2d.unsafe(0.6, 0.8)
        assert d.components == (0.6, 0.8)


class TestOrthonormalize2d:
    def test_second_direction_on_side_of_second_vector(self):
        x, y = Direction2d.orthonormalize(Vector2d.xy(2, 0), Vector2d.xy(1, 3))
        assert x == Direction2d.positive_x()
        assert y == Direction2d.positive_y()

        x, y = Direction2d.orthonormalize(Vector2d.xy(2, 0), Vector2d.xy(1, -3))
        assert x == Direction2d.positive_x()
        assert y == Direction2d.negative_y()

    def test_result_is_orthonormal(self):
        x, y = Direction2d.orthonormalize(Vector2d.xy(1, 2), Vector2d.xy(-3, 0.5))
        assert abs(squared_length(x) - 1.0) < 1e-12
        assert abs(squared_length(y) - 1.0) < 1e-12
        assert abs(x.component_in(y)) < 1e-12

    @pytest.mark.parametrize(
        "first, second",
        [
            (Vector2d.zero(), Vector2d.xy(1, 0)),
            (Vector2d.xy(1, 0), Vector2d.zero()),
            (Vector2d.xy(1, 1), Vector2d.xy(2, 2)),
            (Vector2d.xy(1, 0), Vector2d.xy(-4, 0)),
        ],
    )
    def test_degenerate_inputs_are_none(self, first, second):
        assert Direction2d.orthonormalize(first, second) is None


class TestDirection2dAngles:
    def test_angle_from_is_counterclockwise(self):
        assert Direction2d.positive_y().angle_from(Direction2d.positive_x()) == math.pi / 2
        assert Direction2d.positive_x().angle_from(Direction2d.positive_y()) == -math.pi / 2

    def test_angle_from_opposite_is_pi(self):
        assert Direction2d.negative_x().angle_from(Direction2d.positive_x()) == math.pi
        # atan2(-0.0, -1) is -pi; the result range excludes it
        assert Direction2d.positive_x().angle_from(Direction2d.negative_x()) == math.pi

    def test_angle_from_matches_angle_difference(self):
        first = Direction2d.from_angle(0.4)
        second = Direction2d.from_angle(1.9)
        assert second.angle_from(first) == pytest.approx(1.5)
        assert first.angle_from(second) == pytest.approx(-1.5)

    def test_equal_within_across_wraparound(self):
        just_below = Direction2d.from_angle(math.pi - 1e-6)
        just_above = Direction2d.from_angle(-math.pi + 1e-6)
        assert just_below.equal_within(1e-5, just_above)
        assert not just_below.equal_within(1e-7, just_above)

    def test_to_angle(self):
        assert Direction2d.from_angle(-2.0).to_angle() == pytest.approx(-2.0)


class TestDirection2dTransformations:
    def test_rotate_by(self):
        rotated = Direction2d.positive_x().rotate_by(math.pi / 2)
        npt.assert_allclose(rotated.components, [0.0, 1.0], atol=1e-12)

    def test_perpendicular(self):
        d = Direction2d.from_angle(0.7)
        assert d.perpendicular_to().component_in(d) == pytest.approx(0.0, abs=1e-15)
        assert d.rotate_clockwise() == d.rotate_counterclockwise().reverse()

    def test_mirror_across_axis(self):
        axis = Axis2d.through(Point2d.xy(3, 4), Direction2d.positive_y())
        mirrored = Direction2d.from_angle(0.3).mirror_across(axis)
        assert mirrored.to_angle() == pytest.approx(math.pi - 0.3)

    def test_place_onto_sketch_plane(self):
        placed = Direction2d.positive_y().place_onto(SketchPlane3d.zx())
        assert placed == Direction3d.positive_x()


class TestDirection3d:
    def test_from_azimuth_and_elevation(self):
        d = Direction3d.from_azimuth_and_elevation(0.5, 0.25)
        assert abs(squared_length(d) - 1.0) < 1e-12
        assert d.azimuth == pytest.approx(0.5)
        assert d.elevation == pytest.approx(0.25)

    def test_from_coincident_points_is_none(self):
        p = Point3d.xyz(1, 2, 3)
        assert Direction3d.from_points(p, p) is None

    def test_angle_from_is_unsigned(self):
        x = Direction3d.positive_x()
        y = Direction3d.positive_y()
        assert x.angle_from(y) == pytest.approx(math.pi / 2)
        assert y.angle_from(x) == pytest.approx(math.pi / 2)
        assert x.angle_from(x.reverse()) == pytest.approx(math.pi)

    def test_equal_within(self):
        d = Direction3d.from_azimuth_and_elevation(1.0, 0.2)
        nearby = Direction3d.from_azimuth_and_elevation(1.0, 0.2 + 1e-8)
        assert d.equal_within(1e-6, nearby)
        assert not d.equal_within(1e-6, d.reverse())

    def test_orthonormalize_pair(self):
        x, y = Direction3d.orthonormalize_pair(Vector3d.xyz(2, 0, 0), Vector3d.xyz(1, 1, 0))
        assert x == Direction3d.positive_x()
        assert y == Direction3d.positive_y()

    def test_orthonormalize_pair_parallel_is_none(self):
        assert (
            Direction3d.orthonormalize_pair(Vector3d.xyz(1, 0, 0), Vector3d.xyz(2, 0, 0))
            is None
        )
        assert Direction3d.orthonormalize_pair(Vector3d.zero(), Vector3d.xyz(1, 0, 0)) is None

    def test_orthonormalize_triple(self):
        x, y, z = Direction3d.orthonormalize(
            Vector3d.xyz(1, 0, 0), Vector3d.xyz(1, 1, 0), Vector3d.xyz(5, 5, -3)
        )
        assert z == Direction3d.negative_z()

    def test_orthonormalize_coplanar_is_none(self):
        assert (
            Direction3d.orthonormalize(
                Vector3d.xyz(1, 0, 0), Vector3d.xyz(0, 1, 0), Vector3d.xyz(1, 1, 0)
            )
            is None
        )

    def test_perpendicular_basis_is_right_handed(self):
        d = Direction3d.from_azimuth_and_elevation(-0.6, 1.1)
        x, y = d.perpendicular_basis()
        npt.assert_allclose(x.cross(y).components, d.components, atol=1e-12)
        assert abs(x.component_in(d)) < 1e-12
        assert abs(y.component_in(d)) < 1e-12

    def test_rotate_around(self):
        rotated = Direction3d.positive_y().rotate_around(Axis3d.x(), math.pi / 2)
        npt.assert_allclose(rotated.components, [0.0, 0.0, 1.0], atol=1e-12)

    def test_project_onto_plane(self):
        d = Direction3d.from_azimuth_and_elevation(0.3, 0.7)
        projected = d.project_onto(Plane3d.xy())
        npt.assert_allclose(
            projected.components, [math.cos(0.3), math.sin(0.3), 0.0], atol=1e-12
        )

    def test_project_parallel_to_normal_is_none(self):
        offset_plane = Plane3d.xy().offset_by(5.0)
        assert Direction3d.positive_z().project_onto(offset_plane) is None
        assert Direction3d.negative_z().project_into(SketchPlane3d.xy()) is None

    def test_project_into_sketch_plane(self):
        d = Direction3d.from_azimuth_and_elevation(0.0, 0.5)
        assert d.project_into(SketchPlane3d.xy()) == Direction2d.positive_x()

    @pytest.mark.parametrize("magnitude", [1e-200, 1e-160, 1e160, 1e200])
    def test_from_vector_at_extreme_magnitudes(self, magnitude):
        assert Direction3d.from_vector(Vector3d.xyz(magnitude, 0, 0)) == (
            Direction3d.positive_x()
        )
        diagonal = Direction3d.from_vector(Vector3d.xyz(magnitude, magnitude, 0))
        npt.assert_allclose(
            diagonal.components, [math.sqrt(0.5), math.sqrt(0.5), 0.0], atol=1e-15
        )

    def test_length_does_not_overflow_or_underflow(self):
        assert Vector3d.xyz(0, 1e200, 0).length == 1e200
        assert Vector3d.xyz(0, 0, 1e-200).length == 1e-200
        assert Point3d.xyz(1e200, 0, 0).distance_from(Point3d.origin()) == 1e200
