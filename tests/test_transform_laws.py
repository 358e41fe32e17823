"""
Algebraic laws that every transformable primitive must satisfy.

Each law is checked over a mix of entity types by comparing the flattened
JSON form of both sides.
"""

import math

import numpy.testing as npt
import pytest

from rapidgeom import (
    Axis2d,
    Axis3d,
    Circle2d,
    Circle3d,
    Direction2d,
    Direction3d,
    Frame2d,
    Frame3d,
    Plane3d,
    Point2d,
    Point3d,
    SketchPlane3d,
    Vector2d,
    Vector3d,
)


def flatten(json_data):
    if isinstance(json_data, dict):
        values = []
        for key in sorted(json_data):
            values.extend(flatten(json_data[key]))
        return values
    return [float(json_data)]


def assert_same(first, second, atol=1e-12):
    assert type(first) is type(second)
    npt.assert_allclose(flatten(first.to_json()), flatten(second.to_json()), atol=atol)


FRAME_2D = Frame2d.with_angle(0.9, Point2d.xy(2, -1))
FRAME_3D = Frame3d.with_z_direction(
    Direction3d.from_azimuth_and_elevation(0.5, 0.8), Point3d.xyz(1, 2, -3)
)
SKETCH_PLANE = SketchPlane3d.with_normal_direction(
    Direction3d.from_azimuth_and_elevation(-1.2, 0.3), Point3d.xyz(0, 5, 1)
)

ENTITIES_2D = [
    Vector2d.xy(3, -4),
    Direction2d.from_angle(-2.0),
    Point2d.xy(1.5, 2.5),
    Axis2d.through(Point2d.xy(-1, 1), Direction2d.from_angle(0.4)),
    Circle2d.with_radius(2.0, Point2d.xy(4, 1)),
    Frame2d.with_angle(-0.3, Point2d.xy(0, 3)),
]

ENTITIES_3D = [
    Vector3d.xyz(1, -2, 0.5),
    Direction3d.from_azimuth_and_elevation(2.5, -0.7),
    Point3d.xyz(-3, 1, 4),
    Axis3d.through(Point3d.xyz(1, 1, 1), Direction3d.from_azimuth_and_elevation(0.1, 0.2)),
    Plane3d.through(Point3d.xyz(0, 0, 2), Direction3d.from_azimuth_and_elevation(1.0, 1.0)),
    Circle3d.with_radius(1.5, Direction3d.positive_x(), Point3d.xyz(2, 0, 0)),
    SketchPlane3d.yz().move_to(Point3d.xyz(1, 2, 3)),
    Frame3d.at_point(Point3d.xyz(-1, -1, 2)).rotate_around(Axis3d.y(), 0.7),
]


def ids(entity):
    return type(entity).__name__


class TestFrameConversion:
    @pytest.mark.parametrize("entity", ENTITIES_2D, ids=ids)
    def test_round_trip_2d(self, entity):
        assert_same(entity.relative_to(FRAME_2D).place_in(FRAME_2D), entity)
        assert_same(entity.place_in(FRAME_2D).relative_to(FRAME_2D), entity)

    @pytest.mark.parametrize("entity", ENTITIES_3D, ids=ids)
    def test_round_trip_3d(self, entity):
        assert_same(entity.relative_to(FRAME_3D).place_in(FRAME_3D), entity)
        assert_same(entity.place_in(FRAME_3D).relative_to(FRAME_3D), entity)

    @pytest.mark.parametrize("entity", ENTITIES_2D, ids=ids)
    def test_global_frame_is_identity(self, entity):
        assert_same(entity.relative_to(Frame2d.at_origin()), entity)

    @pytest.mark.parametrize(
        "entity",
        [
            Vector2d.xy(3, -4),
            Point2d.xy(1.5, 2.5),
            Axis2d.through(Point2d.xy(-1, 1), Direction2d.from_angle(0.4)),
            Direction2d.from_angle(1.3),
        ],
        ids=ids,
    )
    def test_place_onto_then_project_into(self, entity):
        assert_same(entity.place_onto(SKETCH_PLANE).project_into(SKETCH_PLANE), entity)


class TestMirror:
    @pytest.mark.parametrize("entity", ENTITIES_2D, ids=ids)
    def test_mirror_twice_is_identity_2d(self, entity):
        axis = Axis2d.through(Point2d.xy(1, -2), Direction2d.from_angle(1.1))
        assert_same(entity.mirror_across(axis).mirror_across(axis), entity)

    @pytest.mark.parametrize("entity", ENTITIES_3D, ids=ids)
    def test_mirror_twice_is_identity_3d(self, entity):
        plane = Plane3d.through(
            Point3d.xyz(1, 0, 1), Direction3d.from_azimuth_and_elevation(0.3, -0.6)
        )
        assert_same(entity.mirror_across(plane).mirror_across(plane), entity)


class TestRotation:
    @pytest.mark.parametrize(
        "entity",
        [e for e in ENTITIES_2D if not isinstance(e, (Vector2d, Direction2d))],
        ids=ids,
    )
    def test_rotations_compose_2d(self, entity):
        center = Point2d.xy(0.5, -0.5)
        twice = entity.rotate_around(center, 0.4).rotate_around(center, 1.1)
        assert_same(twice, entity.rotate_around(center, 1.5))

    @pytest.mark.parametrize("entity", [Vector2d.xy(3, -4), Direction2d.from_angle(-2.0)], ids=ids)
    def test_rotate_by_composes(self, entity):
        assert_same(entity.rotate_by(0.4).rotate_by(1.1), entity.rotate_by(1.5))

    @pytest.mark.parametrize("entity", ENTITIES_3D, ids=ids)
    def test_rotations_compose_3d(self, entity):
        axis = Axis3d.through(
            Point3d.xyz(0, 1, 0), Direction3d.from_azimuth_and_elevation(0.8, 0.2)
        )
        twice = entity.rotate_around(axis, 0.4).rotate_around(axis, 1.1)
        assert_same(twice, entity.rotate_around(axis, 1.5))

    @pytest.mark.parametrize("entity", ENTITIES_3D, ids=ids)
    def test_full_turn_is_identity(self, entity):
        assert_same(entity.rotate_around(Axis3d.z(), 2 * math.pi), entity)


class TestScale:
    def test_scale_about_own_point_is_fixed(self):
        center = Point3d.xyz(1, 2, 3)
        assert center.scale_about(center, 4.0) == center
        assert Point2d.xy(1, 2).scale_about(Point2d.xy(1, 2), -3.0) == Point2d.xy(1, 2)

    def test_scale_by_one_is_identity(self):
        circle = Circle3d.with_radius(2.0, Direction3d.negative_z(), Point3d.xyz(1, 1, 1))
        assert_same(circle.scale_about(Point3d.xyz(5, -2, 0), 1.0), circle)

    def test_scales_compose(self):
        center = Point2d.xy(-1, 2)
        circle = Circle2d.with_radius(1.0, Point2d.xy(3, 3))
        assert_same(
            circle.scale_about(center, 2.0).scale_about(center, -0.5),
            circle.scale_about(center, -1.0),
        )


class TestUnitDirections:
    def test_directions_stay_unit_through_chained_transformations(self):
        direction = Direction3d.from_azimuth_and_elevation(0.3, 0.2)
        axis = Axis3d.through(Point3d.origin(), Direction3d.from_azimuth_and_elevation(1.0, 0.5))
        plane = Plane3d.through(Point3d.origin(), Direction3d.from_azimuth_and_elevation(-2.0, 0.1))
        for _ in range(100):
            direction = (
                direction.rotate_around(axis, 0.37)
                .mirror_across(plane)
                .relative_to(FRAME_3D)
                .place_in(FRAME_3D)
            )
            squared = direction.x ** 2 + direction.y ** 2 + direction.z ** 2
            assert abs(squared - 1.0) < 1e-12

    def test_frame_stays_orthonormal(self):
        frame = FRAME_3D
        axis = Axis3d.through(Point3d.xyz(1, 1, 1), Direction3d.from_azimuth_and_elevation(2.0, 0.7))
        for _ in range(50):
            frame = frame.rotate_around(axis, 0.21)
        directions = [frame.x_direction, frame.y_direction, frame.z_direction]
        for i, first in enumerate(directions):
            for second in directions[i + 1 :]:
                assert abs(first.component_in(second)) < 1e-12
        assert frame.is_right_handed

    def test_perpendicular_projection_is_none(self):
        assert Axis3d.z().project_into(SketchPlane3d.xy()) is None
        assert Direction3d.positive_z().project_onto(Plane3d.xy()) is None
