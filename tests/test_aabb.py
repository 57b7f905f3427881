"""Unit tests for axis-aligned bounding boxes."""

import math
import random

import pytest

from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.vector import Vector3

FORWARD = Interval(0.001, math.inf)


def unit_box():
    return AABB.from_points(Vector3(-1, -1, -1), Vector3(1, 1, 1))


class TestConstruction:
    def test_from_points_is_order_independent(self):
        a = AABB.from_points(Vector3(1, -2, 3), Vector3(-1, 2, -3))
        b = AABB.from_points(Vector3(-1, 2, -3), Vector3(1, -2, 3))
        assert a == b
        assert a.x == Interval(-1, 1)
        assert a.y == Interval(-2, 2)
        assert a.z == Interval(-3, 3)

    def test_axis_interval(self):
        box = AABB.from_points(Vector3(0, 1, 2), Vector3(3, 4, 5))
        assert box.axis_interval(0) == Interval(0, 3)
        assert box.axis_interval(1) == Interval(1, 4)
        assert box.axis_interval(2) == Interval(2, 5)

    def test_empty(self):
        assert AABB.empty().is_empty()
        assert not unit_box().is_empty()


class TestUnion:
    def test_union_contains_both(self):
        rng = random.Random(7)
        for _ in range(50):
            a = AABB.from_points(Vector3(*(rng.uniform(-5, 5) for _ in range(3))),
                                 Vector3(*(rng.uniform(-5, 5) for _ in range(3))))
            b = AABB.from_points(Vector3(*(rng.uniform(-5, 5) for _ in range(3))),
                                 Vector3(*(rng.uniform(-5, 5) for _ in range(3))))
            union = a.union(b)
            assert union.contains_box(a)
            assert union.contains_box(b)
            assert union == b.union(a)

    def test_union_with_sub_volume_is_identity(self):
        outer = unit_box()
        inner = AABB.from_points(Vector3(-0.5, 0, 0), Vector3(0.5, 0.5, 0.5))
        assert outer.union(inner) == outer

    def test_union_with_empty_is_identity(self):
        assert unit_box().union(AABB.empty()) == unit_box()


class TestIntersect:
    def test_overlap(self):
        other = AABB.from_points(Vector3(0, 0, 0), Vector3(3, 3, 3))
        assert unit_box().intersect(other) == AABB.from_points(Vector3(0, 0, 0), Vector3(1, 1, 1))

    def test_is_commutative(self):
        other = AABB.from_points(Vector3(0.5, -2, 0), Vector3(3, 0.5, 0.2))
        assert unit_box().intersect(other) == other.intersect(unit_box())

    def test_disjoint_on_one_axis(self):
        other = AABB.from_points(Vector3(0, 0, 2), Vector3(1, 1, 3))
        assert unit_box().intersect(other) is None

    def test_with_empty_box(self):
        assert unit_box().intersect(AABB.empty()) is None


class TestTranslatePad:
    def test_translate(self):
        moved = unit_box().translate(Vector3(1, 2, 3))
        assert moved == AABB.from_points(Vector3(0, 1, 2), Vector3(2, 3, 4))

    def test_pad_flat_axis(self):
        flat = AABB.from_points(Vector3(-1, -1, 2), Vector3(1, 1, 2))
        padded = flat.pad(0.0001)
        assert padded.z.size() == pytest.approx(0.0001)
        assert (padded.z.min + padded.z.max) / 2 == pytest.approx(2.0)
        assert padded.x == flat.x
        assert padded.y == flat.y

    def test_pad_leaves_thick_box_alone(self):
        assert unit_box().pad(0.0001) == unit_box()


class TestHit:
    def test_hit_head_on(self):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert unit_box().hit(ray, FORWARD)

    def test_hit_negative_direction(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert unit_box().hit(ray, FORWARD)

    def test_miss_offset_ray(self):
        ray = Ray(Vector3(2, 0, -5), Vector3(0, 0, 1))
        assert not unit_box().hit(ray, FORWARD)

    def test_miss_diagonal(self):
        ray = Ray(Vector3(-5, 3, 0), Vector3(1, 1, 0))
        assert not unit_box().hit(ray, FORWARD)

    def test_hit_diagonal(self):
        ray = Ray(Vector3(-5, -5, -5), Vector3(1, 1, 1))
        assert unit_box().hit(ray, FORWARD)

    def test_box_behind_ray(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, 1))
        assert not unit_box().hit(ray, FORWARD)

    def test_window_ends_before_box(self):
        box = AABB.from_points(Vector3(-1, -1, 4), Vector3(1, 1, 5))
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))
        assert not box.hit(ray, Interval(0.001, 3.0))
        assert box.hit(ray, Interval(0.001, 4.5))

    def test_parallel_ray_outside_slab(self):
        ray = Ray(Vector3(0, 5, -5), Vector3(0, 0, 1))
        assert not unit_box().hit(ray, FORWARD)

    def test_parallel_ray_inside_slab(self):
        ray = Ray(Vector3(0.5, 0.5, -5), Vector3(0, 0, 1))
        assert unit_box().hit(ray, FORWARD)

    def test_padded_flat_box_is_hit(self):
        flat = AABB.from_points(Vector3(-1, -1, 0), Vector3(1, 1, 0)).pad()
        ray = Ray(Vector3(0, 0, 3), Vector3(0, 0, -1))
        assert flat.hit(ray, FORWARD)

    def test_empty_box_is_never_hit(self):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert not AABB.empty().hit(ray, Interval.universe())


class TestLongestAxis:
    @pytest.mark.parametrize("size, expected", [
        ((2, 1, 1), 0),
        ((1, 3, 1), 1),
        ((1, 1, 4), 2),
        ((2, 2, 1), 0),
        ((2, 1, 2), 0),
        ((1, 2, 2), 1),
        ((1, 1, 1), 0),
    ])
    def test_longest_axis(self, size, expected):
        box = AABB.from_points(Vector3(0, 0, 0), Vector3(*size))
        assert box.longest_axis() == expected
