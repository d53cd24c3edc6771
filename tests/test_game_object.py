import math

import pytest

from parkrush.collision_result import CollisionResult, CollisionType
from parkrush.game_object import GameObject, Rect


class _Bumper(GameObject):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.hit = None

    def collide_with(self, other):
        self.hit = other
        return CollisionResult.fatal_collision()


def test_rect_intersects_overlap():
    assert Rect(0, 0, 10, 10).intersects(Rect(5, 5, 10, 10))


def test_rect_touching_edges_do_not_intersect():
    assert not Rect(0, 0, 10, 10).intersects(Rect(10, 0, 10, 10))


def test_rect_intersects_is_symmetric():
    a, b = Rect(0, 0, 4, 4), Rect(3, -2, 5, 3)
    assert a.intersects(b) == b.intersects(a)


def test_rect_negative_size_normalised():
    assert Rect(10, 10, -10, -10).intersects(Rect(5, 5, 1, 1))


def test_rect_contains_edges():
    r = Rect(0, 0, 10, 10)
    assert r.contains((0, 0))
    assert not r.contains((10, 5))
    assert r.contains((9.9, 9.9))


def test_rect_expanded_grows_each_side():
    r = Rect(20, 30, 40, 50)
    e = r.expanded(8)
    assert e.left == r.left - 8 and e.top == r.top - 8
    assert e.width == r.width + 16 and e.height == r.height + 16
    assert e.expanded(-8) == r


def test_expanded_makes_nearby_rects_intersect():
    a, b = Rect(0, 0, 10, 10), Rect(15, 0, 10, 10)
    assert not a.intersects(b)
    assert a.expanded(8).intersects(b)


def test_bounds_centred_on_position():
    obj = GameObject((40, 20), position=(100, 50))
    b = obj.bounds()
    assert b.left + b.width / 2 == pytest.approx(100)
    assert b.top + b.height / 2 == pytest.approx(50)
    assert (b.width, b.height) == pytest.approx((40, 20))


def test_scale_affects_bounds():
    obj = GameObject((40, 20))
    obj.set_scale(2.0)
    b = obj.bounds()
    assert (b.width, b.height) == pytest.approx((80, 40))


def test_rotation_swaps_extent():
    obj = GameObject((40, 20), rotation=90)
    b = obj.bounds()
    assert b.width == pytest.approx(20)
    assert b.height == pytest.approx(40)


def test_rotation_45_widens_box():
    obj = GameObject((10, 10), rotation=45)
    assert obj.bounds().width == pytest.approx(10 * math.sqrt(2))


def test_is_colliding():
    a = GameObject((10, 10), position=(0, 0))
    b = GameObject((10, 10), position=(5, 5))
    c = GameObject((10, 10), position=(50, 50))
    assert a.is_colliding(b)
    assert not a.is_colliding(c)


def test_ids_are_unique_and_increasing():
    a, b = GameObject((1, 1)), GameObject((1, 1))
    assert b.id > a.id


def test_default_collide_with_is_no_collision():
    a, b = GameObject((1, 1)), GameObject((1, 1))
    assert not a.collide_with(b).has_collision()
    assert not a.accept_collision(b).has_collision()


def test_accept_collision_dispatches_to_other():
    target = GameObject((1, 1))
    bumper = _Bumper((1, 1))
    result = target.accept_collision(bumper)
    assert result.collision_type is CollisionType.FATAL_CRASH
    assert bumper.hit is target


def test_update_leaves_base_object_in_place():
    obj = GameObject((4, 4), position=(3, 3))
    obj.update(0.5)
    assert obj.position == (3, 3)