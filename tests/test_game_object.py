import math

import pytest

from shrinkarena.game_object import (
    CIRCLE_SEGMENTS,
    GameObject,
    ObjectType,
    check_sat_collision,
    get_axes,
    project,
)
from shrinkarena.geometry import Rect, Vector2D


class _Box(GameObject):
    def update(self, delta_time):
        self.move(self.direction * self.speed * delta_time)

    def draw(self, surface):
        return None


def _box(x, y, w, h):
    box = _Box(Vector2D(x, y), Vector2D(w, h))
    box.init_rectangle_collision()
    return box


def _extent(vertices):
    xs = [v.x for v in vertices]
    ys = [v.y for v in vertices]
    return max(xs) - min(xs), max(ys) - min(ys)


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        GameObject(Vector2D(), Vector2D(1, 1))


def test_default_type_is_generic():
    assert _box(0, 0, 1, 1).object_type is ObjectType.GENERIC


def test_rectangle_vertices_surround_position():
    box = _box(10, 20, 4, 6)
    assert len(box.vertices) == 4
    cx = sum(v.x for v in box.vertices) / 4
    cy = sum(v.y for v in box.vertices) / 4
    assert cx == pytest.approx(10)
    assert cy == pytest.approx(20)
    assert _extent(box.vertices) == pytest.approx((4, 6))


def test_rotation_swaps_extent():
    box = _box(0, 0, 4, 2)
    box.set_angle(math.pi / 2)
    assert _extent(box.vertices) == pytest.approx((2, 4))


def test_rotate_accumulates_angle():
    box = _box(0, 0, 4, 2)
    box.rotate(0.25)
    box.rotate(0.5)
    assert box.angle == pytest.approx(0.75)


def test_circle_collision_vertices_on_radius():
    obj = _Box(Vector2D(3, 4), Vector2D(10, 10))
    obj.init_circle_collision()
    assert len(obj.vertices) == CIRCLE_SEGMENTS
    for v in obj.vertices:
        assert v.distance(obj.position) == pytest.approx(obj.dimensions.x / 2)


def test_move_shifts_vertices():
    box = _box(0, 0, 4, 4)
    before = list(box.vertices)
    box.move(Vector2D(7, -3))
    assert box.position == Vector2D(7, -3)
    for old, new in zip(before, box.vertices):
        assert new.x - old.x == pytest.approx(7)
        assert new.y - old.y == pytest.approx(-3)


def test_set_position_leaves_vertices_until_refreshed():
    box = _box(0, 0, 4, 4)
    before = list(box.vertices)
    box.set_position(Vector2D(50, 50))
    assert box.vertices == before
    box.update_collision_vertices()
    assert sum(v.x for v in box.vertices) / 4 == pytest.approx(50)


def test_update_moves_along_direction():
    box = _box(0, 0, 2, 2)
    box.set_direction(Vector2D(0, 1))
    box.speed = 10
    box.update(0.5)
    assert box.position.y == pytest.approx(5)


def test_set_color():
    box = _box(0, 0, 1, 1)
    box.set_color(1, 2, 3, 4)
    assert box.color == (1, 2, 3, 4)


@pytest.mark.parametrize(
    "x, y, out, inside",
    [
        (50, 50, False, True),
        (0, 50, False, False),
        (100, 100, False, False),
        (-1, 50, True, False),
        (50, 101, True, False),
    ],
)
def test_bounds_checks(x, y, out, inside):
    box = _box(x, y, 1, 1)
    bounds = Rect(0, 0, 100, 100)
    assert box.is_out_of_bounds(bounds) is out
    assert box.is_in_window(bounds) is inside


def test_overlapping_boxes_collide():
    assert _box(0, 0, 4, 4).check_collision(_box(3, 0, 4, 4))


def test_separated_boxes_do_not_collide():
    assert not _box(0, 0, 4, 4).check_collision(_box(5, 0, 4, 4))


def test_touching_boxes_collide():
    assert _box(0, 0, 4, 4).check_collision(_box(4, 0, 4, 4))


def test_collision_is_symmetric():
    a, b = _box(0, 0, 4, 4), _box(1, 5, 2, 2)
    assert a.check_collision(b) == b.check_collision(a)


def test_circle_and_box_diagonal_gap():
    circle = _Box(Vector2D(0, 0), Vector2D(10, 10))
    circle.init_circle_collision()
    near = _box(0, 6, 4, 4)
    far = _box(20, 20, 4, 4)
    assert circle.check_collision(near)
    assert not circle.check_collision(far)


def test_axes_are_unit_edge_normals():
    vertices = _box(0, 0, 4, 2).vertices
    axes = get_axes(vertices)
    assert len(axes) == len(vertices)
    for i, axis in enumerate(axes):
        edge = vertices[(i + 1) % len(vertices)] - vertices[i]
        assert axis.magnitude() == pytest.approx(1.0)
        assert axis.dot(edge) == pytest.approx(0.0)


def test_project_onto_x_axis():
    box = _box(10, 0, 4, 4)
    low, high = project(box.vertices, Vector2D(1, 0))
    assert high - low == pytest.approx(box.dimensions.x)
    assert (low + high) / 2 == pytest.approx(box.position.x)


def test_project_empty_raises():
    with pytest.raises(ValueError):
        project([], Vector2D(1, 0))


def test_sat_with_one_empty_polygon_raises():
    with pytest.raises(ValueError):
        check_sat_collision(_box(0, 0, 2, 2).vertices, [])


def test_sat_with_both_empty_reports_collision():
    assert check_sat_collision([], []) is True