import pygame
import pytest

from shrinkarena.game_object import ObjectType, Scope
from shrinkarena.geometry import Vector2D
from shrinkarena.projectile import Projectile
from shrinkarena.window import GameWindow

CYAN = (0, 255, 255, 255)


def _window():
    return GameWindow(100, 100, 400, 400, 0.0, "arena", 1000, 1000, clock=lambda: 2.0)


def _shot(window, x, y, direction=Vector2D(1, 0), speed=1500):
    return Projectile(Vector2D(x, y), Vector2D(10, 10), direction, Scope.LOCAL, CYAN, speed, window)


def test_type_and_circle_shape():
    shot = _shot(_window(), 300, 300)
    assert shot.object_type is ObjectType.PROJECTILE
    for v in shot.vertices:
        assert v.distance(shot.position) == pytest.approx(5)


def test_moves_inside_window():
    window = _window()
    shot = _shot(window, 300, 300, Vector2D(0, 1), speed=100)
    shot.update(0.1)
    assert shot.active
    assert shot.position.x == pytest.approx(300)
    assert shot.position.y - 300 == pytest.approx(shot.speed * 0.1)
    assert window.resize_requests == ()


def test_right_edge_requests_expansion():
    window = _window()
    start = Vector2D(490, 300)
    shot = _shot(window, start.x, start.y)
    shot.update(0.1)
    assert not shot.active
    assert shot.position == start
    (request,) = window.resize_requests
    assert request.right == Projectile.EXPAND_AMOUNT
    assert (request.top, request.bottom, request.left) == (0, 0, 0)
    assert request.duration == Projectile.RESIZE_DURATION
    assert request.initial_speed == 15


def test_top_edge_wins_over_left():
    window = _window()
    shot = _shot(window, 106, 106, Vector2D(-1, -1), speed=10)
    shot.update(0.1)
    (request,) = window.resize_requests
    assert request.top == Projectile.EXPAND_AMOUNT
    assert request.left == 0


def test_bottom_edge_wins_over_right():
    window = _window()
    shot = _shot(window, 494, 494, Vector2D(1, 1), speed=10)
    shot.update(0.1)
    (request,) = window.resize_requests
    assert request.bottom == Projectile.EXPAND_AMOUNT
    assert request.right == 0


def test_inactive_projectile_stays_put():
    window = _window()
    shot = _shot(window, 490, 300)
    shot.active = False
    shot.update(0.1)
    assert shot.position == Vector2D(490, 300)
    assert window.resize_requests == ()


def test_draw_in_window_coordinates():
    window = _window()
    shot = _shot(window, 150, 150)
    surface = pygame.Surface((window.width, window.height))
    shot.draw(surface)
    assert tuple(surface.get_at((50, 50))) == CYAN
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)