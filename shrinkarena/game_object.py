"""Base class for everything on the play field, with SAT collision helpers."""

from __future__ import annotations

import abc
import enum
import math
from typing import Any, Iterable, Optional, Sequence

import pygame

from .geometry import Rect, Vector2D

Color = tuple[int, int, int, int]

CIRCLE_SEGMENTS = 12


class Scope(enum.Enum):
    LOCAL = "local"
    GLOBAL = "global"


class ObjectType(enum.Enum):
    GENERIC = "generic"
    PLAYER = "player"
    PROJECTILE = "projectile"
    TRIANGLE = "triangle"
    BEAM = "beam"
    PENTAGON = "pentagon"


def get_axes(vertices: Sequence[Vector2D]) -> list[Vector2D]:
    """Unit normals of every edge of a closed polygon."""
    points = list(vertices)
    return [
        Vector2D(-(b.y - a.y), b.x - a.x).normalize()
        for a, b in zip(points, points[1:] + points[:1])
    ]


def project(vertices: Iterable[Vector2D], axis: Vector2D) -> tuple[float, float]:
    """Smallest and largest projection of the vertices onto ``axis``."""
    projections = [vertex.dot(axis) for vertex in vertices]
    if not projections:
        raise ValueError("no vertices to project")
    return min(projections), max(projections)


def check_sat_collision(
    vertices1: Sequence[Vector2D], vertices2: Sequence[Vector2D]
) -> bool:
    """Separating-axis test of two convex polygons; touching counts as colliding."""
    for axis in [*get_axes(vertices1), *get_axes(vertices2)]:
        min1, max1 = project(vertices1, axis)
        min2, max2 = project(vertices2, axis)
        if max1 < min2 or max2 < min1:
            return False
    return True


class GameObject(abc.ABC):
    """An object positioned by its centre, with a rotatable collision polygon."""

    object_type = ObjectType.GENERIC

    def __init__(
        self,
        position: Vector2D,
        dimensions: Vector2D,
        direction: Vector2D = Vector2D(),
        scope: Scope = Scope.GLOBAL,
        color: Color = (255, 255, 255, 255),
        speed: float = 0,
        *,
        texture: Optional[pygame.Surface] = None,
    ) -> None:
        self.position = position
        self.dimensions = dimensions
        self.direction = direction
        self.scope = scope
        self.color: Color = tuple(color)  # type: ignore[assignment]
        self.speed = speed
        self.texture = texture
        self.angle = 0.0  # radians
        self.active = True
        self.vertices: list[Vector2D] = []
        self.local_vertices: list[Vector2D] = []

    @abc.abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the object by ``delta_time`` seconds."""

    @abc.abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Render the object onto ``surface``."""

    def set_position(self, position: Vector2D) -> None:
        """Place the centre; the collision polygon follows on the next update."""
        self.position = position

    def set_direction(self, direction: Vector2D) -> None:
        self.direction = direction

    def move(self, delta: Vector2D) -> None:
        self.position = self.position + delta
        self.update_collision_vertices()

    def set_dimensions(self, dimensions: Vector2D) -> None:
        self.dimensions = dimensions
        self.update_collision_vertices()

    def set_angle(self, angle: float) -> None:
        self.angle = angle
        self.update_collision_vertices()

    def rotate(self, d_angle: float) -> None:
        self.angle += d_angle
        self.update_collision_vertices()

    def set_color(self, r: int, g: int, b: int, a: int) -> None:
        self.color = (r, g, b, a)

    def is_out_of_bounds(self, bounds: Rect) -> bool:
        p = self.position
        return p.x < bounds.x or p.x > bounds.right or p.y < bounds.y or p.y > bounds.bottom

    def is_in_window(self, bounds: Rect) -> bool:
        p = self.position
        return bounds.x < p.x < bounds.right and bounds.y < p.y < bounds.bottom

    def init_rectangle_collision(self) -> None:
        hw, hh = self.dimensions.x / 2, self.dimensions.y / 2
        self.local_vertices = [
            Vector2D(-hw, -hh),
            Vector2D(hw, -hh),
            Vector2D(hw, hh),
            Vector2D(-hw, hh),
        ]
        self.update_collision_vertices()

    def init_circle_collision(self) -> None:
        """Approximate the object's ellipse with a fixed number of vertices."""
        rx, ry = self.dimensions.x / 2.0, self.dimensions.y / 2.0
        step = 2 * math.pi / CIRCLE_SEGMENTS
        self.local_vertices = [
            Vector2D(rx * math.cos(step * i), ry * math.sin(step * i))
            for i in range(CIRCLE_SEGMENTS)
        ]
        self.update_collision_vertices()

    def update_collision_vertices(self) -> None:
        c, s = math.cos(self.angle), math.sin(self.angle)
        self.vertices = [
            Vector2D(v.x * c - v.y * s, v.x * s + v.y * c) + self.position
            for v in self.local_vertices
        ]

    def check_collision(self, other: GameObject) -> bool:
        return check_sat_collision(self.vertices, other.vertices)

    def _render(
        self, surface: pygame.Surface, window: Any, tint: Optional[Color] = None
    ) -> None:
        """Draw the texture (or, lacking one, the collision polygon) in window space."""
        offset = Vector2D(window.x, window.y)
        centre = self.position - offset
        if self.texture is not None:
            size = (max(1, int(self.dimensions.x)), max(1, int(self.dimensions.y)))
            image = pygame.transform.scale(self.texture, size)
            if tint is not None:
                image.fill(tint, special_flags=pygame.BLEND_RGBA_MULT)
            image = pygame.transform.rotate(image, -math.degrees(self.angle))
            surface.blit(image, image.get_rect(center=(int(centre.x), int(centre.y))))
            return
        colour = tint if tint is not None else self.color
        points = [(v.x - offset.x, v.y - offset.y) for v in self.vertices]
        if len(points) >= 3:
            pygame.draw.polygon(surface, colour, points)
        else:
            rect = pygame.Rect(
                int(centre.x - self.dimensions.x / 2),
                int(centre.y - self.dimensions.y / 2),
                int(self.dimensions.x),
                int(self.dimensions.y),
            )
            pygame.draw.rect(surface, colour, rect)