"""Homing triangle enemies."""

from __future__ import annotations

import math
import random
import time
from typing import Any, Callable, Optional

import pygame

from .game_object import Color, GameObject, ObjectType, Scope
from .geometry import Rect, Vector2D
from .window import GameWindow

HEALTH_BAR_OFFSET = 10
HEALTH_BAR_HEIGHT = 5


def _draw_health_bar(
    surface: pygame.Surface,
    position: Vector2D,
    dimensions: Vector2D,
    bounds: Rect,
    health: float,
    max_health: float,
) -> None:
    """Draw a white container with a green, yellow or red fill above an object."""
    x = int(position.x - bounds.x - dimensions.x / 2)
    y = int(position.y - bounds.y - dimensions.y / 2) - HEALTH_BAR_OFFSET
    width = int(dimensions.x)
    pygame.draw.rect(surface, (255, 255, 255, 255), pygame.Rect(x, y, width, HEALTH_BAR_HEIGHT))
    ratio = health / max_health if max_health else 0.0
    if ratio > 0.5:
        colour = (0, 255, 0, 255)
    elif ratio > 0.25:
        colour = (255, 255, 0, 255)
    else:
        colour = (255, 0, 0, 255)
    filled = int(width * ratio)
    if filled > 0:
        pygame.draw.rect(surface, colour, pygame.Rect(x, y, filled, HEALTH_BAR_HEIGHT))


class Triangle(GameObject):
    """A spinning enemy that drifts towards its target with a little jitter."""

    object_type = ObjectType.TRIANGLE
    FLASH_DURATION = 0.05
    SPIN_DEGREES_PER_SECOND = 60.0
    DEVIATION_STRENGTH = 0.2
    BASE_COLOR: Color = (255, 255, 0, 255)
    FLASH_COLOR: Color = (255, 255, 255, 255)

    def __init__(
        self,
        position: Vector2D,
        dimensions: Vector2D,
        direction: Vector2D,
        scope: Scope,
        color: Color,
        speed: float,
        window: GameWindow,
        target: Optional[Any] = None,
        health: float = 50.0,
        *,
        texture: Optional[pygame.Surface] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(position, dimensions, direction, scope, color, speed, texture=texture)
        self.window = window
        self.target = target
        self.health = health
        self.max_health = health
        self.score = 3.0
        self.last_hit_time = 0.0
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock
        self.spin_direction = 1 if self._rng.randrange(2) else -1
        self._init_triangle_collision()

    def _init_triangle_collision(self) -> None:
        hw, hh = self.dimensions.x / 2.0, self.dimensions.y / 2.0
        self.local_vertices = [Vector2D(0, -hh), Vector2D(-hw, hh), Vector2D(hw, hh)]
        self.update_collision_vertices()

    def set_health(self, health: float) -> None:
        """Set health, clamped to [0, max_health]."""
        self.health = min(max(health, 0.0), self.max_health)

    def change_health_by(self, delta: float) -> None:
        self.health += delta

    def _flashing(self) -> bool:
        return self._clock() - self.last_hit_time < self.FLASH_DURATION

    def update(self, delta_time: float) -> None:
        if not self.active:
            return
        if self.health <= 0:
            self.active = False
            return

        if self.target is not None:
            to_target = (self.target.position - self.position).normalize()
            if to_target.length_squared() > 1e-6:
                deviation = Vector2D(
                    self._rng.uniform(-1.0, 1.0) * self.DEVIATION_STRENGTH,
                    self._rng.uniform(-1.0, 1.0) * self.DEVIATION_STRENGTH,
                )
                self.set_direction((to_target + deviation).normalize())

        velocity = self.direction * self.speed * delta_time
        self.rotate(self.spin_direction * math.radians(self.SPIN_DEGREES_PER_SECOND) * delta_time)
        self.set_color(*(self.FLASH_COLOR if self._flashing() else self.BASE_COLOR))
        self.move(velocity)

    def draw(self, surface: pygame.Surface) -> None:
        if not self.active or not self.is_in_window(self.window.bounds):
            return
        self._render(surface, self.window, (*self.color[:3], 255))
        self.draw_health_bar(surface)

    def draw_health_bar(self, surface: pygame.Surface) -> None:
        if not self.active:
            return
        _draw_health_bar(
            surface, self.position, self.dimensions, self.window.bounds, self.health, self.max_health
        )