"""Slow, tough pentagon enemies."""

from __future__ import annotations

import math
import random
import time
from typing import Any, Callable, Optional

import pygame

from .game_object import Color, GameObject, ObjectType, Scope
from .geometry import Vector2D
from .triangle import _draw_health_bar
from .window import GameWindow


class Pentagon(GameObject):
    """A slowly rotating enemy with plenty of health and a large score."""

    object_type = ObjectType.PENTAGON
    FLASH_DURATION = 0.05
    SPIN_DEGREES_PER_SECOND = 10.0
    BASE_COLOR: Color = (0, 255, 255, 255)
    FLASH_COLOR: Color = (255, 255, 255, 255)

    def __init__(
        self,
        position: Vector2D,
        dimensions: Vector2D,
        scope: Scope,
        window: GameWindow,
        player: Optional[Any] = None,
        health: float = 500.0,
        *,
        texture: Optional[pygame.Surface] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(
            position, dimensions, Vector2D(), scope, self.BASE_COLOR, 0, texture=texture
        )
        self.window = window
        self.player = player
        self.health = health
        self.max_health = health
        self.score = 50.0
        self.last_hit_time = 0.0
        self._clock = clock
        generator = rng if rng is not None else random.Random()
        self.angle = math.radians(generator.randrange(360))
        self._init_pentagon_collision()

    def _init_pentagon_collision(self) -> None:
        hw, hh = self.dimensions.x / 2.0, self.dimensions.y / 2.0
        self.local_vertices = [
            Vector2D(0, -hh),
            Vector2D(hw, -self.dimensions.y / 6.0),
            Vector2D(hw - 18.0, hh - 4.0),
            Vector2D(-hw + 18.0, hh - 4.0),
            Vector2D(-hw, -self.dimensions.y / 6.0),
        ]
        self.update_collision_vertices()

    def set_health(self, health: float) -> None:
        """Set health, clamped to [0, max_health]."""
        self.health = min(max(health, 0.0), self.max_health)

    def change_health_by(self, delta: float) -> None:
        """Change health within [0, max_health]; damage records the hit time."""
        self.set_health(self.health + delta)
        if delta < 0:
            self.last_hit_time = self._clock()

    def _flashing(self) -> bool:
        return self._clock() - self.last_hit_time < self.FLASH_DURATION

    def update(self, delta_time: float) -> None:
        if not self.active:
            return
        if self.health <= 0:
            self.active = False
            return
        self.rotate(math.radians(self.SPIN_DEGREES_PER_SECOND) * delta_time)
        self.set_color(*(self.FLASH_COLOR if self._flashing() else self.BASE_COLOR))

    def draw(self, surface: pygame.Surface) -> None:
        if not self.active or not self.is_in_window(self.window.bounds):
            return
        tint = self.FLASH_COLOR if self._flashing() else (*self.color[:3], 255)
        self._render(surface, self.window, tint)
        self.draw_health_bar(surface)

    def draw_health_bar(self, surface: pygame.Surface) -> None:
        if not self.active:
            return
        _draw_health_bar(
            surface, self.position, self.dimensions, self.window.bounds, self.health, self.max_health
        )