"""Shots fired by the player; they push the window edge they reach."""

from __future__ import annotations

from typing import Optional

import pygame

from .game_object import Color, GameObject, ObjectType, Scope
from .geometry import Vector2D
from .window import CollisionEdge, GameWindow


class Projectile(GameObject):
    """A round shot that flies straight and expands the window edge it hits."""

    object_type = ObjectType.PROJECTILE
    EXPAND_AMOUNT = 100
    RESIZE_DURATION = 0.3

    def __init__(
        self,
        position: Vector2D,
        dimensions: Vector2D,
        direction: Vector2D,
        scope: Scope,
        color: Color,
        speed: float,
        window: GameWindow,
        *,
        texture: Optional[pygame.Surface] = None,
    ) -> None:
        super().__init__(position, dimensions, direction, scope, color, speed, texture=texture)
        self.window = window
        self.damage = 0.0
        self.init_circle_collision()

    def _edge_hit(self, new_position: Vector2D) -> Optional[CollisionEdge]:
        bounds = self.window.bounds
        hw, hh = self.dimensions.x / 2, self.dimensions.y / 2
        edge = None
        # Later checks win: vertical edges take precedence over horizontal ones.
        if new_position.x - hw <= bounds.x:
            edge = CollisionEdge.LEFT
        if new_position.x + hw >= bounds.right:
            edge = CollisionEdge.RIGHT
        if new_position.y - hh <= bounds.y:
            edge = CollisionEdge.TOP
        if new_position.y + hh >= bounds.bottom:
            edge = CollisionEdge.BOTTOM
        return edge

    def update(self, delta_time: float) -> None:
        if not self.active:
            return
        velocity = self.direction * self.speed * delta_time
        edge = self._edge_hit(self.position + velocity)
        if edge is None:
            self.move(velocity)
            return
        amounts = {e: 0 for e in CollisionEdge}
        amounts[edge] = self.EXPAND_AMOUNT
        self.window.create_resize_request(
            amounts[CollisionEdge.TOP],
            amounts[CollisionEdge.BOTTOM],
            amounts[CollisionEdge.LEFT],
            amounts[CollisionEdge.RIGHT],
            int(self.speed) // 100,
            self.RESIZE_DURATION,
        )
        self.active = False

    def draw(self, surface: pygame.Surface) -> None:
        self._render(surface, self.window)