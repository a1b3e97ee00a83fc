"""Laser beams that warn at a window edge, then sweep across the screen."""

from __future__ import annotations

import enum
import logging
from typing import Any, Optional

import pygame

from .game_object import Color, GameObject, ObjectType, Scope
from .geometry import Vector2D
from .window import GameWindow

log = logging.getLogger(__name__)

# Expansion directions: 0 = bottom, 1 = top, 2 = right, 3 = left.
_DIRECTION_FROM_START_EDGE = {0: 1, 1: 0, 2: 3, 3: 2}
_VERTICAL_DIRECTIONS = (0, 1)


class BeamState(enum.Enum):
    WARNING = "warning"
    EXPANDING = "expanding"
    ACTIVE = "active"
    FADING = "fading"


class Beam(GameObject):
    """A rectangle that flashes a warning at an edge, expands, holds and fades.

    ``start_edge`` is the window edge the beam starts from: 0 top, 1 bottom,
    2 left, 3 right. The beam grows away from that edge.
    """

    object_type = ObjectType.BEAM
    WARNING_DURATION = 1.5
    EXPAND_DURATION = 0.2
    ACTIVE_DURATION = 1.0
    FADE_DURATION = 1.0
    WARNING_EXPAND_MULTIPLIER = 0.05
    EDGE_INSET = 20

    def __init__(
        self,
        position: Vector2D,
        dimensions: Vector2D,
        scope: Scope,
        color: Color,
        speed: float,
        start_edge: int,
        window: GameWindow,
        target: Optional[Any] = None,
        beam_width: float = 200.0,
        *,
        texture: Optional[pygame.Surface] = None,
    ) -> None:
        if start_edge not in _DIRECTION_FROM_START_EDGE:
            raise ValueError(f"invalid start edge for beam: {start_edge!r}")
        super().__init__(position, dimensions, Vector2D(), scope, color, speed, texture=texture)
        self.window = window
        self.target = target
        self.start_edge = start_edge
        self.direction_code = _DIRECTION_FROM_START_EDGE[start_edge]
        self.state = BeamState.WARNING
        self.state_timer = 0.0
        self.has_expanded_warning = False
        self.beam_width = beam_width
        self.damage = 2.0
        self.angle = 0.0
        self.init_rectangle_collision()

    @property
    def direction_index(self) -> int:
        """Direction of growth: 0 bottom, 1 top, 2 right, 3 left."""
        return self.direction_code

    def expand_top(self, delta: float) -> None:
        self.dimensions = Vector2D(self.dimensions.x, self.dimensions.y + delta)
        self.position = Vector2D(self.position.x, self.position.y - delta / 2.0)
        self.init_rectangle_collision()

    def expand_bottom(self, delta: float) -> None:
        self.dimensions = Vector2D(self.dimensions.x, self.dimensions.y + delta)
        self.position = Vector2D(self.position.x, self.position.y + delta / 2.0)
        self.init_rectangle_collision()

    def expand_left(self, delta: float) -> None:
        self.dimensions = Vector2D(self.dimensions.x + delta, self.dimensions.y)
        self.position = Vector2D(self.position.x - delta / 2.0, self.position.y)
        self.init_rectangle_collision()

    def expand_right(self, delta: float) -> None:
        self.dimensions = Vector2D(self.dimensions.x + delta, self.dimensions.y)
        self.position = Vector2D(self.position.x + delta / 2.0, self.position.y)
        self.init_rectangle_collision()

    def expand_by_direction(self, direction: int, delta: float, compensate: float) -> None:
        """Grow by ``delta`` towards ``direction`` and by ``compensate`` opposite it."""
        steps = {
            0: (self.expand_bottom, self.expand_top),
            1: (self.expand_top, self.expand_bottom),
            2: (self.expand_right, self.expand_left),
            3: (self.expand_left, self.expand_right),
        }.get(direction)
        if steps is None:
            return
        forward, backward = steps
        forward(delta)
        backward(compensate)

    def _span(self) -> float:
        if self.direction_code in _VERTICAL_DIRECTIONS:
            return float(self.window.screen_height)
        return float(self.window.screen_width)

    def _advance_state(self, next_state: BeamState) -> None:
        log.debug("Duration in %s state: %s", self.state.value, self.state_timer)
        self.state = next_state
        self.state_timer = 0.0

    def update(self, delta_time: float) -> None:
        if not self.active:
            return
        self.state_timer += delta_time
        bounds = self.window.bounds
        pos = self.position
        dim = self.dimensions
        span = self._span()

        if self.state is BeamState.WARNING:
            if not self.has_expanded_warning:
                amount = span * self.WARNING_EXPAND_MULTIPLIER
                self.expand_by_direction(self.direction_code, amount, amount)
                if self.direction_code in _VERTICAL_DIRECTIONS:
                    self.set_dimensions(Vector2D(self.beam_width, dim.y))
                else:
                    self.set_dimensions(Vector2D(dim.x, self.beam_width))
                self.has_expanded_warning = True
            inset = self.EDGE_INSET
            attach = {
                0: Vector2D(pos.x, bounds.y - dim.y + inset),
                1: Vector2D(pos.x, bounds.bottom - inset),
                2: Vector2D(bounds.x - dim.x + inset, pos.y),
                3: Vector2D(bounds.right - inset, pos.y),
            }
            self.set_position(attach[self.direction_code])
            if self.state_timer >= self.WARNING_DURATION:
                self._advance_state(BeamState.EXPANDING)

        elif self.state is BeamState.EXPANDING:
            if self.state_timer >= self.EXPAND_DURATION:
                self._advance_state(BeamState.ACTIVE)
            else:
                amount = span * (self.state_timer / self.EXPAND_DURATION)
                self.expand_by_direction(self.direction_code, amount, amount)

        elif self.state is BeamState.ACTIVE:
            if self.state_timer >= self.ACTIVE_DURATION:
                self._advance_state(BeamState.FADING)

        elif self.state is BeamState.FADING:
            if self.state_timer >= self.FADE_DURATION:
                self.active = False

    def _draw_color(self) -> Color:
        if self.state is BeamState.WARNING:
            return (255, 255, 0, 255)
        if self.state is BeamState.FADING:
            fade = min(self.state_timer / self.FADE_DURATION, 1.0)
            return (255, 255, 255, int(255 * (1.0 - fade)))
        return (255, 255, 255, 255)

    def draw(self, surface: pygame.Surface) -> None:
        if not self.active:
            return
        rect = pygame.Rect(
            int(self.position.x - self.window.x - self.dimensions.x / 2),
            int(self.position.y - self.window.y - self.dimensions.y / 2),
            int(self.dimensions.x),
            int(self.dimensions.y),
        )
        visible = rect.clip(surface.get_rect())
        if visible.width <= 0 or visible.height <= 0:
            return
        colour = self._draw_color()
        if colour[3] == 255:
            pygame.draw.rect(surface, colour, visible)
            return
        overlay = pygame.Surface(visible.size, pygame.SRCALPHA)
        overlay.fill(colour)
        surface.blit(overlay, visible.topleft)