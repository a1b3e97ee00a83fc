"""The player-controlled circle: movement, knockback, damage and death."""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, Mapping, Optional

import pygame

from .game_object import GameObject, ObjectType, Scope
from .geometry import Rect, Vector2D
from .settings import InputState
from .window import GameWindow

log = logging.getLogger(__name__)

DIAGONAL_FACTOR = 0.7071
HUD_FONT_SIZE = 16
HUD_PADDING = 10


@functools.lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _draw_text(
    surface: pygame.Surface, text: str, x: int, y: int, size: int, colour: tuple[int, ...]
) -> None:
    image = _font(size).render(text, True, colour[:3])
    surface.blit(image, (x, y))


class Player(GameObject):
    """The round player character.

    Movement reads the pressed keys from ``input_state``; shooting and the
    game-over signal go through ``game_manager``, which must provide
    ``spawn_projectile(position, direction, speed)`` and ``trigger_game_over()``.
    ``clock`` returns the current time in seconds.
    """

    object_type = ObjectType.PLAYER

    def __init__(
        self,
        position: Vector2D,
        radius: float,
        speed: float,
        window: GameWindow,
        *,
        game_manager: Optional[Any] = None,
        input_state: Optional[InputState] = None,
        texture: Optional[pygame.Surface] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(
            position,
            Vector2D(radius * 2, radius * 2),
            Vector2D(),
            Scope.LOCAL,
            (255, 255, 255, 255),
            speed,
            texture=texture,
        )
        self.window = window
        self.game_manager = game_manager
        self.input_state = input_state if input_state is not None else InputState()
        self._clock = clock

        self.health = 20
        self.max_health = 20
        self.score = 0

        self.knockback_velocity = Vector2D()
        self.rapid_knockback_velocity = Vector2D()
        self.phase_one_multiplier = 0.2
        self.phase_two_multiplier = 16.0
        self.rapid_knockback_duration = 0.04
        self.phase_three_multiplier = 0.1
        self.rapid_knockback_timer = 0.0
        self.knockback_decay = 1.0
        self.knockback_min_threshold = 0.1

        self.grace_period = 0.2
        self.last_hit_time = 0.0
        self.is_dying = False
        self.death_timer = 0.0
        self.death_animation_duration = 1.0
        self.red_flash_duration = 0.05

        self.projectile_speed = 1500
        self.fire_rate = 3.0

        self.init_circle_collision()

    # --- health and score -------------------------------------------------
    def change_health_by(self, delta: int) -> None:
        """Apply a health change unless still inside the grace period of the last hit."""
        now = self._clock()
        if now - self.last_hit_time < self.grace_period:
            return
        self.last_hit_time = now
        self.health = max(0, self.health + delta)
        if self.health == 0 and not self.is_dying:
            self.start_death_sequence()

    def reset_health(self) -> None:
        self.health = self.max_health

    def reset_death_state(self) -> None:
        self.is_dying = False

    def add_score(self, points: int) -> None:
        self.score += points

    def reset_score(self) -> None:
        self.score = 0

    def is_dead(self) -> bool:
        return self.health <= 0

    # --- death ------------------------------------------------------------
    def start_death_sequence(self) -> None:
        log.debug("Player death sequence started")
        self.is_dying = True
        self.death_timer = 0.0

    def update_death_animation(self, delta_time: float) -> None:
        """Flash, shrink and finally deactivate, signalling game over."""
        if not self.is_dying:
            return
        self.death_timer += delta_time
        flash_rate = 10.0
        if int(self.death_timer * flash_rate) % 2 == 0:
            self.set_color(255, 0, 0, 255)
        else:
            self.set_color(255, 255, 255, 100)

        shrink_factor = 1.0 - self.death_timer / self.death_animation_duration
        self.set_dimensions(self.dimensions * max(0.1, shrink_factor))

        if self.death_timer >= self.death_animation_duration:
            log.debug("Player death animation complete, setting inactive")
            self.active = False
            if self.game_manager is not None:
                self.game_manager.trigger_game_over()

    def reinitialize_collision(self) -> None:
        self.vertices = []
        self.init_circle_collision()

    # --- gameplay ---------------------------------------------------------
    def update_movement(
        self, keys: Mapping[str, bool], bounds: Rect, delta_time: float
    ) -> None:
        """Move according to the pressed direction keys, staying inside ``bounds``."""
        dx = float(keys["right"]) - float(keys["left"])
        dy = float(keys["down"]) - float(keys["up"])
        delta = Vector2D(dx, dy)
        if dx and dy:
            delta = delta * DIAGONAL_FACTOR
        self.move(delta * self.speed * delta_time)

        half_w = self.dimensions.x / 2.0
        half_h = self.dimensions.y / 2.0
        x = min(max(self.position.x, bounds.x + half_w), bounds.right - half_w)
        y = min(max(self.position.y, bounds.y + half_h), bounds.bottom - half_h)
        self.set_position(Vector2D(x, y))

    def apply_knockback(self, impulse: Vector2D) -> None:
        """Push back in three phases: an instant jolt, a rapid burst, a decaying drift."""
        self.move(impulse * self.phase_one_multiplier)
        self.rapid_knockback_velocity = impulse * self.phase_two_multiplier
        self.rapid_knockback_timer = self.rapid_knockback_duration
        self.knockback_velocity = impulse * self.phase_three_multiplier

    def shoot_at(self, x: float, y: float) -> None:
        """Fire a projectile from the player's centre towards ``(x, y)``."""
        if self.is_dying or not self.active:
            return
        if self.game_manager is None:
            raise RuntimeError("player has no game manager to spawn projectiles")
        direction = (Vector2D(float(x), float(y)) - self.position).normalize()
        self.game_manager.spawn_projectile(self.position, direction, self.projectile_speed)

    def _update_knockback(self, delta_time: float) -> None:
        if self.rapid_knockback_timer > 0:
            self.move(self.rapid_knockback_velocity * delta_time)
            self.rapid_knockback_timer -= delta_time
            if self.rapid_knockback_timer <= 0:
                if self.rapid_knockback_timer < 0:
                    leftover = -self.rapid_knockback_timer / self.rapid_knockback_duration
                    self.knockback_velocity = (
                        self.knockback_velocity + self.rapid_knockback_velocity * leftover
                    )
                self.rapid_knockback_velocity = Vector2D()

        if self.knockback_velocity.x != 0 or self.knockback_velocity.y != 0:
            self.move(self.knockback_velocity * delta_time)
            factor = max(0.0, 1.0 - self.knockback_decay * delta_time)
            self.knockback_velocity = self.knockback_velocity * factor
            threshold = self.knockback_min_threshold
            if self.knockback_velocity.length_squared() < threshold * threshold:
                self.knockback_velocity = Vector2D()

    def update(self, delta_time: float) -> None:
        if self.is_dying:
            self.update_death_animation(delta_time)
            return
        self._update_knockback(delta_time)
        self.update_movement(self.input_state.keys, self.window.bounds, delta_time)
        if self.is_dying or not self.active:
            return
        self.init_circle_collision()

    # --- rendering --------------------------------------------------------
    def _health_colour(self) -> tuple[int, int, int, int]:
        percent = self.health / self.max_health
        if percent <= 0.25:
            return (255, 0, 0, 255)
        if percent <= 0.5:
            return (255, 255, 0, 255)
        return (0, 255, 0, 255)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the player and the health and score read-outs."""
        if self.is_dying:
            self._render(surface, self.window, self.color)
        else:
            self._render(surface, self.window)

        width, height = surface.get_size()
        health_text = f"{self.health}/{self.max_health} HP"
        text_x = width - len(health_text) * (HUD_FONT_SIZE // 2 + 1) - HUD_PADDING
        text_y = height - HUD_FONT_SIZE - HUD_PADDING
        _draw_text(surface, health_text, text_x, text_y, HUD_FONT_SIZE, self._health_colour())
        _draw_text(
            surface,
            f"Score: {self.score}",
            HUD_PADDING,
            HUD_PADDING,
            HUD_FONT_SIZE,
            (255, 255, 255, 255),
        )