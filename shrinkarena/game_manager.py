"""Owns every game object: spawning, updating, collisions and game state."""

from __future__ import annotations

import enum
import logging
import math
import random
import time
from typing import Callable, Iterator, Mapping, Optional

import pygame

from .beam import Beam, BeamState
from .collision import CollisionManager
from .game_object import GameObject, ObjectType, Scope
from .geometry import Vector2D
from .pentagon import Pentagon
from .player import Player
from .projectile import Projectile
from .settings import WINDOW_HEIGHT, WINDOW_WIDTH, InputState
from .triangle import Triangle
from .window import GameWindow

log = logging.getLogger(__name__)

KNOCKBACK_FACTOR = 50.0
PROJECTILE_DAMAGE = 10.0
PLAYER_RADIUS = 25
PLAYER_SPEED = 500.0
PLAYER_SIZE = 50
PENTAGON_MIN_DISTANCE = 500.0


class GameState(enum.Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    MENU = "menu"


class GameManager:
    """Holds the game objects of one play field and drives them each frame.

    ``textures`` maps ``"player"``, ``"triangle"``, ``"projectile"`` and
    ``"pentagon"`` to images; missing entries fall back to plain shapes.
    ``clock`` returns the current time in seconds.
    """

    def __init__(
        self,
        window: GameWindow,
        *,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        input_state: Optional[InputState] = None,
        textures: Optional[Mapping[str, pygame.Surface]] = None,
    ) -> None:
        self.window = window
        self.game_objects: list[GameObject] = []
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock
        self.input_state = input_state if input_state is not None else InputState()
        self._textures = dict(textures or {})

        self.spawn_timer = 0.0
        self.spawn_interval = 5.0
        self.beam_timer = 0.0
        self.beam_interval = 5.0
        self.pentagon_timer = 0.0
        self.pentagon_interval = 5.0

        self.game_state = GameState.RUNNING
        self.game_over_delay = 2.0
        self.game_over_timer = 0.0

        self.collision_manager = CollisionManager(self)

    # --- state ------------------------------------------------------------
    def pause_game(self) -> None:
        if self.game_state is GameState.RUNNING:
            self.game_state = GameState.PAUSED
            log.debug("Game paused")

    def resume_game(self) -> None:
        if self.game_state is GameState.PAUSED:
            self.game_state = GameState.RUNNING
            log.debug("Game resumed")

    def trigger_game_over(self) -> None:
        if self.game_state is not GameState.GAME_OVER:
            self.game_state = GameState.GAME_OVER
            self.game_over_timer = 0.0
            log.debug("Game over triggered")

    def is_paused(self) -> bool:
        return self.game_state in (GameState.PAUSED, GameState.GAME_OVER)

    def restart_game(self) -> None:
        """Reset the window, drop every enemy and revive (or create) the player."""
        self.game_state = GameState.RUNNING
        screen_w, screen_h = self.window.screen_width, self.window.screen_height
        center_x = int((screen_w - WINDOW_WIDTH) / 2)
        center_y = int((screen_h - WINDOW_HEIGHT) / 2)
        self.window.set_size(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.window.set_pos(center_x, center_y)
        self.window.clear_resize_requests()

        player = self.find_player()
        self.game_objects.clear()
        self.collision_manager.clear()
        self.spawn_timer = 0.0
        self.beam_timer = 0.0
        self.pentagon_timer = 0.0
        self.game_over_timer = 0.0

        bounds = self.window.bounds
        start = Vector2D(bounds.x + bounds.w // 2, bounds.y + bounds.h // 2)

        if player is not None:
            player.set_position(start)
            player.reset_health()
            player.reset_score()
            player.reset_death_state()
            player.active = True
            player.set_dimensions(Vector2D(PLAYER_SIZE, PLAYER_SIZE))
            player.set_color(255, 255, 255, 255)
            player.reinitialize_collision()
        else:
            log.debug("No player found, creating a new one")
            player = Player(
                start,
                PLAYER_RADIUS,
                PLAYER_SPEED,
                self.window,
                game_manager=self,
                input_state=self.input_state,
                texture=self._textures.get("player"),
                clock=self._clock,
            )
            player.set_dimensions(Vector2D(PLAYER_SIZE, PLAYER_SIZE))
            player.set_position(start)
        self.add_object(player)
        log.debug("Game restarted")

    # --- objects ----------------------------------------------------------
    def add_object(self, obj: GameObject) -> None:
        self.collision_manager.add_object(obj)
        self.game_objects.append(obj)

    def _objects_of(self, object_type: ObjectType) -> Iterator[GameObject]:
        return (obj for obj in self.game_objects if obj.object_type is object_type)

    def find_player(self) -> Optional[Player]:
        """The first player among the game objects, if any."""
        return next(self._objects_of(ObjectType.PLAYER), None)  # type: ignore[return-value]

    def handle_click(self, x: float, y: float, player: Optional[Player]) -> None:
        """Let the player shoot towards a clicked point while the game runs."""
        if self.game_state is GameState.RUNNING and player is not None and player.active:
            player.shoot_at(x, y)

    # --- spawning ---------------------------------------------------------
    def spawn_triangle(
        self, position: Vector2D, direction: Vector2D, target: Optional[Player] = None
    ) -> Triangle:
        triangle = Triangle(
            position,
            Vector2D(60, 51),
            direction,
            Scope.GLOBAL,
            (255, 255, 0, 255),
            self._rng.randint(50, 150),
            self.window,
            target,
            50.0,
            texture=self._textures.get("triangle"),
            rng=self._rng,
            clock=self._clock,
        )
        triangle.score = 10.0
        triangle.set_angle(self._rng.uniform(0.0, 2 * math.pi))
        self.add_object(triangle)
        return triangle

    def spawn_projectile(
        self, position: Vector2D, direction: Vector2D, speed: float
    ) -> Projectile:
        projectile = Projectile(
            position,
            Vector2D(10, 10),
            direction,
            Scope.LOCAL,
            (0, 255, 255, 255),
            speed,
            self.window,
            texture=self._textures.get("projectile"),
        )
        self.add_object(projectile)
        return projectile

    def spawn_random_enemy(self, target: Optional[Player]) -> None:
        """Spawn one to four triangles just outside random window edges."""
        if target is None:
            raise ValueError("random enemies need a target to home in on")
        bounds = self.window.bounds
        margin = self._rng.randint(50, 100)
        for _ in range(self._rng.randint(1, 4)):
            edge = self._rng.randint(0, 3)
            if edge == 0:
                spawn = Vector2D(self._rng.randint(bounds.x, bounds.right), bounds.y - margin)
            elif edge == 1:
                spawn = Vector2D(self._rng.randint(bounds.x, bounds.right), bounds.bottom + margin)
            elif edge == 2:
                spawn = Vector2D(bounds.x - margin, self._rng.randint(bounds.y, bounds.bottom))
            else:
                spawn = Vector2D(bounds.right + margin, self._rng.randint(bounds.y, bounds.bottom))
            direction = (target.position - spawn).normalize()
            self.spawn_triangle(spawn, direction, target)

    def spawn_beam(self, target: Optional[Player]) -> Optional[Beam]:
        """Spawn a beam lined up with the target from a random window edge."""
        if target is None or not target.active:
            return None
        bounds = self.window.bounds
        beam_width = 200.0
        start_edge = self._rng.randint(0, 3)
        target_pos = target.position
        if start_edge == 0:
            position = Vector2D(target_pos.x - beam_width / 2, bounds.y)
        elif start_edge == 1:
            position = Vector2D(target_pos.x - beam_width / 2, bounds.bottom)
        elif start_edge == 2:
            position = Vector2D(bounds.x, target_pos.y - beam_width / 2)
        else:
            position = Vector2D(bounds.right, target_pos.y - beam_width / 2)
        beam = Beam(
            position,
            Vector2D(20, 20),
            Scope.GLOBAL,
            (255, 0, 0, 255),
            0,
            start_edge,
            self.window,
            target,
            beam_width,
        )
        self.add_object(beam)
        return beam

    def spawn_pentagon(self, position: Vector2D, player: Optional[Player]) -> Pentagon:
        pentagon = Pentagon(
            position,
            Vector2D(100, 100),
            Scope.GLOBAL,
            self.window,
            player,
            500.0,
            texture=self._textures.get("pentagon"),
            rng=self._rng,
            clock=self._clock,
        )
        self.add_object(pentagon)
        return pentagon

    def spawn_pentagon_group(self, player: Optional[Player]) -> None:
        """Spawn one to three pentagons anywhere on screen, away from the player."""
        if player is None or not player.active:
            return
        screen_w, screen_h = self.window.screen_width, self.window.screen_height
        player_pos = player.position
        for _ in range(self._rng.randint(1, 3)):
            while True:
                spawn = Vector2D(self._rng.randint(0, screen_w), self._rng.randint(0, screen_h))
                if (spawn - player_pos).magnitude() >= PENTAGON_MIN_DISTANCE:
                    break
            self.spawn_pentagon(spawn, player)

    # --- frame ------------------------------------------------------------
    def update(self, delta_time: float) -> None:
        """Run the spawn timers, update active objects and resolve collisions."""
        if self.is_paused():
            return
        player = self.find_player()

        self.spawn_timer += delta_time
        if self.spawn_timer >= self.spawn_interval:
            if player is not None:
                self.spawn_random_enemy(player)
            self.spawn_timer = 0.0

        self.beam_timer += delta_time
        if self.beam_timer >= self.beam_interval:
            if player is not None:
                self.spawn_beam(player)
            self.beam_timer = 0.0

        self.pentagon_timer += delta_time
        if self.pentagon_timer >= self.pentagon_interval:
            if player is not None:
                self.spawn_pentagon_group(player)
            self.pentagon_timer = 0.0

        for obj in list(self.game_objects):
            if obj.active:
                obj.update(delta_time)

        self.check_collisions()
        self.cleanup_inactive_objects()

    def draw(self, surface: pygame.Surface) -> None:
        for obj in self.game_objects:
            if obj.active:
                obj.draw(surface)

    def cleanup_inactive_objects(self) -> None:
        for obj in self.game_objects:
            if not obj.active:
                self.collision_manager.remove_object(obj)
        self.game_objects = [obj for obj in self.game_objects if obj.active]

    def check_collisions(self) -> None:
        self.collision_manager.check_collisions()

    # --- collision responses ----------------------------------------------
    def handle_collision(self, a: GameObject, b: GameObject) -> None:
        """Apply the effect of ``a`` and ``b`` touching, whatever their order."""
        kinds = {a.object_type, b.object_type}

        def pick(object_type: ObjectType) -> GameObject:
            return a if a.object_type is object_type else b

        if kinds == {ObjectType.PROJECTILE, ObjectType.TRIANGLE}:
            self._projectile_hits_enemy(pick(ObjectType.PROJECTILE), pick(ObjectType.TRIANGLE))
        elif kinds == {ObjectType.PROJECTILE, ObjectType.PENTAGON}:
            self._projectile_hits_enemy(pick(ObjectType.PROJECTILE), pick(ObjectType.PENTAGON))
        elif kinds in ({ObjectType.TRIANGLE, ObjectType.PLAYER}, {ObjectType.PENTAGON, ObjectType.PLAYER}):
            enemy = a if a.object_type is not ObjectType.PLAYER else b
            self._enemy_hits_player(enemy, pick(ObjectType.PLAYER))  # type: ignore[arg-type]
        elif kinds == {ObjectType.BEAM, ObjectType.PLAYER}:
            beam = pick(ObjectType.BEAM)
            player = pick(ObjectType.PLAYER)
            if beam.active and player.active and not player.is_dying:  # type: ignore[attr-defined]
                if beam.state in (BeamState.ACTIVE, BeamState.EXPANDING):  # type: ignore[attr-defined]
                    player.change_health_by(-2)  # type: ignore[attr-defined]
        # Enemies pass through each other and the player ignores its own shots.

    def _projectile_hits_enemy(self, projectile: GameObject, enemy: GameObject) -> None:
        if not (projectile.active and enemy.active):
            return
        enemy.change_health_by(-PROJECTILE_DAMAGE)  # type: ignore[attr-defined]
        enemy.last_hit_time = self._clock()  # type: ignore[attr-defined]
        if enemy.object_type is ObjectType.TRIANGLE:
            enemy.set_color(255, 255, 255, 255)
        projectile.active = False
        if enemy.health <= 0:  # type: ignore[attr-defined]
            player = self.find_player()
            if player is not None:
                points = int(enemy.score)  # type: ignore[attr-defined]
                player.add_score(points)
                log.debug("%s destroyed! Add %d points to player.", enemy.object_type.value, points)
            enemy.active = False

    def _enemy_hits_player(self, enemy: GameObject, player: Player) -> None:
        if not (enemy.active and player.active) or player.is_dying:
            return
        player.change_health_by(-1)
        direction = (player.position - enemy.position).normalize()
        player.apply_knockback(direction * KNOCKBACK_FACTOR)
        log.debug("Enemy hit player! Player health: %d", player.health)