"""Command-line entry point: the window, the event loop and text rendering."""

from __future__ import annotations

import argparse
import functools
import logging
import os
from pathlib import Path
from typing import Any, MutableMapping, Optional, Sequence

import pygame

from .game_manager import GameManager, GameState
from .geometry import Vector2D
from .player import Player
from .settings import SCREEN_FPS, WINDOW_HEIGHT, WINDOW_WIDTH, InputState
from .window import GameWindow

log = logging.getLogger(__name__)

TITLE = "SDL2 Player Movement"
SHRINK_SPEED = 0.25
PLAYER_SPEED = 500.0
PLAYER_RADIUS = 25
TASKBAR_HEIGHT = 50
PAUSE_FONT_SIZE = 12
WHITE = (255, 255, 255, 255)
TEXTURE_FILES = {
    "player": "player.png",
    "triangle": "triangle.png",
    "projectile": "projectile.png",
    "pentagon": "pentagon.png",
}

KEY_BINDINGS = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_w: "up",
    pygame.K_s: "down",
    pygame.K_a: "left",
    pygame.K_d: "right",
    pygame.K_j: "j",
}

MOUSE_BINDINGS = {1: "left", 2: "middle", 3: "right"}


def check_movement(event: Any, key_state: MutableMapping[str, bool]) -> None:
    """Record a press or release of a movement key in ``key_state``."""
    if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
        return
    name = KEY_BINDINGS.get(getattr(event, "key", None))
    if name is not None:
        key_state[name] = event.type == pygame.KEYDOWN


def check_mouse_movement(event: Any, mouse_state: InputState) -> None:
    """Record mouse motion and button presses in ``mouse_state``."""
    if event.type == pygame.MOUSEMOTION:
        mouse_state.mouse_x, mouse_state.mouse_y = event.pos
    elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
        name = MOUSE_BINDINGS.get(event.button)
        if name is not None:
            mouse_state.mouse[name] = event.type == pygame.MOUSEBUTTONDOWN


@functools.lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    return pygame.font.Font(None, size)


def render_text(
    surface: pygame.Surface,
    text: str,
    x: int,
    y: int,
    font_size: int = 16,
    color: Sequence[int] = WHITE,
) -> pygame.Rect:
    """Draw ``text`` with its top-left corner at ``(x, y)``; return the area drawn."""
    if not pygame.font.get_init():
        pygame.font.init()
        _font.cache_clear()
    image = _font(font_size).render(text, True, tuple(color))
    return surface.blit(image, (x, y))


def _resolution() -> tuple[int, int]:
    """Usable desktop size, leaving room for a taskbar."""
    try:
        sizes = pygame.display.get_desktop_sizes()
    except pygame.error as exc:
        log.warning("Could not query the display: %s", exc)
        sizes = []
    if not sizes:
        return WINDOW_WIDTH, WINDOW_HEIGHT
    width, height = sizes[0]
    return width, height - TASKBAR_HEIGHT


def _load_textures(assets: Path) -> dict[str, pygame.Surface]:
    textures = {}
    for name, filename in TEXTURE_FILES.items():
        path = assets / filename
        if not path.is_file():
            continue
        try:
            textures[name] = pygame.image.load(str(path)).convert_alpha()
        except pygame.error as exc:
            log.warning("Failed to load texture %s: %s", path, exc)
    return textures


def _native_window() -> Optional[Any]:
    """A handle that can move the display window, where pygame offers one."""
    try:
        from pygame._sdl2.video import Window
    except ImportError:
        return None
    try:
        return Window.from_display_module()
    except (pygame.error, AttributeError):
        return None


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="shrinkarena",
        description="Shoot the edges of a shrinking window to keep your arena alive.",
    )
    parser.add_argument(
        "--assets", type=Path, default=Path("assets"), help="directory holding the PNG textures"
    )
    return parser.parse_args(argv)


def _draw_pause_overlay(surface: pygame.Surface) -> None:
    shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    shade.fill((0, 0, 0, 128))
    surface.blit(shade, (0, 0))
    render_text(surface, "PAUSED", 20, 20, PAUSE_FONT_SIZE, WHITE)
    render_text(surface, "Press R to restart", 20, 40, PAUSE_FONT_SIZE, WHITE)
    render_text(surface, "Press P to ragequit", 20, 60, PAUSE_FONT_SIZE, WHITE)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until the player quits."""
    args = _parse_args(argv)
    pygame.display.init()
    pygame.font.init()
    try:
        screen_w, screen_h = _resolution()
        x = int((screen_w - WINDOW_WIDTH) / 2)
        y = int((screen_h - WINDOW_HEIGHT) / 2)
        window = GameWindow(
            x=x,
            y=y,
            width=WINDOW_WIDTH,
            height=WINDOW_HEIGHT,
            shrink_speed=SHRINK_SPEED,
            title=TITLE,
            screen_width=screen_w,
            screen_height=screen_h,
        )

        os.environ["SDL_VIDEO_WINDOW_POS"] = f"{window.x},{window.y}"
        surface = pygame.display.set_mode((window.width, window.height))
        pygame.display.set_caption(TITLE)
        native = _native_window()
        shown_size = (window.width, window.height)
        shown_pos = (window.x, window.y)

        input_state = InputState()
        textures = _load_textures(args.assets)
        manager = GameManager(window, input_state=input_state, textures=textures)
        bounds = window.bounds
        player: Optional[Player] = Player(
            Vector2D(bounds.x + bounds.w // 2, bounds.y + bounds.h // 2),
            PLAYER_RADIUS,
            PLAYER_SPEED,
            window,
            game_manager=manager,
            input_state=input_state,
            texture=textures.get("player"),
        )
        manager.add_object(player)

        clock = pygame.time.Clock()
        last_tick = pygame.time.get_ticks()
        running = True
        while running:
            now = pygame.time.get_ticks()
            delta_time = (now - last_tick) / 1000.0
            last_tick = now

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    if manager.game_state is GameState.RUNNING:
                        manager.pause_game()
                    elif manager.game_state is GameState.PAUSED:
                        manager.resume_game()
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                    if manager.game_state in (GameState.PAUSED, GameState.GAME_OVER):
                        manager.restart_game()
                        player = manager.find_player()
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_p:
                    running = False
                else:
                    check_movement(event, input_state.keys)
                    check_mouse_movement(event, input_state)
                    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        # Clicks arrive in window space; objects live in screen space.
                        manager.handle_click(
                            event.pos[0] + window.x, event.pos[1] + window.y, player
                        )

            if not manager.is_paused():
                window.update(delta_time)
            manager.update(delta_time)

            if (window.width, window.height) != shown_size:
                shown_size = (window.width, window.height)
                surface = pygame.display.set_mode(shown_size)
            if (window.x, window.y) != shown_pos:
                shown_pos = (window.x, window.y)
                if native is not None:
                    try:
                        native.position = shown_pos
                    except pygame.error:
                        native = None

            surface.fill((0, 0, 0))
            manager.draw(surface)
            if manager.is_paused():
                _draw_pause_overlay(surface)
            pygame.display.flip()
            clock.tick(SCREEN_FPS)
    finally:
        pygame.display.quit()
    return 0