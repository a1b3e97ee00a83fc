import pygame
import pytest

from shrinkarena.app import (
    check_mouse_movement,
    check_movement,
    main,
    render_text,
)
from shrinkarena.settings import InputState, default_key_state


def _key(event_type, key):
    return pygame.event.Event(event_type, key=key)


@pytest.mark.parametrize(
    "key, name",
    [
        (pygame.K_UP, "up"),
        (pygame.K_DOWN, "down"),
        (pygame.K_LEFT, "left"),
        (pygame.K_RIGHT, "right"),
        (pygame.K_w, "up"),
        (pygame.K_s, "down"),
        (pygame.K_a, "left"),
        (pygame.K_d, "right"),
        (pygame.K_j, "j"),
    ],
)
def test_check_movement_press_and_release(key, name):
    state = default_key_state()
    check_movement(_key(pygame.KEYDOWN, key), state)
    assert state[name] is True
    assert sum(state.values()) == 1
    check_movement(_key(pygame.KEYUP, key), state)
    assert state == default_key_state()


def test_check_movement_ignores_unbound_keys():
    state = default_key_state()
    check_movement(_key(pygame.KEYDOWN, pygame.K_q), state)
    assert state == default_key_state()


def test_check_movement_ignores_other_events():
    state = default_key_state()
    check_movement(pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 2)), state)
    assert state == default_key_state()


def test_check_mouse_movement_tracks_position():
    state = InputState()
    check_mouse_movement(pygame.event.Event(pygame.MOUSEMOTION, pos=(37, 91)), state)
    assert (state.mouse_x, state.mouse_y) == (37, 91)


@pytest.mark.parametrize("button, name", [(1, "left"), (2, "middle"), (3, "right")])
def test_check_mouse_movement_buttons(button, name):
    state = InputState()
    check_mouse_movement(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=(0, 0)), state
    )
    assert state.mouse[name] is True
    check_mouse_movement(
        pygame.event.Event(pygame.MOUSEBUTTONUP, button=button, pos=(0, 0)), state
    )
    assert not any(state.mouse.values())


def test_render_text_draws_at_position():
    pygame.font.init()
    surface = pygame.Surface((200, 60))
    surface.fill((0, 0, 0))
    area = render_text(surface, "PAUSED", 20, 20, 12, (255, 255, 255, 255))
    assert area.topleft == (20, 20)
    assert area.width > 0 and area.height > 0
    lit = [
        surface.get_at((px, py))[:3]
        for px in range(area.left, area.right)
        for py in range(area.top, area.bottom)
    ]
    assert any(pixel != (0, 0, 0) for pixel in lit)


def test_render_text_leaves_rest_untouched():
    pygame.font.init()
    surface = pygame.Surface((200, 60))
    surface.fill((0, 0, 0))
    area = render_text(surface, "Score: 0", 100, 30, 16, (255, 255, 255, 255))
    assert area.left >= 100
    assert surface.get_at((0, 0))[:3] == (0, 0, 0)


def _run_main_with(monkeypatch, events):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    batches = iter([events])
    monkeypatch.setattr(pygame.event, "get", lambda *a, **k: next(batches, []))
    return main(["--assets", "missing-assets-dir"])


def test_main_quits_on_quit_event(monkeypatch):
    assert _run_main_with(monkeypatch, [pygame.event.Event(pygame.QUIT)]) == 0


def test_main_quits_on_ragequit_key(monkeypatch):
    events = [_key(pygame.KEYDOWN, pygame.K_p)]
    assert _run_main_with(monkeypatch, events) == 0
    assert not pygame.display.get_init()