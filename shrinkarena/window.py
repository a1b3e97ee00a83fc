"""The play-field window: its geometry, natural shrinking and animated resizes."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .geometry import Rect


def _clamp01(progress: float) -> float:
    return min(1.0, max(0.0, progress))


def ease_out_quad(progress: float) -> float:
    """f(t) = 1 - (1 - t)^2, with t clamped to [0, 1]."""
    return 1.0 - (1.0 - _clamp01(progress)) ** 2


def ease_out_cubic(progress: float) -> float:
    """f(t) = 1 - (1 - t)^3, with t clamped to [0, 1]."""
    return 1.0 - (1.0 - _clamp01(progress)) ** 3


def ease_out_quart(progress: float) -> float:
    """f(t) = 1 - (1 - t)^4, with t clamped to [0, 1]."""
    return 1.0 - (1.0 - _clamp01(progress)) ** 4


def ease_out_expo(progress: float) -> float:
    """f(t) = 1 - 2^(-10 t), with t clamped to [0, 1]."""
    return 1.0 - 2.0 ** (-10.0 * _clamp01(progress))


class CollisionEdge(enum.Enum):
    TOP = 0
    BOTTOM = 1
    LEFT = 2
    RIGHT = 3


@dataclass
class ResizeRequest:
    """A pending change of each window edge; positive expands, negative shrinks.

    A request with zero duration is applied at once; otherwise it is eased
    out over ``duration`` seconds starting at ``start_time``.
    """

    top: int
    bottom: int
    left: int
    right: int
    duration: float
    start_time: float
    elapsed: float = 0.0
    initial_speed: int = 0
    active: bool = True
    last_progress: float = 0.0


def _signed(target: int, amount: float) -> float:
    if target > 0:
        return amount
    if target < 0:
        return -amount
    return 0.0


class GameWindow:
    """Geometry of a window on a screen of fixed size.

    ``clock`` returns the current time in seconds; ``on_change`` is called
    with the window whenever its title, position or size changes, so that a
    display backend can follow it.
    """

    MIN_SIZE = 150

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        shrink_speed: float,
        title: str,
        screen_width: int,
        screen_height: int,
        *,
        is_on_top: bool = False,
        is_borderless: bool = False,
        is_transparent: bool = False,
        clock: Callable[[], float] = time.monotonic,
        on_change: Optional[Callable[[GameWindow], None]] = None,
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.shrink_speed = shrink_speed
        self.title = title
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.is_on_top = is_on_top
        self.is_transparent = is_transparent
        self.is_borderless = is_borderless or is_transparent
        self.collision_edge: Optional[CollisionEdge] = None
        # top, bottom, left, right
        self.screen_edges = [False, False, False, False]
        self._clock = clock
        self._on_change = on_change
        self._requests: list[ResizeRequest] = []

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self)

    @property
    def resize_requests(self) -> tuple[ResizeRequest, ...]:
        """The resize requests still waiting to complete."""
        return tuple(self._requests)

    @property
    def bounds(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def set_title(self, title: str) -> None:
        self.title = title
        self._notify()

    def set_pos(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self._notify()

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._notify()

    def check_screen_edges_collision(self) -> None:
        """Record which screen edges the window touches and keep it on screen."""
        self.screen_edges = [False, False, False, False]
        if self.y <= 0:
            self.screen_edges[0] = True
            self.y = 0
        if self.y + self.height >= self.screen_height:
            self.screen_edges[1] = True
            self.y = self.screen_height - self.height
        if self.x <= 0:
            self.screen_edges[2] = True
            self.x = 0
        if self.x + self.width >= self.screen_width:
            self.screen_edges[3] = True
            self.x = self.screen_width - self.width
        self.set_pos(self.x, self.y)

    def create_resize_request(
        self,
        top: int,
        bottom: int,
        left: int,
        right: int,
        initial_speed: int,
        duration: float,
    ) -> ResizeRequest:
        """Queue a resize of each edge by the given amounts."""
        request = ResizeRequest(
            top=top,
            bottom=bottom,
            left=left,
            right=right,
            duration=duration,
            start_time=self._clock(),
            initial_speed=initial_speed,
        )
        self._requests.append(request)
        return request

    def clear_resize_requests(self) -> None:
        self._requests.clear()

    def apply_resize_request(self, request: ResizeRequest, delta_time: float) -> None:
        """Advance one request by a frame; marks it inactive when finished."""
        if self.x - request.left < 0:
            request.left = self.x
        if self.y - request.top < 0:
            request.top = self.y
        if self.x + self.width + request.right > self.screen_width:
            request.right = self.screen_width - (self.x + self.width)
        if self.y + self.height + request.bottom > self.screen_height:
            request.bottom = self.screen_height - (self.y + self.height)

        if request.duration <= 0.0:
            new_x = max(self.x - request.left, 0)
            new_y = max(self.y - request.top, 0)
            new_width = max(self.width + request.left + request.right, self.MIN_SIZE)
            new_height = max(self.height + request.top + request.bottom, self.MIN_SIZE)
            self.set_pos(new_x, new_y)
            self.set_size(new_width, new_height)
            request.active = False
            return

        request.elapsed = self._clock() - request.start_time
        progress = min(request.elapsed / request.duration, 1.0)
        if progress >= 1.0:
            # Stopping early may undershoot, which is preferable to overshooting.
            request.active = False
            return

        easing_step = ease_out_quad(progress) - ease_out_quad(request.last_progress)
        speed_delta = request.initial_speed * delta_time * (1.0 - progress)

        left_delta = max(0, int(request.left * easing_step + _signed(request.left, speed_delta)))
        right_delta = int(request.right * easing_step + _signed(request.right, speed_delta))
        top_delta = max(0, int(request.top * easing_step + _signed(request.top, speed_delta)))
        bottom_delta = int(request.bottom * easing_step + _signed(request.bottom, speed_delta))

        new_x = self.x - left_delta
        new_y = self.y - top_delta
        new_width = min(max(self.width + left_delta + right_delta, self.MIN_SIZE), self.screen_width)
        new_height = min(max(self.height + top_delta + bottom_delta, self.MIN_SIZE), self.screen_height)
        self.set_pos(new_x, new_y)
        self.set_size(new_width, new_height)
        request.last_progress = progress

    def natural_shrinking(self, delta_time: float) -> None:
        """Queue an immediate shrink of every edge towards the window centre."""
        center_x = self.x + self.width // 2
        center_y = self.y + self.height // 2
        effective_speed = self.shrink_speed * delta_time

        f_top = (center_y - self.y) * effective_speed
        f_bottom = (self.y + self.height - center_y) * effective_speed
        f_left = (center_x - self.x) * effective_speed
        f_right = (self.x + self.width - center_x) * effective_speed

        top, bottom, left, right = int(f_top), int(f_bottom), int(f_left), int(f_right)

        if self.height > self.MIN_SIZE:
            if top == 0 and f_top > 0.0:
                top = 1
            if bottom == 0 and f_bottom > 0.0:
                bottom = 1
        else:
            top = bottom = 0

        if self.width > self.MIN_SIZE:
            if left == 0 and f_left > 0.0:
                left = 1
            if right == 0 and f_right > 0.0:
                right = 1
        else:
            left = right = 0

        if top > 0 or bottom > 0 or left > 0 or right > 0:
            self.create_resize_request(-top, -bottom, -left, -right, 0, 0.0)

    def update(self, delta_time: float) -> None:
        """Shrink naturally, then advance every pending resize request."""
        self.natural_shrinking(delta_time)
        remaining = []
        for request in self._requests:
            if request.active:
                self.apply_resize_request(request, delta_time)
            if request.active:
                remaining.append(request)
        self._requests = remaining