"""Pairwise collision detection between registered game objects."""

from __future__ import annotations

from typing import Any, Optional

from .game_object import GameObject


class CollisionManager:
    """Tracks objects and reports each colliding active pair to a game manager.

    The game manager, if set, must provide ``handle_collision(a, b)``.
    """

    def __init__(self, game_manager: Optional[Any] = None) -> None:
        self.game_manager = game_manager
        self._objects: list[GameObject] = []

    @property
    def objects(self) -> tuple[GameObject, ...]:
        return tuple(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, obj: object) -> bool:
        return any(existing is obj for existing in self._objects)

    def add_object(self, obj: GameObject) -> None:
        self._objects.append(obj)

    def remove_object(self, obj: GameObject) -> None:
        """Forget the first registration of ``obj``; unknown objects are ignored."""
        for index, existing in enumerate(self._objects):
            if existing is obj:
                del self._objects[index]
                return

    def clear(self) -> None:
        self._objects.clear()

    def check_collisions(self) -> None:
        """Test every pair of active objects once, in registration order."""
        snapshot = list(self._objects)
        for index, first in enumerate(snapshot):
            if not first.active:
                continue
            for second in snapshot[index + 1:]:
                if not second.active:
                    continue
                if first.check_collision(second):
                    self.handle_collision(first, second)

    def handle_collision(self, obj1: GameObject, obj2: GameObject) -> None:
        if self.game_manager is not None:
            self.game_manager.handle_collision(obj1, obj2)