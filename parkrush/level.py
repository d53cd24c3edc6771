"""A level: its objects, boundaries and where the player starts."""

from __future__ import annotations

from dataclasses import dataclass

from parkrush.game_object import GameObject, Rect


@dataclass
class PlayerSpawn:
    position: tuple[float, float] = (0.0, 0.0)
    angle: float = 90.0


class Level:
    """Holds the objects and road boundaries of one level."""

    def __init__(self, name: str, background_texture: str, player_spawn: PlayerSpawn) -> None:
        self.name = name
        self.background_texture = background_texture
        self.player_spawn = player_spawn
        self._objects: list[GameObject] = []
        self._boundaries: list[Rect] = []

    def add_object(self, obj: GameObject | None) -> None:
        """Add an object; ``None`` is ignored."""
        if obj is not None:
            self._objects.append(obj)

    def all_objects(self) -> list[GameObject]:
        """A new list of the level's objects in insertion order."""
        return list(self._objects)

    def clear_objects(self) -> None:
        self._objects.clear()

    def add_boundary(self, boundary: Rect) -> None:
        self._boundaries.append(boundary)

    @property
    def boundaries(self) -> tuple[Rect, ...]:
        return tuple(self._boundaries)