"""Axis-aligned rectangles and the base game object."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass

from parkrush.collision_result import CollisionResult

Point = tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    def _extent(self) -> tuple[float, float, float, float]:
        right = self.left + self.width
        bottom = self.top + self.height
        return (min(self.left, right), min(self.top, bottom),
                max(self.left, right), max(self.top, bottom))

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles overlap with a non-empty area."""
        ax0, ay0, ax1, ay1 = self._extent()
        bx0, by0, bx1, by1 = other._extent()
        return max(ax0, bx0) < min(ax1, bx1) and max(ay0, by0) < min(ay1, by1)

    def contains(self, point: Point) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        x, y = point
        x0, y0, x1, y1 = self._extent()
        return x0 <= x < x1 and y0 <= y < y1

    def expanded(self, amount: float) -> Rect:
        """Return a rectangle grown by ``amount`` on every side."""
        return Rect(self.left - amount, self.top - amount,
                    self.width + 2 * amount, self.height + 2 * amount)


class GameObject:
    """A sized, positioned object that takes part in collisions.

    The object's position is its centre; rotation is in degrees.
    Subclasses override ``collide_with`` to react to particular kinds of
    objects and set the ``is_*`` flags that describe what they are.
    """

    is_vehicle = False
    is_parking_spot = False
    is_player_vehicle = False

    _ids = itertools.count(1)

    def __init__(self, size: Point, texture_id: str = "", position: Point = (0.0, 0.0),
                 rotation: float = 0.0) -> None:
        self.size = size
        self.texture_id = texture_id
        self.position = position
        self.rotation = rotation
        self.scale = 1.0
        self.id = next(GameObject._ids)

    def bounds(self) -> Rect:
        """Axis-aligned bounding box of the scaled and rotated object."""
        half_w = self.size[0] * self.scale / 2
        half_h = self.size[1] * self.scale / 2
        angle = math.radians(self.rotation)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        cx, cy = self.position
        xs, ys = [], []
        for dx, dy in ((-half_w, -half_h), (half_w, -half_h), (half_w, half_h), (-half_w, half_h)):
            xs.append(cx + dx * cos_a - dy * sin_a)
            ys.append(cy + dx * sin_a + dy * cos_a)
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def is_colliding(self, other: GameObject) -> bool:
        return self.bounds().intersects(other.bounds())

    def accept_collision(self, other: GameObject) -> CollisionResult:
        """Let ``other`` decide what hitting this object means."""
        return other.collide_with(self)

    def collide_with(self, other: GameObject) -> CollisionResult:
        """Result of this object hitting ``other``; none by default."""
        return CollisionResult.no_collision()

    def set_scale(self, scale: float) -> None:
        self.scale = scale

    def update(self, delta_time: float) -> None:
        """Advance the object's state; static objects do nothing."""