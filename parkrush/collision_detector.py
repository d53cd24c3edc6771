"""Pairwise collision detection between game objects."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations

from parkrush.collision_result import CollisionResult, CollisionType, EffectType
from parkrush.exceptions import CollisionDetectionError
from parkrush.game_object import GameObject, Rect

_VEHICLE_MARGIN = 8.0


class CollisionDetector:
    """Finds colliding objects and gathers the results of their collisions."""

    def detect_collisions(self, objects: Sequence[GameObject | None]) -> list[CollisionResult]:
        """Check every pair of objects and return the results that are real collisions."""
        if not objects:
            raise CollisionDetectionError("Empty objects list provided for collision detection")

        results: list[CollisionResult] = []
        for (i, obj1), (j, obj2) in combinations(enumerate(objects), 2):
            if obj1 is None or obj2 is None:
                raise CollisionDetectionError(
                    f"Null object found in collision detection at indices {i} and {j}"
                )
            if not obj1.is_colliding(obj2):
                continue
            for first, second in ((obj1, obj2), (obj2, obj1)):
                result = first.accept_collision(second)
                if result is None:
                    raise CollisionDetectionError(
                        "Failed to get collision result from object with another object"
                    )
                if result.has_collision():
                    results.append(result)
        return results

    def are_objects_colliding(self, obj1: GameObject | None, obj2: GameObject | None) -> bool:
        """Overlap test that gives vehicles a small safety margin."""
        if obj1 is None or obj2 is None:
            raise CollisionDetectionError("Cannot check collision with null objects")

        bounds1 = obj1.bounds()
        bounds2 = obj2.bounds()

        if (obj1.is_vehicle and obj2.is_parking_spot) or (obj1.is_parking_spot and obj2.is_vehicle):
            return bounds1.expanded(_VEHICLE_MARGIN).intersects(bounds2)

        if obj1.is_vehicle or obj2.is_vehicle:
            return bounds1.expanded(_VEHICLE_MARGIN).intersects(bounds2.expanded(_VEHICLE_MARGIN))

        return bounds1.intersects(bounds2)

    def check_player_boundary_collision(
        self, player: GameObject | None, boundaries: Iterable[Rect]
    ) -> CollisionResult:
        """Result of the player touching any road boundary."""
        if player is None:
            return CollisionResult.no_collision()

        player_bounds = player.bounds()
        if any(player_bounds.intersects(boundary) for boundary in boundaries):
            return CollisionResult(
                CollisionType.TRAFFIC_VIOLATION,
                -50,
                0,
                True,
                EffectType.NONE,
                "Hit boundary - returning to start",
            )
        return CollisionResult.no_collision()