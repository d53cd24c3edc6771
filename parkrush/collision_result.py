"""Outcome of a collision between two game objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class CollisionType(Enum):
    NONE = auto()
    MINOR_DAMAGE = auto()
    MODERATE_DAMAGE = auto()
    HEAVY_DAMAGE = auto()
    FATAL_CRASH = auto()
    BONUS_COLLECTED = auto()
    GOAL_REACHED = auto()
    TRAFFIC_VIOLATION = auto()
    EVASION_SUCCESS = auto()


class EffectType(Enum):
    NONE = auto()
    SPARKS = auto()
    CRASH = auto()
    EXPLOSION = auto()
    COLLECT_SOUND = auto()
    HONK = auto()


_TYPE_DEFAULTS = {
    CollisionType.FATAL_CRASH: (EffectType.EXPLOSION, "Fatal collision!"),
    CollisionType.HEAVY_DAMAGE: (EffectType.CRASH, "Heavy damage sustained"),
    CollisionType.MODERATE_DAMAGE: (EffectType.SPARKS, "Moderate damage"),
    CollisionType.MINOR_DAMAGE: (EffectType.SPARKS, "Minor damage"),
    CollisionType.BONUS_COLLECTED: (EffectType.COLLECT_SOUND, "Bonus collected!"),
    CollisionType.TRAFFIC_VIOLATION: (EffectType.HONK, "Traffic violation"),
}


@dataclass(frozen=True)
class CollisionResult:
    """What a collision does to score, health and game flow."""

    collision_type: CollisionType = CollisionType.NONE
    score_change: int = 0
    damage: int = 0
    should_restart: bool = False
    effect_type: EffectType = EffectType.NONE
    message: str = "No collision"

    @classmethod
    def no_collision(cls) -> CollisionResult:
        return cls()

    @classmethod
    def from_type(cls, collision_type: CollisionType, score_change: int, damage: int) -> CollisionResult:
        """Build a result whose effect and message follow from its type."""
        effect, message = _TYPE_DEFAULTS.get(collision_type, (EffectType.NONE, "Collision occurred"))
        return cls(
            collision_type,
            score_change,
            damage,
            collision_type is CollisionType.FATAL_CRASH,
            effect,
            message,
        )

    @classmethod
    def car_vs_parked_car(cls) -> CollisionResult:
        return cls(CollisionType.HEAVY_DAMAGE, -100, 50, True, EffectType.CRASH,
                   "Car hit parked vehicle - heavy damage!")

    @classmethod
    def motorcycle_vs_parked_car(cls) -> CollisionResult:
        return cls(CollisionType.HEAVY_DAMAGE, -150, 75, False, EffectType.CRASH,
                   "Motorcycle crashed into parked car - very heavy damage!")

    @classmethod
    def truck_vs_parked_car(cls) -> CollisionResult:
        return cls(CollisionType.FATAL_CRASH, -200, 100, True, EffectType.EXPLOSION,
                   "Truck destroyed parked car - complete destruction!")

    @classmethod
    def vehicle_vs_sidewalk(cls, is_heavy_vehicle: bool) -> CollisionResult:
        if is_heavy_vehicle:
            return cls(CollisionType.TRAFFIC_VIOLATION, -50, 0, False, EffectType.HONK,
                       "Heavy vehicle on sidewalk - serious violation!")
        return cls(CollisionType.TRAFFIC_VIOLATION, -25, 0, False, EffectType.HONK,
                   "Driving on sidewalk - traffic violation!")

    @classmethod
    def motorcycle_evades_cone(cls) -> CollisionResult:
        return cls(CollisionType.EVASION_SUCCESS, 5, 0, False, EffectType.COLLECT_SOUND,
                   "Motorcycle successfully evaded traffic cone!")

    @classmethod
    def vehicle_vs_traffic_cone(cls, is_motorcycle_evasion: bool) -> CollisionResult:
        if is_motorcycle_evasion:
            return cls.motorcycle_evades_cone()
        return cls(CollisionType.MINOR_DAMAGE, -10, 10, False, EffectType.SPARKS, "Hit traffic cone")

    @classmethod
    def fatal_collision(cls) -> CollisionResult:
        return cls(CollisionType.FATAL_CRASH, -200, 100, True, EffectType.EXPLOSION,
                   "Fatal collision with pedestrian - level restart required!")

    @classmethod
    def power_up_collection(cls, bonus_type: str) -> CollisionResult:
        return cls(CollisionType.BONUS_COLLECTED, 100, 0, False, EffectType.COLLECT_SOUND,
                   f"Collected {bonus_type} power-up!")

    def has_collision(self) -> bool:
        return self.collision_type is not CollisionType.NONE

    def type_string(self) -> str:
        return self.collision_type.name

    def debug_info(self) -> str:
        restart = "YES" if self.should_restart else "NO"
        return (
            f"CollisionResult {{ Type: {self.type_string()}, Score: {self.score_change}, "
            f"Damage: {self.damage}, Restart: {restart}, Message: '{self.message}' }}"
        )