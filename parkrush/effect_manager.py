"""Turns collision results into score changes, sounds and level actions."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional, Protocol

from parkrush.collision_result import CollisionResult, CollisionType, EffectType
from parkrush.exceptions import EffectProcessingError


class LevelControl(Protocol):
    def reset_level(self) -> None: ...

    def load_next_level(self) -> None: ...


class ScoreKeeper(Protocol):
    def add_score(self, points: int) -> None: ...


class SoundPlayer(Protocol):
    def stop_all_background_sounds(self) -> None: ...

    def play_sound(self, name: str) -> None: ...


class EffectManager:
    """Applies collision results and runs the level actions they ask for."""

    def __init__(
        self,
        level_manager: Optional[LevelControl] = None,
        score_time_manager: Optional[ScoreKeeper] = None,
        sound: Optional[SoundPlayer] = None,
    ) -> None:
        self._level_manager = level_manager
        self.score_time_manager = score_time_manager
        self.sound = sound
        self.needs_player_reset = False
        self.needs_next_level = False

    @property
    def level_manager(self) -> Optional[LevelControl]:
        return self._level_manager

    @level_manager.setter
    def level_manager(self, manager: LevelControl) -> None:
        if manager is None:
            raise EffectProcessingError("Cannot set null LevelManager")
        self._level_manager = manager

    def process_effects(self, results: Iterable[CollisionResult | None]) -> None:
        """Apply every result in order."""
        if self._level_manager is None:
            raise EffectProcessingError("No LevelManager set for effect processing")
        for result in results:
            if result is None:
                raise EffectProcessingError("Null collision result found in effect processing")
            self.apply_collision_result(result)

    def process_delayed_actions(self) -> None:
        """Run a pending player reset, then a pending level change."""
        if self._level_manager is None:
            raise EffectProcessingError("No LevelManager available for delayed actions")
        if self.needs_player_reset:
            self._level_manager.reset_level()
            self.needs_player_reset = False
        if self.needs_next_level:
            self._level_manager.load_next_level()
            self.needs_next_level = False

    def check_player_reset_required(self) -> None:
        """Raise if a player reset is still waiting to be processed."""
        if self.needs_player_reset:
            raise EffectProcessingError("Player reset is required but not yet processed")

    def apply_collision_result(self, result: CollisionResult) -> None:
        """Record the score, play crash sounds and flag pending actions."""
        if self.score_time_manager is not None and result.score_change != 0:
            self.score_time_manager.add_score(result.score_change)
            if result.effect_type is EffectType.CRASH and self.sound is not None:
                self.sound.stop_all_background_sounds()
                self.sound.play_sound("crash")

        if result.should_restart:
            self.needs_player_reset = True
        if result.collision_type is CollisionType.GOAL_REACHED:
            self.needs_next_level = True