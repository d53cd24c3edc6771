"""Tracks whether the game has been won."""

from __future__ import annotations

from collections.abc import Iterable

from parkrush.collision_result import CollisionResult
from parkrush.exceptions import GameStateError


class GameStateManager:
    """Holds the win flag and signals victory with a GameStateError."""

    def __init__(self) -> None:
        self.game_won = False

    def process_collision_results(self, results: Iterable[CollisionResult]) -> None:
        """Collision results do not change the game state; level changes handle goals."""

    def reset_game_state(self) -> None:
        self.game_won = False

    def check_game_won_condition(self) -> None:
        """Raise a ``GameWon`` state error once the game is won."""
        if self.game_won:
            raise GameStateError("GameWon", "Player has achieved victory condition")