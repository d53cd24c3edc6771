"""Game logic for a top-down parking game: collisions, effects, game state, levels and a menu button."""

__version__ = "0.1.0"