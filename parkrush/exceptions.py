"""Exception hierarchy used throughout the game."""


class GameError(Exception):
    """Base error carrying a message and an optional context label."""

    def __init__(self, message: str, context: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        return self.message

    def full_message(self) -> str:
        """Return the message prefixed by its context, if any."""
        if not self.context:
            return self.message
        return f"{self.context}: {self.message}"


class ResourceNotFoundError(GameError):
    """A texture, sound or font could not be found."""

    def __init__(self, resource_name: str, path: str = "") -> None:
        super().__init__(f"Resource not found: {resource_name}", path or "ResourceManager")
        self.resource_name = resource_name

    def full_message(self) -> str:
        return "Failed to load resource - " + super().full_message()


class InvalidLevelError(GameError):
    """Level data is missing or malformed."""

    def __init__(self, level_name: str, reason: str = "") -> None:
        super().__init__(reason or "Invalid or corrupted level data", "LevelLoader")
        self.level_name = level_name

    def full_message(self) -> str:
        return f"Level '{self.level_name}' - " + super().full_message()


class CollisionDetectionError(GameError):
    """Collision detection was given unusable input."""

    def full_message(self) -> str:
        return "Collision Detection Error - " + super().full_message()


class GameStateError(GameError):
    """Signals a game state transition such as a win or a restart."""

    def __init__(self, state_name: str, message: str, context: str = "") -> None:
        super().__init__(message, context)
        self.state_name = state_name

    def full_message(self) -> str:
        return f"Game State '{self.state_name}' - " + super().full_message()


class EffectProcessingError(GameError):
    """Collision effects could not be applied."""

    def full_message(self) -> str:
        return "Effect Processing Error - " + super().full_message()


class ManagerInitializationError(GameError):
    """A manager was missing or failed to start."""

    def __init__(self, manager_name: str, reason: str = "") -> None:
        super().__init__(reason or "Failed to initialize manager", "GameManager")
        self.manager_name = manager_name

    def full_message(self) -> str:
        return f"Manager '{self.manager_name}' - " + super().full_message()


class LevelOperationError(GameError):
    """An operation on the current level failed."""

    def __init__(self, operation: str, reason: str = "") -> None:
        super().__init__(reason or "Level operation failed", "LevelManager")
        self.operation = operation

    def full_message(self) -> str:
        return f"Level Operation '{self.operation}' - " + super().full_message()


class ObjectCreationError(GameError):
    """A game object could not be built from level data."""

    def __init__(self, object_type: str, reason: str = "") -> None:
        super().__init__(reason or "Failed to create object", "ObjectFactory")
        self.object_type = object_type

    def full_message(self) -> str:
        return f"Object Creation '{self.object_type}' - " + super().full_message()