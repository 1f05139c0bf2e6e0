"""
Exception hierarchy for hexgame.

All custom exceptions inherit from HexGameError so callers can catch them
together. Rejected moves are NOT exceptions: GameState.apply_move reports them
through MoveResult. Exceptions are reserved for configuration mistakes and
caller bugs.
"""

from typing import Any, Optional

__all__ = [
    "HexGameError",
    "ConfigurationError",
    "InvalidMoveError",
    "NoLegalMovesError",
]


class HexGameError(Exception):
    """Base exception for all hexgame errors.

    Attributes:
        message: Human-readable error description
        context: Additional context for debugging
    """

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} ({details})"


class ConfigurationError(HexGameError, ValueError):
    """Evaluator or engine configured with unusable values (e.g. zero weight total)."""


class InvalidMoveError(HexGameError, ValueError):
    """A stone was placed outside the board or on an occupied cell."""


class NoLegalMovesError(HexGameError, ValueError):
    """Search requested on a finished or full position."""
