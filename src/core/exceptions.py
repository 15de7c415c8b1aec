"""
Exceptions raised across layers.

Everything derives from TicTacToeError so callers can catch the whole family in one place.
"""


class TicTacToeError(Exception):
    """Base class for all errors raised by the game core."""


# --- Domain ---
class GameStateError(TicTacToeError):
    """Stored state breaks an invariant (corrupted or externally tampered)."""


class InvalidMoveError(TicTacToeError):
    """Square id is not one of the nine board squares."""

    def __init__(self, square_id: object) -> None:
        self.square_id = square_id
        super().__init__(f"Square {square_id!r} is not on the board. Pick 1-9.")


# --- Store ---
class InvalidStateUpdateError(TicTacToeError):
    """A save route was called with something other than a GameState / transition function."""


class StateDecodeError(TicTacToeError):
    """Persisted bytes could not be parsed back into a GameState."""


# --- Persistence ---
class RepositoryError(TicTacToeError):
    """The storage adapter failed to read or write."""


# --- Configuration ---
class ConfigurationError(TicTacToeError):
    """Player configuration cannot be used to run a game."""
