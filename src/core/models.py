"""
Boundary layer data model(s).

The store, the pure game logic, and the codec all speak in terms of these objects.
(The wire schema in src/api/models.py decouples the persisted JSON layout from the shapes used in Python code)
"""

from dataclasses import dataclass, field
from typing import Optional, Self

PlayerId = str
SquareId = int


@dataclass(frozen=True)
class Player:
    """Identity supplied by configuration. Never created by the game core."""

    id: PlayerId
    name: str


@dataclass(frozen=True)
class Move:
    player: Player
    square_id: SquareId


@dataclass
class GameStatus:
    """A completed game without a winner is a tie."""

    is_complete: bool
    winner: Optional[Player]


@dataclass
class GameRecord:
    """An archived game. Not touched again after it lands in history."""

    moves: list[Move]
    status: GameStatus


@dataclass
class History:
    current_round_games: list[GameRecord] = field(default_factory=list)
    all_games: list[GameRecord] = field(default_factory=list)


@dataclass
class GameState:
    """The persisted root: the in-progress game plus all archived games."""

    current_game_moves: list[Move] = field(default_factory=list)
    history: History = field(default_factory=History)

    @classmethod
    def empty(cls) -> Self:
        """State used when nothing has been stored yet."""
        return cls()


@dataclass
class CurrentGame:
    """Read projection of the in-progress game."""

    moves: list[Move]
    current_player: Player
    status: GameStatus


@dataclass(frozen=True)
class Stats:
    """Scoreboard of the current round."""

    p1_wins: int = 0
    p2_wins: int = 0
    ties: int = 0


@dataclass(frozen=True)
class AppConfig:
    player1: Player
    player2: Player
