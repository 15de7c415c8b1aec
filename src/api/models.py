"""Wire models: how a GameState looks once it is written to the byte store."""

from typing import Optional, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from src.core.exceptions import StateDecodeError
from src.core.models import GameRecord, GameState, GameStatus, History, Move, Player


class WireModel(BaseModel):
    """camelCase on the wire (same keys as the browser build kept in local storage), snake_case accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PlayerSchema(WireModel):
    id: str
    name: str

    @classmethod
    def from_player(cls, player: Player) -> Self:
        return cls(id=player.id, name=player.name)

    def to_player(self) -> Player:
        return Player(id=self.id, name=self.name)


class MoveSchema(WireModel):
    # A move without a player is kept as-is here. Reading whose turn it is will flag it as a broken invariant.
    player: Optional[PlayerSchema]
    square_id: int = Field(ge=1, le=9)

    @classmethod
    def from_move(cls, move: Move) -> Self:
        return cls(
            player=PlayerSchema.from_player(move.player) if move.player else None,
            square_id=move.square_id,
        )

    def to_move(self) -> Move:
        return Move(
            player=self.player.to_player() if self.player else None,  # type: ignore[arg-type]
            square_id=self.square_id,
        )


class GameStatusSchema(WireModel):
    is_complete: bool
    winner: Optional[PlayerSchema]

    @classmethod
    def from_status(cls, status: GameStatus) -> Self:
        return cls(
            is_complete=status.is_complete,
            winner=PlayerSchema.from_player(status.winner) if status.winner else None,
        )

    def to_status(self) -> GameStatus:
        return GameStatus(
            is_complete=self.is_complete,
            winner=self.winner.to_player() if self.winner else None,
        )


class GameRecordSchema(WireModel):
    moves: list[MoveSchema]
    status: GameStatusSchema

    @classmethod
    def from_record(cls, record: GameRecord) -> Self:
        return cls(
            moves=[MoveSchema.from_move(move) for move in record.moves],
            status=GameStatusSchema.from_status(record.status),
        )

    def to_record(self) -> GameRecord:
        return GameRecord(
            moves=[move.to_move() for move in self.moves],
            status=self.status.to_status(),
        )


class HistorySchema(WireModel):
    current_round_games: list[GameRecordSchema] = []
    all_games: list[GameRecordSchema] = []


class GameStateSchema(WireModel):
    current_game_moves: list[MoveSchema] = []
    history: HistorySchema = HistorySchema()

    @classmethod
    def from_state(cls, state: GameState) -> Self:
        return cls(
            current_game_moves=[
                MoveSchema.from_move(move) for move in state.current_game_moves
            ],
            history=HistorySchema(
                current_round_games=[
                    GameRecordSchema.from_record(record)
                    for record in state.history.current_round_games
                ],
                all_games=[
                    GameRecordSchema.from_record(record)
                    for record in state.history.all_games
                ],
            ),
        )

    def to_state(self) -> GameState:
        return GameState(
            current_game_moves=[move.to_move() for move in self.current_game_moves],
            history=History(
                current_round_games=[
                    record.to_record() for record in self.history.current_round_games
                ],
                all_games=[record.to_record() for record in self.history.all_games],
            ),
        )


# --- CODEC ---
def encode_state(state: GameState) -> bytes:
    return GameStateSchema.from_state(state).model_dump_json(by_alias=True).encode()


def decode_state(raw: bytes | str) -> GameState:
    """Parse stored bytes back into a GameState. Malformed data is not repaired."""
    try:
        return GameStateSchema.model_validate_json(raw).to_state()
    except ValidationError as e:
        raise StateDecodeError(f"Stored game state cannot be parsed: {e}") from e
