"""
Game rules as pure functions over a GameState.

Projections read a state and derive what the UI needs (whose turn, has anyone won, the scoreboard).
Transitions never touch the state they receive: they work on their own deep copy and return it,
so nothing returned from a previous read is ever aliased by a later write.
"""

from copy import deepcopy

from src.core.exceptions import GameStateError, InvalidMoveError
from src.core.models import (
    AppConfig,
    CurrentGame,
    GameRecord,
    GameState,
    GameStatus,
    Move,
    Player,
    SquareId,
    Stats,
)
from src.tictactoe.board import find_winner, is_board_full, is_on_board


# --- PROJECTIONS ---
def current_player(moves: list[Move], config: AppConfig) -> Player:
    """
    Player 1 always starts the game. If no moves yet, it is P1's turn.

    Otherwise, check who played last to determine whose turn it is.
    """
    if not moves:
        return config.player1

    last_player = moves[-1].player
    if last_player is None or not last_player.id:
        raise GameStateError("No player found for the last recorded move.")

    return config.player2 if last_player.id == config.player1.id else config.player1


def game_status(moves: list[Move], config: AppConfig) -> GameStatus:
    """Every move must belong to someone before squares can be counted per player."""
    for idx, move in enumerate(moves, start=1):
        if move.player is None or not move.player.id:
            raise GameStateError(f"No player found for move {idx} (square {move.square_id}).")

    winner = find_winner(moves, config.player1, config.player2)
    return GameStatus(
        is_complete=winner is not None or is_board_full(moves), winner=winner
    )


def current_game(state: GameState, config: AppConfig) -> CurrentGame:
    moves = deepcopy(state.current_game_moves)
    return CurrentGame(
        moves=moves,
        current_player=current_player(moves, config),
        status=game_status(moves, config),
    )


def round_stats(state: GameState, config: AppConfig) -> Stats:
    """Tally the games archived in the current round. Games of earlier rounds are not counted."""
    p1_wins = p2_wins = ties = 0
    for record in state.history.current_round_games:
        winner = record.status.winner
        if winner is None:
            ties += 1
        elif winner.id == config.player1.id:
            p1_wins += 1
        elif winner.id == config.player2.id:
            p2_wins += 1
    return Stats(p1_wins=p1_wins, p2_wins=p2_wins, ties=ties)


# --- TRANSITIONS ---
def with_move(state: GameState, config: AppConfig, square_id: SquareId) -> GameState:
    """
    Record a move for the player whose turn it is.

    NOTE: occupied squares and finished games are not rejected. Appending to such a game makes the winner ambiguous.
    """
    if not is_on_board(square_id):
        raise InvalidMoveError(square_id)

    new_state = deepcopy(state)
    player = current_player(new_state.current_game_moves, config)
    new_state.current_game_moves.append(Move(player=player, square_id=square_id))
    return new_state


def with_game_reset(state: GameState, config: AppConfig) -> GameState:
    """
    Clear the board for a new game.

    A complete game is archived into the current round first. An incomplete game is simply dropped.
    """
    new_state = deepcopy(state)
    game = current_game(new_state, config)
    if game.status.is_complete:
        new_state.history.current_round_games.append(
            GameRecord(moves=game.moves, status=game.status)
        )
    new_state.current_game_moves = []
    return new_state


def with_new_round(state: GameState, config: AppConfig) -> GameState:
    """Reset the game, then move the games of this round to the overall history (resets the scoreboard)."""
    new_state = with_game_reset(state, config)
    history = new_state.history
    history.all_games.extend(history.current_round_games)
    history.current_round_games = []
    return new_state
