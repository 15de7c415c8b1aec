"""
The 3x3 grid and the rule that decides who has won.

Squares are numbered 1-9, starting in the top-left corner and incrementing left-to-right, top-to-bottom:

    1 | 2 | 3
    4 | 5 | 6
    7 | 8 | 9
"""

from typing import Iterable, Optional

from src.core.models import Move, Player, SquareId

BOARD_SIZE = 3
SQUARE_IDS: tuple[SquareId, ...] = tuple(range(1, BOARD_SIZE * BOARD_SIZE + 1))

WINNING_LINES: tuple[frozenset[SquareId], ...] = (
    # rows
    frozenset({1, 2, 3}),
    frozenset({4, 5, 6}),
    frozenset({7, 8, 9}),
    # columns
    frozenset({1, 4, 7}),
    frozenset({2, 5, 8}),
    frozenset({3, 6, 9}),
    # diagonals
    frozenset({1, 5, 9}),
    frozenset({3, 5, 7}),
)


def is_on_board(square_id: object) -> bool:
    # bool is an int subclass, but True is not a square
    return (
        isinstance(square_id, int)
        and not isinstance(square_id, bool)
        and square_id in SQUARE_IDS
    )


def occupied_squares(moves: Iterable[Move], player: Player) -> set[SquareId]:
    """Squares taken by the player. Players are matched on id only (names may change between sessions)."""
    return {move.square_id for move in moves if move.player.id == player.id}


def find_winner(
    moves: list[Move], player1: Player, player2: Player
) -> Optional[Player]:
    """
    A player wins when the squares they occupy cover one of the winning lines.
    ----

    ----
    Lines are checked in the order of WINNING_LINES and every hit overwrites the previous one.
    Under valid play only one player can ever hold a complete line, so the order does not matter.
    It only decides the outcome of a corrupted move list where both players hold a line.
    """
    p1_squares = occupied_squares(moves, player1)
    p2_squares = occupied_squares(moves, player2)

    winner = None
    for line in WINNING_LINES:
        if line <= p1_squares:
            winner = player1
        if line <= p2_squares:
            winner = player2
    return winner


def is_board_full(moves: list[Move]) -> bool:
    return len(moves) == len(SQUARE_IDS)
