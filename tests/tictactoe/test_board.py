"""Unit tests for src/tictactoe/board.py"""

from itertools import permutations

import pytest

from src.core.models import Move, Player
from src.tictactoe.board import (
    SQUARE_IDS,
    WINNING_LINES,
    find_winner,
    is_board_full,
    is_on_board,
    occupied_squares,
)


def interleave(
    p1_squares: list[int], p2_squares: list[int], player1: Player, player2: Player
) -> list[Move]:
    """Alternate moves, starting with player 1."""
    moves: list[Move] = []
    for idx in range(max(len(p1_squares), len(p2_squares))):
        if idx < len(p1_squares):
            moves.append(Move(player1, p1_squares[idx]))
        if idx < len(p2_squares):
            moves.append(Move(player2, p2_squares[idx]))
    return moves


def test_board_has_nine_squares() -> None:
    assert SQUARE_IDS == (1, 2, 3, 4, 5, 6, 7, 8, 9)


def test_winning_lines_order() -> None:
    """Rows, then columns, then diagonals."""
    assert [sorted(line) for line in WINNING_LINES] == [
        [1, 2, 3],
        [4, 5, 6],
        [7, 8, 9],
        [1, 4, 7],
        [2, 5, 8],
        [3, 6, 9],
        [1, 5, 9],
        [3, 5, 7],
    ]


@pytest.mark.parametrize("square_id", [1, 5, 9])
def test_squares_on_board(square_id: int) -> None:
    assert is_on_board(square_id)


@pytest.mark.parametrize("square_id", [0, 10, -1, "5", 5.0, None, True])
def test_squares_off_board(square_id: object) -> None:
    assert not is_on_board(square_id)


def test_occupied_squares_matches_on_id(player1: Player) -> None:
    """A renamed player still owns the squares played under the old name."""
    renamed = Player(id=player1.id, name="Someone else")
    moves = [Move(renamed, 4), Move(player1, 7)]
    assert occupied_squares(moves, player1) == {4, 7}


def test_no_winner_on_empty_board(player1: Player, player2: Player) -> None:
    assert find_winner([], player1, player2) is None


@pytest.mark.parametrize("line", [sorted(line) for line in WINNING_LINES])
def test_every_line_wins_for_player1(
    line: list[int], player1: Player, player2: Player
) -> None:
    """Player 2 takes squares that are not on the line (and do not form a line of their own)."""
    others = [sq for sq in SQUARE_IDS if sq not in line][:2]
    moves = interleave(line, others, player1, player2)
    assert find_winner(moves, player1, player2) == player1


@pytest.mark.parametrize("line", [sorted(line) for line in WINNING_LINES])
def test_every_line_wins_for_player2(
    line: list[int], player1: Player, player2: Player
) -> None:
    others = [sq for sq in SQUARE_IDS if sq not in line]
    # pick 3 squares for player 1 that do not form a line
    p1_squares = next(
        list(combo)
        for combo in permutations(others, 3)
        if not any(set(combo) >= winning for winning in WINNING_LINES)
    )
    moves = interleave(p1_squares, line, player1, player2)
    assert find_winner(moves, player1, player2) == player2


@pytest.mark.parametrize("order", list(permutations([1, 2, 3])))
def test_top_row_in_any_order(
    order: tuple[int, ...], player1: Player, player2: Player
) -> None:
    moves = interleave(list(order), [5, 9], player1, player2)
    assert find_winner(moves, player1, player2) == player1


def test_two_squares_do_not_win(player1: Player, player2: Player) -> None:
    moves = interleave([1, 2], [5, 9], player1, player2)
    assert find_winner(moves, player1, player2) is None


def test_full_board_without_line(player1: Player, player2: Player) -> None:
    """
    X | O | X
    X | O | O
    O | X | X
    """
    moves = interleave([1, 3, 4, 8, 9], [2, 5, 6, 7], player1, player2)
    assert is_board_full(moves)
    assert find_winner(moves, player1, player2) is None


def test_moves_of_unknown_players_are_ignored(
    player1: Player, player2: Player
) -> None:
    stranger = Player(id="stranger", name="Mallory")
    moves = [Move(stranger, 1), Move(stranger, 2), Move(stranger, 3)]
    assert find_winner(moves, player1, player2) is None


def test_double_win_goes_to_last_evaluated_line(
    player1: Player, player2: Player
) -> None:
    """
    Only reachable through a corrupted move list.
    Player 1 holds the top row (1st line), player 2 the bottom row (3rd line) --> bottom row is evaluated last.
    """
    moves = interleave([1, 2, 3], [7, 8, 9], player1, player2)
    assert find_winner(moves, player1, player2) == player2

    # Player 2 holds the middle row (2nd line) while player 1 holds the bottom row (3rd line)
    moves = interleave([7, 8, 9], [4, 5, 6], player1, player2)
    assert find_winner(moves, player1, player2) == player1


def test_board_not_full(player1: Player, player2: Player) -> None:
    moves = interleave([1, 2, 3, 4], [5, 6, 7, 8], player1, player2)
    assert not is_board_full(moves)
