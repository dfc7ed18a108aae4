"""Tests for move enumeration, including the centre-placement opening."""

import random

from conftest import board_with, centre_of
from reversi_client.engine.board import DIRECTIONS, EMPTY, PLAYER_ONE, PLAYER_TWO, Board
from reversi_client.engine.moves import (
    has_valid_move,
    in_opening,
    is_game_over,
    legal_moves,
    opening_moves,
    valid_moves,
)


def _reference_is_legal(board, player, r, c):
    """Straightforward ray walk, kept independent of Board.is_legal_move."""
    if board.grid[r][c] != EMPTY:
        return False
    other = 3 - player
    for dr, dc in DIRECTIONS:
        steps = 1
        while 0 <= r + dr * steps < 8 and 0 <= c + dc * steps < 8:
            cell = board.grid[r + dr * steps][c + dc * steps]
            if cell == other:
                steps += 1
                continue
            if cell == player and steps > 1:
                return True
            break
    return False


def _random_board(rng):
    return Board.from_cells(rng.choice([EMPTY, EMPTY, PLAYER_ONE, PLAYER_TWO]) for _ in range(64))


def test_initial_board_moves_for_player_one() -> None:
    assert valid_moves(Board.initial(), PLAYER_ONE) == [(2, 3), (3, 2), (4, 5), (5, 4)]


def test_initial_board_moves_for_player_two() -> None:
    assert valid_moves(Board.initial(), PLAYER_TWO) == [(2, 4), (3, 5), (4, 2), (5, 3)]


def test_valid_moves_sound_complete_and_ordered() -> None:
    rng = random.Random(1234)
    for _ in range(200):
        board = _random_board(rng)
        for player in (PLAYER_ONE, PLAYER_TWO):
            expected = [
                (r, c) for r in range(8) for c in range(8) if _reference_is_legal(board, player, r, c)
            ]
            moves = valid_moves(board, player)

            assert moves == expected
            assert all(board.is_legal_move(player, r, c) for r, c in moves)


def test_valid_moves_does_not_modify_board() -> None:
    board = Board.initial()
    before = board.clone()

    valid_moves(board, PLAYER_ONE)

    assert board == before


def test_no_moves_when_player_has_no_discs() -> None:
    board = centre_of(PLAYER_TWO)

    assert valid_moves(board, PLAYER_ONE) == []
    assert not has_valid_move(board, PLAYER_ONE)


def test_surrounded_player_has_no_moves() -> None:
    cells = [PLAYER_TWO] * 64
    cells[1] = PLAYER_ONE
    cells[63] = EMPTY
    board = Board.from_cells(cells)

    assert valid_moves(board, PLAYER_ONE) == []
    assert valid_moves(board, PLAYER_TWO) == []
    assert is_game_over(board)


def test_full_board_is_game_over() -> None:
    board = Board.from_cells([PLAYER_ONE] * 32 + [PLAYER_TWO] * 32)

    assert is_game_over(board)


def test_initial_board_is_not_game_over() -> None:
    assert not is_game_over(Board.initial())


class TestOpening:
    def test_empty_board_offers_all_centre_squares(self) -> None:
        board = Board.empty()

        assert in_opening(board)
        assert opening_moves(board) == [(3, 3), (3, 4), (4, 3), (4, 4)]
        assert legal_moves(board, PLAYER_ONE) == [(3, 3), (3, 4), (4, 3), (4, 4)]

    def test_partially_filled_centre(self) -> None:
        board = board_with(r3c3=PLAYER_ONE, r4c4=PLAYER_TWO)

        assert legal_moves(board, PLAYER_TWO) == [(3, 4), (4, 3)]

    def test_filled_centre_uses_capture_rules(self) -> None:
        board = Board.initial()

        assert not in_opening(board)
        assert legal_moves(board, PLAYER_ONE) == valid_moves(board, PLAYER_ONE)

    def test_opening_is_not_game_over(self) -> None:
        assert not is_game_over(Board.empty())
