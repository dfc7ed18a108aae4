from typing import List, Tuple

from reversi_client.engine.board import CENTER_SQUARES, EMPTY, PLAYER_ONE, PLAYER_TWO, Board

Move = Tuple[int, int]


def valid_moves(board: Board, player: int) -> List[Move]:
    """Return a list of (row, col) tuples for legal moves, in row-major order."""
    moves = []
    for r in range(board.size):
        for c in range(board.size):
            if board.is_legal_move(player, r, c):
                moves.append((r, c))
    return moves


def opening_moves(board: Board) -> List[Move]:
    """Empty centre squares. The server's opening fills these before normal play."""
    return [(r, c) for r, c in CENTER_SQUARES if board.grid[r][c] == EMPTY]


def in_opening(board: Board) -> bool:
    return bool(opening_moves(board))


def legal_moves(board: Board, player: int) -> List[Move]:
    if in_opening(board):
        return opening_moves(board)
    return valid_moves(board, player)


def has_valid_move(board: Board, player: int) -> bool:
    return len(valid_moves(board, player)) > 0


def is_game_over(board: Board) -> bool:
    if in_opening(board):
        return False
    return not has_valid_move(board, PLAYER_ONE) and not has_valid_move(board, PLAYER_TWO)
