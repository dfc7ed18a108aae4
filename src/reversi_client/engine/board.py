from __future__ import annotations

from typing import Iterable, List, Tuple

from reversi_client.errors import IllegalMoveError

EMPTY = 0
PLAYER_ONE = 1
PLAYER_TWO = 2

BOARD_SIZE = 8

DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]

CENTER_SQUARES = [(3, 3), (3, 4), (4, 3), (4, 4)]


def opponent(player: int) -> int:
    return PLAYER_TWO if player == PLAYER_ONE else PLAYER_ONE


class Board:
    """8x8 Reversi grid. Cells hold EMPTY, PLAYER_ONE or PLAYER_TWO."""

    size = BOARD_SIZE

    def __init__(self, grid: List[List[int]] | None = None):
        if grid is None:
            grid = [[EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        self.grid = grid

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def initial(cls) -> "Board":
        """Standard starting position: (3,3)/(4,4) player two, (3,4)/(4,3) player one."""
        board = cls()
        board.grid[3][3] = PLAYER_TWO
        board.grid[4][4] = PLAYER_TWO
        board.grid[3][4] = PLAYER_ONE
        board.grid[4][3] = PLAYER_ONE
        return board

    @classmethod
    def from_cells(cls, cells: Iterable[int]) -> "Board":
        """Build a board from 64 row-major cell values."""
        values = list(cells)
        if len(values) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE * BOARD_SIZE} cells, got {len(values)}")
        for value in values:
            if value not in (EMPTY, PLAYER_ONE, PLAYER_TWO):
                raise ValueError(f"Invalid cell value {value!r}")
        grid = [values[r * BOARD_SIZE:(r + 1) * BOARD_SIZE] for r in range(BOARD_SIZE)]
        return cls(grid)

    def to_cells(self) -> List[int]:
        return [cell for row in self.grid for cell in row]

    def is_on_board(self, r: int, c: int) -> bool:
        return 0 <= r < self.size and 0 <= c < self.size

    def get_piece(self, r: int, c: int) -> int | None:
        if self.is_on_board(r, c):
            return self.grid[r][c]
        return None

    def is_legal_move(self, player: int, r: int, c: int) -> bool:
        if not self.is_on_board(r, c) or self.grid[r][c] != EMPTY:
            return False
        return any(self._captured_in_direction(player, r, c, dr, dc) for dr, dc in DIRECTIONS)

    def apply_move(self, player: int, r: int, c: int) -> "Board":
        """Return a new board with the move played and captured discs flipped."""
        if not self.is_legal_move(player, r, c):
            raise IllegalMoveError(f"Illegal move ({r}, {c}) for player {player}")

        result = self.clone()
        result.grid[r][c] = player
        for dr, dc in DIRECTIONS:
            for fr, fc in self._captured_in_direction(player, r, c, dr, dc):
                result.grid[fr][fc] = player
        return result

    def place_disc(self, player: int, r: int, c: int) -> "Board":
        """Opening placement on an empty centre square. No captures."""
        if (r, c) not in CENTER_SQUARES or self.grid[r][c] != EMPTY:
            raise IllegalMoveError(f"({r}, {c}) is not an open centre square")
        result = self.clone()
        result.grid[r][c] = player
        return result

    def _captured_in_direction(self, player: int, r: int, c: int, dr: int, dc: int) -> List[Tuple[int, int]]:
        # Opponent discs between (r, c) and the next disc of `player` along the ray.
        other = opponent(player)
        pieces_to_flip = []
        nr, nc = r + dr, c + dc
        while self.is_on_board(nr, nc) and self.grid[nr][nc] == other:
            pieces_to_flip.append((nr, nc))
            nr += dr
            nc += dc
        if pieces_to_flip and self.is_on_board(nr, nc) and self.grid[nr][nc] == player:
            return pieces_to_flip
        return []

    def get_score(self):
        scores = {PLAYER_ONE: 0, PLAYER_TWO: 0}
        for row in self.grid:
            for cell in row:
                if cell != EMPTY:
                    scores[cell] += 1
        return scores

    def clone(self) -> "Board":
        return Board([row[:] for row in self.grid])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    def __repr__(self) -> str:
        return f"Board({''.join(str(cell) for cell in self.to_cells())})"

    def __str__(self) -> str:
        symbols = {EMPTY: ".", PLAYER_ONE: "1", PLAYER_TWO: "2"}
        return "\n".join("".join(symbols[cell] for cell in row) for row in self.grid)


def is_legal_move(board: Board, player: int, row: int, col: int) -> bool:
    return board.is_legal_move(player, row, col)


def apply_move(board: Board, player: int, row: int, col: int) -> Board:
    return board.apply_move(player, row, col)


def place_disc(board: Board, player: int, row: int, col: int) -> Board:
    return board.place_disc(player, row, col)
