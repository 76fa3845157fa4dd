"""
Board module for Reversi.
Handles the game board state, move validation, captures and scoring.
The grid is a fixed 8x8 numpy array of cell values.
"""
from typing import Iterable, List, Optional, Sequence, Tuple
import numpy as np

from .player import Player

# All eight compass steps (row delta, col delta). Legality checks, capture
# tests and flips all walk this same list.
DIRECTIONS: List[Tuple[int, int]] = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


class Board:
    """
    Represents the Reversi game board.
    Each cell holds EMPTY (0) or the value of the Player occupying it.
    """

    # Board dimensions
    SIZE = 8
    BOARD_SIZE = SIZE * SIZE

    # Cell constants
    EMPTY = 0
    BLACK = Player.BLACK
    WHITE = Player.WHITE

    # Symbols accepted by from_rows
    ROW_SYMBOLS = {'.': EMPTY, 'B': Player.BLACK, 'W': Player.WHITE}

    def __init__(self):
        """Initialize a new board in the standard starting position."""
        self._board = np.zeros((self.SIZE, self.SIZE), dtype=int)
        self._board[3, 3] = self.WHITE
        self._board[3, 4] = self.BLACK
        self._board[4, 3] = self.BLACK
        self._board[4, 4] = self.WHITE

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from eight strings of '.', 'B' and 'W'.
        Whitespace inside a row is ignored, so "B . W" and "B.W" are equivalent.

        Raises:
            ValueError: if the layout is not 8x8 or contains an unknown symbol
        """
        if len(rows) != cls.SIZE:
            raise ValueError(f"Expected {cls.SIZE} rows, got {len(rows)}")

        board = cls()
        for r, row in enumerate(rows):
            symbols = ''.join(row.split())
            if len(symbols) != cls.SIZE:
                raise ValueError(f"Row {r} must have {cls.SIZE} cells: {row!r}")
            for c, symbol in enumerate(symbols):
                if symbol not in cls.ROW_SYMBOLS:
                    raise ValueError(f"Invalid cell symbol {symbol!r} in row {r}")
                board._board[r, c] = cls.ROW_SYMBOLS[symbol]
        return board

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board()
        new_board._board = self._board.copy()
        return new_board

    @classmethod
    def in_bounds(cls, row: int, col: int) -> bool:
        return 0 <= row < cls.SIZE and 0 <= col < cls.SIZE

    def get_cell(self, row: int, col: int) -> Optional[Player]:
        """Return the player occupying a cell, or None if it is empty or off the board."""
        if not self.in_bounds(row, col):
            return None
        value = self._board[row, col]
        if value == self.EMPTY:
            return None
        return Player(int(value))

    def is_valid_move(self, row: int, col: int, player: Player) -> bool:
        """
        Check if placing a stone for `player` at (row, col) is legal.

        A move is legal when the cell is on the board, empty, and the new
        stone brackets at least one run of opponent stones in some direction.
        """
        # Check if the position is empty and within bounds
        if not self.in_bounds(row, col) or self._board[row, col] != self.EMPTY:
            return False

        for dr, dc in DIRECTIONS:
            if self._can_flip_in_direction(row, col, dr, dc, player):
                return True
        return False

    def _can_flip_in_direction(self, row: int, col: int, dr: int, dc: int,
                               player: Player) -> bool:
        """
        Walk from (row, col) along (dr, dc) and report whether the walk
        crosses one or more opponent stones and then lands on one of ours.
        """
        r, c = row + dr, col + dc
        count = 0
        while self.in_bounds(r, c):
            cell = self._board[r, c]
            if cell == self.EMPTY:
                return False
            if cell == player:
                return count > 0
            count += 1
            r += dr
            c += dc
        return False

    def _capturing_directions(self, row: int, col: int, player: Player) -> List[Tuple[int, int]]:
        return [(dr, dc) for dr, dc in DIRECTIONS
                if self._can_flip_in_direction(row, col, dr, dc, player)]

    def make_move(self, row: int, col: int, player: Player) -> bool:
        """
        Place a stone for `player` at (row, col) and flip every captured run.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)
            player: The player making the move

        Returns:
            bool: True if the move was valid and made, False otherwise.
            The board is untouched when False is returned.
        """
        if not self.is_valid_move(row, col, player):
            return False

        # Flips never reach back toward the origin, so the directions found
        # here stay valid while the earlier ones are being flipped.
        directions = self._capturing_directions(row, col, player)

        self._board[row, col] = player
        for dr, dc in directions:
            self._flip_in_direction(row, col, dr, dc, player)
        return True

    def _flip_in_direction(self, row: int, col: int, dr: int, dc: int, player: Player) -> None:
        """Flip opponent stones along (dr, dc) until the first stone of `player`."""
        r, c = row + dr, col + dc
        while self.in_bounds(r, c):
            cell = self._board[r, c]
            if cell == player or cell == self.EMPTY:
                return
            self._board[r, c] = player
            r += dr
            c += dc

    def get_flipped_pieces(self, row: int, col: int, player: Player) -> List[Tuple[int, int]]:
        """
        Get the list of stones that a move would flip, without making it.

        Returns:
            List of (row, col) tuples, empty if the move is illegal
        """
        if not self.is_valid_move(row, col, player):
            return []

        flipped = []
        for dr, dc in self._capturing_directions(row, col, player):
            r, c = row + dr, col + dc
            while self._board[r, c] != player:
                flipped.append((r, c))
                r += dr
                c += dc
        return flipped

    def get_valid_moves(self, player: Player) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the given player.

        Returns:
            List of (row, col) tuples in row-major order
        """
        return [(r, c)
                for r in range(self.SIZE)
                for c in range(self.SIZE)
                if self.is_valid_move(r, c, player)]

    def has_valid_move(self, player: Player) -> bool:
        """Check if the player can place a stone anywhere."""
        for r in range(self.SIZE):
            for c in range(self.SIZE):
                if self.is_valid_move(r, c, player):
                    return True
        return False

    def count_stones(self) -> Tuple[int, int]:
        """
        Count the stones of each color.

        Returns:
            Tuple of (black_count, white_count)
        """
        black_count = int(np.count_nonzero(self._board == self.BLACK))
        white_count = int(np.count_nonzero(self._board == self.WHITE))
        return (black_count, white_count)

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self._board != self.EMPTY))

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array of cell values (0 empty, 1 black, 2 white)
        """
        return self._board.copy()

    def render(self, empty_glyph: str = '.',
               hints: Iterable[Tuple[int, int]] = (), hint_glyph: str = '*') -> str:
        """
        Draw the grid with column numbers on top and row numbers on the left.

        Args:
            empty_glyph: Marker for empty cells
            hints: Cells to mark with `hint_glyph` instead of `empty_glyph`
            hint_glyph: Marker for hinted cells
        """
        hinted = set(hints)
        lines = ['  ' + ' '.join(str(c) for c in range(self.SIZE))]
        for r in range(self.SIZE):
            cells = []
            for c in range(self.SIZE):
                player = self.get_cell(r, c)
                if player is not None:
                    cells.append(player.glyph)
                elif (r, c) in hinted:
                    cells.append(hint_glyph)
                else:
                    cells.append(empty_glyph)
            lines.append(f"{r} " + ' '.join(cells))
        return "\n".join(lines)

    def display(self) -> None:
        """Print the board to stdout."""
        print(self.render())

    def __str__(self) -> str:
        return self.render()

    # Boards compare by cell contents; they are mutable, so not hashable
    __hash__ = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._board, other._board))
