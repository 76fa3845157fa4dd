"""
Reversi game module.
Handles turn order, passes, game over and the final result.
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .board import Board
from .player import Player


class TurnStatus(Enum):
    """What the current player has to do when their turn comes up."""
    PLAY = 'play'
    PASS = 'pass'
    GAME_OVER = 'game_over'


class Outcome(Enum):
    BLACK_WINS = 'Black wins!'
    WHITE_WINS = 'White wins!'
    TIE = "It's a tie!"


def decide_outcome(black_count: int, white_count: int) -> Outcome:
    """Compare the two stone counts; exactly one outcome applies."""
    if black_count > white_count:
        return Outcome.BLACK_WINS
    if white_count > black_count:
        return Outcome.WHITE_WINS
    return Outcome.TIE


class ReversiGame:
    """
    Main game class for Reversi that manages the game state and flow.
    Owns the board and decides whose turn it is.
    """

    def __init__(self, board: Optional[Board] = None, first_player: Player = Player.BLACK):
        """
        Initialize a new Reversi game.

        Args:
            board: Starting position (default: the standard opening)
            first_player: Who moves first (Black in a normal game)
        """
        self.board = board if board is not None else Board()
        self.current_player = first_player
        self.game_over = False
        self.outcome: Optional[Outcome] = None
        self.move_history: List[Dict[str, Any]] = []
        self.passes = 0

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.board = Board()
        self.current_player = Player.BLACK
        self.game_over = False
        self.outcome = None
        self.move_history = []
        self.passes = 0

    def make_move(self, row: int, col: int) -> bool:
        """
        Make a move for the current player.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            bool: True if the move was valid and made, False otherwise
        """
        if self.game_over:
            return False

        player = self.current_player
        flipped = self.board.get_flipped_pieces(row, col, player)
        if not self.board.make_move(row, col, player):
            return False

        self.move_history.append({
            'player': player,
            'move': (row, col),
            'flipped': flipped,
        })
        self.current_player = player.opponent()
        return True

    def resolve_turn(self) -> TurnStatus:
        """
        Work out whether the current player can move.

        If they cannot but the opponent can, the turn is passed to the
        opponent. If neither can, the game ends and the outcome is fixed.
        """
        if self.game_over:
            return TurnStatus.GAME_OVER

        if self.board.has_valid_move(self.current_player):
            return TurnStatus.PLAY

        if not self.board.has_valid_move(self.current_player.opponent()):
            self.game_over = True
            self.outcome = decide_outcome(*self.board.count_stones())
            return TurnStatus.GAME_OVER

        self.move_history.append({
            'player': self.current_player,
            'move': None,
            'flipped': [],
        })
        self.passes += 1
        self.current_player = self.current_player.opponent()
        return TurnStatus.PASS

    def is_game_over(self) -> bool:
        return self.game_over

    def get_outcome(self) -> Optional[Outcome]:
        """
        Get the result of the game.

        Returns:
            The Outcome, or None if the game is not over
        """
        return self.outcome if self.game_over else None

    def get_valid_moves(self) -> List[Tuple[int, int]]:
        """Get all valid moves for the current player."""
        return self.board.get_valid_moves(self.current_player)

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return self.board.count_stones()

    def get_current_player(self) -> Player:
        return self.current_player

    def get_move_history(self) -> List[Dict[str, Any]]:
        """
        Get the move history.

        Returns:
            List of dictionaries with the player, the move ((row, col), or
            None for a pass) and the stones it flipped
        """
        return self.move_history.copy()

    def copy(self) -> 'ReversiGame':
        """Create a deep copy of the game."""
        new_game = ReversiGame(self.board.copy(), self.current_player)
        new_game.game_over = self.game_over
        new_game.outcome = self.outcome
        new_game.move_history = [dict(entry, flipped=list(entry['flipped']))
                                 for entry in self.move_history]
        new_game.passes = self.passes
        return new_game

    def __str__(self) -> str:
        """String representation of the game state."""
        black, white = self.get_score()
        lines = [str(self.board), f"Black ({Player.BLACK}): {black}, White ({Player.WHITE}): {white}"]
        if self.game_over:
            lines.append(f"Game over! {self.outcome.value}")
        else:
            lines.append(f"Current player: {self.current_player} ({self.current_player.label}'s turn)")
        return "\n".join(lines)
