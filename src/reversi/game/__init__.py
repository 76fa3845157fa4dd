"""
Reversi game module.
This package contains the core game logic for Reversi.
"""

from .player import Player
from .board import Board, DIRECTIONS
from .game import Outcome, ReversiGame, TurnStatus, decide_outcome

__all__ = ['Player', 'Board', 'DIRECTIONS', 'ReversiGame', 'TurnStatus', 'Outcome', 'decide_outcome']
