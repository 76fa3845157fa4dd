"""
Terminal Reversi.
"""

from .game import Board, Outcome, Player, ReversiGame, TurnStatus

__version__ = '0.1'

__all__ = ['Board', 'Outcome', 'Player', 'ReversiGame', 'TurnStatus']
