"""
Player module for Reversi.
Defines the two sides of the game and how they are shown in the terminal.
"""
from enum import IntEnum


class Player(IntEnum):
    """
    One of the two sides. The integer values double as the cell
    values stored in the board grid (0 is an empty cell).
    """

    BLACK = 1
    WHITE = 2

    def opponent(self) -> 'Player':
        """Return the other side."""
        return Player(3 - self.value)  # Toggle between BLACK (1) and WHITE (2)

    @property
    def glyph(self) -> str:
        """Marker used when drawing the board: hollow for Black, filled for White."""
        return '○' if self is Player.BLACK else '●'

    @property
    def label(self) -> str:
        return 'Black' if self is Player.BLACK else 'White'

    def __str__(self) -> str:
        return self.glyph

    # IntEnum would otherwise format as the bare integer in f-strings
    def __format__(self, format_spec: str) -> str:
        return format(self.glyph, format_spec)
