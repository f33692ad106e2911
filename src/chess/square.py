"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from dataclasses import dataclass

# Only 8x8 boards are rendered, but keep the number in one place
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    """Grid coordinate as it is drawn: row 0 is the top of the image (8th rank), column 0 the left edge (a-file)."""

    row: int
    column: int

    def is_dark(self) -> bool:
        """Checkerboard parity. The top-left square is drawn dark."""
        return (self.row + self.column) % 2 == 0
