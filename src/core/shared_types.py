"""
Type definitions used across layers
"""

from enum import StrEnum


# --- Values double as the name fragments of the bundled piece images (ex. "pawn_white.png")


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"
