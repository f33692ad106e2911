"""Defines the kinds of pieces that can occupy a square"""

from enum import Enum, auto
from typing import Optional

from src.core.shared_types import Color, PieceType


class PieceKind(Enum):
    """Whatever occupies a single square: nothing, or one specific piece type/color pair."""

    EMPTY = auto()
    WHITE_PAWN = auto()
    WHITE_KNIGHT = auto()
    WHITE_BISHOP = auto()
    WHITE_ROOK = auto()
    WHITE_QUEEN = auto()
    WHITE_KING = auto()
    BLACK_PAWN = auto()
    BLACK_KNIGHT = auto()
    BLACK_BISHOP = auto()
    BLACK_ROOK = auto()
    BLACK_QUEEN = auto()
    BLACK_KING = auto()

    @property
    def color(self) -> Optional[Color]:
        if self is PieceKind.EMPTY:
            return None
        return Color[self.name.split("_")[0]]

    @property
    def piece_type(self) -> Optional[PieceType]:
        if self is PieceKind.EMPTY:
            return None
        return PieceType[self.name.split("_")[1]]

    def to_fen(self) -> str:
        return PIECE_TO_SYMBOL[self]


# lower case: Black pieces, upper case: White pieces
SYMBOL_TO_PIECE: dict[str, PieceKind] = {
    "P": PieceKind.WHITE_PAWN,
    "N": PieceKind.WHITE_KNIGHT,
    "B": PieceKind.WHITE_BISHOP,
    "R": PieceKind.WHITE_ROOK,
    "Q": PieceKind.WHITE_QUEEN,
    "K": PieceKind.WHITE_KING,
    "p": PieceKind.BLACK_PAWN,
    "n": PieceKind.BLACK_KNIGHT,
    "b": PieceKind.BLACK_BISHOP,
    "r": PieceKind.BLACK_ROOK,
    "q": PieceKind.BLACK_QUEEN,
    "k": PieceKind.BLACK_KING,
}

PIECE_TO_SYMBOL: dict[PieceKind, str] = {
    value: key for key, value in SYMBOL_TO_PIECE.items()
}

# Every kind that has something to draw (and therefore an image in the asset store)
OCCUPIED_KINDS: tuple[PieceKind, ...] = tuple(
    kind for kind in PieceKind if kind is not PieceKind.EMPTY
)
